"""Human-readable durations."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple, Union

NS_PER_US = 1_000
NS_PER_MS = 1_000_000
NS_PER_S = 1_000_000_000
NS_PER_M = 60 * NS_PER_S
NS_PER_H = 60 * NS_PER_M

# (upper bound, coarse unit, coarse divisor, fine unit, fine divisor); first match wins.
_LADDER: List[Tuple[int, str, int, str, int]] = [
    (NS_PER_US, "ns", 1, "", 0),
    (NS_PER_MS, "µs", NS_PER_US, "", 0),
    (NS_PER_S, "ms", NS_PER_MS, "µs", NS_PER_US),
    (NS_PER_M, "s", NS_PER_S, "ms", NS_PER_MS),
    (NS_PER_H, "m", NS_PER_M, "s", NS_PER_S),
]
_LAST_RUNG: Tuple[str, int, str, int] = ("h", NS_PER_H, "m", NS_PER_M)

DURATION_UNITS: Dict[str, int] = {
    "ns": 1,
    "µs": NS_PER_US,
    "us": NS_PER_US,
    "ms": NS_PER_MS,
    "s": NS_PER_S,
    "m": NS_PER_M,
    "h": NS_PER_H,
}


@dataclass(frozen=True)
class HumanReadableDuration:
    """An elapsed time expressed in a coarse unit and a finer secondary unit."""
    coarse_unit: str
    fine_unit: str
    coarse_value: int
    fine_value: int
    raw_nanoseconds: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert duration to dictionary."""
        return {
            'coarse_unit': self.coarse_unit,
            'fine_unit': self.fine_unit,
            'coarse_value': self.coarse_value,
            'fine_value': self.fine_value,
            'raw_nanoseconds': self.raw_nanoseconds,
        }

    def __str__(self) -> str:
        fine = f"{self.fine_value} {self.fine_unit}" if self.fine_unit else f"{self.fine_value}"
        return f"{self.coarse_value} {self.coarse_unit} ({fine})"


def human_readable_time(nanoseconds: int) -> HumanReadableDuration:
    """
    Pick display units for an elapsed time.

    The coarse unit is the largest unit the duration reaches; the fine unit
    is the next smaller one and is only reported from milliseconds upwards.
    Both values are whole-unit totals, e.g. 3.45 s gives ``3 s (3450 ms)``.

    Args:
        nanoseconds: Elapsed time in nanoseconds

    Returns:
        HumanReadableDuration for the given elapsed time
    """
    raw = operator.index(nanoseconds)
    if raw < 0:
        raise ValueError(f"Duration must be non-negative, got {raw} ns")

    for bound, unit, divisor, unit_fine, divisor_fine in _LADDER:
        if raw < bound:
            break
    else:
        unit, divisor, unit_fine, divisor_fine = _LAST_RUNG

    return HumanReadableDuration(
        coarse_unit=unit,
        fine_unit=unit_fine,
        coarse_value=raw // divisor,
        fine_value=raw // divisor_fine if divisor_fine else 0,
        raw_nanoseconds=raw,
    )


def format_duration(nanoseconds: int) -> str:
    """
    Format nanoseconds into human-readable format.

    Args:
        nanoseconds: Elapsed time in nanoseconds

    Returns:
        Formatted string (e.g., "3 s (3450 ms)")
    """
    return str(human_readable_time(nanoseconds))


def convert_duration(value: Union[int, float], from_unit: str, to_unit: str) -> float:
    """
    Convert between different duration units.

    Args:
        value: Value to convert
        from_unit: Source unit (ns, µs/us, ms, s, m, h)
        to_unit: Target unit (ns, µs/us, ms, s, m, h)

    Returns:
        Converted value
    """
    if from_unit not in DURATION_UNITS or to_unit not in DURATION_UNITS:
        raise ValueError(f"Invalid unit. Must be one of: {list(DURATION_UNITS.keys())}")

    nanoseconds = value * DURATION_UNITS[from_unit]
    return nanoseconds / DURATION_UNITS[to_unit]
