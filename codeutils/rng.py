"""Deterministic 32-bit xorshift generator and the random engine protocols."""

from __future__ import annotations

import logging
import operator
from typing import Any, Optional, Protocol, TextIO, runtime_checkable

import numpy as np

logger = logging.getLogger(__name__)

UINT32_MAX = 0xFFFFFFFF
DEFAULT_SEED = 12


@runtime_checkable
class UniformRandomBitGenerator(Protocol):
    """Callable producing unsigned integers uniformly within ``[min(), max()]``."""

    def __call__(self) -> int: ...

    def min(self) -> int: ...

    def max(self) -> int: ...


@runtime_checkable
class RandomNumberEngine(UniformRandomBitGenerator, Protocol):
    """Reseedable bit generator with a textual state representation."""

    def seed(self, value: Optional[int] = None) -> None: ...

    def discard(self, n: int) -> None: ...

    def write(self, stream: TextIO) -> None: ...

    def read(self, stream: TextIO) -> None: ...


def is_random_engine(obj: Any) -> bool:
    """Check that ``obj`` satisfies the :class:`RandomNumberEngine` contract."""
    if not isinstance(obj, RandomNumberEngine):
        return False
    engine_type = type(obj)
    # Engines compare by state and must be default-constructible.
    if engine_type.__eq__ is object.__eq__:
        return False
    try:
        engine_type()
    except TypeError:
        return False
    return obj.min() < obj.max()


def _validate_seed(value: int) -> int:
    state = operator.index(value)
    if not 0 <= state <= UINT32_MAX:
        raise ValueError(f"Seed must be within [0, {UINT32_MAX}], got {state}")
    return state


class XorShift32:
    """
    Marsaglia's 32-bit xorshift generator ("xor" from p. 4 of "Xorshift RNGs").

    The state must be non-zero: a zero state maps to itself and the
    generator then yields zeros forever.

    Example:
        rng = XorShift32(2463534242)
        rng()  # 723471715
    """

    def __init__(self, seed: int = DEFAULT_SEED):
        self._state = _validate_seed(seed)

    @property
    def state(self) -> int:
        return self._state

    def next(self) -> int:
        """Advance the state by one xorshift step and return it."""
        x = self._state
        x ^= (x << 13) & UINT32_MAX
        x ^= x >> 17
        x ^= (x << 5) & UINT32_MAX
        self._state = x
        return x

    __call__ = next

    def __iter__(self) -> "XorShift32":
        return self

    def __next__(self) -> int:
        return self.next()

    def discard(self, n: int) -> None:
        """Advance the state ``n`` times, dropping the results."""
        for _ in range(operator.index(n)):
            self.next()

    def seed(self, value: Optional[int] = None) -> None:
        """Reset the state to ``value``, or to the default seed when omitted."""
        self._state = _validate_seed(DEFAULT_SEED if value is None else value)
        logger.debug("Reseeded XorShift32 with %d", self._state)

    @staticmethod
    def min() -> int:
        return 0

    @staticmethod
    def max() -> int:
        return UINT32_MAX

    def random_raw(self, size: int) -> np.ndarray:
        """
        Draw the next ``size`` outputs.

        Args:
            size: Number of values to generate

        Returns:
            numpy array of dtype uint32
        """
        out = np.empty(operator.index(size), dtype=np.uint32)
        for i in range(out.shape[0]):
            out[i] = self.next()
        return out

    def write(self, stream: TextIO) -> None:
        """Write the state as a decimal integer."""
        stream.write(str(self._state))

    def read(self, stream: TextIO) -> None:
        """
        Read a whitespace-delimited decimal integer from ``stream`` into the state.

        Leading whitespace is skipped and reading stops at the first
        whitespace character after the number.
        """
        token = []
        while True:
            char = stream.read(1)
            if not char:
                break
            if char.isspace():
                if token:
                    break
                continue
            token.append(char)
        self._state = self._parse("".join(token))

    @staticmethod
    def _parse(text: str) -> int:
        if not text.isdigit():
            raise ValueError(f"Expected a decimal XorShift32 state, got {text!r}")
        return _validate_seed(int(text))

    @classmethod
    def from_string(cls, text: str) -> "XorShift32":
        """Build a generator from its decimal text form."""
        return cls(cls._parse(text.strip()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, XorShift32):
            return NotImplemented
        return self._state == other._state

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return str(self._state)

    def __repr__(self) -> str:
        return f"XorShift32(seed={self._state})"
