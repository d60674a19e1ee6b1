"""Python-``print``-like output for scalars and flat containers."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Sequence, TextIO, Tuple

import numpy as np

from .capabilities import Capability, NotPrintableError, check_printable, classify

logger = logging.getLogger(__name__)

# Module switches for the gated helpers below, read at call time.
LOGGING_ON: bool = False
PRINTING_ON: bool = True

DEFAULT_SEP = " "
DEFAULT_END = "\n"
CONTAINER_OPEN = "{"
CONTAINER_CLOSE = "}"
ELEMENT_SEP = ", "


class EmptyContainerError(ValueError):
    """Raised when an empty container is passed to the print engine."""


@dataclass(frozen=True)
class PrintConfig:
    """Separator between sibling arguments and terminator after the last one."""
    sep: str = DEFAULT_SEP
    end: str = DEFAULT_END

    def __post_init__(self) -> None:
        if not isinstance(self.sep, str):
            raise TypeError(f"sep must be None or a string, not {type(self.sep).__name__}")
        if not isinstance(self.end, str):
            raise TypeError(f"end must be None or a string, not {type(self.end).__name__}")

    @classmethod
    def resolve(cls, sep: Optional[str] = None, end: Optional[str] = None) -> "PrintConfig":
        """Build a config, treating ``None`` as the default like builtin ``print``."""
        return cls(
            sep=DEFAULT_SEP if sep is None else sep,
            end=DEFAULT_END if end is None else end,
        )


def _container_elements(container: Any) -> List[Any]:
    elements = list(container)
    if not elements:
        logger.debug("Rejected empty %s", type(container).__qualname__)
        raise EmptyContainerError(
            f"Cannot print an empty {type(container).__qualname__}: "
            "containers must hold at least one element"
        )
    for element in elements:
        # Nested containers are not supported, elements must render directly.
        if classify(type(element)) is not Capability.DIRECT:
            logger.debug("Rejected %s element in %s", type(element).__qualname__,
                         type(container).__qualname__)
            raise NotPrintableError(
                f"Element of type {type(element).__qualname__!r} in "
                f"{type(container).__qualname__} is not directly printable; "
                "containers of containers are not supported"
            )
    return elements


def _prepare(args: Sequence[Any]) -> List[Tuple[Capability, Any]]:
    """Classify every argument up front so nothing is written on rejection."""
    prepared = []
    for arg in args:
        capability = check_printable(arg)
        if isinstance(arg, np.ndarray) and arg.ndim == 0:
            # 0-d arrays hold a single scalar and cannot be iterated.
            prepared.append((Capability.DIRECT, arg.item()))
        elif capability is Capability.CONTAINER:
            prepared.append((capability, _container_elements(arg)))
        else:
            prepared.append((capability, arg))
    return prepared


def _render_container(elements: List[Any]) -> Iterator[str]:
    yield CONTAINER_OPEN
    last = len(elements) - 1
    for index, element in enumerate(elements):
        yield str(element)
        yield CONTAINER_CLOSE if index == last else ELEMENT_SEP


def _render_one(capability: Capability, value: Any) -> Iterator[str]:
    if capability is Capability.CONTAINER:
        yield from _render_container(value)
    else:
        yield str(value)


def _render_rest(prepared: List[Tuple[Capability, Any]], config: PrintConfig) -> Iterator[str]:
    # Head first, then the rest with the same separator; end after the last.
    for position, (capability, value) in enumerate(prepared):
        if position:
            yield config.sep
        yield from _render_one(capability, value)
    yield config.end


def render(*args: Any, sep: Optional[str] = None, end: Optional[str] = None) -> str:
    """
    Render arguments exactly as :func:`print` would write them.

    Args:
        *args: Scalars or flat, non-empty containers
        sep: Separator between arguments (default a single space)
        end: Terminator after the last argument (default newline)

    Returns:
        The rendered text, terminator included

    Raises:
        NotPrintableError: If an argument or container element is not printable
        EmptyContainerError: If a container argument is empty
    """
    config = PrintConfig.resolve(sep, end)
    return "".join(_render_rest(_prepare(args), config))


def print(*args: Any,
          sep: Optional[str] = None,
          end: Optional[str] = None,
          file: Optional[TextIO] = None,
          flush: bool = False) -> None:
    """
    Print scalars and containers, similar to Python's builtin ``print``.

    Containers are written as ``{e0, e1, ..., en}``. All arguments are
    validated before anything is written.

    Example:
        >>> print("bla", 42, [1, 2, 3])
        bla 42 {1, 2, 3}

    Note:
        Containers of containers are not supported and are rejected.
        Empty containers raise :class:`EmptyContainerError`.
    """
    text = render(*args, sep=sep, end=end)
    stream = file if file is not None else sys.stdout
    stream.write(text)
    if flush:
        stream.flush()


class Printer:
    """Print function bound to a fixed :class:`PrintConfig`."""

    def __init__(self, config: Optional[PrintConfig] = None, file: Optional[TextIO] = None):
        self.config = config or PrintConfig()
        self.file = file

    def __call__(self, *args: Any, flush: bool = False) -> None:
        print(*args, sep=self.config.sep, end=self.config.end, file=self.file, flush=flush)

    def render(self, *args: Any) -> str:
        return render(*args, sep=self.config.sep, end=self.config.end)

    def __repr__(self) -> str:
        return f"Printer(sep={self.config.sep!r}, end={self.config.end!r})"


def log(*args: Any, **kwargs: Any) -> None:
    """Print only while ``LOGGING_ON`` is set."""
    if not LOGGING_ON:
        return
    print(*args, **kwargs)


def log_named(name: str, value: Any, file: Optional[TextIO] = None) -> None:
    """Print ``name: value`` only while ``LOGGING_ON`` is set."""
    if not LOGGING_ON:
        return
    text = render(value)
    stream = file if file is not None else sys.stdout
    stream.write(f"{name}: {text}")


def echo(*args: Any, **kwargs: Any) -> None:
    """Print only while ``PRINTING_ON`` is set."""
    if not PRINTING_ON:
        return
    print(*args, **kwargs)
