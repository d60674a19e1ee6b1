"""Code Utils - Python-style printing, scope timing and a deterministic RNG."""

__version__ = "0.1.0"
__author__ = "Code Utils Team"

from .capabilities import (
    Capability,
    NotPrintableError,
    classify,
    is_container,
    is_directly_renderable,
    is_printable,
)
from .printing import EmptyContainerError, PrintConfig, Printer, echo, log, log_named, print, render
from .utils import HumanReadableDuration, convert_duration, format_duration, human_readable_time
from .timer import Timer, timed
from .rng import RandomNumberEngine, UniformRandomBitGenerator, XorShift32, is_random_engine

__all__ = [
    "Capability",
    "NotPrintableError",
    "classify",
    "is_container",
    "is_directly_renderable",
    "is_printable",
    "EmptyContainerError",
    "PrintConfig",
    "Printer",
    "print",
    "render",
    "log",
    "log_named",
    "echo",
    "HumanReadableDuration",
    "human_readable_time",
    "format_duration",
    "convert_duration",
    "Timer",
    "timed",
    "XorShift32",
    "UniformRandomBitGenerator",
    "RandomNumberEngine",
    "is_random_engine",
]
