"""Scope timer that reports elapsed time in human-readable units."""

from __future__ import annotations

import functools
import logging
import sys
import time
from datetime import datetime
from typing import Any, Callable, Optional, TextIO, TypeVar, Union, cast

from .utils import HumanReadableDuration, human_readable_time

logger = logging.getLogger(__name__)
F = TypeVar("F", bound=Callable[..., Any])


class Timer:
    """
    Keeps time from its creation (or ``restart``) until ``stop``.

    Used as a context manager it times the enclosed block and stops on
    exit unless it was already stopped explicitly.

    Example:
        with Timer():
            run_simulation()
    """

    def __init__(self, name: Optional[str] = None,
                 file: Optional[TextIO] = None,
                 clock: Callable[[], int] = time.perf_counter_ns,
                 wall_clock: Callable[[], datetime] = datetime.now):
        """
        Start the timer.

        Args:
            name: Optional label, used in debug logging
            file: Stream for the report (None for the current ``sys.stdout``)
            clock: Monotonic nanosecond clock
            wall_clock: Source of the completion time shown in the report
        """
        self.name = name
        self.file = file
        self._clock = clock
        self._wall_clock = wall_clock
        self.start_ns: int = clock()
        self.stopped = False
        self.result: Optional[HumanReadableDuration] = None

    def restart(self) -> None:
        """Reset the start timestamp without changing the running state."""
        self.start_ns = self._clock()
        logger.debug("Timer %s restarted", self.name or hex(id(self)))

    def elapsed_ns(self) -> int:
        return self._clock() - self.start_ns

    def stop(self) -> HumanReadableDuration:
        """
        Measure the elapsed time and write the report.

        A second call does not measure again; it returns the first result
        and writes nothing.

        Returns:
            HumanReadableDuration of the elapsed time
        """
        if self.result is not None:
            logger.debug("Timer %s already stopped", self.name or hex(id(self)))
            return self.result

        hrt = human_readable_time(max(self.elapsed_ns(), 0))
        finished = self._wall_clock()

        stream = self.file if self.file is not None else sys.stdout
        stream.write(
            f"finished computation at {finished.ctime()}\n"
            f"elapsed time: {hrt}\n"
        )
        self.stopped = True
        self.result = hrt
        logger.debug("Timer %s stopped after %d ns", self.name or hex(id(self)),
                     hrt.raw_nanoseconds)
        return hrt

    def __enter__(self) -> "Timer":
        self.restart()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if not self.stopped:
            self.stop()

    def __repr__(self) -> str:
        state = "stopped" if self.stopped else "running"
        return f"Timer(name={self.name!r}, {state})"


def timed(func: Optional[F] = None, *,
          name: Optional[str] = None,
          file: Optional[TextIO] = None) -> Union[Callable[[F], F], F]:
    """
    Decorator to time each call of a function.

    Can be used as @timed or @timed(name="custom_name")

    Args:
        func: Function to time (when used as @timed)
        name: Custom name for the timed function
        file: Stream for the report (None for the current ``sys.stdout``)

    Returns:
        Decorated function
    """
    def decorator(f: F) -> F:
        timer_name = name if name is not None else getattr(f, '__name__', 'unknown_function')

        @functools.wraps(f)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with Timer(name=timer_name, file=file):
                return f(*args, **kwargs)

        setattr(wrapper, "_timer_name", timer_name)
        return cast(F, wrapper)

    if func is None:
        return decorator
    else:
        return decorator(func)
