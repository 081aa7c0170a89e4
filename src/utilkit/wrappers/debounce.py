"""Debounce: collapse a burst of calls into one delayed call.

A :class:`Debounce` owns at most one pending timer. Every call cancels the
pending timer (if any) and schedules a new one, so the wrapped function runs
once, `delay` seconds after the last call of a burst, with that call's
arguments.

Timers come from a factory (``threading.Timer`` by default) so tests can
substitute a fake that fires on demand.
"""

from __future__ import annotations

import functools
import logging
import threading
import types
from collections.abc import Callable
from typing import Any, Generic, Protocol, TypeVar

from utilkit import config
from utilkit.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

R = TypeVar("R")

# pylint: disable=too-few-public-methods


class Timer(Protocol):
    """The subset of ``threading.Timer`` that Debounce relies on."""

    def start(self) -> None:
        """Begin counting down."""

    def cancel(self) -> None:
        """Stop the timer if it has not fired yet."""


TimerFactory = Callable[[float, Callable[[], None]], Timer]


def _thread_timer(delay: float, callback: Callable[[], None]) -> Timer:
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    return timer


class Debounce(Generic[R]):
    """Wrap `fn` so rapid repeated calls collapse into one delayed call.

    Args:
        fn: The function to debounce. Its return value is discarded.
        delay: Seconds to wait after the latest call before invoking `fn`.
            Defaults to the configured debounce delay
            (see :func:`utilkit.config.get_debounce_delay`).
        timer_factory: Callable ``(delay, callback) -> Timer``.

    Raises:
        InvalidArgumentError: If `delay` is negative.

    Note:
        Used as a class attribute, the wrapper binds like a method so `fn`
        receives the instance of the latest call as `self`. The pending timer
        is shared by all instances of the class.
    """

    def __init__(
        self,
        fn: Callable[..., R],
        delay: float | None = None,
        *,
        timer_factory: TimerFactory = _thread_timer,
    ) -> None:
        if delay is None:
            delay = config.get_debounce_delay()
        if delay < 0:
            raise InvalidArgumentError("delay", delay, "must not be negative")
        self.fn = fn
        self.delay = delay
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer: Timer | None = None
        self._pending: tuple[tuple[Any, ...], dict[str, Any]] | None = None
        self._generation = 0
        functools.update_wrapper(self, fn)

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        """Schedule `fn(*args, **kwargs)` to run after `delay`, replacing any pending call."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                logger.debug("Cancelled pending call to %s", self._name)
            self._generation += 1
            generation = self._generation
            self._pending = (args, kwargs)
            self._timer = self._timer_factory(
                self.delay, functools.partial(self._fire, generation)
            )
            self._timer.start()

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return types.MethodType(self, obj)

    @property
    def pending(self) -> bool:
        """True while a call is scheduled but has not run yet."""
        with self._lock:
            return self._pending is not None

    def cancel(self) -> bool:
        """Drop the pending call, if any.

        Returns:
            bool: True if a pending call was cancelled.
        """
        with self._lock:
            return self._take_pending() is not None

    def flush(self) -> bool:
        """Run the pending call now instead of waiting for the timer.

        Unlike a timer-driven call, errors raised by `fn` propagate to the caller.

        Returns:
            bool: True if a pending call was run.
        """
        with self._lock:
            pending = self._take_pending()
        if pending is None:
            return False
        args, kwargs = pending
        logger.debug("Flushing debounced %s", self._name)
        self.fn(*args, **kwargs)
        return True

    @property
    def _name(self) -> str:
        return getattr(self.fn, "__qualname__", repr(self.fn))

    def _take_pending(self) -> tuple[tuple[Any, ...], dict[str, Any]] | None:
        # caller must hold self._lock
        if self._timer is not None:
            self._timer.cancel()
        self._timer = None
        pending, self._pending = self._pending, None
        return pending

    def _fire(self, generation: int) -> None:
        with self._lock:
            # a newer call replaced this timer after it had already started firing
            if generation != self._generation or self._pending is None:
                return
            self._timer = None
            pending, self._pending = self._pending, None
        args, kwargs = pending
        logger.debug("Invoking debounced %s", self._name)
        # runs on the timer thread, where no caller can catch the error
        try:
            self.fn(*args, **kwargs)
        except Exception:  # pylint: disable=broad-except
            logger.exception("Debounced call to %s failed", self._name)


def debounce(
    delay: float | None = None, *, timer_factory: TimerFactory = _thread_timer
) -> Callable[[Callable[..., R]], Debounce[R]]:
    """Decorator form of :class:`Debounce`.

    Example:
        ```py
        @debounce(0.5)
        def save(document): ...
        ```
    """

    def decorator(fn: Callable[..., R]) -> Debounce[R]:
        return Debounce(fn, delay, timer_factory=timer_factory)

    return decorator
