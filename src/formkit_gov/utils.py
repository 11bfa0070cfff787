"""Helpers for form handling code."""

from __future__ import annotations

import copy
import threading
from collections.abc import Callable, Mapping, Sized
from functools import update_wrapper
from typing import Any, Generic, ParamSpec, TypeVar

from formkit_gov.processing.normalization import format_file_size

P = ParamSpec("P")
T = TypeVar("T")

__all__ = [
    "Debounced",
    "create_error_messages",
    "debounce",
    "deep_clone",
    "format_file_size",
    "is_empty",
    "remove_empty_values",
]

_ERROR_MESSAGES = {
    "required": "This field is required",
    "invalidEmail": "Enter a valid email address",
    "invalidPhone": "Enter a valid 10-digit phone number",
    "invalidSSN": "Enter a valid Social Security number",
    "invalidDate": "Enter a valid date",
    "invalidZip": "Enter a valid ZIP code",
    "invalidCurrency": "Enter a valid dollar amount",
    "fileTooLarge": "File is too large",
    "invalidFileType": "File type is not allowed",
}


def create_error_messages(overrides: Mapping[str, str] | None = None) -> dict[str, str]:
    """Return the default form error messages updated with `overrides`."""
    return {**_ERROR_MESSAGES, **(overrides or {})}


def deep_clone(value: T) -> T:
    """Return a deep copy of `value`."""
    return copy.deepcopy(value)


def is_empty(value: Any) -> bool:
    """Return whether `value` is None, a blank string or an empty collection."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def remove_empty_values(values: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of `values` without entries for which `is_empty` holds."""
    return {key: value for key, value in values.items() if not is_empty(value)}


class Debounced(Generic[P]):
    """Trailing-edge debounced callable.

    Each call restarts the timer; the wrapped function only runs with the
    arguments of the last call once `delay` seconds pass without a new call.
    """

    def __init__(self, func: Callable[P, Any], delay: float) -> None:
        self._func = func
        self._delay = delay
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._pending: tuple[tuple[Any, ...], dict[str, Any]] | None = None
        self._generation = 0
        update_wrapper(self, func)

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._pending = (args, kwargs)
            self._generation += 1
            self._timer = threading.Timer(self._delay, self._fire, args=(self._generation,))
            self._timer.daemon = True
            self._timer.start()

    @property
    def pending(self) -> bool:
        """Return whether a call is waiting to run."""
        return self._pending is not None

    def cancel(self) -> None:
        """Drop the waiting call, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._pending = None

    def flush(self) -> None:
        """Run the waiting call now instead of at the end of the delay."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            pending, self._pending = self._pending, None
        if pending is not None:
            args, kwargs = pending
            self._func(*args, **kwargs)

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._timer = None
            pending, self._pending = self._pending, None
        if pending is not None:
            args, kwargs = pending
            self._func(*args, **kwargs)


def debounce(delay: float) -> Callable[[Callable[P, Any]], Debounced[P]]:
    """Decorate a function so that bursts of calls collapse into the last one.

    Args:
        delay (float): Quiet period in seconds.

    Returns:
        Callable: Decorator producing a `Debounced` wrapper.
    """

    def decorator(func: Callable[P, Any]) -> Debounced[P]:
        return Debounced(func, delay)

    return decorator
