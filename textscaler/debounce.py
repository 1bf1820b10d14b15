#
# Copyright (C) 2026 TextScaler Developers — LGPL-3.0-or-later
#
"""
Debounced applier

Coalesces a burst of value changes into a single downstream apply.
The first request after quiescence opens a window; requests inside the
window only replace the payload. When the window closes the most recent
payload is applied once. The deadline is never pushed back, so a steady
stream of requests still applies once per window.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from .errors import ConfigurationError
from .log import LOG_TRACE, Log
from .scheduler import Scheduler


class ApplierState(Enum):
    """Lifecycle of the pending apply."""

    IDLE = "idle"
    SCHEDULED = "scheduled"


class DebouncedApplier:
    """
    Single-shot, non-resetting debouncer.

    :param apply: Called with the latest payload when the window closes
    :param scheduler: Timer source (GLib or asyncio)
    :param window: Quiescence window in seconds
    """

    def __init__(self, apply: Callable[[Any], None], scheduler: Scheduler, window: float = 0.6):
        if window < 0:
            raise ConfigurationError(f"Debounce window must not be negative ({window})")

        self._apply = apply
        self._scheduler = scheduler
        self._window = window
        self._handle = None
        self._pending = None
        self._state = ApplierState.IDLE
        self._logger = Log.get("textscaler.debounce")

    @property
    def state(self) -> ApplierState:
        return self._state

    @property
    def pending(self):
        """Payload of the scheduled apply, None when idle."""
        return self._pending

    @property
    def window(self) -> float:
        return self._window

    def request_apply(self, value):
        """
        Ask for `value` to be applied.

        Opens a window when idle, otherwise supersedes the
        pending payload without touching the deadline.
        """
        self._pending = value

        if self._state is ApplierState.IDLE:
            self._handle = self._scheduler.call_later(self._window, self._fire)
            self._state = ApplierState.SCHEDULED
            self._logger.log(LOG_TRACE, "Apply scheduled in %.3fs", self._window)

    def cancel(self) -> bool:
        """
        Drop the pending apply, if any.

        :return: True if an apply was pending
        """
        if self._state is not ApplierState.SCHEDULED:
            return False

        self._scheduler.cancel(self._handle)
        self._reset()
        self._logger.log(LOG_TRACE, "Pending apply cancelled")
        return True

    def flush(self) -> bool:
        """
        Apply the pending payload now instead of waiting for the window.

        :return: True if something was applied
        """
        if self._state is not ApplierState.SCHEDULED:
            return False

        self._scheduler.cancel(self._handle)
        self._fire()
        return True

    def _reset(self):
        self._handle = None
        self._pending = None
        self._state = ApplierState.IDLE

    def _fire(self):
        # State is cleared before applying so the apply
        # callback itself may open a new window.
        value = self._pending
        self._reset()
        self._apply(value)
