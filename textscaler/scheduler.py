#
# Copyright (C) 2026 TextScaler Developers — LGPL-3.0-or-later
#
"""One-shot timers for the main loop that drives the controller."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any, Protocol


class Scheduler(Protocol):
    """
    Minimal one-shot timer interface.

    Implementations run the callback once on the caller's loop after
    at least `delay` seconds, unless the handle is cancelled first.
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> Any: ...

    def cancel(self, handle: Any) -> None: ...


class GLibScheduler:
    """Timers on the default GLib main context."""

    def __init__(self):
        from gi.repository import GLib  # noqa: PLC0415

        self._glib = GLib

    def call_later(self, delay: float, callback: Callable[[], None]) -> int:
        def _run():
            callback()
            return self._glib.SOURCE_REMOVE

        return self._glib.timeout_add(max(0, int(delay * 1000)), _run)

    def cancel(self, handle: int) -> None:
        self._glib.source_remove(handle)


class AsyncioScheduler:
    """Timers on an asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_event_loop()
        return self._loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(delay, callback)

    def cancel(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()
