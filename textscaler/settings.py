#
# Copyright (C) 2026 TextScaler Developers — LGPL-3.0-or-later
#
"""
Settings stores

A settings store is the external, authoritative home of the value:
a key-value store with change notification. GioSettingsStore wraps
the desktop's Gio.Settings; MemorySettingsStore keeps values in a
dict for headless use and tests.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Mapping
from typing import Any, Protocol

from .log import Log


DEFAULT_SCHEMA_ID = "org.gnome.desktop.interface"
TEXT_SCALING_FACTOR_KEY = "text-scaling-factor"

ChangedCallback = Callable[[str], None]


class SettingsStore(Protocol):
    """Interface the SyncController needs from a settings backend."""

    def get_double(self, key: str) -> float: ...

    def set_double(self, key: str, value: float) -> None: ...

    def connect_changed(self, key: str, callback: ChangedCallback) -> Any: ...

    def disconnect(self, handler_id: Any) -> None: ...


class GioSettingsStore:
    """
    Gio.Settings backed store.

    Subscriptions use the detailed 'changed::<key>' signal, so a
    callback only hears about its own key.

    :param schema_id: GSettings schema
    :param settings: Existing Gio.Settings instance, created from
                     schema_id when omitted
    """

    def __init__(self, schema_id: str = DEFAULT_SCHEMA_ID, settings=None):
        if settings is None:
            from gi.repository import Gio  # noqa: PLC0415

            settings = Gio.Settings.new(schema_id)

        self._schema_id = schema_id
        self._settings = settings
        self._logger = Log.get("textscaler.settings")

    @property
    def schema_id(self) -> str:
        return self._schema_id

    def get_double(self, key: str) -> float:
        return self._settings.get_double(key)

    def set_double(self, key: str, value: float) -> None:
        self._logger.debug("%s %s <- %s", self._schema_id, key, value)
        self._settings.set_double(key, value)

    def connect_changed(self, key: str, callback: ChangedCallback) -> int:
        def _on_changed(settings, changed_key):
            callback(changed_key)

        return self._settings.connect(f"changed::{key}", _on_changed)

    def disconnect(self, handler_id: int) -> None:
        self._settings.disconnect(handler_id)


class MemorySettingsStore:
    """
    In-memory store.

    Every set_double() notifies subscribers of that key synchronously,
    including writes made by the subscriber itself, the same way the
    dconf backend echoes a process's own writes.
    """

    def __init__(self, values: Mapping[str, float] | None = None):
        self._values: dict[str, float] = dict(values or {})
        self._handlers: dict[int, tuple[str, ChangedCallback]] = {}
        self._ids = itertools.count(1)

    def get_double(self, key: str) -> float:
        return float(self._values.get(key, 0.0))

    def set_double(self, key: str, value: float) -> None:
        self._values[key] = float(value)
        for handler_key, callback in list(self._handlers.values()):
            if handler_key == key:
                callback(key)

    def connect_changed(self, key: str, callback: ChangedCallback) -> int:
        handler_id = next(self._ids)
        self._handlers[handler_id] = (key, callback)
        return handler_id

    def disconnect(self, handler_id: int) -> None:
        self._handlers.pop(handler_id, None)

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)
