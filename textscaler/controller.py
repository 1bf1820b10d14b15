#
# Copyright (C) 2026 TextScaler Developers — LGPL-3.0-or-later
#
"""
Sync controller

Keeps a slider, a text entry, the settings store and any attached
monitors in agreement about a single bounded value.

Every change enters through one routine, _update(), tagged with the
UpdateSource that caused it. The tag decides the downstream effects:

    EXTERNAL   store -> view only. Never written back, never pushed.
    SLIDER     view -> devices (debounced), store if writing on every change
    SCROLL     same as SLIDER, but the slider is moved too
    TEXT       view -> store and devices
    RESET      as TEXT, with the configured default
    COMMIT     current value -> store, pending device push flushed

Store notifications that arrive while an update is running are echoes
of the controller's own write and are dropped.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Protocol

from .config import ScalerConfig, WriteMode
from .debounce import ApplierState, DebouncedApplier
from .devices import DeviceEnumerator
from .log import LOG_TRACE, Log
from .mapper import (
    clamp,
    format_value,
    from_slider_position,
    is_default,
    parse_value,
    snap,
    to_device_value,
    to_slider_position,
)
from .scheduler import GLibScheduler, Scheduler
from .settings import MemorySettingsStore, SettingsStore
from .util import Signal


class UpdateSource(Enum):
    """Origin of a value change."""

    EXTERNAL = "external"
    SLIDER = "slider"
    SCROLL = "scroll"
    TEXT = "text"
    RESET = "reset"
    COMMIT = "commit"


# Sources that always write the settings store
COMMIT_SOURCES = frozenset({UpdateSource.TEXT, UpdateSource.RESET, UpdateSource.COMMIT})


class SyncView(Protocol):
    """What the controller needs from a widget toolkit."""

    def set_position(self, position: float) -> None: ...

    def set_text(self, text: str) -> None: ...

    def set_label(self, text: str) -> None: ...

    def set_reset_sensitive(self, sensitive: bool) -> None: ...


class Notifier(Protocol):
    """User-visible warnings (desktop notifications, toasts)."""

    def notify(self, summary: str, body: str) -> None: ...


class NullView:
    """View used when the controller runs headless."""

    def set_position(self, position: float) -> None:
        pass

    def set_text(self, text: str) -> None:
        pass

    def set_label(self, text: str) -> None:
        pass

    def set_reset_sensitive(self, sensitive: bool) -> None:
        pass


class LogNotifier:
    """Notifier that only writes to the log."""

    def __init__(self):
        self._logger = Log.get("textscaler.notify")

    def notify(self, summary: str, body: str) -> None:
        self._logger.warning("%s: %s", summary, body)


class SyncController:
    """
    Owner of the bounded value.

    :param config: Validated ScalerConfig
    :param store: Settings backend, an in-memory store holding the
                  default when omitted
    :param view: Widget adapter, NullView when omitted
    :param notifier: Receives device failure warnings
    :param enumerator: Device backend, built from config when devices
                       are enabled
    :param devices: Device handles; discovered through the enumerator
                    when omitted
    :param scheduler: Timer source for the debounced device push
    """

    def __init__(self, config: ScalerConfig, store: SettingsStore | None = None,
                 view: SyncView | None = None, notifier: Notifier | None = None,
                 enumerator: DeviceEnumerator | None = None, devices=None,
                 scheduler: Scheduler | None = None):
        self._config = config
        self._logger = Log.get("textscaler.controller")

        if store is None:
            store = MemorySettingsStore({config.key: config.default_value})
        self._store = store
        self._view = view if view is not None else NullView()
        self._notifier = notifier if notifier is not None else LogNotifier()

        if enumerator is None and config.enable_devices:
            enumerator = DeviceEnumerator.from_config(config)
        self._enumerator = enumerator

        if enumerator is None:
            devices = ()
        elif devices is None:
            devices = enumerator.discover()
        self._devices = tuple(devices)

        if not self._devices:
            self._logger.info("No devices, running in settings-only mode")

        if scheduler is None:
            scheduler = GLibScheduler()
        self._applier = DebouncedApplier(self._apply_to_devices, scheduler,
                                         window=config.debounce_window)

        self.value_changed = Signal()

        self._updating = False
        self._alive = True
        self._value = clamp(store.get_double(config.key), config.min_value, config.max_value)
        self._handler_id = store.connect_changed(config.key, self._on_store_changed)

        self._render(UpdateSource.EXTERNAL)

    @property
    def config(self) -> ScalerConfig:
        return self._config

    @property
    def value(self) -> float:
        return self._value

    @property
    def position(self) -> float:
        """Slider position derived from the current value."""
        return to_slider_position(self._value, self._config.min_value, self._config.max_value)

    @property
    def text(self) -> str:
        """Entry text derived from the current value."""
        return format_value(self._value, self._config.decimals)

    @property
    def label(self) -> str:
        """Short text for a panel indicator."""
        return self.text

    @property
    def is_default(self) -> bool:
        return is_default(self._value, self._config.default_value, self._config.decimals)

    @property
    def devices(self) -> tuple[str, ...]:
        return self._devices

    @property
    def settings_only(self) -> bool:
        """True when there is no hardware to push to."""
        return not self._devices

    @property
    def apply_pending(self) -> bool:
        return self._applier.state is ApplierState.SCHEDULED

    @property
    def alive(self) -> bool:
        return self._alive

    # ─────────────────────────────────────────────────────────────────────────
    # Entry points
    # ─────────────────────────────────────────────────────────────────────────

    def on_external_change(self, new_value: float):
        """The settings store reports a new authoritative value."""
        if not self._alive:
            return
        if self._updating:
            self._logger.log(LOG_TRACE, "Dropping store echo (%s)", new_value)
            return
        if new_value == self._value:
            return

        self._update(new_value, UpdateSource.EXTERNAL)

    def on_slider_changed(self, position: float):
        """The user moved the slider to `position` (0.0 - 1.0)."""
        if not self._alive or not math.isfinite(position):
            return

        value = from_slider_position(position, self._config.min_value, self._config.max_value)
        value = snap(value, self._config.decimals)
        if value == self._value:
            return

        self._update(value, UpdateSource.SLIDER)

    def on_scroll(self, steps: int):
        """
        Nudge the value by whole scroll steps (positive is up).
        """
        if not self._alive or steps == 0:
            return

        value = self._value + steps * self._config.scroll_step
        self._update(snap(value, self._config.decimals), UpdateSource.SCROLL)

    def on_text_committed(self, text: str):
        """
        The user confirmed the entry (activate or focus-out).

        Unparseable text is discarded and the entry shows the
        current value again. Text that renders the same as the current
        value leaves the stored double untouched.
        """
        if not self._alive:
            return

        value = parse_value(text)
        if value is None:
            self._logger.debug("Ignoring invalid input %r", text)
            self._view.set_text(self.text)
            return

        value = clamp(snap(value, self._config.decimals),
                      self._config.min_value, self._config.max_value)
        if format_value(value, self._config.decimals) == self.text:
            self._view.set_text(self.text)
            return

        self._update(value, UpdateSource.TEXT)

    def on_reset_requested(self):
        """Return to the configured default."""
        if not self._alive:
            return

        self._update(self._config.default_value, UpdateSource.RESET)

    def commit(self):
        """
        Apply the current value to the system now: write the store and
        push any pending device update without waiting for the window.
        """
        if not self._alive:
            return

        self._update(self._value, UpdateSource.COMMIT)
        self._applier.flush()

    def teardown(self):
        """
        Detach from the store and drop any pending device push.
        Entry points are no-ops afterwards.
        """
        if not self._alive:
            return

        self._alive = False
        self._applier.cancel()
        self._store.disconnect(self._handler_id)
        self._handler_id = None
        self.value_changed.disconnect_all()
        self._logger.debug("Controller torn down")

    # ─────────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────────

    def _writes_store(self, source: UpdateSource) -> bool:
        if source is UpdateSource.EXTERNAL:
            return False
        if source in COMMIT_SOURCES:
            return True
        return self._config.mode is WriteMode.ON_EVERY_CHANGE

    def _update(self, value: float, source: UpdateSource):
        assert not self._updating, f"update from {source.value} re-entered"

        value = clamp(value, self._config.min_value, self._config.max_value)

        self._updating = True
        try:
            self._value = value
            self._render(source)

            if self._writes_store(source):
                self._store.set_double(self._config.key, value)

            if source is not UpdateSource.EXTERNAL and self._devices:
                self._applier.request_apply(value)

        finally:
            self._updating = False

        self._logger.debug("%s -> %s", source.value, self.text)
        self.value_changed.fire(self, value, source)

    def _render(self, source: UpdateSource):
        # The slider is left alone while the user is dragging it
        if source is not UpdateSource.SLIDER:
            self._view.set_position(self.position)

        text = self.text
        self._view.set_text(text)
        self._view.set_label(text)
        self._view.set_reset_sensitive(not self.is_default)

    def _on_store_changed(self, key: str):
        if not self._alive:
            return
        if self._updating:
            self._logger.log(LOG_TRACE, "Dropping store echo for %s", key)
            return

        self.on_external_change(self._store.get_double(key))

    def _apply_to_devices(self, value: float):
        if not self._alive or not self._devices:
            return

        device_value = to_device_value(value, self._config.min_value, self._config.max_value,
                                       self._config.device_min, self._config.device_max)

        failed = self._enumerator.push_all(device_value, self._devices)
        if failed:
            self._notifier.notify("Monitor update failed",
                                  "Could not set %s to %d" % (", ".join(failed), device_value))
