#
# Copyright (C) 2026 TextScaler Developers — LGPL-3.0-or-later
#
"""
TextScaler GTK4 Application

Hosts a ScaleEntry bound to a SyncController that talks to the
desktop settings and to any monitors ddccontrol can see.
"""

from __future__ import annotations

import sys

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")

from gi.repository import Adw, Gio, Gtk  # noqa: E402

from textscaler.config import ScalerConfig  # noqa: E402
from textscaler.controller import SyncController  # noqa: E402
from textscaler.devices import DeviceEnumerator  # noqa: E402
from textscaler.log import Log  # noqa: E402
from textscaler.scheduler import GLibScheduler  # noqa: E402
from textscaler.settings import GioSettingsStore  # noqa: E402

from .widgets import ScaleEntry  # noqa: E402


APPLICATION_ID = "io.github.textscaler"


class ToastNotifier:
    """Sends controller warnings as desktop notifications."""

    def __init__(self, application: Gio.Application):
        self._application = application

    def notify(self, summary: str, body: str):
        notification = Gio.Notification.new(summary)
        notification.set_body(body)
        notification.set_priority(Gio.NotificationPriority.HIGH)
        self._application.send_notification("device-warning", notification)


class TextScalerApplication(Adw.Application):
    """Main TextScaler GTK application."""

    def __init__(self, config: ScalerConfig | None = None):
        super().__init__(application_id=APPLICATION_ID,
                         flags=Gio.ApplicationFlags.DEFAULT_FLAGS)

        self._config = config
        self._window = None
        self.controller = None
        self._logger = Log.get("textscaler.gtk")

        quit_action = Gio.SimpleAction.new("quit", None)
        quit_action.connect("activate", lambda *_: self.quit())
        self.add_action(quit_action)
        self.set_accels_for_action("app.quit", ["<Control>q"])

    def do_activate(self):
        """Called when the application is activated."""
        if self._window is None:
            self._window = self._build_window()
        self._window.present()

    def _build_window(self):
        config = self._config if self._config is not None else ScalerConfig.load_default()

        widget = ScaleEntry()
        enumerator = DeviceEnumerator.from_config(config) if config.enable_devices else None
        store = GioSettingsStore(config.schema_id) if config.schema_id else None

        self.controller = SyncController(
            config,
            store=store,
            view=widget,
            notifier=ToastNotifier(self),
            enumerator=enumerator,
            scheduler=GLibScheduler(),
        )
        widget.bind(self.controller)
        self._logger.info("Controlling %s on %d device(s)", config.key,
                          len(self.controller.devices))

        window = Adw.ApplicationWindow(application=self, title="Text Scaler")
        window.set_default_size(360, -1)
        box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL)
        box.set_margin_top(12)
        box.set_margin_bottom(12)
        box.set_margin_start(12)
        box.set_margin_end(12)
        box.append(widget)
        window.set_content(box)
        window.connect("close-request", self._on_close_request)
        return window

    def _on_close_request(self, window):
        if self.controller is not None:
            self.controller.commit()
            self.controller.teardown()
        return False

    def do_shutdown(self):
        if self.controller is not None:
            self.controller.teardown()
        Adw.Application.do_shutdown(self)


def main(config: ScalerConfig | None = None):
    """Entry point for the GTK application."""
    app = TextScalerApplication(config)
    return app.run(sys.argv)


if __name__ == "__main__":
    sys.exit(main())
