#
# Copyright (C) 2026 TextScaler Developers — LGPL-3.0-or-later
#
"""
Scale Entry Widget

Slider, numeric entry and reset button for one bounded value.
Implements the controller's view interface and forwards user input
to the bound SyncController.
"""

import gi

gi.require_version("Gtk", "4.0")

from gi.repository import Gtk  # noqa: E402


class ScaleEntry(Gtk.Box):
    """Slider plus entry, driven by a SyncController."""

    __gtype_name__ = "TextScalerScaleEntry"

    def __init__(self, title: str = "Text scaling"):
        super().__init__(orientation=Gtk.Orientation.VERTICAL, spacing=6)

        self.add_css_class("scale-entry")

        self._controller = None
        self._syncing = False  # Prevent feedback loops

        header = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=6)
        header.append(Gtk.Image.new_from_icon_name("preferences-desktop-font-symbolic"))
        title_label = Gtk.Label(label=title, xalign=0, hexpand=True)
        header.append(title_label)
        self._label = Gtk.Label(label="")
        self._label.add_css_class("numeric")
        header.append(self._label)
        self.append(header)

        row = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=6)

        self._entry = Gtk.Entry()
        self._entry.set_width_chars(6)
        self._entry.set_input_purpose(Gtk.InputPurpose.NUMBER)
        self._entry.connect("activate", self._on_entry_activate)
        focus = Gtk.EventControllerFocus()
        focus.connect("leave", self._on_entry_focus_leave)
        self._entry.add_controller(focus)
        row.append(self._entry)

        self._scale = Gtk.Scale.new_with_range(Gtk.Orientation.HORIZONTAL, 0.0, 1.0, 0.01)
        self._scale.set_draw_value(False)
        self._scale.set_hexpand(True)
        self._scale.connect("value-changed", self._on_scale_changed)
        row.append(self._scale)
        self.append(row)

        scroll = Gtk.EventControllerScroll.new(Gtk.EventControllerScrollFlags.VERTICAL)
        scroll.connect("scroll", self._on_scroll)
        header.add_controller(scroll)

        self._reset = Gtk.Button(label="Reset to default value")
        self._reset.add_css_class("flat")
        self._reset.connect("clicked", self._on_reset_clicked)
        self.append(self._reset)

    def bind(self, controller):
        """Route user input to `controller`."""
        self._controller = controller

    # SyncView

    def set_position(self, position: float):
        self._syncing = True
        try:
            self._scale.set_value(position)
        finally:
            self._syncing = False

    def set_text(self, text: str):
        self._entry.set_text(text)

    def set_label(self, text: str):
        self._label.set_label(text)

    def set_reset_sensitive(self, sensitive: bool):
        self._reset.set_sensitive(sensitive)

    # Gtk signal handlers

    def _on_scale_changed(self, scale):
        if self._syncing or self._controller is None:
            return
        self._controller.on_slider_changed(scale.get_value())

    def _on_entry_activate(self, entry):
        if self._controller is not None:
            self._controller.on_text_committed(entry.get_text())

    def _on_entry_focus_leave(self, focus):
        if self._controller is not None:
            self._controller.on_text_committed(self._entry.get_text())

    def _on_scroll(self, controller, dx, dy):
        if self._controller is None or dy == 0:
            return False
        self._controller.on_scroll(-1 if dy > 0 else 1)
        return True

    def _on_reset_clicked(self, button):
        if self._controller is not None:
            self._controller.on_reset_requested()
