# Copyright (c) 2022 Daniel Pereira
#
# SPDX-License-Identifier: Apache-2.0

import logging
import gi

gi.require_version("Gtk", "3.0")
gi.require_version("Gdk", "3.0")

# pylint: disable-next=wrong-import-position
from gi.repository import Gdk, GLib, Gtk
from .actions import ActionRegistry
from .dispatcher import ButtonClick, FocusOut, KeyPress, PointerPress
from .errors import PowerMenuFatalError, StylingLoadError
from .settings import ShellSettings, read_stylesheet

logger = logging.getLogger(__name__)


class GtkShell:
    """
    Presents the menu as a borderless panel floating above tiling window managers, with one button
    per action, and forwards every input event to `on_event`.

    `on_event` receives the translated event and returns whether the event was fully handled, which
    decides if GTK keeps propagating it to the widget underneath.
    """

    def __init__(self, settings: ShellSettings, registry: ActionRegistry, on_event: callable):
        self.settings = settings
        self.registry = registry
        self.on_event = on_event
        self.window = None
        self.container = None

    def run(self) -> int:
        """
        Runs the GTK main loop. In practice it never returns, since any action or dismissal exits
        the process right away.
        """
        screen = Gdk.Screen.get_default()
        if screen is None:
            raise PowerMenuFatalError("Could not get default screen. Is a display available?")

        application = Gtk.Application(application_id=self.settings.app_id)
        application.connect("activate", self.activate)
        return application.run(None)

    def activate(self, application: Gtk.Application):
        self.apply_theme()
        self.present_window(application)

        for spec in self.registry:
            self.add_button(spec.label, ButtonClick(spec.action))

        self.window.show_all()
        self.window.present()
        self.window.grab_focus()

    def apply_theme(self):
        """
        Applies the stylesheet and dark theme preference to the whole screen. A broken stylesheet
        leaves the default GTK styling in place.
        """
        try:
            self.load_css()
        except StylingLoadError as err:
            logger.warning("Failed to load CSS: %s", err)

        gtk_settings = Gtk.Settings.get_default()
        if gtk_settings and self.settings.prefer_dark_theme:
            gtk_settings.set_property("gtk-application-prefer-dark-theme", True)

    def load_css(self):
        css = read_stylesheet(self.settings.css_file)
        provider = Gtk.CssProvider()

        try:
            provider.load_from_data(css)
        except GLib.Error as err:
            raise StylingLoadError(f"Invalid stylesheet {self.settings.css_file}: {err}") from err

        Gtk.StyleContext.add_provider_for_screen(
            Gdk.Screen.get_default(),
            provider,
            Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION,
        )

    def present_window(self, application: Gtk.Application):
        window = Gtk.ApplicationWindow(
            application=application,
            title=self.settings.title,
            default_width=self.settings.width,
            resizable=False,
        )

        # Float above tiling window managers
        window.set_type_hint(Gdk.WindowTypeHint.DIALOG)
        window.set_modal(False)
        window.set_keep_above(True)
        window.set_decorated(False)
        window.set_skip_taskbar_hint(True)
        window.set_skip_pager_hint(True)

        window.set_position(Gtk.WindowPosition.CENTER)
        window.set_accept_focus(True)
        window.set_focus_on_map(True)

        window.add_events(
            Gdk.EventMask.KEY_PRESS_MASK
            | Gdk.EventMask.FOCUS_CHANGE_MASK
            | Gdk.EventMask.BUTTON_PRESS_MASK
        )
        window.connect("key-press-event", self.key_pressed)
        window.connect("button-press-event", self.pointer_pressed)
        window.connect("focus-out-event", self.focus_lost)

        container = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=5)
        container.set_margin_top(10)
        container.set_margin_bottom(10)
        container.set_margin_start(10)
        container.set_margin_end(10)
        window.add(container)

        self.window = window
        self.container = container

    def add_button(self, label: str, click_event: ButtonClick):
        button = Gtk.Button(label=label)
        button.set_hexpand(True)
        button.set_vexpand(False)
        button.set_name("tui-button")
        button.connect("clicked", lambda _: self.on_event(click_event))
        self.container.pack_start(button, False, False, 2)

    def window_size(self) -> tuple[int, int]:
        return self.window.get_size()

    def key_pressed(self, _window: Gtk.Window, event: Gdk.EventKey) -> bool:
        codepoint = Gdk.keyval_to_unicode(event.keyval)
        return self.on_event(KeyPress(
            name=Gdk.keyval_name(event.keyval),
            char=chr(codepoint) if codepoint else None,
            is_modifier=bool(event.is_modifier),
        ))

    def pointer_pressed(self, _window: Gtk.Window, event: Gdk.EventButton) -> bool:
        width, height = self.window_size()
        return self.on_event(PointerPress(event.x, event.y, width, height))

    def focus_lost(self, _window: Gtk.Window, _event: Gdk.EventFocus) -> bool:
        return self.on_event(FocusOut())
