"""Empty-state view with a countdown-gated refresh button."""

from typing import Callable

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk

from pagedlist.domain import ListPhase, ListState
from pagedlist.utils.formatting import EMPTY_MESSAGE, format_refresh_label


class EmptyStateView:
    def __init__(self, on_refresh: Callable[[], bool]):
        self.on_refresh = on_refresh
        self._updating = False

    def build(self) -> Gtk.Widget:
        container = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=20)
        container.set_valign(Gtk.Align.CENTER)
        container.set_margin_start(20)
        container.set_margin_end(20)

        message_label = Gtk.Label(label=EMPTY_MESSAGE)
        container.append(message_label)

        refresh_button = Gtk.Button(label=format_refresh_label(None))
        refresh_button.add_css_class("suggested-action")
        refresh_button.set_sensitive(False)
        refresh_button.connect("clicked", self._on_refresh_clicked)
        container.append(refresh_button)

        container.set_visible(False)

        self.container = container
        self.refresh_button = refresh_button
        return container

    def _on_refresh_clicked(self, button: Gtk.Button) -> None:
        self._updating = True
        if not self.on_refresh():
            self._updating = False

    def update(self, state: ListState) -> None:
        if state.phase in (ListPhase.EMPTY, ListPhase.SETTLED, ListPhase.ERROR):
            self._updating = False

        visible = state.phase is ListPhase.EMPTY or self._updating
        self.container.set_visible(visible)
        if not visible:
            return

        if self._updating:
            self.refresh_button.set_label(format_refresh_label(None, updating=True))
            self.refresh_button.set_sensitive(False)
            return

        countdown = state.refresh_countdown
        self.refresh_button.set_label(format_refresh_label(countdown))
        self.refresh_button.set_sensitive(countdown is None or countdown.enabled)
