"""Error banner with a countdown-gated retry button."""

from typing import Callable

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk

from pagedlist.domain import ListPhase, ListState
from pagedlist.utils.formatting import format_retry_label


class ErrorBanner:
    def __init__(self, on_retry: Callable[[], bool], on_give_up: Callable[[], None]):
        self.on_retry = on_retry
        self.on_give_up = on_give_up

    def build(self) -> Gtk.Widget:
        container = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=12)
        container.add_css_class("card")
        container.set_halign(Gtk.Align.CENTER)
        container.set_valign(Gtk.Align.CENTER)
        container.set_size_request(300, 150)
        for margin in ("top", "bottom", "start", "end"):
            getattr(container, f"set_margin_{margin}")(20)

        description_label = Gtk.Label()
        description_label.set_wrap(True)
        description_label.set_justify(Gtk.Justification.CENTER)
        container.append(description_label)

        buttons = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=10)
        buttons.set_homogeneous(True)

        give_up_button = Gtk.Button(label="Give Up")
        give_up_button.add_css_class("destructive-action")
        give_up_button.connect("clicked", lambda button: self.on_give_up())
        buttons.append(give_up_button)

        retry_button = Gtk.Button(label=format_retry_label(None))
        retry_button.add_css_class("suggested-action")
        retry_button.set_sensitive(False)
        retry_button.connect("clicked", lambda button: self.on_retry())
        buttons.append(retry_button)

        container.append(buttons)
        container.set_visible(False)

        self.container = container
        self.description_label = description_label
        self.retry_button = retry_button
        return container

    def update(self, state: ListState) -> None:
        visible = state.phase is ListPhase.ERROR
        self.container.set_visible(visible)
        if not visible:
            return

        if state.last_error is not None:
            self.description_label.set_label(state.last_error.description)
        countdown = state.retry_countdown
        self.retry_button.set_label(format_retry_label(countdown))
        self.retry_button.set_sensitive(countdown is None or countdown.enabled)
