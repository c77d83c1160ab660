"""Main window showing the paginated list."""

import logging
from typing import Callable, Optional

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Adw, GLib, Gtk

from pagedlist.components import EmptyStateView, ErrorBanner
from pagedlist.config import WindowSettings
from pagedlist.domain import ListPhase, ListState
from pagedlist.managers import ListIntentHandler
from pagedlist.utils.formatting import format_record, format_status

logger = logging.getLogger("PagedList.ListWindow")


class ListWindow(Adw.ApplicationWindow):
    """Renders store snapshots and forwards user intents.

    The window never touches the store directly; it only talks to the
    intent handler it was given.
    """

    def __init__(
        self,
        app: Optional[Adw.Application],
        intents: ListIntentHandler,
        settings: WindowSettings,
        on_give_up: Callable[[], None],
    ):
        super().__init__(application=app)
        self.intents = intents
        self.settings = settings
        self._rendered_count = 0

        self.set_title("People")
        self.set_default_size(settings.default_width, settings.default_height)

        self.error_banner = ErrorBanner(
            on_retry=intents.on_user_tap_retry, on_give_up=on_give_up
        )
        self.empty_state = EmptyStateView(
            on_refresh=intents.on_user_tap_manual_refresh_from_empty_state
        )
        self.set_content(self._build_content())

    def _build_content(self) -> Gtk.Widget:
        main_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL)

        header = Gtk.HeaderBar()
        refresh_button = Gtk.Button.new_from_icon_name("view-refresh-symbolic")
        refresh_button.set_tooltip_text("Refresh")
        refresh_button.connect("clicked", lambda button: self.intents.on_pull_to_refresh())
        header.pack_start(refresh_button)

        self.spinner = Gtk.Spinner()
        header.pack_end(self.spinner)
        main_box.append(header)

        self.listbox = Gtk.ListBox()
        self.listbox.set_selection_mode(Gtk.SelectionMode.NONE)
        self.listbox.add_css_class("boxed-list")

        self.scrolled = Gtk.ScrolledWindow()
        self.scrolled.set_vexpand(True)
        self.scrolled.set_policy(Gtk.PolicyType.NEVER, Gtk.PolicyType.AUTOMATIC)
        self.scrolled.set_child(self.listbox)
        self.scrolled.get_vadjustment().connect(
            "value-changed", lambda adj: self._check_near_end()
        )

        overlay = Gtk.Overlay()
        overlay.set_child(self.scrolled)
        overlay.add_overlay(self.empty_state.build())
        overlay.add_overlay(self.error_banner.build())

        main_box.append(overlay)

        self.status_label = Gtk.Label()
        self.status_label.add_css_class("dim-label")
        self.status_label.add_css_class("caption")
        self.status_label.set_margin_top(4)
        self.status_label.set_margin_bottom(4)
        main_box.append(self.status_label)
        return main_box

    def render(self, state: ListState) -> None:
        """Observer callback, runs on the main loop."""
        if len(state.records) < self._rendered_count:
            while True:
                row = self.listbox.get_row_at_index(0)
                if row is None:
                    break
                self.listbox.remove(row)
            self._rendered_count = 0

        for record in state.records[self._rendered_count:]:
            row = Gtk.ListBoxRow()
            row.set_size_request(-1, self.settings.row_height)
            label = Gtk.Label(label=format_record(record))
            label.set_halign(Gtk.Align.START)
            label.set_margin_start(12)
            row.set_child(label)
            self.listbox.append(row)
        self._rendered_count = len(state.records)

        self.spinner.set_spinning(state.loading)
        self.status_label.set_label(format_status(state))
        self.error_banner.update(state)
        self.empty_state.update(state)

        if state.phase is ListPhase.SETTLED and state.has_more:
            # New rows may already be on screen without any scroll event, and
            # a page without records leaves nothing to scroll at all.
            GLib.idle_add(self._check_near_end)

    def _check_near_end(self) -> bool:
        adjustment = self.scrolled.get_vadjustment()
        bottom = adjustment.get_value() + adjustment.get_page_size()
        row = self.listbox.get_row_at_y(max(0, int(bottom) - 1))
        if row is None:
            row = self.listbox.get_last_child()
        if isinstance(row, Gtk.ListBoxRow):
            self.intents.on_near_end_of_list_request_more(row.get_index())
        elif self._rendered_count == 0:
            # Index -1 is the last row of an empty list.
            self.intents.on_near_end_of_list_request_more(-1)
        return GLib.SOURCE_REMOVE
