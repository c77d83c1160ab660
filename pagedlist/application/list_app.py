"""Main PagedList application."""

import logging
import sys
from typing import Optional

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Adw, Gio, GLib

from pagedlist.core.di_container import AppContainer

logger = logging.getLogger("PagedList.App")


class ListApp(Adw.Application):
    """Main application"""

    def __init__(self, container_factory=AppContainer.create):
        super().__init__(
            application_id="org.pagedlist.PeopleList",
            flags=Gio.ApplicationFlags.FLAGS_NONE,
        )
        self.container_factory = container_factory
        self.container: Optional[AppContainer] = None
        self.window = None

        self.add_main_option(
            "config",
            ord("c"),
            GLib.OptionFlags.NONE,
            GLib.OptionArg.STRING,
            "Path to the settings file",
            "PATH",
        )
        self.config_path: Optional[str] = None

    def do_handle_local_options(self, options):
        if options.contains("config"):
            self.config_path = options.lookup_value("config").get_string()
        return -1

    def do_activate(self):
        if self.window is not None:
            self.window.present()
            return

        from pagedlist.config import AppSettings
        from pagedlist.windows.list_window import ListWindow

        settings = AppSettings.load(self.config_path) if self.config_path else None
        self.container = self.container_factory(settings=settings)

        self.window = ListWindow(
            self,
            self.container.intent_handler,
            self.container.settings.window,
            on_give_up=self.quit,
        )
        self.container.store.add_observer(self.window.render)
        self.window.present()

        logger.info(
            f"Loading people via {self.container.settings.source.transport} source"
        )
        self.container.intent_handler.on_appear_request_initial_load()


def main():
    """Entry point"""
    import signal

    def signal_handler(sig, frame):
        logger.info("Shutting down...")
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)

    app = ListApp()
    try:
        return app.run(sys.argv)
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        sys.exit(0)
