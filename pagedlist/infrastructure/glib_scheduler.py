"""Scheduler backed by the GLib main loop."""

from typing import Any, Callable

from gi.repository import GLib


class GLibScheduler:
    """Runs callbacks on the GLib main loop the store mutates on."""

    def call_soon(self, callback: Callable[..., Any], *args: Any) -> None:
        def run_once():
            callback(*args)
            return GLib.SOURCE_REMOVE

        GLib.idle_add(run_once)

    def call_every_second(self, callback: Callable[[], bool]) -> int:
        def tick():
            return GLib.SOURCE_CONTINUE if callback() else GLib.SOURCE_REMOVE

        return GLib.timeout_add_seconds(1, tick)

    def cancel(self, source_id: int) -> None:
        GLib.source_remove(source_id)
