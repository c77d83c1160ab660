#!/usr/bin/env python3
"""
PagedList - GTK4 people list with incremental loading
Minimal entry point - classes are in separate modules.
"""

import logging

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("PagedList.UI")


def main():
    """Entry point"""
    from pagedlist.application.list_app import main as app_main

    logger.info("PagedList starting...")

    return app_main()


if __name__ == "__main__":
    main()
