"""Runs page fetches on a background event loop."""

import asyncio
import logging
import threading
from typing import Awaitable, Optional

from pagedlist.core.protocols import FetchCallback, Scheduler
from pagedlist.domain import FetchError, NetworkError, Page

logger = logging.getLogger("PagedList.FetchRunner")


class ThreadedFetchRunner:
    """Awaits each fetch in a daemon thread with its own event loop.

    The completion is handed back through the scheduler, so ``on_done``
    always runs on the main loop.
    """

    def __init__(self, scheduler: Scheduler):
        self.scheduler = scheduler

    def submit(self, fetch: Awaitable[Page], on_done: FetchCallback) -> None:
        def run_fetch():
            page: Optional[Page] = None
            error: Optional[FetchError] = None

            loop = asyncio.new_event_loop()
            asyncio.set_event_loop(loop)
            try:
                page = loop.run_until_complete(fetch)
            except FetchError as e:
                error = e
            except Exception as e:
                logger.error(f"Unexpected fetch failure: {type(e).__name__}: {e}")
                error = NetworkError(str(e) or type(e).__name__)
            finally:
                loop.close()

            self.scheduler.call_soon(on_done, page, error)

        threading.Thread(target=run_fetch, daemon=True).start()
