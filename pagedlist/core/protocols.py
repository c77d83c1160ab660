"""Protocol definitions for dependency injection."""

from typing import Any, Awaitable, Callable, Optional, Protocol

from pagedlist.domain import FetchError, Page

FetchCallback = Callable[[Optional[Page], Optional[FetchError]], None]


class PageFetcher(Protocol):
    async def fetch(self, cursor: Optional[str]) -> Page: ...


class Scheduler(Protocol):
    def call_soon(self, callback: Callable[..., Any], *args: Any) -> None: ...

    def call_every_second(self, callback: Callable[[], bool]) -> int: ...

    def cancel(self, source_id: int) -> None: ...


class FetchRunner(Protocol):
    def submit(
        self, fetch: Awaitable[Page], on_done: FetchCallback
    ) -> None: ...
