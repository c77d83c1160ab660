"""Dependency injection container."""

from dataclasses import dataclass, field
from typing import Optional

from pagedlist.config import AppPaths, AppSettings
from pagedlist.managers import ListIntentHandler, PaginatedListStore
from pagedlist.services import DemoPageFetcher, IPCPageFetcher, WebSocketPageFetcher

from .protocols import FetchRunner, PageFetcher, Scheduler


@dataclass
class AppContainer:
    settings: AppSettings
    paths: AppPaths

    _scheduler: Optional[Scheduler] = field(default=None, repr=False)
    _runner: Optional[FetchRunner] = field(default=None, repr=False)
    _fetcher: Optional[PageFetcher] = field(default=None, repr=False)
    _store: Optional[PaginatedListStore] = field(
        default=None, init=False, repr=False
    )
    _intent_handler: Optional[ListIntentHandler] = field(
        default=None, init=False, repr=False
    )

    @property
    def scheduler(self) -> Scheduler:
        if self._scheduler is None:
            from pagedlist.infrastructure.glib_scheduler import GLibScheduler

            self._scheduler = GLibScheduler()
        return self._scheduler

    @property
    def runner(self) -> FetchRunner:
        if self._runner is None:
            from pagedlist.infrastructure.threaded_fetch_runner import (
                ThreadedFetchRunner,
            )

            self._runner = ThreadedFetchRunner(self.scheduler)
        return self._runner

    @property
    def fetcher(self) -> PageFetcher:
        if self._fetcher is None:
            self._fetcher = self._create_fetcher()
        return self._fetcher

    @property
    def store(self) -> PaginatedListStore:
        if self._store is None:
            loader = self.settings.loader
            self._store = PaginatedListStore(
                self.fetcher,
                self.runner,
                self.scheduler,
                retry_delay_seconds=loader.retry_delay_seconds,
                refresh_delay_seconds=loader.refresh_delay_seconds,
                backoff_factor=loader.backoff_factor,
                max_retry_delay_seconds=loader.max_retry_delay_seconds,
            )
        return self._store

    @property
    def intent_handler(self) -> ListIntentHandler:
        if self._intent_handler is None:
            self._intent_handler = ListIntentHandler(self.store)
        return self._intent_handler

    def _create_fetcher(self) -> PageFetcher:
        source = self.settings.source
        if source.transport == "ipc":
            return IPCPageFetcher(
                socket_path=source.socket_path or str(self.paths.socket_path),
                timeout=source.timeout_seconds,
            )
        if source.transport == "websocket":
            return WebSocketPageFetcher(
                source.uri,
                max_size=source.max_size,
                timeout=source.timeout_seconds,
            )
        return DemoPageFetcher(
            total_records=source.demo_total_records,
            page_size=source.demo_page_size,
            failure_rate=source.demo_failure_rate,
            duplicate_rate=source.demo_duplicate_rate,
            latency_seconds=source.demo_latency_seconds,
            seed=source.demo_seed,
        )

    @classmethod
    def create(
        cls,
        settings: Optional[AppSettings] = None,
        paths: Optional[AppPaths] = None,
        scheduler: Optional[Scheduler] = None,
        runner: Optional[FetchRunner] = None,
        fetcher: Optional[PageFetcher] = None,
    ) -> "AppContainer":
        paths = paths or AppPaths.default()
        return cls(
            settings=settings or AppSettings.load(paths.config_path),
            paths=paths,
            _scheduler=scheduler,
            _runner=runner,
            _fetcher=fetcher,
        )
