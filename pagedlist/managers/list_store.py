"""Paginated list state machine with dedup and time-gated retry."""

import logging
from functools import partial
from typing import Callable, Iterable, List, Optional, Set

from pagedlist.core.protocols import FetchRunner, PageFetcher, Scheduler
from pagedlist.domain import (
    ContractViolationError,
    FetchError,
    ListPhase,
    ListState,
    MergeResult,
    Page,
    Record,
)

from .retry_timer import RetryTimer

logger = logging.getLogger("PagedList.Store")

StateObserver = Callable[[ListState], None]


class PaginatedListStore:
    """Sole owner and mutator of the accumulated list.

    All intent methods return True when honored and False when rejected.
    A rejected intent leaves the state untouched and is never queued.
    """

    def __init__(
        self,
        fetcher: PageFetcher,
        runner: FetchRunner,
        scheduler: Scheduler,
        retry_delay_seconds: int = 5,
        refresh_delay_seconds: int = 3,
        backoff_factor: float = 1.0,
        max_retry_delay_seconds: int = 60,
    ):
        """Initialize PaginatedListStore.

        Args:
            fetcher: Remote page source
            runner: Runs fetches off the main loop and reports back on it
            scheduler: Main-loop scheduler driving the countdowns
            retry_delay_seconds: Countdown before retry after a failure
            refresh_delay_seconds: Countdown before refresh from the empty state
            backoff_factor: Growth of the retry delay per consecutive failure
            max_retry_delay_seconds: Upper bound for the retry delay
        """
        self.fetcher = fetcher
        self.runner = runner
        self.scheduler = scheduler
        self.retry_delay_seconds = retry_delay_seconds
        self.refresh_delay_seconds = refresh_delay_seconds
        self.backoff_factor = backoff_factor
        self.max_retry_delay_seconds = max_retry_delay_seconds

        self._phase = ListPhase.IDLE
        self._records: List[Record] = []
        self._seen_ids: Set[int] = set()
        self._cursor: Optional[str] = None
        self._last_error: Optional[FetchError] = None
        self._last_merge: Optional[MergeResult] = None
        self._generation = 0
        self._consecutive_failures = 0
        self._retry_timer: Optional[RetryTimer] = None
        self._refresh_timer: Optional[RetryTimer] = None
        self._observers: List[StateObserver] = []

    # Observers

    def add_observer(self, observer: StateObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: StateObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    @property
    def phase(self) -> ListPhase:
        return self._phase

    @property
    def state(self) -> ListState:
        return ListState(
            phase=self._phase,
            records=tuple(self._records),
            seen_ids=frozenset(self._seen_ids),
            cursor=self._cursor,
            last_error=self._last_error,
            retry_countdown=(
                self._retry_timer.snapshot() if self._retry_timer else None
            ),
            refresh_countdown=(
                self._refresh_timer.snapshot() if self._refresh_timer else None
            ),
            last_merge=self._last_merge,
        )

    # Intents

    def initial_load(self) -> bool:
        if self._phase is not ListPhase.IDLE:
            logger.debug(f"initial_load rejected in phase {self._phase.value}")
            return False
        self._issue_fetch(None)
        return True

    def can_load_more(self) -> bool:
        return self._phase is ListPhase.SETTLED and self._cursor is not None

    def load_more(self) -> bool:
        if not self.can_load_more():
            logger.debug(
                f"load_more rejected (phase={self._phase.value}, "
                f"cursor={self._cursor})"
            )
            return False
        self._issue_fetch(self._cursor)
        return True

    def should_load_more(self, row_index: int) -> bool:
        """Whether showing ``row_index`` should trigger a load-more."""
        return row_index == len(self._records) - 1 and self.can_load_more()

    def retry(self) -> bool:
        """Re-issue the failed fetch once the retry countdown has elapsed."""
        if self._phase is not ListPhase.ERROR:
            logger.debug(f"retry rejected in phase {self._phase.value}")
            return False
        if self._retry_timer is not None and not self._retry_timer.expired:
            logger.debug(
                f"retry rejected, {self._retry_timer.remaining_seconds}s left"
            )
            return False

        self._discard_timers()
        # The cursor is only advanced on success, so it still points at the
        # page that failed.
        self._issue_fetch(self._cursor)
        return True

    def manual_refresh(self) -> bool:
        """Reload from the empty state once its countdown has elapsed."""
        if self._phase is not ListPhase.EMPTY:
            logger.debug(f"manual_refresh rejected in phase {self._phase.value}")
            return False
        if self._refresh_timer is not None and not self._refresh_timer.expired:
            logger.debug(
                f"manual_refresh rejected, "
                f"{self._refresh_timer.remaining_seconds}s left"
            )
            return False
        return self.reset()

    def reset(self) -> bool:
        """Drop everything, abandon any outstanding fetch and load again."""
        logger.info(f"Resetting list ({len(self._records)} records dropped)")
        self._discard_timers()
        self._generation += 1
        self._records = []
        self._seen_ids = set()
        self._cursor = None
        self._last_error = None
        self._last_merge = None
        self._consecutive_failures = 0
        self._set_phase(ListPhase.IDLE)
        return self.initial_load()

    # Merge

    def merge(self, records: Iterable[Record]) -> MergeResult:
        """Append unseen records in order and drop ids already present."""
        appended = 0
        discarded = 0
        for record in records:
            if record.id in self._seen_ids:
                discarded += 1
                continue
            self._records.append(record)
            self._seen_ids.add(record.id)
            appended += 1
        return MergeResult(appended=appended, discarded=discarded)

    # Fetch lifecycle

    def _issue_fetch(self, cursor: Optional[str]) -> None:
        self._generation += 1
        generation = self._generation
        logger.info(f"Fetching page (cursor={cursor}, generation={generation})")
        self._set_phase(ListPhase.LOADING)
        self.runner.submit(
            self.fetcher.fetch(cursor),
            partial(self._on_fetch_done, generation, cursor),
        )

    def _on_fetch_done(
        self,
        generation: int,
        cursor: Optional[str],
        page: Optional[Page],
        error: Optional[FetchError],
    ) -> None:
        if (page is None) == (error is None):
            raise ContractViolationError(
                "Fetch must complete with exactly one of page or error"
            )

        if generation != self._generation or self._phase is not ListPhase.LOADING:
            logger.debug(f"Ignoring stale result of generation {generation}")
            return

        if error is not None:
            self._handle_failure(cursor, error)
        else:
            self._handle_success(cursor, page)

    def _handle_success(self, cursor: Optional[str], page: Page) -> None:
        result = self.merge(page.records)
        self._last_merge = result
        self._cursor = page.next_cursor
        self._last_error = None
        self._consecutive_failures = 0
        logger.info(
            f"Fetched {len(page.records)} records with cursor {cursor} "
            f"({result.appended} new, {result.discarded} duplicates, "
            f"next={page.next_cursor})"
        )

        if not self._records and page.next_cursor is None:
            self._refresh_timer = self._new_timer(self.refresh_delay_seconds)
            self._set_phase(ListPhase.EMPTY, notify=False)
            self._refresh_timer.start()
            self._notify()
        else:
            self._set_phase(ListPhase.SETTLED)

    def _handle_failure(self, cursor: Optional[str], error: FetchError) -> None:
        self._last_error = error
        self._consecutive_failures += 1
        delay = self._retry_delay()
        logger.warning(
            f"Fetch failed with cursor {cursor}: {error.description} "
            f"(retry in {delay}s)"
        )
        self._retry_timer = self._new_timer(delay)
        self._set_phase(ListPhase.ERROR, notify=False)
        self._retry_timer.start()
        self._notify()

    def _retry_delay(self) -> int:
        delay = self.retry_delay_seconds * (
            self.backoff_factor ** (self._consecutive_failures - 1)
        )
        return int(min(self.max_retry_delay_seconds, delay))

    # Timers

    def _new_timer(self, seconds: int) -> RetryTimer:
        self._discard_timers()
        return RetryTimer(
            self.scheduler,
            seconds,
            on_tick=lambda remaining: self._notify(),
            on_expired=self._notify,
        )

    def _discard_timers(self) -> None:
        if self._retry_timer is not None:
            self._retry_timer.cancel()
            self._retry_timer = None
        if self._refresh_timer is not None:
            self._refresh_timer.cancel()
            self._refresh_timer = None

    # Notification

    def _set_phase(self, phase: ListPhase, notify: bool = True) -> None:
        self._phase = phase
        if notify:
            self._notify()

    def _notify(self) -> None:
        state = self.state
        for observer in list(self._observers):
            observer(state)
