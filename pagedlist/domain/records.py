"""List domain models."""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional, Tuple

from .errors import FetchError


@dataclass(frozen=True)
class Record:
    """A single row of the list, identified by its id."""

    id: int
    display_name: str


@dataclass(frozen=True)
class Page:
    """One batch returned by the remote source.

    A ``next_cursor`` of None means there are no further pages.
    """

    records: Tuple[Record, ...] = ()
    next_cursor: Optional[str] = None


class ListPhase(Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    SETTLED = "settled"
    EMPTY = "empty"


@dataclass(frozen=True)
class MergeResult:
    """Outcome of merging a page into the accumulated records."""

    appended: int = 0
    discarded: int = 0


@dataclass(frozen=True)
class CountdownSnapshot:
    remaining_seconds: int
    active: bool

    @property
    def enabled(self) -> bool:
        """Whether the guarded action is unlocked."""
        return not self.active and self.remaining_seconds == 0


@dataclass(frozen=True)
class ListState:
    """Immutable snapshot of the store, handed to observers."""

    phase: ListPhase = ListPhase.IDLE
    records: Tuple[Record, ...] = ()
    seen_ids: FrozenSet[int] = frozenset()
    cursor: Optional[str] = None
    last_error: Optional[FetchError] = None
    retry_countdown: Optional[CountdownSnapshot] = None
    refresh_countdown: Optional[CountdownSnapshot] = None
    last_merge: Optional[MergeResult] = None

    @property
    def loading(self) -> bool:
        return self.phase is ListPhase.LOADING

    @property
    def has_more(self) -> bool:
        return self.cursor is not None
