"""Manager classes for list state."""

from .list_intent_handler import ListIntentHandler
from .list_store import PaginatedListStore
from .retry_timer import RetryTimer

__all__ = [
    "ListIntentHandler",
    "PaginatedListStore",
    "RetryTimer",
]
