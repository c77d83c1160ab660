"""Domain models and errors."""

from .errors import ContractViolationError, FetchError, NetworkError
from .records import (
    CountdownSnapshot,
    ListPhase,
    ListState,
    MergeResult,
    Page,
    Record,
)

__all__ = [
    "ContractViolationError",
    "CountdownSnapshot",
    "FetchError",
    "ListPhase",
    "ListState",
    "MergeResult",
    "NetworkError",
    "Page",
    "Record",
]
