"""Core interfaces and dependency injection."""

from .protocols import FetchCallback, FetchRunner, PageFetcher, Scheduler

__all__ = [
    "FetchCallback",
    "FetchRunner",
    "PageFetcher",
    "Scheduler",
]
