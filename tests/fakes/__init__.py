"""Test fakes."""
from .fake_page_fetcher import FakePageFetcher, make_page
from .fake_scheduler import FakeScheduler
from .manual_fetch_runner import ManualFetchRunner
from .page_responses import encode_error, encode_page

__all__ = [
    "FakePageFetcher",
    "FakeScheduler",
    "ManualFetchRunner",
    "encode_error",
    "encode_page",
    "make_page",
]
