"""Page fetchers for the remote source."""

from .demo_page_fetcher import DemoPageFetcher
from .ipc_page_fetcher import IPCPageFetcher
from .websocket_page_fetcher import WebSocketPageFetcher

__all__ = ["DemoPageFetcher", "IPCPageFetcher", "WebSocketPageFetcher"]
