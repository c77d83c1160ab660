"""Page fetcher talking to the page server over WebSocket."""

import asyncio
import logging
from typing import Optional

import websockets

from pagedlist.domain import NetworkError, Page

from .page_codec import build_request, decode_page

logger = logging.getLogger("PagedList.WebSocketPageFetcher")


class WebSocketPageFetcher:
    def __init__(self, uri: str, max_size: int = 2**20, timeout: float = 10.0):
        self.uri = uri
        self.max_size = max_size
        self.timeout = timeout

    async def fetch(self, cursor: Optional[str]) -> Page:
        try:
            async with websockets.connect(
                self.uri, max_size=self.max_size, open_timeout=self.timeout
            ) as websocket:
                await websocket.send(build_request(cursor))
                response = await asyncio.wait_for(
                    websocket.recv(), timeout=self.timeout
                )
        except asyncio.TimeoutError as e:
            raise NetworkError(
                f"Request timed out after {self.timeout:g} seconds"
            ) from e
        except websockets.exceptions.WebSocketException as e:
            logger.warning(f"WebSocket request failed: {e}")
            raise NetworkError(str(e) or type(e).__name__) from e
        except OSError as e:
            logger.warning(f"WebSocket connection failed: {e}")
            raise NetworkError(str(e) or type(e).__name__) from e

        return decode_page(response)
