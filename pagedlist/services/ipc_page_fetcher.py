"""Page fetcher talking to the page server over a UNIX domain socket."""

import asyncio
import logging
from typing import Optional

from pagedlist.config.paths import AppPaths
from pagedlist.domain import NetworkError, Page

from .ipc_helpers import connect as ipc_connect
from .page_codec import build_request, decode_page

logger = logging.getLogger("PagedList.IPCPageFetcher")


class IPCPageFetcher:
    def __init__(self, socket_path: Optional[str] = None, timeout: float = 10.0):
        self.socket_path = socket_path or str(AppPaths.default().socket_path)
        self.timeout = timeout

    async def fetch(self, cursor: Optional[str]) -> Page:
        try:
            response = await asyncio.wait_for(
                self._request(cursor), timeout=self.timeout
            )
        except asyncio.TimeoutError as e:
            raise NetworkError(
                f"Request timed out after {self.timeout:g} seconds"
            ) from e
        except asyncio.IncompleteReadError as e:
            raise NetworkError("Connection closed before a response arrived") from e
        except (OSError, ValueError, asyncio.LimitOverrunError) as e:
            logger.warning(f"IPC request failed: {type(e).__name__}: {e}")
            raise NetworkError(str(e) or type(e).__name__) from e

        return decode_page(response)

    async def _request(self, cursor: Optional[str]) -> str:
        async with ipc_connect(self.socket_path) as conn:
            await conn.send(build_request(cursor))
            return await conn.recv()
