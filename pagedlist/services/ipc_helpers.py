"""Length-prefixed JSON messaging over UNIX domain sockets."""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Optional

logger = logging.getLogger("PagedList.IPC.Helpers")


class ConnectionClosedError(ConnectionError):
    """Raised when the peer closed the connection."""


def frame_message(message: str) -> bytes:
    """Encode ``message`` as ``<length>\\n<message>\\n``."""
    message_bytes = message.encode("utf-8") + b"\n"
    return f"{len(message_bytes)}\n".encode("utf-8") + message_bytes


async def read_message(reader: asyncio.StreamReader) -> str:
    if reader.at_eof():
        raise ConnectionClosedError("IPC connection is closed")

    length_line = await reader.readuntil(b"\n")
    message_length = int(length_line.decode("utf-8").strip())
    message_bytes = await reader.readexactly(message_length)
    return message_bytes.decode("utf-8").rstrip("\n")


class IPCConnection:
    """A single client connection to the page server."""

    def __init__(self, socket_path: str):
        self.socket_path = socket_path
        self._reader: Optional[asyncio.StreamReader] = None
        self._writer: Optional[asyncio.StreamWriter] = None

    async def __aenter__(self):
        self._reader, self._writer = await asyncio.open_unix_connection(
            self.socket_path
        )
        logger.debug(f"Connected to {self.socket_path}")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._writer:
            self._writer.close()
            try:
                await self._writer.wait_closed()
            except ConnectionError as e:
                logger.debug(f"Error while closing IPC connection: {e}")

    async def send(self, message: str):
        if not self._writer or self._writer.is_closing():
            raise ConnectionClosedError("IPC connection is closed")

        self._writer.write(frame_message(message))
        await self._writer.drain()

    async def recv(self) -> str:
        if not self._reader:
            raise ConnectionClosedError("IPC connection is closed")
        return await read_message(self._reader)


@asynccontextmanager
async def connect(socket_path: str):
    """
    Connect to the page server via UNIX domain socket

    Args:
        socket_path: Path to the UNIX socket

    Yields:
        IPCConnection object with send/recv methods
    """
    async with IPCConnection(socket_path) as connection:
        yield connection
