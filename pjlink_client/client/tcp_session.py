# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink TCP/IP client session.

Provides an implementation of PjLinkSession over a TCP/IP socket, including
the greeting handshake.
"""

from __future__ import annotations

import asyncio

from ..internal_types import *
from ..exceptions import TransportError, ProtocolError
from ..constants import DEFAULT_TIMEOUT, DEFAULT_PORT
from ..pkg_logging import logger
from ..protocol import (
    END_OF_FRAME_BYTES,
    encode_frame,
    decode_frame,
    parse_greeting,
  )

from .session import PjLinkSession

_T = TypeVar('_T')

class TcpPjLinkSession(PjLinkSession):
    """PJLink TCP/IP client session."""

    reader: Optional[asyncio.StreamReader] = None
    writer: Optional[asyncio.StreamWriter] = None
    host: str
    port: int
    password: str
    timeout_secs: Optional[float]
    closed: bool = False

    def __init__(
            self,
            host: str,
            password: str='',
            port: int=DEFAULT_PORT,
            timeout_secs: Optional[float]=DEFAULT_TIMEOUT
          ) -> None:
        """Initializes the session. Does not connect."""
        super().__init__()
        self.host = host
        self.port = port
        self.password = password
        self.timeout_secs = timeout_secs

    async def _io(self, aw: Awaitable[_T], activity: str) -> _T:
        """Awaits a connect/read/write step with timeout, converting OS-level and
        timeout failures into TransportError."""
        try:
            return await asyncio.wait_for(aw, self.timeout_secs)
        except asyncio.TimeoutError as e:
            raise TransportError(f"{self}: Timed out while {activity}") from e
        except OSError as e:
            raise TransportError(f"{self}: Failed while {activity}: {e}") from e

    async def _read_frame(self, activity: str) -> str:
        """Reads a single frame from the device, with timeout.

        A connection closed after a partial frame yields the partial frame;
        a connection closed before any data raises TransportError.
        """
        assert self.reader is not None
        try:
            data = await self._io(self.reader.readuntil(END_OF_FRAME_BYTES), activity)
        except asyncio.IncompleteReadError as e:
            if len(e.partial) == 0:
                raise TransportError(f"{self}: Connection closed by device while {activity}") from e
            logger.debug(f"Connection closed after unterminated frame: {e.partial!r}")
            data = e.partial
        except asyncio.LimitOverrunError as e:
            raise ProtocolError(f"{self}: Frame too long while {activity}") from e
        logger.debug(f"Read frame bytes: {data!r}")
        return decode_frame(data)

    async def _write_frame(self, frame: str, activity: str) -> None:
        """Writes a single frame to the device, with timeout."""
        assert self.writer is not None
        self.writer.write(encode_frame(frame))
        await self._io(self.writer.drain(), activity)

    async def connect(self) -> None:
        """Connects to the device and reads the greeting, with timeout.

        On error, the connection is closed before the exception propagates.
        """
        try:
            assert self.reader is None and self.writer is None
            logger.debug(f"Connecting to PJLink device at {self.host}:{self.port}")
            self.reader, self.writer = await self._io(
                asyncio.open_connection(self.host, self.port), "connecting")
            logger.debug(f"Handshake: Waiting for greeting")
            greeting = await self._read_frame("waiting for greeting")
            logger.debug(f"Handshake: Received greeting: {greeting!r}")
            self.auth_prefix = parse_greeting(greeting, self.password)
            if self.auth_prefix is None:
                logger.info(f"Handshake: {self} connected; no authentication required")
            else:
                logger.info(f"Handshake: {self} connected; authentication token derived from seed")
        except BaseException:
            await self.aclose()
            raise

    # @abstractmethod
    async def transact(self, command_body: str) -> str:
        """Sends a command body, prefixed with the authentication token if required,
        and reads one response frame."""
        if self.closed:
            raise TransportError(f"{self}: Session is closed")
        if self.auth_prefix is None:
            frame = command_body
            logger.debug(f"Writing command: {command_body!r}")
        else:
            frame = self.auth_prefix + command_body
            logger.debug(f"Writing command: <auth-token> + {command_body!r}")
        await self._write_frame(frame, "sending command")
        response = await self._read_frame("waiting for response")
        logger.debug(f"Received response: {response!r}")
        return response

    # @abstractmethod
    async def aclose(self) -> None:
        """Closes the connection and waits for cleanup. Never raises."""
        if self.closed:
            return
        self.closed = True
        if self.writer is not None:
            try:
                self.writer.close()
                await self.writer.wait_closed()
            except Exception:
                logger.debug("Exception while closing connection", exc_info=True)
        logger.debug(f"{self}: Connection closed")

    # @override
    async def __aenter__(self) -> TcpPjLinkSession:
        """Enters a context that will close the session on exit."""
        return self

    @classmethod
    async def create(
            cls,
            host: str,
            password: str='',
            port: int=DEFAULT_PORT,
            timeout_secs: Optional[float]=DEFAULT_TIMEOUT
          ) -> Self:
        """Creates and connects a session to a PJLink device that is reachable over TCP/IP.

              Args:
                host: The hostname or IP address of the device.
                password:
                      The PJLink password. May be empty.
                port: The TCP/IP port number to use.
                timeout_secs: The timeout for each connect, send and
                        receive step, or None for no timeout.
        """
        session = cls(host, password=password, port=port, timeout_secs=timeout_secs)
        await session.connect()
        # on error, the connection has already been closed
        return session

    def __str__(self) -> str:
        return f"TcpPjLinkSession({self.host}:{self.port})"

    def __repr__(self) -> str:
        return str(self)
