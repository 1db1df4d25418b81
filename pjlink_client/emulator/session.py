# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
One client connection to the PJLink emulator.
"""

from __future__ import annotations

import asyncio
import secrets

from ..internal_types import *
from ..pkg_logging import logger
from ..protocol import (
    END_OF_FRAME_BYTES,
    AUTH_TOKEN_LENGTH,
    PJLINK_NO_AUTH,
    PJLINK_AUTH,
    PJLINK_ERRA,
    encode_frame,
    decode_frame,
    derive_auth_token,
  )

if TYPE_CHECKING:
    from .emulator_impl import PjLinkEmulator

class PjLinkEmulatorSession:
    """Serves a single connection: sends the greeting, checks the authentication
       token on the first command, then answers commands until the client
       disconnects."""
    emulator: PjLinkEmulator
    reader: asyncio.StreamReader
    writer: asyncio.StreamWriter
    session_id: int
    seed: Optional[str] = None
    authenticated: bool = False

    def __init__(
            self,
            emulator: PjLinkEmulator,
            reader: asyncio.StreamReader,
            writer: asyncio.StreamWriter,
          ):
        self.emulator = emulator
        self.reader = reader
        self.writer = writer
        self.session_id = emulator.alloc_session_id(self)

    def make_greeting(self) -> str:
        if self.emulator.greeting is not None:
            # canned greetings skip authentication
            self.authenticated = True
            return self.emulator.greeting
        if self.emulator.password is None:
            self.authenticated = True
            return PJLINK_NO_AUTH
        self.seed = self.emulator.seed if self.emulator.seed is not None else secrets.token_hex(4)
        return f"{PJLINK_AUTH} {self.seed}"

    def write(self, frame: str) -> None:
        logger.debug(f"{self}: Sending frame: {frame!r}")
        self.writer.write(encode_frame(frame))

    def check_auth(self, frame: str) -> Optional[str]:
        """Strips and verifies the authentication token on the first command.
           Returns the command without the token, or None if the token is wrong."""
        assert self.emulator.password is not None and self.seed is not None
        expected = derive_auth_token(self.seed, self.emulator.password)
        if frame[:AUTH_TOKEN_LENGTH] != expected:
            return None
        self.authenticated = True
        return frame[AUTH_TOKEN_LENGTH:]

    async def run(self) -> None:
        try:
            self.write(self.make_greeting())
            await self.writer.drain()
            while True:
                try:
                    data = await self.reader.readuntil(END_OF_FRAME_BYTES)
                except asyncio.IncompleteReadError:
                    logger.debug(f"{self}: Client disconnected")
                    break
                frame = decode_frame(data)
                logger.debug(f"{self}: Received frame: {frame!r}")
                self.emulator.received_frames.append(frame)
                if self.emulator.silent:
                    continue
                if not self.authenticated:
                    command = self.check_auth(frame)
                    if command is None:
                        logger.debug(f"{self}: Authentication failed")
                        self.write(PJLINK_ERRA)
                        await self.writer.drain()
                        break
                    frame = command
                self.write(self.emulator.handle_command(frame))
                await self.writer.drain()
        except ConnectionError as e:
            logger.debug(f"{self}: Connection lost: {e}")
        finally:
            self.emulator.free_session_id(self.session_id)
            try:
                self.writer.close()
                await self.writer.wait_closed()
            except Exception:
                logger.debug(f"{self}: Exception while closing connection", exc_info=True)

    def __str__(self) -> str:
        return f"PjLinkEmulatorSession({self.session_id})"

    def __repr__(self) -> str:
        return str(self)
