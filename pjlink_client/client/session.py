# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink client abstract session interface.

A session is one connection to a device, from the greeting to a single
command/response exchange. Sessions are never reused: every client operation
creates its own session and closes it when the operation ends, since the
authentication seed in the greeting is only valid for one connection.

This abstraction allows for alternate network transports and test doubles.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..internal_types import *

class PjLinkSession(ABC):
    auth_prefix: Optional[str] = None
    """The authentication token derived from this session's greeting, or None if
       the device does not require authentication."""

    @property
    def requires_auth(self) -> bool:
        return self.auth_prefix is not None

    @abstractmethod
    async def transact(self, command_body: str) -> str:
        """Sends a command body (e.g., "%1POWR ?"), prefixed with the authentication
        token if required, and returns the decoded response frame.

        Must be implemented by subclasses.
        """
        raise NotImplementedError()

    @abstractmethod
    async def aclose(self) -> None:
        """Closes the connection and waits for cleanup. Never raises.

        Has no effect if the session is already closed.

        Must be implemented by subclasses.
        """
        raise NotImplementedError()

    async def __aenter__(self) -> PjLinkSession:
        """Enters a context that will close the session on exit."""
        return self

    async def __aexit__(
            self,
            exc_type: Optional[Type[BaseException]],
            exc: Optional[BaseException],
            tb: Optional[TracebackType],
          ) -> None:
        """Exits the context and closes the session."""
        await self.aclose()
