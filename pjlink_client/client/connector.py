# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink client abstract session connector interface.

Provides a low-level abstract interface for objects that can create
connected sessions (including the greeting handshake) to a PJLink device.
This abstraction allows for alternate network transports and test doubles.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..internal_types import *
from .session import PjLinkSession

class PjLinkConnector(ABC):
    """Abstract base class for PJLink client session connectors."""

    @abstractmethod
    async def connect(self) -> PjLinkSession:
        """Create and initialize (including greeting handshake) a new session
           for the device associated with this connector. The caller owns the
           session and must close it.

        Must be implemented by subclasses.
        """
        raise NotImplementedError()
