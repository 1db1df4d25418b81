#
# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""Exceptions defined by this package"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

class PjLinkErrorCode(Enum):
    """Error markers a PJLink device may return in place of a response value."""
    UNDEFINED_COMMAND = "ERR1"
    OUT_OF_PARAMETER = "ERR2"
    UNAVAILABLE_TIME = "ERR3"
    PROJECTOR_FAILURE = "ERR4"
    AUTHENTICATION_ERROR = "ERRA"

    @classmethod
    def from_marker(cls, marker: str) -> Optional[PjLinkErrorCode]:
        """Returns the error code for a response value, or None if the value is not an error marker."""
        try:
            return cls(marker.strip().upper())
        except ValueError:
            return None

error_code_descriptions: Dict[PjLinkErrorCode, str] = {
    PjLinkErrorCode.UNDEFINED_COMMAND: "Undefined command",
    PjLinkErrorCode.OUT_OF_PARAMETER: "Out of parameter",
    PjLinkErrorCode.UNAVAILABLE_TIME: "Unavailable time",
    PjLinkErrorCode.PROJECTOR_FAILURE: "Projector/Display failure",
    PjLinkErrorCode.AUTHENTICATION_ERROR: "Authentication error",
  }

class PjLinkError(Exception):
    """Base class for all error exceptions defined by this package."""
    pass

class ConfigurationError(PjLinkError):
    """The client configuration (host, port or password) is invalid."""
    pass

class TransportError(PjLinkError):
    """The TCP connection could not be established, was reset, or timed out."""
    pass

class ProtocolError(PjLinkError):
    """The device sent a greeting or frame that does not follow the protocol."""
    pass

class MalformedResponse(ProtocolError):
    """A well-formed response frame carried a value of the wrong shape."""
    pass

class CommandRejected(PjLinkError):
    """The device answered a command with one of the ERR markers."""
    error_code: PjLinkErrorCode
    command_name: Optional[str]

    def __init__(self, error_code: PjLinkErrorCode, command_name: Optional[str]=None):
        self.error_code = error_code
        self.command_name = command_name
        description = error_code_descriptions[error_code]
        if command_name is None:
            msg = f"Command rejected by device: {error_code.value} ({description})"
        else:
            msg = f"Command {command_name} rejected by device: {error_code.value} ({description})"
        super().__init__(msg)
