# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

from __future__ import annotations

from ..internal_types import *
from ..exceptions import ProtocolError, CommandRejected, PjLinkErrorCode
from .constants import COMMAND_PREFIX, ASSIGNMENT_DELIMITER, MNEMONIC_LENGTH
from .handshake import PJLINK_ERRA

if TYPE_CHECKING:
    from .command import PjLinkCommand

class PjLinkResponse:
    """A response to a PJLink command

    Response frames are of the form:

        %1<mnemonic>=<value>

    where <mnemonic> echoes the command's mnemonic. In place of a value, the
    device may return one of the error markers ERR1, ERR2, ERR3, ERR4 or ERRA.
    A device that rejects the authentication token replies with the bare frame
    "PJLINK ERRA" instead.
    """
    command: PjLinkCommand
    raw_line: str
    value: str
    error_code: Optional[PjLinkErrorCode]

    def __init__(self, command: PjLinkCommand, raw_line: str):
        self.command = command
        self.raw_line = raw_line
        if raw_line.strip().upper() == PJLINK_ERRA:
            self.value = PjLinkErrorCode.AUTHENTICATION_ERROR.value
            self.error_code = PjLinkErrorCode.AUTHENTICATION_ERROR
            return
        header_length = len(COMMAND_PREFIX) + MNEMONIC_LENGTH
        if not raw_line.startswith(COMMAND_PREFIX):
            raise ProtocolError(f"Response to {command} does not start with {COMMAND_PREFIX!r}: {raw_line!r}")
        if len(raw_line) <= header_length or raw_line[header_length] != ASSIGNMENT_DELIMITER:
            raise ProtocolError(f"Response to {command} has no {ASSIGNMENT_DELIMITER!r} delimiter: {raw_line!r}")
        mnemonic = raw_line[len(COMMAND_PREFIX):header_length]
        if mnemonic.upper() != command.mnemonic:
            raise ProtocolError(f"Response mnemonic {mnemonic!r} does not match command {command}: {raw_line!r}")
        self.value = raw_line[header_length + 1:]
        self.error_code = PjLinkErrorCode.from_marker(self.value)

    @property
    def name(self) -> str:
        return f"Response<{self.command.name}>"

    @property
    def is_error(self) -> bool:
        """Returns True iff the device returned an error marker"""
        return self.error_code is not None

    @property
    def is_ok(self) -> bool:
        """Returns True iff the device acknowledged a set command with "OK" """
        return self.value.strip().upper() == "OK"

    def raise_for_error(self) -> None:
        """Raises CommandRejected if the device returned an error marker"""
        if self.error_code is not None:
            raise CommandRejected(self.error_code, self.command.name)

    def __str__(self) -> str:
        return f"PjLinkResponse({self.command.name}: {self.raw_line!r})"

    def __repr__(self) -> str:
        return str(self)
