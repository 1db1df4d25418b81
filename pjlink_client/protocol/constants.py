# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
Frame-level constants of the PJLink Class 1 protocol.

Every frame in either direction is a single line of ASCII text terminated by
a carriage return:

    Greeting:  "PJLINK 0" or "PJLINK 1 <seed>"
    Command:   [<auth-token>]"%1" <mnemonic> " " <parameter>
    Response:  "%1" <mnemonic> "=" <value>
"""

from __future__ import annotations

FRAME_ENCODING = 'ascii'
"""All frames are single-byte-per-character ASCII."""

END_OF_FRAME = '\r'
"""Terminates every frame sent or received."""

END_OF_FRAME_BYTES = END_OF_FRAME.encode(FRAME_ENCODING)

COMMAND_PREFIX = '%1'
"""Header prepended to every Class 1 command and response."""

QUERY_PARAMETER = '?'
"""Parameter that turns a command into a query."""

ASSIGNMENT_DELIMITER = '='
"""Separates the mnemonic from the value in a response."""

MNEMONIC_LENGTH = 4
"""Every command mnemonic (e.g., POWR) is exactly four characters."""

AUTH_TOKEN_LENGTH = 32
"""Authentication tokens are MD5 digests rendered as lowercase hex."""
