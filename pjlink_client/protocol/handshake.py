# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

from __future__ import annotations

from typing import Optional

from ..exceptions import ProtocolError
from .auth import derive_auth_token

# Initial connection handshake:
#   Device: "PJLINK 0\r" if no authentication is required, or
#           "PJLINK 1 <seed>\r" if authentication is required
#   Client: the first command, prefixed with MD5(<seed> + <password>) if
#           authentication is required
#   Device: the response, or "PJLINK ERRA\r" if the token is wrong

PJLINK_GREETING = "PJLINK "
"""Every greeting starts with this marker, followed by a version digit."""

PJLINK_NO_AUTH = PJLINK_GREETING + "0"
"""Greeting sent by a device that does not require authentication."""

PJLINK_AUTH = PJLINK_GREETING + "1"
"""Greeting prefix sent by a device that requires authentication. The seed follows
   after a single space."""

PJLINK_ERRA = PJLINK_GREETING + "ERRA"
"""Sent by the device in place of a response when the authentication token is wrong."""

def parse_greeting(greeting: str, password: str) -> Optional[str]:
    """Interprets a decoded greeting frame.

    Returns None if the device does not require authentication, or the
    authentication token to prefix onto the next command if it does.

    Raises ProtocolError unless the greeting is exactly "PJLINK 0", or "PJLINK 1"
    followed by a single space and a non-empty seed.
    """
    if greeting == PJLINK_NO_AUTH:
        return None
    if greeting.startswith(PJLINK_AUTH + " "):
        seed = greeting[len(PJLINK_AUTH) + 1:]
        if seed != "" and " " not in seed:
            return derive_auth_token(seed, password)
    raise ProtocolError(f"Handshake: invalid greeting: {greeting!r}")
