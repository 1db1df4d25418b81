# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink challenge-response authentication.

A device that requires authentication sends a random seed in its greeting.
The client proves knowledge of the password by prefixing its first command
with MD5(seed + password), rendered as 32 lowercase hex characters.
"""

from __future__ import annotations

import hashlib

from .constants import FRAME_ENCODING

def derive_auth_token(seed: str, secret: str) -> str:
    """Returns the authentication token for a greeting seed and a password.

    An empty password is valid; the token is then the digest of the seed alone.
    """
    data = (seed + secret).encode(FRAME_ENCODING)
    return hashlib.md5(data).hexdigest()
