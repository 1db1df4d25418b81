# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""Constants used by pjlink_client"""

from typing import Optional

DEFAULT_PORT = 4352
"""The listen port number used by PJLink devices for TCP/IP control."""

DEFAULT_TIMEOUT: Optional[float] = None
"""The default timeout for each connect, send and receive step, in seconds.
   None means no timeout beyond what the operating system imposes."""

MAX_PASSWORD_LENGTH = 32
"""PJLink passwords are at most 32 ASCII characters."""
