# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""Package pjlink_client provides an API for controlling projectors and
displays via the PJLink Class 1 TCP/IP protocol.
"""

from .version import __version__

from .pkg_logging import logger

from .internal_types import Jsonable, JsonableDict

from .exceptions import (
    PjLinkError,
    PjLinkErrorCode,
    ConfigurationError,
    TransportError,
    ProtocolError,
    MalformedResponse,
    CommandRejected,
  )

from .constants import DEFAULT_PORT, DEFAULT_TIMEOUT

from .client import (
    PjLinkClient,
    PjLinkClientConfig,
    PjLinkConnector,
    TcpPjLinkConnector,
    PjLinkSession,
    TcpPjLinkSession,
  )

from .protocol import (
    PjLinkCommand,
    PjLinkResponse,
    CommandMeta,
    PowerState,
    InputFamily,
    InputSource,
    MuteAxis,
    MuteState,
    ErrorStatus,
    LampInfo,
    get_all_commands,
    name_to_command_meta,
    get_power_description,
    get_input_description,
    get_mute_description,
    get_severity_description,
    derive_auth_token,
  )
