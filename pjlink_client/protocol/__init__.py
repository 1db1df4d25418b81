# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
Low-level protocol definitions for PJLink Class 1 devices.

Refer to https://pjlink.jbmia.or.jp/english/ for the official protocol
documentation.
"""

from .constants import (
    FRAME_ENCODING,
    END_OF_FRAME,
    END_OF_FRAME_BYTES,
    COMMAND_PREFIX,
    QUERY_PARAMETER,
    AUTH_TOKEN_LENGTH,
  )

from .codec import (
    encode_frame,
    decode_frame,
  )

from .auth import (
    derive_auth_token,
  )

from .handshake import (
    PJLINK_GREETING,
    PJLINK_NO_AUTH,
    PJLINK_AUTH,
    PJLINK_ERRA,
    parse_greeting,
  )

from .values import (
    PowerState,
    InputFamily,
    InputSource,
    MuteAxis,
    MuteState,
    ErrorStatus,
    LampInfo,
    get_power_description,
    get_input_description,
    get_mute_description,
    get_severity_description,
  )

from .command_meta import (
    CommandMeta,
    get_all_commands,
    name_to_command_meta,
    mnemonic_to_command_metas,
  )

from .command import (
    PjLinkCommand,
  )

from .response import (
    PjLinkResponse,
  )

from .parsers import (
    parse_power_state,
    parse_input_source,
    parse_mute_state,
    parse_error_status,
    parse_lamp_info,
    parse_lamp_infos,
    parse_text,
    parse_input_list,
  )
