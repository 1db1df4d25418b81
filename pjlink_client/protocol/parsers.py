# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
Conversion of PJLink responses into typed values.

Every parser first checks the response for an error marker and raises
CommandRejected if one is present, before looking at the value. The one
exception is parse_input_list, which reports a rejected INST query as None.
"""

from __future__ import annotations

from ..internal_types import *
from ..exceptions import MalformedResponse, CommandRejected
from ..pkg_logging import logger
from .response import PjLinkResponse
from .values import (
    PowerState,
    InputSource,
    MuteState,
    ErrorStatus,
    LampInfo,
  )

def _parse_int(response: PjLinkResponse) -> int:
    text = response.value.strip()
    if not text.isdigit():
        raise MalformedResponse(f"Expected an integer value in {response}")
    return int(text)

def parse_power_state(response: PjLinkResponse) -> PowerState:
    response.raise_for_error()
    return PowerState.from_payload(response.value)

def parse_input_source(response: PjLinkResponse) -> InputSource:
    response.raise_for_error()
    return InputSource.from_code(_parse_int(response))

def parse_mute_state(response: PjLinkResponse) -> MuteState:
    response.raise_for_error()
    return MuteState.from_code(_parse_int(response))

def parse_error_status(response: PjLinkResponse) -> ErrorStatus:
    """Parses the six-digit ERST value, one digit per fault category."""
    response.raise_for_error()
    text = response.value.strip()
    if len(text) != len(ErrorStatus.field_names) or not all(c in '0123456789' for c in text):
        raise MalformedResponse(f"Expected exactly {len(ErrorStatus.field_names)} digits in {response}")
    return ErrorStatus(**dict(zip(ErrorStatus.field_names, (int(c) for c in text))))

def parse_lamp_infos(response: PjLinkResponse) -> List[LampInfo]:
    """Parses a LAMP value, which holds one "<hours> <on>" pair per lamp."""
    response.raise_for_error()
    parts = response.value.split()
    if len(parts) == 0 or len(parts) % 2 != 0:
        raise MalformedResponse(f"Expected pairs of lamp hours and state in {response}")
    result: List[LampInfo] = []
    for hours_str, state_str in zip(parts[0::2], parts[1::2]):
        if not hours_str.isdigit() or state_str not in ('0', '1'):
            raise MalformedResponse(f"Invalid lamp hours/state {hours_str!r} {state_str!r} in {response}")
        result.append(LampInfo(int(hours_str), state_str == '1'))
    return result

def parse_lamp_info(response: PjLinkResponse) -> LampInfo:
    """Parses a LAMP value and returns the first lamp"""
    return parse_lamp_infos(response)[0]

def parse_text(response: PjLinkResponse) -> str:
    """Returns the trimmed value of a NAME/INF1/INF2/INFO/CLSS response. May be empty."""
    response.raise_for_error()
    return response.value.strip()

def parse_input_list(response: PjLinkResponse) -> Optional[List[InputSource]]:
    """Parses an INST value into the list of input sources the device has, in wire order.

    Returns None if the device rejected the query, meaning it cannot enumerate
    its inputs. Tokens that are not integers or not defined input codes are
    dropped.
    """
    try:
        response.raise_for_error()
    except CommandRejected as e:
        logger.debug(f"Input list not supported by device: {e}")
        return None
    result: List[InputSource] = []
    for token in response.value.split():
        if not token.isdigit():
            logger.debug(f"Ignoring non-numeric input code {token!r} in {response}")
            continue
        source = InputSource.from_code(int(token))
        if source is InputSource.UNKNOWN:
            logger.debug(f"Ignoring undefined input code {token!r} in {response}")
            continue
        result.append(source)
    return result
