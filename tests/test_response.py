import pytest

from pjlink_client import (
    PjLinkCommand,
    PjLinkResponse,
    PjLinkErrorCode,
    ProtocolError,
    CommandRejected,
  )

def power_query() -> PjLinkCommand:
    return PjLinkCommand.create_from_name("power_status.query")

def test_value():
    response = PjLinkResponse(power_query(), "%1POWR=1")
    assert response.value == "1"
    assert not response.is_error
    response.raise_for_error()

def test_mnemonic_match_is_case_insensitive():
    assert PjLinkResponse(power_query(), "%1powr=0").value == "0"

def test_value_keeps_everything_after_first_delimiter():
    command = PjLinkCommand.create_from_name("projector_name.query")
    assert PjLinkResponse(command, "%1NAME=a=b").value == "a=b"

def test_empty_value():
    command = PjLinkCommand.create_from_name("input_list.query")
    assert PjLinkResponse(command, "%1INST=").value == ""

def test_ok_acknowledgement():
    command = PjLinkCommand.create_from_name("power.on")
    response = PjLinkResponse(command, "%1POWR=OK")
    assert response.is_ok
    assert not response.is_error

@pytest.mark.parametrize("marker, code", [
    ("ERR1", PjLinkErrorCode.UNDEFINED_COMMAND),
    ("ERR2", PjLinkErrorCode.OUT_OF_PARAMETER),
    ("ERR3", PjLinkErrorCode.UNAVAILABLE_TIME),
    ("ERR4", PjLinkErrorCode.PROJECTOR_FAILURE),
    ("ERRA", PjLinkErrorCode.AUTHENTICATION_ERROR),
  ])
def test_error_markers(marker, code):
    response = PjLinkResponse(power_query(), f"%1POWR={marker}")
    assert response.is_error
    assert response.error_code is code
    with pytest.raises(CommandRejected) as exc_info:
        response.raise_for_error()
    assert exc_info.value.error_code is code
    assert exc_info.value.command_name == "power_status.query"

def test_bare_authentication_error_frame():
    response = PjLinkResponse(power_query(), "PJLINK ERRA")
    assert response.error_code is PjLinkErrorCode.AUTHENTICATION_ERROR
    with pytest.raises(CommandRejected):
        response.raise_for_error()

@pytest.mark.parametrize("line", [
    "",
    "POWR=1",
    "%2POWR=1",
    "%1POWR 1",
    "%1POWR",
    "%1INPT=31",
    "PJLINK 0",
  ])
def test_malformed_frames(line):
    with pytest.raises(ProtocolError):
        PjLinkResponse(power_query(), line)
