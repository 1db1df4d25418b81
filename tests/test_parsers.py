import pytest

from pjlink_client import (
    PjLinkCommand,
    PjLinkResponse,
    PjLinkErrorCode,
    PowerState,
    InputSource,
    MuteState,
    ErrorStatus,
    LampInfo,
    CommandRejected,
    MalformedResponse,
    ProtocolError,
  )
from pjlink_client.protocol import (
    parse_power_state,
    parse_input_source,
    parse_mute_state,
    parse_error_status,
    parse_lamp_info,
    parse_lamp_infos,
    parse_text,
    parse_input_list,
  )

def response(command_name: str, line: str) -> PjLinkResponse:
    return PjLinkResponse(PjLinkCommand.create_from_name(command_name), line)

@pytest.mark.parametrize("value, expected", [
    ("0", PowerState.STANDBY),
    ("1", PowerState.POWERED_ON),
    ("2", PowerState.COOLING),
    ("3", PowerState.WARM_UP),
    ("7", PowerState.UNKNOWN),
    ("garbage", PowerState.UNKNOWN),
  ])
def test_power_state(value, expected):
    assert parse_power_state(response("power_status.query", f"%1POWR={value}")) is expected

def test_power_state_rejected():
    with pytest.raises(CommandRejected) as exc_info:
        parse_power_state(response("power.on", "%1POWR=ERR3"))
    assert exc_info.value.error_code is PjLinkErrorCode.UNAVAILABLE_TIME

def test_input_source():
    assert parse_input_source(response("input_status.query", "%1INPT=31")) is InputSource.DIGITAL_DVI_DIGITAL
    assert parse_input_source(response("input_status.query", "%1INPT=99")) is InputSource.UNKNOWN
    with pytest.raises(MalformedResponse):
        parse_input_source(response("input_status.query", "%1INPT=x1"))

def test_mute_state():
    assert parse_mute_state(response("mute_status.query", "%1AVMT=21")) is MuteState.AUDIO_MUTE_ON
    assert parse_mute_state(response("mute_status.query", "%1AVMT=40")) is MuteState.UNKNOWN
    with pytest.raises(CommandRejected):
        parse_mute_state(response("mute_status.query", "%1AVMT=ERR3"))

def test_error_status_all_ok():
    status = parse_error_status(response("error_status.query", "%1ERST=000000"))
    assert status.is_ok
    assert status == ErrorStatus()

def test_error_status_fields_in_wire_order():
    status = parse_error_status(response("error_status.query", "%1ERST=120021"))
    assert status.as_dict() == dict(fan=1, lamp=2, temperature=0, cover_open=0, filter=2, other=1)

@pytest.mark.parametrize("value", ["1?0000", "00000", "0000000", ""])
def test_error_status_malformed(value):
    with pytest.raises(MalformedResponse):
        parse_error_status(response("error_status.query", f"%1ERST={value}"))

def test_malformed_is_a_protocol_error():
    with pytest.raises(ProtocolError):
        parse_error_status(response("error_status.query", "%1ERST=1?0000"))

def test_lamp():
    assert parse_lamp_info(response("lamp_status.query", "%1LAMP=1500 1")) == LampInfo(1500, True)
    assert parse_lamp_infos(response("lamp_status.query", "%1LAMP=10 0 20 1")) == [
        LampInfo(10, False), LampInfo(20, True)]

@pytest.mark.parametrize("value", ["", "1500", "1500 2", "x 1", "10 1 20"])
def test_lamp_malformed(value):
    with pytest.raises(MalformedResponse):
        parse_lamp_infos(response("lamp_status.query", f"%1LAMP={value}"))

def test_text():
    assert parse_text(response("projector_name.query", "%1NAME= Lobby ")) == "Lobby"
    assert parse_text(response("other_info.query", "%1INFO=")) == ""
    with pytest.raises(CommandRejected):
        parse_text(response("manufacturer_name.query", "%1INF1=ERR1"))

def test_input_list_preserves_wire_order():
    result = parse_input_list(response("input_list.query", "%1INST=11 21 33"))
    assert result == [InputSource.RGB_DSUB, InputSource.VIDEO_COMPOSITE, InputSource.DIGITAL_HDMI]
    result = parse_input_list(response("input_list.query", "%1INST=51 11"))
    assert result == [InputSource.NETWORK_WIRED, InputSource.RGB_DSUB]

def test_input_list_drops_unusable_tokens():
    result = parse_input_list(response("input_list.query", "%1INST=11 xx 99 33"))
    assert result == [InputSource.RGB_DSUB, InputSource.DIGITAL_HDMI]

def test_input_list_rejected_is_none_not_empty():
    assert parse_input_list(response("input_list.query", "%1INST=ERR1")) is None
    assert parse_input_list(response("input_list.query", "%1INST=")) == []
