import pytest

from pjlink_client import (
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

@pytest.mark.parametrize("payload, expected", [
    ("0", PowerState.STANDBY),
    ("1", PowerState.POWERED_ON),
    ("2", PowerState.COOLING),
    ("3", PowerState.WARM_UP),
    (" 1 ", PowerState.POWERED_ON),
    ("4", PowerState.UNKNOWN),
    ("-1", PowerState.UNKNOWN),
    ("OK", PowerState.UNKNOWN),
    ("ERR3", PowerState.UNKNOWN),
    ("", PowerState.UNKNOWN),
  ])
def test_power_state_from_payload(payload, expected):
    assert PowerState.from_payload(payload) is expected

def test_input_source_codes():
    assert InputSource.from_code(11) is InputSource.RGB_DSUB
    assert InputSource.from_code(33) is InputSource.DIGITAL_HDMI
    assert InputSource.from_code(59) is InputSource.NETWORK_9
    assert InputSource.DIGITAL_HDMI.code == "33"

@pytest.mark.parametrize("code", [-1, 0, 10, 20, 60, 99, 1000])
def test_undefined_input_codes(code):
    assert InputSource.from_code(code) is InputSource.UNKNOWN

def test_input_family():
    assert InputSource.RGB_SCART.family is InputFamily.RGB
    assert InputSource.VIDEO_SVIDEO.family is InputFamily.VIDEO
    assert InputSource.DIGITAL_SDI.family is InputFamily.DIGITAL
    assert InputSource.STORAGE_USB.family is InputFamily.STORAGE
    assert InputSource.NETWORK_WIRED.family is InputFamily.NETWORK
    assert InputSource.UNKNOWN.family is None

def test_mute_state_properties():
    assert MuteState.VIDEO_MUTE_ON.axis is MuteAxis.VIDEO
    assert MuteState.VIDEO_MUTE_ON.is_on
    assert MuteState.AUDIO_MUTE_OFF.axis is MuteAxis.AUDIO
    assert not MuteState.AUDIO_MUTE_OFF.is_on
    assert MuteState.AUDIO_VIDEO_MUTE_ON.axis is MuteAxis.AUDIO_VIDEO
    assert MuteState.AUDIO_VIDEO_MUTE_ON.code == "31"
    assert MuteState.UNKNOWN.axis is None
    assert not MuteState.UNKNOWN.is_on
    assert MuteState.from_code(12) is MuteState.UNKNOWN

def test_every_member_has_a_description():
    for state in PowerState:
        assert get_power_description(state)
    for source in InputSource:
        assert get_input_description(source)
    for mute in MuteState:
        assert get_mute_description(mute)
    assert get_input_description(InputSource.DIGITAL_HDMI) == "HDMI"
    assert get_power_description(PowerState.WARM_UP) == "Warming Up"

def test_severity_descriptions():
    assert get_severity_description(0) == "OK"
    assert get_severity_description(1) == "Warning"
    assert get_severity_description(2) == "Error"
    assert get_severity_description(7) == "Unknown"

def test_error_status():
    status = ErrorStatus(lamp=2, filter=1)
    assert not status.is_ok
    assert status.as_dict() == dict(fan=0, lamp=2, temperature=0, cover_open=0, filter=1, other=0)
    assert "Lamp: Error" in str(status)
    assert "Filter: Warning" in str(status)
    assert ErrorStatus().is_ok
    assert ErrorStatus(lamp=2, filter=1) == status

def test_lamp_info():
    assert LampInfo(1200, True) == LampInfo(1200, True)
    assert LampInfo(1200, True) != LampInfo(1200, False)
    assert str(LampInfo(5, False)) == "Hours: 5, State: Off"
