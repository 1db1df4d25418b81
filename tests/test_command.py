import pytest

from pjlink_client import PjLinkCommand, PjLinkError, get_all_commands, name_to_command_meta
from pjlink_client.protocol import mnemonic_to_command_metas

def test_query_body():
    command = PjLinkCommand.create_from_name("power_status.query")
    assert command.body == "%1POWR ?"
    assert command.is_query
    assert command.mnemonic == "POWR"

def test_fixed_parameter_body():
    assert PjLinkCommand.create_from_name("power.on").body == "%1POWR 1"
    assert PjLinkCommand.create_from_name("power.off").body == "%1POWR 0"
    assert not PjLinkCommand.create_from_name("power.on").is_query

def test_variable_parameter_body():
    assert PjLinkCommand.create_from_name("input.select", "31").body == "%1INPT 31"
    assert PjLinkCommand.create_from_name("mute.set", "21").body == "%1AVMT 21"

def test_variable_parameter_is_required():
    with pytest.raises(PjLinkError):
        PjLinkCommand.create_from_name("input.select")

def test_fixed_parameter_cannot_be_changed():
    with pytest.raises(PjLinkError):
        PjLinkCommand.create_from_name("power.on", "0")

def test_unknown_command_name():
    with pytest.raises(PjLinkError):
        name_to_command_meta("power.explode")

def test_registry():
    names = set(meta.full_name for meta in get_all_commands())
    assert {
        "power.on", "power.off", "power_status.query", "input.select",
        "input_status.query", "mute.set", "mute_status.query",
        "error_status.query", "lamp_status.query", "input_list.query",
        "projector_name.query", "manufacturer_name.query",
        "product_name.query", "other_info.query", "class_info.query",
      } <= names
    for meta in get_all_commands():
        assert len(meta.mnemonic) == 4
    assert set(m.full_name for m in mnemonic_to_command_metas("powr")) == {
        "power.on", "power.off", "power_status.query"}
