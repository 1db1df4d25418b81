#!/usr/bin/env python3

"""
PJLink Class 1 known commands and metadata.

This module contains the known Class 1 command mnemonics and their parameters, as
described in the PJLink specification published by JBMIA:

https://pjlink.jbmia.or.jp/english/

There is no protocol implementation here; only metadata about the protocol.
"""
from __future__ import annotations

from ..internal_types import *
from ..exceptions import PjLinkError

class CommandGroupMeta:
    """Metadata for a group of commands sharing a mnemonic and a purpose"""
    name: str
    """Name of the command group"""

    mnemonic: str
    """Four-character command mnemonic common to all commands in the group (e.g., "POWR").
       May be the same as other groups."""

    commands: Dict[str, CommandMeta]
    """Set of commands in this group, indexed by command name unique within the group."""

    def __init__(
            self,
            name: str,
            mnemonic: str,
            commands: List[CommandMeta],
          ):
        assert len(mnemonic) == 4
        self.name = name
        self.mnemonic = mnemonic
        self.commands = {}
        assert len(commands) > 0
        for command in commands:
            assert not command.name in self.commands
            command.command_group = self
            self.commands[command.name] = command
_G = CommandGroupMeta

class CommandMeta:
    """Metadata for a single command in a command group"""
    command_group: CommandGroupMeta
    name: str
    parameter: Optional[str]
    """Fixed parameter sent with the command, or None if the caller supplies it."""
    description: Optional[str]

    def __init__(self, name: str, parameter: Optional[str], description: Optional[str]=None):
        self.name = name
        self.parameter = parameter
        self.description = description

    @property
    def full_name(self) -> str:
        return f"{self.command_group.name}.{self.name}"

    @property
    def mnemonic(self) -> str:
        return self.command_group.mnemonic

    @property
    def is_query(self) -> bool:
        return self.parameter == "?"

    def __str__(self) -> str:
        return f"CommandMeta({self.full_name}: {self.mnemonic} {'<param>' if self.parameter is None else self.parameter})"

    def __repr__(self) -> str:
        return str(self)

_C = CommandMeta

def _query(description: str) -> CommandMeta:
    return _C("query", "?", description)

# The following is an exhaustive list of all Class 1 commands supported by this package.
_group_metas: List[CommandGroupMeta] = [
    _G("power", "POWR", [
        _C("on", "1", "Power - On"),
        _C("off", "0", "Power - Off"),
      ]),
    _G("power_status", "POWR", [_query("Query power status")]),
    _G("input", "INPT", [
        _C("select", None, "Input - Switch to the two-digit input source code given as parameter"),
      ]),
    _G("input_status", "INPT", [_query("Query current input source")]),
    _G("mute", "AVMT", [
        _C("set", None, "Audio/Video Mute - Set to the two-digit mute state code given as parameter"),
      ]),
    _G("mute_status", "AVMT", [_query("Query audio/video mute state")]),
    _G("error_status", "ERST", [_query("Query fan/lamp/temperature/cover/filter/other error status")]),
    _G("lamp_status", "LAMP", [_query("Query lamp hours and on/off state")]),
    _G("input_list", "INST", [_query("Query available input sources")]),
    _G("projector_name", "NAME", [_query("Query projector/display name")]),
    _G("manufacturer_name", "INF1", [_query("Query manufacturer name")]),
    _G("product_name", "INF2", [_query("Query product name")]),
    _G("other_info", "INFO", [_query("Query other manufacturer-specific information")]),
    _G("class_info", "CLSS", [_query("Query supported PJLink class")]),
  ]

command_metas: Dict[str, CommandMeta] = {}
for _group in _group_metas:
    for _command in _group.commands.values():
        assert not _command.full_name in command_metas
        command_metas[_command.full_name] = _command

def get_all_commands() -> List[CommandMeta]:
    """Returns metadata for all known commands"""
    return list(command_metas.values())

def name_to_command_meta(name: str) -> CommandMeta:
    """Returns command metadata by full name (e.g., "power_status.query")"""
    result = command_metas.get(name)
    if result is None:
        raise PjLinkError(f"Unknown PJLink command name: {name}")
    return result

def mnemonic_to_command_metas(mnemonic: str) -> List[CommandMeta]:
    """Returns metadata for every known command using a mnemonic"""
    mnemonic = mnemonic.upper()
    return [meta for meta in command_metas.values() if meta.mnemonic == mnemonic]
