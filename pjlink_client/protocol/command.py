# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

from __future__ import annotations

from ..internal_types import *
from ..exceptions import PjLinkError
from .command_meta import (
    CommandMeta,
    name_to_command_meta,
  )

from .constants import (
    COMMAND_PREFIX,
  )

class PjLinkCommand:
    """A Class 1 command to a PJLink device.

    The command body has the form:

        %1<mnemonic> <parameter>

    The authentication token, if any, and the frame terminator are added by the
    session that sends it.
    """
    command_meta: CommandMeta
    parameter: str

    def __init__(
            self,
            command_meta: CommandMeta,
            parameter: Optional[str]=None,
          ):
        if command_meta.parameter is None:
            if parameter is None or parameter == '':
                raise PjLinkError(f"Command {command_meta.full_name} requires a parameter")
        else:
            if parameter is not None and parameter != command_meta.parameter:
                raise PjLinkError(
                    f"Command {command_meta.full_name} has fixed parameter {command_meta.parameter!r}, got {parameter!r}")
            parameter = command_meta.parameter
        assert parameter is not None
        self.command_meta = command_meta
        self.parameter = parameter

    @property
    def name(self) -> str:
        """Returns the full name of the command"""
        return self.command_meta.full_name

    @property
    def mnemonic(self) -> str:
        return self.command_meta.mnemonic

    @property
    def is_query(self) -> bool:
        return self.parameter == "?"

    @property
    def body(self) -> str:
        """Returns the command text without authentication token or terminator"""
        return f"{COMMAND_PREFIX}{self.mnemonic} {self.parameter}"

    @classmethod
    def create_from_name(
            cls,
            command_name: str,
            parameter: Optional[str]=None,
          ) -> Self:
        """Creates a PjLinkCommand from command name"""
        command_meta = name_to_command_meta(command_name)
        return cls(command_meta, parameter=parameter)

    def __str__(self) -> str:
        return f"PjLinkCommand({self.name}: {self.body!r})"

    def __repr__(self) -> str:
        return str(self)
