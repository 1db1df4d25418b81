# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink client.

Provides the public operations (power, input, mute, status and identity
queries) of a PJLink Class 1 device. Every operation opens its own
connection, performs the greeting handshake, exchanges exactly one
command/response pair, and closes the connection before returning.
"""

from __future__ import annotations

from ..internal_types import *
from ..exceptions import PjLinkError, PjLinkErrorCode
from ..pkg_logging import logger
from ..protocol import (
    PjLinkCommand,
    PjLinkResponse,
    PowerState,
    InputSource,
    MuteState,
    ErrorStatus,
    LampInfo,
    parse_power_state,
    parse_input_source,
    parse_mute_state,
    parse_error_status,
    parse_lamp_info,
    parse_lamp_infos,
    parse_text,
    parse_input_list,
  )

from .client_config import PjLinkClientConfig
from .connector import PjLinkConnector
from .tcp_connector import TcpPjLinkConnector

class PjLinkClient:
    """PJLink TCP/IP client."""

    config: PjLinkClientConfig
    connector: PjLinkConnector

    last_auth_token: Optional[str] = None
    """The authentication token derived during the most recent handshake, or None.
       Kept for diagnostics only; each handshake derives its own token from its
       own seed."""

    def __init__(
            self,
            host: Optional[str]=None,
            password: Optional[str]=None,
            port: Optional[int]=None,
            *,
            timeout_secs: Optional[float]=None,
            config: Optional[PjLinkClientConfig]=None,
            connector: Optional[PjLinkConnector]=None,
          ):
        """Creates a client. Does not connect.

           Args:
             host, password, port, timeout_secs: See PjLinkClientConfig.
             config: A base configuration to use.
             connector: The connector used to open a session per operation.
                   If None, a TcpPjLinkConnector for the configuration is used.

           Raises:
             ConfigurationError if the host, port or password is invalid.
        """
        self.config = PjLinkClientConfig(
            host=host,
            password=password,
            port=port,
            timeout_secs=timeout_secs,
            base_config=config,
          )
        if connector is None:
            connector = TcpPjLinkConnector(config=self.config)
        self.connector = connector

    async def execute(self, command_body: str) -> str:
        """Opens a session, sends one command body (e.g., "%1POWR ?") and returns the
           decoded response frame. The session is closed on every exit path."""
        session = await self.connector.connect()
        async with session:
            self.last_auth_token = session.auth_prefix
            return await session.transact(command_body)

    async def transact(
            self,
            command: PjLinkCommand,
          ) -> PjLinkResponse:
        """Sends a command and returns the validated response."""
        raw_response = await self.execute(command.body)
        response = PjLinkResponse(command, raw_response)
        logger.debug(f"{self}: {command} -> {response}")
        return response

    async def transact_by_name(
            self,
            command_name: str,
            parameter: Optional[str]=None,
          ) -> PjLinkResponse:
        """Sends a command by full name (e.g., "power_status.query") and returns the response."""
        command = PjLinkCommand.create_from_name(command_name, parameter=parameter)
        return await self.transact(command)

    async def authenticate(self) -> bool:
        """Checks that the configured password is accepted by the device.

        Returns True without sending a command if the device does not require
        authentication. Otherwise sends a power status query and returns False
        iff the device reports an authentication error. Any other error in the
        response is not an authentication failure, and returns True.

        Transport failures raise TransportError.
        """
        session = await self.connector.connect()
        async with session:
            self.last_auth_token = session.auth_prefix
            if not session.requires_auth:
                logger.debug(f"{self}: Device does not require authentication")
                return True
            command = PjLinkCommand.create_from_name("power_status.query")
            raw_response = await session.transact(command.body)
        result = PjLinkErrorCode.AUTHENTICATION_ERROR.value not in raw_response.upper()
        logger.debug(f"{self}: Authentication {'succeeded' if result else 'failed'}")
        return result

    async def get_power_status(self) -> PowerState:
        """Queries the power state.

        Raises CommandRejected if the device answers with an ERR marker (e.g.,
        UNAVAILABLE_TIME); an error reply is never reported as PowerState.UNKNOWN.
        UNKNOWN is returned only for a value that is not a defined power code.
        """
        return parse_power_state(await self.transact_by_name("power_status.query"))

    async def power_on(self) -> PowerState:
        """Sends a power on command.

        Returns the value reported by the device, which for an acknowledgement is
        PowerState.UNKNOWN; callers that need the settled state poll
        get_power_status(). Raises CommandRejected if the device refuses (e.g.,
        UNAVAILABLE_TIME while cooling down).
        """
        return parse_power_state(await self.transact_by_name("power.on"))

    async def power_off(self) -> PowerState:
        """Sends a power off command. See power_on()."""
        return parse_power_state(await self.transact_by_name("power.off"))

    async def set_power(self, on: bool) -> PowerState:
        return await (self.power_on() if on else self.power_off())

    async def get_input(self) -> InputSource:
        """Queries the current input source."""
        return parse_input_source(await self.transact_by_name("input_status.query"))

    async def get_available_inputs(self) -> Optional[List[InputSource]]:
        """Queries the input sources the device has, in the order it reports them.

        Returns None if the device cannot enumerate its inputs (the query was
        rejected), or an empty list if it reports none. Transport failures are
        raised, not reported as None.
        """
        return parse_input_list(await self.transact_by_name("input_list.query"))

    async def set_input(self, source: Union[InputSource, int]) -> InputSource:
        """Switches to an input source and returns the input reported by a
        follow-up query.

        The follow-up query uses its own connection. If it fails, the switch has
        still been made, and the query's own error is raised.
        """
        source = InputSource.from_code(int(source))
        if source is InputSource.UNKNOWN:
            raise PjLinkError("Cannot switch to an undefined input source")
        response = await self.transact_by_name("input.select", source.code)
        response.raise_for_error()
        logger.debug(f"{self}: Switched input to {source.name}; querying effective input")
        return await self.get_input()

    async def get_mute_status(self) -> MuteState:
        """Queries the audio/video mute state."""
        return parse_mute_state(await self.transact_by_name("mute_status.query"))

    async def set_mute(self, state: Union[MuteState, int]) -> MuteState:
        """Sets the audio/video mute state and returns the state reported by a
        follow-up query on its own connection. See set_input()."""
        state = MuteState.from_code(int(state))
        if state is MuteState.UNKNOWN:
            raise PjLinkError("Cannot set an undefined mute state")
        response = await self.transact_by_name("mute.set", state.code)
        response.raise_for_error()
        logger.debug(f"{self}: Set mute to {state.name}; querying effective state")
        return await self.get_mute_status()

    async def get_error_status(self) -> ErrorStatus:
        return parse_error_status(await self.transact_by_name("error_status.query"))

    async def get_lamp_info(self) -> LampInfo:
        """Queries hours and state of the first lamp."""
        return parse_lamp_info(await self.transact_by_name("lamp_status.query"))

    async def get_lamp_infos(self) -> List[LampInfo]:
        """Queries hours and state of every lamp."""
        return parse_lamp_infos(await self.transact_by_name("lamp_status.query"))

    async def get_projector_name(self) -> str:
        return parse_text(await self.transact_by_name("projector_name.query"))

    async def get_manufacturer_name(self) -> str:
        return parse_text(await self.transact_by_name("manufacturer_name.query"))

    async def get_product_name(self) -> str:
        return parse_text(await self.transact_by_name("product_name.query"))

    async def get_other_info(self) -> str:
        return parse_text(await self.transact_by_name("other_info.query"))

    async def get_class_info(self) -> str:
        """Queries the PJLink class the device supports (e.g., "1")."""
        return parse_text(await self.transact_by_name("class_info.query"))

    def __str__(self) -> str:
        return f"PjLinkClient({self.config.host}:{self.config.port})"

    def __repr__(self) -> str:
        return str(self)
