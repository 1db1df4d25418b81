# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink device emulator.

Provides a simple emulation of a PJLink Class 1 projector on TCP/IP.
"""

from __future__ import annotations

import asyncio

from ..internal_types import *
from ..pkg_logging import logger
from ..protocol import (
    COMMAND_PREFIX,
    QUERY_PARAMETER,
    PowerState,
    InputSource,
    MuteState,
  )
from ..constants import DEFAULT_PORT
from ..exceptions import PjLinkError, PjLinkErrorCode

from .session import PjLinkEmulatorSession

_ERR1 = PjLinkErrorCode.UNDEFINED_COMMAND.value
_ERR2 = PjLinkErrorCode.OUT_OF_PARAMETER.value
_ERR3 = PjLinkErrorCode.UNAVAILABLE_TIME.value

class PjLinkEmulator(AsyncContextManager['PjLinkEmulator']):
    """An emulated PJLink Class 1 projector.

    The device state attributes may be changed freely between commands.
    response_overrides maps a mnemonic (e.g., "INST") to a canned response
    value (e.g., "ERR1") that replaces the emulated one.
    """
    password: Optional[str]
    """None for a device without authentication. Otherwise the device requires
       authentication with this password, which may be empty."""
    seed: Optional[str]
    """Fixed seed for every greeting. If None, a random seed is issued per connection."""
    greeting: Optional[str]
    """Canned greeting that replaces the standard one."""
    silent: bool
    """If True, commands are received but never answered."""
    bind_addr: str
    port: int
    sessions: Dict[int, PjLinkEmulatorSession]
    next_session_id: int = 0
    received_frames: List[str]
    """Every frame received from clients, in order, as sent (including any token)."""
    response_overrides: Dict[str, str]
    server: Optional[asyncio.Server] = None
    final_result: asyncio.Future[None]

    power: PowerState
    input: InputSource
    available_inputs: List[InputSource]
    video_muted: bool
    audio_muted: bool
    error_status: str
    lamp_hours: List[int]
    projector_name: str
    manufacturer_name: str
    product_name: str
    other_info: str
    class_info: str

    def __init__(
            self,
            password: Optional[str] = None,
            bind_addr: Optional[str] = None,
            port: int = DEFAULT_PORT,
            *,
            seed: Optional[str] = None,
            greeting: Optional[str] = None,
            silent: bool = False,
            response_overrides: Optional[Dict[str, str]] = None,
          ):
        if password is not None and len(password) > 32:
            raise PjLinkError("Emulator password must be 32 or fewer characters")
        self.password = password
        self.seed = seed
        self.greeting = greeting
        self.silent = silent
        self.bind_addr = '0.0.0.0' if bind_addr is None else bind_addr
        self.port = port
        self.sessions = {}
        self.received_frames = []
        self.response_overrides = {} if response_overrides is None else dict(response_overrides)
        self.final_result = asyncio.get_event_loop().create_future()

        self.power = PowerState.POWERED_ON
        self.input = InputSource.DIGITAL_HDMI
        self.available_inputs = [
            InputSource.RGB_DSUB,
            InputSource.VIDEO_COMPOSITE,
            InputSource.DIGITAL_HDMI,
          ]
        self.video_muted = False
        self.audio_muted = False
        self.error_status = "000000"
        self.lamp_hours = [1200]
        self.projector_name = "Emulated Projector"
        self.manufacturer_name = "pjlink_client"
        self.product_name = "PJLink Emulator"
        self.other_info = ""
        self.class_info = "1"

        self.handlers: Dict[str, Callable[[str], str]] = {
            "POWR": self.handle_power,
            "INPT": self.handle_input,
            "AVMT": self.handle_mute,
            "ERST": self.handle_error_status,
            "LAMP": self.handle_lamp,
            "INST": self.handle_input_list,
            "NAME": lambda p: self.handle_text(p, self.projector_name),
            "INF1": lambda p: self.handle_text(p, self.manufacturer_name),
            "INF2": lambda p: self.handle_text(p, self.product_name),
            "INFO": lambda p: self.handle_text(p, self.other_info),
            "CLSS": lambda p: self.handle_text(p, self.class_info),
          }

    def alloc_session_id(self, session: PjLinkEmulatorSession) -> int:
        result = self.next_session_id
        self.next_session_id += 1
        self.sessions[result] = session
        return result

    def free_session_id(self, session_id: int) -> None:
        self.sessions.pop(session_id, None)

    @property
    def mute_state(self) -> MuteState:
        if self.video_muted and self.audio_muted:
            return MuteState.AUDIO_VIDEO_MUTE_ON
        if self.video_muted:
            return MuteState.VIDEO_MUTE_ON
        if self.audio_muted:
            return MuteState.AUDIO_MUTE_ON
        return MuteState.AUDIO_VIDEO_MUTE_OFF

    def handle_command(self, frame: str) -> str:
        """Handle a single command frame (without authentication token), and return
        the response frame."""
        if not frame.startswith(COMMAND_PREFIX) or len(frame) < 7 or frame[6] != ' ':
            logger.debug(f"Emulator: Malformed command frame: {frame!r}")
            return f"{frame[:6]}={_ERR1}"
        mnemonic = frame[2:6].upper()
        parameter = frame[7:]
        override = self.response_overrides.get(mnemonic)
        if override is not None:
            value = override
        else:
            handler = self.handlers.get(mnemonic)
            value = _ERR1 if handler is None else handler(parameter)
        return f"{COMMAND_PREFIX}{mnemonic}={value}"

    def handle_power(self, parameter: str) -> str:
        if parameter == QUERY_PARAMETER:
            return str(self.power.value)
        if parameter not in ('0', '1'):
            return _ERR2
        if self.power in (PowerState.COOLING, PowerState.WARM_UP):
            return _ERR3
        self.power = PowerState.POWERED_ON if parameter == '1' else PowerState.STANDBY
        return "OK"

    def handle_input(self, parameter: str) -> str:
        if self.power != PowerState.POWERED_ON:
            return _ERR3
        if parameter == QUERY_PARAMETER:
            return self.input.code
        if not parameter.isdigit():
            return _ERR2
        source = InputSource.from_code(int(parameter))
        if source not in self.available_inputs:
            return _ERR2
        self.input = source
        return "OK"

    def handle_mute(self, parameter: str) -> str:
        if self.power != PowerState.POWERED_ON:
            return _ERR3
        if parameter == QUERY_PARAMETER:
            return self.mute_state.code
        state = MuteState.from_code(int(parameter)) if parameter.isdigit() else MuteState.UNKNOWN
        if state is MuteState.UNKNOWN:
            return _ERR2
        if state.value // 10 in (1, 3):
            self.video_muted = state.is_on
        if state.value // 10 in (2, 3):
            self.audio_muted = state.is_on
        return "OK"

    def handle_error_status(self, parameter: str) -> str:
        if parameter != QUERY_PARAMETER:
            return _ERR2
        return self.error_status

    def handle_lamp(self, parameter: str) -> str:
        if parameter != QUERY_PARAMETER:
            return _ERR2
        lamp_on = '1' if self.power == PowerState.POWERED_ON else '0'
        return " ".join(f"{hours} {lamp_on}" for hours in self.lamp_hours)

    def handle_input_list(self, parameter: str) -> str:
        if parameter != QUERY_PARAMETER:
            return _ERR2
        return " ".join(source.code for source in self.available_inputs)

    def handle_text(self, parameter: str, value: str) -> str:
        if parameter != QUERY_PARAMETER:
            return _ERR2
        return value

    async def on_connection(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        session = PjLinkEmulatorSession(self, reader, writer)
        logger.debug(f"Emulator: {session} connected")
        await session.run()

    @property
    def bound_port(self) -> int:
        """The port actually listened on; differs from port when port is 0."""
        assert self.server is not None
        return self.server.sockets[0].getsockname()[1]

    async def run(self) -> None:
        """Runs the Emulator until it is closed."""
        async with self:
            await self.wait_closed()

    async def start(self) -> None:
        try:
            self.server = await asyncio.start_server(
                self.on_connection,
                host=self.bind_addr,
                port=self.port)
            logger.debug(f"Emulator: Listening on {self.bind_addr}:{self.bound_port}")
        except BaseException as e:
            self.set_final_result(e)
            raise

    def close(self, exc: Optional[BaseException]=None) -> None:
        """Stops the Emulator."""
        self.set_final_result(exc)

    async def wait_closed(self) -> None:
        """Waits for the emulator to be fully closed. Does not initiate shutdown."""
        try:
            await self.final_result
        finally:
            if self.server is not None:
                try:
                    self.server.close()
                    await self.server.wait_closed()
                finally:
                    self.server = None

    def set_final_result(self, exc: Optional[BaseException]=None) -> None:
        if not self.final_result.done():
            if exc is None:
                logger.debug(f"Emulator: Setting final result to success")
                self.final_result.set_result(None)
            else:
                logger.debug(f"Emulator: Setting final exception: {exc}")
                self.final_result.set_exception(exc)
            if self.server is not None:
                self.server.close()

    async def __aenter__(self) -> PjLinkEmulator:
        await self.start()
        return self

    async def __aexit__(self,
            exc_type: Optional[type[BaseException]],
            exc: Optional[BaseException],
            tb: Optional[TracebackType]
      ) -> None:
        self.close()
        await self.wait_closed()
