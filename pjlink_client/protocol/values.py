# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
Typed values carried by PJLink Class 1 responses, and their display names.

Display names are kept in static tables next to each type, and each table is
read through a single lookup function.
"""

from __future__ import annotations

from enum import IntEnum

from ..internal_types import *

class PowerState(IntEnum):
    """Power state reported by POWR queries."""
    UNKNOWN = -1
    STANDBY = 0
    POWERED_ON = 1
    COOLING = 2
    WARM_UP = 3

    @classmethod
    def from_payload(cls, payload: str) -> PowerState:
        """Maps a response value to a power state. Anything that is not one of the
           four defined codes, including an ERR marker, maps to UNKNOWN."""
        try:
            value = int(payload.strip())
        except ValueError:
            return cls.UNKNOWN
        if value < 0:
            return cls.UNKNOWN
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN

power_state_descriptions: Dict[PowerState, str] = {
    PowerState.UNKNOWN: "Unknown",
    PowerState.STANDBY: "Standby",
    PowerState.POWERED_ON: "Powered On",
    PowerState.COOLING: "Cooling",
    PowerState.WARM_UP: "Warming Up",
  }

def get_power_description(state: PowerState) -> str:
    return power_state_descriptions[state]

class InputFamily(IntEnum):
    """The tens digit of an input source code."""
    RGB = 1
    VIDEO = 2
    DIGITAL = 3
    STORAGE = 4
    NETWORK = 5

class InputSource(IntEnum):
    """Input source codes defined by Class 1. Which ones a device actually has
       is reported by the INST query."""
    UNKNOWN = -1

    RGB_DSUB = 11
    RGB_BNC = 12
    RGB_DVI_ANALOG = 13
    RGB_SCART = 14
    RGB_M1DA = 15
    RGB_6 = 16
    RGB_7 = 17
    RGB_8 = 18
    RGB_9 = 19

    VIDEO_COMPOSITE = 21
    VIDEO_COMPONENT = 22
    VIDEO_COMPONENT_BNC = 23
    VIDEO_SVIDEO = 24
    VIDEO_D_TERMINAL = 25
    VIDEO_SCART = 26
    VIDEO_7 = 27
    VIDEO_8 = 28
    VIDEO_9 = 29

    DIGITAL_DVI_DIGITAL = 31
    DIGITAL_DVI_D = 32
    DIGITAL_HDMI = 33
    DIGITAL_SDI = 34
    DIGITAL_ILINK = 35
    DIGITAL_M1DA = 36
    DIGITAL_M1D = 37
    DIGITAL_DISPLAYPORT = 38
    DIGITAL_WIRELESS_HDMI = 39

    STORAGE_USB = 41
    STORAGE_PC_CARD = 42
    STORAGE_COMPACT_FLASH = 43
    STORAGE_SD_CARD = 44
    STORAGE_5 = 45
    STORAGE_6 = 46
    STORAGE_7 = 47
    STORAGE_8 = 48
    STORAGE_9 = 49

    NETWORK_WIRED = 51
    NETWORK_WIRELESS = 52
    NETWORK_USB_B = 53
    NETWORK_WIRELESS_USB = 54
    NETWORK_BLUETOOTH = 55
    NETWORK_6 = 56
    NETWORK_7 = 57
    NETWORK_8 = 58
    NETWORK_9 = 59

    @classmethod
    def from_code(cls, code: int) -> InputSource:
        """Returns the input source for a two-digit code, or UNKNOWN if the code is
           not defined."""
        if code < 0:
            return cls.UNKNOWN
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN

    @property
    def family(self) -> Optional[InputFamily]:
        """The input family (tens digit), or None for UNKNOWN."""
        if self is InputSource.UNKNOWN:
            return None
        return InputFamily(self.value // 10)

    @property
    def code(self) -> str:
        """The two-digit parameter string sent on the wire."""
        return f"{self.value:02d}"

input_source_descriptions: Dict[InputSource, str] = {
    InputSource.UNKNOWN: "Unknown",
    InputSource.RGB_DSUB: "VGA (D-SUB Connector)",
    InputSource.RGB_BNC: "RGB BNC (5 BNC Connectors)",
    InputSource.RGB_DVI_ANALOG: "DVI-I Analog",
    InputSource.RGB_SCART: "RGB SCART",
    InputSource.RGB_M1DA: "M1-DA Analog",
    InputSource.RGB_6: "RGB 6",
    InputSource.RGB_7: "RGB 7",
    InputSource.RGB_8: "RGB 8",
    InputSource.RGB_9: "RGB 9",
    InputSource.VIDEO_COMPOSITE: "Composite (RCA)",
    InputSource.VIDEO_COMPONENT: "Component (3 RCA)",
    InputSource.VIDEO_COMPONENT_BNC: "Component BNC (3 BNC)",
    InputSource.VIDEO_SVIDEO: "S-Video (Mini-DIN 4-pin)",
    InputSource.VIDEO_D_TERMINAL: "D Terminal",
    InputSource.VIDEO_SCART: "SCART",
    InputSource.VIDEO_7: "Video 7",
    InputSource.VIDEO_8: "Video 8",
    InputSource.VIDEO_9: "Video 9",
    InputSource.DIGITAL_DVI_DIGITAL: "DVI-I Digital",
    InputSource.DIGITAL_DVI_D: "DVI-D",
    InputSource.DIGITAL_HDMI: "HDMI",
    InputSource.DIGITAL_SDI: "SDI",
    InputSource.DIGITAL_ILINK: "iLink/FireWire",
    InputSource.DIGITAL_M1DA: "M1-DA Digital",
    InputSource.DIGITAL_M1D: "M1-D",
    InputSource.DIGITAL_DISPLAYPORT: "DisplayPort",
    InputSource.DIGITAL_WIRELESS_HDMI: "Wireless HDMI",
    InputSource.STORAGE_USB: "USB Type A",
    InputSource.STORAGE_PC_CARD: "PC Card Type II",
    InputSource.STORAGE_COMPACT_FLASH: "CompactFlash",
    InputSource.STORAGE_SD_CARD: "SD Card",
    InputSource.STORAGE_5: "Storage 5",
    InputSource.STORAGE_6: "Storage 6",
    InputSource.STORAGE_7: "Storage 7",
    InputSource.STORAGE_8: "Storage 8",
    InputSource.STORAGE_9: "Storage 9",
    InputSource.NETWORK_WIRED: "Wired LAN (RJ-45)",
    InputSource.NETWORK_WIRELESS: "Wireless LAN (Wi-Fi)",
    InputSource.NETWORK_USB_B: "USB Type B",
    InputSource.NETWORK_WIRELESS_USB: "Wireless USB",
    InputSource.NETWORK_BLUETOOTH: "Bluetooth",
    InputSource.NETWORK_6: "Network 6",
    InputSource.NETWORK_7: "Network 7",
    InputSource.NETWORK_8: "Network 8",
    InputSource.NETWORK_9: "Network 9",
  }

def get_input_description(source: InputSource) -> str:
    return input_source_descriptions[source]

class MuteAxis(IntEnum):
    """The tens digit of a mute state: which outputs the state applies to."""
    VIDEO = 1
    AUDIO = 2
    AUDIO_VIDEO = 3

class MuteState(IntEnum):
    """Audio/video mute state. The tens digit selects the axis, the ones digit
       selects off (0) or on (1)."""
    UNKNOWN = -1
    VIDEO_MUTE_OFF = 10
    VIDEO_MUTE_ON = 11
    AUDIO_MUTE_OFF = 20
    AUDIO_MUTE_ON = 21
    AUDIO_VIDEO_MUTE_OFF = 30
    AUDIO_VIDEO_MUTE_ON = 31

    @classmethod
    def from_code(cls, code: int) -> MuteState:
        if code < 0:
            return cls.UNKNOWN
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN

    @property
    def axis(self) -> Optional[MuteAxis]:
        if self is MuteState.UNKNOWN:
            return None
        return MuteAxis(self.value // 10)

    @property
    def is_on(self) -> bool:
        return self is not MuteState.UNKNOWN and self.value % 10 == 1

    @property
    def code(self) -> str:
        return str(self.value)

mute_state_descriptions: Dict[MuteState, str] = {
    MuteState.UNKNOWN: "Unknown",
    MuteState.VIDEO_MUTE_OFF: "Video Mute Off",
    MuteState.VIDEO_MUTE_ON: "Video Mute On",
    MuteState.AUDIO_MUTE_OFF: "Audio Mute Off",
    MuteState.AUDIO_MUTE_ON: "Audio Mute On",
    MuteState.AUDIO_VIDEO_MUTE_OFF: "AV Mute Off",
    MuteState.AUDIO_VIDEO_MUTE_ON: "AV Mute On",
  }

def get_mute_description(state: MuteState) -> str:
    return mute_state_descriptions[state]

SEVERITY_OK = 0
SEVERITY_WARNING = 1
SEVERITY_ERROR = 2

severity_descriptions: Dict[int, str] = {
    SEVERITY_OK: "OK",
    SEVERITY_WARNING: "Warning",
    SEVERITY_ERROR: "Error",
  }

def get_severity_description(severity: int) -> str:
    """Returns the display name of an error status digit; digits outside 0-2 are
       reported as "Unknown"."""
    return severity_descriptions.get(severity, "Unknown")

class ErrorStatus:
    """Fault report returned by the ERST query. Each field holds the digit reported
       for that category: 0 (OK), 1 (Warning) or 2 (Error)."""
    fan: int
    lamp: int
    temperature: int
    cover_open: int
    filter: int
    other: int

    field_names: Tuple[str, ...] = ('fan', 'lamp', 'temperature', 'cover_open', 'filter', 'other')
    """Field names in the order their digits appear on the wire."""

    def __init__(
            self,
            fan: int=SEVERITY_OK,
            lamp: int=SEVERITY_OK,
            temperature: int=SEVERITY_OK,
            cover_open: int=SEVERITY_OK,
            filter: int=SEVERITY_OK,
            other: int=SEVERITY_OK,
          ):
        self.fan = fan
        self.lamp = lamp
        self.temperature = temperature
        self.cover_open = cover_open
        self.filter = filter
        self.other = other

    def as_dict(self) -> Dict[str, int]:
        return dict((name, getattr(self, name)) for name in self.field_names)

    @property
    def is_ok(self) -> bool:
        """True iff every category reports OK."""
        return all(value == SEVERITY_OK for value in self.as_dict().values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorStatus):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __str__(self) -> str:
        return (
            f"Fan: {get_severity_description(self.fan)}, "
            f"Lamp: {get_severity_description(self.lamp)}, "
            f"Temperature: {get_severity_description(self.temperature)}, "
            f"Cover: {get_severity_description(self.cover_open)}, "
            f"Filter: {get_severity_description(self.filter)}, "
            f"Other: {get_severity_description(self.other)}"
          )

    def __repr__(self) -> str:
        return f"ErrorStatus({self})"

class LampInfo:
    """Cumulative lighting hours and on/off state of one lamp."""
    hours: int
    is_on: bool

    def __init__(self, hours: int, is_on: bool):
        self.hours = hours
        self.is_on = is_on

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LampInfo):
            return NotImplemented
        return self.hours == other.hours and self.is_on == other.is_on

    def __str__(self) -> str:
        return f"Hours: {self.hours}, State: {'On' if self.is_on else 'Off'}"

    def __repr__(self) -> str:
        return f"LampInfo({self})"
