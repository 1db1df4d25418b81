# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink device emulator.

Provides a simple emulation of a PJLink Class 1 projector on TCP/IP.
"""

from .emulator_impl import PjLinkEmulator
from .session import PjLinkEmulatorSession
