# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""Conversion between frame strings and the bytes on the wire."""

from __future__ import annotations

from .constants import FRAME_ENCODING, END_OF_FRAME, END_OF_FRAME_BYTES


def encode_frame(command: str) -> bytes:
    """Appends the frame terminator to a command string and encodes it for the wire.

    The command content is not validated.
    """
    return (command + END_OF_FRAME).encode(FRAME_ENCODING)

def decode_frame(data: bytes) -> str:
    """Decodes the first frame in data into a string without its terminator.

    Bytes that are not ASCII are replaced rather than raising, so that a garbled
    frame is reported by the response parsers instead of the codec.

    Leading NUL bytes are dropped; some devices send a NUL after each
    terminator, which then precedes the next frame.
    """
    data = data.lstrip(b"\x00")
    end = data.find(END_OF_FRAME_BYTES)
    if end >= 0:
        data = data[:end]
    return data.decode(FRAME_ENCODING, errors='replace')
