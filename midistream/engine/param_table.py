"""
Parameter byte counts for every MIDI status byte.

Channel messages are indexed by the opcode bits of the high nibble
((status >> 4) & 7); system common messages by their low three bits.
Realtime messages never carry parameters.
"""
from enum import IntEnum
from typing import Tuple

from midistream.engine.constants import (
    CHANNEL_MESSAGES,
    REALTIME_MESSAGES,
    SYSTEM_MESSAGES,
)


class ParamCount(IntEnum):
    """Parameter bytes a message expects."""

    STREAMING = -1  # SYSEX: unbounded, ended by the next status byte
    NONE = 0
    ONE = 1
    TWO = 2


# Note-Off, Note-On, Aftertouch, Control-Change, Program-Change,
# Channel-Pressure, Pitch-Bend. Slot 7 is the 0xF0 system range.
CHANNEL_PARAM_COUNTS: Tuple[ParamCount, ...] = (
    ParamCount.TWO,
    ParamCount.TWO,
    ParamCount.TWO,
    ParamCount.TWO,
    ParamCount.ONE,
    ParamCount.ONE,
    ParamCount.TWO,
    ParamCount.NONE,
)

# SYSEX, MTC quarter frame, Song Position, Song Select,
# undefined, undefined, Tune Request, End of Exclusive
SYSTEM_PARAM_COUNTS: Tuple[ParamCount, ...] = (
    ParamCount.STREAMING,
    ParamCount.ONE,
    ParamCount.TWO,
    ParamCount.ONE,
    ParamCount.NONE,
    ParamCount.NONE,
    ParamCount.NONE,
    ParamCount.NONE,
)


def expected_params(status: int) -> ParamCount:
    """
    Number of parameter bytes the given status byte expects.

    Any value below 0x80 (including the "no message" value 0) expects none,
    so a decoder that has never seen a status byte stays idle.
    """
    if status < CHANNEL_MESSAGES:
        return ParamCount.NONE
    if status < SYSTEM_MESSAGES:
        return CHANNEL_PARAM_COUNTS[(status >> 4) & 0x07]
    if status < REALTIME_MESSAGES:
        return SYSTEM_PARAM_COUNTS[status & 0x07]
    return ParamCount.NONE
