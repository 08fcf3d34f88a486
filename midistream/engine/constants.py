"""
MIDI 1.0 protocol constants.

Every byte with the high bit set is a status byte; every byte with the high
bit clear is data. Channel messages are 0b1xxxnnnn where xxx is the opcode and
nnnn the channel; the values below carry no channel.
"""
from enum import IntEnum


class Message(IntEnum):
    """Status byte values (channel nibble cleared for channel messages)."""

    NONE = 0x00  # No message; never a valid status byte

    # Channel voice messages
    NOTE_OFF = 0x80          # note, velocity
    NOTE_ON = 0x90           # note, velocity
    AFTERTOUCH = 0xA0        # note, pressure
    CONTROL_CHANGE = 0xB0    # controller, value
    PROGRAM_CHANGE = 0xC0    # program
    CHANNEL_PRESSURE = 0xD0  # pressure
    PITCH_BEND = 0xE0        # 14 bits, LSB first

    # System common messages, selected by the low three bits
    SYSEX = 0xF0             # bulk data until SYSEX_END
    MTC_QUARTER_FRAME = 0xF1
    SONG_POSITION = 0xF2     # 14 bits of beats (1 beat == 6 clocks)
    SONG_SELECT = 0xF3
    UNDEFINED_F4 = 0xF4
    UNDEFINED_F5 = 0xF5
    TUNE_REQUEST = 0xF6
    SYSEX_END = 0xF7

    # System realtime messages; may interrupt any other message
    CLOCK = 0xF8             # 24 PPQ
    UNDEFINED_F9 = 0xF9
    START = 0xFA
    CONTINUE = 0xFB
    STOP = 0xFC
    UNDEFINED_FD = 0xFD
    ACTIVE_SENSING = 0xFE    # every 300ms on a live link
    SYSTEM_RESET = 0xFF


# Category break points in the status byte space
CHANNEL_MESSAGES = Message.NOTE_OFF
SYSTEM_MESSAGES = Message.SYSEX
REALTIME_MESSAGES = Message.CLOCK


class ControlChange(IntEnum):
    """Controller numbers with predefined meanings."""

    MOD_WHEEL = 1
    BREATH = 2
    VOLUME = 7
    PAN = 10          # 64 == centered
    EXPRESSION = 11
    SUSTAIN = 64      # 0 off, 127 on
    PORTAMENTO = 65   # 0 off, 127 on

    # Channel mode messages
    ALL_SOUND_OFF = 120
    RESET_ALL_CONTROLLERS = 121
    LOCAL_CONTROL = 122  # 0 off, 127 on
    ALL_NOTES_OFF = 123
    OMNI_OFF = 124
    OMNI_ON = 125
    MONO_ON = 126     # value is the channel count
    POLY_ON = 127
