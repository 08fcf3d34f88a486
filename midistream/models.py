"""
Core data models
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from midistream.engine.classifier import (
    MessageCategory,
    category as byte_category,
    is_channel_message,
    message_channel,
    message_value,
)
from midistream.engine.constants import Message
from midistream.engine.param_table import ParamCount, expected_params

if TYPE_CHECKING:
    from midistream.engine.decoder import MidiDecoder


class DecoderState(str, Enum):
    """Decoder state, derived from the remaining parameter count"""

    IDLE = "idle"
    AWAITING_PARAMS = "awaiting_params"
    STREAMING = "streaming"  # SYSEX payload passing through


class MidiMessage(BaseModel):
    """A completed MIDI message"""

    status: int = Field(ge=0x80, le=0xFF)
    data: bytes = b""
    sysex: Optional[bytes] = None
    truncated: bool = False

    @field_validator("data", "sysex")
    @classmethod
    def check_data_bytes(cls, value: Optional[bytes]) -> Optional[bytes]:
        if value is not None and any(b & 0x80 for b in value):
            raise ValueError("parameter and payload bytes must be below 0x80")
        return value

    @classmethod
    def from_decoder(cls, decoder: "MidiDecoder", status: int) -> "MidiMessage":
        """
        Build a message from a decoder that just returned ``status``.

        Two-parameter messages take (param_a, param_b); one-parameter
        messages carry their single byte in param_b.
        """
        count = expected_params(status)
        if count == ParamCount.TWO:
            data = bytes((decoder.param_a(), decoder.param_b()))
        elif count == ParamCount.ONE:
            data = bytes((decoder.param_b(),))
        else:
            data = b""
        return cls(status=status, data=data)

    @property
    def type(self) -> int:
        if is_channel_message(self.status):
            return message_value(self.status)
        return self.status

    @property
    def channel(self) -> Optional[int]:
        if is_channel_message(self.status):
            return message_channel(self.status)
        return None

    @property
    def category(self) -> MessageCategory:
        return byte_category(self.status)

    @property
    def value_14bit(self) -> Optional[int]:
        """Combined LSB/MSB value for two-byte messages such as Pitch Bend."""
        if len(self.data) != 2:
            return None
        return (self.data[1] << 7) | self.data[0]

    @property
    def name(self) -> str:
        return Message(self.type).name

    def to_bytes(self) -> bytes:
        """Wire form with full status; SYSEX includes its captured payload."""
        return bytes((self.status,)) + self.data + (self.sysex or b"")

    def __bytes__(self) -> bytes:
        return self.to_bytes()


class DecoderSnapshot(BaseModel):
    """Point-in-time copy of decoder fields for logging and debugging"""

    current_message: int
    remaining: int = Field(ge=-1, le=2)
    params: Tuple[int, int]
    state: DecoderState
    messages_completed: int = 0
    bytes_discarded: int = 0
