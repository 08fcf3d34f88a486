"""
MIDI Decoder - Byte-at-a-time state machine for the MIDI 1.0 serial protocol.

Feed it bytes from a serial port; accept() returns 0 until a message is
complete, then the message's status byte. Parameters are read back through
param_a()/param_b()/as_14bit().

Protocol rules handled here:
- Realtime bytes (0xF8-0xFF) are returned immediately and leave any message
  in progress untouched, including a SYSEX transfer
- Running status: after a message completes the decoder re-arms for another
  message with the same status, so bare data bytes continue the stream
- SYSEX (0xF0) is reported as soon as it starts; its payload is skipped until
  the next status byte (normally 0xF7)
- Data bytes nobody asked for are dropped; the next status byte resyncs

Use one MidiDecoder per physical input. Instances share nothing, but a single
instance is not thread-safe.
"""
from __future__ import annotations

from typing import Any, Optional, Tuple

import structlog

from midistream.config import settings
from midistream.engine.classifier import is_realtime, is_status
from midistream.engine.constants import Message
from midistream.engine.param_table import ParamCount, expected_params
from midistream.exceptions import InvalidByteError
from midistream.models import DecoderSnapshot, DecoderState

logger = structlog.get_logger()


def coerce_byte(value: Any) -> int:
    """
    Normalize a caller-supplied byte.

    Accepts an int in 0..255 or a length-1 bytes/bytearray.

    Raises:
        InvalidByteError: For anything else
    """
    if isinstance(value, (bytes, bytearray)) and len(value) == 1:
        return value[0]
    if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 0xFF:
        return value
    raise InvalidByteError(value)


class MidiDecoder:
    """
    Incremental MIDI message decoder.

    Example:
        decoder = MidiDecoder()
        for byte in b"\\x90\\x3c\\x7f":
            message = decoder.accept(byte)
        # message == 0x90, decoder.param_a() == 0x3C, decoder.param_b() == 0x7F
    """

    def __init__(self, trace: Optional[bool] = None):
        """
        Args:
            trace: Emit per-byte debug events (defaults to settings.trace_bytes)
        """
        self._params = bytearray(2)
        self._trace = settings.trace_bytes if trace is None else trace
        self.reset()

    def reset(self) -> None:
        """Return to the initial idle state, forgetting any running status."""
        self._message = int(Message.NONE)
        self._remaining = 0
        self._params[0] = 0
        self._params[1] = 0
        self.messages_completed = 0
        self.bytes_discarded = 0

    def accept(self, value: Any) -> int:
        """
        Accept the next byte of the stream.

        Args:
            value: Next byte (int 0..255 or length-1 bytes)

        Returns:
            0 if no message is complete, else the completed status byte

        Raises:
            InvalidByteError: If value is not a single octet
        """
        byte = coerce_byte(value)

        # Realtime messages interrupt without disturbing the message in progress
        if is_realtime(byte):
            self.messages_completed += 1
            if self._trace:
                logger.debug("realtime_message", status=byte)
            return byte

        if is_status(byte):
            self._message = byte
            self._remaining = int(expected_params(byte))
            if self._trace:
                logger.debug("status_adopted", status=byte, remaining=self._remaining)

            if self._remaining == ParamCount.STREAMING:
                self.messages_completed += 1
                if self._trace:
                    logger.debug("sysex_started", status=byte)
                return byte
            if self._remaining > 0:
                return 0
        elif self._remaining > 0:
            # remaining never exceeds 2, so bytes land at index 0 then 1
            self._params[2 - self._remaining] = byte
            self._remaining -= 1
            if self._remaining > 0:
                return 0
        else:
            # SYSEX payload or a stray data byte while idle
            if self._remaining == 0:
                self.bytes_discarded += 1
                if self._trace:
                    logger.debug("data_byte_discarded", value=byte, message=self._message)
            return 0

        # Re-arm for running status
        self._remaining = int(expected_params(self._message))
        self.messages_completed += 1
        if self._trace:
            logger.debug(
                "message_complete",
                status=self._message,
                param_a=self._params[0],
                param_b=self._params[1],
            )
        return self._message

    def current_message(self) -> int:
        """Status byte of the message in progress or most recently completed."""
        return self._message

    def param_a(self) -> int:
        return self._params[0]

    def param_b(self) -> int:
        """Second parameter; the only parameter of one-byte messages."""
        return self._params[1]

    def as_14bit(self) -> int:
        """14-bit value sent LSB (param_a) then MSB (param_b)."""
        return (self._params[1] << 7) | self._params[0]

    @property
    def remaining(self) -> int:
        """Parameter bytes still expected; -1 while SYSEX payload streams."""
        return self._remaining

    @property
    def params(self) -> Tuple[int, int]:
        return self._params[0], self._params[1]

    @property
    def state(self) -> DecoderState:
        if self._remaining == ParamCount.STREAMING:
            return DecoderState.STREAMING
        if self._remaining == 0:
            return DecoderState.IDLE
        # Also true right after completion, when running status re-arms the count
        return DecoderState.AWAITING_PARAMS

    def snapshot(self) -> DecoderSnapshot:
        return DecoderSnapshot(
            current_message=self._message,
            remaining=self._remaining,
            params=self.params,
            state=self.state,
            messages_completed=self.messages_completed,
            bytes_discarded=self.bytes_discarded,
        )
