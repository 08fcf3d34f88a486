"""
Tests for MidiMessage and DecoderSnapshot models.
"""
import pytest
from pydantic import ValidationError

from midistream.engine.classifier import category
from midistream.engine.constants import Message
from midistream.engine.decoder import MidiDecoder
from midistream.models import DecoderSnapshot, DecoderState, MessageCategory, MidiMessage


class TestMidiMessage:
    """Derived properties and wire form."""

    def test_channel_message_fields(self):
        """Test type, channel and name of a channel message."""
        message = MidiMessage(status=0x9F, data=b"\x3c\x7f")

        assert message.type == Message.NOTE_ON
        assert message.channel == 15
        assert message.category == MessageCategory.CHANNEL
        assert message.name == "NOTE_ON"

    def test_system_message_has_no_channel(self):
        """Test system common messages keep their full status as type."""
        message = MidiMessage(status=0xF2, data=b"\x00\x10")

        assert message.type == 0xF2
        assert message.channel is None
        assert message.category == MessageCategory.SYSTEM_COMMON
        assert message.value_14bit == 0x10 << 7

    def test_category_matches_classifier(self):
        """Test the model category comes from the byte classifier."""
        for status in range(0x80, 0x100):
            assert MidiMessage(status=status).category is category(status)

    def test_to_bytes_keeps_full_status(self):
        """Test the wire form includes the channel."""
        message = MidiMessage(status=0xB3, data=b"\x07\x64")
        assert bytes(message) == b"\xb3\x07\x64"

    def test_value_14bit_only_for_two_bytes(self):
        """Test value_14bit is None for one-byte messages."""
        assert MidiMessage(status=0xC0, data=b"\x01").value_14bit is None

    def test_rejects_data_status_bytes(self):
        """Test status bytes inside data are rejected."""
        with pytest.raises(ValidationError):
            MidiMessage(status=0x90, data=b"\x90\x00")

    def test_rejects_data_byte_status(self):
        """Test a data byte cannot be a message status."""
        with pytest.raises(ValidationError):
            MidiMessage(status=0x40)

    def test_from_decoder(self):
        """Test building a one-byte message from decoder parameters."""
        decoder = MidiDecoder()
        status = 0
        for value in (0xD2, 0x55):
            status = decoder.accept(value)

        message = MidiMessage.from_decoder(decoder, status)
        assert message.data == b"\x55"
        assert message.channel == 2

    def test_undefined_realtime_name(self):
        """Test undefined status bytes still have names."""
        assert MidiMessage(status=0xF9).name == "UNDEFINED_F9"


class TestDecoderSnapshot:
    """Decoder snapshots."""

    def test_snapshot_state(self):
        """Test a snapshot mid-message."""
        decoder = MidiDecoder()
        decoder.accept(0x90)
        decoder.accept(0x3C)

        snapshot = decoder.snapshot()
        assert isinstance(snapshot, DecoderSnapshot)
        assert snapshot.current_message == 0x90
        assert snapshot.remaining == 1
        assert snapshot.params == (0x3C, 0)
        assert snapshot.state == DecoderState.AWAITING_PARAMS

    def test_snapshot_streaming(self):
        """Test a snapshot during SYSEX."""
        decoder = MidiDecoder()
        decoder.accept(0xF0)
        assert decoder.snapshot().state == DecoderState.STREAMING
