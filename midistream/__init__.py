"""
midistream - incremental MIDI 1.0 byte-stream decoding

engine/
    The decoder state machine and the helpers around it.
    MidiDecoder consumes one byte at a time; MidiStreamReader drives it
    over buffers and yields MidiMessage models.

config.py / logging.py / exceptions.py
    Settings (MIDISTREAM_ environment prefix), structlog setup, and the
    MidiStreamError hierarchy.
"""
from midistream.engine.constants import ControlChange, Message
from midistream.engine.decoder import MidiDecoder
from midistream.engine.stream import MidiStreamReader, decode_bytes
from midistream.engine.sysex import SysexCollector
from midistream.models import DecoderState, MidiMessage

__version__ = "1.0.0"

__all__ = [
    "ControlChange",
    "DecoderState",
    "Message",
    "MidiDecoder",
    "MidiMessage",
    "MidiStreamReader",
    "SysexCollector",
    "decode_bytes",
]
