"""
Stream Reader - Drives a MidiDecoder over buffers of bytes.

The reader does no I/O: callers hand it whatever chunk their transport
produced and iterate the resulting MidiMessage models.

With SYSEX capture enabled, the SYSEX message is queued once its transfer
ends, carrying the payload; the terminating status byte (normally 0xF7)
follows as its own message. Realtime bytes arriving mid-transfer are queued
in arrival order ahead of the SYSEX message they interrupted.
"""
from __future__ import annotations

from collections import deque
from typing import Any, Deque, Iterable, Iterator, List, Optional

import structlog

from midistream.engine.classifier import is_data, is_realtime
from midistream.engine.constants import Message
from midistream.engine.decoder import MidiDecoder, coerce_byte
from midistream.engine.sysex import SysexCollector
from midistream.models import MidiMessage

logger = structlog.get_logger()


class MidiStreamReader:
    """
    Queue MIDI messages decoded from arbitrary chunks of a byte stream.

    Example usage:
        reader = MidiStreamReader()
        reader.feed(uart.read(64))
        for message in reader:
            handle(message)
    """

    def __init__(
        self,
        decoder: Optional[MidiDecoder] = None,
        capture_sysex: bool = True,
        sysex_max_length: Optional[int] = None,
    ):
        self.decoder = decoder if decoder is not None else MidiDecoder()
        self.capture_sysex = capture_sysex
        self._collector: Optional[SysexCollector] = (
            SysexCollector(sysex_max_length) if capture_sysex else None
        )
        self._pending: Deque[MidiMessage] = deque()

    def feed(self, data: Iterable[Any]) -> int:
        """
        Decode a chunk of bytes.

        Args:
            data: bytes, bytearray, or any iterable of byte values

        Returns:
            Number of messages queued by this chunk
        """
        queued = 0
        for value in data:
            for message in self._accept(coerce_byte(value)):
                self._pending.append(message)
                queued += 1
        return queued

    def _accept(self, byte: int) -> List[MidiMessage]:
        messages: List[MidiMessage] = []
        status = self.decoder.accept(byte)
        collector = self._collector

        if collector is not None and collector.active:
            if is_data(byte):
                collector.feed(byte)
            elif not is_realtime(byte):
                messages.append(self._end_sysex(collector))

        if status == Message.NONE:
            return messages

        if status == Message.SYSEX:
            if collector is not None:
                collector.begin()
            else:
                messages.append(MidiMessage(status=status))
        elif is_realtime(status):
            messages.append(MidiMessage(status=status))
        else:
            messages.append(MidiMessage.from_decoder(self.decoder, status))
        return messages

    def _end_sysex(self, collector: SysexCollector) -> MidiMessage:
        payload, truncated = collector.end()
        logger.debug("sysex_captured", length=len(payload), truncated=truncated)
        return MidiMessage(status=int(Message.SYSEX), sysex=payload, truncated=truncated)

    def flush(self) -> int:
        """
        Queue a SYSEX transfer still in progress with the payload so far.

        Call at end of input; a later feed() continues with the decoder still
        skipping payload until the next status byte.

        Returns:
            Number of messages queued (0 or 1)
        """
        collector = self._collector
        if collector is None or not collector.active:
            return 0
        self._pending.append(self._end_sysex(collector))
        return 1

    @property
    def pending(self) -> int:
        return len(self._pending)

    def __iter__(self) -> Iterator[MidiMessage]:
        return self

    def __next__(self) -> MidiMessage:
        if not self._pending:
            raise StopIteration
        return self._pending.popleft()

    def reset(self) -> None:
        """Drop queued messages, any capture in progress, and decoder state."""
        self.decoder.reset()
        if self._collector is not None:
            self._collector.reset()
        self._pending.clear()


def decode_bytes(data: Iterable[Any], **kwargs: Any) -> List[MidiMessage]:
    """
    Decode a complete buffer with a fresh reader and return every message.

    A SYSEX transfer left open at the end of the buffer is reported with the
    payload received so far.
    """
    reader = MidiStreamReader(**kwargs)
    reader.feed(data)
    reader.flush()
    return list(reader)
