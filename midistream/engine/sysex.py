"""
SYSEX Collector - Caller-side capture of system-exclusive payload.

The decoder only reports where a SYSEX transfer starts (0xF0) and skips its
payload. A caller that wants the bytes feeds every following byte here until
the decoder reports the next status byte, normally 0xF7.

Example:
    collector = SysexCollector(max_length=256)
    if decoder.accept(byte) == Message.SYSEX:
        collector.begin()
    ...
    payload, truncated = collector.end()
"""
from __future__ import annotations

from typing import Optional, Tuple

import structlog

from midistream.config import settings
from midistream.engine.classifier import is_data
from midistream.exceptions import ConfigurationError, SysexStateError

logger = structlog.get_logger()


class SysexCollector:
    """Bounded buffer for one SYSEX payload at a time."""

    def __init__(self, max_length: Optional[int] = None):
        if max_length is None:
            max_length = settings.sysex_max_length
        if max_length <= 0:
            raise ConfigurationError(
                "SYSEX capture limit must be positive",
                {"max_length": max_length},
            )
        self.max_length = max_length
        self._buffer = bytearray()
        self._active = False
        self._truncated = False

    @property
    def active(self) -> bool:
        return self._active

    @property
    def truncated(self) -> bool:
        return self._truncated

    def __len__(self) -> int:
        return len(self._buffer)

    def begin(self) -> None:
        """Start a new capture, discarding any unfinished one."""
        if self._active:
            logger.debug("sysex_capture_restarted", dropped=len(self._buffer))
        self._buffer.clear()
        self._truncated = False
        self._active = True

    def feed(self, value: int) -> bool:
        """
        Offer one byte to the capture.

        Status bytes are never payload (realtime bytes may interleave, and any
        other status byte ends the transfer), so they are refused.

        Returns:
            True if the byte was stored
        """
        if not self._active:
            raise SysexStateError("feed() called with no capture in progress", active=False)
        if not is_data(value):
            return False
        if len(self._buffer) >= self.max_length:
            if not self._truncated:
                logger.warning("sysex_truncated", max_length=self.max_length)
            self._truncated = True
            return False
        self._buffer.append(value)
        return True

    def end(self) -> Tuple[bytes, bool]:
        """
        Finish the capture.

        Returns:
            (payload, truncated)
        """
        if not self._active:
            raise SysexStateError("end() called with no capture in progress", active=False)
        payload = bytes(self._buffer)
        truncated = self._truncated
        self._buffer.clear()
        self._truncated = False
        self._active = False
        return payload, truncated

    def reset(self) -> None:
        self._buffer.clear()
        self._truncated = False
        self._active = False
