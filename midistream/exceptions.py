"""
Custom Exception Hierarchy for midistream

The byte stream itself never raises: malformed MIDI data is discarded and the
decoder resynchronizes on the next status byte. These exceptions only cover
caller-contract violations and configuration problems.
"""
from typing import Optional


class MidiStreamError(Exception):
    """
    Base exception for all midistream errors.

    All custom exceptions inherit from this class so callers can catch
    every library error with a single except clause.
    """
    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# Configuration Errors

class ConfigurationError(MidiStreamError):
    """
    Invalid configuration or settings.

    Examples: non-positive SYSEX capture limit passed to a collector.
    """
    pass


# Caller Contract Errors

class ByteValueError(MidiStreamError):
    """
    A value handed to the decoder is not a single octet.

    Base class for input-type violations. These are programming errors in the
    caller, distinct from corrupt MIDI data on the wire.
    """
    pass


class InvalidByteError(ByteValueError, ValueError):
    """accept() was called with something other than an int in 0..255."""
    def __init__(self, value: object):
        super().__init__(
            f"Expected a byte value in 0..255, got {value!r}",
            {"value": repr(value), "value_type": type(value).__name__},
        )
        self.value = value


class SysexStateError(MidiStreamError):
    """SysexCollector operation is invalid for its current state."""
    def __init__(self, message: str, active: bool):
        super().__init__(message, {"active": active})
        self.active = active
