"""
Stateless byte classification.

Status bytes fall into exactly one of three categories:
- channel messages        0x80-0xEF
- system common messages  0xF0-0xF7
- system realtime         0xF8-0xFF
Anything below 0x80 is a data byte.
"""
from enum import Enum


class MessageCategory(str, Enum):
    """Byte category"""

    DATA = "data"
    CHANNEL = "channel"
    SYSTEM_COMMON = "system_common"
    REALTIME = "realtime"


def is_status(value: int) -> bool:
    return (value & 0x80) == 0x80


def is_data(value: int) -> bool:
    return (value & 0x80) == 0


def is_channel_message(value: int) -> bool:
    return is_status(value) and (value & 0xF0) != 0xF0


def is_system_common(value: int) -> bool:
    return (value & 0xF8) == 0xF0


def is_realtime(value: int) -> bool:
    return (value & 0xF8) == 0xF8


def message_value(status: int) -> int:
    """Status byte with the channel nibble stripped."""
    return status & 0xF0


def message_channel(status: int) -> int:
    return status & 0x0F


def category(value: int) -> MessageCategory:
    """Category of any byte; the four categories cover 0x00-0xFF exactly."""
    if is_data(value):
        return MessageCategory.DATA
    if is_realtime(value):
        return MessageCategory.REALTIME
    if is_system_common(value):
        return MessageCategory.SYSTEM_COMMON
    return MessageCategory.CHANNEL
