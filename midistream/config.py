"""
Core configuration management
"""
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """MIDI stream decoder settings"""

    # Paths
    project_root: Path = Path(__file__).parent.parent
    log_dir: Path = project_root / "logs"

    # Logging
    log_level: str = "INFO"
    trace_bytes: bool = False  # Per-byte debug events from the decoder

    # System-exclusive capture
    sysex_max_length: int = 4096

    class Config:
        env_prefix = "MIDISTREAM_"
        env_file = ".env"

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        name = value.upper()
        if name not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return name

    @field_validator("sysex_max_length")
    @classmethod
    def check_sysex_max_length(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("sysex_max_length must be positive")
        return value


settings = Settings()
