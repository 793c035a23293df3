"""Configuration schemas."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDERR = "stderr"
    BOTH = "both"
    NONE = "none"


class LoggingConfig(BaseModel):
    """Logging configuration."""
    model_config = ConfigDict(extra="forbid", use_enum_values=True)

    level: str = Field(LogLevel.WARNING.value, description="Root log level")
    destination: LogDestination = Field(LogDestination.STDERR, description="Where log records go")
    file_path: Optional[str] = Field(None, description="Log file path, used by file and both destinations")
    max_size_mb: int = Field(10, description="Rotate the log file after this many megabytes")
    backup_count: int = Field(5, description="Number of rotated log files to keep")
    format: str = Field(
        "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s",
        description="Record format",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalise and validate the log level."""
        level = v.upper()
        if level not in LogLevel.__members__:
            raise ValueError(f"Log level must be one of {list(LogLevel.__members__)}")
        return level

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Rotation settings must not be negative")
        return v

    @model_validator(mode="after")
    def validate_file_path(self) -> "LoggingConfig":
        """File destinations need somewhere to write."""
        if self.destination in (LogDestination.FILE, LogDestination.BOTH) and not self.file_path:
            raise ValueError(f"file_path is required when destination is '{self.destination}'")
        return self


class DemoConfig(BaseModel):
    """Knobs for the runnable demos."""
    model_config = ConfigDict(extra="forbid")

    race_workers: int = Field(2, description="Threads racing for a lazily created singleton")
    race_delay_seconds: float = Field(
        0.05, description="Pause between the None check and construction in lazy singletons"
    )
    remote_slots: int = Field(7, description="Number of on/off slot pairs on the remote control")
    coffee_answer: Optional[str] = Field(
        None, description="Canned answer to the condiments prompt; None reads stdin"
    )

    @field_validator("race_workers")
    @classmethod
    def validate_race_workers(cls, v: int) -> int:
        """A race needs at least two runners."""
        if v < 2:
            raise ValueError("race_workers must be at least 2")
        return v

    @field_validator("race_delay_seconds")
    @classmethod
    def validate_race_delay(cls, v: float) -> float:
        if v < 0:
            raise ValueError("race_delay_seconds must not be negative")
        return v

    @field_validator("remote_slots")
    @classmethod
    def validate_remote_slots(cls, v: int) -> int:
        if v < 1:
            raise ValueError("remote_slots must be at least 1")
        return v


class AppConfig(BaseModel):
    """Application configuration."""
    model_config = ConfigDict(extra="forbid")

    version: str = Field("1.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    demo: DemoConfig = Field(default_factory=DemoConfig)
