"""Core concepts shared by every pattern package."""

from .exceptions import (
    ConfigurationError,
    DemoNotFoundError,
    PatternbookError,
    RaceTimeoutError,
    SlotOutOfRangeError,
    UnknownProductError,
    UnsupportedOperationError,
    ValidationError,
)

__all__ = [
    "PatternbookError",
    "ValidationError",
    "ConfigurationError",
    "UnknownProductError",
    "UnsupportedOperationError",
    "SlotOutOfRangeError",
    "DemoNotFoundError",
    "RaceTimeoutError",
]
