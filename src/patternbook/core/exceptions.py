# src/patternbook/core/exceptions.py
from typing import Any, List, Optional, Sequence


class PatternbookError(Exception):
    """Base exception for all patternbook errors."""
    pass


class ValidationError(PatternbookError):
    """Raised when an argument or model fails validation."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(PatternbookError):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class UnknownProductError(PatternbookError):
    """Raised when a factory is asked for a product it cannot create."""
    def __init__(self, factory: str, product: Any):
        super().__init__(f"{factory} cannot create product '{product}'")
        self.factory = factory
        self.product = product


class UnsupportedOperationError(PatternbookError):
    """Raised when an adapter cannot honour an operation of the target interface."""
    def __init__(self, operation: str, adaptee: str):
        super().__init__(f"Operation '{operation}' is not supported by {adaptee}")
        self.operation = operation
        self.adaptee = adaptee


class SlotOutOfRangeError(ValidationError):
    """Raised when a remote control slot does not exist."""
    def __init__(self, slot: int, slots: int):
        super().__init__(
            f"Slot {slot} is out of range: remote has {slots} slots (0-{slots - 1})",
            {"slot": slot, "slots": slots},
        )
        self.slot = slot
        self.slots = slots


class DemoNotFoundError(PatternbookError):
    """Raised when a demo name is not in the catalog."""
    def __init__(self, name: str, available: Sequence[str] = ()):
        message = f"No demo named '{name}'"
        if available:
            message += f". Available: {', '.join(sorted(available))}"
        super().__init__(message)
        self.name = name
        self.available = list(available)


class RaceTimeoutError(PatternbookError):
    """Raised when racing threads do not finish in time."""
    def __init__(self, accessor: str, stalled: Sequence[str], timeout: float):
        super().__init__(
            f"{len(stalled)} thread(s) racing on {accessor} still running after {timeout}s: "
            f"{', '.join(stalled)}"
        )
        self.accessor = accessor
        self.stalled = list(stalled)
        self.timeout = timeout
