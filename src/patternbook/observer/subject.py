"""Subject/observer base types."""
from abc import ABC, abstractmethod
from typing import Generic, List, Protocol, TypeVar

from patternbook.infrastructure.logging.logger import get_logger

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


class Observer(Protocol[T_contra]):
    """Protocol for anything that wants to hear about a subject's state."""

    def update(self, state: T_contra) -> None:
        """Receive the subject's latest state."""
        ...


class Subject(ABC, Generic[T]):
    """
    Keeps an ordered list of observers and pushes its state to them.

    Registration is idempotent and removing an unknown observer is a no-op.
    Notification walks a copy of the list, so observers added or removed
    while a broadcast is running take effect from the next broadcast.
    """

    def __init__(self):
        self._observers: List[Observer[T]] = []
        self._logger = get_logger(__name__)

    @property
    def observers(self) -> List[Observer[T]]:
        """Currently registered observers, in registration order."""
        return list(self._observers)

    def register_observer(self, observer: Observer[T]) -> None:
        if observer in self._observers:
            return
        self._observers.append(observer)
        self._logger.debug(f"Registered {type(observer).__name__} on {type(self).__name__}")

    def remove_observer(self, observer: Observer[T]) -> None:
        if observer in self._observers:
            self._observers.remove(observer)
            self._logger.debug(f"Removed {type(observer).__name__} from {type(self).__name__}")

    def notify_observers(self) -> None:
        """Push the current state to every registered observer."""
        state = self.current_state()
        observers = list(self._observers)
        self._logger.debug(f"Notifying {len(observers)} observers of {type(self).__name__}")

        for observer in observers:
            try:
                observer.update(state)
            except Exception as e:
                self._logger.error(f"Observer {type(observer).__name__} failed to update: {e}")
                # Continue with other observers

    @abstractmethod
    def current_state(self) -> T:
        """The snapshot handed to observers."""
