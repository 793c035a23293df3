"""The chocolate boiler state machine shared by every singleton variant."""
from patternbook.infrastructure.logging.logger import get_logger


class ChocolateBoiler:
    """
    Fill, boil, drain.

    Each operation only acts in the state it is meant for; calling it in any
    other state is ignored and logged at debug level.
    """

    def __init__(self):
        self._empty = True
        self._boiled = False
        self._logger = get_logger(__name__)

    def is_empty(self) -> bool:
        return self._empty

    def is_boiled(self) -> bool:
        return self._boiled

    def fill(self) -> None:
        if self._empty:
            self._empty = False
            self._boiled = False
            # fill boiler with milk/chocolate mixture
            return
        self._ignored("fill")

    def boil(self) -> None:
        if not self._empty and not self._boiled:
            self._boiled = True
            return
        self._ignored("boil")

    def drain(self) -> None:
        if not self._empty and self._boiled:
            self._empty = True
            return
        self._ignored("drain")

    def _ignored(self, operation: str) -> None:
        self._logger.debug(
            f"{type(self).__name__}: ignored {operation} (empty={self._empty}, boiled={self._boiled})"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(empty={self._empty}, boiled={self._boiled})"
