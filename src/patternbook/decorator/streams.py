"""A decorator in the standard I/O stack."""
import io
from typing import BinaryIO

_UPPER = bytes(range(ord("A"), ord("Z") + 1))
_LOWER = bytes(range(ord("a"), ord("z") + 1))
_TO_LOWER = bytes.maketrans(_UPPER, _LOWER)


class LowerCaseInputStream(io.RawIOBase):
    """
    Wraps a binary stream and lower-cases ASCII letters as they are read.

    Being a ``RawIOBase`` it can itself be wrapped, e.g. by
    ``io.BufferedReader`` or ``io.TextIOWrapper``.
    """

    def __init__(self, stream: BinaryIO):
        super().__init__()
        self._stream = stream

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        data = self._stream.read(len(buffer))
        if not data:
            return 0
        n = len(data)
        buffer[:n] = data.translate(_TO_LOWER)
        return n

    def close(self) -> None:
        try:
            self._stream.close()
        finally:
            super().close()
