"""In-memory byte source."""

from __future__ import annotations

from gxpfru.exceptions import ByteSourceError
from gxpfru.source.base import ByteSource


class MemoryByteSource(ByteSource):
    """Byte source over a bytes buffer, e.g. an image already read into memory."""

    def __init__(self, data: bytes, name: str = "<memory>") -> None:
        super().__init__(name)
        self._data = bytes(data)

    def __len__(self) -> int:
        return len(self._data)

    def read_at(self, offset: int, length: int) -> bytes:
        if offset < 0 or length < 0:
            raise ValueError(f"Invalid read: offset={offset} length={length}")
        if self._closed:
            raise ByteSourceError(f"Read from closed source {self._name}", path=self._name)
        return self._data[offset:offset + length]
