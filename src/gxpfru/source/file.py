"""File-backed byte source (sysfs EEPROM nodes, image dumps)."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from gxpfru.exceptions import ByteSourceError, SourceUnavailableError
from gxpfru.source.base import ByteSource


class FileByteSource(ByteSource):
    """Byte source reading from an open binary file."""

    def __init__(self, path: str, handle: BinaryIO) -> None:
        super().__init__(path)
        self._handle = handle

    @classmethod
    def open(cls, path: str | Path) -> FileByteSource:
        """Open ``path`` for reading.

        Raises:
            SourceUnavailableError: If the path cannot be opened.
        """
        path = str(path)
        try:
            handle = open(path, "rb")
        except OSError as exc:
            raise SourceUnavailableError(
                f"Cannot open EEPROM source {path}: {exc.strerror or exc}", path=path
            ) from exc
        return cls(path, handle)

    def read_at(self, offset: int, length: int) -> bytes:
        if offset < 0 or length < 0:
            raise ValueError(f"Invalid read: offset={offset} length={length}")
        if self._closed:
            raise ByteSourceError(f"Read from closed source {self._name}", path=self._name)
        try:
            self._handle.seek(offset)
            return self._handle.read(length)
        except OSError as exc:
            raise ByteSourceError(
                f"Read of {length} bytes at offset {offset} failed: {exc}",
                path=self._name,
            ) from exc

    def close(self) -> None:
        if not self._closed:
            self._handle.close()
        super().close()
