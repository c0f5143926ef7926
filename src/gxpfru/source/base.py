"""Abstract byte source for EEPROM images."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ByteSource(ABC):
    """Random-access, read-only view of an EEPROM image."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._closed = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def closed(self) -> bool:
        return self._closed

    @abstractmethod
    def read_at(self, offset: int, length: int) -> bytes:
        """Read up to ``length`` bytes starting at ``offset``.

        Returns fewer bytes when the image ends first, and an empty result
        when ``offset`` is at or past the end.

        Raises:
            ByteSourceError: If the underlying read fails.
        """

    def close(self) -> None:
        self._closed = True

    def __enter__(self) -> ByteSource:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
