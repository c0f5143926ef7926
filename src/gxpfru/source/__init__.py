"""Byte sources for EEPROM images."""

from gxpfru.source.base import ByteSource
from gxpfru.source.file import FileByteSource
from gxpfru.source.memory import MemoryByteSource

__all__ = [
    "ByteSource",
    "FileByteSource",
    "MemoryByteSource",
]
