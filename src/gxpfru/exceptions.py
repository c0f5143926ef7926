"""Exception hierarchy for EEPROM access, identity lookup and the management bus."""

from __future__ import annotations


class FruDeviceError(Exception):
    """Base exception for all gxp-fru-device errors."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(message)


class SourceUnavailableError(FruDeviceError):
    """An EEPROM byte source could not be opened."""


class ByteSourceError(FruDeviceError):
    """A read from an open byte source failed."""


class IdentitySourceUnavailableError(FruDeviceError):
    """The server identity file could not be opened or read."""


class BusError(FruDeviceError):
    """Error in the management bus object server."""


class ObjectPathExistsError(BusError):
    """An interface is already published at the requested path."""


class ObjectNotFoundError(BusError):
    """No interface is published at the requested path."""


class MethodNotFoundError(BusError):
    """The interface does not expose the requested method."""


class PropertyReadOnlyError(BusError):
    """Properties cannot change once an interface is published."""
