"""Management bus object server and service context."""

from gxpfru.bus.context import BusContext
from gxpfru.bus.object_server import BusInterface, ObjectServer

__all__ = [
    "BusContext",
    "BusInterface",
    "ObjectServer",
]
