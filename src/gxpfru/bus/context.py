"""Service context owning the bus name and object server for one process."""

from __future__ import annotations

from gxpfru.bus.object_server import ObjectServer
from gxpfru.utils.logging import get_logger

logger = get_logger(__name__)


class BusContext:
    """Bus connection state, created at startup and closed at shutdown.

    Passed explicitly to whatever publishes objects instead of living in
    module globals.
    """

    def __init__(self, bus_name: str, object_server: ObjectServer | None = None) -> None:
        self._bus_name = bus_name
        self._object_server = object_server or ObjectServer()
        self._name_acquired = False
        self._closed = False

    @property
    def bus_name(self) -> str:
        return self._bus_name

    @property
    def object_server(self) -> ObjectServer:
        return self._object_server

    @property
    def name_acquired(self) -> bool:
        return self._name_acquired

    @property
    def is_closed(self) -> bool:
        return self._closed

    def request_name(self) -> None:
        if self._closed:
            raise RuntimeError(f"Bus context for {self._bus_name} is closed")
        self._name_acquired = True
        logger.info("bus_name_acquired", bus_name=self._bus_name)

    def close(self) -> None:
        """Drop every published object and release the bus name."""
        if self._closed:
            return
        self._object_server.clear()
        self._name_acquired = False
        self._closed = True
        logger.info("bus_context_closed", bus_name=self._bus_name)

    def __enter__(self) -> BusContext:
        self.request_name()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
