"""FRU inventory publisher: source selection, decode, and bus object lifecycle."""

from __future__ import annotations

import threading
from collections.abc import Callable
from enum import StrEnum

from gxpfru.bus.context import BusContext
from gxpfru.bus.object_server import BusInterface
from gxpfru.config import FruDeviceConfig
from gxpfru.core.identity import read_server_id
from gxpfru.eeprom.decoder import decode
from gxpfru.exceptions import SourceUnavailableError
from gxpfru.models.inventory import EepromFields, InventoryRecord
from gxpfru.source.base import ByteSource
from gxpfru.source.file import FileByteSource
from gxpfru.utils.logging import get_logger

logger = get_logger(__name__)

RESCAN_METHOD = "ReScan"

SourceOpener = Callable[[str], ByteSource]


class PublishState(StrEnum):
    UNPUBLISHED = "unpublished"
    PUBLISHED = "published"


def select_and_decode(
    paths: tuple[str, ...],
    opener: SourceOpener = FileByteSource.open,
    trim: bool = False,
) -> tuple[EepromFields, str | None]:
    """Decode the first candidate that opens.

    Returns:
        Tuple of (fields, path). With no openable candidate the fields are
        all "Unknown" and path is None.
    """
    for path in paths:
        try:
            source = opener(path)
        except SourceUnavailableError as exc:
            logger.debug("eeprom_candidate_unavailable", path=path, error=str(exc))
            continue
        with source:
            fields = decode(source, trim=trim)
        logger.info("eeprom_decoded", path=path)
        return fields, path

    logger.warning("eeprom_source_unavailable", candidates=list(paths))
    return EepromFields.unknown(), None


class InventoryPublisher:
    """Owns the FRU object on the bus and keeps exactly one published.

    Scan, rescan and shutdown hold one lock, so concurrent ReScan calls from
    worker threads run one after another.
    """

    def __init__(
        self,
        context: BusContext,
        config: FruDeviceConfig,
        opener: SourceOpener = FileByteSource.open,
    ) -> None:
        self._context = context
        self._config = config
        self._opener = opener
        self._lock = threading.Lock()
        self._fru_iface: BusInterface | None = None
        self._manager_iface: BusInterface | None = None
        self._record: InventoryRecord | None = None

    @property
    def config(self) -> FruDeviceConfig:
        return self._config

    @property
    def context(self) -> BusContext:
        return self._context

    @property
    def state(self) -> PublishState:
        if self._fru_iface is not None and self._fru_iface.is_published:
            return PublishState.PUBLISHED
        return PublishState.UNPUBLISHED

    @property
    def record(self) -> InventoryRecord | None:
        """The record behind the currently published FRU object."""
        return self._record

    def server_id(self) -> str:
        return read_server_id(self._config.server_id_path)

    def manufacturer(self) -> str:
        return self._config.manufacturer

    def read_inventory(self) -> InventoryRecord:
        """Resolve identity and decode the highest-priority EEPROM."""
        fields, source = select_and_decode(
            self._config.eeprom_paths,
            opener=self._opener,
            trim=self._config.trim_fields,
        )
        return InventoryRecord.from_fields(
            fields,
            server_id=self.server_id(),
            manufacturer=self.manufacturer(),
            source=source,
        )

    def scan(self) -> BusInterface:
        """Publish the FRU object. Replaces the current one if already published."""
        with self._lock:
            return self._publish_fresh()

    def rescan(self) -> BusInterface:
        """Replace the published FRU object with a freshly decoded one.

        The new object is fully built before it is swapped in, so the FRU
        path is never empty between the two.
        """
        with self._lock:
            if self.state == PublishState.UNPUBLISHED:
                logger.info("fru_rescan_while_unpublished")
            return self._publish_fresh()

    def start(self) -> None:
        """Publish the manager object and run the initial scan."""
        with self._lock:
            if self._manager_iface is None:
                server = self._context.object_server
                iface = server.create_interface(
                    self._config.manager_object_path, self._config.manager_interface
                )
                iface.register_method(RESCAN_METHOD, self._on_rescan)
                server.publish(iface)
                self._manager_iface = iface
                logger.info(
                    "fru_manager_published",
                    path=iface.path,
                    interface=iface.name,
                )
            self._publish_fresh()

    def shutdown(self) -> None:
        """Remove the FRU and manager objects."""
        with self._lock:
            server = self._context.object_server
            if self._fru_iface is not None:
                server.remove_interface(self._fru_iface)
                self._fru_iface = None
                self._record = None
            if self._manager_iface is not None:
                server.remove_interface(self._manager_iface)
                self._manager_iface = None
        logger.info("fru_publisher_stopped")

    def _on_rescan(self) -> None:
        self.rescan()

    def _publish_fresh(self) -> BusInterface:
        record = self.read_inventory()
        server = self._context.object_server
        iface = server.create_interface(
            self._config.fru_object_path, self._config.fru_interface
        )
        for name, value in record.bus_properties().items():
            iface.register_property(name, value)

        previous = server.publish(iface, replace=True)
        if previous is not None and previous is not self._fru_iface:
            logger.warning("fru_object_replaced_foreign", path=iface.path)
        self._fru_iface = iface
        self._record = record
        logger.info(
            "fru_object_published",
            path=iface.path,
            source=record.source,
            server_id=record.server_id,
            replaced=previous is not None,
        )
        return iface
