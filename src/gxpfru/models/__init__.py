"""Pydantic models for inventory data and bus objects."""

from gxpfru.models.bus import BusObjectDetail, BusObjectSummary, BusOverview, MethodCallRequest
from gxpfru.models.inventory import (
    BUS_PROPERTY_NAMES,
    UNKNOWN,
    EepromFields,
    InventoryRecord,
)

__all__ = [
    "BUS_PROPERTY_NAMES",
    "BusObjectDetail",
    "BusObjectSummary",
    "BusOverview",
    "EepromFields",
    "InventoryRecord",
    "MethodCallRequest",
    "UNKNOWN",
]
