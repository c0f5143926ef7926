"""Inventory publishing core."""

from gxpfru.core.identity import read_server_id
from gxpfru.core.publisher import InventoryPublisher, PublishState

__all__ = [
    "InventoryPublisher",
    "PublishState",
    "read_server_id",
]
