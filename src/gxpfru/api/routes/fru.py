"""FRU inventory endpoints."""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends, HTTPException

from gxpfru.api.app import get_publisher
from gxpfru.core.publisher import InventoryPublisher, PublishState
from gxpfru.models.inventory import InventoryRecord

router = APIRouter(prefix="/fru", tags=["fru"])


def _current_record(publisher: InventoryPublisher) -> InventoryRecord:
    record = publisher.record
    if publisher.state != PublishState.PUBLISHED or record is None:
        raise HTTPException(status_code=503, detail="FRU object is not published")
    return record


@router.get("", response_model=InventoryRecord)
async def get_fru(publisher: InventoryPublisher = Depends(get_publisher)) -> InventoryRecord:
    """The record behind the published FRU object."""
    return _current_record(publisher)


@router.post("/rescan", response_model=InventoryRecord)
async def rescan(publisher: InventoryPublisher = Depends(get_publisher)) -> InventoryRecord:
    """Re-read the EEPROM and replace the FRU object."""
    await asyncio.to_thread(publisher.rescan)
    return _current_record(publisher)
