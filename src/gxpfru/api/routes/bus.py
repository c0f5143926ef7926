"""Generic bus object browsing and method dispatch."""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends, HTTPException, Query

from gxpfru.api.app import get_bus_context
from gxpfru.bus.context import BusContext
from gxpfru.exceptions import MethodNotFoundError, ObjectNotFoundError
from gxpfru.models.bus import (
    BusObjectDetail,
    BusObjectSummary,
    BusOverview,
    MethodCallRequest,
)

router = APIRouter(prefix="/bus", tags=["bus"])


def _summaries(context: BusContext) -> list[BusObjectSummary]:
    return [
        BusObjectSummary(path=path, interface=name)
        for path, name in context.object_server.objects()
    ]


@router.get("", response_model=BusOverview)
async def bus_overview(context: BusContext = Depends(get_bus_context)) -> BusOverview:
    """Bus name and every published object."""
    return BusOverview(
        bus_name=context.bus_name,
        name_acquired=context.name_acquired,
        objects=_summaries(context),
    )


@router.get("/objects", response_model=list[BusObjectSummary])
async def list_objects(
    context: BusContext = Depends(get_bus_context),
) -> list[BusObjectSummary]:
    """List published (path, interface) pairs."""
    return _summaries(context)


@router.get("/object", response_model=BusObjectDetail)
async def get_object(
    path: str = Query(..., description="Object path"),
    interface: str = Query(..., description="Interface name"),
    context: BusContext = Depends(get_bus_context),
) -> BusObjectDetail:
    """Properties and methods of one published interface."""
    try:
        iface = context.object_server.get_interface(path, interface)
    except ObjectNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return BusObjectDetail(
        path=iface.path,
        interface=iface.name,
        properties=dict(iface.properties),
        methods=iface.methods,
    )


@router.post("/call")
async def call_method(
    body: MethodCallRequest,
    context: BusContext = Depends(get_bus_context),
) -> dict[str, str]:
    """Invoke a method on a published interface, e.g. ReScan."""
    try:
        await asyncio.to_thread(
            context.object_server.call_method, body.path, body.interface, body.method
        )
    except (ObjectNotFoundError, MethodNotFoundError) as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return {"status": "ok", "method": body.method}
