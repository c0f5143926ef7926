"""Bus object views returned by the HTTP gateway."""

from __future__ import annotations

from pydantic import BaseModel, Field


class BusObjectSummary(BaseModel):
    """One published interface on the bus."""

    path: str
    interface: str


class BusObjectDetail(BaseModel):
    """A published interface with its properties and methods."""

    path: str
    interface: str
    properties: dict[str, str] = Field(default_factory=dict)
    methods: list[str] = Field(default_factory=list)


class BusOverview(BaseModel):
    bus_name: str
    name_acquired: bool
    objects: list[BusObjectSummary] = Field(default_factory=list)


class MethodCallRequest(BaseModel):
    path: str
    interface: str
    method: str
