"""In-process management bus object server.

Objects are keyed by ``(path, interface)``. Each key holds at most one
published interface; replacing one is a single swap under the registry lock,
so readers see either the old interface or the new one, never neither.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from gxpfru.exceptions import (
    MethodNotFoundError,
    ObjectNotFoundError,
    ObjectPathExistsError,
    PropertyReadOnlyError,
)
from gxpfru.utils.logging import get_logger

logger = get_logger(__name__)

ObjectKey = tuple[str, str]


class BusInterface:
    """A named interface at an object path with string properties and methods."""

    def __init__(self, path: str, name: str) -> None:
        self._path = path
        self._name = name
        self._properties: dict[str, str] = {}
        self._methods: dict[str, Callable[[], Any]] = {}
        self._published = False

    @property
    def path(self) -> str:
        return self._path

    @property
    def name(self) -> str:
        return self._name

    @property
    def key(self) -> ObjectKey:
        return (self._path, self._name)

    @property
    def is_published(self) -> bool:
        return self._published

    @property
    def properties(self) -> Mapping[str, str]:
        return MappingProxyType(self._properties)

    @property
    def methods(self) -> list[str]:
        return sorted(self._methods)

    def register_property(self, name: str, value: str) -> None:
        """Add a read-only property. Only allowed before publication."""
        if self._published:
            raise PropertyReadOnlyError(
                f"Cannot set {name} on published interface {self._name}", path=self._path
            )
        self._properties[name] = str(value)

    def register_method(self, name: str, callback: Callable[[], Any]) -> None:
        self._methods[name] = callback

    def get_property(self, name: str) -> str:
        try:
            return self._properties[name]
        except KeyError:
            raise ObjectNotFoundError(
                f"Property {name} not found on {self._name}", path=self._path
            ) from None

    def call(self, method: str) -> Any:
        callback = self._methods.get(method)
        if callback is None:
            raise MethodNotFoundError(
                f"Method {method} not found on {self._name}", path=self._path
            )
        return callback()


class ObjectServer:
    """Registry of published interfaces."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._objects: dict[ObjectKey, BusInterface] = {}

    def create_interface(self, path: str, name: str) -> BusInterface:
        """Create an unpublished interface; register properties, then publish()."""
        return BusInterface(path, name)

    def publish(self, iface: BusInterface, replace: bool = False) -> BusInterface | None:
        """Publish ``iface``, optionally swapping out the current occupant.

        Returns:
            The interface that was replaced, if any.

        Raises:
            ObjectPathExistsError: If the key is occupied and ``replace`` is False.
        """
        with self._lock:
            previous = self._objects.get(iface.key)
            if previous is iface:
                return None
            if previous is not None and not replace:
                raise ObjectPathExistsError(
                    f"Interface {iface.name} already published at {iface.path}",
                    path=iface.path,
                )
            iface._published = True
            self._objects[iface.key] = iface
            if previous is not None:
                previous._published = False
        logger.debug(
            "bus_interface_published",
            path=iface.path,
            interface=iface.name,
            replaced=previous is not None,
        )
        return previous

    def remove_interface(self, iface: BusInterface) -> bool:
        """Unpublish ``iface``. Returns False if it was not the published occupant."""
        with self._lock:
            if self._objects.get(iface.key) is not iface:
                return False
            del self._objects[iface.key]
            iface._published = False
        logger.debug("bus_interface_removed", path=iface.path, interface=iface.name)
        return True

    def get_interface(self, path: str, name: str) -> BusInterface:
        with self._lock:
            iface = self._objects.get((path, name))
        if iface is None:
            raise ObjectNotFoundError(f"No interface {name} at {path}", path=path)
        return iface

    def objects(self) -> list[ObjectKey]:
        """List published ``(path, interface)`` keys, sorted."""
        with self._lock:
            return sorted(self._objects)

    def count(self, path: str) -> int:
        """Number of interfaces published at ``path``."""
        with self._lock:
            return sum(1 for p, _ in self._objects if p == path)

    def call_method(self, path: str, name: str, method: str) -> Any:
        """Dispatch a method call. Runs outside the registry lock."""
        iface = self.get_interface(path, name)
        logger.info("bus_method_call", path=path, interface=name, method=method)
        return iface.call(method)

    def clear(self) -> None:
        with self._lock:
            for iface in self._objects.values():
                iface._published = False
            self._objects.clear()
