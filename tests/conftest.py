"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from gxpfru.bus.context import BusContext
from gxpfru.config import FruDeviceConfig
from gxpfru.core.publisher import InventoryPublisher

IMAGE_SIZE = 256


def build_image(
    serial: bytes = b"CZ20400ABC      ",
    part: bytes = b"P12345-B21      ",
    pca_serial: bytes = b"PWXYZ0012345    ",
    pca_part: bytes = b"P54321-001      ",
    mac0: bytes = bytes([0x00, 0x1A, 0x2B, 0x3C, 0x4D, 0x5E]),
    mac1: bytes = bytes([0x00, 0x1A, 0x2B, 0x3C, 0x4D, 0x5F]),
    size: int = IMAGE_SIZE,
    fill: int = 0xFF,
) -> bytes:
    """Build a synthetic EEPROM image with fields at their fixed offsets."""
    image = bytearray([fill] * max(size, 176))
    image[1:1 + len(serial)] = serial
    image[109:109 + len(part)] = part
    image[132:138] = mac0
    image[138:144] = mac1
    image[144:144 + len(pca_serial)] = pca_serial
    image[160:160 + len(pca_part)] = pca_part
    return bytes(image[:size])


@pytest.fixture
def image_builder():
    """Provide build_image() to tests that need custom images."""
    return build_image


@pytest.fixture
def eeprom_image() -> bytes:
    return build_image()


@pytest.fixture
def server_id_file(tmp_path: Path) -> Path:
    path = tmp_path / "server_id"
    path.write_text("SN123\n")
    return path


@pytest.fixture
def eeprom_candidates(tmp_path: Path) -> list[Path]:
    """Three candidate paths; only the second exists."""
    paths = [tmp_path / f"eeprom-{i}" for i in range(3)]
    paths[1].write_bytes(build_image())
    return paths


@pytest.fixture
def config(eeprom_candidates: list[Path], server_id_file: Path) -> FruDeviceConfig:
    return FruDeviceConfig(
        eeprom_paths=tuple(str(p) for p in eeprom_candidates),
        server_id_path=str(server_id_file),
    )


@pytest.fixture
def bus_context(config: FruDeviceConfig) -> BusContext:
    context = BusContext(config.bus_name)
    context.request_name()
    yield context
    context.close()


@pytest.fixture
def publisher(bus_context: BusContext, config: FruDeviceConfig) -> InventoryPublisher:
    return InventoryPublisher(bus_context, config)
