"""Platform constants and runtime configuration.

Search order for each setting:
    1. Explicit keyword override (CLI options)
    2. GXPFRU_* environment variable
    3. Platform default below
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

# Candidate EEPROM images, highest priority first
DEFAULT_EEPROM_PATHS: tuple[str, ...] = (
    "/sys/bus/i2c/devices/2-0055/eeprom",
    "/sys/bus/i2c/devices/2-0054/eeprom",
    "/sys/bus/i2c/devices/2-0050/eeprom",
)

DEFAULT_SERVER_ID_PATH = "/sys/class/soc/xreg/server_id"

MANUFACTURER = "Hewlett Packard Enterprise"

BUS_NAME = "xyz.openbmc_project.GxpFruDevice"
FRU_OBJECT_PATH = "/xyz/openbmc_project/FruDevice/HPE"
FRU_INTERFACE = "xyz.openbmc_project.FruDevice"
MANAGER_OBJECT_PATH = "/xyz/openbmc_project/FruDevice"
MANAGER_INTERFACE = "xyz.openbmc_project.FruDeviceManager"

ENV_EEPROM_PATHS = "GXPFRU_EEPROM_PATHS"
ENV_SERVER_ID_PATH = "GXPFRU_SERVER_ID_PATH"
ENV_TRIM_FIELDS = "GXPFRU_TRIM_FIELDS"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class FruDeviceConfig:
    """Everything the publisher needs to know about the platform."""
    eeprom_paths: tuple[str, ...] = DEFAULT_EEPROM_PATHS
    server_id_path: str = DEFAULT_SERVER_ID_PATH
    manufacturer: str = MANUFACTURER
    trim_fields: bool = False
    bus_name: str = BUS_NAME
    fru_object_path: str = FRU_OBJECT_PATH
    fru_interface: str = FRU_INTERFACE
    manager_object_path: str = MANAGER_OBJECT_PATH
    manager_interface: str = MANAGER_INTERFACE


def _parse_paths(value: str) -> tuple[str, ...]:
    return tuple(p for p in value.split(os.pathsep) if p)


def load_config(
    eeprom_paths: tuple[str, ...] | list[str] | None = None,
    server_id_path: str | None = None,
    trim_fields: bool | None = None,
) -> FruDeviceConfig:
    """Build a config from defaults, environment and explicit overrides.

    Empty overrides (None, or an empty path list) fall through to the next
    source in the search order.
    """
    config = FruDeviceConfig()

    env_paths = os.environ.get(ENV_EEPROM_PATHS)
    if env_paths:
        parsed = _parse_paths(env_paths)
        if parsed:
            config = replace(config, eeprom_paths=parsed)

    env_server_id = os.environ.get(ENV_SERVER_ID_PATH)
    if env_server_id:
        config = replace(config, server_id_path=env_server_id)

    env_trim = os.environ.get(ENV_TRIM_FIELDS)
    if env_trim is not None:
        config = replace(config, trim_fields=env_trim.strip().lower() in _TRUE_VALUES)

    if eeprom_paths:
        config = replace(config, eeprom_paths=tuple(eeprom_paths))
    if server_id_path:
        config = replace(config, server_id_path=server_id_path)
    if trim_fields is not None:
        config = replace(config, trim_fields=trim_fields)

    return config
