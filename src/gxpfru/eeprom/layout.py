"""Fixed byte layout of the GXP manufacturing EEPROM record.

Offsets and sizes are in bytes from the start of the image.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class FieldKind(StrEnum):
    """How the raw bytes of a field are rendered as a string."""
    ASCII = "ascii"
    MAC = "mac"


@dataclass(frozen=True)
class FieldSpec:
    """Location of one field in the image."""

    name: str
    offset: int
    size: int
    kind: FieldKind = FieldKind.ASCII

    @property
    def end(self) -> int:
        return self.offset + self.size


MAC_ADDRESS_SIZE = 6

PRODUCT_SERIAL_NUMBER = FieldSpec("product_serial_number", offset=1, size=16)
PRODUCT_PART_NUMBER = FieldSpec("product_part_number", offset=109, size=16)
MAC0 = FieldSpec("mac0", offset=132, size=MAC_ADDRESS_SIZE, kind=FieldKind.MAC)
MAC1 = FieldSpec("mac1", offset=138, size=MAC_ADDRESS_SIZE, kind=FieldKind.MAC)
PCA_SERIAL_NUMBER = FieldSpec("pca_serial_number", offset=144, size=16)
PCA_PART_NUMBER = FieldSpec("pca_part_number", offset=160, size=16)

EEPROM_LAYOUT: tuple[FieldSpec, ...] = (
    PRODUCT_SERIAL_NUMBER,
    PRODUCT_PART_NUMBER,
    MAC0,
    MAC1,
    PCA_SERIAL_NUMBER,
    PCA_PART_NUMBER,
)

# Smallest image that holds every field without padding (176 bytes)
MIN_IMAGE_SIZE = max(spec.end for spec in EEPROM_LAYOUT)
