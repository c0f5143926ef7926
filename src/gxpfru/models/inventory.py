"""Decoded EEPROM fields and the published inventory record."""

from __future__ import annotations

from pydantic import BaseModel, Field

UNKNOWN = "Unknown"

# InventoryRecord attribute -> FRU bus property, in publication order
BUS_PROPERTY_NAMES: dict[str, str] = {
    "server_id": "SERVER_ID",
    "manufacturer": "PRODUCT_MANUFACTURER",
    "product_part_number": "PRODUCT_PART_NUMBER",
    "product_serial_number": "PRODUCT_SERIAL_NUMBER",
    "pca_part_number": "PCA_PART_NUMBER",
    "pca_serial_number": "PCA_SERIAL_NUMBER",
    "mac0": "MAC0",
    "mac1": "MAC1",
}


class EepromFields(BaseModel):
    """The six identity fields decoded from one EEPROM image."""
    model_config = {"frozen": True}

    product_serial_number: str = UNKNOWN
    product_part_number: str = UNKNOWN
    pca_serial_number: str = UNKNOWN
    pca_part_number: str = UNKNOWN
    mac0: str = UNKNOWN
    mac1: str = UNKNOWN

    @classmethod
    def unknown(cls) -> EepromFields:
        """Fields for a platform where no EEPROM source could be opened."""
        return cls()


class InventoryRecord(BaseModel):
    """Everything published on the FRU object."""
    model_config = {"frozen": True}

    server_id: str = Field(default=UNKNOWN, description="Server identifier from the SoC")
    manufacturer: str = Field(description="Product manufacturer")
    product_part_number: str = UNKNOWN
    product_serial_number: str = UNKNOWN
    pca_part_number: str = UNKNOWN
    pca_serial_number: str = UNKNOWN
    mac0: str = UNKNOWN
    mac1: str = UNKNOWN
    source: str | None = Field(
        default=None, description="EEPROM path that was decoded, None if none opened"
    )

    @classmethod
    def from_fields(
        cls,
        fields: EepromFields,
        server_id: str,
        manufacturer: str,
        source: str | None = None,
    ) -> InventoryRecord:
        return cls(
            server_id=server_id,
            manufacturer=manufacturer,
            source=source,
            **fields.model_dump(),
        )

    def bus_properties(self) -> dict[str, str]:
        """Map the record onto FRU bus property names."""
        return {prop: getattr(self, attr) for attr, prop in BUS_PROPERTY_NAMES.items()}
