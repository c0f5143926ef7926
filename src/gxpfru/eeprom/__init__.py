"""GXP manufacturing EEPROM record layout and decoder."""

from gxpfru.eeprom.decoder import decode, format_mac
from gxpfru.eeprom.layout import EEPROM_LAYOUT, MIN_IMAGE_SIZE, FieldSpec

__all__ = [
    "EEPROM_LAYOUT",
    "MIN_IMAGE_SIZE",
    "FieldSpec",
    "decode",
    "format_mac",
]
