"""GXP FRU device: EEPROM inventory published on the management bus."""

__version__ = "0.1.0"
