"""Decode identity fields from an EEPROM image.

Short reads are padded with NUL bytes to the declared field size, so every
field always renders from exactly ``size`` bytes. A read that fails outright
is treated as an empty read. The decoder never raises for bad images.
"""

from __future__ import annotations

import string

from gxpfru.eeprom.layout import (
    EEPROM_LAYOUT,
    MAC_ADDRESS_SIZE,
    FieldKind,
    FieldSpec,
)
from gxpfru.exceptions import ByteSourceError
from gxpfru.models.inventory import EepromFields
from gxpfru.source.base import ByteSource
from gxpfru.utils.logging import get_logger

logger = get_logger(__name__)

PAD_BYTE = b"\x00"

# Stripped from both ends of ASCII fields when trimming is enabled
_TRIM_CHARS = "\x00\xff" + string.whitespace


def format_mac(raw: bytes) -> str:
    """Render 6 raw bytes as a lowercase colon-separated MAC address."""
    if len(raw) != MAC_ADDRESS_SIZE:
        raise ValueError(f"MAC address requires {MAC_ADDRESS_SIZE} bytes, got {len(raw)}")
    return ":".join(f"{b:02x}" for b in raw)


def format_ascii(raw: bytes, trim: bool = False) -> str:
    """Render raw bytes as text, one character per byte.

    latin-1 maps every byte value to a character, so nothing is lost or
    replaced. With ``trim`` the NUL/0xFF padding and surrounding whitespace
    are removed.
    """
    text = raw.decode("latin-1")
    if trim:
        text = text.strip(_TRIM_CHARS)
    return text


def read_field(source: ByteSource, spec: FieldSpec) -> bytes:
    """Read exactly ``spec.size`` bytes for a field, NUL-padding short reads."""
    try:
        raw = source.read_at(spec.offset, spec.size)
    except ByteSourceError as exc:
        logger.warning(
            "eeprom_field_read_failed",
            source=source.name,
            field=spec.name,
            error=str(exc),
        )
        raw = b""

    raw = raw[:spec.size]
    if len(raw) < spec.size:
        logger.debug(
            "eeprom_field_short_read",
            source=source.name,
            field=spec.name,
            expected=spec.size,
            got=len(raw),
        )
        raw = raw + PAD_BYTE * (spec.size - len(raw))
    return raw


def decode_field(source: ByteSource, spec: FieldSpec, trim: bool = False) -> str:
    raw = read_field(source, spec)
    if spec.kind == FieldKind.MAC:
        return format_mac(raw)
    return format_ascii(raw, trim=trim)


def decode(source: ByteSource, *, trim: bool = False) -> EepromFields:
    """Decode every field in the layout from ``source``.

    Args:
        source: Open byte source positioned anywhere; each field seeks.
        trim: Strip padding from ASCII fields.

    Returns:
        EepromFields with one string per layout entry.
    """
    values = {spec.name: decode_field(source, spec, trim=trim) for spec in EEPROM_LAYOUT}
    return EepromFields(**values)
