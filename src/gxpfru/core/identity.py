"""Server identity lookup."""

from __future__ import annotations

from pathlib import Path

from gxpfru.exceptions import IdentitySourceUnavailableError
from gxpfru.models.inventory import UNKNOWN
from gxpfru.utils.logging import get_logger

logger = get_logger(__name__)


def read_first_line(path: str | Path) -> str:
    """Return the first line of a text file without its line terminator.

    Raises:
        IdentitySourceUnavailableError: If the file cannot be opened or read,
            or holds no data.
    """
    try:
        with open(path, encoding="ascii", errors="replace") as fin:
            line = fin.readline()
    except OSError as exc:
        raise IdentitySourceUnavailableError(
            f"Cannot read identity file {path}: {exc.strerror or exc}", path=str(path)
        ) from exc
    if not line:
        raise IdentitySourceUnavailableError(f"Identity file {path} is empty", path=str(path))
    return line.rstrip("\r\n")


def read_server_id(path: str | Path) -> str:
    """Read the server identifier, falling back to the sentinel value."""
    try:
        return read_first_line(path)
    except IdentitySourceUnavailableError as exc:
        logger.warning("server_id_unavailable", path=str(path), error=str(exc))
        return UNKNOWN
