"""Flags – raw string conversions."""
from __future__ import annotations

import re

from mp_devconfig.kernel.errors import FlagParseError

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(raw: str) -> int:
    """Parse a signed 32-bit decimal integer.

    Stricter than :func:`int`: surrounding whitespace, underscores and
    non-ASCII digits are rejected, as are values outside the 32-bit range.
    """
    if not _INT_RE.fullmatch(raw):
        raise FlagParseError(raw, "int")
    value = int(raw)
    if not INT_MIN <= value <= INT_MAX:
        raise FlagParseError(raw, "int32")
    return value


def parse_bool(raw: str) -> bool:
    """``"true"`` in any case is ``True``; every other string is ``False``."""
    return raw.lower() == "true"


__all__ = ["INT_MAX", "INT_MIN", "parse_bool", "parse_int"]
