"""Text of base type entries."""

from __future__ import annotations

import enum
from typing import Optional


class BaseTypeEncoding(enum.Enum):
    """How the bits of a base type are interpreted."""

    OTHER = "other"
    BOOLEAN = "boolean"
    ADDRESS = "address"
    SIGNED = "signed"
    SIGNED_CHAR = "signed_char"
    UNSIGNED = "unsigned"
    UNSIGNED_CHAR = "unsigned_char"
    FLOAT = "float"


class Endianity(enum.Enum):
    """Byte order of a base type."""

    DEFAULT = "default"
    BIG = "big"
    LITTLE = "little"


_ENCODING_NAMES = {
    BaseTypeEncoding.BOOLEAN: "boolean",
    BaseTypeEncoding.ADDRESS: "address",
    BaseTypeEncoding.SIGNED: "signed",
    BaseTypeEncoding.SIGNED_CHAR: "signed char",
    BaseTypeEncoding.UNSIGNED: "unsigned",
    BaseTypeEncoding.UNSIGNED_CHAR: "unsigned char",
    BaseTypeEncoding.FLOAT: "floating-point",
}

_ENDIANITY_NAMES = {
    Endianity.BIG: "big",
    Endianity.LITTLE: "little",
}


def format_header(name: Optional[str]) -> str:
    """Header line of a base type entry."""
    return f"base {name if name is not None else '<anon>'}"


def encoding_name(encoding: BaseTypeEncoding) -> Optional[str]:
    """Printed name of an encoding; None when there is nothing to print."""
    return _ENCODING_NAMES.get(encoding)


def endianity_name(endianity: Endianity) -> Optional[str]:
    """Printed name of a byte order; None for the default order."""
    return _ENDIANITY_NAMES.get(endianity)