"""Selection of units, types, functions and variables according to options.

The entries are duck-typed: a file has ``units``; a unit has ``name``,
``types``, ``functions`` and ``variables``; a type has ``kind``, ``name``,
``namespace``, ``offset``, ``is_anon`` and ``members`` (each member having
``type_offset`` and ``is_inline(hash)``); a function has ``is_inline``,
``address``, ``size``, ``name`` and ``namespace``; a variable has
``is_declaration``, ``address``, ``name`` and ``namespace``. Absent offsets,
addresses and sizes are None.
"""

from __future__ import annotations

import enum
from typing import Any

from .options import Options


class TypeKind(enum.Enum):
    """The kinds of type that debugging information describes."""

    BASE = "base"
    DEF = "def"
    STRUCT = "struct"
    UNION = "union"
    ENUMERATION = "enumeration"
    UNSPECIFIED = "unspecified"
    VOID = "void"
    ARRAY = "array"
    FUNCTION = "function"
    POINTER_TO_MEMBER = "pointer_to_member"
    MODIFIER = "modifier"
    SUBRANGE = "subrange"


_NAMESPACED_KINDS = frozenset(
    {TypeKind.DEF, TypeKind.STRUCT, TypeKind.UNION, TypeKind.ENUMERATION, TypeKind.UNSPECIFIED}
)
_PRINTABLE_KINDS = frozenset(
    {TypeKind.BASE, TypeKind.DEF, TypeKind.STRUCT, TypeKind.UNION, TypeKind.ENUMERATION}
)


def _filter_unit(unit: Any, options: Options) -> bool:
    if options.filter_unit is None:
        return True
    prefix, suffix = options.map_prefix(unit.name or "")
    return prefix + suffix == options.filter_unit


def filter_units(file: Any, options: Options) -> list:
    """Units of the file that match the unit filter."""
    return [unit for unit in file.units if _filter_unit(unit, options)]


def enumerate_and_filter_units(file: Any, options: Options) -> list:
    """Matching units of the file, each paired with its index."""
    return [(i, unit) for i, unit in enumerate(file.units) if _filter_unit(unit, options)]


def _inline_types(unit: Any, hash: Any) -> set:
    """Offsets of types that are printed inline rather than on their own."""
    inline = set()
    for ty in unit.types:
        # Anonymous types are assumed to be printed inline.
        if ty.is_anon and ty.offset is not None:
            inline.add(ty.offset)
        for member in ty.members:
            if member.is_inline(hash) and member.type_offset is not None:
                inline.add(member.type_offset)
    return inline


def _filter_type(ty: Any, options: Options, diff: bool, inline_types: set) -> bool:
    kind = ty.kind
    if kind is TypeKind.BASE:
        selected = options.matches_name(ty.name) and options.matches_namespace(None)
    elif kind in _NAMESPACED_KINDS:
        selected = options.matches_name(ty.name) and options.matches_namespace(ty.namespace)
    else:
        selected = options.filter_name is None
    if not selected:
        return False
    if kind not in _PRINTABLE_KINDS:
        return False
    # Closures have no stable identity, so they cannot be paired when diffing.
    if diff and kind is TypeKind.STRUCT and ty.name == "closure":
        return False
    return ty.offset is not None and ty.offset not in inline_types


def filter_types(unit: Any, hash: Any, options: Options, diff: bool) -> list:
    """Types of the unit to print on their own; ``diff`` adds diff-only exclusions."""
    inline = _inline_types(unit, hash)
    return [ty for ty in unit.types if _filter_type(ty, options, diff, inline)]


def enumerate_and_filter_types(unit: Any, hash: Any, options: Options, diff: bool) -> list:
    """Like ``filter_types`` but each type is paired with its index."""
    inline = _inline_types(unit, hash)
    return [
        (i, ty) for i, ty in enumerate(unit.types) if _filter_type(ty, options, diff, inline)
    ]


def _filter_function(f: Any, options: Options) -> bool:
    if not f.is_inline and (f.address is None or f.size is None):
        # A declaration, or a dead function left behind in the debug info.
        return False
    return (
        options.matches_name(f.name)
        and options.matches_namespace(f.namespace)
        and options.matches_function_inline(f.is_inline)
    )


def filter_functions(unit: Any, options: Options) -> list:
    """Functions of the unit that match the options."""
    return [f for f in unit.functions if _filter_function(f, options)]


def enumerate_and_filter_functions(unit: Any, options: Options) -> list:
    """Matching functions of the unit, each paired with its index."""
    return [(i, f) for i, f in enumerate(unit.functions) if _filter_function(f, options)]


def _filter_variable(v: Any, options: Options) -> bool:
    if not v.is_declaration and v.address is None:
        return False
    return options.matches_name(v.name) and options.matches_namespace(v.namespace)


def filter_variables(unit: Any, options: Options) -> list:
    """Variables of the unit that match the options."""
    return [v for v in unit.variables if _filter_variable(v, options)]


def enumerate_and_filter_variables(unit: Any, options: Options) -> list:
    """Matching variables of the unit, each paired with its index."""
    return [(i, v) for i, v in enumerate(unit.variables) if _filter_variable(v, options)]