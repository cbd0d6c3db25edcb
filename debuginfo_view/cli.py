"""Turning command-line arguments into options, and HTTP paths into routes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .cli_args import Mode, build_parser
from .options import Options, Sort

_CATEGORY_FLAGS = {
    "file": ("category_file",),
    "unit": ("category_unit",),
    "type": ("category_type",),
    "function": ("category_function",),
    "variable": ("category_variable",),
}

_PRINT_FLAGS = {
    "all": (
        "print_file_address",
        "print_unit_address",
        "print_source",
        "print_function_calls",
        "print_function_instructions",
        "print_function_variables",
        "print_function_stack_frame",
        "print_inlined_function_parameters",
        "print_variable_locations",
    ),
    "address": ("print_file_address", "print_unit_address"),
    "source": ("print_source",),
    "file-address": ("print_file_address",),
    "unit-address": ("print_unit_address",),
    "function-calls": ("print_function_calls",),
    "function-instructions": ("print_function_instructions",),
    "function-variables": ("print_function_variables",),
    "function-stack-frame": ("print_function_stack_frame",),
    "inlined-function-parameters": ("print_inlined_function_parameters",),
    "variable-locations": ("print_variable_locations",),
}

_IGNORE_FLAGS = {
    "added": ("ignore_added",),
    "deleted": ("ignore_deleted",),
    "address": ("ignore_function_address", "ignore_variable_address"),
    "linkage-name": ("ignore_function_linkage_name", "ignore_variable_linkage_name"),
    "symbol-name": ("ignore_function_symbol_name", "ignore_variable_symbol_name"),
    "function-address": ("ignore_function_address",),
    "function-size": ("ignore_function_size",),
    "function-inline": ("ignore_function_inline",),
    "function-symbol-name": ("ignore_function_symbol_name",),
    "variable-address": ("ignore_variable_address",),
    "variable-symbol-name": ("ignore_variable_symbol_name",),
}

_SORTS = {"name": Sort.NAME, "size": Sort.SIZE}

_INLINE_VALUES = {"y": True, "yes": True, "n": False, "no": False}


@dataclass
class Invocation:
    """What the command was asked to do: a mode, its input paths and the options."""

    mode: Mode
    paths: tuple[str, ...]
    options: Options


@dataclass(frozen=True)
class Route:
    """A request path served in HTTP mode.

    ``id`` is None for the root page; ``detail`` names a sub-view of an entry.
    """

    id: Optional[int] = None
    detail: Optional[str] = None

    @property
    def is_index(self) -> bool:
        return self.id is None

    @property
    def is_parent(self) -> bool:
        return self.id is not None and self.detail == "parent"


def _set_flags(options: Options, names: Sequence[str]) -> None:
    for name in names:
        setattr(options, name, True)


def _apply_filters(parser, options: Options, filters: Sequence[str]) -> None:
    for item in filters:
        key, sep, value = item.partition("=")
        if not sep:
            parser.error(f"missing filter value for key: {item}")
        if key in ("inline", "function-inline"):
            if value not in _INLINE_VALUES:
                parser.error(f"invalid filter {key} value: {value}")
            options.filter_function_inline = _INLINE_VALUES[value]
        elif key == "name":
            options.filter_name = value
        elif key == "namespace":
            options.filter_namespace = value.split("::")
        elif key == "unit":
            options.filter_unit = value
        else:
            parser.error(f"invalid filter key: {key}")


def _apply_prefix_map(parser, options: Options, entries: Sequence[str]) -> None:
    for entry in entries:
        old, sep, new = entry.partition("=")
        if not sep:
            parser.error(f"invalid prefix-map value: {entry}")
        options.prefix_map.append((old, new))
    # Longest prefixes first so that the most specific mapping wins.
    options.prefix_map.sort(key=lambda pair: len(pair[0]), reverse=True)


def parse_options(argv: Optional[Sequence[str]] = None) -> Invocation:
    """Parse command-line arguments; invalid arguments exit with status 2."""
    parser = build_parser()
    ns = parser.parse_args(argv)

    options = Options(inline_depth=1)

    if ns.output_format == "html":
        options.html = True
    elif ns.output_format == "http":
        options.html = True
        options.http = True
        options.inline_depth = 100
        options.print_source = True
        options.print_function_calls = True
        options.print_function_instructions = True

    if ns.inline_depth is not None:
        options.inline_depth = ns.inline_depth

    if ns.categories is not None:
        for category in ns.categories:
            _set_flags(options, _CATEGORY_FLAGS[category])
    else:
        for flags in _CATEGORY_FLAGS.values():
            _set_flags(options, flags)

    for field_name in ns.print_fields or ():
        _set_flags(options, _PRINT_FLAGS[field_name])

    if ns.filters:
        _apply_filters(parser, options, ns.filters)

    if ns.sort is not None:
        options.sort = _SORTS[ns.sort]

    for change in ns.ignore or ():
        _set_flags(options, _IGNORE_FLAGS[change])

    if ns.prefix_map:
        _apply_prefix_map(parser, options, ns.prefix_map)

    if ns.mode is Mode.DIFF:
        paths = tuple(ns.diff)
    elif ns.mode is Mode.BLOAT:
        paths = (ns.bloat,)
    else:
        paths = (ns.file,)
    return Invocation(mode=ns.mode, paths=paths, options=options)


def _parse_index(text: str) -> Optional[int]:
    digits = text[1:] if text.startswith("+") else text
    if digits and digits.isascii() and digits.isdigit():
        return int(digits)
    return None


def route(path: str) -> Optional[Route]:
    """Map a request path to a route, or None when nothing is served for it."""
    if not path:
        path = "/"
    if not path.startswith("/"):
        return None
    parts = path.split("/")[1:]
    head = parts[0]
    if head == "":
        return Route()
    if head != "id" or len(parts) < 2:
        return None
    ident = _parse_index(parts[1])
    if ident is None:
        return None
    detail = parts[2] if len(parts) > 2 else None
    return Route(id=ident, detail=detail)