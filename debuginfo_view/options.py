"""Options that control what is printed and how entries are matched."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional


class Sort(enum.Enum):
    """Key used to order printed entries."""

    NONE = "none"
    NAME = "name"
    SIZE = "size"


@dataclass
class Options:
    """Printing, filtering, sorting and diffing settings."""

    print_source: bool = False
    print_file_address: bool = False
    print_unit_address: bool = False
    print_function_calls: bool = False
    print_function_instructions: bool = False
    print_function_variables: bool = False
    print_function_stack_frame: bool = False
    print_inlined_function_parameters: bool = False
    print_variable_locations: bool = False
    inline_depth: int = 0
    html: bool = False
    http: bool = False

    category_file: bool = False
    category_unit: bool = False
    category_type: bool = False
    category_function: bool = False
    category_variable: bool = False

    filter_function_inline: Optional[bool] = None
    filter_name: Optional[str] = None
    filter_namespace: list[str] = field(default_factory=list)
    filter_unit: Optional[str] = None

    sort: Sort = Sort.NONE

    ignore_added: bool = False
    ignore_deleted: bool = False
    ignore_function_address: bool = False
    ignore_function_size: bool = False
    ignore_function_inline: bool = False
    ignore_function_linkage_name: bool = False
    ignore_function_symbol_name: bool = False
    ignore_variable_address: bool = False
    ignore_variable_linkage_name: bool = False
    ignore_variable_symbol_name: bool = False
    prefix_map: list[tuple[str, str]] = field(default_factory=list)

    def unit(self, unit: str) -> "Options":
        """Restrict output to the unit with this name."""
        self.filter_unit = unit
        return self

    def name(self, name: str) -> "Options":
        """Restrict output to entries with this name."""
        self.filter_name = name
        return self

    def matches_function_inline(self, inline: bool) -> bool:
        """True if a function with this inline flag passes the filter."""
        return self.filter_function_inline is None or self.filter_function_inline == inline

    def matches_name(self, name: Optional[str]) -> bool:
        """True if an entry with this name passes the filter."""
        return self.filter_name is None or self.filter_name == name

    def matches_namespace(self, namespace: Any) -> bool:
        """True if an entry within this namespace passes the filter.

        The namespace must provide ``is_within(names)``.
        """
        if not self.filter_namespace:
            return True
        if namespace is None:
            return False
        return bool(namespace.is_within(self.filter_namespace))

    def map_prefix(self, name: str) -> tuple[str, str]:
        """Split a path into its replacement prefix and the remaining suffix."""
        for old, new in self.prefix_map:
            if name.startswith(old):
                return new, name[len(old):]
        return "", name