"""Enumerators of enumeration types: their text and diff costs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Enumerator:
    """A named constant of an enumeration."""

    name: Optional[str] = None
    value: Optional[int] = None


def format_enumerator(enumerator: Enumerator) -> str:
    """Format as ``name`` or ``name(value)``."""
    text = enumerator.name if enumerator.name is not None else "<anon>"
    if enumerator.value is not None:
        text += f"({enumerator.value})"
    return text


def enumerator_step_cost(enumerator: Enumerator) -> int:
    """Cost of adding or deleting an enumerator when diffing."""
    return 3


def enumerator_diff_cost(a: Enumerator, b: Enumerator) -> int:
    """Cost of pairing two enumerators.

    A changed name counts for more than a changed value, since values are
    often assigned by the compiler.
    """
    cost = 0
    if a.name != b.name:
        cost += 4
    if a.value != b.value:
        cost += 2
    return cost