"""Stack frame layout of a function: where its parameters and variables live."""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional

from .frame_location import FrameLocation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameEntry:
    """A parameter or local variable that may be stored in the stack frame.

    ``byte_size`` is the size of its type, used where a location carries no
    size of its own; ``ty`` identifies its type.
    """

    name: Optional[str] = None
    ty: Optional[int] = None
    byte_size: Optional[int] = None
    frame_locations: tuple[FrameLocation, ...] = field(default_factory=tuple)


def _optional_key(value) -> tuple:
    # Absent values order before present ones.
    return (value is not None, value if value is not None else 0)


@functools.total_ordering
@dataclass(frozen=True)
class FrameVariable:
    """One slot of the stack frame.

    ``prev_offset`` is where the previous slot ended, if known; it takes no
    part in ordering.
    """

    offset: int
    size: Optional[int] = None
    name: Optional[str] = None
    ty: Optional[int] = None
    prev_offset: Optional[int] = None

    def _key(self) -> tuple:
        return (
            self.offset,
            _optional_key(self.size),
            (self.name is not None, self.name or ""),
            _optional_key(self.ty),
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FrameVariable):
            return NotImplemented
        return self._key() < other._key()

    @property
    def end(self) -> Optional[int]:
        """Offset just past the slot, if its size is known."""
        if self.size is None:
            return None
        return self.offset + self.size


def _slots(entry: FrameEntry) -> Iterable[FrameVariable]:
    for location in entry.frame_locations:
        size = location.byte_size
        if size is None:
            size = entry.byte_size
        yield FrameVariable(location.offset, size, entry.name, entry.ty)


def frame_variables(entries: Iterable[FrameEntry]) -> list[FrameVariable]:
    """The frame slots of the entries, sorted, without duplicates, each linked to the one before."""
    slots = {slot for entry in entries for slot in _slots(entry)}
    result = []
    prev_offset: Optional[int] = None
    for slot in sorted(slots):
        result.append(replace(slot, prev_offset=prev_offset))
        prev_offset = slot.end
    return result


def format_frame_unknown(variable: FrameVariable) -> str:
    """Text for the gap before a slot, or an empty string if there is none."""
    prev = variable.prev_offset
    if prev is not None and prev < variable.offset:
        return f"{prev}[{variable.offset - prev}]\t<unknown>"
    return ""


def format_frame_variable(variable: FrameVariable, type_name: str) -> str:
    """Text of a slot: offset, size, name and type."""
    if variable.size is None:
        logger.debug("no size for %r", variable)
        size = "??"
    else:
        size = str(variable.size)
    name = variable.name if variable.name is not None else "<anon>"
    return f"{variable.offset}[{size}]\t{name}: {type_name}"


def format_return_type(byte_size: Optional[int], type_name: str, is_void: bool) -> str:
    """Text of a function's return type; empty for void."""
    if is_void:
        return ""
    size = str(byte_size) if byte_size is not None else "??"
    return f"[{size}]\t{type_name}"