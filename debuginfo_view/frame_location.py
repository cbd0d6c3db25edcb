"""Stack frame locations of parameters and variables."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Iterable, Optional


@functools.total_ordering
@dataclass(frozen=True)
class FrameLocation:
    """An offset within the stack frame, with an optional size in bits."""

    offset: int
    bit_size: Optional[int] = None

    def _key(self) -> tuple:
        return (self.offset, self.bit_size is not None, self.bit_size or 0)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FrameLocation):
            return NotImplemented
        return self._key() < other._key()

    @property
    def byte_size(self) -> Optional[int]:
        """The size rounded up to whole bytes, if known."""
        if self.bit_size is None:
            return None
        return (self.bit_size + 7) // 8


def format_frame_location(location: FrameLocation) -> str:
    """Format as ``offset`` or ``offset[bytes]``."""
    text = str(location.offset)
    size = location.byte_size
    if size is not None:
        text += f"[{size}]"
    return text


def unique_frame_locations(locations: Iterable[FrameLocation]) -> list[FrameLocation]:
    """The locations sorted, with duplicates removed."""
    return sorted(set(locations))


def frame_location_diff_cost(a: FrameLocation, b: FrameLocation) -> int:
    """Cost of pairing two locations when diffing: 0 if equal, else 1."""
    return 0 if a == b else 1