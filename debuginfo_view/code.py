"""Machine code of a file: regions of bytes, relocations, PLT entries and calls.

Decoding instructions is left to the caller. The methods here take decoded
instructions (see ``operands.Instruction``) and work out the calls they make
and the PLT entries they stand for.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from .operands import Instruction, imm_value, ip_offset, is_call

_PLT_ALIGN_MASK = ~0xF


@dataclass(frozen=True)
class Region:
    """Bytes loaded at an address, such as the contents of a segment."""

    address: int
    code: bytes

    @property
    def end(self) -> int:
        """Address just past the region."""
        return self.address + len(self.code)


@dataclass(frozen=True)
class Call:
    """A call made by the instruction at ``from_address`` to ``to_address``."""

    from_address: int
    to_address: int


@dataclass
class Code:
    """The loaded regions of a file together with its symbolic addresses."""

    regions: list[Region] = field(default_factory=list)
    relocations: dict[int, str] = field(default_factory=dict)
    plts: dict[int, str] = field(default_factory=dict)

    def relocation(self, address: int) -> Optional[str]:
        """Symbol of the relocation at this address, if any."""
        return self.relocations.get(address)

    def plt(self, address: int) -> Optional[str]:
        """Symbol of the PLT entry starting at this address, if any."""
        return self.plts.get(address)

    def range(self, begin: int, end: int) -> Optional[bytes]:
        """Bytes from ``begin`` up to ``end``, if one region holds them all."""
        if end < begin:
            raise ValueError(f"range end 0x{end:x} is before its begin 0x{begin:x}")
        for region in self.regions:
            if begin >= region.address and end <= region.end:
                start = begin - region.address
                return region.code[start : start + (end - begin)]
        return None

    def read_mem(self, address: int, size: int) -> Optional[int]:
        """Little-endian value of 4 or 8 bytes at this address, if present."""
        data = self.range(address, address + size)
        if data is None or size not in (4, 8):
            return None
        return int.from_bytes(data, "little")

    def calls(self, instructions: Iterable[Instruction]) -> list[Call]:
        """Calls made by these instructions whose targets can be resolved."""
        return [call for insn in instructions if (call := call_target(self, insn)) is not None]

    def add_plts(self, instructions: Iterable[Instruction]) -> None:
        """Record PLT entries from the instructions of a PLT section.

        An instruction that loads through a relocated slot names the entry it
        belongs to; entries are assumed to be aligned to 16 bytes.
        """
        for insn in instructions:
            for op in insn.operands:
                found = ip_offset(insn, op)
                if found is None:
                    continue
                _offset, target, _size = found
                symbol = self.relocations.get(target)
                if symbol is not None:
                    self.plts[insn.address & _PLT_ALIGN_MASK] = symbol


def call_target(code: Code, insn: Instruction) -> Optional[Call]:
    """The call made by ``insn``, or None if it is not a call or its target is unknown."""
    if not is_call(insn):
        return None
    for op in insn.operands:
        imm = imm_value(op)
        if imm is not None:
            return Call(insn.address, imm)
        found = ip_offset(insn, op)
        if found is not None:
            _offset, address, size = found
            value = code.read_mem(address, size)
            if value is not None:
                return Call(insn.address, value)
    return None