"""Decoded x86 instructions and the operand queries used to annotate them."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger(__name__)

_U64_MASK = (1 << 64) - 1


class OperandKind(enum.Enum):
    """The shape of an instruction operand."""

    IMM = "imm"
    REG = "reg"
    MEM = "mem"


@dataclass(frozen=True)
class Operand:
    """One operand: an immediate, a register, or a memory reference ``[base + disp]``."""

    kind: OperandKind
    imm: int = 0
    reg: Optional[str] = None
    base: Optional[str] = None
    disp: int = 0

    @classmethod
    def immediate(cls, value: int) -> "Operand":
        return cls(OperandKind.IMM, imm=value)

    @classmethod
    def register(cls, name: str) -> "Operand":
        return cls(OperandKind.REG, reg=name)

    @classmethod
    def memory(cls, base: Optional[str], disp: int = 0) -> "Operand":
        return cls(OperandKind.MEM, base=base, disp=disp)


@dataclass(frozen=True)
class Instruction:
    """A decoded instruction.

    ``mnemonic`` is None for bytes that could not be decoded; ``groups``
    holds group names such as ``"call"`` and ``"jump"``.
    """

    address: int
    bytes: bytes
    mnemonic: Optional[str] = None
    op_str: str = ""
    operands: tuple[Operand, ...] = ()
    groups: frozenset[str] = field(default_factory=frozenset)

    @property
    def end(self) -> int:
        """Address just past the instruction."""
        return self.address + len(self.bytes)


def _build_register_map() -> dict[str, int]:
    mapping: dict[str, int] = {}
    legacy = [
        ("rax", "eax", "ax", "ah", "al"),
        ("rdx", "edx", "dx", "dh", "dl"),
        ("rcx", "ecx", "cx", "ch", "cl"),
        ("rbx", "ebx", "bx", "bh", "bl"),
        ("rsi", "esi", "si", "sil"),
        ("rdi", "edi", "di", "dil"),
        ("rbp", "ebp", "bp", "bpl"),
        ("rsp", "esp", "sp", "spl"),
    ]
    for number, names in enumerate(legacy):
        for name in names:
            mapping[name] = number
    for number in range(8, 16):
        for suffix in ("", "d", "w", "b"):
            mapping[f"r{number}{suffix}"] = number
    for index in range(16):
        mapping[f"xmm{index}"] = 17 + index
        mapping[f"ymm{index}"] = 17 + index
    return mapping


_REGISTERS = _build_register_map()
# There are never variables or parameters in these.
_IGNORED_REGISTERS = frozenset({"invalid", "rip", "eip"})


def convert_reg(name: Optional[str]) -> Optional[int]:
    """The DWARF register number for an x86 register name, or None."""
    if name is None:
        return None
    key = name.lower()
    if key in _IGNORED_REGISTERS:
        return None
    number = _REGISTERS.get(key)
    if number is None:
        logger.debug("Unsupported x86 register %s", name)
    return number


def imm_value(op: Operand) -> Optional[int]:
    """The immediate value as an unsigned 64-bit number, if the operand is one."""
    if op.kind is OperandKind.IMM:
        return op.imm & _U64_MASK
    return None


def reg_of(op: Operand) -> Optional[int]:
    """The DWARF register of a register operand, or the base of a memory operand."""
    if op.kind is OperandKind.REG:
        return convert_reg(op.reg)
    if op.kind is OperandKind.MEM:
        return convert_reg(op.base)
    return None


def reg_offset(op: Operand) -> Optional[tuple[int, int]]:
    """``(register, displacement)`` for a memory operand with a known base."""
    if op.kind is not OperandKind.MEM:
        return None
    reg = convert_reg(op.base)
    if reg is None:
        return None
    return reg, op.disp


def ip_offset(insn: Instruction, op: Operand) -> Optional[tuple[int, int, int]]:
    """``(offset, address, size)`` for an instruction-pointer relative memory operand."""
    if op.kind is not OperandKind.MEM or op.base is None:
        return None
    base = op.base.lower()
    if base == "rip":
        size = 8
    elif base == "eip":
        size = 4
    else:
        return None
    address = (insn.end + op.disp) & _U64_MASK
    return op.disp, address, size


def is_call(insn: Instruction) -> bool:
    """True if the instruction belongs to the call group."""
    return "call" in insn.groups


def is_jump(insn: Instruction) -> bool:
    """True if the instruction belongs to the jump group."""
    return "jump" in insn.groups