"""Call frame information directives and their interleaving with instructions."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping, Optional


class CfiDirective(enum.Enum):
    """The kind of a call frame information directive."""

    START_PROC = "startproc"
    END_PROC = "endproc"
    PERSONALITY = "personality"
    LSDA = "lsda"
    SIGNAL_FRAME = "signalframe"
    RETURN_COLUMN = "return_column"
    DEF_CFA = "def_cfa"
    DEF_CFA_REGISTER = "def_cfa_register"
    DEF_CFA_OFFSET = "def_cfa_offset"
    OFFSET = "offset"
    VAL_OFFSET = "val_offset"
    REGISTER = "register"
    RESTORE = "restore"
    UNDEFINED = "undefined"
    SAME_VALUE = "same_value"
    REMEMBER_STATE = "remember_state"
    RESTORE_STATE = "restore_state"
    OTHER = "other"


@dataclass(frozen=True)
class Cfi:
    """A directive at an address (None if it applies from the start).

    ``register`` and ``other_register`` are DWARF register numbers,
    ``offset`` is a signed offset and ``value`` is the address operand of
    personality and LSDA directives.
    """

    address: Optional[int]
    directive: CfiDirective
    register: Optional[int] = None
    other_register: Optional[int] = None
    offset: int = 0
    value: Optional[int] = None


def format_offset(offset: int) -> str:
    """A signed offset in hexadecimal."""
    if offset < 0:
        return f"-0x{-offset:x}"
    return f"0x{offset:x}"


_PLAIN = {
    CfiDirective.START_PROC: ".cfi_startproc",
    CfiDirective.END_PROC: ".cfi_endproc",
    CfiDirective.SIGNAL_FRAME: ".cfi_signalframe",
    CfiDirective.REMEMBER_STATE: ".cfi_remember_state",
    CfiDirective.RESTORE_STATE: ".cfi_restore_state",
    CfiDirective.OTHER: "<other cfi instruction>",
}

_REGISTER_ONLY = {
    CfiDirective.RETURN_COLUMN: ".cfi_return_column",
    CfiDirective.DEF_CFA_REGISTER: ".cfi_def_cfa_register",
    CfiDirective.RESTORE: ".cfi_restore",
    CfiDirective.UNDEFINED: ".cfi_undefined",
    CfiDirective.SAME_VALUE: ".cfi_same_value",
}

_REGISTER_OFFSET = {
    CfiDirective.DEF_CFA: ".cfi_def_cfa",
    CfiDirective.OFFSET: ".cfi_offset",
    CfiDirective.VAL_OFFSET: ".cfi_val_offset",
}


def _register(number: Optional[int], names: Mapping[int, str]) -> str:
    if number is None:
        raise ValueError("directive needs a register")
    return names.get(number, str(number))


def format_cfi(cfi: Cfi, register_names: Mapping[int, str]) -> str:
    """Assembler-style text of a directive; registers are named where known."""
    kind = cfi.directive
    if kind in _PLAIN:
        return _PLAIN[kind]
    if kind is CfiDirective.PERSONALITY:
        return f".cfi_personality 0x{cfi.value or 0:x}"
    if kind is CfiDirective.LSDA:
        return f".cfi_lsda 0x{cfi.value or 0:x}"
    if kind is CfiDirective.DEF_CFA_OFFSET:
        return f".cfi_def_cfa_offset 0x{cfi.offset:x}"
    if kind in _REGISTER_ONLY:
        return f"{_REGISTER_ONLY[kind]} {_register(cfi.register, register_names)}"
    if kind in _REGISTER_OFFSET:
        reg = _register(cfi.register, register_names)
        return f"{_REGISTER_OFFSET[kind]} {reg}, {format_offset(cfi.offset)}"
    # Only REGISTER is left.
    first = _register(cfi.register, register_names)
    second = _register(cfi.other_register, register_names)
    return f".cfi_register {first}, {second}"


def merge_instructions(instructions: Iterable[Any], cfis: Iterable[Cfi]) -> Iterator[Any]:
    """Interleave instructions (anything with ``address``) and directives by address.

    A directive comes before an instruction at the same address; directives
    without an address come first.
    """
    insn_iter = iter(instructions)
    cfi_iter = iter(cfis)
    insn = next(insn_iter, None)
    cfi = next(cfi_iter, None)
    while insn is not None or cfi is not None:
        if cfi is not None and (
            insn is None or cfi.address is None or cfi.address <= insn.address
        ):
            yield cfi
            cfi = next(cfi_iter, None)
        else:
            yield insn
            insn = next(insn_iter, None)