"""Calls made by functions: collecting them, their text and diff costs."""

from __future__ import annotations

from typing import Callable, Iterable, Mapping, Optional, Sequence

from .code import Call, Code
from .operands import Instruction
from .options import Options


def format_call(
    call: Call,
    functions_by_address: Mapping[int, str],
    code: Optional[Code],
    options: Options,
) -> str:
    """Text of a call: its addresses unless ignored, then what it calls.

    ``functions_by_address`` maps function addresses to printed names.
    """
    text = ""
    if not options.ignore_function_address:
        text += f"0x{call.from_address:x} -> 0x{call.to_address:x} "
    function = functions_by_address.get(call.to_address)
    plt = code.plt(call.to_address) if code is not None else None
    if function is not None:
        text += str(function)
    elif plt is not None:
        text += plt
    elif options.ignore_function_address:
        # No address has been shown yet, so show the target.
        text += f"0x{call.to_address:x}"
    return text


def call_diff_cost(
    a: Call,
    b: Call,
    functions_a: Mapping[int, object],
    functions_b: Mapping[int, object],
) -> int:
    """Cost of pairing two calls: 0 if they reach the same function, else 1.

    Calls to no known function on either side pair for free.
    """
    known_a = a.to_address in functions_a
    known_b = b.to_address in functions_b
    if known_a and known_b:
        return 0 if functions_a[a.to_address] == functions_b[b.to_address] else 1
    if not known_a and not known_b:
        return 0
    return 1


def collect_calls(
    code: Optional[Code],
    ranges: Iterable[tuple[int, int]],
    decode: Callable[[bytes, int], Sequence[Instruction]],
) -> list[Call]:
    """Calls made from the ``(begin, end)`` address ranges of a function.

    ``decode(data, address)`` turns the bytes of a range into instructions.
    Ranges whose bytes are not loaded contribute nothing.
    """
    calls: list[Call] = []
    if code is None:
        return calls
    for begin, end in ranges:
        data = code.range(begin, end)
        if data is None:
            continue
        calls.extend(code.calls(decode(data, begin)))
    return calls