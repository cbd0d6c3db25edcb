from debuginfo_view.calls import call_diff_cost, collect_calls, format_call
from debuginfo_view.code import Call, Code, Region
from debuginfo_view.operands import Instruction, Operand
from debuginfo_view.options import Options


CALL = Call(0x401000, 0x402000)


def test_format_call_with_known_function():
    text = format_call(CALL, {0x402000: "main"}, None, Options())
    assert text == "0x401000 -> 0x402000 main"


def test_format_call_unknown_target_is_prefix_of_known():
    unknown = format_call(CALL, {}, None, Options())
    known = format_call(CALL, {0x402000: "main"}, None, Options())
    assert unknown + "main" == known


def test_format_call_ignoring_address_shows_name_only():
    options = Options(ignore_function_address=True)
    assert format_call(CALL, {0x402000: "main"}, None, options) == "main"


def test_format_call_uses_plt_symbol():
    code = Code(plts={0x402000: "puts"})
    options = Options(ignore_function_address=True)
    assert format_call(CALL, {}, code, options) == "puts"


def test_function_takes_precedence_over_plt():
    code = Code(plts={0x402000: "puts"})
    options = Options(ignore_function_address=True)
    assert format_call(CALL, {0x402000: "main"}, code, options) == "main"


def test_format_call_ignoring_address_unknown_target():
    options = Options(ignore_function_address=True)
    assert format_call(CALL, {}, None, options) == "0x402000"


def test_diff_cost_same_function():
    a = Call(0x10, 0x100)
    b = Call(0x20, 0x200)
    assert call_diff_cost(a, b, {0x100: "f"}, {0x200: "f"}) == 0


def test_diff_cost_different_function():
    a = Call(0x10, 0x100)
    b = Call(0x20, 0x200)
    assert call_diff_cost(a, b, {0x100: "f"}, {0x200: "g"}) == 1


def test_diff_cost_both_unknown():
    assert call_diff_cost(Call(0x10, 0x100), Call(0x20, 0x200), {}, {}) == 0


def test_diff_cost_one_side_unknown():
    a = Call(0x10, 0x100)
    b = Call(0x20, 0x200)
    assert call_diff_cost(a, b, {0x100: "f"}, {}) == 1
    assert call_diff_cost(a, b, {}, {0x200: "f"}) == 1


def test_collect_calls_without_code():
    assert collect_calls(None, [(0x1000, 0x1010)], lambda data, address: []) == []


def test_collect_calls_decodes_each_loaded_range():
    data = bytes(range(32))
    code = Code(regions=[Region(0x1000, data)])
    seen = []

    def decode(chunk, address):
        seen.append((chunk, address))
        return [
            Instruction(
                address=address,
                bytes=chunk[:5],
                mnemonic="call",
                operands=(Operand.immediate(address + 0x500),),
                groups=frozenset({"call"}),
            )
        ]

    calls = collect_calls(code, [(0x1000, 0x1008), (0x1010, 0x1018), (0x5000, 0x5004)], decode)
    assert seen == [(data[0:8], 0x1000), (data[16:24], 0x1010)]
    assert calls == [Call(0x1000, 0x1500), Call(0x1010, 0x1510)]