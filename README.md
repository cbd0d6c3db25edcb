# debuginfo-view

`debuginfo_view` holds the building blocks of a viewer for the debugging
information of compiled programs: options and filters for units, types,
functions and variables, command-line handling, analysis of decoded x86
instructions, and text for stack frames, call-frame directives, base types,
enumerators and calls. It has no runtime dependencies.

## Modules

- `debuginfo_view.options`: `Options` (what to print, filter, sort and ignore)
  and `Sort`. `Options.unit(...)` and `Options.name(...)` set filters and
  return the options; `matches_name`, `matches_namespace` and
  `matches_function_inline` test entries against them; `map_prefix` applies
  the `prefix_map` to a path.
- `debuginfo_view.filter`: `filter_units`, `filter_types`, `filter_functions`,
  `filter_variables` and their `enumerate_and_filter_*` forms, which pair each
  match with its index. Entries are any objects with the attributes listed in
  the module docstring. `TypeKind` names the kinds of type.
- `debuginfo_view.cli_args`: `build_parser()` builds the argument parser
  (a `FILE`, or `--diff FILE FILE`, or `--bloat FILE`, plus `--format`,
  `--category`, `--print`, `--inline-depth`, `--filter`, `--sort`, `--ignore`
  and `--prefix-map`). `Mode` says which of the three was given.
- `debuginfo_view.cli`: `parse_options(argv)` turns arguments into an
  `Invocation` (mode, paths, options), exiting with status 2 on bad input.
  `route(path)` maps request paths (`/`, `/id/<n>`, `/id/<n>/<detail>`) to a
  `Route`, or None.
- `debuginfo_view.operands`: `Instruction` and `Operand` describe decoded
  instructions; `convert_reg` maps x86 register names to DWARF register
  numbers; `imm_value`, `reg_of`, `reg_offset`, `ip_offset`, `is_call` and
  `is_jump` query them.
- `debuginfo_view.code`: `Code` holds loaded `Region`s, relocations and PLT
  entries; it reads bytes and little-endian values, finds `Call`s made by
  instructions and records PLT entries. `call_target(code, insn)` resolves a
  single call.
- `debuginfo_view.calls`: `collect_calls`, `format_call` and `call_diff_cost`.
- `debuginfo_view.frame`: `frame_variables` lays out the stack slots of
  `FrameEntry`s as `FrameVariable`s; `format_frame_variable`,
  `format_frame_unknown` and `format_return_type` give their text.
- `debuginfo_view.cfi`: `Cfi` and `CfiDirective`, `format_cfi`,
  `format_offset`, and `merge_instructions`, which interleaves instructions
  and directives by address.
- `debuginfo_view.frame_location`, `debuginfo_view.base_type`,
  `debuginfo_view.enumeration`: small formatters and diff costs for frame
  locations, base types and enumerators.

## Examples

```python
from debuginfo_view.options import Options

options = Options().name("main")
options.matches_name("main")   # True
options.matches_name("other")  # False
```

```python
from debuginfo_view.cli import parse_options, route

invocation = parse_options(["--filter", "name=main", "program"])
invocation.paths                 # ('program',)
invocation.options.filter_name   # 'main'

route("/id/5/parent")            # Route(id=5, detail='parent')
```

```python
from debuginfo_view.code import Code, Region, call_target
from debuginfo_view.operands import Instruction, Operand

code = Code(regions=[Region(0x1000, b"\x78\x56\x34\x12")])
code.read_mem(0x1000, 4)         # 0x12345678

insn = Instruction(
    address=0x1000,
    bytes=b"\xe8\x00\x00\x00\x00",
    mnemonic="call",
    operands=(Operand.immediate(0x2000),),
    groups=frozenset({"call"}),
)
call_target(code, insn)          # Call(from_address=4096, to_address=8192)
```

```python
from debuginfo_view.cfi import Cfi, CfiDirective, format_cfi

format_cfi(Cfi(0x10, CfiDirective.DEF_CFA, register=7, offset=8), {7: "rsp"})
# '.cfi_def_cfa rsp, 0x8'
```

## What it does not do

The package does not read object files or their debugging information, and
it does not decode machine code: callers supply the units, types, functions,
variables and decoded instructions. There is no installed command that prints
a file, no HTML page output and no HTTP server; `parse_options` and `route`
only interpret arguments and request paths.

## Running the tests

Install the `test` extra and run pytest from the project root.