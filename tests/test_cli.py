import pytest

from debuginfo_view.cli import Invocation, Route, parse_options, route
from debuginfo_view.cli_args import Mode
from debuginfo_view.options import Sort


def test_defaults_enable_all_categories():
    inv = parse_options(["prog.bin"])
    assert isinstance(inv, Invocation)
    assert inv.mode is Mode.FILE
    assert inv.paths == ("prog.bin",)
    opts = inv.options
    assert opts.inline_depth == 1
    assert not opts.html and not opts.http
    assert all(
        [
            opts.category_file,
            opts.category_unit,
            opts.category_type,
            opts.category_function,
            opts.category_variable,
        ]
    )
    assert opts.sort is Sort.NONE


def test_http_format_enables_extras():
    opts = parse_options(["-o", "http", "x"]).options
    assert opts.html and opts.http
    assert opts.inline_depth == 100
    assert opts.print_source
    assert opts.print_function_calls
    assert opts.print_function_instructions


def test_html_format():
    opts = parse_options(["--format", "html", "x"]).options
    assert opts.html and not opts.http


def test_inline_depth_overrides_format():
    opts = parse_options(["-o", "http", "--inline-depth", "3", "x"]).options
    assert opts.inline_depth == 3


def test_invalid_inline_depth_exits():
    with pytest.raises(SystemExit):
        parse_options(["--inline-depth", "abc", "x"])


def test_selected_categories_only():
    opts = parse_options(["-c", "type,function", "x"]).options
    assert opts.category_type and opts.category_function
    assert not opts.category_file
    assert not opts.category_unit
    assert not opts.category_variable


def test_print_all():
    opts = parse_options(["-p", "all", "x"]).options
    assert opts.print_file_address and opts.print_unit_address
    assert opts.print_function_stack_frame and opts.print_variable_locations
    assert opts.print_inlined_function_parameters


def test_print_address_sets_both():
    opts = parse_options(["-p", "address", "x"]).options
    assert opts.print_file_address and opts.print_unit_address
    assert not opts.print_source


def test_filters():
    opts = parse_options(["-f", "name=main,unit=a.c", "-f", "namespace=std::vec", "x"]).options
    assert opts.filter_name == "main"
    assert opts.filter_unit == "a.c"
    assert opts.filter_namespace == ["std", "vec"]


@pytest.mark.parametrize("value,expected", [("y", True), ("yes", True), ("n", False), ("no", False)])
def test_inline_filter(value, expected):
    opts = parse_options(["-f", f"inline={value}", "x"]).options
    assert opts.filter_function_inline is expected


@pytest.mark.parametrize("arg", ["inline=maybe", "colour=red", "name"])
def test_bad_filters_exit(arg):
    with pytest.raises(SystemExit):
        parse_options(["-f", arg, "x"])


def test_sort_keys():
    assert parse_options(["-s", "size", "x"]).options.sort is Sort.SIZE
    assert parse_options(["-s", "name", "x"]).options.sort is Sort.NAME


def test_diff_mode_and_ignore():
    inv = parse_options(["-d", "a", "b", "-i", "address,added"])
    assert inv.mode is Mode.DIFF
    assert inv.paths == ("a", "b")
    assert inv.options.ignore_function_address
    assert inv.options.ignore_variable_address
    assert inv.options.ignore_added
    assert not inv.options.ignore_deleted


def test_prefix_map_sorted_longest_first():
    inv = parse_options(["-d", "a", "b", "--prefix-map", "/x=/y,/long/path=/p"])
    assert inv.options.prefix_map == [("/long/path", "/p"), ("/x", "/y")]


def test_prefix_map_without_equals_exits():
    with pytest.raises(SystemExit):
        parse_options(["-d", "a", "b", "--prefix-map", "nothing"])


def test_bloat_mode():
    inv = parse_options(["--bloat", "f"])
    assert inv.mode is Mode.BLOAT
    assert inv.paths == ("f",)


def test_route_index():
    assert route("/").is_index
    assert route("").is_index


def test_route_id():
    assert route("/id/12") == Route(id=12)
    r = route("/id/7/parent")
    assert r.is_parent and r.id == 7
    assert route("/id/7/code") == Route(id=7, detail="code")


@pytest.mark.parametrize("path", ["/id/abc", "/id", "/other", "nope"])
def test_route_unserved(path):
    assert route(path) is None