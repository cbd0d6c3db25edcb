import pytest

from debuginfo_view.cli_args import Mode, build_parser


def parse(*args):
    return build_parser().parse_args(list(args))


def test_file_mode():
    ns = parse("prog.elf")
    assert ns.mode is Mode.FILE
    assert ns.file == "prog.elf"
    assert ns.diff is None
    assert ns.bloat is None


def test_diff_mode():
    ns = parse("-d", "a.elf", "b.elf")
    assert ns.mode is Mode.DIFF
    assert ns.diff == ["a.elf", "b.elf"]
    assert ns.file is None


def test_bloat_mode():
    ns = parse("--bloat", "a.elf")
    assert ns.mode is Mode.BLOAT
    assert ns.bloat == "a.elf"


def test_missing_mode_is_error():
    with pytest.raises(SystemExit):
        parse()


def test_file_conflicts_with_diff():
    with pytest.raises(SystemExit):
        parse("x.elf", "--diff", "a.elf", "b.elf")


def test_diff_conflicts_with_bloat():
    with pytest.raises(SystemExit):
        parse("--diff", "a.elf", "b.elf", "--bloat", "c.elf")


def test_category_values_are_split_and_accumulated():
    ns = parse("-c", "type,function", "-c", "unit", "x.elf")
    assert ns.categories == ["type", "function", "unit"]


def test_invalid_category_is_error():
    with pytest.raises(SystemExit):
        parse("-c", "type,bogus", "x.elf")


def test_print_fields():
    ns = parse("-p", "all", "--print", "source,function-calls", "x.elf")
    assert ns.print_fields == ["all", "source", "function-calls"]


def test_invalid_print_field_is_error():
    with pytest.raises(SystemExit):
        parse("-p", "nothing", "x.elf")


def test_output_format_choices():
    assert parse("-o", "html", "x.elf").output_format == "html"
    with pytest.raises(SystemExit):
        parse("-o", "pdf", "x.elf")


def test_inline_depth_parsed_as_int():
    assert parse("--inline-depth", "5", "x.elf").inline_depth == 5
    assert parse("x.elf").inline_depth is None


@pytest.mark.parametrize("value", ["-1", "abc", "1.5"])
def test_invalid_inline_depth_is_error(value):
    with pytest.raises(SystemExit):
        parse(f"--inline-depth={value}", "x.elf")


def test_filters_kept_as_raw_strings():
    ns = parse("-f", "name=main,unit=a.c", "x.elf")
    assert ns.filters == ["name=main", "unit=a.c"]


def test_sort_choices():
    assert parse("-s", "size", "x.elf").sort == "size"
    with pytest.raises(SystemExit):
        parse("-s", "offset", "x.elf")


def test_ignore_requires_diff():
    with pytest.raises(SystemExit):
        parse("-i", "added", "x.elf")


def test_ignore_with_diff():
    ns = parse("-d", "a", "b", "-i", "added,function-size")
    assert ns.ignore == ["added", "function-size"]


def test_invalid_ignore_value_is_error():
    with pytest.raises(SystemExit):
        parse("-d", "a", "b", "-i", "everything")


def test_prefix_map_requires_diff():
    with pytest.raises(SystemExit):
        parse("--prefix-map", "/a=/b", "--bloat", "x.elf")


def test_prefix_map_with_diff():
    ns = parse("-d", "a", "b", "--prefix-map", "/a=/b,/c=/d")
    assert ns.prefix_map == ["/a=/b", "/c=/d"]


def test_unset_lists_default_to_none():
    ns = parse("x.elf")
    assert ns.categories is None
    assert ns.print_fields is None
    assert ns.filters is None
    assert ns.ignore is None
    assert ns.prefix_map is None