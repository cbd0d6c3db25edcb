"""Command-line argument definitions."""

from __future__ import annotations

import argparse
import enum
from typing import Callable, Optional, Sequence

VERSION = "0.1.0"

FORMATS = ("text", "html", "http")
CATEGORIES = ("file", "unit", "type", "function", "variable")
PRINT_FIELDS = (
    "all",
    "address",
    "source",
    "file-address",
    "unit-address",
    "function-calls",
    "function-instructions",
    "function-variables",
    "function-stack-frame",
    "inlined-function-parameters",
    "variable-locations",
)
SORT_KEYS = ("name", "size")
IGNORE_CHANGES = (
    "added",
    "deleted",
    "address",
    "linkage-name",
    "symbol-name",
    "function-address",
    "function-size",
    "function-inline",
    "function-symbol-name",
    "variable-address",
    "variable-symbol-name",
)

_AFTER_HELP = (
    "FILTERS:\n"
    "    function-inline=<yes|no>        Match function 'inline' value\n"
    "    name=<string>                   Match entries with the given name\n"
    "    namespace=<string>              Match entries within the given namespace\n"
    "    unit=<string>                   Match entries within the given unit\n"
)


class Mode(enum.Enum):
    """What the command does with its input files."""

    FILE = "file"
    DIFF = "diff"
    BLOAT = "bloat"


def _comma_list(name: str, choices: Optional[Sequence[str]] = None) -> Callable[[str], list[str]]:
    def convert(text: str) -> list[str]:
        values = text.split(",")
        if choices is not None:
            for value in values:
                if value not in choices:
                    raise argparse.ArgumentTypeError(f"invalid {name} value: {value}")
        return values

    return convert


def _inline_depth(text: str) -> int:
    if not text.isdigit():
        raise argparse.ArgumentTypeError(f"invalid inline-depth value: {text}")
    return int(text)


class _Parser(argparse.ArgumentParser):
    """Parser that also checks the relations between the mode arguments."""

    def parse_known_args(self, args=None, namespace=None):
        ns, extras = super().parse_known_args(args, namespace)
        given = [
            mode
            for mode, value in (
                (Mode.FILE, ns.file),
                (Mode.DIFF, ns.diff),
                (Mode.BLOAT, ns.bloat),
            )
            if value is not None
        ]
        if not given:
            self.error("one of FILE, --diff or --bloat is required")
        if len(given) > 1:
            names = ", ".join(mode.value for mode in given)
            self.error(f"arguments cannot be used together: {names}")
        ns.mode = given[0]
        if ns.mode is not Mode.DIFF:
            for option, value in (("--ignore", ns.ignore), ("--prefix-map", ns.prefix_map)):
                if value is not None:
                    self.error(f"argument {option} requires --diff")
        return ns, extras


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the command."""
    parser = _Parser(
        prog="debuginfo-view",
        epilog=_AFTER_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=VERSION)
    parser.add_argument("file", nargs="?", metavar="FILE", help="Path of file to print")
    parser.add_argument(
        "-d",
        "--diff",
        nargs=2,
        metavar=("FILE", "FILE"),
        help="Print difference between two files",
    )
    parser.add_argument("--bloat", metavar="FILE", help="Print bloat information")
    parser.add_argument(
        "-o", "--format", dest="output_format", choices=FORMATS, metavar="FORMAT", help="Output format"
    )
    parser.add_argument(
        "-c",
        "--category",
        dest="categories",
        action="extend",
        type=_comma_list("category", CATEGORIES),
        metavar="CATEGORY",
        help="Categories of entries to print (defaults to all)",
    )
    parser.add_argument(
        "-p",
        "--print",
        dest="print_fields",
        action="extend",
        type=_comma_list("print", PRINT_FIELDS),
        metavar="FIELD",
        help="Print extra fields within entries",
    )
    parser.add_argument(
        "--inline-depth",
        type=_inline_depth,
        metavar="DEPTH",
        help="Depth of inlined function calls to print (defaults to 1, 0 to disable)",
    )
    parser.add_argument(
        "-f",
        "--filter",
        dest="filters",
        action="extend",
        type=_comma_list("filter"),
        metavar="FILTER",
        help="Print only entries that match the given filters",
    )
    parser.add_argument(
        "-s", "--sort", choices=SORT_KEYS, metavar="KEY", help="Sort entries by the given key"
    )
    parser.add_argument(
        "-i",
        "--ignore",
        action="extend",
        type=_comma_list("ignore", IGNORE_CHANGES),
        metavar="CHANGE",
        help="Don't print differences due to the given types of changes",
    )
    parser.add_argument(
        "--prefix-map",
        action="extend",
        type=_comma_list("prefix-map"),
        metavar="OLD>=<NEW",
        help="When comparing file paths, replace the 'old' prefix with the 'new' prefix",
    )
    return parser