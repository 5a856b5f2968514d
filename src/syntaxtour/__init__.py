"""syntaxtour: A guided tour of basic language features."""

from __future__ import annotations

import argparse
import sys

from rich.console import Console
from rich.table import Table

from syntaxtour.example import SECTIONS, BasicExample, Inner
from syntaxtour.optional import (
    ABSENT,
    Absent,
    NullReferenceError,
    Present,
    filter_present,
    get_or_else,
    map_or,
    optional,
    safe_length,
    unwrap,
)

__version__ = "0.1.0"

DEFAULT_NAME = "BasicExample"

__all__ = [
    "ABSENT",
    "Absent",
    "BasicExample",
    "Inner",
    "NullReferenceError",
    "Present",
    "SECTIONS",
    "filter_present",
    "get_or_else",
    "main",
    "map_or",
    "optional",
    "safe_length",
    "unwrap",
]


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="syntaxtour",
        description="A guided tour of basic language features.",
    )
    parser.add_argument(
        "--name",
        default=DEFAULT_NAME,
        help=f"Name to build the example from (default: {DEFAULT_NAME})",
    )
    parser.add_argument(
        "--section",
        choices=list(SECTIONS),
        default=None,
        help="Run a single section instead of all of them",
    )
    parser.add_argument(
        "--list", action="store_true", help="List available sections and exit"
    )

    args = parser.parse_args(argv)

    if args.list:
        return cmd_list()
    return cmd_run(args.name, args.section)


def cmd_list() -> int:
    """Print the available sections."""
    table = Table(title="Sections")
    table.add_column("Section", style="cyan", no_wrap=True)
    table.add_column("Shows")
    for section, description in SECTIONS.items():
        table.add_row(section, description)
    Console().print(table)
    return 0


def cmd_run(name: str, section: str | None) -> int:
    """Build the example and run one or all sections."""
    if not name:
        print("Error: --name must not be empty", file=sys.stderr)
        return 1

    example = BasicExample(name)
    if section is None:
        example.examples()
    else:
        example.run_section(section)
    return 0


if __name__ == "__main__":
    sys.exit(main())
