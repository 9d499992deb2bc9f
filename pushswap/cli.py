"""Command line entry point: print the operations that sort the given numbers."""

from __future__ import annotations

import sys

from .parsing import InputError, has_duplicates, is_allowed_args, parse_arguments
from .sorting import sort
from .stacks import Machine


def _report_error() -> int:
    sys.stderr.write("Error\n")
    return 1


def main(argv: list[str] | None = None) -> int:
    """Sort the numbers in ``argv`` and print each operation on its own line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    if not is_allowed_args(args):
        return _report_error()
    try:
        values = parse_arguments(args)
    except InputError:
        return _report_error()
    if has_duplicates(values):
        return _report_error()
    sort(Machine(values, sys.stdout))
    return 0


if __name__ == "__main__":
    sys.exit(main())