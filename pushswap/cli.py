"""Command line: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import ParseError, parse_arguments
from .sorter import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program on the arguments and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        numbers = parse_arguments(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    for operation in solve(numbers):
        sys.stdout.write(f"{operation}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())