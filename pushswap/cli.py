"""Command that prints the moves sorting the numbers given as arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, parse_args
from pushswap.sorting import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Print one move per line that sorts the given numbers; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_args(args)
    except InputError as error:
        print(error, file=sys.stderr)
        return 1
    for move in solve(values):
        print(move)
    return 0


if __name__ == "__main__":
    sys.exit(main())