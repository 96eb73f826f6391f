"""Command that checks whether a list of moves read from input sorts the numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence

from pushswap.parsing import InputError, parse_args
from pushswap.stacks import Move, Stacks


def parse_move(line: str) -> Move:
    """Read one instruction line, which must end with a newline.

    Anything other than an exact instruction name followed by a newline
    is rejected with InputError.
    """
    if not line.endswith("\n"):
        raise InputError()
    name = line[:-1]
    try:
        return Move(name)
    except ValueError:
        raise InputError() from None


def read_moves(stream: Iterable[str]) -> Iterator[Move]:
    """Yield the moves read line by line from a text stream."""
    for line in stream:
        yield parse_move(line)


def check(values: Sequence[int], moves: Iterable[Move | str]) -> bool:
    """Apply the moves to the values and report whether they end up sorted."""
    stacks = Stacks(values)
    for move in moves:
        stacks.apply(move)
    return stacks.is_solved()


def main(argv: Sequence[str] | None = None) -> int:
    """Read moves from standard input, print OK or KO, and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        values = parse_args(args)
        solved = check(values, read_moves(sys.stdin))
    except InputError as error:
        print(error, file=sys.stderr)
        return 1
    print("OK" if solved else "KO")
    return 0


if __name__ == "__main__":
    sys.exit(main())