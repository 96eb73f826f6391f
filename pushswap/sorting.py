"""Strategies that sort stack a into ascending order using the puzzle's moves."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence

from pushswap.stacks import Move, Stacks, is_sorted


def assign_indexes(values: Sequence[int]) -> list[int]:
    """Return each value's position in the sorted order of all the values."""
    ordered = sorted(values)
    return [bisect_left(ordered, value) for value in values]


def _first_max_position(stack: Sequence[int]) -> int:
    return max(range(len(stack)), key=lambda pos: (stack[pos], -pos))


def _first_min_position(stack: Sequence[int]) -> int:
    return min(range(len(stack)), key=lambda pos: (stack[pos], pos))


def sort_three(stacks: Stacks) -> None:
    """Sort exactly three values on stack a with at most two moves."""
    a = stacks.a
    biggest = _first_max_position(a)
    if biggest == 0:
        stacks.perform(Move.RA)
    elif biggest == 1:
        stacks.perform(Move.RRA)
    if a[0] > a[1]:
        stacks.perform(Move.SA)


def shift_min_to_front(stacks: Stacks) -> None:
    """Rotate stack a the shorter way until its smallest value is on top."""
    position = _first_min_position(stacks.a)
    length = len(stacks.a)
    if position <= length // 2:
        for _ in range(position):
            stacks.perform(Move.RA)
    else:
        for _ in range(length - position):
            stacks.perform(Move.RRA)


def sort_four(stacks: Stacks) -> None:
    """Sort four values on stack a, parking the smallest on b meanwhile."""
    shift_min_to_front(stacks)
    stacks.perform(Move.PB)
    sort_three(stacks)
    stacks.perform(Move.PA)


def sort_five(stacks: Stacks) -> None:
    """Sort five values on stack a, parking the smallest on b meanwhile."""
    shift_min_to_front(stacks)
    stacks.perform(Move.PB)
    sort_four(stacks)
    stacks.perform(Move.PA)


def chunk(stacks: Stacks, end: int) -> None:
    """Move every value from a to b in a sliding window of sorted ranks.

    A value whose rank lies in the window is pushed on top of b; one below
    the window is pushed and then rotated to the bottom of b; anything else
    is rotated to the bottom of a. The window slides by one after each push.
    """
    ranks = dict(zip(stacks.a, assign_indexes(stacks.a)))
    start = 0
    while stacks.a:
        rank = ranks[stacks.a[0]]
        if start <= rank <= end:
            stacks.perform(Move.PB)
            start += 1
            end += 1
        elif rank < start:
            stacks.perform(Move.PB)
            stacks.perform(Move.RB)
            start += 1
            end += 1
        else:
            stacks.perform(Move.RA)


def push_back_to_a(stacks: Stacks) -> None:
    """Empty b onto a, always taking b's largest value next."""
    while stacks.b:
        half = len(stacks.b) // 2
        position = _first_max_position(stacks.b)
        if position == 0:
            stacks.perform(Move.PA)
        elif position > half:
            stacks.perform(Move.RRB)
        else:
            stacks.perform(Move.RB)


def _sort(stacks: Stacks) -> None:
    length = len(stacks.a)
    if length == 2:
        stacks.perform(Move.SA)
    elif length == 3:
        sort_three(stacks)
    elif length == 4:
        sort_four(stacks)
    elif length == 5:
        sort_five(stacks)
    elif length <= 100:
        chunk(stacks, 14)
    elif length <= 500:
        chunk(stacks, 34)
    else:
        chunk(stacks, 50)


def solve(values: Sequence[int]) -> list[Move]:
    """Return the moves that sort the distinct values, or none if already sorted."""
    if len(values) < 2 or is_sorted(values):
        return []
    stacks = Stacks(values)
    _sort(stacks)
    push_back_to_a(stacks)
    return list(stacks.moves)