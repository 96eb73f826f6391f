"""The two stacks of the puzzle and the eleven moves that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Sequence
from enum import Enum


class Move(str, Enum):
    """A named operation on the stacks; the value is its instruction text."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def _swap(stack: deque) -> bool:
    if len(stack) < 2:
        return False
    first = stack.popleft()
    stack.insert(1, first)
    return True


def _push(source: deque, target: deque) -> bool:
    if not source:
        return False
    target.appendleft(source.popleft())
    return True


def _rotate(stack: deque) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(-1)
    return True


def _reverse_rotate(stack: deque) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(1)
    return True


_Step = Callable[["Stacks"], bool]

_STEPS: dict[Move, tuple[_Step, ...]] = {
    Move.SA: (lambda s: _swap(s.a),),
    Move.SB: (lambda s: _swap(s.b),),
    Move.SS: (lambda s: _swap(s.a), lambda s: _swap(s.b)),
    Move.PA: (lambda s: _push(s.b, s.a),),
    Move.PB: (lambda s: _push(s.a, s.b),),
    Move.RA: (lambda s: _rotate(s.a),),
    Move.RB: (lambda s: _rotate(s.b),),
    Move.RR: (lambda s: _rotate(s.a), lambda s: _rotate(s.b)),
    Move.RRA: (lambda s: _reverse_rotate(s.a),),
    Move.RRB: (lambda s: _reverse_rotate(s.b),),
    Move.RRR: (lambda s: _reverse_rotate(s.a), lambda s: _reverse_rotate(s.b)),
}


def is_sorted(values: Iterable[int]) -> bool:
    """Return True when the values are non-empty and in ascending order."""
    items = list(values)
    if not items:
        return False
    return all(left <= right for left, right in zip(items, items[1:]))


class Stacks:
    """Stacks a and b, each with its top at the left, plus a log of moves made."""

    def __init__(self, values: Sequence[int] = ()) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.moves: list[Move] = []

    def apply(self, move: Move | str) -> None:
        """Carry out a move silently; each stack it touches is acted on independently."""
        for step in _STEPS[Move(move)]:
            step(self)

    def perform(self, move: Move | str) -> bool:
        """Carry out a move and log it if every part of it succeeded.

        Parts are tried in order and stop at the first one that cannot be
        done; a move that fails is not logged.
        """
        move = Move(move)
        done = all(step(self) for step in _STEPS[move])
        if done:
            self.moves.append(move)
        return done

    def is_solved(self) -> bool:
        """Return True when a holds every value in ascending order and b is empty."""
        return is_sorted(self.a) and not self.b

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"