# pushswap

pushswap sorts a list of distinct integers using only two stacks and a small
set of operations, and prints the operations it used. A checker replays an
operation list and reports whether it sorts the input.

## The operations

| Move  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the top two elements of stack a            |
| `sb`  | swap the top two elements of stack b            |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of b onto a                        |
| `pb`  | move the top of a onto b                        |
| `ra`  | rotate a upwards: the top becomes the bottom    |
| `rb`  | rotate b upwards                                |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate a downwards: the bottom becomes the top  |
| `rrb` | rotate b downwards                              |
| `rrr` | `rra` and `rrb` together                        |

Stack a starts with the numbers as given, the first one on top. Stack b
starts empty. A move that cannot be done (swapping or rotating a stack with
fewer than two elements, pushing from an empty stack) leaves that stack
unchanged.

## Installing

```
pip install .
```

## Solving

```
push-swap 3 2 1
```

prints one move per line:

```
ra
sa
```

Numbers may be given as separate arguments or together in quoted,
space-separated strings (`push-swap "4 67 3" 87 23`). A number may carry a
leading `+` or `-`. With no arguments, or when the input is already sorted
or has only one number, nothing is printed and the exit status is 0.
Non-numeric words, values outside the 32-bit signed range, duplicates, and
empty or blank arguments print `Error` on standard error and exit with
status 1.

Stacks of two to five numbers are sorted with dedicated short sequences.
Larger inputs are pushed to b in chunks by sorted rank (a window of 15 ranks
for up to 100 numbers, 35 for up to 500, 51 beyond that), then the largest
value left on b is repeatedly rotated to the top of b and pushed back to a.

## Checking

```
push-swap 3 2 1 | pushswap-checker 3 2 1
```

The checker takes the same arguments as `push-swap` and reads moves from
standard input, one per line, each ending with a newline. It applies them
and prints `OK` if stack a ends sorted and stack b is empty, and `KO`
otherwise. An unknown move, a last line without a newline, or invalid
arguments print `Error` on standard error and exit with status 1. Run
without arguments, it prints nothing and exits with status 1.

Both commands can also be run as `python -m pushswap.cli` and
`python -m pushswap.checker`.

## From Python

```python
from pushswap.sorting import solve
from pushswap.checker import check

moves = solve([3, 2, 1])
assert check([3, 2, 1], moves)
```

- `pushswap.stacks.Move` is an enumeration of the eleven moves; its values
  are the instruction names.
- `pushswap.stacks.Stacks` holds stacks `a` and `b` as deques, top at the
  left. `apply(move)` carries out a move; `perform(move)` carries it out,
  stopping at the first part that cannot be done, and records it in `moves`
  only if every part succeeded. `is_solved()` tells whether a is sorted and
  b is empty.
- `pushswap.parsing.parse_args` turns command-line strings into a list of
  integers and raises `InputError` on bad input; `split_arguments` and
  `parse_number` do its two steps separately.
- `pushswap.sorting` provides `solve`, `assign_indexes`, and the individual
  strategies `sort_three`, `sort_four`, `sort_five`, `shift_min_to_front`,
  `chunk` and `push_back_to_a`, each acting on a `Stacks`.
- `pushswap.checker` provides `parse_move`, `read_moves` and `check`.