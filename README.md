# pushswap

pushswap sorts a list of distinct integers using two stacks, `a` and `b`. The
only moves allowed are these:

| Operation | Effect |
|-----------|--------|
| `sa` / `sb` | swap the top two elements of `a` / `b` |
| `pa` / `pb` | move the top of `b` onto `a` / the top of `a` onto `b` |
| `ra` / `rb` | rotate `a` / `b` up: the top goes to the bottom |
| `rra` / `rrb` | rotate `a` / `b` down: the bottom goes to the top |
| `rr` / `rrr` | `ra` and `rb` / `rra` and `rrb` at once |

It prints the operations that sort stack `a` in ascending order, one per line.
Two values are sorted with `sa`, three with at most two operations, and more
than three with a cost-based "cheapest move" strategy: values are pushed to `b`
one by one, each time choosing the one that needs the fewest rotations to reach
its place, then brought back to `a`, which is finally rotated so that its
smallest value is on top.

## Installation

```
pip install .
```

## Command line

Give the numbers as separate arguments:

```
push-swap 3 2 1
```

or as one argument separated by spaces:

```
push-swap "4 67 3 87 23"
```

The same command is available as `python -m pushswap.cli`.

Each operation is printed on its own line on standard output, and the exit
status is 0.

Stack `a` always starts with an entry of `0` on top, followed by the given
numbers in order. The printed operations sort that whole stack, `0` included,
and nothing is printed when it is already in order (for example
`push-swap 1 2 3`).

The program writes `Error` to standard error and exits with status 1 when:

- no arguments are given, or the single argument is empty;
- an argument fails the character check: only digits, spaces and single `+` or
  `-` signs are accepted, and a digit may not be directly followed by a sign;
- a number lies outside the 32-bit signed range;
- a number appears twice, or is `0` (it would repeat the leading entry).

## Library use

```python
from pushswap.sorter import solve

operations = solve([3, 2, 1])
print([str(op) for op in operations])   # ['ra', 'sa']
```

- `pushswap.sorter.solve(numbers)` returns the list of `Operation` values that
  sort the given stack `a` (top first). `sort_three(machine)` and
  `sort_stack(machine)` run the two strategies on a `PushSwap` directly;
  `sort_three` raises `ValueError` if `a` holds fewer than two values.
- `pushswap.stacks.PushSwap(numbers)` holds the lists `a` and `b` (top first)
  and the list `operations` of what has been done. It has one method per
  operation (`sa`, `pb`, `rrr`, ...) and `apply(operation)`, which takes an
  `Operation` or its name. An operation that cannot change its stack (a swap
  or rotation of fewer than two values, a push from an empty stack) is skipped
  and not recorded; `rr` and `rrr` are always recorded.
- `pushswap.stacks.Operation` is a string enum of the ten operation names.
- `pushswap.stacks.is_sorted(values)` tells whether the values never decrease.
- `pushswap.parsing.parse_arguments(args)` turns command-line arguments into
  stack `a`, leading `0` included, and raises `pushswap.parsing.ParseError` on
  bad input. The helpers `check_number`, `overflows_int`, `atoi` and
  `split_words` are available from the same module.

## What it does not do

There is no command that reads a list of operations and checks whether it
sorts a stack. `PushSwap.apply` together with `is_sorted` can be used for that
from Python.

## Tests

```
pip install ".[test]"
pytest
```