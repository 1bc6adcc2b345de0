"""Sorting strategy: the three-element sort and the cost-driven two-stack sort."""

from __future__ import annotations

from collections.abc import Iterable

from .stacks import Operation, PushSwap, is_sorted


def _mark_halves(stack: list[int], above: dict[int, bool]) -> None:
    """Record for each value whether it sits at or above the stack's median."""
    median = len(stack) // 2
    for position, value in enumerate(stack):
        above[value] = position <= median


def _target_below(value: int, stack: list[int]) -> int:
    """The largest value of the stack smaller than value, else its maximum."""
    smaller = [other for other in stack if other < value]
    return max(smaller) if smaller else max(stack)


def _target_above(value: int, stack: list[int]) -> int:
    """The smallest value of the stack larger than value, else its minimum."""
    larger = [other for other in stack if other > value]
    return min(larger) if larger else min(stack)


def _moves_to_top(position: int, length: int, upper: bool) -> int:
    return position if upper else length - position


def _cheapest_move(machine: PushSwap, above: dict[int, bool]) -> tuple[int, int]:
    """Pick the first value of a whose trip onto its target in b costs least."""
    a, b = machine.a, machine.b
    b_positions = {value: position for position, value in enumerate(b)}
    best: tuple[int, int] | None = None
    best_cost = 0
    for position, value in enumerate(a):
        target = _target_below(value, b)
        cost = _moves_to_top(position, len(a), above[value]) + _moves_to_top(
            b_positions[target], len(b), above[target]
        )
        if best is None or cost < best_cost:
            best, best_cost = (value, target), cost
    assert best is not None
    return best


def _bring_to_top(
    machine: PushSwap, on_a: bool, value: int, above: dict[int, bool]
) -> None:
    stack = machine.a if on_a else machine.b
    if on_a:
        step = machine.ra if above[value] else machine.rra
    else:
        step = machine.rb if above[value] else machine.rrb
    while stack[0] != value:
        step()


def _move_a_to_b(machine: PushSwap, above: dict[int, bool]) -> None:
    a, b = machine.a, machine.b
    _mark_halves(a, above)
    _mark_halves(b, above)
    cheapest, target = _cheapest_move(machine, above)
    if above[cheapest] and above[target]:
        while a[0] != cheapest and b[0] != target:
            machine.rr()
        _mark_halves(a, above)
        _mark_halves(b, above)
    elif not above[cheapest] and not above[target]:
        while b[0] != target and a[0] != cheapest:
            machine.rrr()
        _mark_halves(a, above)
        _mark_halves(b, above)
    _bring_to_top(machine, True, cheapest, above)
    _bring_to_top(machine, False, target, above)
    machine.pb()


def _move_b_to_a(machine: PushSwap, above: dict[int, bool]) -> None:
    _mark_halves(machine.a, above)
    _mark_halves(machine.b, above)
    target = _target_above(machine.b[0], machine.a)
    _bring_to_top(machine, True, target, above)
    machine.pa()


def _min_on_top(machine: PushSwap, above: dict[int, bool]) -> None:
    a = machine.a
    smallest = min(a)
    step = machine.ra if above[smallest] else machine.rra
    while a[0] != smallest:
        step()


def sort_three(machine: PushSwap) -> None:
    """Order stack a with at most two operations, assuming three values."""
    a = machine.a
    if len(a) < 2:
        raise ValueError("sort_three needs at least two values on stack a")
    biggest = max(a)
    if a[0] == biggest:
        machine.ra()
    elif a[1] == biggest:
        machine.rra()
    if a[0] > a[1]:
        machine.sa()


def sort_stack(machine: PushSwap) -> None:
    """Sort stack a through b, moving the cheapest value each time."""
    above: dict[int, bool] = {}
    _mark_halves(machine.a, above)
    length = len(machine.a)
    for step in range(2):
        if length - step > 3 and not is_sorted(machine.a):
            machine.pb()
    step = 2
    while length - step > 3 and not is_sorted(machine.a):
        _move_a_to_b(machine, above)
        step += 1
    sort_three(machine)
    while machine.b:
        _move_b_to_a(machine, above)
    _min_on_top(machine, above)


def solve(numbers: Iterable[int]) -> list[Operation]:
    """Return the operations that sort the given stack a, top first."""
    machine = PushSwap(numbers)
    if not is_sorted(machine.a):
        if len(machine.a) == 2:
            machine.sa()
        elif len(machine.a) == 3:
            sort_three(machine)
        else:
            sort_stack(machine)
    return list(machine.operations)