import itertools

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.sorter import solve, sort_stack, sort_three
from pushswap.stacks import Operation, PushSwap, is_sorted


def _replay(numbers, operations):
    machine = PushSwap(numbers)
    for operation in operations:
        machine.apply(operation)
    return machine


def test_two_values_swap():
    assert solve([2, 1]) == [Operation.SA]


def test_sorted_input_needs_nothing():
    assert solve([1, 2, 3, 4, 5]) == []


def test_single_and_empty_need_nothing():
    assert solve([7]) == []
    assert solve([]) == []


@pytest.mark.parametrize("values", list(itertools.permutations([1, 2, 3])))
def test_sort_three_all_permutations(values):
    machine = PushSwap(values)
    sort_three(machine)
    assert machine.a == [1, 2, 3]
    assert len(machine.operations) <= 2
    assert machine.b == []


def test_sort_three_reverse_then_swap():
    machine = PushSwap([1, 3, 2])
    sort_three(machine)
    assert machine.operations == [Operation.RRA, Operation.SA]


def test_sort_three_rejects_single_value():
    with pytest.raises(ValueError):
        sort_three(PushSwap([1]))


def test_sort_stack_sorted_after_first_push():
    machine = PushSwap([5, 1, 2, 3, 4])
    sort_stack(machine)
    assert machine.a == [1, 2, 3, 4, 5]
    assert machine.operations == [Operation.PB, Operation.PA, Operation.RA]


@pytest.mark.parametrize("values", list(itertools.permutations([4, 1, 3, 2])))
def test_sort_stack_all_four_permutations(values):
    if is_sorted(values):
        values = values[::-1]
    machine = PushSwap(values)
    sort_stack(machine)
    assert machine.a == [1, 2, 3, 4]
    assert machine.b == []


@pytest.mark.parametrize("values", list(itertools.permutations(range(5))))
def test_solve_all_five_permutations(values):
    machine = _replay(values, solve(values))
    assert machine.a == sorted(values)
    assert machine.b == []


def test_solve_does_not_change_input():
    values = [3, 0, 9, -4, 12, 1]
    original = list(values)
    solve(values)
    assert values == original


@settings(deadline=None, max_examples=150)
@given(st.lists(st.integers(-10_000, 10_000), unique=True, max_size=40))
def test_solve_replays_to_sorted(values):
    operations = solve(values)
    machine = _replay(values, operations)
    assert machine.a == sorted(values)
    assert machine.b == []
    assert all(isinstance(op, Operation) for op in operations)