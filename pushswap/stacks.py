"""The two stacks of the puzzle and the ten operations that act on them."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from itertools import pairwise


class Operation(str, Enum):
    """An instruction, named as it is written on output."""

    SA = "sa"
    SB = "sb"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RRA = "rra"
    RRB = "rrb"
    RR = "rr"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def is_sorted(values: Iterable[int]) -> bool:
    """Return True if the values never decrease from first to last."""
    return all(left <= right for left, right in pairwise(values))


def _swap(stack: list[int]) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _rotate(stack: list[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.append(stack.pop(0))
    return True


def _reverse_rotate(stack: list[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.insert(0, stack.pop())
    return True


def _push(source: list[int], target: list[int]) -> bool:
    if not source:
        return False
    target.insert(0, source.pop(0))
    return True


class PushSwap:
    """Stacks a and b, top first, with the log of operations performed.

    An operation that cannot change its stack is skipped and not logged,
    except rr and rrr, which are always logged.
    """

    def __init__(self, numbers: Iterable[int]) -> None:
        self.a: list[int] = list(numbers)
        self.b: list[int] = []
        self.operations: list[Operation] = []

    def __repr__(self) -> str:
        return f"PushSwap(a={self.a!r}, b={self.b!r})"

    def _log(self, done: bool, operation: Operation) -> None:
        if done:
            self.operations.append(operation)

    def sa(self) -> None:
        """Swap the two top elements of a."""
        self._log(_swap(self.a), Operation.SA)

    def sb(self) -> None:
        """Swap the two top elements of b."""
        self._log(_swap(self.b), Operation.SB)

    def pa(self) -> None:
        """Move the top of b onto a."""
        self._log(_push(self.b, self.a), Operation.PA)

    def pb(self) -> None:
        """Move the top of a onto b."""
        self._log(_push(self.a, self.b), Operation.PB)

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        self._log(_rotate(self.a), Operation.RA)

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        self._log(_rotate(self.b), Operation.RB)

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        self._log(_reverse_rotate(self.a), Operation.RRA)

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        self._log(_reverse_rotate(self.b), Operation.RRB)

    def rr(self) -> None:
        """Rotate both stacks."""
        _rotate(self.a)
        _rotate(self.b)
        self._log(True, Operation.RR)

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self._log(True, Operation.RRR)

    def apply(self, operation: Operation | str) -> None:
        """Perform an operation given as an Operation or its name."""
        op = Operation(operation)
        actions = {
            Operation.SA: self.sa,
            Operation.SB: self.sb,
            Operation.PA: self.pa,
            Operation.PB: self.pb,
            Operation.RA: self.ra,
            Operation.RB: self.rb,
            Operation.RRA: self.rra,
            Operation.RRB: self.rrb,
            Operation.RR: self.rr,
            Operation.RRR: self.rrr,
        }
        actions[op]()