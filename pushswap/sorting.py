"""The sorting strategy: small cases by hand, larger ones by cheapest moves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from .stack import PushSwap, Stack

_NO_CANDIDATE = 2**31 - 1


@dataclass(frozen=True)
class Target:
    """Where a value should land in the other stack, and the fallback position."""

    target: int
    target_ops: int
    fallback: int
    fallback_ops: int
    found: bool

    @property
    def chosen(self) -> tuple[int, int]:
        """The value to bring on top and its distance from the top."""
        if self.found:
            return self.target, self.target_ops
        return self.fallback, self.fallback_ops


def check_if_sorted(machine: PushSwap) -> bool:
    """Tell whether work remains.

    Returns False when b is empty and a holds consecutive values that are
    sorted up to a rotation; a is then rotated until it starts at 1.
    """
    if len(machine.b):
        return True
    values = list(machine.a)
    broken = False
    for current, following in zip(values, values[1:]):
        if following != current + 1:
            if broken:
                return True
            broken = True
    if broken and 1 in values:
        while machine.a.head != 1:
            machine.ra()
    return False


def organize_three(machine: PushSwap) -> None:
    """Sort stack a when it holds exactly three values."""
    first, second, last = list(machine.a)
    if first > second and first > last:
        if second < last:
            machine.ra()
        else:
            machine.sa()
            machine.rra()
        return
    if first < second and first < last:
        if second > last:
            machine.ra()
            machine.sa()
            machine.rra()
        return
    if first < last:
        machine.sa()
        return
    machine.rra()


def find_b_target(a_value: int, b_values: Iterable[int], minimum: int) -> Target:
    """Find the largest value of b not above ``a_value``; fall back to b's largest."""
    target = fallback = minimum
    target_ops = fallback_ops = 0
    found = False
    for ops, value in enumerate(b_values):
        if value <= a_value and value >= target:
            target, target_ops, found = value, ops, True
        if value > fallback:
            fallback, fallback_ops = value, ops
    return Target(target, target_ops, fallback, fallback_ops, found)


def find_a_target(a_values: Iterable[int], b_value: int, maximum: int) -> Target:
    """Find the smallest value of a not below ``b_value``; fall back to a's smallest."""
    target = fallback = maximum
    target_ops = fallback_ops = 0
    found = False
    for ops, value in enumerate(a_values):
        if value >= b_value and value <= target:
            target, target_ops, found = value, ops, True
        if value < fallback:
            fallback, fallback_ops = value, ops
    return Target(target, target_ops, fallback, fallback_ops, found)


def _bring_to_top(stack: Stack, value: int, move: Callable[[], None]) -> None:
    while stack.head != value:
        move()


def _push_cheapest(machine: PushSwap, minimum: int) -> None:
    b_values = list(machine.b)
    best_ops = _NO_CANDIDATE
    source = target = 0
    source_ops = 0
    for index, value in enumerate(machine.a):
        candidate, ops = find_b_target(value, b_values, minimum).chosen
        if ops + index < best_ops:
            best_ops, target, source, source_ops = ops, candidate, value, index + 1
    half = len(machine.b) // 2
    _bring_to_top(machine.a, source, machine.ra if source_ops < half else machine.rra)
    _bring_to_top(machine.b, target, machine.rb if best_ops < half else machine.rrb)
    machine.pb()


def _pull_cheapest(machine: PushSwap, maximum: int) -> None:
    a_values = list(machine.a)
    best_ops = _NO_CANDIDATE
    source = target = 0
    source_ops = 0
    for index, value in enumerate(machine.b):
        candidate, ops = find_a_target(a_values, value, maximum).chosen
        if ops + index < best_ops:
            best_ops, target, source, source_ops = ops, candidate, value, index + 1
    half = len(machine.b) // 2
    _bring_to_top(machine.b, source, machine.rb if source_ops < half else machine.rrb)
    _bring_to_top(machine.a, target, machine.ra if best_ops < half else machine.rra)
    machine.pa()


def sort_stacks(machine: PushSwap) -> None:
    """Sort the ranks held in a into ascending order, writing each instruction."""
    a = machine.a
    if len(a) < 2:
        return
    if len(a) == 3:
        organize_three(machine)
        return
    if len(a) == 2:
        first, second = list(a)
        if first > second:
            machine.ra()
        return
    everything = list(a) + list(machine.b)
    minimum, maximum = min(everything), max(everything)
    if not len(machine.b):
        machine.pb()
        machine.pb()
        top, below = list(machine.b)[:2]
        if top < below:
            machine.rb()
    if check_if_sorted(machine):
        while len(a) > 3:
            _push_cheapest(machine, minimum)
        if len(a) == 3:
            organize_three(machine)
    while len(machine.b):
        _pull_cheapest(machine, maximum)
    move = machine.rra if a.head < len(a) // 2 else machine.ra
    while a.tail != maximum:
        move()