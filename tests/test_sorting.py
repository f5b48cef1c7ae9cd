import io
import itertools
import random

import pytest

from pushswap.sorting import (
    Target,
    check_if_sorted,
    find_a_target,
    find_b_target,
    organize_three,
    sort_stacks,
)
from pushswap.stack import PushSwap


def _machine(values):
    out = io.StringIO()
    return PushSwap(values, out=out), out


def _replay(values, instructions):
    fresh, _ = _machine(values)
    for name in instructions:
        getattr(fresh, name.lower())()
    return fresh


@pytest.mark.parametrize("values", list(itertools.permutations([1, 2, 3])))
def test_organize_three_sorts_every_permutation(values):
    machine, out = _machine(values)
    organize_three(machine)
    assert list(machine.a) == [1, 2, 3]
    replayed = _replay(values, out.getvalue().split())
    assert list(replayed.a) == [1, 2, 3]


def test_organize_three_reversed_uses_swap_then_reverse_rotate():
    machine, out = _machine([3, 2, 1])
    organize_three(machine)
    assert out.getvalue().split() == ["SA", "RRA"]


def test_organize_three_sorted_emits_nothing():
    machine, out = _machine([1, 2, 3])
    organize_three(machine)
    assert out.getvalue() == ""
    assert list(machine.a) == [1, 2, 3]


def test_find_b_target_picks_largest_not_above():
    result = find_b_target(5, [3, 7, 4, 1], 1)
    assert result == Target(target=4, target_ops=2, fallback=7, fallback_ops=1, found=True)
    assert result.chosen == (4, 2)


def test_find_b_target_falls_back_to_largest():
    b_values = [5, 7, 6]
    result = find_b_target(2, b_values, 1)
    assert result.found is False
    value, ops = result.chosen
    assert value == max(b_values)
    assert b_values[ops] == value


def test_find_a_target_picks_smallest_not_below():
    result = find_a_target([6, 2, 9, 4], 3, 9)
    assert result.found is True
    assert result.chosen == (4, 3)
    assert result.fallback == 2


def test_find_a_target_falls_back_to_smallest():
    a_values = [4, 2, 3]
    result = find_a_target(a_values, 8, 9)
    assert result.found is False
    value, ops = result.chosen
    assert value == min(a_values)
    assert a_values[ops] == value


def test_check_if_sorted_rotates_a_rotated_sequence():
    machine, out = _machine([3, 4, 5, 1, 2])
    assert check_if_sorted(machine) is False
    assert list(machine.a) == [1, 2, 3, 4, 5]
    assert set(out.getvalue().split()) == {"RA"}


def test_check_if_sorted_reports_unsorted():
    machine, out = _machine([1, 3, 2])
    assert check_if_sorted(machine) is True
    assert list(machine.a) == [1, 3, 2]
    assert out.getvalue() == ""


def test_check_if_sorted_true_when_b_not_empty():
    machine, _ = _machine([1, 2, 3])
    machine.pb()
    assert check_if_sorted(machine) is True


def test_check_if_sorted_on_sorted_input_moves_nothing():
    machine, out = _machine([1, 2, 3, 4])
    assert check_if_sorted(machine) is False
    assert out.getvalue() == ""


def test_sort_two_reversed():
    machine, out = _machine([2, 1])
    sort_stacks(machine)
    assert list(machine.a) == [1, 2]
    assert out.getvalue().split() == ["RA"]


@pytest.mark.parametrize("values", [[1], [1, 2]])
def test_sort_trivial_inputs_emit_nothing(values):
    machine, out = _machine(values)
    sort_stacks(machine)
    assert list(machine.a) == values
    assert out.getvalue() == ""


@pytest.mark.parametrize("size", [4, 5, 6])
def test_sort_every_permutation(size):
    expected = list(range(1, size + 1))
    for values in itertools.permutations(expected):
        machine, out = _machine(values)
        sort_stacks(machine)
        assert list(machine.a) == expected
        assert len(machine.b) == 0
        assert list(_replay(values, out.getvalue().split()).a) == expected


@pytest.mark.parametrize("seed", range(8))
def test_sort_random_larger_inputs(seed):
    rng = random.Random(seed)
    size = rng.randint(7, 60)
    values = list(range(1, size + 1))
    rng.shuffle(values)
    machine, out = _machine(values)
    sort_stacks(machine)
    assert list(machine.a) == sorted(values)
    assert len(machine.b) == 0
    assert list(_replay(values, out.getvalue().split()).a) == sorted(values)