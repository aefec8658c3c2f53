import random
from itertools import permutations

import pytest

from pushswap.sort import radix_sort, sort_five, sort_four, sort_stack, sort_three
from pushswap.stack import Stacks


def _replay(values, operations):
    stacks = Stacks(values)
    for name in operations:
        getattr(stacks, name)()
    return stacks


def _check_sorted(values, stacks):
    assert stacks.values() == sorted(values)
    assert not stacks.b
    replayed = _replay(values, stacks.operations)
    assert replayed.values() == sorted(values)
    assert not replayed.b


@pytest.mark.parametrize("values", list(permutations([1, 2, 3])))
def test_sort_three_all_orders(values):
    stacks = Stacks(values)
    sort_three(stacks)
    _check_sorted(values, stacks)
    assert len(stacks.operations) <= 2


def test_sort_three_known_sequences():
    cases = {
        (2, 1, 3): ["sa"],
        (3, 1, 2): ["ra"],
        (1, 3, 2): ["rra", "sa"],
    }
    for values, expected in cases.items():
        stacks = Stacks(values)
        sort_three(stacks)
        assert stacks.operations == expected


def test_sort_three_already_sorted_does_nothing():
    stacks = Stacks([1, 2, 3])
    sort_three(stacks)
    assert stacks.operations == []


@pytest.mark.parametrize("values", list(permutations([-4, 0, 7, 12])))
def test_sort_four_all_orders(values):
    stacks = Stacks(values)
    sort_four(stacks)
    _check_sorted(values, stacks)


@pytest.mark.parametrize("values", list(permutations([5, -1, 3, 9, 0])))
def test_sort_five_all_orders(values):
    stacks = Stacks(values)
    sort_five(stacks)
    _check_sorted(values, stacks)
    assert len(stacks.operations) <= 12


def test_sort_stack_two_swaps():
    stacks = Stacks([2, 1])
    sort_stack(stacks)
    assert stacks.operations == ["sa"]
    assert stacks.values() == [1, 2]


@pytest.mark.parametrize("size", [6, 7, 10, 25, 64, 100])
def test_radix_sort_random(size):
    rng = random.Random(size)
    values = rng.sample(range(-1000, 1000), size)
    stacks = Stacks(values)
    radix_sort(stacks)
    _check_sorted(values, stacks)
    assert set(stacks.operations) <= {"ra", "pb", "pa"}
    assert stacks.operations.count("pb") == stacks.operations.count("pa")


def test_radix_sort_sorted_input_makes_no_moves():
    stacks = Stacks(range(10))
    radix_sort(stacks)
    assert stacks.operations == []


@pytest.mark.parametrize("size", [6, 8, 30])
def test_sort_stack_uses_radix_for_large_input(size):
    values = list(range(size, 0, -1))
    stacks = Stacks(values)
    sort_stack(stacks)
    _check_sorted(values, stacks)
    assert "sa" not in stacks.operations


def test_sort_stack_extreme_values():
    values = [2147483647, -2147483648, 0, 5, -5, 42]
    stacks = Stacks(values)
    sort_stack(stacks)
    _check_sorted(values, stacks)