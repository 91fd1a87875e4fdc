import random

import pytest

from exercisekit.searching import binary_search, linear_search

SOURCE_ARRAY = [2, 3, 4, 10, 40]


def test_binary_search_source_example():
    assert binary_search(SOURCE_ARRAY, 10) == 3


@pytest.mark.parametrize("target", SOURCE_ARRAY)
def test_binary_search_finds_every_element(target):
    index = binary_search(SOURCE_ARRAY, target)
    assert SOURCE_ARRAY[index] == target


@pytest.mark.parametrize("target", [1, 5, 41, -3])
def test_binary_search_absent(target):
    assert binary_search(SOURCE_ARRAY, target) is None


def test_binary_search_empty():
    assert binary_search([], 1) is None


def test_binary_search_random():
    rng = random.Random(99)
    for _ in range(50):
        data = sorted(rng.sample(range(200), rng.randint(1, 30)))
        target = rng.choice(data)
        assert data[binary_search(data, target)] == target
        missing = next(n for n in range(200) if n not in data)
        assert binary_search(data, missing) is None


def test_linear_search_first_occurrence():
    data = [7, 1, 7, 3]
    assert linear_search(data, 7) == data.index(7)
    assert linear_search(data, 3) == data.index(3)


def test_linear_search_absent():
    assert linear_search([1, 2, 3], 9) is None
    assert linear_search([], 9) is None


def test_linear_search_unsorted_random():
    rng = random.Random(7)
    data = [rng.randint(0, 20) for _ in range(40)]
    for target in set(data):
        assert linear_search(data, target) == data.index(target)