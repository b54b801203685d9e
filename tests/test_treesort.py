import random

from toolbox.treesort import sort


def _is_sorted(values):
    return all(a <= b for a, b in zip(values, values[1:]))


def test_sort_random():
    rng = random.Random(7)
    data = [rng.randrange(1 << 62) % 50 for _ in range(50)]
    original = list(data)
    sort(data)
    assert _is_sorted(data)
    assert sorted(original) == data


def test_sort_empty():
    data = []
    sort(data)
    assert data == []


def test_sort_in_place_keeps_identity():
    data = [3, 1, 2]
    alias = data
    sort(data)
    assert alias is data
    assert data == [1, 2, 3]


def test_sort_already_sorted_long_input():
    data = list(range(5000))
    sort(data)
    assert data == list(range(5000))


def test_sort_reverse_with_duplicates():
    data = [5, 5, 4, 4, 3, 3, -1, -1]
    sort(data)
    assert data == [-1, -1, 3, 3, 4, 4, 5, 5]