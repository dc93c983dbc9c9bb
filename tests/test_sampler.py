import random

import pytest

from algodrills.nodes import build_list
from algodrills.sampler import ListSampler


def test_results_come_from_the_list():
    values = [3, 7, 11]
    sampler = ListSampler(build_list(values), random.Random(1))
    draws = [sampler.get_random() for _ in range(300)]
    assert set(draws) == set(values)


def test_single_node_always_returned():
    sampler = ListSampler(build_list([42]), random.Random(0))
    assert {sampler.get_random() for _ in range(20)} == {42}


def test_same_seed_same_sequence():
    head = build_list([1, 2, 3, 4, 5])
    first = ListSampler(head, random.Random(123))
    second = ListSampler(head, random.Random(123))
    assert [first.get_random() for _ in range(50)] == [
        second.get_random() for _ in range(50)
    ]


def test_empty_list_raises():
    sampler = ListSampler(None, random.Random(0))
    with pytest.raises(ValueError):
        sampler.get_random()