import pytest

from algodrills.lru import LRUCache


def test_example_sequence():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == 1
    cache.put(3, 3)
    assert cache.get(2) == -1
    cache.put(4, 4)
    assert cache.get(1) == -1
    assert cache.get(3) == 3
    assert cache.get(4) == 4


def test_update_refreshes_key():
    cache = LRUCache(2)
    cache.put(1, 10)
    cache.put(2, 20)
    cache.put(1, 11)
    cache.put(3, 30)
    assert cache.get(1) == 11
    assert cache.get(2) == -1
    assert len(cache) == 2


def test_capacity_one():
    cache = LRUCache(1)
    cache.put(5, 50)
    cache.put(6, 60)
    assert cache.get(5) == -1
    assert cache.get(6) == 60


def test_rejects_non_positive_capacity():
    with pytest.raises(ValueError):
        LRUCache(0)