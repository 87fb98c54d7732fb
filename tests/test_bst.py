import random

import pytest

from studylab.bst import BinarySearchTree

SAMPLE = [50, 30, 70, 20, 40, 60, 80, 35, 45, 65, 75, 85, 33, 37]


def test_empty_tree():
    tree = BinarySearchTree()
    assert tree.is_empty()
    assert len(tree) == 0
    assert list(tree) == []


def test_iteration_is_sorted():
    tree = BinarySearchTree(SAMPLE)
    assert list(tree) == sorted(SAMPLE)
    assert len(tree) == len(SAMPLE)
    assert not tree.is_empty()


def test_duplicates_are_ignored():
    tree = BinarySearchTree([3, 1, 3, 2, 1])
    assert list(tree) == [1, 2, 3]
    assert tree.insert(2) is False
    assert tree.insert(4) is True
    assert len(tree) == 4


def test_contains():
    tree = BinarySearchTree(SAMPLE)
    assert all(value in tree for value in SAMPLE)
    assert 36 not in tree
    assert 0 not in tree


def test_remove_missing_raises():
    tree = BinarySearchTree(SAMPLE)
    with pytest.raises(ValueError):
        tree.remove(36)
    assert len(tree) == len(SAMPLE)


def test_remove_from_empty_raises():
    with pytest.raises(ValueError):
        BinarySearchTree().remove(1)


@pytest.mark.parametrize("victim", SAMPLE)
def test_remove_each_value(victim):
    tree = BinarySearchTree(SAMPLE)
    tree.remove(victim)
    expected = sorted(v for v in SAMPLE if v != victim)
    assert list(tree) == expected
    assert victim not in tree
    assert len(tree) == len(expected)


def test_remove_root_until_empty():
    tree = BinarySearchTree(SAMPLE)
    for value in SAMPLE:
        tree.remove(value)
    assert tree.is_empty()
    assert len(tree) == 0


def test_random_insert_remove_keeps_order():
    rng = random.Random(7)
    values = rng.sample(range(1000), 200)
    tree = BinarySearchTree(values)
    remaining = set(values)
    for value in rng.sample(values, 120):
        tree.remove(value)
        remaining.discard(value)
        assert list(tree) == sorted(remaining)
    assert len(tree) == len(remaining)


def test_strings_are_ordered():
    words = ["pear", "apple", "fig", "kiwi"]
    tree = BinarySearchTree(words)
    tree.remove("fig")
    assert list(tree) == sorted(w for w in words if w != "fig")