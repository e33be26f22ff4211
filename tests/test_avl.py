import random

import pytest

from structkit.avl import AVLTree


def _check(node):
    """Return (height, keys in order) and assert the AVL invariants."""
    if node is None:
        return 0, []
    left_height, left_keys = _check(node.left)
    right_height, right_keys = _check(node.right)
    assert abs(left_height - right_height) <= 1
    assert node.height == max(left_height, right_height) + 1
    assert all(key < node.data for key in left_keys)
    assert all(key > node.data for key in right_keys)
    return node.height, left_keys + [node.data] + right_keys


def test_source_example():
    tree = AVLTree([1, 8, 6, 7, 10])
    assert list(tree.pre_order()) == [6, 1, 8, 7, 10]
    assert tree.height() == 3


@pytest.mark.parametrize(
    "items",
    [
        list(range(1, 101)),
        list(range(100, 0, -1)),
        [50, 20, 30, 10, 15, 5, 70, 60, 65],
    ],
)
def test_invariants_hold(items):
    tree = AVLTree(items)
    height, keys = _check(tree.root)
    assert keys == sorted(set(items))
    assert height == tree.height()


def test_random_inserts_stay_balanced():
    rng = random.Random(7)
    items = [rng.randrange(1000) for _ in range(300)]
    tree = AVLTree(items)
    _, keys = _check(tree.root)
    assert keys == sorted(set(items))


def test_duplicates_are_ignored():
    tree = AVLTree([3, 3, 3])
    assert list(tree.pre_order()) == [3]
    assert tree.height() == 1


def test_empty_tree():
    tree = AVLTree()
    assert tree.height() == 0
    assert list(tree.pre_order()) == []