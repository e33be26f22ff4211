import pytest

from structkit.binary_tree import build_tree, in_order, post_order, pre_order
from structkit.threaded_tree import (
    build_thread_tree,
    in_thread,
    post_thread,
    pre_thread,
    walk_in_thread,
    walk_post_thread,
    walk_pre_thread,
)

SPECS = [
    "A##",
    "ABD##E##CF###",
    "A#B#C##",
    "ABC####",
    "AB#C###",
    "DAB#C####",
    "ABD#G##E##C#F##",
    "ABDH##I##E#J##CF#K##G##",
]


@pytest.mark.parametrize("spec", SPECS)
def test_in_thread_walk_matches_in_order(spec):
    root = in_thread(build_thread_tree(spec))
    assert list(walk_in_thread(root)) == list(in_order(build_tree(spec)))


@pytest.mark.parametrize("spec", SPECS)
def test_pre_thread_walk_matches_pre_order(spec):
    root = pre_thread(build_thread_tree(spec))
    assert list(walk_pre_thread(root)) == list(pre_order(build_tree(spec)))


@pytest.mark.parametrize("spec", SPECS)
def test_post_thread_walk_matches_post_order(spec):
    root = post_thread(build_thread_tree(spec))
    assert list(walk_post_thread(root)) == list(post_order(build_tree(spec)))


def test_build_records_parents():
    root = build_thread_tree("ABD##E##CF###")
    assert root.parent is None
    assert root.left.parent is root
    assert root.right.left.parent is root.right


def test_in_thread_links_leaf_to_neighbours():
    root = in_thread(build_thread_tree("ABD##E##CF###"))
    b = root.left
    d = b.left
    e = b.right
    assert d.left_is_thread and d.left is None
    assert d.right_is_thread and d.right is b
    assert e.left_is_thread and e.left is b
    assert e.right_is_thread and e.right is root


def test_in_thread_closes_last_node():
    root = in_thread(build_thread_tree("A#B##"))
    last = root.right
    assert last.right_is_thread
    assert last.right is None


def test_empty_tree_walks_are_empty():
    assert build_thread_tree("#") is None
    assert list(walk_in_thread(in_thread(None))) == []
    assert list(walk_pre_thread(pre_thread(None))) == []
    assert list(walk_post_thread(post_thread(None))) == []


def test_incomplete_spec_raises():
    with pytest.raises(ValueError):
        build_thread_tree("AB")