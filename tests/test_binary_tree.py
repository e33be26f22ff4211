import pytest

from structkit.binary_tree import (
    TreeNode,
    build_tree,
    in_order,
    in_order_iterative,
    level_order,
    post_order,
    post_order_iterative,
    pre_order,
    pre_order_iterative,
)

SPECS = [
    "A##",
    "AB##C##",
    "ABD##E##CF###",
    "A#B#C#D##",
    "ABC####",
    "ABD#G##E##C#F##",
]


def _spec_of(node):
    if node is None:
        return "#"
    return node.data + _spec_of(node.left) + _spec_of(node.right)


@pytest.mark.parametrize("spec", SPECS)
def test_build_round_trip(spec):
    assert _spec_of(build_tree(spec)) == spec


@pytest.mark.parametrize("spec", SPECS)
def test_pre_order_matches_spec_letters(spec):
    assert "".join(pre_order(build_tree(spec))) == spec.replace("#", "")


@pytest.mark.parametrize("spec", SPECS)
def test_iterative_agrees_with_recursive(spec):
    root = build_tree(spec)
    assert list(pre_order_iterative(root)) == list(pre_order(root))
    assert list(in_order_iterative(root)) == list(in_order(root))
    assert list(post_order_iterative(root)) == list(post_order(root))


@pytest.mark.parametrize("spec", SPECS)
def test_every_traversal_visits_each_node_once(spec):
    root = build_tree(spec)
    letters = sorted(spec.replace("#", ""))
    for walk in (in_order, post_order, level_order):
        assert sorted(walk(root)) == letters


@pytest.mark.parametrize("spec", SPECS)
def test_root_position(spec):
    root = build_tree(spec)
    assert list(post_order(root))[-1] == root.data
    assert next(level_order(root)) == root.data


def test_small_tree_orders():
    root = build_tree("AB##C##")
    assert "".join(in_order(root)) == "BAC"
    assert "".join(post_order(root)) == "BCA"


def test_level_order_goes_by_depth():
    root = build_tree("ABD##E##CF###")
    assert "".join(level_order(root)) == "ABCDEF"


def test_empty_tree():
    assert build_tree("#") is None
    for walk in (pre_order, in_order, post_order, level_order,
                 pre_order_iterative, in_order_iterative, post_order_iterative):
        assert list(walk(None)) == []


def test_trailing_symbols_ignored():
    assert _spec_of(build_tree("A##XYZ")) == "A##"


@pytest.mark.parametrize("spec", ["", "A", "AB##", "AB#"])
def test_incomplete_spec_raises(spec):
    with pytest.raises(ValueError):
        build_tree(spec)


def test_manual_tree_traversal():
    root = TreeNode(2, TreeNode(1), TreeNode(3))
    assert list(in_order_iterative(root)) == [1, 2, 3]