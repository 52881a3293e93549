import pytest

from blockds.hierarchy import UnavailableFunctionCall
from blockds.tree import (
    ExplicitBinaryTree,
    ExplicitKWayTree,
    ImplicitBinaryTree,
    ImplicitKWayTree,
    MultiwayTree,
)


def make_multiway():
    #        0
    #   /         \
    #   1         2
    # / | \       |
    # 3 4 5       6
    tree = MultiwayTree()
    root = tree.insert_root()
    root.data = 0
    one = tree.emplace_son(root, 0)
    one.data = 1
    two = tree.emplace_son(root, 1)
    two.data = 2
    for order, value in enumerate((3, 4, 5)):
        tree.emplace_son(one, order).data = value
    tree.emplace_son(two, 0).data = 6
    return tree


def make_implicit(k, values):
    tree = ImplicitKWayTree(k)
    for value in values:
        tree.hierarchy.insert_last_leaf().data = value
    return tree


def test_multiway_counts_and_degrees():
    tree = make_multiway()
    root = tree.access_root()
    one = tree.access_son(root, 0)
    two = tree.access_son(root, 1)
    assert tree.size() == 7
    assert tree.node_count() == 7
    assert tree.node_count(one) == 4
    assert tree.degree(root) == 2
    assert tree.degree(one) == 3
    assert tree.degree(two) == 1


def test_access_missing_son_raises():
    tree = make_multiway()
    two = tree.access_son(tree.access_root(), 1)
    with pytest.raises(IndexError):
        tree.access_son(two, 1)


def test_parent_and_root_relations():
    tree = make_multiway()
    root = tree.access_root()
    two = tree.access_son(root, 1)
    six = tree.access_son(two, 0)
    assert tree.access_parent(six) is two
    assert tree.access_parent(root) is None
    assert tree.is_root(root)
    assert not tree.is_root(two)
    assert tree.is_leaf(six)
    assert not tree.is_leaf(two)


def test_nth_son_queries():
    tree = make_multiway()
    root = tree.access_root()
    two = tree.access_son(root, 1)
    assert tree.is_nth_son(two, 1)
    assert not tree.is_nth_son(two, 0)
    assert not tree.is_nth_son(root, 0)
    assert tree.has_nth_son(two, 0)
    assert not tree.has_nth_son(two, 1)


def test_remove_son_removes_subtree():
    tree = make_multiway()
    root = tree.access_root()
    one = tree.access_son(root, 0)
    tree.remove_son(root, 1)
    assert tree.degree(root) == 1
    assert not tree.has_nth_son(root, 1)
    assert tree.size() == tree.node_count(one) + 1


def test_copy_and_assign_equality():
    tree1 = make_multiway()
    root1 = tree1.access_root()
    one1 = tree1.access_son(root1, 0)

    tree2 = tree1.copy()
    assert isinstance(tree2, MultiwayTree)
    assert tree1.equals(tree2)
    tree1.remove_son(root1, 1)
    assert not tree1.equals(tree2)

    tree3 = MultiwayTree()
    tree3.assign(tree1)
    assert tree1.equals(tree3)
    tree1.remove_son(one1, 0)
    tree1.remove_son(one1, 0)
    assert not tree1.equals(tree3)


def test_copy_is_independent():
    tree1 = make_multiway()
    tree2 = tree1.copy()
    tree2.access_root().data = 99
    assert tree1.access_root().data == 0
    assert tree2.access_root() is not tree1.access_root()


def test_clear():
    tree = make_multiway()
    tree.clear()
    assert tree.is_empty()
    assert tree.size() == 0
    assert tree.access_root() is None


def test_change_root_moves_nodes():
    tree = make_multiway()
    root = tree.access_root()
    other = MultiwayTree()
    tree.change_root(None)
    other.change_root(root)
    assert other.size() == 7
    assert tree.is_empty()
    assert tree.node_count() == 0


def test_assign_from_other_kind_raises():
    tree = MultiwayTree()
    with pytest.raises(TypeError):
        tree.assign(ExplicitBinaryTree())


def test_equals_other_kind_is_false():
    assert not MultiwayTree().equals(ExplicitBinaryTree())
    assert not MultiwayTree().equals("tree")
    assert MultiwayTree().equals(MultiwayTree())


def test_explicit_kway_positions():
    tree = ExplicitKWayTree(3)
    root = tree.insert_root()
    son = tree.emplace_son(root, 2)
    assert tree.degree(root) == 1
    assert tree.has_nth_son(root, 2)
    assert not tree.has_nth_son(root, 1)
    assert tree.is_nth_son(son, 2)
    with pytest.raises(IndexError):
        tree.access_son(root, 1)


def test_explicit_kway_change_son_detaches():
    tree = ExplicitKWayTree(3)
    root = tree.insert_root()
    son = tree.emplace_son(root, 0)
    tree.change_son(root, 0, None)
    assert tree.degree(root) == 0
    assert tree.access_parent(son) is None
    tree.change_son(root, 1, son)
    assert tree.access_parent(son) is root
    assert tree.is_nth_son(son, 1)


def test_explicit_kway_copy_keeps_k():
    tree = ExplicitKWayTree(3)
    root = tree.insert_root()
    tree.emplace_son(root, 2).data = "x"
    clone = tree.copy()
    assert clone.equals(tree)
    assert clone.access_son(clone.access_root(), 2).data == "x"
    assert not tree.equals(ExplicitKWayTree(2))


def test_explicit_binary_tree_sons():
    tree = ExplicitBinaryTree()
    root = tree.insert_root()
    left = tree.emplace_son(root, 0)
    right = tree.emplace_son(root, 1)
    assert tree.is_nth_son(left, 0)
    assert tree.is_nth_son(right, 1)
    assert tree.degree(root) == 2
    tree.remove_son(root, 0)
    assert not tree.has_nth_son(root, 0)
    assert tree.access_son(root, 1) is right


def test_implicit_tree_rejects_structural_changes():
    tree = ImplicitKWayTree(3)
    with pytest.raises(UnavailableFunctionCall):
        tree.insert_root()
    built = make_implicit(3, range(5))
    root = built.access_root()
    with pytest.raises(UnavailableFunctionCall):
        built.emplace_son(root, 0)
    with pytest.raises(UnavailableFunctionCall):
        built.remove_son(root, 0)
    with pytest.raises(UnavailableFunctionCall):
        built.change_root(None)


def test_implicit_tree_navigation():
    values = list(range(5))
    tree = make_implicit(3, values)
    root = tree.access_root()
    first = tree.access_son(root, 0)
    assert tree.size() == len(values)
    assert root.data == values[0]
    assert first.data == values[1]
    assert tree.access_parent(first) is root
    assert tree.degree(root) == 3
    assert tree.node_count(root) == len(values)
    assert tree.is_nth_son(first, 0)


def test_implicit_tree_copy_assign_equals():
    tree1 = make_implicit(3, range(5))
    tree2 = tree1.copy()
    assert isinstance(tree2, ImplicitKWayTree)
    assert tree1.equals(tree2)
    tree2.access_root().data = 42
    assert not tree1.equals(tree2)
    tree3 = ImplicitKWayTree(3)
    tree3.assign(tree1)
    assert tree3.equals(tree1)
    assert [tree3.access_son(tree3.access_root(), i).data for i in range(3)] == [1, 2, 3]
    tree1.hierarchy.remove_last_leaf()
    assert not tree1.equals(tree3)


def test_implicit_trees_with_different_k_differ():
    assert not make_implicit(3, range(4)).equals(make_implicit(2, range(4)))
    with pytest.raises(TypeError):
        ImplicitKWayTree(2).assign(make_implicit(3, range(4)))


def test_implicit_binary_tree():
    tree = ImplicitBinaryTree()
    for value in "abc":
        tree.hierarchy.insert_last_leaf().data = value
    root = tree.access_root()
    right = tree.access_son(root, 1)
    assert right.data == "c"
    assert tree.is_nth_son(right, 1)
    assert tree.is_leaf(right)
    assert tree.copy().equals(tree)
    tree.clear()
    assert tree.is_empty()