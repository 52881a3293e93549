import pytest

from blockds.hierarchy import BinaryHierarchy, Hierarchy, UnavailableFunctionCall


class _Node:
    def __init__(self, data=None):
        self.data = data
        self.parent = None
        self.sons = []


class _TreeHierarchy(Hierarchy):
    def __init__(self):
        self.root = None

    def degree(self, node):
        return len(node.sons)

    def access_root(self):
        return self.root

    def access_parent(self, node):
        return node.parent

    def access_son(self, node, son_order):
        return node.sons[son_order] if 0 <= son_order < len(node.sons) else None

    def emplace_root(self):
        self.root = _Node()
        return self.root

    def change_root(self, new_root):
        if new_root is not None:
            new_root.parent = None
        self.root = new_root

    def emplace_son(self, parent, son_order):
        son = _Node()
        son.parent = parent
        parent.sons.insert(son_order, son)
        return son

    def change_son(self, parent, son_order, new_son):
        parent.sons[son_order].parent = None
        parent.sons[son_order] = new_son
        new_son.parent = parent

    def remove_son(self, parent, son_order):
        del parent.sons[son_order]


class _BinaryTree(BinaryHierarchy, _TreeHierarchy):
    pass


def _make_tree():
    #        0
    #   /         \
    #   1         2
    # / | \       |
    # 3 4 5       6
    h = _TreeHierarchy()
    root = h.emplace_root()
    root.data = 0
    one = h.emplace_son(root, 0)
    one.data = 1
    two = h.emplace_son(root, 1)
    two.data = 2
    for order, value in enumerate((3, 4, 5)):
        h.emplace_son(one, order).data = value
    h.emplace_son(two, 0).data = 6
    return h, root, one, two


def test_abstract_hierarchy_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Hierarchy()


def test_node_count_whole_and_subtree():
    h, root, one, two = _make_tree()
    assert Hierarchy.node_count(h) == 7
    assert Hierarchy.node_count(h, root) == 7
    assert Hierarchy.node_count(h, one) == 4
    assert Hierarchy.node_count(h, two) == 2


def test_node_count_of_empty_hierarchy():
    assert Hierarchy.node_count(_TreeHierarchy()) == 0


def test_levels():
    h, root, one, two = _make_tree()
    six = h.access_son(two, 0)
    assert Hierarchy.level(h, root) == 0
    assert Hierarchy.level(h, one) == 1
    assert Hierarchy.level(h, six) == 2


def test_root_leaf_and_son_predicates():
    h, root, one, two = _make_tree()
    assert Hierarchy.is_root(h, root) is True
    assert Hierarchy.is_root(h, one) is False
    assert Hierarchy.is_leaf(h, h.access_son(one, 2)) is True
    assert Hierarchy.is_leaf(h, one) is False
    assert Hierarchy.is_nth_son(h, two, 1) is True
    assert Hierarchy.is_nth_son(h, two, 0) is False
    assert Hierarchy.is_nth_son(h, root, 0) is False
    assert Hierarchy.has_nth_son(h, two, 0) is True
    assert Hierarchy.has_nth_son(h, two, 1) is False


def test_process_post_order_visits_sons_before_parents():
    h, root, one, two = _make_tree()
    visited = []
    Hierarchy.process_post_order(h, root, lambda node: visited.append(node.data))
    assert visited == [3, 4, 5, 1, 6, 2, 0]


def test_process_post_order_of_subtree_and_none():
    h, root, one, two = _make_tree()
    visited = []
    Hierarchy.process_post_order(h, one, lambda node: visited.append(node.data))
    Hierarchy.process_post_order(h, None, lambda node: visited.append(node.data))
    assert visited == [3, 4, 5, 1]


def test_binary_hierarchy_son_positions():
    h = _BinaryTree()
    root = h.emplace_root()
    left = h.emplace_son(root, BinaryHierarchy.LEFT_SON_INDEX)
    right = h.emplace_son(root, BinaryHierarchy.RIGHT_SON_INDEX)
    assert BinaryHierarchy.is_nth_son(h, left, BinaryHierarchy.LEFT_SON_INDEX) is True
    assert BinaryHierarchy.is_nth_son(h, right, BinaryHierarchy.RIGHT_SON_INDEX) is True
    assert BinaryHierarchy.is_nth_son(h, left, BinaryHierarchy.RIGHT_SON_INDEX) is False


def test_unavailable_function_call_is_runtime_error():
    message = "Method emplace_root() unavailable in implicit hierarchies!"
    error = UnavailableFunctionCall(message)
    assert str(error) == message
    assert issubclass(UnavailableFunctionCall, RuntimeError)
    with pytest.raises(RuntimeError, match="unavailable"):
        raise error