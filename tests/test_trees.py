import pytest

from exercisekit.trees import TreeNode, are_mirror, build_tree, postorder


def _inorder(node):
    if node is None:
        return []
    return _inorder(node.left) + [node.data] + _inorder(node.right)


def _preorder(node):
    if node is None:
        return []
    return [node.data] + _preorder(node.left) + _preorder(node.right)


INORDER = ["D", "B", "E", "A", "F", "C"]
PREORDER = ["A", "B", "D", "E", "C", "F"]


def test_build_tree_example_postorder():
    root = build_tree(INORDER, PREORDER)
    assert postorder(root) == ["D", "E", "B", "F", "C", "A"]


def test_build_tree_round_trip():
    root = build_tree(INORDER, PREORDER)
    assert _inorder(root) == INORDER
    assert _preorder(root) == PREORDER


@pytest.mark.parametrize(
    "inorder, preorder",
    [
        ([1, 2, 3, 4, 5], [1, 2, 3, 4, 5]),
        ([5, 4, 3, 2, 1], [1, 2, 3, 4, 5]),
        ([4, 2, 5, 1, 6, 3, 7], [1, 2, 4, 5, 3, 6, 7]),
    ],
)
def test_build_tree_round_trip_shapes(inorder, preorder):
    root = build_tree(inorder, preorder)
    assert _inorder(root) == inorder
    assert _preorder(root) == preorder


def test_build_tree_empty():
    assert build_tree([], []) is None
    assert postorder(None) == []


def test_build_tree_rejects_mismatched_values():
    with pytest.raises(ValueError):
        build_tree(["A", "B"], ["A", "C"])
    with pytest.raises(ValueError):
        build_tree(["A"], ["A", "B"])


def test_build_tree_rejects_duplicates():
    with pytest.raises(ValueError):
        build_tree(["A", "A"], ["A", "A"])


def _example_pair():
    a = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3))
    b = TreeNode(1, TreeNode(3), TreeNode(2, TreeNode(5), TreeNode(4)))
    return a, b


def test_are_mirror_example():
    a, b = _example_pair()
    assert are_mirror(a, b)
    assert are_mirror(b, a)


def test_are_mirror_rejects_same_tree():
    a, _ = _example_pair()
    assert not are_mirror(a, a)


def test_are_mirror_empty_cases():
    assert are_mirror(None, None)
    assert not are_mirror(TreeNode(1), None)
    assert not are_mirror(None, TreeNode(1))


def test_are_mirror_checks_data():
    assert not are_mirror(TreeNode(1), TreeNode(2))