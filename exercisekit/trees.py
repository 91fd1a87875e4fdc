"""Binary trees: rebuilding from traversals, postorder listing and mirror checks."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any, Iterable, Optional


@dataclass
class TreeNode:
    data: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(inorder: Iterable[Any], preorder: Iterable[Any]) -> Optional[TreeNode]:
    """Rebuild a tree of distinct values from its inorder and preorder traversals."""
    in_list = list(inorder)
    pre_list = list(preorder)
    if Counter(in_list) != Counter(pre_list):
        raise ValueError("traversals do not hold the same values")
    positions = {value: i for i, value in enumerate(in_list)}
    if len(positions) != len(in_list):
        raise ValueError("tree values must be distinct")
    upcoming = iter(pre_list)

    def build(low: int, high: int) -> Optional[TreeNode]:
        if low > high:
            return None
        value = next(upcoming)
        middle = positions[value]
        if not low <= middle <= high:
            raise ValueError("traversals are inconsistent")
        node = TreeNode(value)
        node.left = build(low, middle - 1)
        node.right = build(middle + 1, high)
        return node

    return build(0, len(in_list) - 1)


def postorder(node: Optional[TreeNode]) -> list[Any]:
    """Values in left, right, root order."""
    if node is None:
        return []
    return postorder(node.left) + postorder(node.right) + [node.data]


def are_mirror(a: Optional[TreeNode], b: Optional[TreeNode]) -> bool:
    """True if ``b`` is the mirror image of ``a``."""
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return a.data == b.data and are_mirror(a.left, b.right) and are_mirror(a.right, b.left)