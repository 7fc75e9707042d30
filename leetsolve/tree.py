"""Binary tree node and algorithms over binary trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _inorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.val
    yield from _inorder(node.right)


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the values of the tree in in-order sequence."""
    return list(_inorder(root))


def _mirrors(a: Optional[TreeNode], b: Optional[TreeNode]) -> bool:
    if a is None or b is None:
        return a is None and b is None
    return a.val == b.val and _mirrors(a.left, b.right) and _mirrors(a.right, b.left)


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Tell whether the tree is a mirror image of itself."""
    if root is None:
        return True
    return _mirrors(root.left, root.right)


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def sorted_array_to_bst(nums: list[int]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from a sorted sequence."""
    if not nums:
        return None
    if len(nums) == 1:
        return TreeNode(nums[0])
    if len(nums) == 2:
        return TreeNode(nums[0], right=TreeNode(nums[1]))
    middle = len(nums) // 2
    return TreeNode(
        nums[middle],
        left=sorted_array_to_bst(nums[:middle]),
        right=sorted_array_to_bst(nums[middle + 1 :]),
    )


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """Return the rightmost value at each level, top to bottom."""
    if root is None:
        return []
    left = right_side_view(root.left)
    right = right_side_view(root.right)
    return [root.val, *right, *left[len(right) :]]


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return a new tree that mirrors the given one."""
    if root is None:
        return None
    return TreeNode(
        root.val,
        left=invert_tree(root.right),
        right=invert_tree(root.left),
    )