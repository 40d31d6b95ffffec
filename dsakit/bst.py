"""Binary search trees: insertion, height, levels, ceil and floor, LCA and pair sums."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from dsakit.binary_tree import TreeNode, inorder


def insert(root: TreeNode | None, value: int) -> TreeNode:
    """Insert ``value``, sending equal values to the left; return the root."""
    node = TreeNode(value)
    if root is None:
        return node
    current = root
    while True:
        if value <= current.data:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def from_values(values: Iterable[int]) -> TreeNode | None:
    """Build a search tree by inserting ``values`` in order."""
    root: TreeNode | None = None
    for value in values:
        root = insert(root, value)
    return root


def height(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def levels(root: TreeNode | None) -> list[list[int]]:
    """Return the values level by level, each level left to right."""
    result: list[list[int]] = []
    queue = deque([root] if root is not None else [])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.data)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        result.append(level)
    return result


def is_balanced_at_root(root: TreeNode | None) -> bool:
    """Tell whether the root's two subtrees differ in height by at most one."""
    if root is None:
        return True
    return abs(height(root.left) - height(root.right)) <= 1


def find_ceil(root: TreeNode | None, key: int) -> int | None:
    """Return the smallest value not below ``key``, or None if there is none."""
    ceil = None
    node = root
    while node is not None:
        if node.data == key:
            return key
        if node.data < key:
            node = node.right
        else:
            ceil = node.data
            node = node.left
    return ceil


def find_floor(root: TreeNode | None, key: int) -> int | None:
    """Return the largest value not above ``key``, or None if there is none."""
    floor = None
    node = root
    while node is not None:
        if node.data == key:
            return key
        if node.data < key:
            floor = node.data
            node = node.right
        else:
            node = node.left
    return floor


def lowest_common_ancestor(
    root: TreeNode | None, first: int, second: int
) -> TreeNode | None:
    """Return the deepest node whose subtree spans both values, or None for an empty tree."""
    node = root
    while node is not None:
        if node.data > first and node.data > second:
            node = node.left
        elif node.data < first and node.data < second:
            node = node.right
        else:
            return node
    return None


def has_pair_with_sum(root: TreeNode | None, target: int) -> bool:
    """Tell whether two distinct nodes hold values adding up to ``target``."""
    if root is None or (root.left is None and root.right is None):
        return False
    values = inorder(root)
    low, high = 0, len(values) - 1
    while low < high:
        total = values[low] + values[high]
        if total > target:
            high -= 1
        elif total < target:
            low += 1
        else:
            return True
    return False