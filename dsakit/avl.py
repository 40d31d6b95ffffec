"""AVL trees: height-balanced insertion with rotations, and deletion."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class AvlNode:
    """A node of an AVL tree, storing the height of its subtree."""

    data: int
    left: AvlNode | None = None
    right: AvlNode | None = None
    height: int = 1

    def __repr__(self) -> str:
        return f"AvlNode({self.data})"


def height(node: AvlNode | None) -> int:
    """Return the stored height of ``node``, 0 for an empty tree."""
    return 0 if node is None else node.height


def balance_factor(node: AvlNode | None) -> int:
    """Return left height minus right height, 0 for an empty tree."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def _update_height(node: AvlNode) -> None:
    node.height = max(height(node.left), height(node.right)) + 1


def rotate_left(node: AvlNode) -> AvlNode:
    """Rotate ``node`` to the left and return the new subtree root."""
    pivot = node.right
    if pivot is None:
        raise ValueError("cannot rotate left without a right child")
    node.right = pivot.left
    pivot.left = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def rotate_right(node: AvlNode) -> AvlNode:
    """Rotate ``node`` to the right and return the new subtree root."""
    pivot = node.left
    if pivot is None:
        raise ValueError("cannot rotate right without a left child")
    node.left = pivot.right
    pivot.right = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def insert(root: AvlNode | None, value: int) -> AvlNode:
    """Insert ``value`` and rebalance; a value already present is ignored."""
    if root is None:
        return AvlNode(value)
    if value < root.data:
        root.left = insert(root.left, value)
    elif value > root.data:
        root.right = insert(root.right, value)
    _update_height(root)
    balance = balance_factor(root)
    if balance > 1 and value < root.left.data:
        return rotate_right(root)
    if balance < -1 and value > root.right.data:
        return rotate_left(root)
    if balance > 1 and value > root.left.data:
        root.left = rotate_left(root.left)
        return rotate_right(root)
    if balance < -1 and value < root.right.data:
        root.right = rotate_right(root.right)
        return rotate_left(root)
    return root


def min_node(root: AvlNode | None) -> AvlNode | None:
    """Return the leftmost node, or None for an empty tree."""
    node = root
    while node is not None and node.left is not None:
        node = node.left
    return node


def delete(root: AvlNode | None, value: int) -> AvlNode | None:
    """Remove ``value`` as in a plain search tree and return the new root.

    A node with two children takes its in-order successor's value. No
    rebalancing is done; removing an absent value changes nothing.
    """
    if root is None:
        return None
    if value < root.data:
        root.left = delete(root.left, value)
    elif value > root.data:
        root.right = delete(root.right, value)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = min_node(root.right)
        root.data = successor.data
        root.right = delete(root.right, successor.data)
    return root


def inorder(root: AvlNode | None) -> list[int]:
    """Return the values in ascending order."""
    result: list[int] = []
    pending: list[AvlNode] = []
    node = root
    while pending or node is not None:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        result.append(node.data)
        node = node.right
    return result