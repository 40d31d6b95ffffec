"""Binary trees: building, traversal, comparison, path sums and list conversion."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; after list conversion ``left``/``right`` act as prev/next."""

    data: int
    left: TreeNode | None = None
    right: TreeNode | None = None

    def __repr__(self) -> str:
        return f"TreeNode({self.data})"


def _attach_level_order(root: TreeNode, children: Iterator[int | None]) -> TreeNode:
    """Give nodes children in breadth-first order; None leaves a slot empty."""
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            try:
                value = next(children)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                queue.append(child)
    return root


def build_tree(text: str) -> TreeNode | None:
    """Build a tree from space-separated level-order values, ``N`` marking a gap."""
    tokens = text.split()
    if not tokens or tokens[0] == "N":
        return None
    children = (None if token == "N" else int(token) for token in tokens[1:])
    return _attach_level_order(TreeNode(int(tokens[0])), children)


def build_level_order(values: Sequence[int], missing: int = -1) -> TreeNode | None:
    """Build a tree from level-order values, ``missing`` marking an absent child.

    The first value always becomes the root.
    """
    if not values:
        return None
    children = (None if value == missing else value for value in values[1:])
    return _attach_level_order(TreeNode(values[0]), children)


def _inorder_nodes(root: TreeNode | None) -> Iterator[TreeNode]:
    pending: list[TreeNode] = []
    current = root
    while pending or current is not None:
        while current is not None:
            pending.append(current)
            current = current.left
        node = pending.pop()
        yield node
        current = node.right


def to_doubly_linked_list(root: TreeNode | None) -> TreeNode | None:
    """Relink the tree in place into an in-order doubly linked list; return its head."""
    head: TreeNode | None = None
    previous: TreeNode | None = None
    for node in _inorder_nodes(root):
        if previous is None:
            head = node
        else:
            node.left = previous
            previous.right = node
        previous = node
    return head


def iter_doubly_linked(head: TreeNode | None) -> Iterator[int]:
    """Yield the values of a doubly linked list by following ``right``."""
    node = head
    while node is not None:
        yield node.data
        node = node.right


def is_same_tree(first: TreeNode | None, second: TreeNode | None) -> bool:
    """Tell whether two trees have the same shape and values."""
    pending = [(first, second)]
    while pending:
        a, b = pending.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.data != b.data:
            return False
        pending.append((a.left, b.left))
        pending.append((a.right, b.right))
    return True


def insert_skipping_zeros(root: TreeNode | None, value: int) -> TreeNode:
    """Insert at the first free slot in level order, not descending below 0 nodes."""
    if root is None:
        return TreeNode(value)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node.left is None:
            node.left = TreeNode(value)
            return root
        if node.left.data != 0:
            queue.append(node.left)
        if node.right is None:
            node.right = TreeNode(value)
            return root
        if node.right.data != 0:
            queue.append(node.right)
    return root


def prune_zero_nodes(root: TreeNode | None) -> TreeNode | None:
    """Cut away every child whose value is 0, with its subtree; return the root."""
    if root is None:
        return None
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node.left is not None:
            if node.left.data == 0:
                node.left = None
            else:
                queue.append(node.left)
        if node.right is not None:
            if node.right.data == 0:
                node.right = None
            else:
                queue.append(node.right)
    return root


def tree_from_values(values: Iterable[int]) -> TreeNode | None:
    """Build a tree where 0 stands for an empty slot in level order."""
    root: TreeNode | None = None
    for value in values:
        root = insert_skipping_zeros(root, value)
    return prune_zero_nodes(root)


def insert_complete(root: TreeNode | None, value: int) -> TreeNode:
    """Insert at the first free slot in level order, keeping the tree complete."""
    node = TreeNode(value)
    if root is None:
        return node
    queue = deque([root])
    while queue:
        current = queue.popleft()
        if current.left is None:
            current.left = node
            return root
        if current.right is None:
            current.right = node
            return root
        queue.append(current.left)
        queue.append(current.right)
    return root


def preorder(root: TreeNode | None) -> list[int]:
    """Return values in root, left, right order."""
    result: list[int] = []
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        result.append(node.data)
        if node.right is not None:
            pending.append(node.right)
        if node.left is not None:
            pending.append(node.left)
    return result


def inorder(root: TreeNode | None) -> list[int]:
    """Return values in left, root, right order."""
    return [node.data for node in _inorder_nodes(root)]


def postorder(root: TreeNode | None) -> list[int]:
    """Return values in left, right, root order."""
    result: list[int] = []
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        result.append(node.data)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    result.reverse()
    return result


def level_order(root: TreeNode | None) -> list[int]:
    """Return values breadth first, left to right."""
    result: list[int] = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        result.append(node.data)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return result


def has_duplicate_values(root: TreeNode | None) -> bool:
    """Tell whether any value occurs more than once in the tree."""
    seen: set[int] = set()
    for value in preorder(root):
        if value in seen:
            return True
        seen.add(value)
    return False


def max_path_sum(root: TreeNode | None) -> int:
    """Return the largest sum along any path between two nodes."""
    if root is None:
        raise ValueError("an empty tree has no paths")
    best = root.data

    def gain(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        best = max(best, left + right + node.data)
        return max(left, right) + node.data

    gain(root)
    return best


def _check_orders(order: Sequence[int], inorder_values: Sequence[int]) -> dict[int, int]:
    if sorted(order) != sorted(inorder_values):
        raise ValueError("traversals do not hold the same values")
    return {value: index for index, value in enumerate(inorder_values)}


def tree_from_preorder_inorder(
    preorder: Sequence[int], inorder: Sequence[int]
) -> TreeNode | None:
    """Rebuild a tree from its preorder and inorder traversals."""
    position = _check_orders(preorder, inorder)

    def build(pre_start: int, pre_end: int, in_start: int, in_end: int) -> TreeNode | None:
        if pre_start > pre_end or in_start > in_end:
            return None
        node = TreeNode(preorder[pre_start])
        split = position[node.data]
        count = split - in_start
        node.left = build(pre_start + 1, pre_start + count, in_start, split - 1)
        node.right = build(pre_start + count + 1, pre_end, split + 1, in_end)
        return node

    return build(0, len(preorder) - 1, 0, len(inorder) - 1)


def tree_from_postorder_inorder(
    postorder: Sequence[int], inorder: Sequence[int]
) -> TreeNode | None:
    """Rebuild a tree from its postorder and inorder traversals."""
    position = _check_orders(postorder, inorder)

    def build(post_start: int, post_end: int, in_start: int, in_end: int) -> TreeNode | None:
        if post_start > post_end or in_start > in_end:
            return None
        node = TreeNode(postorder[post_end])
        split = position[node.data]
        count = split - in_start
        node.left = build(post_start, post_start + count - 1, in_start, split - 1)
        node.right = build(post_start + count, post_end - 1, split + 1, in_end)
        return node

    return build(0, len(postorder) - 1, 0, len(inorder) - 1)