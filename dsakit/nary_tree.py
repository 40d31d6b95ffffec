"""Generic trees with any number of children: level-wise input and maximum search."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class NaryNode:
    """A tree node holding a value and an ordered list of children."""

    data: int
    children: list[NaryNode] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"NaryNode({self.data})"


def max_data_node(root: NaryNode | None) -> NaryNode:
    """Return the node with the largest value, the first one met breadth first on ties."""
    if root is None:
        raise ValueError("an empty tree has no largest node")
    best = root
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node.data > best.data:
            best = node
        queue.extend(node.children)
    return best


def _next_int(tokens: Iterator[int | str], what: str) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError(f"input ended while reading {what}") from None


def read_level_wise(tokens: Iterable[int | str]) -> NaryNode:
    """Build a tree from level-wise tokens.

    The first token is the root's value; then, for each node in breadth-first
    order, a child count followed by that many child values.
    """
    stream = iter(tokens)
    root = NaryNode(_next_int(stream, "the root value"))
    queue = deque([root])
    while queue:
        node = queue.popleft()
        count = _next_int(stream, f"the child count of {node.data}")
        if count < 0:
            raise ValueError(f"negative child count for {node.data}")
        for _ in range(count):
            child = NaryNode(_next_int(stream, f"a child of {node.data}"))
            node.children.append(child)
            queue.append(child)
    return root