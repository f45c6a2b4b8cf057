"""Binary and n-ary tree helpers: traversal, path sums, comparison and lookup."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass
class BinaryNode:
    """A binary tree node holding an integer."""

    data: int
    left: Optional[BinaryNode] = None
    right: Optional[BinaryNode] = None


@dataclass
class TreeNode:
    """A node of a tree whose nodes may have any number of children."""

    data: int
    children: list[TreeNode] = field(default_factory=list)


def height(root: Optional[BinaryNode]) -> int:
    """Number of nodes on the longest path from the root down to a leaf."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def _level_values(root: Optional[BinaryNode], level: int) -> Iterator[int]:
    if root is None:
        return
    if level == 1:
        yield root.data
    elif level > 1:
        yield from _level_values(root.left, level - 1)
        yield from _level_values(root.right, level - 1)


def current_level(root: Optional[BinaryNode], level: int) -> list[int]:
    """Values of the nodes at the given level (the root is level 1), left to right."""
    return list(_level_values(root, level))


def level_order(root: Optional[BinaryNode]) -> list[int]:
    """Values of all nodes, level by level, each level left to right."""
    return [
        value
        for level in range(1, height(root) + 1)
        for value in _level_values(root, level)
    ]


def _path_sums(node: Optional[BinaryNode], total: int) -> Iterator[int]:
    if node is None:
        return
    total += node.data
    if node.left is None and node.right is None:
        yield total
        return
    yield from _path_sums(node.left, total)
    yield from _path_sums(node.right, total)


def path_sums(root: Optional[BinaryNode]) -> list[int]:
    """Sum of every root-to-leaf path, leaves taken from left to right."""
    return list(_path_sums(root, 0))


def are_identical(root1: Optional[TreeNode], root2: Optional[TreeNode]) -> bool:
    """Loose tree match.

    Two roots with equal data match at once. Otherwise the trees match only
    when both roots have the same, non-zero number of children and their
    first children match by the same rule. Missing trees never match.
    """
    if root1 is None or root2 is None:
        return False
    if root1.data == root2.data:
        return True
    if len(root1.children) == len(root2.children) and root1.children:
        return are_identical(root1.children[0], root2.children[0])
    return False


def read_tree_level_wise(tokens: Union[str, Iterable[Union[int, str]]]) -> TreeNode:
    """Build a tree from level-wise input.

    The input is the root's value, then for each node in breadth-first order
    the number of its children followed by their values. A string is split
    on whitespace.
    """
    if isinstance(tokens, str):
        tokens = tokens.split()
    stream = (int(token) for token in tokens)

    def take() -> int:
        try:
            return next(stream)
        except StopIteration:
            raise ValueError("tree input ended early") from None

    root = TreeNode(take())
    pending = deque([root])
    while pending:
        front = pending.popleft()
        for _ in range(take()):
            child = TreeNode(take())
            front.children.append(child)
            pending.append(child)
    return root


def find(root: Optional[BinaryNode], key: int) -> Optional[BinaryNode]:
    """Breadth-first search for the first node holding ``key``; None if absent."""
    if root is None:
        return None
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node.data == key:
            return node
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return None