"""Plain binary tree with depth-first and breadth-first traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Node:
    """A binary tree node."""

    value: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    def add(self, value: int, right: bool = False) -> "Node":
        """Attach a new child on the left (or right) and return it."""
        child = Node(value)
        if right:
            self.right = child
        else:
            self.left = child
        return child


def preorder(root: Optional[Node]) -> list[int]:
    """Values in root, left, right order."""
    if root is None:
        return []
    return [root.value, *preorder(root.left), *preorder(root.right)]


def inorder(root: Optional[Node]) -> list[int]:
    """Values in left, root, right order."""
    if root is None:
        return []
    return [*inorder(root.left), root.value, *inorder(root.right)]


def postorder(root: Optional[Node]) -> list[int]:
    """Values in left, right, root order."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.value]


def breadth_first(root: Optional[Node]) -> list[int]:
    """Values level by level, left to right."""
    result: list[int] = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        result.append(node.value)
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return result


def depth_first(root: Optional[Node]) -> list[int]:
    """Values in depth-first order using an explicit stack."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def demo_tree() -> Node:
    """Build the ten-node sample tree."""
    root = Node(1)
    two = root.add(2)
    three = two.add(3)
    four = three.add(4)
    four.add(5)
    six = two.add(6, right=True)
    seven = six.add(7)
    seven.add(8)
    six.add(9, right=True)
    root.add(10, right=True)
    return root