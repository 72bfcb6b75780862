"""Binary search tree with deletion, traversals and rebalancing."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """A single node of a binary search tree."""

    value: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


class EmptyTreeError(Exception):
    """Raised when an operation needs a tree that still has nodes."""

    def __init__(self, message: str = "tree was destroyed") -> None:
        super().__init__(message)


class BinarySearchTree:
    """A binary search tree; equal values go to the right subtree."""

    def __init__(self, root_value: int) -> None:
        self.root: Optional[TreeNode] = TreeNode(root_value)

    def insert(self, value: int) -> None:
        """Insert a value, placing duplicates to the right."""
        if self.root is None:
            raise EmptyTreeError()
        node = self.root
        while True:
            if value >= node.value:
                if node.right is None:
                    node.right = TreeNode(value)
                    return
                node = node.right
            else:
                if node.left is None:
                    node.left = TreeNode(value)
                    return
                node = node.left

    def delete(self, value: int) -> None:
        """Remove the first node holding ``value`` found from the root.

        A node with two children is replaced by its right subtree, and its
        left subtree is hung under the leftmost node of that right subtree.
        """
        if self.root is None:
            raise EmptyTreeError()
        parent: Optional[TreeNode] = None
        node = self.root
        while node is not None and node.value != value:
            parent = node
            node = node.right if value >= node.value else node.left
        if node is None:
            raise KeyError(value)

        if node.left is None or node.right is None:
            replacement = node.right if node.right is not None else node.left
        else:
            leftmost = node.right
            while leftmost.left is not None:
                leftmost = leftmost.left
            leftmost.left = node.left
            replacement = node.right

        if parent is None:
            self.root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement

    def contains(self, value: int) -> bool:
        """Return whether ``value`` is stored in the tree."""
        node = self.root
        while node is not None:
            if node.value == value:
                return True
            node = node.right if node.value < value else node.left
        return False

    def inorder(self) -> list[int]:
        """Values in left, root, right order."""
        result: list[int] = []
        stack: list[TreeNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def preorder(self) -> list[int]:
        """Values in root, left, right order."""
        result: list[int] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def postorder(self) -> list[int]:
        """Values in left, right, root order."""
        result: list[int] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def morris_inorder(self) -> list[int]:
        """In-order values using threaded links instead of a stack.

        The temporary links are removed as the walk proceeds, so the tree
        is unchanged afterwards.
        """
        result: list[int] = []
        current = self.root
        while current is not None:
            if current.left is None:
                result.append(current.value)
                current = current.right
                continue
            predecessor = current.left
            while predecessor.right is not None and predecessor.right is not current:
                predecessor = predecessor.right
            if predecessor.right is None:
                predecessor.right = current
                current = current.left
            else:
                predecessor.right = None
                result.append(current.value)
                current = current.right
        return result

    def count(self) -> int:
        """Number of nodes in the tree."""
        return len(self.preorder())

    def height(self) -> int:
        """Number of levels in the tree; zero when empty."""
        levels = 0
        frontier = deque([self.root] if self.root is not None else [])
        while frontier:
            levels += 1
            for _ in range(len(frontier)):
                node = frontier.popleft()
                if node.left is not None:
                    frontier.append(node.left)
                if node.right is not None:
                    frontier.append(node.right)
        return levels

    def balance(self) -> None:
        """Rebuild the tree so that it is height balanced."""
        values = self.inorder()

        def build(lo: int, hi: int) -> Optional[TreeNode]:
            if lo > hi:
                return None
            mid = (lo + hi) // 2
            return TreeNode(values[mid], build(lo, mid - 1), build(mid + 1, hi))

        self.root = build(0, len(values) - 1)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.contains(value)

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[int]:
        return iter(self.inorder())