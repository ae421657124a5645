"""A binary search tree that ignores duplicate values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class TreeNode:
    """A node of a binary search tree."""

    value: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    def insert(self, value: Any) -> None:
        """Insert ``value`` into the subtree; duplicates are ignored."""
        node = self
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value)
                    return
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = TreeNode(value)
                    return
                node = node.right
            else:
                return

    def search(self, value: Any) -> bool:
        """Return True if ``value`` is in the subtree."""
        node: Optional[TreeNode] = self
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False


class BinarySearchTree:
    """A binary search tree holding distinct values."""

    def __init__(self) -> None:
        self.root: Optional[TreeNode] = None

    def insert(self, value: Any) -> None:
        if self.root is None:
            self.root = TreeNode(value)
        else:
            self.root.insert(value)

    def search(self, value: Any) -> bool:
        return self.root is not None and self.root.search(value)

    def __contains__(self, value: Any) -> bool:
        return self.search(value)