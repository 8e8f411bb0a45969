"""Unbalanced binary search tree keyed by integers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class TreeNode:
    """A node holding an item under an integer key."""

    item: Any
    key: int
    left: TreeNode | None = None
    right: TreeNode | None = None


class BinaryTree:
    """Binary search tree; equal keys go to the right."""

    def __init__(self) -> None:
        self.root: TreeNode | None = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def add(self, item: Any, key: int) -> None:
        """Insert ``item`` under ``key``."""
        node = TreeNode(item, key)
        self._count += 1
        if self.root is None:
            self.root = node
            return
        parent = self.root
        while True:
            if key < parent.key:
                if parent.left is None:
                    parent.left = node
                    return
                parent = parent.left
            else:
                if parent.right is None:
                    parent.right = node
                    return
                parent = parent.right

    def delete(self, key: int) -> None:
        """Remove one node with ``key``; raise KeyError if there is none."""
        self.root = self._remove(self.root, key)
        self._count -= 1

    def _remove(self, node: TreeNode | None, key: int) -> TreeNode | None:
        if node is None:
            raise KeyError(key)
        if key < node.key:
            node.left = self._remove(node.left, key)
            return node
        if key > node.key:
            node.right = self._remove(node.right, key)
            return node
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        parent, successor = node, node.right
        while successor.left is not None:
            parent, successor = successor, successor.left
        if parent is not node:
            parent.left = successor.right
            successor.right = node.right
        successor.left = node.left
        return successor

    def inorder(self) -> Iterator[tuple[Any, int]]:
        """Yield ``(item, key)`` pairs in key order."""
        yield from self._inorder(self.root)

    def preorder(self) -> Iterator[tuple[Any, int]]:
        """Yield ``(item, key)`` pairs, each node before its children."""
        yield from self._preorder(self.root)

    def postorder(self) -> Iterator[tuple[Any, int]]:
        """Yield ``(item, key)`` pairs, each node after its children."""
        yield from self._postorder(self.root)

    def _inorder(self, node: TreeNode | None) -> Iterator[tuple[Any, int]]:
        if node is not None:
            yield from self._inorder(node.left)
            yield node.item, node.key
            yield from self._inorder(node.right)

    def _preorder(self, node: TreeNode | None) -> Iterator[tuple[Any, int]]:
        if node is not None:
            yield node.item, node.key
            yield from self._preorder(node.left)
            yield from self._preorder(node.right)

    def _postorder(self, node: TreeNode | None) -> Iterator[tuple[Any, int]]:
        if node is not None:
            yield from self._postorder(node.left)
            yield from self._postorder(node.right)
            yield node.item, node.key

    def is_valid(self) -> bool:
        """Return True if every key lies on the correct side of its ancestors."""
        pending: list[tuple[TreeNode | None, float, float]] = [(self.root, float("-inf"), float("inf"))]
        while pending:
            node, low, high = pending.pop()
            if node is None:
                continue
            if not low <= node.key < high:
                return False
            pending.append((node.left, low, node.key))
            pending.append((node.right, node.key, high))
        return True


class AVLTree(BinaryTree):
    """Search tree that shares the plain binary tree's insertion and deletion."""