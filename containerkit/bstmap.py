"""A key-value map backed by an unbalanced binary search tree."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Optional, TextIO, TypeVar

K = TypeVar("K")
V = TypeVar("V")

CompareFunc = Callable[[Any, Any], int]


class MapError(Exception):
    """Base error for map operations."""


class KeyNotFoundError(MapError, LookupError):
    """Raised when a key is not present in the map."""

    def __init__(self, message: str = "key not found") -> None:
        super().__init__(message)


class CompareNotProvidedError(MapError):
    """Raised when the map has no comparison function."""

    def __init__(self, message: str = "comparison function not provided") -> None:
        super().__init__(message)


class Map(ABC, Generic[K, V]):
    """Interface shared by the key-value maps."""

    @abstractmethod
    def put(self, key: K, value: V) -> None:
        """Store value under key, replacing any previous value."""

    @abstractmethod
    def get(self, key: K) -> V:
        """Return the value stored under key."""

    @abstractmethod
    def delete(self, key: K) -> None:
        """Remove key and its value."""

    @abstractmethod
    def size(self) -> int:
        """Return the number of stored keys."""


@dataclass(eq=False)
class _Node(Generic[K, V]):
    key: K
    value: V
    parent: Optional[_Node[K, V]] = None
    left: Optional[_Node[K, V]] = field(default=None, repr=False)
    right: Optional[_Node[K, V]] = field(default=None, repr=False)


class BSTMap(Map[K, V]):
    """Map ordered by a three-way comparison function.

    ``compare(a, b)`` must return a negative number, zero or a positive
    number when ``a`` is less than, equal to or greater than ``b``.
    """

    def __init__(self, compare: Optional[CompareFunc] = None) -> None:
        self._compare = compare
        self._root: Optional[_Node[K, V]] = None
        self._size = 0

    def _require_compare(self) -> CompareFunc:
        if self._compare is None:
            raise CompareNotProvidedError()
        return self._compare

    def _get_node(self, key: K) -> _Node[K, V]:
        compare = self._require_compare()
        current = self._root
        while current is not None:
            cmp = compare(key, current.key)
            if cmp < 0:
                current = current.left
            elif cmp > 0:
                current = current.right
            else:
                return current
        raise KeyNotFoundError()

    def put(self, key: K, value: V) -> None:
        compare = self._require_compare()
        if self._root is None:
            self._root = _Node(key, value)
            self._size += 1
            return

        current: Optional[_Node[K, V]] = self._root
        parent = self._root
        while current is not None:
            parent = current
            cmp = compare(key, current.key)
            if cmp < 0:
                current = current.left
            elif cmp > 0:
                current = current.right
            else:
                current.value = value
                return

        new_node = _Node(key, value, parent=parent)
        if compare(key, parent.key) < 0:
            parent.left = new_node
        else:
            parent.right = new_node
        self._size += 1

    def get(self, key: K) -> V:
        return self._get_node(key).value

    def _replace_in_parent(
        self, node: _Node[K, V], replacement: Optional[_Node[K, V]]
    ) -> None:
        parent = node.parent
        if parent is None:
            self._root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement

    def delete(self, key: K) -> None:
        node = self._get_node(key)
        self._size -= 1

        if node.left is None and node.right is None:
            self._replace_in_parent(node, None)
            return

        if node.left is None or node.right is None:
            child = node.left if node.left is not None else node.right
            child.parent = node.parent
            self._replace_in_parent(node, child)
            return

        # Two children: the in-order predecessor takes the node's place.
        predecessor = node.left
        while predecessor.right is not None:
            predecessor = predecessor.right

        if predecessor.parent is not node:
            predecessor.parent.right = predecessor.left
            if predecessor.left is not None:
                predecessor.left.parent = predecessor.parent
            predecessor.left = node.left
            predecessor.left.parent = predecessor

        predecessor.right = node.right
        predecessor.right.parent = predecessor

        predecessor.parent = node.parent
        self._replace_in_parent(node, predecessor)

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def print_levels(self, file: Optional[TextIO] = None) -> None:
        """Write the tree level by level; missing children show as ``nil``."""
        out = file if file is not None else sys.stdout
        if self._root is None:
            print("(empty tree)", file=out)
            return

        levels: list[list[Optional[K]]] = []
        queue: deque[tuple[Optional[_Node[K, V]], int]] = deque([(self._root, 0)])
        absent = object()
        while queue:
            node, level = queue.popleft()
            if len(levels) <= level:
                levels.append([])
            if node is not None:
                levels[level].append(node.key)
                queue.append((node.left, level + 1))
                queue.append((node.right, level + 1))
            else:
                levels[level].append(absent)

        print(f"Tree (size: {self._size}):", file=out)
        for index, level in enumerate(levels):
            cells = "".join(
                f"{'nil' if key is absent else str(key):>5} " for key in level
            )
            print(f"Level {index}: {cells}", file=out)

    def ascii_print(self, file: Optional[TextIO] = None) -> None:
        """Write the tree sideways: right subtree above, left subtree below."""
        out = file if file is not None else sys.stdout
        if self._root is None:
            print("(empty tree)", file=out)
            return
        print(f"ASCII Print Tree with size: {self._size}:", file=out)
        self._print_node(self._root, 0, out)

    def _print_node(self, node: Optional[_Node[K, V]], depth: int, out: TextIO) -> None:
        if node is None:
            return
        self._print_node(node.right, depth + 1, out)
        print(f"{'    ' * depth}{node.key}", file=out)
        self._print_node(node.left, depth + 1, out)

    def get_right(self, key: K) -> tuple[K, V]:
        """Return the key and value of the right child of key's node."""
        node = self._get_node(key)
        if node.right is None:
            raise MapError("right child not found")
        return node.right.key, node.right.value

    def get_left(self, key: K) -> tuple[K, V]:
        """Return the key and value of the left child of key's node."""
        node = self._get_node(key)
        if node.left is None:
            raise MapError("left child not found")
        return node.left.key, node.left.value

    def get_parent(self, key: K) -> tuple[K, V]:
        """Return the key and value of the parent of key's node."""
        node = self._get_node(key)
        if node.parent is None:
            raise MapError("root has no parent")
        return node.parent.key, node.parent.value

    def get_depth(self, key: K) -> int:
        """Return the number of edges from the root to key's node."""
        node = self._get_node(key)
        depth = 0
        while node.parent is not None:
            depth += 1
            node = node.parent
        return depth


def new_bst_map(compare: CompareFunc) -> BSTMap:
    """Create an empty BSTMap ordered by compare."""
    return BSTMap(compare)