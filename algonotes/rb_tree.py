"""Red-black tree holding a set of ordered values."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class Color(IntEnum):
    """Node colour."""

    BLACK = 0
    RED = 1


@dataclass(eq=False)
class _Node:
    data: Any
    color: Color = Color.RED
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    parent: Optional["_Node"] = None


def _color(node: Optional[_Node]) -> Color:
    return Color.BLACK if node is None else node.color


class RBTree(Generic[T]):
    """Balanced binary search tree of unique values.

    Values need ``==`` and ``<``.  Inserting a value already present does
    nothing; erasing a missing value does nothing.
    """

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def _find(self, data: T) -> Optional[_Node]:
        node = self._root
        while node is not None:
            if data == node.data:
                return node
            node = node.left if data < node.data else node.right
        return None

    def search(self, data: T) -> Optional[T]:
        """Return the stored value equal to ``data``, or None."""
        node = self._find(data)
        return None if node is None else node.data

    def __contains__(self, data: object) -> bool:
        return self._find(data) is not None  # type: ignore[arg-type]

    def _rotate_left(self, x: _Node) -> None:
        y = x.right
        assert y is not None
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        self._replace_in_parent(x, y)
        y.left = x
        x.parent = y

    def _rotate_right(self, x: _Node) -> None:
        y = x.left
        assert y is not None
        x.left = y.right
        if y.right is not None:
            y.right.parent = x
        self._replace_in_parent(x, y)
        y.right = x
        x.parent = y

    def _replace_in_parent(self, old: _Node, new: Optional[_Node]) -> None:
        parent = old.parent
        if parent is None:
            self._root = new
        elif old is parent.left:
            parent.left = new
        else:
            parent.right = new
        if new is not None:
            new.parent = parent

    def insert(self, data: T) -> bool:
        """Add ``data``; return False if an equal value was already present."""
        parent: Optional[_Node] = None
        node = self._root
        while node is not None:
            if data == node.data:
                return False
            parent = node
            node = node.left if data < node.data else node.right
        new = _Node(data, Color.RED, parent=parent)
        if parent is None:
            self._root = new
        elif data < parent.data:
            parent.left = new
        else:
            parent.right = new
        self._size += 1
        self._insert_fixup(new)
        return True

    def _insert_fixup(self, z: _Node) -> None:
        while z.parent is not None and z.parent.color is Color.RED:
            parent = z.parent
            grand = parent.parent
            assert grand is not None
            if parent is grand.left:
                uncle = grand.right
                if _color(uncle) is Color.RED:
                    assert uncle is not None
                    parent.color = uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                    continue
                if z is parent.right:
                    z = parent
                    self._rotate_left(z)
                    parent = z.parent
                    assert parent is not None
                parent.color = Color.BLACK
                grand.color = Color.RED
                self._rotate_right(grand)
            else:
                uncle = grand.left
                if _color(uncle) is Color.RED:
                    assert uncle is not None
                    parent.color = uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                    continue
                if z is parent.left:
                    z = parent
                    self._rotate_right(z)
                    parent = z.parent
                    assert parent is not None
                parent.color = Color.BLACK
                grand.color = Color.RED
                self._rotate_left(grand)
        assert self._root is not None
        self._root.color = Color.BLACK

    def erase(self, data: T) -> bool:
        """Remove ``data``; return False if it was not present."""
        z = self._find(data)
        if z is None:
            return False
        if z.left is not None and z.right is not None:
            successor = z.right
            while successor.left is not None:
                successor = successor.left
            z.data = successor.data
            z = successor
        child = z.left if z.left is not None else z.right
        parent = z.parent
        self._replace_in_parent(z, child)
        if z.color is Color.BLACK:
            self._erase_fixup(child, parent)
        self._size -= 1
        return True

    def _erase_fixup(self, x: Optional[_Node], parent: Optional[_Node]) -> None:
        while x is not self._root and _color(x) is Color.BLACK:
            assert parent is not None
            if x is parent.left:
                w = parent.right
                assert w is not None
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_left(parent)
                    w = parent.right
                    assert w is not None
                if _color(w.left) is Color.BLACK and _color(w.right) is Color.BLACK:
                    w.color = Color.RED
                    x = parent
                    parent = x.parent
                    continue
                if _color(w.right) is Color.BLACK:
                    assert w.left is not None
                    w.left.color = Color.BLACK
                    w.color = Color.RED
                    self._rotate_right(w)
                    w = parent.right
                    assert w is not None
                w.color = parent.color
                parent.color = Color.BLACK
                assert w.right is not None
                w.right.color = Color.BLACK
                self._rotate_left(parent)
            else:
                w = parent.left
                assert w is not None
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_right(parent)
                    w = parent.left
                    assert w is not None
                if _color(w.left) is Color.BLACK and _color(w.right) is Color.BLACK:
                    w.color = Color.RED
                    x = parent
                    parent = x.parent
                    continue
                if _color(w.left) is Color.BLACK:
                    assert w.right is not None
                    w.right.color = Color.BLACK
                    w.color = Color.RED
                    self._rotate_left(w)
                    w = parent.left
                    assert w is not None
                w.color = parent.color
                parent.color = Color.BLACK
                assert w.left is not None
                w.left.color = Color.BLACK
                self._rotate_right(parent)
            x = self._root
            break
        if x is not None:
            x.color = Color.BLACK

    def to_list(self) -> list[T]:
        """Return the values in ascending order."""
        return list(self)

    def __iter__(self) -> Iterator[T]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def _validate(self) -> int:
        """Check the red-black and ordering rules; return the black height."""
        root = self._root
        if root is None:
            return 0
        if root.color is not Color.BLACK or root.parent is not None:
            raise ValueError("root must be black and parentless")

        def walk(node: Optional[_Node], low: Any, high: Any, has_low: bool, has_high: bool) -> int:
            if node is None:
                return 1
            if has_low and not low < node.data:
                raise ValueError("ordering violated")
            if has_high and not node.data < high:
                raise ValueError("ordering violated")
            for child in (node.left, node.right):
                if child is not None:
                    if child.parent is not node:
                        raise ValueError("broken parent link")
                    if node.color is Color.RED and child.color is Color.RED:
                        raise ValueError("red node with red child")
            left = walk(node.left, low, node.data, has_low, True)
            right = walk(node.right, node.data, high, True, has_high)
            if left != right:
                raise ValueError("unequal black heights")
            return left + (1 if node.color is Color.BLACK else 0)

        return walk(root, None, None, False, False)