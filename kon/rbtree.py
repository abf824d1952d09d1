"""An ordered map kept in a red-black tree keyed by each key's hash."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator
from dataclasses import dataclass, field
from typing import Any

_U64_MASK = (1 << 64) - 1


@dataclass(eq=False)
class TreeNode:
    """A tree node holding every entry whose key has one particular hash.

    Leaves point at the tree's nil sentinel, whose ``is_nil`` is true.
    """

    hash: int | None
    entries: list[list[Any]] = field(default_factory=list, repr=False)
    red: bool = False
    left: TreeNode | None = field(default=None, repr=False)
    right: TreeNode | None = field(default=None, repr=False)
    parent: TreeNode | None = field(default=None, repr=False)

    @property
    def is_nil(self) -> bool:
        return self.hash is None

    @property
    def key(self) -> Any:
        """Key of the first entry stored in this node."""
        return self.entries[0][0]

    @property
    def value(self) -> Any:
        """Value of the first entry stored in this node."""
        return self.entries[0][1]


class TreeMap:
    """Map whose entries are ordered by the hash of their keys."""

    def __init__(self, hash_function: Callable[[Any], int] | None = None) -> None:
        self._hash = hash_function if hash_function is not None else hash
        self._nil = TreeNode(None)
        self._nil.left = self._nil
        self._nil.right = self._nil
        self._nil.parent = self._nil
        self._root = self._nil
        self._count = 0

    # ----------- queries ----------- #

    def _hash_of(self, key: Hashable) -> int:
        return self._hash(key) & _U64_MASK

    def _find_node(self, hashed: int) -> TreeNode:
        current = self._root
        while not current.is_nil:
            if current.hash == hashed:
                return current
            current = current.left if hashed < current.hash else current.right
        return current

    def _find_entry(self, key: Hashable) -> tuple[TreeNode, int]:
        node = self._find_node(self._hash_of(key))
        if not node.is_nil:
            for position, entry in enumerate(node.entries):
                if entry[0] == key:
                    return node, position
        raise KeyError(key)

    def find(self, key: Hashable) -> tuple[Any, Any]:
        """Return the ``(key, value)`` pair stored for ``key``."""
        node, position = self._find_entry(key)
        stored_key, value = node.entries[position]
        return stored_key, value

    def __contains__(self, key: object) -> bool:
        try:
            self._find_entry(key)  # type: ignore[arg-type]
        except KeyError:
            return False
        return True

    def __getitem__(self, key: Hashable) -> Any:
        return self.find(key)[1]

    def __len__(self) -> int:
        return self._count

    def _nodes(self) -> Iterator[TreeNode]:
        stack: list[TreeNode] = []
        node = self._root
        while stack or not node.is_nil:
            while not node.is_nil:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in ascending hash order."""
        for node in self._nodes():
            for key, value in node.entries:
                yield key, value

    def __iter__(self) -> Iterator[Any]:
        return (key for key, _ in self.items())

    @property
    def root(self) -> TreeNode | None:
        """The root node, or None when the tree is empty."""
        return None if self._root.is_nil else self._root

    def minimum(self, node: TreeNode | None = None) -> TreeNode:
        """The node with the smallest hash below ``node`` (default: the root)."""
        node = self._root if node is None else node
        if node.is_nil:
            raise ValueError("tree is empty")
        while not node.left.is_nil:
            node = node.left
        return node

    def maximum(self, node: TreeNode | None = None) -> TreeNode:
        """The node with the largest hash below ``node`` (default: the root)."""
        node = self._root if node is None else node
        if node.is_nil:
            raise ValueError("tree is empty")
        while not node.right.is_nil:
            node = node.right
        return node

    # ----------- modification ----------- #

    def add(self, key: Hashable, value: Any) -> Any:
        """Store ``value`` under ``key``, replacing any existing value."""
        hashed = self._hash_of(key)
        existing = self._find_node(hashed)
        if not existing.is_nil:
            for entry in existing.entries:
                if entry[0] == key:
                    entry[1] = value
                    return value
            existing.entries.append([key, value])
            self._count += 1
            return value

        parent = self._nil
        current = self._root
        while not current.is_nil:
            parent = current
            current = current.left if hashed < current.hash else current.right

        node = TreeNode(hashed, [[key, value]], True, self._nil, self._nil, parent)
        if parent.is_nil:
            self._root = node
        elif hashed < parent.hash:
            parent.left = node
        else:
            parent.right = node

        self._insert_fix(node)
        self._count += 1
        return value

    def erase(self, key: Hashable) -> None:
        """Remove ``key``; raise KeyError when it is absent."""
        node, position = self._find_entry(key)
        del node.entries[position]
        self._count -= 1
        if not node.entries:
            self._delete_node(node)

    def clear(self) -> None:
        """Remove every entry."""
        self._root = self._nil
        self._count = 0

    # ----------- balancing ----------- #

    def _rotate_left(self, x: TreeNode) -> None:
        y = x.right
        x.right = y.left
        if not y.left.is_nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent.is_nil:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _rotate_right(self, x: TreeNode) -> None:
        y = x.left
        x.left = y.right
        if not y.right.is_nil:
            y.right.parent = x
        y.parent = x.parent
        if x.parent.is_nil:
            self._root = y
        elif x is x.parent.right:
            x.parent.right = y
        else:
            x.parent.left = y
        y.right = x
        x.parent = y

    def _insert_fix(self, node: TreeNode) -> None:
        while node.parent.red:
            grandparent = node.parent.parent
            if node.parent is grandparent.left:
                uncle = grandparent.right
                if uncle.red:
                    node.parent.red = False
                    uncle.red = False
                    grandparent.red = True
                    node = grandparent
                else:
                    if node is node.parent.right:
                        node = node.parent
                        self._rotate_left(node)
                    node.parent.red = False
                    node.parent.parent.red = True
                    self._rotate_right(node.parent.parent)
            else:
                uncle = grandparent.left
                if uncle.red:
                    node.parent.red = False
                    uncle.red = False
                    grandparent.red = True
                    node = grandparent
                else:
                    if node is node.parent.left:
                        node = node.parent
                        self._rotate_right(node)
                    node.parent.red = False
                    node.parent.parent.red = True
                    self._rotate_left(node.parent.parent)
        self._root.red = False

    def _transplant(self, u: TreeNode, v: TreeNode) -> None:
        if u.parent.is_nil:
            self._root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        v.parent = u.parent

    def _delete_node(self, node: TreeNode) -> None:
        y = node
        y_was_red = y.red
        if node.left.is_nil:
            x = node.right
            self._transplant(node, node.right)
        elif node.right.is_nil:
            x = node.left
            self._transplant(node, node.left)
        else:
            y = self.minimum(node.right)
            y_was_red = y.red
            x = y.right
            if y.parent is node:
                x.parent = y
            else:
                self._transplant(y, y.right)
                y.right = node.right
                y.right.parent = y
            self._transplant(node, y)
            y.left = node.left
            y.left.parent = y
            y.red = node.red

        if not y_was_red:
            self._delete_fix(x)
        self._nil.red = False

    def _delete_fix(self, x: TreeNode) -> None:
        while x is not self._root and not x.red:
            if x is x.parent.left:
                sibling = x.parent.right
                if sibling.red:
                    sibling.red = False
                    x.parent.red = True
                    self._rotate_left(x.parent)
                    sibling = x.parent.right
                if not sibling.left.red and not sibling.right.red:
                    sibling.red = True
                    x = x.parent
                else:
                    if not sibling.right.red:
                        sibling.left.red = False
                        sibling.red = True
                        self._rotate_right(sibling)
                        sibling = x.parent.right
                    sibling.red = x.parent.red
                    x.parent.red = False
                    sibling.right.red = False
                    self._rotate_left(x.parent)
                    x = self._root
            else:
                sibling = x.parent.left
                if sibling.red:
                    sibling.red = False
                    x.parent.red = True
                    self._rotate_right(x.parent)
                    sibling = x.parent.left
                if not sibling.left.red and not sibling.right.red:
                    sibling.red = True
                    x = x.parent
                else:
                    if not sibling.left.red:
                        sibling.right.red = False
                        sibling.red = True
                        self._rotate_left(sibling)
                        sibling = x.parent.left
                    sibling.red = x.parent.red
                    x.parent.red = False
                    sibling.left.red = False
                    self._rotate_right(x.parent)
                    x = self._root
        x.red = False