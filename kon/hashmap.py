"""A Robin Hood open-addressing hash map."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator
from dataclasses import dataclass
from typing import Any

_U32_MASK = 0xFFFFFFFF


@dataclass
class _Node:
    key: Any
    value: Any
    psl: int


class HashMap:
    """Robin Hood hash map; each bucket starts ``SKIP_INDEX`` slots apart."""

    SKIP_INDEX = 5
    LOAD = 0.75

    def __init__(
        self,
        elements: int,
        hash_function: Callable[[Any], int] | None = None,
    ) -> None:
        self._buckets = int(elements / self.LOAD)
        if self._buckets <= 0:
            raise ValueError("a hash map needs room for at least one element")
        self._hash = hash_function if hash_function is not None else hash
        self._slots: list[_Node | None] = [None] * (self._buckets * self.SKIP_INDEX)
        self._count = 0

    def _start(self, key: Hashable) -> int:
        return ((self._hash(key) & _U32_MASK) % self._buckets) * self.SKIP_INDEX

    def _find_index(self, key: Hashable) -> int | None:
        index = self._start(key)
        psl = 0
        for _ in range(self.capacity):
            node = self._slots[index]
            if node is None or psl > node.psl:
                return None
            if node.key == key:
                return index
            index = (index + 1) % self.capacity
            psl += 1
        return None

    def add(self, key: Hashable, value: Any) -> Any:
        """Store ``value`` under ``key``, replacing any existing value."""
        existing = self._find_index(key)
        if existing is not None:
            self._slots[existing].value = value  # type: ignore[union-attr]
            return value
        if self._count >= self.capacity:
            raise OverflowError("hash map is full")

        carried = _Node(key, value, 0)
        index = self._start(key)
        while (node := self._slots[index]) is not None:
            if carried.psl > node.psl:
                self._slots[index], carried = carried, node
            index = (index + 1) % self.capacity
            carried.psl += 1
        self._slots[index] = carried
        self._count += 1
        return value

    def erase(self, key: Hashable) -> None:
        """Remove ``key``, shifting the following run back one slot."""
        index = self._find_index(key)
        if index is None:
            raise KeyError(key)
        self._slots[index] = None
        self._count -= 1

        previous = index
        current = (index + 1) % self.capacity
        while (node := self._slots[current]) is not None and node.psl > 0:
            node.psl -= 1
            self._slots[previous] = node
            self._slots[current] = None
            previous = current
            current = (current + 1) % self.capacity

    def find_entry(self, key: Hashable) -> tuple[Any, Any]:
        """Return the ``(key, value)`` pair stored for ``key``."""
        index = self._find_index(key)
        if index is None:
            raise KeyError(key)
        node = self._slots[index]
        return node.key, node.value  # type: ignore[union-attr]

    def __contains__(self, key: object) -> bool:
        return self._find_index(key) is not None  # type: ignore[arg-type]

    def __getitem__(self, key: Hashable) -> Any:
        return self.find_entry(key)[1]

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        return (key for key, _ in self.items())

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in slot order."""
        return ((n.key, n.value) for n in self._slots if n is not None)

    @property
    def capacity(self) -> int:
        return self._buckets * self.SKIP_INDEX

    def load_factor(self) -> float:
        return self._count / self.capacity

    def view(self, predicate: Callable[[Any, Any], bool]) -> Iterator[tuple[Any, Any]]:
        """Yield the pairs for which ``predicate(key, value)`` holds."""
        return ((k, v) for k, v in self.items() if predicate(k, v))