"""Fixed-capacity array, growable array list and circular FIFO queue."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class FixedArray(Generic[T]):
    """An array that holds at most ``capacity`` elements."""

    def __init__(self, capacity: int, items: Iterable[T] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._capacity = capacity
        self._items: list[T] = []
        for item in items:
            self.add(item)

    def add(self, element: T) -> T:
        """Append ``element`` and return it."""
        if len(self._items) >= self._capacity:
            raise IndexError("fixed array is full")
        self._items.append(element)
        return element

    def reset(self) -> None:
        """Forget every element."""
        self._items.clear()

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("array index out of range")

    def __getitem__(self, index: int) -> T:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._check_index(index)
        self._items[index] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    @property
    def capacity(self) -> int:
        return self._capacity

    def view(self, predicate: Callable[[T], bool]) -> Iterator[T]:
        """Yield the elements for which ``predicate`` holds."""
        return (item for item in self._items if predicate(item))


class ArrayList(Generic[T]):
    """A list whose capacity grows by one slot whenever it runs out."""

    def __init__(self, items: Iterable[T] = (), capacity: int = 0) -> None:
        initial = list(items)
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._items: list[T] = []
        self._capacity = max(capacity, len(initial))
        self._items.extend(initial)

    def _grow_if_full(self) -> None:
        if len(self._items) >= self._capacity:
            self.resize(self._capacity + 1)

    def add(self, element: T) -> T:
        """Append ``element`` and return it."""
        self._grow_if_full()
        self._items.append(element)
        return element

    def insert(self, index: int, element: T) -> T:
        """Insert ``element`` at ``index``, shifting later elements up."""
        if not 0 <= index <= len(self._items):
            raise IndexError("insert index out of range")
        self._grow_if_full()
        self._items.insert(index, element)
        return element

    def erase(self, index: int) -> None:
        """Remove the element at ``index``."""
        if not 0 <= index < len(self._items):
            raise IndexError("erasing an element that does not exist")
        del self._items[index]

    def resize(self, size: int) -> None:
        """Set the capacity; it may not drop below the element count."""
        if size < len(self._items):
            raise ValueError("new size is smaller than the element count")
        self._capacity = size

    def reset(self) -> None:
        """Drop every element and release the capacity; no-op when empty."""
        if not self._items:
            return
        self._items.clear()
        self._capacity = 0

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("list index out of range")

    def __getitem__(self, index: int) -> T:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._check_index(index)
        self._items[index] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    @property
    def capacity(self) -> int:
        return self._capacity

    def view(self, predicate: Callable[[T], bool]) -> Iterator[T]:
        """Yield the elements for which ``predicate`` holds."""
        return (item for item in self._items if predicate(item))


class CircleBuffer(Generic[T]):
    """A bounded first-in first-out queue over a ring of slots."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._slots: list[T | None] = [None] * capacity
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def front_index(self) -> int:
        """Slot index of the oldest element."""
        return self._front

    def __len__(self) -> int:
        return self._size

    def enqueue(self, element: T) -> bool:
        """Add ``element`` at the rear; return False, storing nothing, when full."""
        if self._size == self.capacity:
            return False
        self._slots[(self._front + self._size) % self.capacity] = element
        self._size += 1
        return True

    def dequeue(self) -> T:
        """Remove and return the oldest element."""
        element = self.front()
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        return element

    def front(self) -> T:
        if self._size == 0:
            raise IndexError("circle buffer is empty")
        return self._slots[self._front]  # type: ignore[return-value]

    def rear(self) -> T:
        if self._size == 0:
            raise IndexError("circle buffer is empty")
        return self._slots[(self._front + self._size - 1) % self.capacity]  # type: ignore[return-value]