"""Allocators that hand out offsets into a fixed block of memory."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field


class AllocationError(MemoryError):
    """Raised when an allocator cannot satisfy or undo a request."""


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError("size must be non-negative")


class MemoryBlock:
    """A contiguous run of bytes; partitions share the parent's memory."""

    def __init__(self, size: int) -> None:
        _check_size(size)
        self._memory = memoryview(bytearray(size))
        self._partition = False

    @classmethod
    def _from_view(cls, view: memoryview) -> MemoryBlock:
        block = cls.__new__(cls)
        block._memory = view
        block._partition = True
        return block

    @property
    def memory(self) -> memoryview:
        return self._memory

    @property
    def size(self) -> int:
        return len(self._memory)

    @property
    def is_partition(self) -> bool:
        return self._partition

    def partition(self, size: int, offset: int = 0) -> MemoryBlock:
        """Return a block viewing ``size`` bytes starting at ``offset``."""
        _check_size(size)
        if offset < 0 or offset + size > self.size:
            raise AllocationError("partitioned block is larger than original")
        return MemoryBlock._from_view(self._memory[offset:offset + size])


class Allocator:
    """General-purpose allocator that tracks independent allocations."""

    def __init__(self, block: MemoryBlock | None = None) -> None:
        self.block = block
        self._sizes: dict[int, int] = {}
        self._next_address = 1

    def allocate_mem(self, size: int) -> int:
        _check_size(size)
        address = self._next_address
        self._next_address += max(size, 1)
        self._sizes[address] = size
        return address

    def free_mem(self, address: int, size: int = 0) -> None:
        if self._sizes.pop(address, None) is None:
            raise AllocationError(f"address {address} was not allocated")

    def allocated_mem(self) -> int:
        """Bytes currently handed out."""
        return sum(self._sizes.values())


class StackAllocator(Allocator):
    """Bump allocator: frees simply move the stack top back."""

    def __init__(self, block: MemoryBlock) -> None:
        super().__init__(block)
        self._top = 0

    def allocate_mem(self, size: int) -> int:
        _check_size(size)
        if self.allocated_mem() + size >= self.block.size:
            raise AllocationError("requested memory exceeds block size")
        address = self._top
        self._top += size
        return address

    def free_mem(self, address: int, size: int) -> None:
        _check_size(size)
        if size > self._top:
            raise AllocationError("freeing more memory than was allocated")
        self._top -= size

    def allocated_mem(self) -> int:
        return self._top

    def reset(self) -> None:
        self._top = 0


@dataclass(eq=False)
class FreeListHeader:
    """One node of a free-list allocator's list of regions."""

    offset: int
    size: int
    free: bool
    next: FreeListHeader | None = field(default=None, repr=False)
    prev: FreeListHeader | None = field(default=None, repr=False)


class FreeListAllocator(Allocator):
    """Best-fit allocator over a doubly linked list of region headers."""

    HEADER_SIZE = 24

    def __init__(self, block: MemoryBlock) -> None:
        if block.size < 2 * self.HEADER_SIZE:
            raise ValueError("block too small for a free list")
        super().__init__(block)
        self.start = FreeListHeader(0, block.size - self.HEADER_SIZE, True)
        self.end = FreeListHeader(
            block.size - self.HEADER_SIZE, 0, False, None, self.start
        )
        self.start.next = self.end

    def headers(self) -> Iterator[FreeListHeader]:
        """Yield every header from the start to the end sentinel."""
        header = self.start
        while header is not None:
            yield header
            header = header.next

    def allocate_mem(self, size: int) -> int:
        _check_size(size)
        if self.allocated_mem() + size >= self.block.size:
            raise AllocationError("requested memory exceeds block size")

        total = size + self.HEADER_SIZE
        best: FreeListHeader | None = None
        current = self.start
        while current is not self.end:
            if current.free and current.size >= total:
                if current.size == total:
                    current.free = False
                    return current.offset + self.HEADER_SIZE
                if best is None or current.size < best.size:
                    best = current
            current = current.next

        if best is None:
            raise AllocationError("no free region large enough")

        split = FreeListHeader(
            best.offset + self.HEADER_SIZE + size,
            best.size - size - self.HEADER_SIZE,
            True,
            best.next,
            best,
        )
        best.free = False
        best.size = size
        best.next.prev = split
        best.next = split
        return best.offset + self.HEADER_SIZE

    def free_mem(self, address: int, size: int = 0) -> None:
        offset = address - self.HEADER_SIZE
        header = next((h for h in self.headers() if h.offset == offset), None)
        if header is None or header is self.end:
            raise AllocationError(f"address {address} was not allocated")
        if header.free:
            raise AllocationError(f"address {address} is already free")
        header.free = True
        self._merge_freed(header)

    def _merge_freed(self, header: FreeListHeader) -> None:
        following = header.next
        if header is not self.end and following.free:
            header.size += following.size + self.HEADER_SIZE
            header.next = following.next
            header.next.prev = header

        previous = header.prev
        if header is not self.start and previous.free:
            previous.size += header.size + self.HEADER_SIZE
            previous.next = header.next
            previous.next.prev = previous

    def allocated_mem(self) -> int:
        return sum(h.size for h in self.headers() if not h.free)


class PageAllocator(Allocator):
    """Hands out fixed-size pages; freed pages are reused in FIFO order."""

    HEADER_SIZE = 16

    def __init__(self, block: MemoryBlock, page_size: int) -> None:
        if page_size <= 0:
            raise ValueError("page size must be positive")
        super().__init__(block)
        self.page_size = page_size
        self._stride = page_size + self.HEADER_SIZE
        self.max_pages = block.size // self._stride
        if self.max_pages == 0:
            raise ValueError("block too small for a single page")
        self._free_pages: deque[int] = deque(range(self.max_pages))
        self._page_free = [True] * self.max_pages
        self._used_pages = 0

    def allocate_mem(self, size: int = 0) -> int:
        _check_size(size)
        if size > self.page_size:
            raise AllocationError("requested size exceeds page size")
        if not self._free_pages:
            raise AllocationError("no free pages left")
        page = self._free_pages.popleft()
        self._page_free[page] = False
        self._used_pages += 1
        return page * self._stride + self.HEADER_SIZE

    def free_mem(self, address: int, size: int = 0) -> None:
        page, remainder = divmod(address - self.HEADER_SIZE, self._stride)
        if remainder or not 0 <= page < self.max_pages:
            raise AllocationError(f"address {address} is not a page")
        if self._page_free[page]:
            raise AllocationError("freeing an already freed page")
        self._page_free[page] = True
        self._free_pages.append(page)
        self._used_pages -= 1

    def allocated_mem(self) -> int:
        return self._used_pages * self.page_size