import pytest

from kon.allocator import (
    AllocationError,
    Allocator,
    FreeListAllocator,
    MemoryBlock,
    PageAllocator,
    StackAllocator,
)

BLOCK_SIZE = 1000


def test_memory_block_size():
    block = MemoryBlock(BLOCK_SIZE)
    assert block.size == BLOCK_SIZE
    assert block.is_partition is False


def test_partition_shares_memory():
    block = MemoryBlock(16)
    part = block.partition(4, 2)
    part.memory[0] = 7
    assert block.memory[2] == 7
    assert part.size == 4
    assert part.is_partition is True


def test_partition_too_large_raises():
    block = MemoryBlock(16)
    with pytest.raises(AllocationError):
        block.partition(10, 10)


def test_base_allocator_tracks_allocations():
    allocator = Allocator()
    a = allocator.allocate_mem(10)
    b = allocator.allocate_mem(5)
    assert a != b
    assert allocator.allocated_mem() == 15
    allocator.free_mem(a, 10)
    assert allocator.allocated_mem() == 5
    with pytest.raises(AllocationError):
        allocator.free_mem(a, 10)


def test_stack_allocator_is_sequential():
    stack = StackAllocator(MemoryBlock(BLOCK_SIZE))
    a = stack.allocate_mem(10)
    b = stack.allocate_mem(20)
    assert a == 0
    assert b == 10
    assert stack.allocated_mem() == 30
    stack.free_mem(b, 20)
    assert stack.allocated_mem() == 10
    stack.reset()
    assert stack.allocated_mem() == 0


def test_stack_allocator_overflow():
    stack = StackAllocator(MemoryBlock(BLOCK_SIZE))
    with pytest.raises(AllocationError):
        stack.allocate_mem(BLOCK_SIZE)
    assert stack.allocated_mem() == 0


def test_stack_allocator_over_free():
    stack = StackAllocator(MemoryBlock(BLOCK_SIZE))
    stack.allocate_mem(5)
    with pytest.raises(AllocationError):
        stack.free_mem(0, 6)


def _initial_state(allocator):
    return [(h.offset, h.size, h.free) for h in allocator.headers()]


def test_free_list_initial_layout():
    allocator = FreeListAllocator(MemoryBlock(BLOCK_SIZE))
    header = FreeListAllocator.HEADER_SIZE
    assert _initial_state(allocator) == [
        (0, BLOCK_SIZE - header, True),
        (BLOCK_SIZE - header, 0, False),
    ]
    assert allocator.allocated_mem() == 0


def test_free_list_allocate_and_free_restores_layout():
    allocator = FreeListAllocator(MemoryBlock(BLOCK_SIZE))
    before = _initial_state(allocator)
    address = allocator.allocate_mem(100)
    assert address == FreeListAllocator.HEADER_SIZE
    assert allocator.allocated_mem() == 100
    allocator.free_mem(address, 100)
    assert _initial_state(allocator) == before


@pytest.mark.parametrize("order", [(0, 1), (1, 0)])
def test_free_list_merges_in_any_order(order):
    allocator = FreeListAllocator(MemoryBlock(BLOCK_SIZE))
    before = _initial_state(allocator)
    addresses = [allocator.allocate_mem(100), allocator.allocate_mem(50)]
    assert allocator.allocated_mem() == 150
    for i in order:
        allocator.free_mem(addresses[i])
    assert _initial_state(allocator) == before


def test_free_list_reuses_exact_fit():
    allocator = FreeListAllocator(MemoryBlock(BLOCK_SIZE))
    header = FreeListAllocator.HEADER_SIZE
    first = allocator.allocate_mem(100)
    allocator.allocate_mem(50)
    allocator.free_mem(first)
    again = allocator.allocate_mem(100 - header)
    assert again == first
    assert all(not h.free for h in allocator.headers() if h.offset == 0)


def test_free_list_double_free_raises():
    allocator = FreeListAllocator(MemoryBlock(BLOCK_SIZE))
    address = allocator.allocate_mem(10)
    allocator.free_mem(address)
    with pytest.raises(AllocationError):
        allocator.free_mem(address)


def test_free_list_oversize_raises():
    allocator = FreeListAllocator(MemoryBlock(BLOCK_SIZE))
    with pytest.raises(AllocationError):
        allocator.allocate_mem(BLOCK_SIZE)


def test_free_list_no_fitting_region():
    allocator = FreeListAllocator(MemoryBlock(BLOCK_SIZE))
    free_size = allocator.start.size
    with pytest.raises(AllocationError):
        allocator.allocate_mem(free_size)


def test_page_allocator_hands_out_pages_in_order():
    page = 64
    stride = page + PageAllocator.HEADER_SIZE
    allocator = PageAllocator(MemoryBlock(stride * 3), page)
    addresses = [allocator.allocate_mem(page) for _ in range(3)]
    assert addresses == [i * stride + PageAllocator.HEADER_SIZE for i in range(3)]
    assert allocator.allocated_mem() == 3 * page
    with pytest.raises(AllocationError):
        allocator.allocate_mem(page)


def test_page_allocator_reuses_freed_pages_fifo():
    page = 32
    stride = page + PageAllocator.HEADER_SIZE
    allocator = PageAllocator(MemoryBlock(stride * 3), page)
    a = allocator.allocate_mem()
    allocator.allocate_mem()
    allocator.free_mem(a)
    c = allocator.allocate_mem()
    assert c == 2 * stride + PageAllocator.HEADER_SIZE
    assert allocator.allocate_mem() == a


def test_page_allocator_double_free_raises():
    allocator = PageAllocator(MemoryBlock(200), 32)
    address = allocator.allocate_mem()
    allocator.free_mem(address)
    with pytest.raises(AllocationError):
        allocator.free_mem(address)


def test_page_allocator_rejects_bad_requests():
    allocator = PageAllocator(MemoryBlock(200), 32)
    with pytest.raises(AllocationError):
        allocator.allocate_mem(33)
    with pytest.raises(AllocationError):
        allocator.free_mem(1)
    with pytest.raises(ValueError):
        PageAllocator(MemoryBlock(10), 32)