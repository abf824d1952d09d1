# kon

This library holds the core pieces of a small game engine, written in plain
Python with no third-party dependencies.

## What is in it

| Module | Contents |
| --- | --- |
| `kon.identifiers` | `UUID`, a 64-bit identifier. It is random unless you give it a value. |
| `kon.util` | `Point`, `Rect`, `Color` and `bit(x)`. |
| `kon.strings` | `String`, a growable string.<br>`ShortString`, which holds at most 255 bytes.<br>`short_string_hash`. |
| `kon.allocator` | `MemoryBlock`, `Allocator`, `StackAllocator`, `FreeListAllocator` (best-fit, with a list of `FreeListHeader` nodes) and `PageAllocator`.<br>They raise `AllocationError` when a request cannot be met. |
| `kon.containers` | `FixedArray`, `ArrayList` and `CircleBuffer` (a bounded FIFO queue). |
| `kon.hashmap` | `HashMap`, an open-addressing map that uses Robin Hood hashing. |
| `kon.rbtree` | `TreeMap`, a red-black tree ordered by the hash of each key. Its nodes are `TreeNode` values. |
| `kon.variant` | `Variant`, which holds a value of one `VariantType`.<br>`variant_type_of`. |
| `kon.vectors` | `Vector2`, `Vector3`, `Vector4`, `hash_vector`, `vector_norm`, `vector_add`, `vector_dot` and `vector_cross`. |
| `kon.matrices` | `Matrix`, a square row-major matrix of size 2, 3 or 4.<br>`matrix_multiply`, `matrix_multiply_vec`, `matrix_identity`, `matrix_norm` and `format_matrix`. |
| `kon.transformations` | The `trfm_*` functions: translation, scale, rotation about x, y and z, orthographic projection and perspective projection. |
| `kon.reflection` | `reflect_field`, `register_reflection`, `reflect` and `Reflection`. With these you read and write the fields of an instance by name. |
| `kon.directory` | `Directory`, a path together with its `PathStat` (taken when the path is set).<br>`get_path_stat`, `iterate_directory` and the filters `is_valid`, `is_directory` and `is_file`. |
| `kon.timer` | `Timer`, a monotonic timer. You can start and stop it yourself, or use it as a context manager. |
| `kon.instrumentation` | `Instrumentor`, which writes timings as a Chrome trace-event JSON file.<br>`InstrumentorMeasure`, which times a `with` block. |
| `kon.log` | `configure_logging`, `core_logger` and `client_logger`. |

## Installation

```
pip install .
```

## Examples

### Allocating from a memory block

```python
from kon.allocator import MemoryBlock, FreeListAllocator

allocator = FreeListAllocator(MemoryBlock(1024))
address = allocator.allocate_mem(64)
print(allocator.allocated_mem())   # 64
allocator.free_mem(address)
print(allocator.allocated_mem())   # 0
```

### Maps

```python
from kon.hashmap import HashMap
from kon.rbtree import TreeMap

table = HashMap(16)
table.add("one", 1)
print("one" in table, table["one"])   # True 1

tree = TreeMap()
tree.add(3, "c")
tree.add(1, "a")
print(list(tree.items()))             # ordered by hash: [(1, 'a'), (3, 'c')]
```

### Math

```python
from kon.vectors import Vector4
from kon.matrices import matrix_identity, matrix_multiply_vec

print(matrix_multiply_vec(matrix_identity(4), Vector4(1, 2, 3, 4)))
```

### Reflection

```python
from dataclasses import dataclass
from kon.reflection import reflect, reflect_field, register_reflection

@dataclass
class Player:
    health: int = 100
    speed: float = 1.5

register_reflection(Player, [reflect_field("health", int, mutable=True),
                             reflect_field("speed", float)])
view = reflect(Player())
view.set_value("health", 50)
print(view.get_value("health"))   # 50
```

A call to `set_value("speed", ...)` raises `AttributeError`, because that field
is not mutable.

### Profiling

```python
from kon.instrumentation import Instrumentor, InstrumentorMeasure

with Instrumentor() as profiler:
    profiler.open_file("trace.json")
    with InstrumentorMeasure(profiler, "work"):
        sum(range(100_000))
```

### Logging

`configure_logging()` sends the core logger and the client logger to two
places:

- standard output;
- `logs/kon.log`. This file is truncated each time `configure_logging()` is
  called.

If you pass `log_file=None`, the loggers write only to standard output.

## What this library does not do

- It has no engine loop, no window and no renderer.
- It has no event bus and no module system.
- It does not load resources. `Directory` and `iterate_directory` find files
  and report on them, but nothing here reads images, shaders, models or
  resource packs.

## Running the tests

```
pip install .[test]
pytest
```