"""Describe a class's fields by name and type, and access them by name."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from kon.strings import ShortString
from kon.util import Color
from kon.vectors import Vector2, Vector3, Vector4


class ReflectedType(enum.IntEnum):
    """The kinds of field a reflected class can describe."""

    NULL = 0
    REFLECT_CLASS = 1
    INT = 2
    FLOAT = 3
    VEC2 = 4
    VEC3 = 5
    VEC4 = 6
    COLOR = 7
    VOID = 8


@dataclass(frozen=True)
class ReflectField:
    """A named field; ``reflected_class`` is set for nested reflected classes."""

    name: str
    type: ReflectedType
    reflected_class: ReflectClass | None = None
    mutable: bool = False


@dataclass(frozen=True)
class ReflectFunction:
    name: str


@dataclass(frozen=True)
class ReflectClass:
    """The reflected description of one class."""

    name: str
    fields: tuple[ReflectField, ...] = ()
    functions: tuple[ReflectFunction, ...] = ()


NULL_FIELD = ReflectField("_nulltype", ReflectedType.NULL)

_BUILTIN_TYPES: dict[type, ReflectedType] = {
    int: ReflectedType.INT,
    float: ReflectedType.FLOAT,
    Vector2: ReflectedType.VEC2,
    Vector3: ReflectedType.VEC3,
    Vector4: ReflectedType.VEC4,
    Color: ReflectedType.COLOR,
}

_REGISTRY: dict[type, ReflectClass] = {}


def _short_name(name: object) -> str:
    return str(ShortString(name))


def reflect_field(name: str, field_type: type, mutable: bool = False) -> ReflectField:
    """Describe attribute ``name`` of type ``field_type``.

    ``field_type`` is a supported value type or a class already registered
    with :func:`register_reflection`.
    """
    name = _short_name(name)
    kind = _BUILTIN_TYPES.get(field_type) if isinstance(field_type, type) else None
    if kind is not None:
        return ReflectField(name, kind, None, mutable)
    nested = _REGISTRY.get(field_type) if isinstance(field_type, type) else None
    if nested is not None:
        return ReflectField(name, ReflectedType.REFLECT_CLASS, nested, mutable)
    raise TypeError(f"type {field_type!r} cannot be reflected")


def register_reflection(
    cls: type,
    fields: Iterable[ReflectField],
    functions: Iterable[ReflectFunction | str] = (),
) -> ReflectClass:
    """Record the reflected description of ``cls`` and return it."""
    if not isinstance(cls, type):
        raise TypeError("only classes can be registered")
    field_list = tuple(fields)
    if not all(isinstance(f, ReflectField) for f in field_list):
        raise TypeError("fields must be ReflectField values")
    function_list = tuple(
        f if isinstance(f, ReflectFunction) else ReflectFunction(_short_name(f))
        for f in functions
    )
    reflected = ReflectClass(_short_name(cls.__name__), field_list, function_list)
    _REGISTRY[cls] = reflected
    return reflected


class Reflection:
    """Reads and writes an instance's reflected fields by name."""

    def __init__(self, instance: Any, reflected_class: ReflectClass) -> None:
        self.instance = instance
        self.reflected_class = reflected_class

    def get_field(self, name: object) -> ReflectField:
        """The field called ``name``, or the null field when there is none."""
        wanted = str(name)
        return next(
            (f for f in self.reflected_class.fields if f.name == wanted), NULL_FIELD
        )

    def _require_field(self, name: object) -> ReflectField:
        field = self.get_field(name)
        if field.type is ReflectedType.NULL:
            raise KeyError(str(name))
        return field

    def get_value(self, name: object) -> Any:
        return getattr(self.instance, self._require_field(name).name)

    def set_value(self, name: object, value: Any) -> None:
        """Write a field; only fields declared mutable may be written."""
        field = self._require_field(name)
        if not field.mutable:
            raise AttributeError(f"field {field.name} is not mutable")
        setattr(self.instance, field.name, value)

    def fields(self) -> Iterator[ReflectField]:
        return iter(self.reflected_class.fields)


def reflect(instance: Any) -> Reflection:
    """A :class:`Reflection` over ``instance``, whose class must be registered."""
    reflected = _REGISTRY.get(type(instance))
    if reflected is None:
        raise TypeError(f"{type(instance).__name__} has no reflection registered")
    return Reflection(instance, reflected)