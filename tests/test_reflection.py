from dataclasses import dataclass, field

import pytest

from kon.reflection import (
    ReflectedType,
    ReflectFunction,
    reflect,
    reflect_field,
    register_reflection,
)
from kon.util import Color
from kon.vectors import Vector2, Vector3


@dataclass
class Inner:
    level: int = 0


@dataclass
class Player:
    health: int = 10
    speed: float = 1.5
    position: Vector3 = field(default_factory=Vector3)
    tint: Color = field(default_factory=Color)
    inner: Inner = field(default_factory=Inner)


class Unregistered:
    pass


def _register():
    register_reflection(Inner, [reflect_field("level", int, True)])
    return register_reflection(
        Player,
        [
            reflect_field("health", int, True),
            reflect_field("speed", float),
            reflect_field("position", Vector3, True),
            reflect_field("tint", Color),
            reflect_field("inner", Inner),
        ],
        ["update", ReflectFunction("render")],
    )


def test_registered_class_lists_fields_and_functions():
    rc = _register()
    assert rc.name == "Player"
    assert [f.name for f in rc.fields] == ["health", "speed", "position", "tint", "inner"]
    assert [f.name for f in rc.functions] == ["update", "render"]


def test_field_types_follow_python_types():
    _register()
    r = reflect(Player())
    assert r.get_field("health").type is ReflectedType.INT
    assert r.get_field("speed").type is ReflectedType.FLOAT
    assert r.get_field("position").type is ReflectedType.VEC3
    assert r.get_field("tint").type is ReflectedType.COLOR


def test_nested_class_field_points_at_its_reflection():
    _register()
    f = reflect(Player()).get_field("inner")
    assert f.type is ReflectedType.REFLECT_CLASS
    assert f.reflected_class.name == "Inner"


def test_vector2_field():
    assert reflect_field("uv", Vector2).type is ReflectedType.VEC2


def test_unknown_field_is_null_field():
    _register()
    f = reflect(Player()).get_field("missing")
    assert f.name == "_nulltype"
    assert f.type is ReflectedType.NULL


def test_get_value_reads_instance():
    _register()
    player = Player(health=7)
    assert reflect(player).get_value("health") == 7


def test_set_value_on_mutable_field_round_trips():
    _register()
    player = Player()
    r = reflect(player)
    r.set_value("position", Vector3(1.0, 2.0, 3.0))
    assert player.position == Vector3(1.0, 2.0, 3.0)
    assert r.get_value("position") == Vector3(1.0, 2.0, 3.0)


def test_set_value_on_immutable_field_raises():
    _register()
    player = Player()
    with pytest.raises(AttributeError):
        reflect(player).set_value("speed", 9.0)
    assert player.speed == 1.5


def test_get_value_of_missing_field_raises():
    _register()
    with pytest.raises(KeyError):
        reflect(Player()).get_value("missing")


def test_fields_iterates_in_declaration_order():
    _register()
    assert [f.name for f in reflect(Player()).fields()][:2] == ["health", "speed"]


def test_unsupported_field_type_raises():
    with pytest.raises(TypeError):
        reflect_field("label", str)


def test_reflect_unregistered_instance_raises():
    with pytest.raises(TypeError):
        reflect(Unregistered())


def test_field_mutability_defaults_to_false():
    assert reflect_field("count", int).mutable is False