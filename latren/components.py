"""Component base class, declared serialisable fields and the Transform component."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any

Vec3 = tuple[float, float, float]
Quat = tuple[float, float, float, float]
Matrix4 = tuple[tuple[float, float, float, float], ...]


class SerializableField:
    """Declares a component attribute that takes part in serialisation.

    Each component instance gets its own deep copy of the default value.
    """

    def __init__(self, value_type: type, default: Any = None) -> None:
        self.value_type = value_type
        self.default = default
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        values = instance.__dict__
        if self.name not in values:
            values[self.name] = copy.deepcopy(self.default)
        return values[self.name]

    def __set__(self, instance: Any, value: Any) -> None:
        instance.__dict__[self.name] = value

    def __repr__(self) -> str:
        return f"SerializableField({self.value_type.__name__}, {self.default!r})"


@dataclass(frozen=True)
class FieldInfo:
    """A serialisable field of a component type, in declaration order."""

    name: str
    index: int
    value_type: type
    default: Any


def serializable_fields(component_type: type) -> dict[str, FieldInfo]:
    """Collect the serialisable fields of a component type, base classes first."""
    declared: dict[str, SerializableField] = {}
    for klass in reversed(component_type.__mro__):
        for name, attr in vars(klass).items():
            if isinstance(attr, SerializableField):
                declared[name] = attr
    return {
        name: FieldInfo(name, index, attr.value_type, attr.default)
        for index, (name, attr) in enumerate(declared.items())
    }


class Component:
    """Base class of everything attached to an entity.

    Subclasses override ``start``, ``update``, ``fixed_update`` and ``delete``.
    """

    def __init__(self) -> None:
        self.parent: Any = None
        self._has_started = False

    def start(self) -> None:
        """Called once before the first update."""

    def update(self) -> None:
        """Called every frame."""

    def fixed_update(self) -> None:
        """Called on every fixed-rate tick."""

    def delete(self) -> None:
        """Called when the component is removed."""

    def run_start(self) -> None:
        self.start()
        self._has_started = True

    def run_update(self) -> None:
        self.update()

    def run_fixed_update(self) -> None:
        self.fixed_update()

    def run_delete(self) -> None:
        self.delete()

    def has_started(self) -> bool:
        return self._has_started

    def entity_index(self) -> int:
        """Index of the entity that owns this component."""
        if self.parent is None:
            raise RuntimeError(f"{type(self).__name__} is not attached to an entity")
        return int(self.parent.index)


class Transform(Component):
    """Position, rotation (quaternion w, x, y, z) and scale of an entity."""

    position = SerializableField(tuple, (0.0, 0.0, 0.0))
    rotation = SerializableField(tuple, (1.0, 0.0, 0.0, 0.0))
    size = SerializableField(tuple, (1.0, 1.0, 1.0))
    is_static = SerializableField(bool, False)

    def transformation_matrix(self) -> Matrix4:
        """Row-major matrix of translation * rotation * scale."""
        w, x, y, z = self.rotation
        rot = (
            (1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)),
            (2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)),
            (2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)),
        )
        rows = tuple(
            (
                row[0] * self.size[0],
                row[1] * self.size[1],
                row[2] * self.size[2],
                float(self.position[i]),
            )
            for i, row in enumerate(rot)
        )
        return (*rows, (0.0, 0.0, 0.0, 1.0))