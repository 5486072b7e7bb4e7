"""Registry of component types by name, with their fields and pools."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Callable, TextIO, Iterable

from latren.componentpool import ComponentPool
from latren.components import Component, FieldInfo, Transform, serializable_fields


@dataclass(frozen=True)
class ComponentTypeData:
    """What the registry knows about one component type."""

    name: str
    component_type: type
    fields: dict[str, FieldInfo]
    pool_factory: Callable[[], ComponentPool]


class ComponentRegistry:
    """Component types known by name; the Transform type is always present."""

    def __init__(self) -> None:
        self._types: list[ComponentTypeData] = []
        self.register("Transform", Transform)

    def register(self, name: str, component_type: type) -> ComponentTypeData:
        """Register a component type; a name already taken keeps its first entry."""
        if not (isinstance(component_type, type) and issubclass(component_type, Component)):
            raise TypeError(f"{component_type!r} is not a Component type")
        existing = self._find_name(name)
        if existing is not None:
            return existing
        data = ComponentTypeData(
            name,
            component_type,
            serializable_fields(component_type),
            functools.partial(ComponentPool, component_type),
        )
        self._types.append(data)
        return data

    def _find_name(self, name: str) -> ComponentTypeData | None:
        return next((t for t in self._types if t.name == name), None)

    def _find_type(self, component_type: type) -> ComponentTypeData | None:
        return next((t for t in self._types if t.component_type is component_type), None)

    def _find(self, key: str | type) -> ComponentTypeData | None:
        return self._find_name(key) if isinstance(key, str) else self._find_type(key)

    def is_registered(self, key: str | type) -> bool:
        return self._find(key) is not None

    def get(self, key: str | type) -> ComponentTypeData:
        data = self._find(key)
        if data is None:
            raise KeyError(f"component {key!r} is not registered")
        return data

    def name_of(self, component_type: type) -> str | None:
        data = self._find_type(component_type)
        return None if data is None else data.name

    def create_pool(self, component_type: type) -> ComponentPool | None:
        data = self._find_type(component_type)
        return None if data is None else data.pool_factory()

    def create_pools(self) -> dict[type, ComponentPool]:
        return {t.component_type: t.pool_factory() for t in self._types}

    def types(self) -> tuple[ComponentTypeData, ...]:
        return tuple(self._types)


def dump_component_data(types: Iterable[ComponentTypeData], stream: TextIO) -> None:
    """Write each type's name followed by its fields in declaration order."""
    for data in types:
        stream.write(f"{data.name}\n")
        for info in sorted(data.fields.values(), key=lambda f: f.index):
            stream.write(f"{info.index} {info.name} <{info.value_type.__name__}>\n")
        stream.write("\n")