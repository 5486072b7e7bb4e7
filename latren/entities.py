"""Entities and the manager that owns their components."""

from __future__ import annotations

import itertools
import operator
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Union

from latren.componentpool import ComponentMemoryManager
from latren.components import Component, Transform
from latren.registry import ComponentRegistry

ComponentKey = Union[str, type]


@dataclass
class EntityData:
    """The name of an entity and the component types it holds."""

    name: str
    components: set[type] = field(default_factory=set)


class Entity:
    """A handle to an entity inside an ``EntityManager``."""

    __slots__ = ("manager", "index")

    def __init__(self, manager: EntityManager, index: int) -> None:
        self.manager = manager
        self.index = index

    def __index__(self) -> int:
        return self.index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.manager is other.manager and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self.manager), self.index))

    def __repr__(self) -> str:
        return f"Entity({self.index})"

    def add_component(self, component_type: ComponentKey) -> Component:
        return self.manager.add_component(self.index, component_type)

    def remove_component(self, component_type: ComponentKey) -> None:
        self.manager.destroy_component(self.index, component_type)

    def get_component(self, component_type: ComponentKey) -> Component:
        return self.manager.get_component(self.index, component_type)

    def has_component(self, component_type: ComponentKey) -> bool:
        resolved = self.manager._resolve(component_type)
        return resolved in self.manager.entity_data(self.index).components

    def transform(self) -> Transform:
        return self.get_component(Transform)

    def name(self) -> str:
        return self.manager.entity_data(self.index).name

    def destroy(self) -> None:
        self.manager.destroy_entity(self.index)


class EntityManager:
    """Creates entities and drives the lifecycle of their components."""

    def __init__(self, registry: ComponentRegistry | None = None) -> None:
        self.registry = registry if registry is not None else ComponentRegistry()
        self.memory = ComponentMemoryManager()
        self._entities: dict[int, EntityData] = {}
        self._names: dict[str, int] = {}
        self._ids = itertools.count()

    def setup(self) -> None:
        """Create a pool for every registered component type."""
        self.memory.move_pools(self.registry.create_pools())

    def start_all(self) -> None:
        for component in self.memory.iter_components():
            if not component.has_started():
                component.run_start()

    def update_all(self) -> None:
        for component in self.memory.iter_components():
            component.run_update()

    def fixed_update_all(self) -> None:
        for component in self.memory.iter_components():
            component.run_fixed_update()

    def _resolve(self, component_type: ComponentKey) -> type:
        if isinstance(component_type, str):
            return self.registry.get(component_type).component_type
        return component_type

    def create_entity(self, name: str = "") -> Entity:
        """Create an entity that starts out with a Transform."""
        entity = Entity(self, next(self._ids))
        self._entities[entity.index] = EntityData(name)
        if name:
            self._names[name] = entity.index
        entity.add_component(Transform)
        return entity

    def named_entity(self, name: str) -> Entity:
        try:
            return Entity(self, self._names[name])
        except KeyError:
            raise KeyError(f"no entity named {name!r}") from None

    def has_named_entity(self, name: str) -> bool:
        return bool(name) and name in self._names

    def entity_table(self) -> Mapping[int, EntityData]:
        return MappingProxyType(self._entities)

    def entity_data(self, entity: int | Entity) -> EntityData:
        index = operator.index(entity)
        try:
            return self._entities[index]
        except KeyError:
            raise KeyError(f"entity {index} does not exist") from None

    def add_component(self, entity: int | Entity, component_type: ComponentKey) -> Component:
        index = operator.index(entity)
        data = self.entity_data(index)
        resolved = self._resolve(component_type)
        component = self.memory.allocate(index, resolved)
        component.parent = Entity(self, index)
        data.components.add(resolved)
        return component

    def get_component(self, entity: int | Entity, component_type: ComponentKey) -> Component:
        return self.memory.pool(self._resolve(component_type)).get(operator.index(entity))

    def destroy_component(self, entity: int | Entity, component_type: ComponentKey) -> None:
        index = operator.index(entity)
        resolved = self._resolve(component_type)
        self.get_component(index, resolved).run_delete()
        self.memory.destroy(index, resolved)
        self.entity_data(index).components.discard(resolved)

    def destroy_entity(self, entity: int | Entity) -> None:
        """Delete an entity and its components; unknown entities are ignored."""
        index = operator.index(entity)
        data = self._entities.get(index)
        if data is None:
            return
        for component_type in list(data.components):
            self.get_component(index, component_type).run_delete()
            self.memory.destroy(index, component_type)
        if data.name:
            self._names.pop(data.name, None)
        del self._entities[index]

    def clear_everything(self) -> None:
        for component in self.memory.iter_components():
            component.run_delete()
        for pool in self.memory.pools().values():
            pool.clear()
        self._entities.clear()
        self._names.clear()