"""Per-type storage of components keyed by entity index."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping

from latren.components import Component


class ComponentPool:
    """Holds every component of one type, at most one per entity."""

    def __init__(self, component_type: type[Component]) -> None:
        self.component_type = component_type
        self._components: dict[int, Component] = {}

    def allocate(self, entity: int) -> Component:
        """Create a new component for ``entity``."""
        if entity in self._components:
            raise ValueError(
                f"entity {entity} already has a {self.component_type.__name__}"
            )
        component = self.component_type()
        self._components[entity] = component
        return component

    def destroy(self, entity: int) -> None:
        try:
            del self._components[entity]
        except KeyError:
            raise KeyError(
                f"entity {entity} has no {self.component_type.__name__}"
            ) from None

    def get(self, entity: int) -> Component:
        try:
            return self._components[entity]
        except KeyError:
            raise KeyError(
                f"entity {entity} has no {self.component_type.__name__}"
            ) from None

    def clear(self) -> None:
        self._components.clear()

    def __iter__(self) -> Iterator[Component]:
        return iter(list(self._components.values()))

    def __len__(self) -> int:
        return len(self._components)

    def __contains__(self, entity: object) -> bool:
        return entity in self._components


class ComponentMemoryManager:
    """All component pools, one per registered component type."""

    def __init__(self) -> None:
        self._pools: dict[type, ComponentPool] = {}

    def move_pools(self, pools: Mapping[type, ComponentPool]) -> None:
        self._pools = dict(pools)

    def pool(self, component_type: type) -> ComponentPool:
        try:
            return self._pools[component_type]
        except KeyError:
            raise KeyError(f"no pool for {component_type.__name__}") from None

    def pools(self) -> Mapping[type, ComponentPool]:
        return MappingProxyType(self._pools)

    def allocate(self, entity: int, component_type: type) -> Component:
        return self.pool(component_type).allocate(entity)

    def destroy(self, entity: int, component_type: type) -> None:
        self.pool(component_type).destroy(entity)

    def iter_components(self) -> Iterator[Component]:
        """Every component in every pool."""
        for pool in list(self._pools.values()):
            yield from pool