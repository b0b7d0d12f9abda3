"""Entity identifiers and component storage for the entity-component system."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

T = TypeVar("T")

Entity = int

MAX_ENTITIES: int = 10000
"""Largest number of entities that may exist at once."""

INVALID_ENTITY: Entity = 2**32 - 2
"""Identifier that never names a living entity."""

MAX_COMPONENTS: int = 32
"""Largest number of component types that may be registered."""


class ECSError(RuntimeError):
    """Raised when the entity-component system is used incorrectly."""


class ComponentArray(Generic[T]):
    """Densely packed components of one type, indexed by entity."""

    def __init__(self) -> None:
        self._components: list[T] = []
        self._entities: list[Entity] = []
        self._index: dict[Entity, int] = {}

    def __len__(self) -> int:
        return len(self._components)

    def __contains__(self, entity: object) -> bool:
        return entity in self._index

    def insert(self, entity: Entity, component: T) -> None:
        """Attach a component to an entity that has none of this type."""
        if entity in self._index:
            raise ECSError(f"component added to entity {entity} more than once")
        if len(self._components) >= MAX_ENTITIES:
            raise ECSError("component array is full")
        self._index[entity] = len(self._components)
        self._entities.append(entity)
        self._components.append(component)

    def remove(self, entity: Entity) -> None:
        """Detach an entity's component, moving the last one into its slot."""
        try:
            removed = self._index.pop(entity)
        except KeyError:
            raise ECSError(f"removing non-existent component of entity {entity}") from None
        last_component = self._components.pop()
        last_entity = self._entities.pop()
        if removed < len(self._components):
            self._components[removed] = last_component
            self._entities[removed] = last_entity
            self._index[last_entity] = removed

    def get(self, entity: Entity) -> T:
        """The component attached to an entity."""
        try:
            return self._components[self._index[entity]]
        except KeyError:
            raise ECSError(f"retrieving non-existent component of entity {entity}") from None

    def entity_destroyed(self, entity: Entity) -> None:
        """Drop the entity's component if it has one."""
        if entity in self._index:
            self.remove(entity)


class ComponentManager:
    """Registry of component types and their storage arrays."""

    def __init__(self) -> None:
        self._types: dict[type, int] = {}
        self._arrays: dict[type, ComponentArray[Any]] = {}

    def _array(self, component_type: type) -> ComponentArray[Any]:
        try:
            return self._arrays[component_type]
        except KeyError:
            raise ECSError(
                f"component {component_type.__name__} not registered before use"
            ) from None

    def register_component(self, component_type: type) -> int:
        """Register a component type and return its numeric id."""
        if component_type in self._types:
            raise ECSError(
                f"registering component type {component_type.__name__} more than once"
            )
        if len(self._types) >= MAX_COMPONENTS:
            raise ECSError("too many component types registered")
        type_id = len(self._types)
        self._types[component_type] = type_id
        self._arrays[component_type] = ComponentArray()
        return type_id

    def get_component_type(self, component_type: type) -> int:
        """The numeric id a component type was registered with."""
        try:
            return self._types[component_type]
        except KeyError:
            raise ECSError(
                f"component {component_type.__name__} not registered before use"
            ) from None

    def add_component(self, entity: Entity, component: Any) -> None:
        """Attach a component, stored under its own type."""
        self._array(type(component)).insert(entity, component)

    def remove_component(self, entity: Entity, component_type: type) -> None:
        self._array(component_type).remove(entity)

    def get_component(self, entity: Entity, component_type: type) -> Any:
        return self._array(component_type).get(entity)

    def entity_destroyed(self, entity: Entity) -> None:
        """Drop every component the entity has."""
        for array in self._arrays.values():
            array.entity_destroyed(entity)