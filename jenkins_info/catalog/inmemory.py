"""In-memory implementation of EntityLookup."""

from collections.abc import Iterable

from jenkins_info.catalog.lookup import EntityLookup
from jenkins_info.catalog.models import Entity, EntityRef


class InMemoryEntityLookup(EntityLookup):
    """In-memory implementation of EntityLookup for testing and development.

    Entities are keyed by their reference; adding an entity with an
    existing reference replaces it.
    """

    def __init__(self, entities: Iterable[Entity] | None = None) -> None:
        self._entities: dict[EntityRef, Entity] = {}
        for entity in entities or ():
            self.add_entity(entity)

    def add_entity(self, entity: Entity) -> EntityRef:
        """Store an entity, returning its reference."""
        ref = entity.ref
        self._entities[ref] = entity
        return ref

    def remove_entity(self, entity_ref: EntityRef) -> bool:
        """Remove an entity, returning whether it was present."""
        return self._entities.pop(entity_ref, None) is not None

    async def get_entity_by_name(self, entity_ref: EntityRef) -> Entity | None:
        """Get an entity by reference."""
        return self._entities.get(entity_ref)
