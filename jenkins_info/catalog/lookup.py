"""EntityLookup abstract interface."""

from abc import ABC, abstractmethod

from jenkins_info.catalog.models import Entity, EntityRef


class EntityLookup(ABC):
    """Read-only access to catalog entities."""

    @abstractmethod
    async def get_entity_by_name(self, entity_ref: EntityRef) -> Entity | None:
        """Get an entity by reference, or None if it does not exist."""
        pass
