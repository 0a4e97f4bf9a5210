"""Catalog entities and the lookup interface the resolver reads them through."""

from jenkins_info.catalog.inmemory import InMemoryEntityLookup
from jenkins_info.catalog.lookup import EntityLookup
from jenkins_info.catalog.models import (
    DEFAULT_NAMESPACE,
    Entity,
    EntityMetadata,
    EntityRef,
    parse_entity_ref,
)

__all__ = [
    "DEFAULT_NAMESPACE",
    "Entity",
    "EntityLookup",
    "EntityMetadata",
    "EntityRef",
    "InMemoryEntityLookup",
    "parse_entity_ref",
]
