"""Catalog entity models and entity reference helpers."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_NAMESPACE = "default"


class EntityRef(BaseModel):
    """Reference to a catalog entity by kind, namespace and name.

    The string form is ``kind:namespace/name`` with kind and namespace
    lower-cased, which is also how references are compared.
    """

    model_config = ConfigDict(frozen=True)

    kind: str = Field(..., min_length=1, description="Entity kind, e.g. Component")
    namespace: str = Field(default=DEFAULT_NAMESPACE, min_length=1, description="Entity namespace")
    name: str = Field(..., min_length=1, description="Entity name")

    def __str__(self) -> str:
        return f"{self.kind.lower()}:{self.namespace.lower()}/{self.name}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EntityRef):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))


def parse_entity_ref(
    ref: str,
    *,
    default_kind: str | None = None,
    default_namespace: str = DEFAULT_NAMESPACE,
) -> EntityRef:
    """Parse ``[kind:][namespace/]name`` into an EntityRef.

    Raises:
        ValueError: If the reference is malformed or has no kind
    """
    kind: str | None = default_kind
    namespace = default_namespace
    rest = ref.strip()

    if ":" in rest:
        kind, rest = rest.split(":", 1)
    if "/" in rest:
        namespace, rest = rest.split("/", 1)

    if not kind:
        raise ValueError(f"Entity reference '{ref}' has no kind and no default kind was given")
    if not namespace or not rest or ":" in rest or "/" in rest:
        raise ValueError(f"Malformed entity reference '{ref}'")

    return EntityRef(kind=kind, namespace=namespace, name=rest)


class EntityMetadata(BaseModel):
    """Entity metadata block."""

    name: str = Field(..., min_length=1, description="Entity name")
    namespace: str = Field(default=DEFAULT_NAMESPACE, description="Entity namespace")
    annotations: dict[str, str] = Field(
        default_factory=dict,
        description="Tool-specific string metadata",
    )


class Entity(BaseModel):
    """A catalog entity record."""

    kind: str = Field(..., min_length=1, description="Entity kind")
    metadata: EntityMetadata
    spec: dict[str, Any] = Field(default_factory=dict, description="Kind-specific spec")

    @property
    def ref(self) -> EntityRef:
        return EntityRef(
            kind=self.kind,
            namespace=self.metadata.namespace,
            name=self.metadata.name,
        )
