"""Jenkins info provider interface, result model and error types.

This module provides the core types shared by the provider variants:
- JenkinsInfo: Where and how to query Jenkins for an entity
- JenkinsInfoProvider: Interface implemented by each variant
- Error types for each way resolution can fail
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field

from jenkins_info.catalog.models import EntityRef


class JenkinsInfo(BaseModel):
    """Connection info for the Jenkins job backing an entity."""

    model_config = ConfigDict(populate_by_name=True)

    base_url: str = Field(..., alias="baseUrl", description="Jenkins base URL")
    headers: dict[str, str] | None = Field(
        default=None, description="Headers to send with each Jenkins request"
    )
    job_name: str = Field(..., alias="jobName", description="Job slug within the instance")


class JenkinsInfoProvider(ABC):
    """Resolves the Jenkins instance and job for a catalog entity."""

    @abstractmethod
    async def get_instance(
        self,
        entity_ref: EntityRef,
        job_name: str | None = None,
    ) -> JenkinsInfo:
        """Get Jenkins info for an entity.

        Args:
            entity_ref: The entity to get the info about
            job_name: A specific job, when the caller knows which one it wants

        Raises:
            ResolutionError: If the entity cannot be mapped to an instance
        """
        pass


# ============================================================================
# Error Types
# ============================================================================


class ResolutionError(Exception):
    """Base exception for Jenkins info resolution errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class EntityNotFoundError(ResolutionError):
    """Raised when the entity reference does not resolve."""

    def __init__(self, entity_ref: EntityRef) -> None:
        super().__init__(f"Couldn't find entity with name: {entity_ref}")
        self.entity_ref = entity_ref


class AnnotationMissingError(ResolutionError):
    """Raised when the entity has no Jenkins annotation."""

    def __init__(self, entity_ref: EntityRef, annotation: str) -> None:
        super().__init__(
            f"Couldn't find jenkins annotation ({annotation}) "
            f"on entity with name: {entity_ref}"
        )
        self.entity_ref = entity_ref
        self.annotation = annotation


class NoDefaultInstanceError(ResolutionError):
    """Raised when no default instance is configured."""

    def __init__(self, default_name: str) -> None:
        super().__init__(
            "Couldn't find a default jenkins instance in the config. "
            f"Either configure an instance with name {default_name} "
            "or add a prefix to your annotation value."
        )


class NamedInstanceNotFoundError(ResolutionError):
    """Raised when a named instance is absent from jenkins.instances."""

    def __init__(self, instance_name: str) -> None:
        super().__init__(
            f"Couldn't find a jenkins instance in the config with name {instance_name}"
        )
        self.instance_name = instance_name


class ConfigFieldMissingError(ResolutionError):
    """Raised when the resolved instance lacks baseUrl, username or apiKey."""

    def __init__(self, field: str, instance_name: str, key: str) -> None:
        super().__init__(
            f"Jenkins instance '{instance_name}' is missing required config value "
            f"'{field}' (at '{key}')"
        )
        self.field = field
        self.instance_name = instance_name
        self.key = key
