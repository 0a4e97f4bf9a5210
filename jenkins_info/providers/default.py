"""Config-backed Jenkins info provider.

Reads the Jenkins annotation off an entity and maps it to connection
settings in the ``jenkins`` config section. The annotation value has the
form ``[instanceName:]jobSlug``:

    jenkins.io/job-slug: team-1:department-A/project-foo
        -> instance "team-1", job "department-A/project-foo"
    jenkins.io/job-slug: project-bar
        -> default instance, job "project-bar"

The default instance is either the entry named ``default`` in
``jenkins.instances`` or the flat ``jenkins.baseUrl/username/apiKey`` fields.
"""

import base64

from jenkins_info.catalog.lookup import EntityLookup
from jenkins_info.catalog.models import Entity, EntityRef
from jenkins_info.config.tree import ConfigTree
from jenkins_info.observability.logging import get_logger
from jenkins_info.providers.base import (
    AnnotationMissingError,
    ConfigFieldMissingError,
    EntityNotFoundError,
    JenkinsInfo,
    JenkinsInfoProvider,
    NamedInstanceNotFoundError,
    NoDefaultInstanceError,
)

logger = get_logger(__name__)

OLD_JENKINS_ANNOTATION = "jenkins.io/github-folder"
NEW_JENKINS_ANNOTATION = "jenkins.io/job-slug"
DEFAULT_JENKINS_NAME = "default"

CONNECTION_FIELDS = ("baseUrl", "username", "apiKey")


def split_job_annotation(value: str) -> tuple[str | None, str]:
    """Split ``[instanceName:]jobName`` on the first colon.

    Returns:
        (instance_name, job_name); instance_name is None without a colon
    """
    instance_name, sep, job_name = value.partition(":")
    if not sep:
        return None, value
    return instance_name, job_name


def encode_basic_auth(username: str, api_key: str) -> str:
    """Build an HTTP Basic Authorization value.

    Each character contributes its low 8 bits, so ASCII credentials encode
    exactly as they would under UTF-8.
    """
    raw = bytes(ord(char) & 0xFF for char in f"{username}:{api_key}")
    return "Basic " + base64.b64encode(raw).decode("ascii")


class DefaultJenkinsInfoProvider(JenkinsInfoProvider):
    """Use default config and annotations.

    Falls back through the deprecated annotation and config schemes.
    """

    def __init__(self, catalog: EntityLookup, config: ConfigTree) -> None:
        self._catalog = catalog
        self._config = config

    async def get_instance(
        self,
        entity_ref: EntityRef,
        job_name: str | None = None,
    ) -> JenkinsInfo:
        entity = await self._catalog.get_entity_by_name(entity_ref)
        if entity is None:
            logger.warning("jenkins_entity_not_found", entity_ref=str(entity_ref))
            raise EntityNotFoundError(entity_ref)

        annotation_value = self.get_entity_annotation_value(entity)
        if not annotation_value:
            logger.warning("jenkins_annotation_missing", entity_ref=str(entity_ref))
            raise AnnotationMissingError(entity_ref, NEW_JENKINS_ANNOTATION)

        jenkins_name, annotated_job_name = split_job_annotation(annotation_value)
        instance_config = self.get_instance_config(jenkins_name, self._config)
        instance_name = jenkins_name or DEFAULT_JENKINS_NAME

        values: dict[str, str] = {}
        for field in CONNECTION_FIELDS:
            value = instance_config.get_optional_string(field)
            if not value:
                key = f"{instance_config.prefix}.{field}" if instance_config.prefix else field
                raise ConfigFieldMissingError(field, instance_name, key)
            values[field] = value

        logger.debug(
            "jenkins_instance_resolved",
            entity_ref=str(entity_ref),
            instance=instance_name,
            job_name=annotated_job_name,
            requested_job_name=job_name,
            base_url=values["baseUrl"],
        )

        return JenkinsInfo(
            base_url=values["baseUrl"],
            headers={
                "Authorization": encode_basic_auth(values["username"], values["apiKey"]),
            },
            job_name=annotated_job_name,
        )

    @staticmethod
    def get_entity_annotation_value(entity: Entity) -> str | None:
        """First non-empty Jenkins annotation, legacy key first."""
        annotations = entity.metadata.annotations
        for key in (OLD_JENKINS_ANNOTATION, NEW_JENKINS_ANNOTATION):
            value = annotations.get(key)
            if value:
                return value
        return None

    @staticmethod
    def get_instance_config(jenkins_name: str | None, root_config: ConfigTree) -> ConfigTree:
        """Find the config node for a named or default instance."""
        jenkins_config = root_config.get_optional_config("jenkins") or ConfigTree(prefix="jenkins")

        if not jenkins_name or jenkins_name == DEFAULT_JENKINS_NAME:
            # either the entry named "default" in jenkins.instances
            # or the flat jenkins.baseUrl/username/apiKey fields
            named_instance_config = _find_named_instance(jenkins_config, DEFAULT_JENKINS_NAME)
            if named_instance_config is not None:
                return named_instance_config

            if not all(jenkins_config.get_optional_string(field) for field in CONNECTION_FIELDS):
                raise NoDefaultInstanceError(DEFAULT_JENKINS_NAME)

            return jenkins_config

        named_instance_config = _find_named_instance(jenkins_config, jenkins_name)
        if named_instance_config is None:
            raise NamedInstanceNotFoundError(jenkins_name)
        return named_instance_config


def _find_named_instance(jenkins_config: ConfigTree, name: str) -> ConfigTree | None:
    for instance_config in jenkins_config.get_config_array("instances"):
        if instance_config.get_optional_string("name") == name:
            return instance_config
    return None
