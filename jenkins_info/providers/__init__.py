"""Jenkins info providers.

A provider maps a catalog entity to the Jenkins instance and job to query:

- DefaultJenkinsInfoProvider: resolves from entity annotations and config
- DummyJenkinsInfoProvider: canned info for local development

Use create_provider() to pick one from settings.
"""

from jenkins_info.providers.base import (
    AnnotationMissingError,
    ConfigFieldMissingError,
    EntityNotFoundError,
    JenkinsInfo,
    JenkinsInfoProvider,
    NamedInstanceNotFoundError,
    NoDefaultInstanceError,
    ResolutionError,
)
from jenkins_info.providers.default import (
    DEFAULT_JENKINS_NAME,
    NEW_JENKINS_ANNOTATION,
    OLD_JENKINS_ANNOTATION,
    DefaultJenkinsInfoProvider,
    encode_basic_auth,
    split_job_annotation,
)
from jenkins_info.providers.dummy import DummyJenkinsInfoProvider
from jenkins_info.providers.factory import create_provider

__all__ = [
    # Models
    "JenkinsInfo",
    "JenkinsInfoProvider",
    # Errors
    "ResolutionError",
    "EntityNotFoundError",
    "AnnotationMissingError",
    "NoDefaultInstanceError",
    "NamedInstanceNotFoundError",
    "ConfigFieldMissingError",
    # Providers
    "DefaultJenkinsInfoProvider",
    "DummyJenkinsInfoProvider",
    "create_provider",
    # Helpers
    "DEFAULT_JENKINS_NAME",
    "NEW_JENKINS_ANNOTATION",
    "OLD_JENKINS_ANNOTATION",
    "encode_basic_auth",
    "split_job_annotation",
]
