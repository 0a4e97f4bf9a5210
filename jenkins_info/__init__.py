"""Resolve the Jenkins instance and job backing a catalog entity."""

from jenkins_info.catalog import Entity, EntityLookup, EntityRef, InMemoryEntityLookup
from jenkins_info.config import ConfigTree
from jenkins_info.providers import (
    DefaultJenkinsInfoProvider,
    DummyJenkinsInfoProvider,
    JenkinsInfo,
    JenkinsInfoProvider,
    ResolutionError,
    create_provider,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigTree",
    "DefaultJenkinsInfoProvider",
    "DummyJenkinsInfoProvider",
    "Entity",
    "EntityLookup",
    "EntityRef",
    "InMemoryEntityLookup",
    "JenkinsInfo",
    "JenkinsInfoProvider",
    "ResolutionError",
    "create_provider",
]
