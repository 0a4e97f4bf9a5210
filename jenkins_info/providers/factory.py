"""Provider selection from settings."""

from jenkins_info.catalog.lookup import EntityLookup
from jenkins_info.config import get_settings
from jenkins_info.config.settings import Settings
from jenkins_info.config.tree import ConfigTree
from jenkins_info.observability.logging import get_logger
from jenkins_info.providers.base import JenkinsInfoProvider
from jenkins_info.providers.default import DefaultJenkinsInfoProvider
from jenkins_info.providers.dummy import DummyJenkinsInfoProvider

logger = get_logger(__name__)


def create_provider(
    catalog: EntityLookup,
    settings: Settings | None = None,
    config: ConfigTree | None = None,
) -> JenkinsInfoProvider:
    """Create the provider variant named by ``settings.provider``.

    Args:
        catalog: Entity lookup used by the config-backed provider
        settings: Settings to use; loaded via get_settings() when omitted
        config: Config tree to resolve instances from; derived from
            settings when omitted
    """
    if settings is None:
        settings = get_settings()

    if settings.provider == "dummy":
        logger.info("jenkins_provider_created", provider="dummy")
        return DummyJenkinsInfoProvider()

    if config is None:
        config = ConfigTree.from_settings(settings)

    instances = config.get_config_array("jenkins.instances")
    logger.info(
        "jenkins_provider_created",
        provider="default",
        instances=[tree.get_optional_string("name") for tree in instances],
    )
    return DefaultJenkinsInfoProvider(catalog, config)
