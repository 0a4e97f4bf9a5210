"""Configuration loading for jenkins-info.

Configuration is loaded from TOML files with environment variable overrides.

Usage:
    from jenkins_info.config import get_config_tree, get_settings

    settings = get_settings()
    jenkins = get_config_tree().get_config("jenkins")
"""

from functools import lru_cache

from jenkins_info.config.loader import load_config
from jenkins_info.config.settings import Settings, set_toml_config
from jenkins_info.config.tree import (
    ConfigError,
    ConfigTree,
    ConfigTypeError,
    MissingConfigError,
)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the singleton settings instance.

    Configuration is loaded in this order:
    1. Pydantic model defaults (in code)
    2. config/default.toml (base configuration)
    3. config/{JENKINS_INFO_ENV}.toml (environment overrides)
    4. JENKINS_INFO_* environment variables (runtime overrides)

    The result is cached for the lifetime of the process.
    Call `reload_settings()` to reload configuration.
    """
    set_toml_config(load_config())
    return Settings()


def get_config_tree() -> ConfigTree:
    """ConfigTree view of the current settings."""
    return ConfigTree.from_settings(get_settings())


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


__all__ = [
    "ConfigError",
    "ConfigTree",
    "ConfigTypeError",
    "MissingConfigError",
    "Settings",
    "get_config_tree",
    "get_settings",
    "reload_settings",
]
