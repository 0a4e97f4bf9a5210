"""Root settings model for jenkins-info configuration."""

import re
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from jenkins_info.config.models.jenkins import JenkinsConfig
from jenkins_info.config.models.observability import ObservabilityConfig

ProviderType = Literal["default", "dummy"]

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

# TOML config consumed by TomlConfigSettingsSource
_toml_config: dict[str, Any] = {}


def set_toml_config(config: dict[str, Any]) -> None:
    """Set the TOML configuration to be used by Settings."""
    global _toml_config
    _toml_config = config


def to_field_names(value: Any) -> Any:
    """Rewrite camelCase mapping keys to snake_case, recursing into lists.

    Environment overrides arrive keyed by field name (``api_key``), so TOML
    keys must use the same spelling for the later source to replace them.
    """
    if isinstance(value, dict):
        return {
            _CAMEL_BOUNDARY.sub("_", key).lower(): to_field_names(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [to_field_names(item) for item in value]
    return value


class TomlConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings source that reads the loaded TOML configuration by field name."""

    def get_field_value(
        self, field: Any, field_name: str  # noqa: ARG002
    ) -> tuple[Any, str, bool]:
        value = to_field_names(_toml_config.get(field_name))
        return value, field_name, value is not None

    def __call__(self) -> dict[str, Any]:
        return to_field_names(_toml_config)


class Settings(BaseSettings):
    """Root configuration object.

    Configuration is loaded in this order:
    1. Pydantic model defaults (in code)
    2. config/default.toml (base configuration)
    3. config/{JENKINS_INFO_ENV}.toml (environment overrides)
    4. JENKINS_INFO_* environment variables (runtime overrides)
    """

    model_config = SettingsConfigDict(
        env_prefix="JENKINS_INFO_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="jenkins-info", description="Application name for logging")
    debug: bool = Field(default=False, description="Enable debug mode")
    provider: ProviderType = Field(
        default="default",
        description="Provider variant: 'default' reads config, 'dummy' is canned",
    )

    jenkins: JenkinsConfig = Field(
        default_factory=JenkinsConfig,
        description="Jenkins instance configuration",
    )
    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Observability configuration",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include TOML config.

        Priority order (highest to lowest):
        1. init_settings (constructor arguments)
        2. env_settings (JENKINS_INFO_* environment variables)
        3. toml_settings (config/*.toml files)
        4. (defaults from model)
        """
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )
