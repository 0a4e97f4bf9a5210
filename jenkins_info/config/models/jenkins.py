"""Jenkins instance configuration models.

Config files use camelCase keys (``baseUrl``, ``apiKey``); the TOML settings
source rewrites them to field names so that ``JENKINS_INFO_JENKINS__API_KEY``
style overrides land on the same key. Both spellings validate, the field
name taking precedence, and ``to_tree_dict`` writes camelCase back out.

Every field is optional here. Completeness is checked when an instance is
resolved, so that a missing credential surfaces as a resolution error
naming the instance rather than as a startup failure.
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, SecretStr


class JenkinsConnectionConfig(BaseModel):
    """Base URL and credentials for a Jenkins server."""

    model_config = ConfigDict(extra="forbid")

    base_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("base_url", "baseUrl"),
        serialization_alias="baseUrl",
        description="Jenkins base URL",
    )
    username: str | None = Field(
        default=None,
        description="User the API key belongs to",
    )
    api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("api_key", "apiKey"),
        serialization_alias="apiKey",
        description="Jenkins API token (prefer env var)",
    )

    def to_tree_dict(self) -> dict[str, Any]:
        """Plain camelCase mapping with the API key revealed."""
        data: dict[str, Any] = {}
        if self.base_url is not None:
            data["baseUrl"] = self.base_url
        if self.username is not None:
            data["username"] = self.username
        if self.api_key is not None:
            data["apiKey"] = self.api_key.get_secret_value()
        return data


class JenkinsInstanceConfig(JenkinsConnectionConfig):
    """An entry of ``jenkins.instances``."""

    name: str | None = Field(
        default=None,
        description="Instance name referenced by annotation prefixes",
    )

    def to_tree_dict(self) -> dict[str, Any]:
        data = super().to_tree_dict()
        if self.name is not None:
            data["name"] = self.name
        return data


class JenkinsConfig(JenkinsConnectionConfig):
    """The ``[jenkins]`` section.

    The flat fields describe a single unnamed default instance; ``instances``
    lists named ones, in lookup order.
    """

    instances: list[JenkinsInstanceConfig] = Field(
        default_factory=list,
        description="Named Jenkins instances",
    )

    def to_tree_dict(self) -> dict[str, Any]:
        data = super().to_tree_dict()
        data["instances"] = [instance.to_tree_dict() for instance in self.instances]
        return data
