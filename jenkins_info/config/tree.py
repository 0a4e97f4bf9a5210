"""Read-only hierarchical access to configuration data.

ConfigTree wraps the nested mappings produced by the TOML loader (or by the
Settings model) and exposes typed accessors. Keys may be dotted to walk
into subtrees, and every error reports the full dotted path from the root:

    tree = ConfigTree({"jenkins": {"instances": [{"name": "ci"}]}})
    tree.get_config("jenkins").get_config_array("instances")[0].get_string("name")
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from jenkins_info.config.settings import Settings

_MISSING = object()


class ConfigError(Exception):
    """Base exception for configuration access errors."""

    def __init__(self, message: str, key: str) -> None:
        super().__init__(message)
        self.message = message
        self.key = key


class MissingConfigError(ConfigError):
    """A required key is absent or empty."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Missing required config value at '{key}'", key)


class ConfigTypeError(ConfigError):
    """A key holds a value of the wrong type."""

    def __init__(self, key: str, expected: str, value: Any) -> None:
        super().__init__(
            f"Invalid type in config for key '{key}', "
            f"expected {expected}, got {type(value).__name__}",
            key,
        )
        self.expected = expected


class ConfigTree:
    """Read-only view over a nested configuration mapping."""

    def __init__(self, data: Mapping[str, Any] | None = None, prefix: str = "") -> None:
        self._data: Mapping[str, Any] = data or {}
        self._prefix = prefix

    @classmethod
    def from_settings(cls, settings: "Settings") -> "ConfigTree":
        """Build a tree from the sections of Settings the resolver reads."""
        return cls({"jenkins": settings.jenkins.to_tree_dict()})

    def __repr__(self) -> str:
        return f"ConfigTree(prefix={self._prefix!r}, keys={sorted(self._data)!r})"

    @property
    def prefix(self) -> str:
        """Dotted path of this subtree from the root, empty for the root."""
        return self._prefix

    def keys(self) -> list[str]:
        return list(self._data.keys())

    def has(self, key: str) -> bool:
        return self._lookup(key) is not _MISSING

    def get(self, key: str) -> Any:
        """Return the raw value at key, or None when absent."""
        value = self._lookup(key)
        return None if value is _MISSING else value

    def get_config(self, key: str) -> "ConfigTree":
        tree = self.get_optional_config(key)
        if tree is None:
            raise MissingConfigError(self._full_key(key))
        return tree

    def get_optional_config(self, key: str) -> "ConfigTree | None":
        value = self._lookup(key)
        if value is _MISSING or value is None:
            return None
        if not isinstance(value, Mapping):
            raise ConfigTypeError(self._full_key(key), "object", value)
        return ConfigTree(value, self._full_key(key))

    def get_config_array(self, key: str) -> list["ConfigTree"]:
        """Return the subtrees of an array of objects; empty when absent."""
        value = self._lookup(key)
        if value is _MISSING or value is None:
            return []
        full_key = self._full_key(key)
        if not isinstance(value, list | tuple):
            raise ConfigTypeError(full_key, "object-array", value)

        trees = []
        for index, item in enumerate(value):
            item_key = f"{full_key}[{index}]"
            if not isinstance(item, Mapping):
                raise ConfigTypeError(item_key, "object", item)
            trees.append(ConfigTree(item, item_key))
        return trees

    def get_string(self, key: str) -> str:
        value = self.get_optional_string(key)
        if not value:
            raise MissingConfigError(self._full_key(key))
        return value

    def get_optional_string(self, key: str) -> str | None:
        value = self._lookup(key)
        if value is _MISSING or value is None:
            return None
        if not isinstance(value, str):
            raise ConfigTypeError(self._full_key(key), "string", value)
        return value

    def _full_key(self, key: str) -> str:
        return f"{self._prefix}.{key}" if self._prefix else key

    def _lookup(self, key: str) -> Any:
        current: Any = self._data
        walked = self._prefix
        for part in key.split("."):
            if not isinstance(current, Mapping):
                raise ConfigTypeError(walked, "object", current)
            if part not in current:
                return _MISSING
            current = current[part]
            walked = f"{walked}.{part}" if walked else part
        return current
