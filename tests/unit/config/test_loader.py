"""Unit tests for TOML configuration loader."""

import tomllib
from pathlib import Path

import pytest

from jenkins_info.config.loader import (
    deep_merge,
    get_config_dir,
    get_environment,
    load_config,
    load_toml,
)


class TestDeepMerge:
    """Tests for deep_merge function."""

    def test_merge_flat_dicts(self) -> None:
        """Flat dictionaries are merged correctly."""
        base = {"a": 1, "b": 2}
        override = {"b": 3, "c": 4}
        assert deep_merge(base, override) == {"a": 1, "b": 3, "c": 4}

    def test_merge_nested_dicts(self) -> None:
        """Nested dictionaries are merged recursively."""
        base = {"jenkins": {"baseUrl": "https://a/", "username": "u"}}
        override = {"jenkins": {"baseUrl": "https://b/"}}
        assert deep_merge(base, override) == {
            "jenkins": {"baseUrl": "https://b/", "username": "u"}
        }

    def test_lists_are_replaced(self) -> None:
        """Instance arrays in override replace, rather than extend, the base."""
        base = {"jenkins": {"instances": [{"name": "a"}, {"name": "b"}]}}
        override = {"jenkins": {"instances": [{"name": "c"}]}}
        assert deep_merge(base, override) == {"jenkins": {"instances": [{"name": "c"}]}}

    def test_base_unmodified(self) -> None:
        """Original base dictionary is not modified."""
        base = {"a": 1}
        deep_merge(base, {"b": 2})
        assert base == {"a": 1}

    def test_empty_override(self) -> None:
        """Empty override returns copy of base."""
        base = {"a": 1, "b": 2}
        assert deep_merge(base, {}) == base


class TestLoadToml:
    """Tests for load_toml function."""

    def test_load_valid_toml(self, tmp_path: Path) -> None:
        """Valid TOML file is loaded correctly."""
        toml_file = tmp_path / "test.toml"
        toml_file.write_text(
            '[jenkins]\nbaseUrl = "https://ci/"\n\n'
            '[[jenkins.instances]]\nname = "team-1"\n'
        )

        assert load_toml(toml_file) == {
            "jenkins": {"baseUrl": "https://ci/", "instances": [{"name": "team-1"}]}
        }

    def test_load_missing_file_raises(self, tmp_path: Path) -> None:
        """Missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_toml(tmp_path / "nonexistent.toml")

    def test_load_invalid_toml_raises(self, tmp_path: Path) -> None:
        """Invalid TOML syntax raises error."""
        invalid_file = tmp_path / "invalid.toml"
        invalid_file.write_text("invalid = [unclosed")

        with pytest.raises(tomllib.TOMLDecodeError):
            load_toml(invalid_file)


class TestGetEnvironment:
    """Tests for get_environment function."""

    def test_returns_env_var_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Returns JENKINS_INFO_ENV value when set."""
        monkeypatch.setenv("JENKINS_INFO_ENV", "production")
        assert get_environment() == "production"

    def test_defaults_to_development(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Defaults to 'development' when JENKINS_INFO_ENV not set."""
        monkeypatch.delenv("JENKINS_INFO_ENV", raising=False)
        assert get_environment() == "development"


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_uses_env_var_when_set(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Uses JENKINS_INFO_CONFIG_DIR when set."""
        config_dir = tmp_path / "custom_config"
        config_dir.mkdir()
        monkeypatch.setenv("JENKINS_INFO_CONFIG_DIR", str(config_dir))

        assert get_config_dir() == config_dir

    def test_raises_for_missing_env_dir(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Raises error when JENKINS_INFO_CONFIG_DIR doesn't exist."""
        monkeypatch.setenv("JENKINS_INFO_CONFIG_DIR", str(tmp_path / "missing"))

        with pytest.raises(FileNotFoundError):
            get_config_dir()

    def test_finds_config_in_parent_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Walks up from the working directory to find config/."""
        (tmp_path / "config").mkdir()
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.delenv("JENKINS_INFO_CONFIG_DIR", raising=False)
        monkeypatch.chdir(nested)

        assert get_config_dir() == tmp_path / "config"


class TestLoadConfig:
    """Tests for load_config function."""

    def test_loads_default_config(self, mock_toml_files, use_config_dir) -> None:
        """Loads default.toml configuration."""
        mock_toml_files({"default.toml": "app_name = 'test'\ndebug = false"})

        assert load_config() == {"app_name": "test", "debug": False}

    def test_merges_environment_config(
        self, mock_toml_files, use_config_dir, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Environment config overrides default config."""
        mock_toml_files({
            "default.toml": "[jenkins]\nbaseUrl = 'https://a/'\nusername = 'u'",
            "staging.toml": "[jenkins]\nbaseUrl = 'https://staging/'",
        })
        monkeypatch.setenv("JENKINS_INFO_ENV", "staging")

        assert load_config() == {
            "jenkins": {"baseUrl": "https://staging/", "username": "u"}
        }

    def test_missing_default_raises(self, use_config_dir) -> None:
        """Missing default.toml raises error."""
        with pytest.raises(FileNotFoundError, match="default.toml"):
            load_config()
