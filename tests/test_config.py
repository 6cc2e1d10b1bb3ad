"""Integration tests for configuration module."""

import warnings

import pytest

from hnhiring.config import (
    AppConfig,
    ConfigurationError,
    check_for_warnings,
    load_config,
    load_environment_config,
    validate_config_dict,
)
from hnhiring.extraction.builder import DEFAULT_PERMALINK_BASE_URL

from tests.helpers.comment_fixtures import FIXTURES_DIR


class TestConfigurationLoading:
    """Test configuration loading from YAML files."""

    def test_load_valid_config(self, clean_env):
        """Test loading a valid configuration file."""
        app_config, env_config = load_config(FIXTURES_DIR / "valid_config.yaml")

        extra = app_config.tech_dictionary.extra_entries
        assert [entry.label for entry in extra] == ["Elixir", "Clojure"]
        assert extra[0].aliases == ["elixir", "phoenix"]
        assert app_config.permalink_base_url == "https://hn.example.com/item?id="
        assert app_config.logging.level == "DEBUG"
        assert app_config.logging.format == "json"
        assert env_config.environment == "local"

    def test_valid_config_builds_dictionary(self, clean_env):
        app_config, _ = load_config(FIXTURES_DIR / "valid_config.yaml")

        dictionary = app_config.build_tech_dictionary()

        assert dictionary.alias_lookup["phoenix"] == "Elixir"
        assert dictionary.alias_lookup["clojure"] == "Clojure"
        assert dictionary.alias_lookup["react"] == "React"

    def test_valid_config_emits_no_warnings(self, clean_env):
        with warnings.catch_warnings():
            warnings.simplefilter("error", UserWarning)
            load_config(FIXTURES_DIR / "valid_config.yaml")

    def test_defaults_without_config_file(self, clean_env):
        """No file in any default location means built-in defaults."""
        app_config, env_config = load_config()

        assert app_config == AppConfig()
        assert app_config.permalink_base_url == DEFAULT_PERMALINK_BASE_URL
        assert app_config.tech_dictionary.include_defaults is True
        assert app_config.logging.level == "INFO"
        assert app_config.logging.format == "key-value"
        assert env_config.config_path is None

    def test_finds_config_in_working_directory(self, clean_env):
        (clean_env / "hnhiring.yaml").write_text("logging:\n  level: WARNING\n")

        app_config, _ = load_config()

        assert app_config.logging.level == "WARNING"

    def test_finds_config_in_config_directory(self, clean_env):
        (clean_env / "config").mkdir()
        (clean_env / "config" / "hnhiring.yaml").write_text("logging:\n  format: json\n")

        app_config, _ = load_config()

        assert app_config.logging.format == "json"

    def test_config_path_from_environment(self, clean_env, monkeypatch):
        monkeypatch.setenv("HNHIRING_CONFIG", str(FIXTURES_DIR / "valid_config.yaml"))

        app_config, env_config = load_config()

        assert app_config.logging.level == "DEBUG"
        assert env_config.config_path == str(FIXTURES_DIR / "valid_config.yaml")

    def test_explicit_path_wins_over_environment(self, clean_env, monkeypatch):
        monkeypatch.setenv("HNHIRING_CONFIG", str(FIXTURES_DIR / "valid_config.yaml"))
        explicit = clean_env / "explicit.yaml"
        explicit.write_text("logging:\n  level: ERROR\n")

        app_config, _ = load_config(explicit)

        assert app_config.logging.level == "ERROR"

    def test_config_file_not_found(self, clean_env):
        """Test error when an explicitly requested file doesn't exist."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(clean_env / "nonexistent.yaml")

        assert "not found" in str(exc_info.value).lower()
        assert "--config" in str(exc_info.value)

    def test_environment_config_file_not_found(self, clean_env, monkeypatch):
        monkeypatch.setenv("HNHIRING_CONFIG", str(clean_env / "missing.yaml"))

        with pytest.raises(ConfigurationError) as exc_info:
            load_config()

        assert "HNHIRING_CONFIG" in str(exc_info.value)

    def test_empty_file_means_defaults(self, clean_env):
        empty = clean_env / "empty.yaml"
        empty.write_text("")

        app_config, _ = load_config(empty)

        assert app_config == AppConfig()

    def test_invalid_yaml_syntax(self, clean_env):
        """Test error when YAML syntax is invalid."""
        invalid_yaml = clean_env / "invalid.yaml"
        invalid_yaml.write_text("tech_dictionary:\n  extra_entries:\n    - label: 'test\n  bad")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(invalid_yaml)

        assert "parse" in str(exc_info.value).lower()

    def test_top_level_must_be_mapping(self, clean_env):
        listing = clean_env / "list.yaml"
        listing.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(listing)

        assert "mapping" in str(exc_info.value)
        assert exc_info.value.errors == ["Got list"]


class TestConfigurationValidation:
    """Test configuration validation rules."""

    def test_invalid_config_lists_every_error(self, clean_env):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(FIXTURES_DIR / "invalid_config.yaml")

        error = exc_info.value
        assert error.message == "Configuration validation failed"
        assert len(error.errors) == 4
        joined = "\n".join(error.errors)
        assert "tech_dictionary -> extra_entries -> 0 -> label" in joined
        assert "tech_dictionary -> extra_entries -> 1 -> category" in joined
        assert "permalink_base_url" in joined
        assert "logging -> level" in joined

    def test_unknown_category_is_reported_as_invalid_value(self):
        config = {"tech_dictionary": {"extra_entries": [{"label": "Zig", "category": "systems"}]}}

        with pytest.raises(ConfigurationError) as exc_info:
            validate_config_dict(config)

        assert exc_info.value.errors[0].startswith(
            "Invalid value for 'tech_dictionary -> extra_entries -> 0 -> category'"
        )

    def test_missing_label(self):
        config = {"tech_dictionary": {"extra_entries": [{"category": "language"}]}}

        with pytest.raises(ConfigurationError) as exc_info:
            validate_config_dict(config)

        assert exc_info.value.errors == [
            "Missing required field: tech_dictionary -> extra_entries -> 0 -> label"
        ]

    def test_wrong_type(self):
        with pytest.raises(ConfigurationError) as exc_info:
            validate_config_dict({"permalink_base_url": 42})

        assert "expected string" in exc_info.value.errors[0]

    def test_permalink_base_url_is_trimmed(self):
        config = validate_config_dict({"permalink_base_url": "  https://example.com/?id=  "})

        assert config.permalink_base_url == "https://example.com/?id="

    def test_error_formatting(self):
        error = ConfigurationError(
            "Broken", errors=["first", "second"], suggestions=["fix it"]
        )

        assert str(error) == (
            "Broken\n\nValidation Errors:\n  1. first\n  2. second\n\nSuggestions:\n  - fix it"
        )
        assert error.errors == ["first", "second"]
        assert error.suggestions == ["fix it"]


class TestConfigurationWarnings:
    """Test non-fatal configuration warnings."""

    def test_alias_override_warns(self, clean_env):
        with pytest.warns(UserWarning, match="overrides the same alias of 'JavaScript'"):
            app_config, _ = load_config(FIXTURES_DIR / "alias_override_config.yaml")

        dictionary = app_config.build_tech_dictionary()
        assert dictionary.alias_lookup["node"] == "Node.js"
        assert dictionary.alias_lookup["js"] == "JavaScript"

    def test_alias_override_messages(self):
        config = {
            "tech_dictionary": {
                "extra_entries": [
                    {"label": "Node.js", "category": "backend", "aliases": ["node", "Deno"]}
                ]
            }
        }

        assert check_for_warnings(config) == [
            "Alias 'node' of 'Node.js' overrides the same alias of 'JavaScript'"
        ]

    def test_no_override_without_defaults(self):
        config = {
            "tech_dictionary": {
                "include_defaults": False,
                "extra_entries": [{"label": "Node.js", "category": "backend", "aliases": ["node"]}],
            }
        }

        assert check_for_warnings(config) == []

    def test_override_between_extra_entries(self):
        config = {
            "tech_dictionary": {
                "include_defaults": False,
                "extra_entries": [
                    {"label": "Elixir", "category": "language"},
                    {"label": "Elixir Phoenix", "category": "backend", "aliases": ["elixir"]},
                ],
            }
        }

        assert check_for_warnings(config) == [
            "Alias 'elixir' of 'Elixir Phoenix' overrides the same alias of 'Elixir'"
        ]

    def test_empty_dictionary_warns(self, clean_env):
        with pytest.warns(UserWarning, match="Technology dictionary is empty"):
            app_config, _ = load_config(FIXTURES_DIR / "empty_dictionary_config.yaml")

        assert len(app_config.build_tech_dictionary()) == 0

    @pytest.mark.parametrize("config", [{}, {"tech_dictionary": "none"}, {"tech_dictionary": {}}])
    def test_no_warnings(self, config):
        assert check_for_warnings(config) == []


class TestEnvironmentConfig:
    """Test environment variable loading."""

    def test_defaults(self, clean_env):
        env_config = load_environment_config()

        assert env_config.log_level is None
        assert env_config.log_format is None
        assert env_config.environment == "local"
        assert env_config.config_path is None

    def test_values_are_normalized(self, clean_env, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "JSON")
        monkeypatch.setenv("ENVIRONMENT", "production")

        env_config = load_environment_config()

        assert env_config.log_level == "DEBUG"
        assert env_config.log_format == "json"
        assert env_config.environment == "production"

    def test_empty_values_are_unset(self, clean_env, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "")
        monkeypatch.setenv("HNHIRING_CONFIG", "")

        env_config = load_environment_config()

        assert env_config.log_level is None
        assert env_config.config_path is None

    def test_invalid_values(self, clean_env, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        monkeypatch.setenv("LOG_FORMAT", "xml")

        with pytest.raises(ConfigurationError) as exc_info:
            load_environment_config()

        assert len(exc_info.value.errors) == 2
        assert "Invalid LOG_LEVEL: 'LOUD'" in exc_info.value.errors[0]
        assert "Invalid LOG_FORMAT: 'xml'" in exc_info.value.errors[1]

    def test_invalid_environment_fails_config_loading(self, clean_env, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigurationError):
            load_config()
