"""Configuration loader for the hiring-thread parser."""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml
from pydantic import ValidationError

from hnhiring.logging import get_logger

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .models import AppConfig
from .validators import check_for_warnings, emit_warnings

logger = get_logger(__name__, component="config")

CONFIG_ENV_VAR = "HNHIRING_CONFIG"
DEFAULT_CONFIG_CANDIDATES = (
    Path("hnhiring.yaml"),
    Path("config") / "hnhiring.yaml",
)


def load_config(
    config_path: Union[str, Path, None] = None,
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load and validate configuration from a YAML file and environment variables.

    Looks for the configuration file in this order:
    1. The provided config_path
    2. The file named by HNHIRING_CONFIG
    3. hnhiring.yaml in the current directory
    4. ./config/hnhiring.yaml

    When no file is found the built-in defaults apply. An explicit path
    (argument or HNHIRING_CONFIG) that does not exist is an error.

    Args:
        config_path: Optional path to configuration file

    Returns:
        Tuple of (AppConfig, EnvironmentConfig) with validated configuration

    Raises:
        ConfigurationError: If configuration is invalid or an explicit file is missing
    """
    env_config = load_environment_config()

    config_file = _find_config_file(config_path, env_config.config_path)
    if config_file is None:
        logger.info(
            "No configuration file found, using defaults",
            extra={"event": "config.defaults"},
        )
        return AppConfig(), env_config

    config_dict = _read_yaml(config_file)

    warnings = check_for_warnings(config_dict)
    if warnings:
        emit_warnings(warnings)

    app_config = validate_config_dict(config_dict)

    logger.info(
        f"Loaded configuration from {config_file}",
        extra={
            "event": "config.loaded",
            "path": str(config_file),
            "extra_tech_entries": len(app_config.tech_dictionary.extra_entries),
        },
    )
    return app_config, env_config


def validate_config_dict(config_dict: Dict[str, Any]) -> AppConfig:
    """
    Validate a raw configuration mapping.

    Raises:
        ConfigurationError: With one readable line per pydantic error
    """
    try:
        return AppConfig.model_validate(config_dict)
    except ValidationError as e:
        raise ConfigurationError(
            "Configuration validation failed",
            errors=_format_validation_errors(e),
            suggestions=[
                "Review hnhiring.example.yaml for the expected format",
                "Verify field types match the expected schema",
            ],
        ) from e


def _format_validation_errors(error: ValidationError) -> List[str]:
    messages = []
    for item in error.errors():
        field_path = " -> ".join(str(loc) for loc in item["loc"])
        error_type = item["type"]

        if error_type == "missing":
            messages.append(f"Missing required field: {field_path}")
        elif error_type in ("string_type", "int_type", "bool_type", "list_type"):
            expected_type = error_type.replace("_type", "")
            messages.append(
                f"Invalid type for '{field_path}': expected {expected_type}, "
                f"got {item.get('input')!r}"
            )
        elif "enum" in error_type:
            messages.append(f"Invalid value for '{field_path}': {item['msg']}")
        else:
            messages.append(f"{field_path}: {item['msg']}")
    return messages


def _read_yaml(config_file: Path) -> Dict[str, Any]:
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Failed to parse YAML configuration: {e}",
            suggestions=[
                "Check YAML syntax in your config file",
                "Ensure proper indentation (use spaces, not tabs)",
            ],
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read configuration file: {e}",
            suggestions=[f"Ensure {config_file} is readable"],
        ) from e

    # An empty file means defaults
    if config_dict is None:
        return {}

    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            "Configuration file must contain a mapping at the top level",
            errors=[f"Got {type(config_dict).__name__}"],
        )

    return config_dict


def _find_config_file(
    config_path: Union[str, Path, None] = None,
    env_path: Optional[str] = None,
) -> Optional[Path]:
    """
    Find configuration file using fallback logic.

    Returns:
        Path to configuration file, or None when no default location exists

    Raises:
        ConfigurationError: If an explicitly requested file does not exist
    """
    for explicit, origin in ((config_path, "--config"), (env_path, CONFIG_ENV_VAR)):
        if explicit:
            path = Path(os.path.expanduser(str(explicit)))
            if not path.exists():
                raise ConfigurationError(
                    f"Specified configuration file not found: {path}",
                    errors=[f"Requested via {origin}"],
                    suggestions=[
                        f"Ensure {path} exists",
                        "Check the path and try again",
                    ],
                )
            return path

    for candidate in DEFAULT_CONFIG_CANDIDATES:
        if candidate.exists():
            return candidate

    return None
