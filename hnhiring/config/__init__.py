"""Configuration management for the hiring-thread parser."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config, validate_config_dict
from .models import (
    AppConfig,
    LogFormat,
    LoggingConfig,
    LogLevel,
    TechDictionaryConfig,
)
from .validators import check_for_warnings

__all__ = [
    # Main loader functions
    "load_config",
    "validate_config_dict",
    "load_environment_config",
    "check_for_warnings",
    # Configuration models
    "AppConfig",
    "TechDictionaryConfig",
    "LoggingConfig",
    "EnvironmentConfig",
    # Enums
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
