"""Configuration schema models using Pydantic."""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field, field_validator

from hnhiring.extraction.builder import DEFAULT_PERMALINK_BASE_URL
from hnhiring.tech.dictionary import DEFAULT_DICTIONARY, TechDictionary, TechKeywordEntry


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class TechDictionaryConfig(BaseModel):
    """Technology dictionary settings."""

    include_defaults: bool = Field(
        True, description="Start from the built-in technology dictionary"
    )
    extra_entries: List[TechKeywordEntry] = Field(
        default_factory=list,
        description="Additional labels; an alias listed here overrides a built-in one",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True}


class AppConfig(BaseModel):
    """Root configuration object for the hiring-thread parser."""

    tech_dictionary: TechDictionaryConfig = Field(
        default_factory=TechDictionaryConfig, description="Technology dictionary settings"
    )
    permalink_base_url: str = Field(
        DEFAULT_PERMALINK_BASE_URL,
        description="Prefix joined with the comment id when a hit carries no url",
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    @field_validator("permalink_base_url")
    @classmethod
    def validate_permalink_base_url(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped.startswith(("http://", "https://")):
            raise ValueError("permalink_base_url must start with http:// or https://")
        return stripped

    def build_tech_dictionary(self) -> TechDictionary:
        """Build the immutable dictionary described by this configuration."""
        base = DEFAULT_DICTIONARY if self.tech_dictionary.include_defaults else TechDictionary([])
        return base.extend(self.tech_dictionary.extra_entries)
