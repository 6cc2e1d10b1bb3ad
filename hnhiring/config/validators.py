"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List

from hnhiring.tech.dictionary import DEFAULT_DICTIONARY


def _aliases_of(entry: Dict[str, Any]) -> List[str]:
    aliases = entry.get("aliases") or []
    cleaned = [alias.strip().lower() for alias in aliases if isinstance(alias, str)]
    cleaned = [alias for alias in cleaned if alias]
    label = entry.get("label")
    if not cleaned and isinstance(label, str) and label.strip():
        cleaned = [label.strip().lower()]
    return cleaned


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check configuration for potential issues and return warnings.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    tech_config = config_dict.get("tech_dictionary", {})
    if not isinstance(tech_config, dict):
        return warning_messages

    include_defaults = tech_config.get("include_defaults", True)
    extra_entries = tech_config.get("extra_entries", [])
    if not isinstance(extra_entries, list):
        extra_entries = []

    if include_defaults is False and not extra_entries:
        warning_messages.append(
            "Technology dictionary is empty: include_defaults is false and no "
            "extra_entries are configured, so no tech stack will be extracted"
        )

    owners: Dict[str, str] = {}
    if include_defaults is not False:
        owners.update(DEFAULT_DICTIONARY.alias_lookup)

    # Later entries win, so report each alias that changes hands
    for entry in extra_entries:
        if not isinstance(entry, dict):
            continue
        label = str(entry.get("label", "")).strip()
        for alias in _aliases_of(entry):
            previous = owners.get(alias)
            if previous is not None and previous != label:
                warning_messages.append(
                    f"Alias '{alias}' of '{label}' overrides the same alias of '{previous}'"
                )
            owners[alias] = label

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
