"""Dataclass settings for the environment store.

Settings control where env files are searched for and how they are selected.
They are read from environment variables with a configurable prefix:

    {prefix}_DIR: Directory searched for env files (default: cwd at load time)
    {prefix}_MARKER: File name prefix of env files (default: .env)
    {prefix}_SELECTOR_VAR: Variable naming the selector to load (default: DOTENV)
    {prefix}_DEFAULT_SELECTOR: Selector used when nothing else is given (default: default)
    {prefix}_PREFERENCE: Lookup precedence (default: file_first)

Example:
    from envstore.settings import get_settings

    settings = get_settings()
    print(settings.marker)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from envstore.discovery import DEFAULT_MARKER, DEFAULT_SELECTOR, SELECTOR_VARIABLE
from envstore.exceptions import ConfigurationError
from envstore.preference import DEFAULT_PREFERENCE, EnvPreference

DEFAULT_PREFIX = "ENVSTORE"


@dataclass
class StoreSettings:
    """Environment store configuration

    Attributes:
        search_dir: Directory scanned for env files, None for the working directory
        marker: File name prefix identifying env files
        selector_variable: Native variable whose value selects the env file
        default_selector: Selector used when neither argument nor variable is set
        preference: Lookup precedence applied until changed on the store
    """

    search_dir: Optional[Path] = None
    marker: str = DEFAULT_MARKER
    selector_variable: str = SELECTOR_VARIABLE
    default_selector: str = DEFAULT_SELECTOR
    preference: EnvPreference = DEFAULT_PREFERENCE

    @classmethod
    def from_env(cls, prefix: str = DEFAULT_PREFIX) -> "StoreSettings":
        """Load settings from ``{prefix}_*`` environment variables

        Raises:
            ConfigurationError: If {prefix}_PREFERENCE is not a known preference
        """
        search_dir = os.environ.get(f"{prefix}_DIR")
        preference_str = os.environ.get(f"{prefix}_PREFERENCE")

        preference = DEFAULT_PREFERENCE
        if preference_str:
            try:
                preference = EnvPreference.parse(preference_str)
            except ValueError as e:
                raise ConfigurationError(
                    code="INVALID_SETTING",
                    message=str(e),
                    details={"variable": f"{prefix}_PREFERENCE"},
                ) from e

        return cls(
            search_dir=Path(search_dir) if search_dir else None,
            marker=os.environ.get(f"{prefix}_MARKER", DEFAULT_MARKER),
            selector_variable=os.environ.get(f"{prefix}_SELECTOR_VAR", SELECTOR_VARIABLE),
            default_selector=os.environ.get(f"{prefix}_DEFAULT_SELECTOR", DEFAULT_SELECTOR),
            preference=preference,
        )

    def resolve_search_dir(self) -> Path:
        """Directory to scan, falling back to the current working directory"""
        return self.search_dir if self.search_dir is not None else Path.cwd()

    def validate(self) -> None:
        """
        Validate settings

        Raises:
            ConfigurationError: If the marker or selector variable is empty
        """
        if not self.marker:
            raise ConfigurationError(
                code="INVALID_SETTING",
                message="Env file marker cannot be empty",
                details={"setting": "marker"},
            )
        if not self.selector_variable:
            raise ConfigurationError(
                code="INVALID_SETTING",
                message="Selector variable name cannot be empty",
                details={"setting": "selector_variable"},
            )


_global_settings: Dict[str, StoreSettings] = {}


def get_settings(prefix: str = DEFAULT_PREFIX, reload: bool = False) -> StoreSettings:
    """
    Get or create the settings instance for a given prefix

    Args:
        prefix: Environment variable prefix
        reload: If True, reload settings from environment

    Returns:
        StoreSettings instance for the given prefix
    """
    if prefix not in _global_settings or reload:
        settings = StoreSettings.from_env(prefix=prefix)
        settings.validate()
        _global_settings[prefix] = settings

    return _global_settings[prefix]


def reset_settings(prefix: Optional[str] = None) -> None:
    """Reset cached settings (primarily for testing)

    Args:
        prefix: Specific prefix to reset, or None to reset all
    """
    if prefix:
        _global_settings.pop(prefix, None)
    else:
        _global_settings.clear()


__all__ = ["StoreSettings", "DEFAULT_PREFIX", "get_settings", "reset_settings"]
