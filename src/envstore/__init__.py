"""envstore - load-once env file configuration.

This package provides:
- store: Process-wide, load-once mapping with file/native env precedence
- discovery: Env file lookup by name (.env, .env.prod, ...)
- decoding: Pluggable decoders (simple key=value, dotenv, JSON)
- keys: Typed key names
- settings: Store configuration from environment variables
- logger: Structured logging
- exceptions: Structured error classes

Example:
    from envstore import load_env, get_env

    load_env(selector="prod", required_keys={"DATABASE_URL"})
    url = get_env("DATABASE_URL")
"""

__version__ = "1.0.0"

from envstore.decoding import Decoder, dotenv_decode, json_decode, simple_decode
from envstore.discovery import discover_env_files, resolve_selector
from envstore.exceptions import (
    AlreadyLoadedError,
    ConfigurationError,
    DirectoryUnreadableError,
    EncodingInvalidError,
    EnvFileUnreadableError,
    EnvStoreError,
    FormatInvalidError,
    MissingRequiredKeysError,
    NoEnvFileError,
)
from envstore.keys import EnvKey, key_name
from envstore.logger import Logger, StructuredLogger, create_logger, get_logger
from envstore.preference import EnvPreference
from envstore.settings import StoreSettings, get_settings, reset_settings
from envstore.store import (
    EnvironmentStore,
    LoadState,
    get_env,
    get_store,
    load_env,
    reset_store,
)

__all__ = [
    "__version__",
    # Store
    "EnvironmentStore",
    "LoadState",
    "get_store",
    "load_env",
    "get_env",
    "reset_store",
    # Discovery and decoding
    "discover_env_files",
    "resolve_selector",
    "Decoder",
    "simple_decode",
    "dotenv_decode",
    "json_decode",
    # Keys and preference
    "EnvKey",
    "key_name",
    "EnvPreference",
    # Settings
    "StoreSettings",
    "get_settings",
    "reset_settings",
    # Logger
    "Logger",
    "StructuredLogger",
    "create_logger",
    "get_logger",
    # Exceptions
    "EnvStoreError",
    "ConfigurationError",
    "DirectoryUnreadableError",
    "NoEnvFileError",
    "EnvFileUnreadableError",
    "EncodingInvalidError",
    "FormatInvalidError",
    "AlreadyLoadedError",
    "MissingRequiredKeysError",
]
