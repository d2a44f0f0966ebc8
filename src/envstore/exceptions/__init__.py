"""Exceptions raised by envstore.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging

Usage:
    from envstore.exceptions import EnvStoreError, MissingRequiredKeysError

    try:
        load_env(required_keys={"DATABASE_URL"})
    except MissingRequiredKeysError as e:
        print(e.keys)
"""

from envstore.exceptions.base import (
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

__all__ = [
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
