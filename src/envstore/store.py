"""Process-wide environment store.

The store loads one env file once per process and answers key lookups
against it and the native process environment:

    from envstore import load_env, get_env

    load_env(required_keys={"DATABASE_URL"})
    url = get_env("DATABASE_URL")

Loading is serialized by a lock held for the whole sequence (discovery, read,
decode, validation, commit), so at most one load succeeds until ``reset``.
Lookups do not take the lock; a lookup racing the very first load may still
see the unloaded state.
"""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Union

from envstore.decoding import Decoder, simple_decode
from envstore.discovery import discover_env_files, resolve_selector
from envstore.exceptions import (
    AlreadyLoadedError,
    ConfigurationError,
    EnvFileUnreadableError,
    MissingRequiredKeysError,
    NoEnvFileError,
)
from envstore.keys import EnvKey, KeyLike, key_name
from envstore.logger import Logger, create_logger
from envstore.preference import DEFAULT_PREFERENCE, EnvPreference, resolve
from envstore.settings import StoreSettings, get_settings

_EMPTY: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True)
class LoadState:
    """Snapshot of the store; replaced as a whole, never mutated."""

    is_loaded: bool = False
    environment: Mapping[str, str] = field(default_factory=lambda: _EMPTY)
    preference: EnvPreference = EnvPreference.FILE_FIRST
    selector: Optional[str] = None
    source: Optional[Path] = None


def find_missing_keys(
    required_keys: Iterable[KeyLike],
    file_values: Mapping[str, str],
    native: Mapping[str, str],
) -> list[str]:
    """Return the sorted required keys present in neither source."""
    required = {key_name(k) for k in required_keys}
    return sorted(k for k in required if k not in file_values and k not in native)


class EnvironmentStore:
    """One-time loaded env file mapping with preference-based lookup.

    Args:
        settings: Store settings; defaults to ``get_settings()``
        logger: Optional logger instance. Creates one if not provided.
    """

    def __init__(
        self,
        settings: Optional[StoreSettings] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self.settings = settings if settings is not None else get_settings()
        self.logger = logger if logger is not None else create_logger(name="envstore")
        self._lock = threading.Lock()
        self._state = self._initial_state()

    def _initial_state(self) -> LoadState:
        return LoadState(preference=self.settings.preference)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def load(
        self,
        directory: Optional[Union[Path, str]] = None,
        selector: Optional[str] = None,
        required_keys: Iterable[KeyLike] = (),
        decoder: Decoder = simple_decode,
    ) -> Mapping[str, str]:
        """Load one env file into the store.

        Args:
            directory: Directory to scan; defaults to the settings' search dir
                or the current working directory
            selector: Env name to load; defaults to the selector variable
                (``DOTENV``) and then to ``"default"``
            required_keys: Keys that must exist in the file or the native
                environment
            decoder: Callable turning file bytes into a key/value mapping

        Returns:
            Read-only view of the loaded mapping

        Raises:
            AlreadyLoadedError: A previous load succeeded
            DirectoryUnreadableError: The directory cannot be listed
            NoEnvFileError: No file is registered under the resolved selector
            EnvFileUnreadableError: The selected file cannot be read
            EncodingInvalidError: The file is not UTF-8 (default decoder)
            FormatInvalidError: A line is malformed (default decoder)
            MissingRequiredKeysError: Required keys are absent from both sources

        Any failure leaves the store exactly as it was.
        """
        with self._lock:
            if self._state.is_loaded:
                raise AlreadyLoadedError(self._state.selector)

            search_dir = Path(directory) if directory is not None else self.settings.resolve_search_dir()
            env_files = discover_env_files(search_dir, self.settings.marker, logger=self.logger)

            native = os.environ
            current = resolve_selector(
                selector,
                native,
                variable=self.settings.selector_variable,
                default=self.settings.default_selector,
            )

            env_path = env_files.get(current)
            if env_path is None:
                raise NoEnvFileError(current, available=list(env_files))

            try:
                data = env_path.read_bytes()
            except OSError as e:
                raise EnvFileUnreadableError(str(env_path), e.strerror or str(e)) from e

            values = dict(decoder(data))

            missing = find_missing_keys(required_keys, values, native)
            if missing:
                raise MissingRequiredKeysError(missing)

            environment = MappingProxyType(values)
            self._state = replace(
                self._state,
                is_loaded=True,
                environment=environment,
                selector=current,
                source=env_path,
            )

        self.logger.info(
            "Env file loaded",
            selector=current,
            path=str(env_path),
            keys=len(environment),
        )
        return environment

    def reset(self) -> None:
        """Forget the loaded file and restore the default preference (for tests)."""
        with self._lock:
            self._state = self._initial_state()
        self.logger.debug("Environment store reset")

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def is_loaded(self) -> bool:
        return self._state.is_loaded

    @property
    def environment(self) -> Mapping[str, str]:
        """Read-only mapping decoded from the loaded file (empty before load)."""
        return self._state.environment

    @property
    def selector(self) -> Optional[str]:
        return self._state.selector

    @property
    def source(self) -> Optional[Path]:
        """Path of the loaded env file."""
        return self._state.source

    @property
    def preference(self) -> EnvPreference:
        return self._state.preference

    @preference.setter
    def preference(self, value: EnvPreference) -> None:
        with self._lock:
            self._state = replace(self._state, preference=EnvPreference(value))

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, key: KeyLike, default: Optional[str] = None) -> Optional[str]:
        """Return the value for ``key`` under the current preference, else ``default``."""
        state = self._state
        value = resolve(key_name(key), state.environment, os.environ, state.preference)
        return value if value is not None else default

    def __getitem__(self, key: KeyLike) -> Optional[str]:
        """Subscript lookup; absent keys yield None rather than raising."""
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (str, EnvKey)):
            return False
        return self.get(key) is not None

    def require(self, key: KeyLike) -> str:
        """Return the value for ``key`` or raise KeyError when absent."""
        value = self.get(key)
        if value is None:
            raise KeyError(key_name(key))
        return value


# Global store instance
_store: Optional[EnvironmentStore] = None
_store_lock = threading.Lock()


def get_store() -> EnvironmentStore:
    """Get the process-wide store, creating it on first use."""
    global _store
    with _store_lock:
        if _store is None:
            _store = EnvironmentStore()
        return _store


def load_env(
    directory: Optional[Union[Path, str]] = None,
    selector: Optional[str] = None,
    required_keys: Iterable[KeyLike] = (),
    decoder: Decoder = simple_decode,
) -> Mapping[str, str]:
    """Load an env file into the process-wide store. See ``EnvironmentStore.load``."""
    return get_store().load(
        directory=directory,
        selector=selector,
        required_keys=required_keys,
        decoder=decoder,
    )


def get_env(key: KeyLike, default: Optional[str] = None) -> Optional[str]:
    """Look up ``key`` in the process-wide store.

    Never raises: while settings are invalid no store can exist, so only the
    native environment answers. The settings error surfaces from ``load_env``.
    """
    try:
        store = get_store()
    except ConfigurationError:
        value = resolve(key_name(key), _EMPTY, os.environ, DEFAULT_PREFERENCE)
        return value if value is not None else default
    return store.get(key, default)


def reset_store() -> None:
    """Reset the process-wide store (primarily for testing).

    The instance is dropped so the next ``get_store`` re-reads settings.
    """
    global _store
    with _store_lock:
        if _store is not None:
            _store.reset()
        _store = None


__all__ = [
    "LoadState",
    "EnvironmentStore",
    "find_missing_keys",
    "get_store",
    "load_env",
    "get_env",
    "reset_store",
]
