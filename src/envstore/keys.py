"""Typed key names for call-site safety.

Projects declare their keys once and pass them to lookups instead of raw
strings:

    DATABASE_URL = EnvKey("DATABASE_URL")
    url = get_env(DATABASE_URL)

Plain strings keep working everywhere a key is accepted.
"""

from __future__ import annotations

from typing import Union


class EnvKey:
    """String-backed identifier for an environment key."""

    __slots__ = ("_raw_value",)

    def __init__(self, raw_value: str) -> None:
        if not isinstance(raw_value, str):
            raise TypeError(f"EnvKey raw value must be str, got {type(raw_value).__name__}")
        self._raw_value = raw_value

    @property
    def raw_value(self) -> str:
        return self._raw_value

    def __str__(self) -> str:
        return self._raw_value

    def __repr__(self) -> str:
        return f"EnvKey({self._raw_value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EnvKey):
            return self._raw_value == other._raw_value
        return NotImplemented

    def __hash__(self) -> int:
        return hash((EnvKey, self._raw_value))


KeyLike = Union[str, EnvKey]


def key_name(key: KeyLike) -> str:
    """Return the raw string for a key given as ``str`` or ``EnvKey``."""
    if isinstance(key, EnvKey):
        return key.raw_value
    return key


__all__ = ["EnvKey", "KeyLike", "key_name"]
