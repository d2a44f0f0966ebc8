"""Precedence between file-sourced and native environment values."""

from __future__ import annotations

from enum import Enum
from typing import Mapping, Optional


class EnvPreference(str, Enum):
    """Which source answers a lookup, and whether the other one is a fallback."""

    FILE_FIRST = "file_first"
    FILE_ONLY = "file_only"
    NATIVE_FIRST = "native_first"
    NATIVE_ONLY = "native_only"

    @classmethod
    def parse(cls, text: str) -> "EnvPreference":
        """Parse a preference name such as ``file-first`` or ``NATIVE_ONLY``."""
        normalized = text.strip().lower().replace("-", "_")
        for member in cls:
            if member.value == normalized:
                return member
        valid = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown env preference '{text}'. Valid values: {valid}")


DEFAULT_PREFERENCE = EnvPreference.FILE_FIRST


def resolve(
    key: str,
    file_values: Mapping[str, str],
    native: Mapping[str, str],
    preference: EnvPreference,
) -> Optional[str]:
    """Look up ``key`` in the two sources according to ``preference``.

    Returns None when the key is absent from every consulted source.
    """
    if preference is EnvPreference.FILE_ONLY:
        return file_values.get(key)
    if preference is EnvPreference.NATIVE_ONLY:
        return native.get(key)
    if preference is EnvPreference.NATIVE_FIRST:
        value = native.get(key)
        return value if value is not None else file_values.get(key)

    value = file_values.get(key)
    return value if value is not None else native.get(key)


__all__ = ["EnvPreference", "DEFAULT_PREFERENCE", "resolve"]
