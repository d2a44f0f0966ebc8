"""Decoders turning raw env file bytes into a key/value mapping.

A decoder is any callable taking the file's bytes and returning a mapping of
string keys to string values, raising an ``EnvStoreError`` subclass on bad
input. ``simple_decode`` is the default; the others are ready-made
alternatives for richer file contents:

    load_env(selector="prod", decoder=dotenv_decode)
"""

from __future__ import annotations

import io
import json
from typing import Any, Callable, Dict, Mapping

from dotenv import dotenv_values

from envstore.exceptions import EncodingInvalidError, FormatInvalidError

Decoder = Callable[[bytes], Mapping[str, str]]


def _decode_text(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise EncodingInvalidError(str(e)) from e


def simple_decode(data: bytes) -> Dict[str, str]:
    """Decode ``key=value`` lines.

    Lines are split on ``\\n`` and empty lines are skipped. Each remaining line
    is split on its first ``=``; the value keeps any further ``=`` characters.
    Nothing is trimmed or unquoted and there are no comments.

    Raises:
        EncodingInvalidError: data is not valid UTF-8
        FormatInvalidError: a line lacks ``=`` or has an empty key or value;
            ``example`` is the offending line
    """
    text = _decode_text(data)

    values: Dict[str, str] = {}
    for line in text.split("\n"):
        if not line:
            continue
        key, sep, value = line.partition("=")
        if not sep or not key or not value:
            raise FormatInvalidError(example=line)
        values[key] = value
    return values


def dotenv_decode(data: bytes) -> Dict[str, str]:
    """Decode dotenv syntax (comments, quotes, ``export``) via python-dotenv.

    Variable interpolation is disabled so the result depends on the file only.
    Keys declared without a value are dropped.
    """
    text = _decode_text(data)
    parsed = dotenv_values(stream=io.StringIO(text), interpolate=False)
    return {k: v for k, v in parsed.items() if v is not None}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, dict, list)):
        return json.dumps(value)
    return str(value)


def json_decode(data: bytes) -> Dict[str, str]:
    """Decode a flat JSON object.

    String values are kept verbatim; other values are rendered as text
    (``true``, ``3``, ``[1, 2]``). ``null`` values are dropped.
    """
    text = _decode_text(data)
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        lines = text.split("\n")
        example = lines[e.lineno - 1] if e.lineno <= len(lines) else None
        raise FormatInvalidError(
            example=example,
            message=f"Env file is not valid JSON: {e.msg}",
        ) from e

    if not isinstance(obj, dict):
        raise FormatInvalidError(
            example=None,
            message=f"JSON env file must hold an object, got {type(obj).__name__}",
        )

    return {str(k): _stringify(v) for k, v in obj.items() if v is not None}


DECODERS: Dict[str, Decoder] = {
    "simple": simple_decode,
    "dotenv": dotenv_decode,
    "json": json_decode,
}


__all__ = ["Decoder", "simple_decode", "dotenv_decode", "json_decode", "DECODERS"]
