"""Env file discovery and selector resolution.

Files are recognized by name inside a single directory:

    .env          -> selector "default"
    .env.prod     -> selector "prod"
    .envdebug     -> selector "debug"
    .env. dev     -> selector " dev"  (kept verbatim)
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from envstore.exceptions import DirectoryUnreadableError
from envstore.logger import Logger

DEFAULT_MARKER = ".env"
DEFAULT_SELECTOR = "default"
SELECTOR_VARIABLE = "DOTENV"
SELECTOR_SEPARATOR = "."


def selector_for(filename: str, marker: str = DEFAULT_MARKER) -> Optional[str]:
    """Return the selector a file name registers under, or None if it is not an env file."""
    if not filename.startswith(marker):
        return None
    if filename == marker:
        return DEFAULT_SELECTOR

    suffix = filename[len(marker):]
    if suffix.startswith(SELECTOR_SEPARATOR):
        suffix = suffix[len(SELECTOR_SEPARATOR):]
    return suffix


def discover_env_files(
    directory: Union[Path, str],
    marker: str = DEFAULT_MARKER,
    logger: Optional[Logger] = None,
) -> Dict[str, Path]:
    """Build the selector -> file index for ``directory``.

    Only regular files directly inside ``directory`` are considered. When two
    names normalize to the same selector the one enumerated last wins; the
    enumeration order is whatever the filesystem returns.

    Raises:
        DirectoryUnreadableError: the directory cannot be listed
    """
    directory = Path(directory)
    try:
        entries = list(directory.iterdir())
    except OSError as e:
        raise DirectoryUnreadableError(str(directory), e.strerror or str(e)) from e

    index: Dict[str, Path] = {}
    for entry in entries:
        selector = selector_for(entry.name, marker)
        if selector is None or not entry.is_file():
            continue
        if selector in index and logger is not None:
            logger.debug(
                "Duplicate env selector, later file wins",
                selector=selector,
                replaced=index[selector].name,
                file=entry.name,
            )
        index[selector] = entry

    if logger is not None:
        logger.debug("Discovered env files", directory=str(directory), selectors=sorted(index))
    return index


def resolve_selector(
    explicit: Optional[str],
    environ: Mapping[str, str],
    variable: str = SELECTOR_VARIABLE,
    default: str = DEFAULT_SELECTOR,
) -> str:
    """Pick the selector: explicit argument, then ``environ[variable]``, then ``default``."""
    if explicit is not None:
        return explicit
    from_env = environ.get(variable)
    if from_env is not None:
        return from_env
    return default


__all__ = [
    "DEFAULT_MARKER",
    "DEFAULT_SELECTOR",
    "SELECTOR_VARIABLE",
    "selector_for",
    "discover_env_files",
    "resolve_selector",
]
