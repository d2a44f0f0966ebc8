"""Exception classes raised while loading an environment file.

Every error carries structured information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging
"""

from typing import Any, Dict, List, Optional


class EnvStoreError(Exception):
    """Base exception for all envstore errors.

    Attributes:
        code: Machine-readable error code (e.g., "NO_ENV_FILE")
        message: Human-readable error message
        details: Optional additional context for debugging
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(EnvStoreError):
    """Base for load and setup failures.

    Also raised directly when store settings are invalid.
    """

    pass


class DirectoryUnreadableError(ConfigurationError):
    """The search directory could not be listed."""

    def __init__(self, directory: str, reason: str):
        self.directory = directory
        super().__init__(
            code="DIRECTORY_UNREADABLE",
            message=f"Cannot list directory '{directory}': {reason}",
            details={"directory": directory},
        )


class NoEnvFileError(ConfigurationError):
    """No discovered file matches the resolved selector."""

    def __init__(self, selector: str, available: Optional[List[str]] = None):
        self.selector = selector
        super().__init__(
            code="NO_ENV_FILE",
            message=f"No env file found for selector '{selector}'",
            details={"selector": selector, "available": sorted(available or [])},
        )


class EnvFileUnreadableError(ConfigurationError):
    """The selected env file exists in the index but could not be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(
            code="ENV_FILE_UNREADABLE",
            message=f"Cannot read env file '{path}': {reason}",
            details={"path": path},
        )


class EncodingInvalidError(ConfigurationError):
    """Env file content is not valid UTF-8 text."""

    def __init__(self, reason: Optional[str] = None):
        super().__init__(
            code="ENCODING_INVALID",
            message="Env file is not UTF-8 encoded",
            details={"reason": reason} if reason else None,
        )


class FormatInvalidError(ConfigurationError):
    """A line of the env file could not be split into key and value.

    The offending line is kept verbatim in ``example``.
    """

    def __init__(self, example: Optional[str], message: Optional[str] = None):
        self.example = example
        super().__init__(
            code="FORMAT_INVALID",
            message=message or "Env file is improperly formatted",
            details={"example": example},
        )


class AlreadyLoadedError(ConfigurationError):
    """A load was attempted after a previous load already succeeded."""

    def __init__(self, selector: Optional[str] = None):
        super().__init__(
            code="ALREADY_LOADED",
            message="Environment is already loaded",
            details={"selector": selector} if selector is not None else None,
        )


class MissingRequiredKeysError(ConfigurationError):
    """One or more required keys were found in neither the file nor the process env."""

    def __init__(self, keys: List[str]):
        self.keys = sorted(keys)
        super().__init__(
            code="MISSING_REQUIRED_KEYS",
            message=f"Missing required keys: {', '.join(self.keys)}",
            details={"keys": self.keys},
        )
