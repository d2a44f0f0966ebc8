"""Tests for the envstore exception hierarchy.

These tests verify:
1. Exception structure (code, message, details)
2. Inheritance hierarchy
3. String representation
4. Dictionary conversion for JSON serialization
"""

import pytest

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


class TestEnvStoreError:
    def test_basic_construction(self):
        error = EnvStoreError("TEST_CODE", "Test message")
        assert error.code == "TEST_CODE"
        assert error.message == "Test message"
        assert error.details == {}

    def test_str_without_details(self):
        assert str(EnvStoreError("TEST_CODE", "Test message")) == "TEST_CODE: Test message"

    def test_str_with_details(self):
        result = str(EnvStoreError("TEST_CODE", "Test message", details={"foo": "bar"}))
        assert result.startswith("TEST_CODE: Test message")
        assert "foo" in result and "bar" in result

    def test_to_dict(self):
        error = EnvStoreError("CODE", "msg", details={"k": 1})
        assert error.to_dict() == {"code": "CODE", "message": "msg", "details": {"k": 1}}

    def test_args_contains_message(self):
        assert "The error message" in EnvStoreError("CODE", "The error message").args


class TestHierarchy:
    @pytest.mark.parametrize(
        "error",
        [
            DirectoryUnreadableError("/x", "No such file or directory"),
            NoEnvFileError("prod"),
            EnvFileUnreadableError("/x/.env", "Permission denied"),
            EncodingInvalidError(),
            FormatInvalidError("bad"),
            AlreadyLoadedError(),
            MissingRequiredKeysError(["A"]),
        ],
    )
    def test_load_errors_are_configuration_errors(self, error: EnvStoreError):
        assert isinstance(error, ConfigurationError)
        assert isinstance(error, EnvStoreError)
        assert isinstance(error, Exception)


class TestSpecificErrors:
    def test_directory_unreadable(self):
        error = DirectoryUnreadableError("/missing", "No such file or directory")
        assert error.code == "DIRECTORY_UNREADABLE"
        assert error.directory == "/missing"
        assert "/missing" in error.message

    def test_no_env_file(self):
        error = NoEnvFileError("staging", available=["prod", "default"])
        assert error.code == "NO_ENV_FILE"
        assert error.selector == "staging"
        assert error.details["available"] == ["default", "prod"]

    def test_format_invalid_keeps_example(self):
        error = FormatInvalidError("line without separator")
        assert error.code == "FORMAT_INVALID"
        assert error.example == "line without separator"
        assert error.details == {"example": "line without separator"}

    def test_format_invalid_custom_message(self):
        error = FormatInvalidError(None, message="Not JSON")
        assert error.example is None
        assert error.message == "Not JSON"

    def test_encoding_invalid(self):
        assert EncodingInvalidError().details == {}
        assert EncodingInvalidError("bad byte").details == {"reason": "bad byte"}

    def test_already_loaded(self):
        assert AlreadyLoadedError().code == "ALREADY_LOADED"
        assert AlreadyLoadedError("prod").details == {"selector": "prod"}

    def test_missing_required_keys_sorted(self):
        error = MissingRequiredKeysError(["b", "C", "a"])
        assert error.code == "MISSING_REQUIRED_KEYS"
        assert error.keys == ["C", "a", "b"]
        assert error.details["keys"] == ["C", "a", "b"]
        assert "C, a, b" in error.message

    def test_can_be_caught_as_base(self):
        with pytest.raises(EnvStoreError) as exc_info:
            raise NoEnvFileError("x")
        assert exc_info.value.code == "NO_ENV_FILE"
