"""Tests for error types and codes."""

import pytest

from propdefs.core.errors import (
    ConfigError,
    DefinitionError,
    ErrorCode,
    PropDefsError,
    RegistryError,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.CONFIG_INVALID_VALUE, 2000),
            (ErrorCode.DEFINITION_INVALID_KEY, 3000),
            (ErrorCode.DEFINITION_DUPLICATE_KEY, 3000),
            (ErrorCode.REGISTRY_FROZEN, 4000),
            (ErrorCode.REGISTRY_DUPLICATE_KEY, 4000),
        ],
    )
    def test_given_error_code_when_checked_then_in_correct_range(
        self, code: ErrorCode, expected_range: int
    ) -> None:
        """Error codes fall within their designated numeric range."""
        assert expected_range <= code.value < expected_range + 1000


class TestPropDefsError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        """Error serializes to dict with all required fields."""
        # Given
        error = PropDefsError(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message="Test message",
            retryable=True,
            details={"key": "value"},
        )

        # When
        result = error.to_dict()

        # Then
        assert result == {
            "code": 2001,
            "error": "CONFIG_PARSE_ERROR",
            "message": "Test message",
            "retryable": True,
            "details": {"key": "value"},
        }

    def test_given_error_when_str_then_includes_code_and_name(self) -> None:
        """String form carries numeric code and name."""
        error = PropDefsError(code=ErrorCode.REGISTRY_FROZEN, message="nope")

        assert str(error) == "[4001] REGISTRY_FROZEN: nope"

    def test_given_error_when_raised_then_is_exception(self) -> None:
        """Errors can be raised and caught as their base type."""
        with pytest.raises(PropDefsError):
            raise RegistryError.frozen()


class TestConfigError:
    """ConfigError factory tests."""

    def test_parse_error(self) -> None:
        error = ConfigError.parse_error("/path/config.yaml", "bad indent")

        assert error.code == ErrorCode.CONFIG_PARSE_ERROR
        assert "/path/config.yaml" in error.message
        assert error.details == {"path": "/path/config.yaml", "reason": "bad indent"}

    def test_invalid_value(self) -> None:
        error = ConfigError.invalid_value("registry.duplicate_keys", "sometimes", "bad")

        assert error.code == ErrorCode.CONFIG_INVALID_VALUE
        assert error.details["field"] == "registry.duplicate_keys"
        assert error.details["value"] == "sometimes"

    def test_file_not_found(self) -> None:
        error = ConfigError.file_not_found("/missing.yaml")

        assert error.code == ErrorCode.CONFIG_FILE_NOT_FOUND
        assert error.details == {"path": "/missing.yaml"}


class TestDefinitionError:
    """DefinitionError factory tests."""

    def test_invalid_key(self) -> None:
        error = DefinitionError.invalid_key("")

        assert error.code == ErrorCode.DEFINITION_INVALID_KEY
        assert error.error_name == "DEFINITION_INVALID_KEY"

    def test_duplicate_key_names_source(self) -> None:
        error = DefinitionError.duplicate_key("sonar.foo", "plugins.Foo")

        assert error.code == ErrorCode.DEFINITION_DUPLICATE_KEY
        assert "sonar.foo" in error.message
        assert "plugins.Foo" in error.message

    def test_invalid_declaration(self) -> None:
        error = DefinitionError.invalid_declaration("plugins.Foo", "not a tuple")

        assert error.code == ErrorCode.DEFINITION_INVALID_DECLARATION
        assert error.details == {"source": "plugins.Foo", "reason": "not a tuple"}

    def test_invalid_field(self) -> None:
        error = DefinitionError.invalid_field("k", "options", "expected a tuple")

        assert error.code == ErrorCode.DEFINITION_INVALID_FIELD
        assert error.details == {"key": "k", "field": "options", "reason": "expected a tuple"}


class TestRegistryError:
    """RegistryError factory tests."""

    def test_duplicate_key(self) -> None:
        error = RegistryError.duplicate_key("foo", "plugins.Foo")

        assert error.code == ErrorCode.REGISTRY_DUPLICATE_KEY
        assert error.details == {"key": "foo", "source": "plugins.Foo"}
        assert not error.retryable
