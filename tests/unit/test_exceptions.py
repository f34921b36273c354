"""Unit tests for custom exception classes."""

import pytest

from deployment_profiles.exceptions import (
    ConfigurationError,
    DeploymentProfileError,
    DuplicateNetworkError,
    InvalidNumericFieldError,
    MissingSecretError,
    ProviderError,
    UnknownNetworkError,
)


class TestExceptionCatching:
    """Test that exceptions can be caught as their base types."""

    def test_catch_unknown_network_as_value_error(self):
        """Test that UnknownNetworkError can be caught as ValueError."""
        with pytest.raises(ValueError):
            raise UnknownNetworkError("test")

    def test_catch_missing_secret_as_lookup_error(self):
        """Test that MissingSecretError can be caught as LookupError."""
        with pytest.raises(LookupError):
            raise MissingSecretError("MNEMONIC")

    def test_catch_invalid_numeric_field_as_value_error(self):
        """Test that InvalidNumericFieldError can be caught as ValueError."""
        with pytest.raises(ValueError):
            raise InvalidNumericFieldError("optimizer.runs", -1)

    def test_catch_provider_error_as_runtime_error(self):
        """Test that ProviderError can be caught as RuntimeError."""
        with pytest.raises(RuntimeError):
            raise ProviderError("test")

    def test_catch_configuration_errors_as_configuration_error(self):
        """Test that all configuration exceptions share ConfigurationError."""
        exceptions = [
            UnknownNetworkError("test"),
            MissingSecretError("MNEMONIC"),
            InvalidNumericFieldError("gas", "lots"),
            DuplicateNetworkError("test"),
        ]

        for exc in exceptions:
            with pytest.raises(ConfigurationError):
                raise exc

    def test_provider_error_is_not_configuration_error(self):
        """Test that RPC failures are not reported as configuration errors."""
        assert not isinstance(ProviderError("test"), ConfigurationError)
        assert isinstance(ProviderError("test"), DeploymentProfileError)


class TestExceptionDetails:
    """Test the attributes carried by exceptions."""

    def test_kinds(self):
        """Test that each error reports its kind."""
        assert UnknownNetworkError("x").kind == "unknown network"
        assert MissingSecretError("X").kind == "missing secret"
        assert InvalidNumericFieldError("runs", -1).kind == "invalid numeric field"

    def test_missing_secret_names_variable(self):
        """Test that MissingSecretError names the missing variable."""
        exc = MissingSecretError("MAINNET")

        assert exc.variable == "MAINNET"
        assert "MAINNET" in str(exc)

    def test_missing_secret_custom_message(self):
        """Test that MissingSecretError accepts a custom message."""
        exc = MissingSecretError("ETHERAPI", "no key")

        assert exc.variable == "ETHERAPI"
        assert str(exc) == "no key"

    def test_invalid_numeric_field_names_field(self):
        """Test that InvalidNumericFieldError names the field and value."""
        exc = InvalidNumericFieldError("mainnet.timeoutBlocks", -5)

        assert exc.field == "mainnet.timeoutBlocks"
        assert exc.value == -5
        assert "mainnet.timeoutBlocks" in str(exc)
        assert "-5" in str(exc)

    def test_exceptions_accept_string_messages(self):
        """Test that message-based exceptions keep their message."""
        for exc_class in [
            DeploymentProfileError,
            ConfigurationError,
            UnknownNetworkError,
            DuplicateNetworkError,
            ProviderError,
        ]:
            exc = exc_class("test message")
            assert str(exc) == "test message"
