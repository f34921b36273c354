"""Custom exception classes for deployment-profiles library."""

from typing import Optional


class DeploymentProfileError(Exception):
    """Base exception for deployment-profile errors."""

    pass


class ConfigurationError(DeploymentProfileError):
    """Raised when the deployment configuration cannot be loaded or resolved."""

    kind = "invalid declaration"


class UnknownNetworkError(ConfigurationError, ValueError):
    """Raised when requested network is not in the registry."""

    kind = "unknown network"


class MissingSecretError(ConfigurationError, LookupError):
    """Raised when a required environment value is absent."""

    kind = "missing secret"

    def __init__(self, variable: str, message: Optional[str] = None):
        if message is None:
            message = f"Required environment variable '{variable}' is not set"
        super().__init__(message)
        self.variable = variable


class InvalidNumericFieldError(ConfigurationError, ValueError):
    """Raised when a configured integer field is negative or non-numeric."""

    kind = "invalid numeric field"

    def __init__(self, field: str, value: object):
        super().__init__(
            f"Field '{field}' must be a non-negative integer, got {value!r}"
        )
        self.field = field
        self.value = value


class DuplicateNetworkError(ConfigurationError, ValueError):
    """Raised when two declarations share a network name."""

    pass


class ProviderError(DeploymentProfileError, RuntimeError):
    """Raised when a JSON-RPC call through a signing provider fails."""

    pass
