"""
deployment-profiles: network, compiler and plugin configuration for smart-contract deployments
"""

from importlib.metadata import PackageNotFoundError, version

from .compiler import dump_compiler_profile, get_compiler_profile, load_compiler_profile
from .config import DeploymentConfig, load_config
from .environment import Environment
from .exceptions import (
    ConfigurationError,
    DeploymentProfileError,
    DuplicateNetworkError,
    InvalidNumericFieldError,
    MissingSecretError,
    ProviderError,
    UnknownNetworkError,
)
from .plugins import PluginRegistry
from .providers import SigningProvider
from .registry import NetworkRegistry
from .types import CompilerProfile, NetworkProfile, OptimizerSettings

try:
    __version__ = version("deployment-profiles")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "load_config",
    "DeploymentConfig",
    "Environment",
    "NetworkRegistry",
    "NetworkProfile",
    "CompilerProfile",
    "OptimizerSettings",
    "PluginRegistry",
    "SigningProvider",
    "get_compiler_profile",
    "dump_compiler_profile",
    "load_compiler_profile",
    "DeploymentProfileError",
    "ConfigurationError",
    "UnknownNetworkError",
    "MissingSecretError",
    "InvalidNumericFieldError",
    "DuplicateNetworkError",
    "ProviderError",
]
