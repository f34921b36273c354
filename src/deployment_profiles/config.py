"""Configuration loading for deployment-profiles library."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .compiler import get_compiler_profile
from .constants import API_KEY_ENV, NETWORK_DECLARATIONS, PLUGINS
from .environment import Environment
from .parsers import (
    load_config_document,
    parse_api_key_env,
    parse_compiler_profile,
    parse_plugin_list,
)
from .paths import get_config_paths
from .plugins import PluginRegistry
from .registry import NetworkRegistry
from .types import CompilerProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeploymentConfig:
    """Everything a deployment tool reads at start-up."""

    networks: NetworkRegistry
    compiler: CompilerProfile
    plugins: PluginRegistry


def build_config(document: Dict[str, Any], environment: Environment) -> DeploymentConfig:
    """
    Build a configuration from a raw document.

    Sections missing from the document fall back to the built-in ones.

    Args:
        document: {"networks": ..., "compiler": ..., "plugins": ..., "api_keys": ...}
        environment: Environment snapshot

    Returns:
        DeploymentConfig
    """
    networks = document.get("networks", NETWORK_DECLARATIONS)
    registry = NetworkRegistry.from_declarations(networks, environment)

    if "compiler" in document:
        compiler = parse_compiler_profile(document["compiler"])
    else:
        compiler = get_compiler_profile()

    plugins = PluginRegistry.from_environment(
        environment,
        plugins=parse_plugin_list(document.get("plugins", PLUGINS)),
        api_key_env=parse_api_key_env(document.get("api_keys", API_KEY_ENV)),
    )

    return DeploymentConfig(networks=registry, compiler=compiler, plugins=plugins)


def load_config(
    config_path: Optional[Union[Path, str]] = None,
    environment: Optional[Environment] = None,
) -> DeploymentConfig:
    """
    Load the deployment configuration.

    Args:
        config_path: Path to a JSON configuration document.
                     If None, uses ./deployment-config.json when it exists,
                     otherwise the built-in declarations.
        environment: Environment snapshot (defaults to Environment.from_os())

    Returns:
        DeploymentConfig

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
        ConfigurationError: If the document is invalid
    """
    if environment is None:
        environment = Environment.from_os()

    document: Dict[str, Any] = {}
    if config_path is not None:
        document = load_config_document(Path(config_path))
        logger.info("Loaded deployment configuration from %s", config_path)
    else:
        default_path = get_config_paths()[0]
        if default_path.exists():
            document = load_config_document(default_path)
            logger.info("Loaded deployment configuration from %s", default_path)
        else:
            logger.info("Using built-in deployment configuration")

    return build_config(document, environment)
