"""Path management utilities for deployment-profiles library."""

from pathlib import Path
from typing import Optional, Union

CONFIG_FILENAME = "deployment-config.json"
DOTENV_FILENAME = ".env"


def get_default_config_root() -> Path:
    """
    Get default configuration directory (current working directory).

    Returns:
        Path to the working directory
    """
    return Path.cwd()


def get_config_paths(config_root: Optional[Union[Path, str]] = None) -> tuple[Path, Path]:
    """
    Get configuration file paths.

    Args:
        config_root: Custom configuration directory (defaults to the working directory)

    Returns:
        Tuple of (config_path, dotenv_path)
    """
    if config_root is None:
        config_root = get_default_config_root()
    else:
        config_root = Path(config_root).absolute()

    config_path = config_root / CONFIG_FILENAME
    dotenv_path = config_root / DOTENV_FILENAME

    return (config_path, dotenv_path)
