"""Environment snapshot for deployment-profiles library."""

import logging
import os
from pathlib import Path
from typing import Dict, Iterator, Mapping, Optional, Union

from dotenv import dotenv_values

from .exceptions import MissingSecretError
from .paths import get_config_paths

logger = logging.getLogger(__name__)


class Environment(Mapping[str, str]):
    """
    Immutable snapshot of the configuration values visible to the process.

    Built once at start-up and passed down explicitly, so resolution never
    reads ``os.environ`` directly and tests can supply their own values.
    Unset (None) and empty values are treated as absent.
    """

    def __init__(self, values: Optional[Mapping[str, Optional[str]]] = None):
        self._values: Dict[str, str] = {
            key: value for key, value in (values or {}).items() if value
        }

    @classmethod
    def from_os(cls, dotenv_path: Optional[Union[Path, str]] = None) -> "Environment":
        """
        Snapshot the process environment, layered over a ``.env`` file.

        Values already set in the process environment win over the file.

        Args:
            dotenv_path: Path to a .env file (defaults to ./.env; skipped if missing)

        Returns:
            Environment snapshot
        """
        if dotenv_path is None:
            dotenv_path = get_config_paths()[1]

        values: Dict[str, Optional[str]] = {}
        if Path(dotenv_path).is_file():
            logger.debug("Loading environment file %s", dotenv_path)
            values.update(dotenv_values(dotenv_path))
        values.update(os.environ)
        return cls(values)

    def __getitem__(self, name: str) -> str:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def require(self, name: str) -> str:
        """
        Get a value that must be present.

        Args:
            name: Environment variable name

        Returns:
            The value

        Raises:
            MissingSecretError: If the variable is unset or empty
        """
        if name not in self._values:
            raise MissingSecretError(name)
        return self._values[name]
