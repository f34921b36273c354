"""Plugin registry for deployment-profiles library."""

from typing import Any, Dict, List, Mapping, Optional, Sequence

from .constants import API_KEY_ENV, PLUGINS
from .environment import Environment
from .exceptions import MissingSecretError


class PluginRegistry:
    """Ordered plugin names and the API keys of their services."""

    def __init__(
        self,
        plugins: Sequence[str],
        api_keys: Mapping[str, Optional[str]],
        api_key_env: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize the plugin registry.

        Args:
            plugins: Plugin names, in load order
            api_keys: Service name -> API key (None when unset)
            api_key_env: Service name -> environment variable the key came from
        """
        self._plugins = tuple(plugins)
        self._api_keys: Dict[str, Optional[str]] = dict(api_keys)
        self._api_key_env: Dict[str, str] = dict(api_key_env or {})

    @classmethod
    def from_environment(
        cls,
        environment: Environment,
        plugins: Sequence[str] = PLUGINS,
        api_key_env: Mapping[str, str] = API_KEY_ENV,
    ) -> "PluginRegistry":
        """
        Look up every service's API key once.

        Missing keys are recorded as None, never raised.

        Args:
            environment: Environment snapshot
            plugins: Plugin names
            api_key_env: Service name -> environment variable name

        Returns:
            PluginRegistry
        """
        api_keys = {
            service: environment.get(variable) for service, variable in api_key_env.items()
        }
        return cls(plugins, api_keys, api_key_env)

    @property
    def plugins(self) -> tuple:
        return self._plugins

    def has_plugin(self, name: str) -> bool:
        return name in self._plugins

    def services(self) -> List[str]:
        return list(self._api_keys)

    def api_key(self, service: str) -> Optional[str]:
        """
        Get the API key for a service.

        Args:
            service: Service name, e.g. "etherscan"

        Returns:
            The key, or None when the integration is disabled for this run
        """
        return self._api_keys.get(service)

    def require_api_key(self, service: str) -> str:
        """
        Get the API key for a service that cannot run without one.

        Raises:
            MissingSecretError: If the key is not set
        """
        key = self.api_key(service)
        if key is None:
            variable = self._api_key_env.get(service, service)
            raise MissingSecretError(
                variable,
                f"API key for '{service}' is not set (environment variable '{variable}')",
            )
        return key

    def to_dict(self) -> Dict[str, Any]:
        return {
            "plugins": list(self._plugins),
            "api_keys": dict(self._api_keys),
        }
