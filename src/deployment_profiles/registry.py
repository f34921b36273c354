"""Network profile registry for deployment-profiles library."""

import logging
from typing import Any, Dict, Iterable, Iterator, List, Mapping

from .environment import Environment
from .exceptions import ConfigurationError, DuplicateNetworkError, UnknownNetworkError
from .parsers import parse_network_declaration
from .providers import SigningProvider
from .types import NetworkDeclaration, NetworkProfile, ProviderFactory, ProviderSpec

logger = logging.getLogger(__name__)


def hd_wallet_factory(spec: ProviderSpec, mnemonic: str, rpc_url: str) -> ProviderFactory:
    """
    Build a deferred constructor for a signing provider.

    Nothing is derived or contacted until the returned function is called.

    Args:
        spec: Provider settings of the network
        mnemonic: Secret phrase, already looked up
        rpc_url: RPC endpoint, already looked up

    Returns:
        Zero-argument function returning a new SigningProvider
    """

    def factory() -> SigningProvider:
        logger.debug("Constructing signing provider for %s", spec.rpc_url_env)
        return SigningProvider(
            mnemonic,
            rpc_url,
            address_index=spec.address_index,
            num_addresses=spec.num_addresses,
        )

    return factory


class NetworkRegistry:
    """Maps network names to declarations and resolves them into profiles."""

    def __init__(self, declarations: Iterable[NetworkDeclaration], environment: Environment):
        """
        Initialize the registry.

        No secret is read here; that happens in resolve().

        Args:
            declarations: Network declarations
            environment: Environment snapshot used at resolution time

        Raises:
            DuplicateNetworkError: If two declarations share a name
        """
        self._environment = environment
        self._declarations: Dict[str, NetworkDeclaration] = {}
        for declaration in declarations:
            if declaration.name in self._declarations:
                raise DuplicateNetworkError(
                    f"Network '{declaration.name}' is declared more than once"
                )
            self._declarations[declaration.name] = declaration

    @classmethod
    def from_declarations(
        cls, networks: Mapping[str, Mapping[str, Any]], environment: Environment
    ) -> "NetworkRegistry":
        """
        Build a registry from the persisted ``networks`` table.

        Args:
            networks: Network name -> declaration in the persisted shape
            environment: Environment snapshot

        Returns:
            NetworkRegistry

        Raises:
            ConfigurationError: If networks is not a mapping
        """
        if not isinstance(networks, Mapping):
            raise ConfigurationError("'networks' must map network names to declarations")
        return cls(
            (parse_network_declaration(name, data) for name, data in networks.items()),
            environment,
        )

    def __contains__(self, name: object) -> bool:
        return name in self._declarations

    def __iter__(self) -> Iterator[str]:
        return iter(self._declarations)

    def __len__(self) -> int:
        return len(self._declarations)

    def names(self) -> List[str]:
        """Network names in declaration order."""
        return list(self._declarations)

    def has_network(self, name: str) -> bool:
        return name in self._declarations

    def declaration(self, name: str) -> NetworkDeclaration:
        """
        Get the static declaration of a network.

        Raises:
            UnknownNetworkError: If name is empty or not registered
        """
        if not isinstance(name, str) or not name:
            raise UnknownNetworkError("Network name must be a non-empty string")
        if name not in self._declarations:
            raise UnknownNetworkError(
                f"Network '{name}' not found (known networks: {', '.join(self._declarations)})"
            )
        return self._declarations[name]

    def resolve(self, name: str) -> NetworkProfile:
        """
        Resolve a network name into a profile.

        Secrets of provider-backed networks are looked up now and captured by
        the profile's provider factory, which is not called.

        Args:
            name: Network name, e.g. "development" or "mainnet"

        Returns:
            NetworkProfile

        Raises:
            UnknownNetworkError: If name is empty or not registered
            MissingSecretError: If the mnemonic or RPC URL is not set
        """
        declaration = self.declaration(name)

        provider_factory = None
        if declaration.provider is not None:
            spec = declaration.provider
            mnemonic = self._environment.require(spec.mnemonic_env)
            rpc_url = self._environment.require(spec.rpc_url_env)
            provider_factory = hd_wallet_factory(spec, mnemonic, rpc_url)

        from_address = declaration.from_address
        if from_address is None and declaration.from_env is not None:
            from_address = self._environment.get(declaration.from_env)

        logger.debug("Resolved network '%s'", name)
        return NetworkProfile(
            name=declaration.name,
            chain_id=None if declaration.is_wildcard else declaration.network_id,
            host=declaration.host,
            port=declaration.port,
            provider_factory=provider_factory,
            gas_price_wei=declaration.gas_price,
            gas_limit=declaration.gas,
            timeout_blocks=declaration.timeout_blocks,
            skip_dry_run=declaration.skip_dry_run,
            from_address=from_address,
        )
