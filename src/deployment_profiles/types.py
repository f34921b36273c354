"""Data types and dataclasses for deployment-profiles library."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Union

from .constants import MNEMONIC_ENV, WILDCARD_NETWORK_ID

if TYPE_CHECKING:
    from .providers import SigningProvider

ProviderFactory = Callable[[], "SigningProvider"]


@dataclass(frozen=True)
class ProviderSpec:
    """Where a provider-backed network finds its secrets."""

    rpc_url_env: str  # e.g. "MAINNET"
    mnemonic_env: str = MNEMONIC_ENV
    address_index: int = 0
    num_addresses: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rpc_url_env": self.rpc_url_env,
            "mnemonic_env": self.mnemonic_env,
            "address_index": self.address_index,
            "num_addresses": self.num_addresses,
        }


@dataclass(frozen=True)
class NetworkDeclaration:
    """Static declaration of a network, before any secret is read."""

    name: str
    network_id: Union[int, str]  # integer chain id or "*"
    host: Optional[str] = None
    port: Optional[int] = None
    provider: Optional[ProviderSpec] = None
    gas_price: Optional[int] = None
    gas: Optional[int] = None
    timeout_blocks: Optional[int] = None
    skip_dry_run: bool = False
    from_address: Optional[str] = None
    from_env: Optional[str] = None

    @property
    def is_wildcard(self) -> bool:
        return self.network_id == WILDCARD_NETWORK_ID


@dataclass(frozen=True)
class NetworkProfile:
    """Fully resolved connection and deployment parameters for one network."""

    # Required fields
    name: str
    chain_id: Optional[int]  # None means any network

    # Endpoint: host/port for local nodes, provider_factory otherwise
    host: Optional[str] = None
    port: Optional[int] = None
    provider_factory: Optional[ProviderFactory] = field(
        default=None, repr=False, compare=False
    )

    # Optional deployment overrides
    gas_price_wei: Optional[int] = None
    gas_limit: Optional[int] = None
    timeout_blocks: Optional[int] = None
    skip_dry_run: bool = False
    from_address: Optional[str] = None

    @property
    def is_wildcard(self) -> bool:
        return self.chain_id is None

    @property
    def endpoint_url(self) -> Optional[str]:
        if self.host is None or self.port is None:
            return None
        return f"http://{self.host}:{self.port}"

    def accepts_chain_id(self, chain_id: int) -> bool:
        """
        Check whether a chain id reported by a node matches this profile.

        Args:
            chain_id: Chain id returned by the node

        Returns:
            True for wildcard profiles or an exact match
        """
        return self.chain_id is None or self.chain_id == chain_id

    def to_dict(self) -> Dict[str, Any]:
        """
        Render the profile in the persisted configuration shape.

        Unset optional fields are omitted. The provider factory is not
        serializable and never appears in the output.
        """
        result: Dict[str, Any] = {
            "network_id": WILDCARD_NETWORK_ID if self.chain_id is None else self.chain_id,
        }
        if self.host is not None:
            result["host"] = self.host
        if self.port is not None:
            result["port"] = self.port
        if self.gas_price_wei is not None:
            result["gasPrice"] = self.gas_price_wei
        if self.gas_limit is not None:
            result["gas"] = self.gas_limit
        if self.timeout_blocks is not None:
            result["timeoutBlocks"] = self.timeout_blocks
        if self.skip_dry_run:
            result["skipDryRun"] = True
        if self.from_address is not None:
            result["from"] = self.from_address
        return result


@dataclass(frozen=True)
class OptimizerSettings:
    """Solidity optimizer switch and expected call frequency."""

    enabled: bool
    runs: int


@dataclass(frozen=True)
class CompilerProfile:
    """Compiler version and optimizer settings."""

    version: str  # e.g. "0.8.10"
    optimizer: OptimizerSettings

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "optimizer": {
                "enabled": self.optimizer.enabled,
                "runs": self.optimizer.runs,
            },
        }

    def to_solc_settings(self) -> Dict[str, Any]:
        """Return the ``settings`` block of a solc standard-JSON input."""
        return {"optimizer": self.to_dict()["optimizer"]}
