"""HD-wallet signing provider for deployment-profiles library."""

import logging
from typing import Any, Dict, List, Optional

import requests
from eth_account import Account
from eth_account.signers.local import LocalAccount

from .constants import DEFAULT_DERIVATION_PATH, RPC_TIMEOUT
from .exceptions import ProviderError

logger = logging.getLogger(__name__)

Account.enable_unaudited_hdwallet_features()


class SigningProvider:
    """
    Signing-capable connection built from a mnemonic and an RPC URL.

    Accounts are derived along ``m/44'/60'/0'/0/{index}``, starting at
    ``address_index``. Transactions are signed locally and submitted as raw
    transactions, so the node never sees a key.
    """

    def __init__(
        self,
        mnemonic: str,
        rpc_url: str,
        address_index: int = 0,
        num_addresses: int = 1,
        derivation_path: str = DEFAULT_DERIVATION_PATH,
        timeout: int = RPC_TIMEOUT,
    ):
        """
        Derive the accounts for this provider.

        Args:
            mnemonic: BIP-39 secret phrase
            rpc_url: JSON-RPC endpoint URL
            address_index: First derivation index to use
            num_addresses: Number of consecutive accounts to derive
            derivation_path: Path template with an ``{index}`` placeholder
            timeout: HTTP timeout in seconds for RPC calls
        """
        self.rpc_url = rpc_url
        self.timeout = timeout
        self._accounts: List[LocalAccount] = [
            Account.from_mnemonic(mnemonic, account_path=derivation_path.format(index=i))
            for i in range(address_index, address_index + num_addresses)
        ]
        self._request_id = 0
        logger.debug("Derived %d account(s) for %s", len(self._accounts), self.address)

    @property
    def address(self) -> str:
        """Default sender: the first derived account."""
        return self._accounts[0].address

    @property
    def addresses(self) -> List[str]:
        return [account.address for account in self._accounts]

    def _account_for(self, address: Optional[str]) -> LocalAccount:
        if address is None:
            return self._accounts[0]
        for account in self._accounts:
            if account.address.lower() == address.lower():
                return account
        raise ProviderError(f"Address {address} is not managed by this provider")

    def request(self, method: str, params: Optional[List[Any]] = None) -> Any:
        """
        Perform a JSON-RPC call against the provider's endpoint.

        Args:
            method: JSON-RPC method name, e.g. "eth_chainId"
            params: Positional parameters

        Returns:
            The ``result`` member of the response

        Raises:
            ProviderError: On network errors, HTTP errors or RPC errors
        """
        self._request_id += 1
        try:
            response = requests.post(
                self.rpc_url,
                json={
                    "jsonrpc": "2.0",
                    "method": method,
                    "params": params or [],
                    "id": self._request_id,
                },
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise ProviderError(f"Network error during RPC call: {e}") from e

        # Check for HTTP errors
        if response.status_code != 200:
            raise ProviderError(f"RPC request failed with status {response.status_code}")

        try:
            result = response.json()
        except ValueError as e:
            raise ProviderError(f"RPC response is not valid JSON: {e}") from e
        if not isinstance(result, dict):
            raise ProviderError(f"Malformed RPC response: {result!r}")

        # Check for RPC errors
        if "error" in result:
            raise ProviderError(f"RPC error: {result['error']}")
        if "result" not in result:
            raise ProviderError(f"RPC response has no result: {result!r}")

        return result["result"]

    def chain_id(self) -> int:
        """Chain id reported by the node."""
        return int(self.request("eth_chainId"), 16)

    def sign_transaction(self, transaction: Dict[str, Any]) -> str:
        """
        Sign a transaction with the sender named in its ``from`` field.

        Args:
            transaction: Transaction dict (nonce, gas, chainId, ...); ``from``
                         defaults to the first derived account

        Returns:
            0x-prefixed raw signed transaction
        """
        tx = dict(transaction)
        account = self._account_for(tx.pop("from", None))
        signed = account.sign_transaction(tx)
        return "0x" + bytes(signed.raw_transaction).hex()

    def send_transaction(self, transaction: Dict[str, Any]) -> str:
        """
        Sign a transaction locally and submit it.

        Returns:
            Transaction hash reported by the node
        """
        raw = self.sign_transaction(transaction)
        return self.request("eth_sendRawTransaction", [raw])
