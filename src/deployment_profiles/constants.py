"""Configuration constants for deployment-profiles library."""

# Wildcard network id accepted by local development nodes
WILDCARD_NETWORK_ID = "*"

MNEMONIC_ENV = "MNEMONIC"
ACCOUNT_ENV = "ACCOUNT"

# BIP-44 Ethereum path, same as the HD wallet provider's default
DEFAULT_DERIVATION_PATH = "m/44'/60'/0'/0/{index}"

RPC_TIMEOUT = 30

# Built-in network declarations in the persisted configuration shape.
# Secrets are referenced by environment variable name, never by value.
NETWORK_DECLARATIONS = {
    "development": {
        "host": "127.0.0.1",
        "port": 8545,
        "network_id": WILDCARD_NETWORK_ID,
    },
    "ropsten": {
        "provider": {"rpc_url_env": "ROPSTEN", "address_index": 0},
        "network_id": 3,
        "gasPrice": 10_000_000_000,
        "timeoutBlocks": 5_000_000,
        "skipDryRun": True,
    },
    "rinkeby": {
        "provider": {"rpc_url_env": "RINKEBY"},
        "network_id": 4,
        "gasPrice": 10_000_000_000,
        "skipDryRun": True,
    },
    "goerli": {
        "provider": {"rpc_url_env": "GOERLI"},
        "network_id": 5,
        "gasPrice": 10_000_000_000,
    },
    "bsctestnet": {
        "provider": {"rpc_url_env": "BSCTESTNET"},
        "network_id": 97,
        "gas": 15_000_000,
        "skipDryRun": True,
    },
    "bscmainnet": {
        "provider": {"rpc_url_env": "BSCMAINNET"},
        "network_id": 56,
        "skipDryRun": True,
    },
    "mainnet": {
        "provider": {"rpc_url_env": "MAINNET", "address_index": 0},
        "network_id": 1,
        "gasPrice": 50_000_000_000,
        "timeoutBlocks": 5_000_000,
        "skipDryRun": True,
        "from_env": ACCOUNT_ENV,
    },
}

COMPILER_CONFIG = {
    "version": "0.8.10",
    "optimizer": {
        "enabled": True,
        "runs": 9999,
    },
}

# solc's own default when the optimizer block omits runs
DEFAULT_OPTIMIZER_RUNS = 200

PLUGINS = ["truffle-plugin-verify"]

# Verification service -> environment variable holding its API key
API_KEY_ENV = {
    "etherscan": "ETHERAPI",
    "bscscan": "BSCSCAN",
}
