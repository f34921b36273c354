"""Shared pytest fixtures for deployment-profiles tests."""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from deployment_profiles.environment import Environment

# Well-known development mnemonic; never holds real funds
TEST_MNEMONIC = "test test test test test test test test test test test junk"
TEST_ADDRESS_0 = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

RPC_URL = "https://rpc.example.org"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_config_json(fixtures_dir: Path) -> Dict[str, Any]:
    """Load and return the sample deployment-config.json fixture."""
    with open(fixtures_dir / "sample_config.json") as f:
        return json.load(f)


@pytest.fixture
def sample_config_path(fixtures_dir: Path) -> Path:
    """Return path to the sample configuration document."""
    return fixtures_dir / "sample_config.json"


@pytest.fixture
def empty_environment() -> Environment:
    """Environment with no secrets at all."""
    return Environment({})


@pytest.fixture
def full_environment() -> Environment:
    """Environment with every variable the built-in declarations read."""
    return Environment(
        {
            "MNEMONIC": TEST_MNEMONIC,
            "ROPSTEN": RPC_URL,
            "RINKEBY": RPC_URL,
            "GOERLI": RPC_URL,
            "BSCTESTNET": RPC_URL,
            "BSCMAINNET": RPC_URL,
            "MAINNET": RPC_URL,
            "ACCOUNT": TEST_ADDRESS_0,
            "ETHERAPI": "etherscan-key",
            "BSCSCAN": "bscscan-key",
        }
    )


@pytest.fixture
def clean_os_environ(monkeypatch):
    """Remove every variable the built-in declarations read from os.environ."""
    for name in [
        "MNEMONIC",
        "ROPSTEN",
        "RINKEBY",
        "GOERLI",
        "BSCTESTNET",
        "BSCMAINNET",
        "MAINNET",
        "ACCOUNT",
        "ETHERAPI",
        "BSCSCAN",
    ]:
        monkeypatch.delenv(name, raising=False)
