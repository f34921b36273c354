"""Unit tests for the plugin registry."""

import pytest

from deployment_profiles.environment import Environment
from deployment_profiles.exceptions import MissingSecretError
from deployment_profiles.plugins import PluginRegistry


class TestFromEnvironment:
    """Test building the registry from the environment."""

    def test_api_key_returns_configured_value(self):
        """Test that a set variable yields its key."""
        plugins = PluginRegistry.from_environment(Environment({"ETHERAPI": "abc123"}))

        assert plugins.api_key("etherscan") == "abc123"

    def test_api_key_absent_when_unset(self):
        """Test that an unset variable yields None instead of raising."""
        plugins = PluginRegistry.from_environment(Environment({}))

        assert plugins.api_key("etherscan") is None
        assert plugins.api_key("bscscan") is None

    def test_unknown_service_is_absent(self):
        plugins = PluginRegistry.from_environment(Environment({"ETHERAPI": "abc123"}))

        assert plugins.api_key("polygonscan") is None

    def test_default_plugins(self):
        plugins = PluginRegistry.from_environment(Environment({}))

        assert plugins.plugins == ("truffle-plugin-verify",)
        assert plugins.has_plugin("truffle-plugin-verify")
        assert plugins.services() == ["etherscan", "bscscan"]

    def test_custom_tables(self):
        """Test passing custom plugin lists and key variables."""
        plugins = PluginRegistry.from_environment(
            Environment({"POLYGONSCAN_KEY": "poly"}),
            plugins=["b-plugin", "a-plugin"],
            api_key_env={"polygonscan": "POLYGONSCAN_KEY"},
        )

        assert plugins.plugins == ("b-plugin", "a-plugin")
        assert plugins.api_key("polygonscan") == "poly"


class TestRequireApiKey:
    """Test the require_api_key method."""

    def test_returns_key(self):
        plugins = PluginRegistry.from_environment(Environment({"BSCSCAN": "bsc"}))

        assert plugins.require_api_key("bscscan") == "bsc"

    def test_raises_naming_variable(self):
        """Test that a missing key names its environment variable."""
        plugins = PluginRegistry.from_environment(Environment({}))

        with pytest.raises(MissingSecretError) as exc_info:
            plugins.require_api_key("etherscan")

        assert exc_info.value.variable == "ETHERAPI"
        assert "etherscan" in str(exc_info.value)


class TestToDict:
    """Test the plugin record shape."""

    def test_to_dict(self):
        plugins = PluginRegistry.from_environment(Environment({"ETHERAPI": "abc123"}))

        assert plugins.to_dict() == {
            "plugins": ["truffle-plugin-verify"],
            "api_keys": {"etherscan": "abc123", "bscscan": None},
        }
