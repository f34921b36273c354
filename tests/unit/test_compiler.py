"""Unit tests for the compiler profile."""

import json

import pytest

from deployment_profiles.compiler import (
    dump_compiler_profile,
    get_compiler_profile,
    load_compiler_profile,
)
from deployment_profiles.exceptions import InvalidNumericFieldError
from deployment_profiles.types import CompilerProfile, OptimizerSettings


class TestGetCompilerProfile:
    """Test the get_compiler_profile function."""

    def test_returns_builtin_settings(self):
        profile = get_compiler_profile()

        assert profile.version == "0.8.10"
        assert profile.optimizer.enabled is True
        assert profile.optimizer.runs == 9999

    def test_profile_is_immutable(self):
        """Test that the returned profile cannot be modified."""
        profile = get_compiler_profile()

        with pytest.raises(AttributeError):
            profile.version = "0.4.24"

    def test_solc_settings(self):
        """Test rendering the solc standard-JSON settings block."""
        settings = get_compiler_profile().to_solc_settings()

        assert settings == {"optimizer": {"enabled": True, "runs": 9999}}


class TestSerialization:
    """Test dumping and loading compiler profiles."""

    def test_round_trip_keeps_fields(self):
        """Test that dump then load keeps version and optimizer fields."""
        original = get_compiler_profile()

        restored = load_compiler_profile(dump_compiler_profile(original))

        assert restored.version == original.version
        assert restored.optimizer.enabled == original.optimizer.enabled
        assert restored.optimizer.runs == original.optimizer.runs
        assert restored == original

    def test_round_trip_with_disabled_optimizer(self):
        original = CompilerProfile("0.5.17", OptimizerSettings(enabled=False, runs=0))

        assert load_compiler_profile(dump_compiler_profile(original)) == original

    def test_dump_shape(self):
        """Test the serialized record shape."""
        data = json.loads(dump_compiler_profile(get_compiler_profile()))

        assert data == {"version": "0.8.10", "optimizer": {"enabled": True, "runs": 9999}}

    def test_load_rejects_negative_runs(self):
        text = json.dumps({"version": "0.8.10", "optimizer": {"enabled": True, "runs": -200}})

        with pytest.raises(InvalidNumericFieldError):
            load_compiler_profile(text)
