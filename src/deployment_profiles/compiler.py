"""Compiler profile access and serialization for deployment-profiles library."""

import json

from .constants import COMPILER_CONFIG
from .parsers import parse_compiler_profile
from .types import CompilerProfile


def get_compiler_profile() -> CompilerProfile:
    """Return the built-in compiler profile."""
    return parse_compiler_profile(COMPILER_CONFIG)


def dump_compiler_profile(profile: CompilerProfile) -> str:
    """Serialize a compiler profile as JSON."""
    return json.dumps(profile.to_dict(), indent=2)


def load_compiler_profile(text: str) -> CompilerProfile:
    """
    Parse a compiler profile from JSON.

    Raises:
        ConfigurationError: If the record is malformed
        InvalidNumericFieldError: If optimizer.runs is invalid
    """
    return parse_compiler_profile(json.loads(text))
