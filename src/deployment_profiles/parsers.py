"""Configuration parsers for deployment-profiles library."""

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .constants import DEFAULT_OPTIMIZER_RUNS, MNEMONIC_ENV, WILDCARD_NETWORK_ID
from .exceptions import ConfigurationError, DuplicateNetworkError, InvalidNumericFieldError
from .types import CompilerProfile, NetworkDeclaration, OptimizerSettings, ProviderSpec


def parse_non_negative_int(value: Any, field: str) -> int:
    """
    Validate a configured integer field.

    Args:
        value: Raw value (int or decimal string)
        field: Field name used in the error message

    Returns:
        The value as an int

    Raises:
        InvalidNumericFieldError: If value is negative, boolean or non-numeric
    """
    # bool is an int subclass, but True is not a gas limit
    if isinstance(value, bool):
        raise InvalidNumericFieldError(field, value)

    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and value.strip().isascii():
        try:
            number = int(value.strip())
        except ValueError:
            raise InvalidNumericFieldError(field, value) from None
    else:
        raise InvalidNumericFieldError(field, value)

    if number < 0:
        raise InvalidNumericFieldError(field, value)
    return number


def _optional_int(data: Mapping[str, Any], key: str, field: str) -> Optional[int]:
    if data.get(key) is None:
        return None
    return parse_non_negative_int(data[key], field)


def parse_network_id(value: Any, network: str) -> Union[int, str]:
    """
    Parse a network id, keeping the wildcard as-is.

    Args:
        value: Integer chain id or "*"
        network: Network name for error messages

    Returns:
        Integer chain id, or WILDCARD_NETWORK_ID
    """
    if value == WILDCARD_NETWORK_ID:
        return WILDCARD_NETWORK_ID
    return parse_non_negative_int(value, f"{network}.network_id")


def parse_provider_spec(data: Mapping[str, Any], network: str) -> ProviderSpec:
    """
    Parse the provider block of a network declaration.

    Args:
        data: {"rpc_url_env": ..., "mnemonic_env"?: ..., "address_index"?: ...,
               "num_addresses"?: ...}
        network: Network name for error messages

    Raises:
        ConfigurationError: If rpc_url_env is missing
        InvalidNumericFieldError: If an index field is invalid
    """
    if not isinstance(data, Mapping) or not data.get("rpc_url_env"):
        raise ConfigurationError(
            f"Network '{network}' provider must name its RPC URL variable in 'rpc_url_env'"
        )

    num_addresses = parse_non_negative_int(
        data.get("num_addresses", 1), f"{network}.provider.num_addresses"
    )
    if num_addresses == 0:
        raise InvalidNumericFieldError(f"{network}.provider.num_addresses", 0)

    return ProviderSpec(
        rpc_url_env=data["rpc_url_env"],
        mnemonic_env=data.get("mnemonic_env", MNEMONIC_ENV),
        address_index=parse_non_negative_int(
            data.get("address_index", 0), f"{network}.provider.address_index"
        ),
        num_addresses=num_addresses,
    )


def parse_network_declaration(name: str, data: Mapping[str, Any]) -> NetworkDeclaration:
    """
    Parse one entry of the ``networks`` table.

    A declaration needs either a provider block or an explicit host/port pair.

    Args:
        name: Network name (registry key)
        data: Declaration in the persisted configuration shape

    Returns:
        NetworkDeclaration

    Raises:
        ConfigurationError: If the declaration is structurally invalid
        InvalidNumericFieldError: If a numeric field is negative or non-numeric
    """
    if not isinstance(name, str) or not name:
        raise ConfigurationError("Network names must be non-empty strings")
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"Network '{name}' declaration must be an object")
    if "network_id" not in data:
        raise ConfigurationError(f"Network '{name}' is missing 'network_id'")

    network_id = parse_network_id(data["network_id"], name)

    provider = None
    if data.get("provider") is not None:
        provider = parse_provider_spec(data["provider"], name)

    host = data.get("host")
    port = _optional_int(data, "port", f"{name}.port")
    if provider is None and (host is None or port is None):
        raise ConfigurationError(
            f"Network '{name}' needs either a provider or both 'host' and 'port'"
        )

    skip_dry_run = data.get("skipDryRun", False)
    if not isinstance(skip_dry_run, bool):
        raise ConfigurationError(
            f"Network '{name}' field 'skipDryRun' must be a boolean, got {skip_dry_run!r}"
        )

    return NetworkDeclaration(
        name=name,
        network_id=network_id,
        host=host,
        port=port,
        provider=provider,
        gas_price=_optional_int(data, "gasPrice", f"{name}.gasPrice"),
        gas=_optional_int(data, "gas", f"{name}.gas"),
        timeout_blocks=_optional_int(data, "timeoutBlocks", f"{name}.timeoutBlocks"),
        skip_dry_run=skip_dry_run,
        from_address=data.get("from"),
        from_env=data.get("from_env"),
    )


def parse_compiler_profile(data: Mapping[str, Any]) -> CompilerProfile:
    """
    Parse the compiler record ``{version, optimizer: {enabled, runs}}``.

    A missing optimizer block means the optimizer is disabled.

    Raises:
        ConfigurationError: If version is missing or enabled is not a boolean
        InvalidNumericFieldError: If runs is negative or non-numeric
    """
    if not isinstance(data, Mapping):
        raise ConfigurationError("Compiler record must be an object")
    version = data.get("version")
    if not isinstance(version, str) or not version:
        raise ConfigurationError("Compiler record must include a 'version' string")

    optimizer = data.get("optimizer")
    if optimizer is None:
        optimizer = {}
    elif not isinstance(optimizer, Mapping):
        raise ConfigurationError("Compiler field 'optimizer' must be an object")
    enabled = optimizer.get("enabled", False)
    if not isinstance(enabled, bool):
        raise ConfigurationError(
            f"Compiler field 'optimizer.enabled' must be a boolean, got {enabled!r}"
        )
    runs = parse_non_negative_int(
        optimizer.get("runs", DEFAULT_OPTIMIZER_RUNS), "optimizer.runs"
    )

    return CompilerProfile(
        version=version,
        optimizer=OptimizerSettings(enabled=enabled, runs=runs),
    )


def parse_plugin_list(data: Any) -> List[str]:
    """
    Parse the ordered plugin list.

    Raises:
        ConfigurationError: If data is not a list of strings
    """
    if not isinstance(data, list) or not all(isinstance(p, str) for p in data):
        raise ConfigurationError("'plugins' must be a list of plugin names")
    return list(data)


def parse_api_key_env(data: Any) -> Dict[str, str]:
    """
    Parse the service -> environment variable table for API keys.

    Raises:
        ConfigurationError: If data is not a mapping of strings
    """
    if not isinstance(data, Mapping) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in data.items()
    ):
        raise ConfigurationError(
            "'api_keys' must map service names to environment variable names"
        )
    return dict(data)


class _JsonObject(dict):
    """JSON object that remembers keys it saw more than once."""

    duplicate_keys: tuple = ()


def _collect_duplicate_keys(pairs: List[Tuple[str, Any]]) -> "_JsonObject":
    result = _JsonObject()
    duplicates = []
    for key, value in pairs:
        if key in result:
            duplicates.append(key)
        result[key] = value
    result.duplicate_keys = tuple(duplicates)
    return result


def load_config_document(file_path: Path) -> Dict[str, Any]:
    """
    Read a JSON configuration document.

    Args:
        file_path: Path to deployment-config.json

    Returns:
        Raw document dictionary

    Raises:
        ConfigurationError: If the file is not a JSON object or repeats a
                            top-level key
        DuplicateNetworkError: If the networks table repeats a name
    """
    with open(file_path) as f:
        try:
            data = json.load(f, object_pairs_hook=_collect_duplicate_keys)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration document {file_path} must be a JSON object")
    if data.duplicate_keys:
        raise ConfigurationError(
            f"Configuration document {file_path} repeats keys: {', '.join(data.duplicate_keys)}"
        )

    networks = data.get("networks")
    if isinstance(networks, _JsonObject) and networks.duplicate_keys:
        raise DuplicateNetworkError(
            f"Network(s) declared more than once in {file_path}: "
            f"{', '.join(networks.duplicate_keys)}"
        )
    return data
