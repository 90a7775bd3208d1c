"""Main API for contract-deploy-config library."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .api_keys import ApiKeyRegistry
from .constants import (
    API_KEY_ALTERNATIVES,
    API_KEYS,
    DB_ENABLED,
    ETHERSCAN_KEY_ENV,
    MOCHA_TIMEOUT_MS,
    NETWORK_CONFIG,
    PLUGINS,
    SOLC_CONFIG,
)
from .exceptions import NetworkIdMismatchError, NetworkNotFoundError
from .mnemonic import Mnemonic, read_mnemonic
from .paths import resolve_secret_path
from .providers import ProviderFactory, ProviderHandle
from .rpc import fetch_network_id
from .types import CompilerSpec, NetworkFlags, NetworkProfile, OptimizerSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeploymentConfig:
    """Immutable deployment configuration record."""

    networks: Mapping[str, NetworkProfile]
    compilers: Mapping[str, CompilerSpec]
    mocha_timeout: int  # milliseconds
    plugins: Tuple[str, ...]
    api_keys: ApiKeyRegistry
    db_enabled: bool = False

    def network_names(self) -> List[str]:
        """Get configured network names in declaration order."""
        return list(self.networks)

    def has_network(self, name: str) -> bool:
        return name in self.networks

    def network(self, name: str) -> NetworkProfile:
        """
        Get a network profile by name.

        Raises:
            NetworkNotFoundError: If network is not configured
        """
        if name not in self.networks:
            raise NetworkNotFoundError(
                f"Network '{name}' not configured. "
                f"Available: {', '.join(self.networks)}"
            )
        return self.networks[name]

    def provider(self, name: str) -> ProviderHandle:
        """
        Select a network and build its provider.

        Raises:
            NetworkNotFoundError: If network is not configured
            SenderNotDerivedError: If the network sender is not a derived account
        """
        return self.network(name).provider_factory()

    @property
    def solc(self) -> CompilerSpec:
        return self.compilers["solc"]

    def verify_network(self, name: str, timeout: float = 30) -> int:
        """
        Check that a network's endpoint reports the configured network id.

        Args:
            name: Network name
            timeout: Request timeout in seconds

        Returns:
            The network id reported by the endpoint

        Raises:
            NetworkNotFoundError: If network is not configured
            NetworkIdMismatchError: If the endpoint reports another id
            RuntimeError: If the endpoint cannot be reached
        """
        profile = self.network(name)
        reported = fetch_network_id(profile.rpc_url, timeout=timeout)
        if reported != profile.chain_id:
            raise NetworkIdMismatchError(
                f"Network '{name}' expects id {profile.chain_id} "
                f"but {profile.rpc_url} reports {reported}"
            )
        return reported

    def to_dict(self) -> Dict[str, Any]:
        """
        Export the record consumed by the deployment runner.

        Raises:
            AmbiguousApiKeyError: If an API key alternative is unselected
        """
        return {
            "networks": {name: profile.to_dict() for name, profile in self.networks.items()},
            "mocha": {"timeout": self.mocha_timeout},
            "plugins": list(self.plugins),
            "api_keys": self.api_keys.as_dict(),
            "compilers": {name: spec.to_dict() for name, spec in self.compilers.items()},
            "db": {"enabled": self.db_enabled},
        }


def build_network_profiles(mnemonic: Mnemonic) -> Dict[str, NetworkProfile]:
    """
    Build network profiles with unevaluated provider factories.

    Args:
        mnemonic: Secret shared by every provider factory

    Returns:
        Dictionary mapping network name -> NetworkProfile
    """
    profiles: Dict[str, NetworkProfile] = {}
    for name, network_config in NETWORK_CONFIG.items():
        factory = ProviderFactory(
            name,
            network_config["rpc_url"],
            mnemonic,
            from_address=network_config.get("from"),
            poa=network_config.get("poa", False),
        )
        profiles[name] = NetworkProfile(
            name=name,
            provider_factory=factory,
            chain_id=network_config["network_id"],
            rpc_url=network_config["rpc_url"],
            from_address=network_config.get("from"),
            flags=NetworkFlags(
                skip_dry_run=network_config.get("skip_dry_run", False),
                timeout_blocks=network_config.get("timeout_blocks"),
                gas=network_config.get("gas"),
            ),
        )
    return profiles


def build_api_keys(etherscan_key: Optional[str] = None) -> ApiKeyRegistry:
    """
    Build the API key registry.

    Args:
        etherscan_key: Name of the etherscan key alternative
                       (defaults to $ETHERSCAN_KEY_ALTERNATIVE, empty means unset)

    Raises:
        UnknownApiKeyAlternativeError: If the alternative does not exist
    """
    if etherscan_key is None:
        # An empty variable counts as unset
        etherscan_key = os.environ.get(ETHERSCAN_KEY_ENV, "").strip() or None

    registry = ApiKeyRegistry(API_KEYS, API_KEY_ALTERNATIVES)
    if etherscan_key is not None:
        registry = registry.select("etherscan", etherscan_key)

    for service in registry.unresolved():
        logger.warning(
            f"API key for '{service}' not selected; choose one of "
            f"{', '.join(registry.alternatives(service))}"
        )
    return registry


def load_config(
    secret_path: Optional[Union[Path, str]] = None,
    etherscan_key: Optional[str] = None,
) -> DeploymentConfig:
    """
    Load the deployment configuration.

    Reads the mnemonic once and builds every network profile without
    contacting any endpoint.

    Args:
        secret_path: Mnemonic secret file (defaults to ./.secret)
        etherscan_key: Etherscan key alternative ("primary" or "alternate",
                       defaults to $ETHERSCAN_KEY_ALTERNATIVE, ignored when empty)

    Returns:
        DeploymentConfig

    Raises:
        MissingSecretFileError: If the secret file does not exist
        MalformedSecretError: If the secret file is empty after trimming
        UnknownApiKeyAlternativeError: If etherscan_key names no alternative
    """
    path = resolve_secret_path(secret_path)
    mnemonic = read_mnemonic(path)

    api_keys = build_api_keys(etherscan_key)
    networks = build_network_profiles(mnemonic)

    solc = CompilerSpec(
        version=SOLC_CONFIG["version"],
        optimizer=OptimizerSettings(
            enabled=SOLC_CONFIG["optimizer"]["enabled"],
            runs=SOLC_CONFIG["optimizer"]["runs"],
        ),
        evm_version=SOLC_CONFIG["evm_version"],
    )

    config = DeploymentConfig(
        networks=MappingProxyType(networks),
        compilers=MappingProxyType({"solc": solc}),
        mocha_timeout=MOCHA_TIMEOUT_MS,
        plugins=tuple(PLUGINS),
        api_keys=api_keys,
        db_enabled=DB_ENABLED,
    )

    logger.info(f"Loaded deployment config with {len(networks)} networks from secret at {path}")
    return config
