"""
contract-deploy-config: Python library describing smart contract deployment targets
"""

from importlib.metadata import PackageNotFoundError, version

from .api_keys import ApiKeyRegistry
from .config import DeploymentConfig, load_config
from .exceptions import (
    AmbiguousApiKeyError,
    ConfigError,
    MalformedSecretError,
    MissingSecretFileError,
    NetworkIdMismatchError,
    NetworkNotFoundError,
    SenderNotDerivedError,
    UnknownApiKeyAlternativeError,
)
from .mnemonic import Mnemonic
from .providers import ProviderFactory, ProviderHandle
from .types import CompilerSpec, NetworkFlags, NetworkProfile, OptimizerSettings

try:
    __version__ = version("contract-deploy-config")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "load_config",
    "DeploymentConfig",
    "NetworkProfile",
    "NetworkFlags",
    "CompilerSpec",
    "OptimizerSettings",
    "ApiKeyRegistry",
    "Mnemonic",
    "ProviderFactory",
    "ProviderHandle",
    "ConfigError",
    "MissingSecretFileError",
    "MalformedSecretError",
    "NetworkNotFoundError",
    "AmbiguousApiKeyError",
    "UnknownApiKeyAlternativeError",
    "NetworkIdMismatchError",
    "SenderNotDerivedError",
]
