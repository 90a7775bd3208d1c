"""Custom exception classes for contract-deploy-config library."""


class ConfigError(Exception):
    """Base exception for configuration errors."""

    pass


class MissingSecretFileError(ConfigError, FileNotFoundError):
    """Raised when the mnemonic secret file does not exist."""

    pass


class MalformedSecretError(ConfigError, ValueError):
    """Raised when the mnemonic secret file is empty after trimming."""

    pass


class NetworkNotFoundError(ConfigError, ValueError):
    """Raised when requested network is not configured."""

    pass


class AmbiguousApiKeyError(ConfigError, LookupError):
    """Raised when a service has several candidate API keys and none was selected."""

    pass


class UnknownApiKeyAlternativeError(ConfigError, ValueError):
    """Raised when selecting an API key alternative that does not exist."""

    pass


class NetworkIdMismatchError(ConfigError, ValueError):
    """Raised when an RPC endpoint reports a different network id than configured."""

    pass


class SenderNotDerivedError(ConfigError, ValueError):
    """Raised when a network's sender is not among the accounts derived from the mnemonic."""

    pass
