"""Path management utilities for contract-deploy-config library."""

from pathlib import Path
from typing import Optional, Union

from .constants import DEFAULT_SECRET_FILENAME


def get_default_secret_path() -> Path:
    """
    Get default mnemonic secret file path.

    Returns:
        Path to ./.secret
    """
    return Path.cwd() / DEFAULT_SECRET_FILENAME


def resolve_secret_path(secret_path: Optional[Union[Path, str]] = None) -> Path:
    """
    Resolve the secret file path.

    Args:
        secret_path: Custom secret file (defaults to ./.secret)

    Returns:
        Absolute path to the secret file
    """
    if secret_path is None:
        return get_default_secret_path()
    return Path(secret_path).absolute()
