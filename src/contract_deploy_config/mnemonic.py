"""Mnemonic secret handling for contract-deploy-config library."""

from dataclasses import dataclass, field
from pathlib import Path

from .exceptions import MalformedSecretError, MissingSecretFileError


@dataclass(frozen=True)
class Mnemonic:
    """Mnemonic phrase held in memory. Never rendered by repr or str."""

    phrase: str = field(repr=False)

    def __str__(self) -> str:
        return "Mnemonic(<redacted>)"

    @property
    def word_count(self) -> int:
        return len(self.phrase.split())


def read_mnemonic(secret_path: Path) -> Mnemonic:
    """
    Read the mnemonic phrase from a local secret file.

    The file is read once and surrounding whitespace is trimmed. The phrase
    grammar (word list, checksum) is not checked here; key derivation
    rejects invalid phrases when a provider is first built.

    Args:
        secret_path: Path to the secret file

    Returns:
        Mnemonic wrapping the trimmed phrase

    Raises:
        MissingSecretFileError: If the file does not exist or is a directory
        MalformedSecretError: If the file is not UTF-8 or is empty after trimming
    """
    try:
        with open(secret_path, encoding="utf-8") as f:
            phrase = f.read().strip()
    except (FileNotFoundError, IsADirectoryError) as e:
        raise MissingSecretFileError(f"Secret file not found at {secret_path}") from e
    except UnicodeDecodeError as e:
        raise MalformedSecretError(f"Secret file at {secret_path} is not valid UTF-8") from e

    if not phrase:
        raise MalformedSecretError(f"Secret file at {secret_path} is empty")

    return Mnemonic(phrase)
