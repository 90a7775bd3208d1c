"""Shared pytest fixtures for contract-deploy-config tests."""

from pathlib import Path

import pytest

from contract_deploy_config.mnemonic import Mnemonic

# Well-known development mnemonic; never funded on a public chain
TEST_MNEMONIC = "test test test test test test test test test test test junk"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def secret_file(fixtures_dir: Path) -> Path:
    """Return path to the sample mnemonic secret file."""
    return fixtures_dir / "test.secret"


@pytest.fixture
def padded_secret_file(tmp_path: Path) -> Path:
    """Create a secret file with surrounding whitespace."""
    path = tmp_path / ".secret"
    path.write_text(f"\n\t  {TEST_MNEMONIC}  \n\n")
    return path


@pytest.fixture
def blank_secret_file(tmp_path: Path) -> Path:
    """Create a secret file containing only whitespace."""
    path = tmp_path / ".secret"
    path.write_text("   \n\t\n")
    return path


@pytest.fixture
def test_mnemonic() -> Mnemonic:
    return Mnemonic(TEST_MNEMONIC)


@pytest.fixture(autouse=True)
def clear_etherscan_env(monkeypatch):
    """Keep the operator's environment out of the tests."""
    monkeypatch.delenv("ETHERSCAN_KEY_ALTERNATIVE", raising=False)
