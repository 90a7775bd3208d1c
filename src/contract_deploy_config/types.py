"""Data types and dataclasses for contract-deploy-config library."""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional


@dataclass(frozen=True)
class NetworkFlags:
    """Operational flags passed through to the deployment runner."""

    skip_dry_run: bool = False
    timeout_blocks: Optional[int] = None
    gas: Optional[int] = None


@dataclass(frozen=True)
class NetworkProfile:
    """A named network target."""

    # Required fields
    name: str  # e.g., "bscTest"
    provider_factory: Callable[[], Any]  # Invoked only when the network is selected
    chain_id: int  # e.g., 97
    rpc_url: str

    # Optional fields
    from_address: Optional[str] = None
    flags: NetworkFlags = NetworkFlags()

    def to_dict(self) -> Dict[str, Any]:
        """
        Export in the shape the deployment runner reads.

        Optional keys are omitted when unset. The provider is exported
        unevaluated.
        """
        result: Dict[str, Any] = {
            "provider": self.provider_factory,
            "network_id": self.chain_id,
            "skipDryRun": self.flags.skip_dry_run,
        }
        if self.flags.gas is not None:
            result["gas"] = self.flags.gas
        if self.flags.timeout_blocks is not None:
            result["timeoutBlocks"] = self.flags.timeout_blocks
        if self.from_address is not None:
            result["from"] = self.from_address
        return result


@dataclass(frozen=True)
class OptimizerSettings:
    """Solidity optimizer settings. `runs` is inert when disabled."""

    enabled: bool
    runs: int


@dataclass(frozen=True)
class CompilerSpec:
    """Compiler selection and settings."""

    version: str  # e.g., "0.7.6"
    optimizer: OptimizerSettings
    evm_version: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        settings: Dict[str, Any] = {
            "optimizer": {
                "enabled": self.optimizer.enabled,
                "runs": self.optimizer.runs,
            }
        }
        if self.evm_version is not None:
            settings["evmVersion"] = self.evm_version
        return {"version": self.version, "settings": settings}
