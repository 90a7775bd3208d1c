"""Lazy network provider construction for contract-deploy-config library."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from eth_account import Account
from eth_account.hdaccount import key_from_seed, seed_from_mnemonic
from eth_account.signers.local import LocalAccount
from web3 import Web3
from web3.middleware import ExtraDataToPOAMiddleware, SignAndSendRawMiddlewareBuilder

from .constants import DEFAULT_ADDRESS_INDEX, DEFAULT_DERIVATION_PATH, DEFAULT_NUM_ADDRESSES
from .exceptions import SenderNotDerivedError
from .mnemonic import Mnemonic

logger = logging.getLogger(__name__)


@dataclass
class ProviderHandle:
    """A connection bound to one network endpoint plus its signing accounts."""

    web3: Web3
    accounts: List[LocalAccount] = field(repr=False)

    @property
    def addresses(self) -> List[str]:
        return [account.address for account in self.accounts]


def derive_accounts(
    mnemonic: Mnemonic,
    address_index: int = DEFAULT_ADDRESS_INDEX,
    num_addresses: int = DEFAULT_NUM_ADDRESSES,
    derivation_path: str = DEFAULT_DERIVATION_PATH,
) -> List[LocalAccount]:
    """
    Derive consecutive accounts from a mnemonic.

    The seed is computed once and each account key is derived from it.

    Args:
        mnemonic: Secret phrase
        address_index: First index under `derivation_path`
        num_addresses: How many accounts to derive
        derivation_path: BIP-44 prefix, the index is appended

    Returns:
        List of local signing accounts

    Raises:
        ValidationError: If the phrase is not a valid mnemonic
    """
    seed = seed_from_mnemonic(mnemonic.phrase, "")
    return [
        Account.from_key(key_from_seed(seed, f"{derivation_path}/{index}"))
        for index in range(address_index, address_index + num_addresses)
    ]


class ProviderFactory:
    """
    Zero-argument callable building a ProviderHandle for one network.

    Nothing is built at construction time. Every call builds a fresh
    handle; handles are not cached. When `from_address` is set it becomes
    the default sender and must be one of the derived accounts.
    """

    def __init__(
        self,
        network: str,
        rpc_url: str,
        mnemonic: Mnemonic,
        *,
        from_address: Optional[str] = None,
        address_index: int = DEFAULT_ADDRESS_INDEX,
        num_addresses: int = DEFAULT_NUM_ADDRESSES,
        derivation_path: str = DEFAULT_DERIVATION_PATH,
        poa: bool = False,
        request_timeout: Optional[float] = None,
    ):
        self.network = network
        self.rpc_url = rpc_url
        self._mnemonic = mnemonic
        self.from_address = from_address
        self.address_index = address_index
        self.num_addresses = num_addresses
        self.derivation_path = derivation_path
        self.poa = poa
        self.request_timeout = request_timeout

    def _default_sender(self, accounts: List[LocalAccount]) -> Optional[str]:
        if self.from_address is None:
            return accounts[0].address if accounts else None

        for account in accounts:
            if account.address.lower() == self.from_address.lower():
                return account.address

        raise SenderNotDerivedError(
            f"Sender {self.from_address} for network '{self.network}' is not among the "
            f"{len(accounts)} accounts derived from the mnemonic at "
            f"{self.derivation_path} starting at index {self.address_index}"
        )

    def __call__(self) -> ProviderHandle:
        accounts = derive_accounts(
            self._mnemonic, self.address_index, self.num_addresses, self.derivation_path
        )
        sender = self._default_sender(accounts)

        request_kwargs = {}
        if self.request_timeout is not None:
            request_kwargs["timeout"] = self.request_timeout

        w3 = Web3(Web3.HTTPProvider(self.rpc_url, request_kwargs=request_kwargs))

        if self.poa:
            w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)
        w3.middleware_onion.inject(SignAndSendRawMiddlewareBuilder.build(accounts), layer=0)

        if sender is not None:
            w3.eth.default_account = sender

        logger.info(
            f"Built provider for {self.network} at {self.rpc_url} "
            f"({len(accounts)} accounts, sender {sender})"
        )
        return ProviderHandle(web3=w3, accounts=accounts)

    def __repr__(self) -> str:
        return (
            f"ProviderFactory(network={self.network!r}, rpc_url={self.rpc_url!r}, "
            f"from_address={self.from_address!r}, poa={self.poa!r})"
        )
