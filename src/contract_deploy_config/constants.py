"""Configuration constants for contract-deploy-config library."""

DEFAULT_SECRET_FILENAME = ".secret"

# Account that signs deployments on every network that pins a sender
DEPLOYER_ADDRESS = "0x0B88418E95fb05d742E526E869ee2404d7904F81"

# Network targets, in the order they are exposed
# "poa" marks chains whose headers carry oversized extraData
NETWORK_CONFIG = {
    "harmonyTest": {
        "rpc_url": "https://api.s1.b.hmny.io",
        "network_id": 1666700001,
        "skip_dry_run": True,
        "from": DEPLOYER_ADDRESS,
        "poa": False,
    },
    "arbitrumTest": {
        "rpc_url": "https://rinkeby.arbitrum.io/rpc",
        "network_id": 421611,
        "skip_dry_run": True,
        "gas": 287853530,
        "from": DEPLOYER_ADDRESS,
        "poa": False,
    },
    "rinkeby": {
        "rpc_url": "https://rinkeby.infura.io/v3/9aa3d95b3bc440fa88ea12eaa4456161",
        "network_id": 4,
        "skip_dry_run": True,
        "from": DEPLOYER_ADDRESS,
        "poa": True,
    },
    "bscTest": {
        "rpc_url": "https://data-seed-prebsc-1-s1.binance.org:8545",
        "network_id": 97,
        "timeout_blocks": 120000,
        "skip_dry_run": True,
        "from": DEPLOYER_ADDRESS,
        "poa": True,
    },
    "ropsten": {
        "rpc_url": "https://ropsten.infura.io/v3/9aa3d95b3bc440fa88ea12eaa4456161",
        "network_id": 3,
        "timeout_blocks": 120000,
        "skip_dry_run": True,
        "from": DEPLOYER_ADDRESS,
        "poa": False,
    },
    "bsc": {
        "rpc_url": "https://bsc-dataseed1.binance.org",
        "network_id": 56,
        "timeout_blocks": 200,
        "skip_dry_run": True,
        "poa": True,
    },
}

# HD wallet derivation defaults (BIP-44, Ethereum coin type)
DEFAULT_DERIVATION_PATH = "m/44'/60'/0'/0"
DEFAULT_ADDRESS_INDEX = 0
DEFAULT_NUM_ADDRESSES = 10

# Test runner timeout in milliseconds
MOCHA_TIMEOUT_MS = 1200000

PLUGINS = ("truffle-plugin-verify",)

# Block explorer API keys used by the verify plugin
API_KEYS = {
    "ftmscan": "K9GKU27P3DAG7N49AW9562FZ29PKRB7MFW",
    "bscscan": "A2HNWK3VKZNQFAGU254HW1DAG4RPB8FI8T",
}

# Services with more than one candidate key; the operator must pick one
API_KEY_ALTERNATIVES = {
    "etherscan": {
        "primary": "NPIT4183DK8BMGVZDT9C4R14S1QMEHIT88",
        "alternate": "A2HNWK3VKZNQFAGU254HW1DAG4RPB8FI8T",
    },
}

ETHERSCAN_KEY_ENV = "ETHERSCAN_KEY_ALTERNATIVE"

SOLC_CONFIG = {
    "version": "0.7.6",
    "optimizer": {
        "enabled": True,
        "runs": 200,
    },
    "evm_version": None,
}

DB_ENABLED = False
