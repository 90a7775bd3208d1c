"""JSON-RPC helpers for contract-deploy-config library."""

import requests


def fetch_network_id(rpc_url: str, timeout: float = 30) -> int:
    """
    Ask an RPC endpoint for its network id.

    Args:
        rpc_url: RPC endpoint URL
        timeout: Request timeout in seconds

    Returns:
        Network id reported by `net_version`

    Raises:
        ValueError: If RPC returns an error or a malformed response
        RuntimeError: If network error occurs
    """
    try:
        response = requests.post(
            rpc_url,
            json={
                "jsonrpc": "2.0",
                "method": "net_version",
                "params": [],
                "id": 1,
            },
            timeout=timeout,
        )

        # Check for HTTP errors
        if response.status_code != 200:
            raise RuntimeError(f"RPC request failed with status {response.status_code}")

        result = response.json()
        if not isinstance(result, dict):
            raise ValueError(f"Unexpected RPC response: {result!r}")

        # Check for RPC errors
        if "error" in result:
            raise ValueError(f"RPC error: {result['error']}")
        if "result" not in result:
            raise ValueError(f"RPC response missing result: {result!r}")

        # Some nodes answer in hex
        network_id = result["result"]
        if not isinstance(network_id, (str, int)):
            raise ValueError(f"Unexpected network id: {network_id!r}")
        if isinstance(network_id, str) and network_id.startswith("0x"):
            return int(network_id, 16)
        return int(network_id)

    except requests.RequestException as e:
        raise RuntimeError(f"Network error during RPC call: {e}") from e
