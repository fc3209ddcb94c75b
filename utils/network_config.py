"""
Network Configuration
Resolves the target network, RPC endpoint and deployer key from
config/network_config.json (or NETWORK_CONFIG_PATH) and the .env file
"""

import os
import json
from dataclasses import dataclass
from typing import Dict, Optional
from loguru import logger
from dotenv import load_dotenv

load_dotenv()

DEFAULT_CONFIG_PATH = 'config/network_config.json'


@dataclass
class NetworkConfig:
    """Everything needed to reach one network and sign for it"""

    network: str
    name: str
    rpc_url: str
    private_key: str
    chain_id: Optional[int] = None
    confirmation_timeout: float = 300
    poll_interval: float = 2
    artifacts_dir: str = 'artifacts'

    def __repr__(self) -> str:
        # Never leak the key into logs or tracebacks
        return (
            f"NetworkConfig(network={self.network!r}, name={self.name!r}, "
            f"rpc_url={self.rpc_url!r}, chain_id={self.chain_id!r})"
        )


def _read_config_file(config_path: str) -> Dict:
    """Read the JSON network definitions"""
    with open(config_path, 'r') as f:
        return json.load(f)


def load_network_config(
    network: Optional[str] = None,
    config_path: Optional[str] = None
) -> NetworkConfig:
    """
    Build the configuration for the selected network

    Args:
        network: Network name (None = DEPLOY_NETWORK or the config default)
        config_path: Path to the network definitions
            (None = NETWORK_CONFIG_PATH or config/network_config.json)

    Returns:
        NetworkConfig for the selected network

    Raises:
        ValueError: Unknown network, or RPC URL / private key not set
    """
    config_path = config_path or os.getenv('NETWORK_CONFIG_PATH', DEFAULT_CONFIG_PATH)
    config = _read_config_file(config_path)
    networks = config.get('networks', {})

    network = network or os.getenv('DEPLOY_NETWORK') or config.get('default_network')

    if network not in networks:
        raise ValueError(
            f"Unknown network '{network}' (available: {', '.join(sorted(networks))})"
        )

    net = networks[network]

    rpc_url = os.getenv(net.get('rpc_url_env', '')) or net.get('rpc_url')
    if not rpc_url:
        raise ValueError(f"{net.get('rpc_url_env', 'RPC URL')} must be set for network '{network}'")

    private_key = os.getenv('DEPLOYER_PRIVATE_KEY')
    if not private_key:
        raise ValueError("DEPLOYER_PRIVATE_KEY must be set in .env")

    network_config = NetworkConfig(
        network=network,
        name=net.get('name', network),
        rpc_url=rpc_url,
        private_key=private_key,
        chain_id=net.get('chain_id'),
        confirmation_timeout=net.get('confirmation_timeout', 300),
        poll_interval=net.get('poll_interval', 2),
        artifacts_dir=os.getenv('ARTIFACTS_DIR', 'artifacts')
    )

    logger.info(f"Target network: {network_config.name} ({network})")
    logger.debug(f"RPC endpoint: {rpc_url}")

    return network_config
