"""
Deployment Record
Keeps a per-network history of deployed contract addresses
"""

import os
import json
import time
from typing import Dict, List, Optional
from loguru import logger


class DeploymentRecord:
    """
    Append-only log of deployments, one JSON file per network:
    deployments/<network>.json
    """

    def __init__(self, network: str, deployments_dir: str = 'deployments'):
        self.network = network
        self.deployments_dir = deployments_dir
        self.path = os.path.join(deployments_dir, f"{network}.json")

    def load(self) -> List[Dict]:
        """Load all recorded deployments for this network"""
        if not os.path.exists(self.path):
            return []

        with open(self.path, 'r') as f:
            return json.load(f)

    def latest(self, contract_name: str) -> Optional[Dict]:
        """Most recent deployment of a contract, if any"""
        entries = [e for e in self.load() if e['contract'] == contract_name]
        return entries[-1] if entries else None

    def save(
        self,
        contract_name: str,
        address: str,
        tx_hash: Optional[str] = None,
        chain_id: Optional[int] = None
    ) -> bool:
        """
        Record a successful deployment

        Args:
            contract_name: Deployed contract name
            address: On-chain address
            tx_hash: Creation transaction hash
            chain_id: Chain the contract lives on

        Returns:
            True if written
        """
        try:
            entries = self.load()
            entries.append({
                'contract': contract_name,
                'address': address,
                'tx_hash': tx_hash,
                'chain_id': chain_id,
                'timestamp': int(time.time())
            })

            os.makedirs(self.deployments_dir, exist_ok=True)
            with open(self.path, 'w') as f:
                json.dump(entries, f, indent=2)

            logger.success(f"Recorded {contract_name} deployment in {self.path}")
            return True

        except Exception as e:
            logger.error(f"Error writing deployment record: {e}")
            return False
