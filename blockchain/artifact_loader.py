"""
Artifact Loader
Reads compiled contract ABI and bytecode from Hardhat artifacts
"""

import os
import json
from dataclasses import dataclass
from typing import Dict, List, Optional
from loguru import logger


@dataclass
class ContractArtifact:
    """Compiled contract output"""

    name: str
    abi: List[Dict]
    bytecode: str


class ArtifactLoader:
    """
    Locates compiled contracts in a Hardhat artifacts directory
    Layout: artifacts/contracts/<Name>.sol/<Name>.json
    """

    def __init__(self, artifacts_dir: str = 'artifacts'):
        self.artifacts_dir = artifacts_dir

    def artifact_path(self, name: str) -> Optional[str]:
        """Resolve the artifact file for a contract name"""
        path = os.path.join(self.artifacts_dir, 'contracts', f"{name}.sol", f"{name}.json")
        if os.path.exists(path):
            return path

        # Contract defined in a file with a different name
        for root, _dirs, files in os.walk(self.artifacts_dir):
            if f"{name}.json" in files:
                return os.path.join(root, f"{name}.json")

        return None

    def load(self, name: str) -> ContractArtifact:
        """
        Load a compiled contract

        Args:
            name: Contract name

        Returns:
            ContractArtifact

        Raises:
            FileNotFoundError: No artifact for the contract
            ValueError: Artifact without ABI or bytecode
        """
        path = self.artifact_path(name)

        if path is None:
            raise FileNotFoundError(
                f"Contract artifact not found for {name} in {self.artifacts_dir} "
                f"(run 'npx hardhat compile' first)"
            )

        with open(path, 'r') as f:
            contract_json = json.load(f)

        abi = contract_json.get('abi')
        bytecode = contract_json.get('bytecode')

        if abi is None:
            raise ValueError(f"Artifact {path} has no ABI")

        if not bytecode or bytecode == '0x':
            raise ValueError(f"Artifact {path} has no bytecode (abstract contract or interface?)")

        logger.debug(f"Loaded artifact {path}")
        return ContractArtifact(name=name, abi=abi, bytecode=bytecode)
