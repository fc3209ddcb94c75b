"""
Blockchain Interaction Package
Handles artifact loading, deployment transactions and contract factories
"""

from .artifact_loader import ArtifactLoader, ContractArtifact
from .contract_factory import ContractFactory, DeployedContract, Web3ContractFactoryProvider
from .transaction_builder import TransactionBuilder

__all__ = [
    'ArtifactLoader',
    'ContractArtifact',
    'ContractFactory',
    'DeployedContract',
    'Web3ContractFactoryProvider',
    'TransactionBuilder'
]
