"""
Deployer Package
Deployment logic and result types, independent of process lifecycle
"""

from .deployer import (
    ContractFactoryProvider,
    DeployFailure,
    DeployResult,
    DeploySuccess,
    deploy_contract,
)

__all__ = [
    'ContractFactoryProvider',
    'DeployFailure',
    'DeployResult',
    'DeploySuccess',
    'deploy_contract'
]
