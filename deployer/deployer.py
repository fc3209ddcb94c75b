"""
Contract Deployer
Deploys one named contract through an injected factory provider
and reports the outcome as a DeployResult
"""

from dataclasses import dataclass
from typing import Any, Optional, Protocol, Union
from loguru import logger


class DeploymentHandle(Protocol):
    address: Optional[str]

    async def deployed(self) -> Any: ...


class ContractFactoryLike(Protocol):
    async def deploy(self, *args) -> DeploymentHandle: ...


class ContractFactoryProvider(Protocol):
    async def get_contract_factory(self, name: str) -> ContractFactoryLike: ...


@dataclass
class DeploySuccess:
    """Contract confirmed on-chain"""

    address: str
    contract_name: str
    tx_hash: Optional[str] = None

    @property
    def ok(self) -> bool:
        return True


@dataclass
class DeployFailure:
    """Any step of the deployment raised"""

    error: BaseException
    contract_name: str

    @property
    def ok(self) -> bool:
        return False


DeployResult = Union[DeploySuccess, DeployFailure]


def _format_tx_hash(tx_hash) -> Optional[str]:
    if tx_hash is None:
        return None
    if isinstance(tx_hash, (bytes, bytearray)):
        return '0x' + bytes(tx_hash).hex()
    return str(tx_hash)


async def deploy_contract(provider: ContractFactoryProvider, contract_name: str) -> DeployResult:
    """
    Deploy a contract and wait for confirmation

    Args:
        provider: Source of contract factories
        contract_name: Contract to deploy

    Returns:
        DeploySuccess with the address, or DeployFailure with the error
    """
    try:
        logger.info(f"Starting {contract_name} deployment...")

        factory = await provider.get_contract_factory(contract_name)
        contract = await factory.deploy()
        await contract.deployed()

        logger.success(f"{contract_name} deployed at {contract.address}")

        return DeploySuccess(
            address=contract.address,
            contract_name=contract_name,
            tx_hash=_format_tx_hash(getattr(contract, 'tx_hash', None))
        )

    except Exception as e:
        logger.error(f"{contract_name} deployment failed: {e}")
        return DeployFailure(error=e, contract_name=contract_name)
