"""
ChainBattles Deployment - Main Entry Point
Deploys the ChainBattles contract to the network selected in .env
and exits 0 on success, 1 on failure

Paths are relative to the working directory unless overridden:
NETWORK_CONFIG_PATH (network definitions), DEPLOY_LOG_DIR (log files)
"""

import asyncio
import os
import sys
from typing import Optional
from loguru import logger

from blockchain.contract_factory import Web3ContractFactoryProvider
from deployer.deployer import ContractFactoryProvider, deploy_contract
from utils.deployment_record import DeploymentRecord
from utils.network_config import load_network_config

CONTRACT_NAME = "ChainBattles"


def setup_logging():
    """Logs go to stderr and file; stdout carries only the result line"""
    log_dir = os.getenv('DEPLOY_LOG_DIR', 'data/logs')

    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level="INFO"
    )
    logger.add(
        os.path.join(log_dir, "deploy.log"),
        rotation="1 day",
        retention="7 days",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
        level="DEBUG"
    )


def format_error(error: BaseException) -> str:
    """Error type and message; never empty"""
    message = str(error)
    return f"{type(error).__name__}: {message}" if message else type(error).__name__


async def main(
    provider: Optional[ContractFactoryProvider] = None,
    contract_name: str = CONTRACT_NAME,
    record: Optional[DeploymentRecord] = None
) -> int:
    """
    Deploy the contract and print the outcome

    Args:
        provider: Contract factory provider (None = build from network config)
        contract_name: Contract to deploy
        record: Where to record a successful deployment (None = skip)

    Returns:
        Process exit code
    """
    chain_id = None

    if provider is None:
        try:
            network_config = load_network_config()
            provider = Web3ContractFactoryProvider.from_config(network_config)
        except Exception as e:
            logger.error(f"Could not set up deployment: {e}")
            print(format_error(e))
            return 1

        chain_id = network_config.chain_id
        if record is None:
            record = DeploymentRecord(network_config.network)

    if record is not None:
        try:
            previous = record.latest(contract_name)
            if previous:
                logger.info(f"Previous {contract_name} deployment: {previous['address']}")
        except Exception as e:
            logger.warning(f"Could not read deployment record: {e}")

    result = await deploy_contract(provider, contract_name)

    if not result.ok:
        print(format_error(result.error))
        return 1

    print("Contract deployed to:", result.address)

    if record is not None:
        record.save(contract_name, result.address, result.tx_hash, chain_id)

    return 0


def run(provider: Optional[ContractFactoryProvider] = None):
    """Run the deployment and terminate the process with its exit code"""
    setup_logging()
    sys.exit(asyncio.run(main(provider)))


if __name__ == "__main__":
    run()
