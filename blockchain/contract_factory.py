"""
Contract Factory
web3-backed provider of deployable contracts:
provider -> factory -> pending deployment -> confirmed contract
"""

import asyncio
import time
from typing import Dict, List, Optional
from web3 import Web3
from web3.exceptions import TransactionNotFound
from eth_account import Account
from loguru import logger

from .artifact_loader import ArtifactLoader
from .transaction_builder import TransactionBuilder


class DeployedContract:
    """
    Handle to a contract creation transaction
    address is None until deployed() confirms it
    """

    def __init__(
        self,
        w3: Web3,
        name: str,
        abi: List[Dict],
        tx_hash: bytes,
        confirmation_timeout: float = 300,
        poll_interval: float = 2
    ):
        self.w3 = w3
        self.name = name
        self.abi = abi
        self.tx_hash = tx_hash
        self.confirmation_timeout = confirmation_timeout
        self.poll_interval = poll_interval

        self.address: Optional[str] = None
        self.receipt = None

    async def deployed(self) -> 'DeployedContract':
        """
        Wait until the creation transaction is mined

        Returns:
            self, with address set

        Raises:
            RuntimeError: Transaction reverted
            TimeoutError: No receipt within confirmation_timeout
        """
        if self.address is not None:
            return self

        logger.info("Waiting for confirmation...")
        deadline = time.monotonic() + self.confirmation_timeout

        while True:
            try:
                receipt = self.w3.eth.get_transaction_receipt(self.tx_hash)
                break
            except TransactionNotFound:
                if time.monotonic() >= deadline:
                    raise TimeoutError(
                        f"{self.name} deployment not confirmed after "
                        f"{self.confirmation_timeout}s: {self.tx_hash.hex()}"
                    )
                await asyncio.sleep(self.poll_interval)

        if receipt['status'] != 1:
            raise RuntimeError(f"transaction reverted: {self.tx_hash.hex()}")

        self.receipt = receipt
        self.address = receipt['contractAddress']

        logger.success(f"{self.name} confirmed in block {receipt['blockNumber']}")
        logger.info(f"Gas used: {receipt['gasUsed']}")
        return self


class ContractFactory:
    """
    Produces creation transactions for one compiled contract
    """

    def __init__(
        self,
        w3: Web3,
        name: str,
        abi: List[Dict],
        bytecode: str,
        tx_builder: TransactionBuilder,
        confirmation_timeout: float = 300,
        poll_interval: float = 2
    ):
        self.w3 = w3
        self.name = name
        self.abi = abi
        self.bytecode = bytecode
        self.tx_builder = tx_builder
        self.confirmation_timeout = confirmation_timeout
        self.poll_interval = poll_interval

    async def deploy(self, *args) -> DeployedContract:
        """
        Sign and broadcast the creation transaction

        Args:
            *args: Constructor arguments

        Returns:
            Pending DeployedContract handle
        """
        contract = self.w3.eth.contract(abi=self.abi, bytecode=self.bytecode)

        logger.info(f"Building {self.name} deployment transaction...")
        transaction = self.tx_builder.build_deploy_tx(contract, args)

        logger.info("Sending deployment transaction...")
        tx_hash = self.tx_builder.sign_and_send(transaction)

        return DeployedContract(
            self.w3,
            self.name,
            self.abi,
            tx_hash,
            confirmation_timeout=self.confirmation_timeout,
            poll_interval=self.poll_interval
        )


class Web3ContractFactoryProvider:
    """
    Hands out ContractFactory objects for compiled contracts
    on the configured network
    """

    def __init__(
        self,
        w3: Web3,
        account,
        artifact_loader: ArtifactLoader,
        tx_builder: Optional[TransactionBuilder] = None,
        confirmation_timeout: float = 300,
        poll_interval: float = 2
    ):
        """
        Initialize provider

        Args:
            w3: Web3 instance
            account: Deployer account (eth_account LocalAccount)
            artifact_loader: Source of ABI and bytecode
            tx_builder: Transaction builder (default: built from w3/account)
            confirmation_timeout: Seconds to wait for a deployment receipt
            poll_interval: Seconds between receipt polls
        """
        self.w3 = w3
        self.account = account
        self.artifact_loader = artifact_loader
        self.tx_builder = tx_builder or TransactionBuilder(w3, account)
        self.confirmation_timeout = confirmation_timeout
        self.poll_interval = poll_interval

    @classmethod
    def from_config(cls, network_config) -> 'Web3ContractFactoryProvider':
        """Build a provider from a NetworkConfig"""
        w3 = Web3(Web3.HTTPProvider(network_config.rpc_url))
        account = Account.from_key(network_config.private_key)

        logger.info(f"Deploying from: {account.address}")

        return cls(
            w3,
            account,
            ArtifactLoader(network_config.artifacts_dir),
            TransactionBuilder(w3, account, chain_id=network_config.chain_id),
            confirmation_timeout=network_config.confirmation_timeout,
            poll_interval=network_config.poll_interval
        )

    async def get_contract_factory(self, name: str) -> ContractFactory:
        """
        Get a factory for a compiled contract

        Args:
            name: Contract name

        Returns:
            ContractFactory

        Raises:
            ConnectionError: Node not reachable
        """
        if not self.w3.is_connected():
            raise ConnectionError(f"network unreachable: {self.w3.provider}")

        balance = self.w3.eth.get_balance(self.account.address)
        logger.info(f"Account balance: {self.w3.from_wei(balance, 'ether')}")

        artifact = self.artifact_loader.load(name)

        return ContractFactory(
            self.w3,
            artifact.name,
            artifact.abi,
            artifact.bytecode,
            self.tx_builder,
            confirmation_timeout=self.confirmation_timeout,
            poll_interval=self.poll_interval
        )
