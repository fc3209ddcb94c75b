"""
Transaction Builder
Constructs and signs contract creation transactions
"""

from typing import Dict, Optional, Sequence
from web3 import Web3
from loguru import logger


class TransactionBuilder:
    """
    Builds contract deployment transactions for the deployer account
    """

    def __init__(
        self,
        w3: Web3,
        account,
        chain_id: Optional[int] = None,
        gas_buffer: float = 1.2,
        default_gas_limit: int = 3000000
    ):
        """
        Initialize Transaction Builder

        Args:
            w3: Web3 instance
            account: eth_account LocalAccount used for signing
            chain_id: Chain ID (None = ask the node)
            gas_buffer: Multiplier applied to the gas estimate
            default_gas_limit: Gas limit used when estimation fails
        """
        self.w3 = w3
        self.account = account
        self.chain_id = chain_id
        self.gas_buffer = gas_buffer
        self.default_gas_limit = default_gas_limit

    def build_deploy_tx(self, contract, args: Sequence = ()) -> Dict:
        """
        Build the creation transaction for a contract

        Args:
            contract: web3 contract class (abi + bytecode)
            args: Constructor arguments

        Returns:
            Transaction dict
        """
        constructor = contract.constructor(*args)

        # Estimate gas
        try:
            gas_estimate = constructor.estimate_gas({'from': self.account.address})
            gas_limit = int(gas_estimate * self.gas_buffer)
        except Exception as e:
            logger.warning(f"Gas estimation failed: {e}, using default")
            gas_limit = self.default_gas_limit

        gas_price = self.w3.eth.gas_price
        chain_id = self.chain_id if self.chain_id is not None else self.w3.eth.chain_id

        logger.info(f"Gas limit: {gas_limit}")
        logger.info(f"Gas price: {self.w3.from_wei(gas_price, 'gwei')} gwei")

        return constructor.build_transaction({
            'from': self.account.address,
            'nonce': self.w3.eth.get_transaction_count(self.account.address, 'pending'),
            'gas': gas_limit,
            'gasPrice': gas_price,
            'chainId': chain_id
        })

    def sign_and_send(self, transaction: Dict) -> bytes:
        """
        Sign a transaction with the deployer key and broadcast it

        Returns:
            Transaction hash
        """
        signed_tx = self.account.sign_transaction(transaction)
        tx_hash = self.w3.eth.send_raw_transaction(signed_tx.rawTransaction)

        logger.info(f"Transaction sent: {tx_hash.hex()}")
        return tx_hash
