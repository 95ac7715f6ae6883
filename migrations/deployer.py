#!/usr/bin/env python3
"""
Contract deployer
Sends constructor transactions for compiled artifacts and records the results
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import requests
from web3 import Web3
from web3.exceptions import TimeExhausted, Web3Exception
from web3.middleware import ExtraDataToPOAMiddleware

from .artifacts import Artifact
from .config import NetworkConfig
from .errors import ConfigError, DeploymentError, DeployerConnectionError

logger = logging.getLogger(__name__)


@dataclass
class DeployedContract:
    """Handle to a contract instance on chain"""
    contract_name: str
    address: str
    transaction_hash: Optional[str]
    block_number: Optional[int]
    gas_used: Optional[int] = None
    constructor_args: Tuple[Any, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'address': self.address,
            'transactionHash': self.transaction_hash,
            'blockNumber': self.block_number,
            'gasUsed': self.gas_used,
            'constructorArgs': list(self.constructor_args),
        }

    @classmethod
    def from_dict(cls, name: str, data: Dict[str, Any]) -> 'DeployedContract':
        return cls(
            contract_name=name,
            address=data['address'],
            transaction_hash=data.get('transactionHash'),
            block_number=data.get('blockNumber'),
            gas_used=data.get('gasUsed'),
            constructor_args=tuple(data.get('constructorArgs', [])),
        )


def connect(config: NetworkConfig) -> Web3:
    """Open an HTTP connection to the configured node"""
    w3 = Web3(Web3.HTTPProvider(config.rpc_url))
    if config.poa_middleware:
        w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)

    if not w3.is_connected():
        raise DeployerConnectionError(f"Could not connect to RPC URL: {config.rpc_url}")

    logger.info(f"Connected to {config.network} at {config.rpc_url}")
    return w3


class Deployer:
    """Deploys artifacts from a single account"""

    def __init__(self, w3: Web3, config: NetworkConfig, account: Optional[Any] = None,
                 record: Optional[Dict[str, Any]] = None):
        self.w3 = w3
        self.config = config
        self.deployments: List[DeployedContract] = []
        self.record = record if record is not None else {}
        self.record.setdefault('contracts', {})

        if account is None and config.private_key:
            try:
                account = w3.eth.account.from_key(config.private_key)
            except ValueError as e:
                raise ConfigError(f"PRIVATE_KEY is not a valid key: {e}")
        self.account = account

    @property
    def sender(self) -> str:
        if self.account is not None:
            return self.account.address
        accounts = self.w3.eth.accounts
        if not accounts:
            raise DeploymentError("No PRIVATE_KEY configured and the node has no unlocked accounts")
        return accounts[0]

    def deploy(self, artifact: Artifact, *args: Any, overwrite: bool = True) -> DeployedContract:
        """
        Deploy a new instance of an artifact

        Args:
            artifact: Compiled contract to deploy
            *args: Constructor arguments, passed through unchanged and in order
            overwrite: When False, reuse an address already in the record

        Returns:
            DeployedContract for the new (or reused) instance
        """
        name = artifact.contract_name
        existing = self.record['contracts'].get(name)
        if not overwrite and existing and existing.get('address'):
            deployed = DeployedContract.from_dict(name, existing)
            logger.info(f"Reusing {name} at {deployed.address}")
            self.deployments.append(deployed)
            return deployed

        logger.info(f"Deploying {name}...")
        contract = self.w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
        constructor = contract.constructor(*args)
        sender = self.sender

        tx_params: Dict[str, Any] = {'from': sender}
        if self.config.gas_price is not None:
            tx_params['gasPrice'] = self.config.gas_price

        try:
            if self.config.gas_limit is not None:
                tx_params['gas'] = self.config.gas_limit
            else:
                tx_params['gas'] = constructor.estimate_gas({'from': sender})

            if self.account is not None:
                tx_params['nonce'] = self.w3.eth.get_transaction_count(sender, 'pending')
                tx_params['chainId'] = self.config.chain_id
                if 'gasPrice' not in tx_params:
                    tx_params['gasPrice'] = self.w3.eth.gas_price
                tx = constructor.build_transaction(tx_params)
                signed_tx = self.w3.eth.account.sign_transaction(tx, self.account.key)
                tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
            else:
                tx_hash = constructor.transact(tx_params)
        except requests.exceptions.ConnectionError as e:
            raise DeployerConnectionError(f"Lost connection to {self.config.rpc_url} while deploying {name}: {e}")
        except (ValueError, Web3Exception) as e:
            # Node-side rejections (underpriced, insufficient funds, revert on estimate)
            raise DeploymentError(f"{name} deployment rejected: {e}")

        tx_hex = Web3.to_hex(tx_hash)
        logger.info(f"-> Transaction sent! Hash: {tx_hex}")

        try:
            receipt = self.w3.eth.wait_for_transaction_receipt(
                tx_hash, timeout=self.config.confirmation_timeout
            )
        except requests.exceptions.ConnectionError as e:
            raise DeployerConnectionError(
                f"Lost connection to {self.config.rpc_url} waiting for {name} deployment {tx_hex}: {e}"
            )
        except TimeExhausted:
            raise DeploymentError(
                f"{name} deployment {tx_hex} not mined within {self.config.confirmation_timeout}s"
            )

        if receipt['status'] != 1:
            raise DeploymentError(f"{name} constructor reverted in tx {tx_hex}")
        address = receipt.get('contractAddress')
        if not address:
            raise DeploymentError(f"{name} receipt for {tx_hex} has no contract address")

        deployed = DeployedContract(
            contract_name=name,
            address=address,
            transaction_hash=tx_hex,
            block_number=receipt['blockNumber'],
            gas_used=receipt.get('gasUsed'),
            constructor_args=tuple(args),
        )
        logger.info(f"-> {name} deployed at {address} in block {deployed.block_number}")

        self.deployments.append(deployed)
        self.record['contracts'][name] = deployed.to_dict()
        return deployed
