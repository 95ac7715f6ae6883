#!/usr/bin/env python3
"""
Network configuration for contract deployment.
Values come from the environment (optionally a .env file).
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from contracts import DEFAULT_ARTIFACTS_DIR
from .errors import ConfigError

_TRUE_VALUES = ('1', 'true', 'yes', 'on')


@dataclass
class NetworkConfig:
    """Connection and transaction settings for one network"""
    network: str = "development"
    rpc_url: str = "http://localhost:8545"
    private_key: Optional[str] = None
    chain_id: int = 1337
    gas_limit: Optional[int] = None
    gas_price: Optional[int] = None
    confirmation_timeout: int = 120
    poa_middleware: bool = False
    artifacts_dir: str = DEFAULT_ARTIFACTS_DIR
    deployment_file: str = "deployment.json"


def _get_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    raw = raw.strip()
    try:
        if raw.lower().startswith('0x'):
            return int(raw, 16)
        return int(raw, 10)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")


def load_config(network: Optional[str] = None, dotenv: bool = True) -> NetworkConfig:
    """
    Build a NetworkConfig from environment variables

    Args:
        network: Overrides NETWORK from the environment
        dotenv: Load a .env file first (existing variables win)

    Returns:
        Populated NetworkConfig
    """
    if dotenv:
        load_dotenv()

    private_key = os.getenv("PRIVATE_KEY") or None

    return NetworkConfig(
        network=network or os.getenv("NETWORK", "development"),
        rpc_url=os.getenv("RPC_URL", "http://localhost:8545"),
        private_key=private_key,
        chain_id=_get_int("CHAIN_ID", 1337),
        gas_limit=_get_int("GAS_LIMIT", None),
        gas_price=_get_int("GAS_PRICE", None),
        confirmation_timeout=_get_int("CONFIRMATION_TIMEOUT", 120),
        poa_middleware=os.getenv("POA_MIDDLEWARE", "false").lower() in _TRUE_VALUES,
        artifacts_dir=os.getenv("ARTIFACTS_DIR", DEFAULT_ARTIFACTS_DIR),
        deployment_file=os.getenv("DEPLOYMENT_FILE", "deployment.json"),
    )
