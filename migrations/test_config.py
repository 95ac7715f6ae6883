#!/usr/bin/env python3
"""
Tests for environment configuration
"""

import os
import pytest

from migrations.config import load_config
from migrations.errors import ConfigError

ENV_VARS = [
    "NETWORK", "RPC_URL", "PRIVATE_KEY", "CHAIN_ID", "GAS_LIMIT", "GAS_PRICE",
    "CONFIRMATION_TIMEOUT", "POA_MIDDLEWARE", "ARTIFACTS_DIR", "DEPLOYMENT_FILE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    """Test defaults when nothing is set"""
    config = load_config(dotenv=False)
    assert config.network == "development"
    assert config.rpc_url == "http://localhost:8545"
    assert config.private_key is None
    assert config.chain_id == 1337
    assert config.gas_limit is None
    assert config.gas_price is None
    assert config.confirmation_timeout == 120
    assert config.poa_middleware is False
    assert config.artifacts_dir == os.path.join("build", "contracts")
    assert config.deployment_file == "deployment.json"


def test_from_environment(monkeypatch):
    """Test values are read from the environment"""
    monkeypatch.setenv("RPC_URL", "http://node:8545")
    monkeypatch.setenv("PRIVATE_KEY", "0x" + "11" * 32)
    monkeypatch.setenv("CHAIN_ID", "5")
    monkeypatch.setenv("GAS_LIMIT", "3000000")
    monkeypatch.setenv("GAS_PRICE", "0x3b9aca00")
    monkeypatch.setenv("POA_MIDDLEWARE", "true")

    config = load_config(network="goerli", dotenv=False)

    assert config.network == "goerli"
    assert config.rpc_url == "http://node:8545"
    assert config.private_key == "0x" + "11" * 32
    assert config.chain_id == 5
    assert config.gas_limit == 3000000
    assert config.gas_price == 1000000000
    assert config.poa_middleware is True


def test_empty_private_key_is_none(monkeypatch):
    """Test an empty PRIVATE_KEY means unlocked-account mode"""
    monkeypatch.setenv("PRIVATE_KEY", "")
    assert load_config(dotenv=False).private_key is None


def test_invalid_integer(monkeypatch):
    """Test a non-numeric integer setting raises ConfigError"""
    monkeypatch.setenv("CHAIN_ID", "mainnet")
    with pytest.raises(ConfigError, match="CHAIN_ID"):
        load_config(dotenv=False)


def test_decimal_with_leading_zero(monkeypatch):
    """Test decimal values with leading zeros parse as base 10"""
    monkeypatch.setenv("GAS_LIMIT", "0300000")
    monkeypatch.setenv("CHAIN_ID", " 5 ")
    config = load_config(dotenv=False)
    assert config.gas_limit == 300000
    assert config.chain_id == 5


def test_hex_value(monkeypatch):
    """Test 0x-prefixed values parse as base 16"""
    monkeypatch.setenv("GAS_PRICE", "0X3B9ACA00")
    assert load_config(dotenv=False).gas_price == 1000000000
