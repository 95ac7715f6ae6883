"""
Contract Artifacts
==================

Compiled contracts deployed by this project:
- ContactInfo: on-chain contact card (name, email, repository, BTC/ETH addresses)

Sources are compiled separately; only the JSON artifacts (ABI + bytecode)
under the build directory are consumed here.
"""

import os

CONTACT_INFO = "./ContactInfo.sol"

DEFAULT_ARTIFACTS_DIR = os.path.join("build", "contracts")

__all__ = ['CONTACT_INFO', 'DEFAULT_ARTIFACTS_DIR']
