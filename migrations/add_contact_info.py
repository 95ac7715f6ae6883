"""
Migration 2: deploy ContactInfo with the owner's contact card.
"""

from contracts import CONTACT_INFO

CONTACT_INFO_ARGS = (
    "Alec M. Wantoch",  # name
    "alec@wantoch.net",  # email
    "https://github.com/awantoch",  # github
    "1JjEUxQgcigjvoRFQd8pyZEeMEx1873YEd",  # btc address
    "0x377D0d8a98e5974cfcBCFfe5df784Ea12A720F15",  # eth address
)


def migrate(deployer, artifacts):
    contact_info = artifacts.require(CONTACT_INFO)
    return deployer.deploy(contact_info, *CONTACT_INFO_ARGS)
