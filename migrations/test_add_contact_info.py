#!/usr/bin/env python3
"""
Tests for the ContactInfo migration
Checks the exact constructor arguments handed to the deployer
"""

import pytest
from unittest.mock import MagicMock

from contracts import CONTACT_INFO
from migrations.add_contact_info import CONTACT_INFO_ARGS, migrate


EXPECTED_ARGS = (
    "Alec M. Wantoch",
    "alec@wantoch.net",
    "https://github.com/awantoch",
    "1JjEUxQgcigjvoRFQd8pyZEeMEx1873YEd",
    "0x377D0d8a98e5974cfcBCFfe5df784Ea12A720F15",
)


class TestContactInfoMigration:
    """Test class for the add_contact_info migration"""

    def setup_method(self):
        self.deployer = MagicMock()
        self.artifacts = MagicMock()
        self.artifact = MagicMock(contract_name="ContactInfo")
        self.artifacts.require.return_value = self.artifact

    def test_constructor_args_literal_values(self):
        """Test the five arguments match the contact card exactly"""
        assert CONTACT_INFO_ARGS == EXPECTED_ARGS
        assert all(isinstance(arg, str) for arg in CONTACT_INFO_ARGS)

    def test_requires_contact_info_artifact(self):
        """Test the migration resolves the ContactInfo artifact"""
        migrate(self.deployer, self.artifacts)
        self.artifacts.require.assert_called_once_with(CONTACT_INFO)
        assert CONTACT_INFO == "./ContactInfo.sol"

    def test_deploy_called_with_args_in_order(self):
        """Test deploy receives the artifact and the arguments positionally, in order"""
        migrate(self.deployer, self.artifacts)
        self.deployer.deploy.assert_called_once_with(self.artifact, *EXPECTED_ARGS)

    def test_same_args_every_run(self):
        """Test repeated runs pass identical arguments"""
        for _ in range(3):
            migrate(self.deployer, self.artifacts)

        calls = self.deployer.deploy.call_args_list
        assert len(calls) == 3
        for call in calls:
            assert call.args == (self.artifact,) + EXPECTED_ARGS
            assert call.kwargs == {}

    def test_returns_deployed_handle(self):
        """Test the deployed instance handle is returned"""
        handle = MagicMock(address="0x1234")
        self.deployer.deploy.return_value = handle
        assert migrate(self.deployer, self.artifacts) is handle

    def test_args_not_validated(self):
        """Test address strings are forwarded verbatim (no checksum or lowercasing)"""
        migrate(self.deployer, self.artifacts)
        sent = self.deployer.deploy.call_args.args
        assert sent[4] == "1JjEUxQgcigjvoRFQd8pyZEeMEx1873YEd"
        assert sent[5] == "0x377D0d8a98e5974cfcBCFfe5df784Ea12A720F15"


if __name__ == "__main__":
    pytest.main([__file__])
