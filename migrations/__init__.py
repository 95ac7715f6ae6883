"""
ContactInfo Migrations
======================

Deploys compiled contract artifacts to an EVM network and keeps track of
which numbered migrations have already run.
"""

from .errors import (
    MigrationError,
    ConfigError,
    ArtifactNotFoundError,
    InvalidArtifactError,
    DeploymentError,
    DeployerConnectionError,
    RecordError,
)

__all__ = [
    'MigrationError',
    'ConfigError',
    'ArtifactNotFoundError',
    'InvalidArtifactError',
    'DeploymentError',
    'DeployerConnectionError',
    'RecordError',
]
