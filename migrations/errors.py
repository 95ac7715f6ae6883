"""Exceptions raised while deploying contracts."""


class MigrationError(Exception):
    """Base class for every deployment failure"""


class ConfigError(MigrationError):
    """Invalid environment configuration"""


class ArtifactNotFoundError(MigrationError):
    """No compiled artifact matches the requested reference"""


class InvalidArtifactError(MigrationError):
    """Artifact file exists but cannot be deployed"""


class DeploymentError(MigrationError):
    """Constructor transaction failed or was never mined"""


class DeployerConnectionError(MigrationError):
    """RPC node is unreachable"""


class RecordError(MigrationError):
    """Deployment record file is unreadable"""
