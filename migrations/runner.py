#!/usr/bin/env python3
"""
Migration runner
Runs numbered migrations in order and remembers the last one that completed
"""

import os
import json
import logging
import tempfile
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from . import add_contact_info
from .errors import RecordError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Migration:
    """One numbered deployment step"""
    number: int
    name: str
    func: Callable[..., Any]


MIGRATIONS: List[Migration] = [
    Migration(2, "add_contact_info", add_contact_info.migrate),
]


class DeploymentRecord:
    """deployment.json: network, chain id, last completed migration, deployed contracts"""

    def __init__(self, path: str, data: Optional[Dict[str, Any]] = None):
        self.path = path
        self.data: Dict[str, Any] = data if data is not None else {}
        self.data.setdefault('lastCompletedMigration', 0)
        self.data.setdefault('contracts', {})

    @classmethod
    def load(cls, path: str) -> 'DeploymentRecord':
        if not os.path.exists(path):
            return cls(path)
        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise RecordError(f"Could not read deployment record {path}: {e}")
        if not isinstance(data, dict):
            raise RecordError(f"Deployment record {path} is not a JSON object")

        last_completed = data.get('lastCompletedMigration', 0)
        # bool is an int subclass
        if isinstance(last_completed, bool) or not isinstance(last_completed, int):
            raise RecordError(
                f"Deployment record {path}: lastCompletedMigration must be an integer, got {last_completed!r}"
            )
        contracts = data.get('contracts', {})
        if not isinstance(contracts, dict):
            raise RecordError(f"Deployment record {path}: contracts must be a JSON object, got {contracts!r}")
        return cls(path, data)

    @property
    def last_completed(self) -> int:
        return self.data['lastCompletedMigration']

    @last_completed.setter
    def last_completed(self, number: int):
        self.data['lastCompletedMigration'] = number

    @property
    def contracts(self) -> Dict[str, Any]:
        return self.data['contracts']

    def clear(self):
        self.data['lastCompletedMigration'] = 0
        self.data['contracts'].clear()

    def save(self):
        directory = os.path.dirname(os.path.abspath(self.path))
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=directory, suffix='.tmp')
        except OSError as e:
            raise RecordError(f"Could not write deployment record {self.path}: {e}")
        try:
            with os.fdopen(fd, 'w') as f:
                json.dump(self.data, f, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            os.unlink(tmp_path)
            raise RecordError(f"Could not write deployment record {self.path}: {e}")


class MigrationRunner:
    """Runs pending migrations against one deployer"""

    def __init__(self, deployer, artifacts, record: DeploymentRecord,
                 migrations: Optional[List[Migration]] = None):
        self.deployer = deployer
        self.artifacts = artifacts
        self.record = record
        self.migrations = sorted(migrations if migrations is not None else MIGRATIONS,
                                 key=lambda m: m.number)

    def pending(self, from_number: Optional[int] = None, reset: bool = False) -> List[Migration]:
        """
        Migrations that still have to run

        Args:
            from_number: Run from this migration number, regardless of the record
            reset: Run every migration

        Returns:
            Migrations in ascending order
        """
        if reset:
            return list(self.migrations)
        if from_number is not None:
            return [m for m in self.migrations if m.number >= from_number]
        return [m for m in self.migrations if m.number > self.record.last_completed]

    def run(self, from_number: Optional[int] = None, reset: bool = False) -> List[Migration]:
        """Run pending migrations, saving the record after each one"""
        if reset:
            logger.info("Resetting deployment record")
            self.record.clear()

        config = self.deployer.config
        self.record.data['network'] = config.network
        self.record.data['chainId'] = config.chain_id

        todo = self.pending(from_number=from_number, reset=reset)
        if not todo:
            logger.info("Network up to date.")
            return []

        completed = []
        for migration in todo:
            logger.info(f"Running migration: {migration.number}_{migration.name}")
            try:
                migration.func(self.deployer, self.artifacts)
            except Exception as e:
                logger.error(f"Migration {migration.number}_{migration.name} failed: {e}")
                raise
            self.record.last_completed = migration.number
            self.record.save()
            completed.append(migration)

        logger.info(f"Completed {len(completed)} migration(s)")
        return completed
