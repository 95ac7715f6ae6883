#!/usr/bin/env python3
"""
Run pending contract migrations against the configured network
"""

import sys
import logging
import argparse

import requests

from migrations.artifacts import ArtifactResolver
from migrations.config import load_config
from migrations.deployer import Deployer, connect
from migrations.errors import MigrationError
from migrations.runner import DeploymentRecord, MigrationRunner

logger = logging.getLogger(__name__)


def setup_logging():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler('migrations.log'),
            logging.StreamHandler()
        ]
    )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Deploy contracts by running pending migrations")
    parser.add_argument('--reset', action='store_true',
                        help="Run all migrations from the beginning")
    parser.add_argument('--from', dest='from_number', type=int, default=None,
                        help="Run from this migration number")
    parser.add_argument('--network', default=None,
                        help="Network name recorded with the deployment")
    return parser.parse_args(argv)


def migrate(args) -> int:
    config = load_config(network=args.network)
    w3 = connect(config)

    record = DeploymentRecord.load(config.deployment_file)
    deployer = Deployer(w3, config, record=record.data)
    artifacts = ArtifactResolver(config.artifacts_dir)
    logger.info(f"Deploying from account: {deployer.sender}")

    runner = MigrationRunner(deployer, artifacts, record)
    runner.run(from_number=args.from_number, reset=args.reset)

    for deployed in deployer.deployments:
        logger.info(f"{deployed.contract_name}: {deployed.address}")
    logger.info(f"Deployment record written to {config.deployment_file}")
    return 0


def main(argv=None) -> int:
    """Entry point; returns the process exit code"""
    setup_logging()
    args = parse_args(argv)
    try:
        return migrate(args)
    except KeyboardInterrupt:
        logger.info("Migration stopped by user")
        return 130
    except MigrationError as e:
        logger.error(f"Migration failed: {e}")
        return 1
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Migration failed, node unreachable: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
