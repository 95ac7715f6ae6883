"""
Deployment Scripts
==================

Command line entry points for deploying the ContactInfo contract.

Structure:
- migrate: run pending migrations against the configured network
"""

__version__ = "1.0.0"
