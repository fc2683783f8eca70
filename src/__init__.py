"""Stemcell Core - Root Package.

This package resolves which backend-scoped identifier (CID) a versioned
stemcell reference maps to for a deployment, across deployments that use one
or many CPIs and across CPI renames, and guards the destructive delete-VM
call so that it only ever targets the correct CPI.

Key Components:
    - domain: Stemcell identity, binding and CID resolution
    - application: VM deletion guard and stemcell use cases
    - infrastructure: Persistence, CPI selection, cloud backends, logging
    - config: Configuration schemas and loading
    - cli: Command line interface

Architecture:
    The system follows Clean Architecture principles with clear separation
    between domain logic, application services, and infrastructure concerns.
"""

from ._version import __version__

__package_name__ = "stemcell-core"
