"""Test fixtures for module-sync.

Provides manifest builders and the static manifest fixture.
"""

from .manifests import (
    FIXTURES_DIR,
    MODULE_INSTALLATION_PATH,
    create_manifest_data,
    write_manifest,
)

__all__ = [
    "FIXTURES_DIR",
    "MODULE_INSTALLATION_PATH",
    "create_manifest_data",
    "write_manifest",
]
