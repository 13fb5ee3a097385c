"""Pytest configuration and shared fixtures for module-sync tests."""

import sys
from pathlib import Path

import pytest

# Add package to path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from tests.fixtures import (
    MODULE_INSTALLATION_PATH,
    create_manifest_data,
    write_manifest,
)


# ============================================================================
# Manifest Fixtures
# ============================================================================


@pytest.fixture
def module_installation_path() -> Path:
    """Path to the static module-installation.yml fixture."""
    return MODULE_INSTALLATION_PATH


@pytest.fixture
def manifest_data() -> dict:
    """Manifest with a plain scope and a base-extending scope."""
    return create_manifest_data()


@pytest.fixture
def manifest_path(tmp_path, manifest_data) -> Path:
    """Write manifest_data to module-sync.yml in a temporary directory."""
    return write_manifest(tmp_path, manifest_data)


# ============================================================================
# Project Layout Fixtures
# ============================================================================


@pytest.fixture
def project_root(tmp_path, manifest_data) -> Path:
    """Create a project root with composer.json and module-sync.yml."""
    root = tmp_path / "project"
    root.mkdir()
    (root / "composer.json").write_text("{}")
    write_manifest(root, manifest_data)
    return root
