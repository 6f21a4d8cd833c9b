"""Pytest configuration and fixtures for core tests.

This conftest.py ensures tests work for both developers (editable install)
and users (pip installed package).
"""
import sys
import pytest
from pathlib import Path


@pytest.fixture(scope="session", autouse=True)
def setup_test_path():
    """Ensure the package root is in the Python path."""
    package_root = Path(__file__).parent.parent

    # Add package root to path for local development
    package_root_str = str(package_root)
    if package_root_str not in sys.path:
        sys.path.insert(0, package_root_str)

    yield


@pytest.fixture
def fred_repo():
    """A clean repo with a few releases of foo and bar."""
    from versionitis_core import Repo

    repo = Repo()
    for version in ("0.1.0", "0.2.0", "1.0.0"):
        repo.add_version("foo", version)
    for version in ("0.1.0", "0.1.1"):
        repo.add_version("bar", version)
    return repo


@pytest.fixture
def fred_manifest():
    """Manifest fred-1.0.0 depending on foo and bar."""
    from versionitis_core import Manifest

    manifest = Manifest("fred-1.0.0")
    manifest.add_dependency_str("foo=0.1.0")
    manifest.add_dependency_str("bar=0.1.0<1.0.0")
    return manifest
