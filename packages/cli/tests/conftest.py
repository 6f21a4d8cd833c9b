"""Pytest configuration and fixtures for CLI tests.

This conftest.py ensures tests work for both developers (editable install)
and users (pip installed package).
"""
import logging
import os
import sys
import pytest
from pathlib import Path
from typer.testing import CliRunner


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


@pytest.fixture(scope="session", autouse=True)
def setup_test_path():
    """Ensure the package root is in the Python path.

    This makes the package importable whether tests are run from:
    - The package directory (packages/cli)
    - The project root
    - Or after pip install
    """
    package_root = Path(__file__).parent.parent

    # Add package root to path for local development
    package_root_str = str(package_root)
    if package_root_str not in sys.path:
        sys.path.insert(0, package_root_str)

    yield


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run each test without VERSIONITIS_* variables or leftover log handlers."""
    from versionitis_common import clear_settings_cache
    from versionitis_common.constants import ENV_PREFIX

    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    clear_settings_cache()
    yield
    clear_settings_cache()
    root = logging.getLogger("versionitis")
    for handler in list(root.handlers):
        if getattr(handler, "_versionitis", False):
            root.removeHandler(handler)


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def sample_manifest(workdir):
    """Write fred.yaml with two dependencies."""
    path = workdir / "fred.yaml"
    path.write_text(
        "name: fred-1.0.0\n"
        "dependencies:\n"
        "  foo: 1.2.3<=2.0.0\n"
        "  bar: 0.1.0<1.0.0\n"
    )
    return path
