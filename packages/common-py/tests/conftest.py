"""Pytest configuration and fixtures for common-py tests.

This conftest.py ensures tests work for both developers (editable install)
and users (pip installed package).
"""
import logging
import sys
import pytest
from pathlib import Path


@pytest.fixture(scope="session", autouse=True)
def setup_test_path():
    """Ensure the package root is in the Python path.

    This makes the package importable whether tests are run from:
    - The package directory (packages/common-py)
    - The project root
    - Or after pip install
    """
    package_root = Path(__file__).parent.parent

    # Add package root to path for local development
    package_root_str = str(package_root)
    if package_root_str not in sys.path:
        sys.path.insert(0, package_root_str)

    yield


@pytest.fixture
def clean_env(monkeypatch):
    """Remove VERSIONITIS_* variables and reset cached settings around a test."""
    from versionitis_common.config import clear_settings_cache
    from versionitis_common.constants import ENV_PREFIX
    import os

    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    clear_settings_cache()
    yield monkeypatch
    clear_settings_cache()


@pytest.fixture
def reset_logging():
    """Drop handlers installed by configure_logging after a test."""
    yield
    root = logging.getLogger("versionitis")
    for handler in list(root.handlers):
        if getattr(handler, "_versionitis", False):
            root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
