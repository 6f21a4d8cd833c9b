"""
Versionitis Common Package

Shared utilities and primitives used across all versionitis packages.

This package provides:
- Exception classes for consistent error handling
- Constants for separators, operators, limits and defaults
- Settings read from the environment
- Logging helpers

Usage:
    from versionitis_common import ParseError, get_logger, get_settings
"""

# Error classes
from .errors import (
    VersionitisError,
    ParseError,
    InvalidPackageVersion,
    DuplicatePackageDependency,
    UnknownPackage,
    SerializationError,
)

# Constants
from .constants import (
    VERSIONITIS_VERSION,
    VERSION_SEPARATOR,
    VERSION_COMPONENT_MAX,
    PACKAGE_SEPARATOR,
    HALF_OPEN_OPERATOR,
    OPEN_OPERATOR,
    LOG_LEVELS,
)

# Settings
from .config import Settings, get_settings, clear_settings_cache, normalize_log_level

# Logger
from .logger import JsonFormatter, get_logger, configure_logging

__version__ = VERSIONITIS_VERSION

__all__ = [
    # Errors
    "VersionitisError",
    "ParseError",
    "InvalidPackageVersion",
    "DuplicatePackageDependency",
    "UnknownPackage",
    "SerializationError",
    # Constants
    "VERSIONITIS_VERSION",
    "VERSION_SEPARATOR",
    "VERSION_COMPONENT_MAX",
    "PACKAGE_SEPARATOR",
    "HALF_OPEN_OPERATOR",
    "OPEN_OPERATOR",
    "LOG_LEVELS",
    # Settings
    "Settings",
    "normalize_log_level",
    "get_settings",
    "clear_settings_cache",
    # Logger
    "JsonFormatter",
    "get_logger",
    "configure_logging",
]
