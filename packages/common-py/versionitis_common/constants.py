"""
Versionitis Shared Constants

This module defines constants used across the versionitis packages.
It serves as the single source of truth for separators, operators, limits
and defaults.

Usage:
    from versionitis_common.constants import HALF_OPEN_OPERATOR, OPEN_OPERATOR
"""

# =============================================================================
# VERSION INFORMATION
# =============================================================================

VERSIONITIS_VERSION = "0.1.0"
"""Current versionitis release"""


# =============================================================================
# VERSION NUMBERS & PACKAGES
# =============================================================================

VERSION_SEPARATOR = "."
"""Separator between version number components"""

VERSION_COMPONENT_MAX = 0xFFFF
"""Largest value a single version component may hold (unsigned 16 bit)"""

PACKAGE_SEPARATOR = "-"
"""Separator between package name and version (first occurrence wins)"""


# =============================================================================
# RANGE GRAMMAR
# =============================================================================

HALF_OPEN_OPERATOR = "<"
"""Operator joining the bounds of a half-open range (upper bound exclusive)"""

OPEN_OPERATOR = "<="
"""Operator joining the bounds of an open range (both bounds inclusive)"""

NAME_SEPARATORS = ("=", ":")
"""Separators accepted between a package name and its range"""

CANONICAL_NAME_SEPARATOR = "="
"""Separator written when rendering a package-scoped range"""

QUOTE_CHARS = ("'", '"')
"""Quote characters that may surround a range expression"""


# =============================================================================
# DEFAULT VALUES
# =============================================================================

DEFAULT_REPO_FILE = "repo.yaml"
"""Default path of the persisted package repository"""

DEFAULT_MANIFEST_DIR = "manifests"
"""Default directory holding persisted manifests"""

MANIFEST_FILE_SUFFIXES = (".yaml", ".yml")
"""File suffixes picked up when loading a manifest directory"""

DEFAULT_LOG_LEVEL = "info"
"""Default logging level"""

LOG_LEVELS = ["debug", "info", "warning", "error"]
"""Valid log levels"""


# =============================================================================
# ENVIRONMENT VARIABLE NAMES
# =============================================================================

ENV_PREFIX = "VERSIONITIS_"
"""Prefix shared by all versionitis environment variables"""

ENV_LOG_LEVEL = "VERSIONITIS_LOG_LEVEL"
"""Environment variable for the log level"""

ENV_LOG_JSON = "VERSIONITIS_LOG_JSON"
"""Environment variable switching to JSON log lines"""

ENV_REPO_FILE = "VERSIONITIS_REPO_FILE"
"""Environment variable for the repository file path"""

ENV_MANIFEST_DIR = "VERSIONITIS_MANIFEST_DIR"
"""Environment variable for the manifest directory"""
