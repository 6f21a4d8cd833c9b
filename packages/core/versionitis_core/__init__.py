"""
Versionitis Core Package

Version numbers, packages, version ranges and the containers built on them.

This package provides:
- VersionNumber / Package value types and their parsers
- Interval[T] (Single, HalfOpen, Open) and the range parsers
- Manifest: per-entity dependency constraints
- Repo: per-package release histories
- ManifestRepo: a registry of manifests addressed by stable handles
- YAML / dict serialization for repos and manifests

Usage:
    from versionitis_core import Repo, parse_version_interval

    repo = Repo()
    repo.add_version("foo", "0.1.0")
    repo.matching("foo", parse_version_interval("0.1.0<1.0.0"))
"""

from .version import (
    VersionNumber,
    Package,
    parse_version_number,
    parse_package,
    sort_unique,
)
from .interval import (
    Interval,
    Single,
    HalfOpen,
    Open,
    VersionNumberInterval,
    PackageInterval,
    to_version_interval,
)
from .parser import (
    RangeKind,
    VersionIntervalParser,
    PackageIntervalParser,
    parse_version_interval,
    parse_package_interval,
)
from .manifest import Manifest
from .repo import Repo
from .manifest_repo import ManifestRepo
from .serialization import (
    RepoDocument,
    ManifestDocument,
    package_to_str,
    package_from_str,
    interval_to_str,
    interval_from_str,
    repo_to_dict,
    repo_from_dict,
    repo_to_yaml,
    repo_from_yaml,
    save_repo,
    load_repo,
    manifest_to_dict,
    manifest_from_dict,
    manifest_to_yaml,
    manifest_from_yaml,
    save_manifest,
    load_manifest,
    load_manifest_repo,
    save_manifest_repo,
)

from versionitis_common.constants import VERSIONITIS_VERSION

__version__ = VERSIONITIS_VERSION

__all__ = [
    # Values
    "VersionNumber",
    "Package",
    "parse_version_number",
    "parse_package",
    "sort_unique",
    # Intervals
    "Interval",
    "Single",
    "HalfOpen",
    "Open",
    "VersionNumberInterval",
    "PackageInterval",
    "to_version_interval",
    # Parsing
    "RangeKind",
    "VersionIntervalParser",
    "PackageIntervalParser",
    "parse_version_interval",
    "parse_package_interval",
    # Containers
    "Manifest",
    "Repo",
    "ManifestRepo",
    # Serialization
    "RepoDocument",
    "ManifestDocument",
    "package_to_str",
    "package_from_str",
    "interval_to_str",
    "interval_from_str",
    "repo_to_dict",
    "repo_from_dict",
    "repo_to_yaml",
    "repo_from_yaml",
    "save_repo",
    "load_repo",
    "manifest_to_dict",
    "manifest_from_dict",
    "manifest_to_yaml",
    "manifest_from_yaml",
    "save_manifest",
    "load_manifest",
    "load_manifest_repo",
    "save_manifest_repo",
]
