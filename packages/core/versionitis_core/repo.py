"""
Package Repository
==================

Tracks the released versions of each package, oldest first.

Two insertion modes:

- ``add_version`` (checked): the new version must be strictly greater than
  the latest one already recorded, so the history stays sorted and free of
  duplicates.
- ``add_version_unchecked``: appends without checking, for bulk or
  out-of-order ingestion. The repo is marked dirty until ``dedup_sort``
  reconciles every history.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from versionitis_common.errors import InvalidPackageVersion, UnknownPackage
from versionitis_common.logger import get_logger

from .interval import Interval
from .version import Package, VersionNumber, sort_unique

logger = get_logger(__name__)


class Repo:
    """In-memory store of package versions, keyed by package base name."""

    def __init__(self):
        self._packages: Dict[str, List[Package]] = {}
        self._unchecked = False

    @property
    def packages(self) -> Mapping[str, Tuple[Package, ...]]:
        """Read-only snapshot of package name -> version history."""
        return MappingProxyType(
            {name: tuple(history) for name, history in self._packages.items()}
        )

    @property
    def unchecked(self) -> bool:
        return self._unchecked

    def add_version(self, package_name: str, version: str) -> Package:
        """
        Record a new release of ``package_name``.

        Args:
            package_name: Package base name, e.g. "foo"
            version: Version text, e.g. "0.1.0"

        Returns:
            The Package that was added

        Raises:
            ParseError: If the version text is malformed
            InvalidPackageVersion: If the version is not strictly greater
                than the latest recorded one
        """
        return self._add_version(package_name, version, check=True)

    def add_version_unchecked(self, package_name: str, version: str) -> Package:
        """
        Record a release without ordering or duplicate checks.

        Call ``dedup_sort`` once the batch is in.

        Raises:
            ParseError: If the version text is malformed
        """
        return self._add_version(package_name, version, check=False)

    def _add_version(self, package_name: str, version: str, check: bool) -> Package:
        package = Package.from_parts(package_name, version)
        history = self._packages.get(package_name)

        if check:
            if history and history[-1] >= package:
                raise InvalidPackageVersion(package.spec)
        else:
            self._unchecked = True

        if history is None:
            self._packages[package_name] = [package]
        else:
            history.append(package)
        logger.debug(f"Added {package.spec}{'' if check else ' (unchecked)'}")
        return package

    def dedup_sort(self) -> None:
        """Sort every version history and drop duplicates; marks the repo clean."""
        removed = 0
        for name, history in self._packages.items():
            cleaned = sort_unique(history)
            removed += len(history) - len(cleaned)
            self._packages[name] = cleaned
        if self._unchecked:
            logger.info(
                f"Reconciled {len(self._packages)} package(s), removed {removed} duplicate(s)"
            )
        self._unchecked = False

    def is_clean(self) -> bool:
        """True when every history is known to be sorted and duplicate free."""
        return not self._unchecked

    def get(self, package_name: str) -> List[Package]:
        """
        Get the version history of a package.

        Raises:
            UnknownPackage: If the package was never added
        """
        try:
            return list(self._packages[package_name])
        except KeyError:
            raise UnknownPackage(package_name) from None

    def package_names(self) -> List[str]:
        """All package names, sorted."""
        return sorted(self._packages)

    def versions(self, package_name: str) -> List[VersionNumber]:
        """Version numbers of a package, in stored order."""
        return [package.version for package in self.get(package_name)]

    def latest(self, package_name: str) -> Package:
        """
        Latest recorded release of a package.

        On a dirty repo this is the last one inserted, not necessarily the
        greatest.
        """
        return self.get(package_name)[-1]

    def matching(self, package_name: str, interval: Interval[VersionNumber]) -> List[Package]:
        """Releases of ``package_name`` whose version lies inside ``interval``."""
        return [package for package in self.get(package_name) if interval.contains(package.version)]

    def __contains__(self, package_name: str) -> bool:
        return package_name in self._packages

    def __len__(self) -> int:
        return len(self._packages)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Repo):
            return NotImplemented
        return self._packages == other._packages and self._unchecked == other._unchecked

    def __repr__(self) -> str:
        return f"Repo(packages={len(self._packages)}, unchecked={self._unchecked})"
