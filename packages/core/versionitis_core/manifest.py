"""
Manifests
=========

A manifest names an entity (usually a versioned package such as
``fred-1.0.0``) and records the version range it requires for each of its
dependencies. Each dependency name may be constrained at most once: adding a
second range for a name is rejected and the first range stays in place.
"""

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

from versionitis_common.errors import DuplicatePackageDependency
from versionitis_common.logger import get_logger

from .interval import Interval, to_version_interval
from .parser import parse_package_interval
from .version import Package, VersionNumber

logger = get_logger(__name__)


class Manifest:
    """
    A named set of dependency constraints, at most one per package name.

    Attributes:
        name: Manifest name
    """

    def __init__(self, name: str):
        self.name = name
        self._dependencies: Dict[str, Interval[VersionNumber]] = {}

    @property
    def dependencies(self) -> Mapping[str, Interval[VersionNumber]]:
        """Read-only view of package name -> version interval."""
        return MappingProxyType(self._dependencies)

    def add_dependency(self, package_name: str, interval: Interval[VersionNumber]) -> None:
        """
        Register the version range required for ``package_name``.

        Raises:
            DuplicatePackageDependency: If ``package_name`` already has a range
        """
        if package_name in self._dependencies:
            raise DuplicatePackageDependency(package_name)
        self._dependencies[package_name] = interval
        logger.debug(f"{self.name}: depends on {package_name} {interval}")

    def add_dependency_str(self, text: str) -> str:
        """
        Parse a package-scoped range (``foo=1.2.3<2.0.0``) and register it.

        Returns:
            The dependency name that was registered

        Raises:
            ParseError: If the text is not a valid package range
            DuplicatePackageDependency: If the name already has a range
        """
        name, interval = to_version_interval(parse_package_interval(text))
        self.add_dependency(name, interval)
        return name

    def get_dependency(self, package_name: str) -> Optional[Interval[VersionNumber]]:
        return self._dependencies.get(package_name)

    def depends_on(self, package_name: str) -> bool:
        """Test whether any version of ``package_name`` is a dependency."""
        return package_name in self._dependencies

    def depends_on_package(self, package: Package) -> bool:
        """Test whether ``package`` satisfies the range registered under its name."""
        interval = self._dependencies.get(package.name)
        if interval is None:
            return False
        return interval.contains(package.version)

    def __contains__(self, package_name: str) -> bool:
        return self.depends_on(package_name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._dependencies)

    def __len__(self) -> int:
        return len(self._dependencies)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Manifest):
            return NotImplemented
        return self.name == other.name and self._dependencies == other._dependencies

    def __repr__(self) -> str:
        deps = ", ".join(f"{name}: {interval}" for name, interval in self._dependencies.items())
        return f"Manifest({self.name!r}, {{{deps}}})"
