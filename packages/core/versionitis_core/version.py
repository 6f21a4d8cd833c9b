"""
Version Numbers and Packages
============================

Provides the two value types everything else is built on:

- ``VersionNumber``: a dotted sequence of unsigned 16 bit integers of any
  length (``1``, ``0.1.0``, ``0.1.0.1``)
- ``Package``: a name paired with a VersionNumber (``foo-0.1.0``)

Ordering is plain lexicographic tuple ordering. A version that is a strict
prefix of another sorts first, so ``0.1 < 0.1.0``. Versions of different
length are never equal.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Tuple

from versionitis_common.constants import (
    PACKAGE_SEPARATOR,
    VERSION_COMPONENT_MAX,
    VERSION_SEPARATOR,
)
from versionitis_common.errors import ParseError

_COMPONENT_RE = re.compile(r"[0-9]+")
_COMPONENT_MAX_DIGITS = len(str(VERSION_COMPONENT_MAX))


@dataclass(frozen=True, order=True)
class VersionNumber:
    """
    An immutable, totally ordered version number.

    Attributes:
        components: One or more integers in the range 0..65535
    """

    components: Tuple[int, ...]

    def __post_init__(self):
        components = tuple(self.components)
        if not components:
            raise ValueError("a version number needs at least one component")
        for value in components:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"version components must be integers, got {value!r}")
            if not 0 <= value <= VERSION_COMPONENT_MAX:
                raise ValueError(
                    f"version component {value} out of range 0..{VERSION_COMPONENT_MAX}"
                )
        object.__setattr__(self, "components", components)

    @classmethod
    def of(cls, *components: int) -> "VersionNumber":
        """Build a VersionNumber from positional components: ``VersionNumber.of(1, 2)``."""
        return cls(components)

    @classmethod
    def semver(cls, major: int, minor: int, micro: int) -> "VersionNumber":
        """Build a three component version."""
        return cls((major, minor, micro))

    @classmethod
    def semver4(cls, major: int, minor: int, micro: int, patch: int) -> "VersionNumber":
        """Build a four component version (semver plus a packaging patch level)."""
        return cls((major, minor, micro, patch))

    @classmethod
    def parse(cls, text: str) -> "VersionNumber":
        """Parse dotted digits; see ``parse_version_number``."""
        return parse_version_number(text)

    def __str__(self) -> str:
        return VERSION_SEPARATOR.join(str(c) for c in self.components)

    def __repr__(self) -> str:
        return f"VersionNumber('{self}')"

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self):
        return iter(self.components)


@dataclass(frozen=True, order=True)
class Package:
    """
    A named, versioned entity.

    Ordering compares ``name`` first, then ``version``.
    """

    name: str
    version: VersionNumber

    def __post_init__(self):
        if not isinstance(self.version, VersionNumber):
            raise TypeError(f"package version must be a VersionNumber, got {self.version!r}")

    @classmethod
    def semver(cls, name: str, major: int, minor: int, micro: int) -> "Package":
        return cls(name, VersionNumber.semver(major, minor, micro))

    @classmethod
    def semver4(cls, name: str, major: int, minor: int, micro: int, patch: int) -> "Package":
        return cls(name, VersionNumber.semver4(major, minor, micro, patch))

    @classmethod
    def from_parts(cls, name: str, version_text: str) -> "Package":
        """
        Build a Package from a separate name and version string.

        Raises:
            ParseError: If the name is empty or the version is malformed
        """
        if not name:
            raise ParseError(f"{name}{PACKAGE_SEPARATOR}{version_text}", "empty package name")
        return cls(name, parse_version_number(version_text))

    @classmethod
    def parse(cls, text: str) -> "Package":
        """Parse ``name-version``; see ``parse_package``."""
        return parse_package(text)

    @property
    def spec(self) -> str:
        """Full ``name-version`` form."""
        return f"{self.name}{PACKAGE_SEPARATOR}{self.version}"

    def __str__(self) -> str:
        return self.spec

    def __repr__(self) -> str:
        return f"Package('{self.spec}')"


def parse_version_number(text: str) -> VersionNumber:
    """
    Parse a dotted version string into a VersionNumber.

    Args:
        text: Version string like "1", "0.1.0" or "0.1.0.1"

    Returns:
        VersionNumber

    Raises:
        ParseError: If any component is missing, empty, not made of ASCII
            digits, or larger than 65535
    """
    if not isinstance(text, str):
        raise ParseError(repr(text), "expected a version string")
    if not text:
        raise ParseError(text, "empty version")

    components = []
    for index, token in enumerate(text.split(VERSION_SEPARATOR)):
        if not token:
            raise ParseError(text, f"missing component at position {index}")
        if not _COMPONENT_RE.fullmatch(token):
            raise ParseError(text, f"component '{token}' is not a number")
        # Length check first: int() refuses very long digit strings.
        if (
            len(token.lstrip("0")) > _COMPONENT_MAX_DIGITS
            or int(token) > VERSION_COMPONENT_MAX
        ):
            raise ParseError(
                text, f"component '{token}' exceeds {VERSION_COMPONENT_MAX}"
            )
        components.append(int(token))

    return VersionNumber(tuple(components))


def parse_package(text: str) -> Package:
    """
    Parse a ``name-version`` string into a Package.

    The name ends at the first ``-``; everything after it must be a valid
    version number. Names that themselves contain a hyphen therefore cannot
    be parsed from this form (``foo-bar-1.0`` fails).

    Raises:
        ParseError: On a missing separator, empty name or malformed version
    """
    if not isinstance(text, str):
        raise ParseError(repr(text), "expected a package string")

    name, separator, version_text = text.partition(PACKAGE_SEPARATOR)
    if not separator:
        raise ParseError(text, f"missing '{PACKAGE_SEPARATOR}' between name and version")
    if not name:
        raise ParseError(text, "empty package name")

    try:
        version = parse_version_number(version_text)
    except ParseError as e:
        raise ParseError(text, e.detail) from e
    return Package(name, version)


def sort_unique(packages: Iterable[Package]) -> list:
    """Return packages sorted ascending with exact duplicates removed."""
    return sorted(set(packages))
