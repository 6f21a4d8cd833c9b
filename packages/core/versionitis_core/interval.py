"""
Intervals
=========

A generic range over any totally ordered, hashable value. Three variants:

=========  ===================================  =========================
Variant    Meaning                              Containment
=========  ===================================  =========================
Single     exact match                          value == v
HalfOpen   lower inclusive, upper exclusive     start <= value < end
Open       lower inclusive, upper inclusive     start <= value <= end
=========  ===================================  =========================

"Open" is the historical name for the closed-closed interval and is kept as
is because stored ranges and callers depend on it.

The compact text form is ``1.2.3`` / ``1.2.3<2.0.0`` / ``1.2.3<=2.0.0``; for
package bounds the shared name is written once: ``foo=1.2.3<2.0.0``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Protocol, Tuple, TypeVar

from versionitis_common.constants import (
    CANONICAL_NAME_SEPARATOR,
    HALF_OPEN_OPERATOR,
    OPEN_OPERATOR,
)

from .version import Package, VersionNumber


class Bound(Protocol):
    """Capability required of interval elements: totally ordered, hashable, immutable."""

    def __lt__(self, other: Any) -> bool: ...

    def __le__(self, other: Any) -> bool: ...

    def __eq__(self, other: Any) -> bool: ...

    def __hash__(self) -> int: ...


T = TypeVar("T", bound=Bound)
U = TypeVar("U", bound=Bound)


class Interval(ABC, Generic[T]):
    """Base class of the three interval variants."""

    @staticmethod
    def single(value: T) -> "Single[T]":
        return Single(value)

    @staticmethod
    def half_open(start: T, end: T) -> "HalfOpen[T]":
        return HalfOpen(start, end)

    @staticmethod
    def open(start: T, end: T) -> "Open[T]":
        return Open(start, end)

    @abstractmethod
    def contains(self, value: T) -> bool:
        """Test whether ``value`` lies inside the interval."""

    @property
    @abstractmethod
    def element_key(self) -> T:
        """Representative bound: the value of a Single, the start of a range."""

    @abstractmethod
    def bounds(self) -> Tuple[T, ...]:
        """All bounds, lowest first."""

    @abstractmethod
    def map(self, fn: Callable[[T], U]) -> "Interval[U]":
        """Apply ``fn`` to every bound, keeping the variant."""

    @abstractmethod
    def _render(self, render_bound: Callable[[T], str]) -> str:
        ...

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def to_range(self) -> str:
        """
        Convert to the compact range form.

        Raises:
            ValueError: If the bounds are packages with different names
        """
        key = self.element_key
        if isinstance(key, Package):
            names = {bound.name for bound in self.bounds()}
            if len(names) != 1:
                raise ValueError(
                    f"cannot render package interval over different names: {sorted(names)}"
                )
            return f"{key.name}{CANONICAL_NAME_SEPARATOR}" + self._render(
                lambda package: str(package.version)
            )
        return self._render(str)

    def __str__(self) -> str:
        return self.to_range()


@dataclass(frozen=True)
class Single(Interval[T]):
    value: T

    def contains(self, value: T) -> bool:
        return value == self.value

    @property
    def element_key(self) -> T:
        return self.value

    def bounds(self) -> Tuple[T, ...]:
        return (self.value,)

    def map(self, fn: Callable[[T], U]) -> "Single[U]":
        return Single(fn(self.value))

    def _render(self, render_bound: Callable[[T], str]) -> str:
        return render_bound(self.value)


@dataclass(frozen=True)
class HalfOpen(Interval[T]):
    start: T
    end: T

    def contains(self, value: T) -> bool:
        return self.start <= value < self.end

    @property
    def element_key(self) -> T:
        return self.start

    def bounds(self) -> Tuple[T, ...]:
        return (self.start, self.end)

    def map(self, fn: Callable[[T], U]) -> "HalfOpen[U]":
        return HalfOpen(fn(self.start), fn(self.end))

    def _render(self, render_bound: Callable[[T], str]) -> str:
        return f"{render_bound(self.start)}{HALF_OPEN_OPERATOR}{render_bound(self.end)}"


@dataclass(frozen=True)
class Open(Interval[T]):
    start: T
    end: T

    def contains(self, value: T) -> bool:
        return self.start <= value <= self.end

    @property
    def element_key(self) -> T:
        return self.start

    def bounds(self) -> Tuple[T, ...]:
        return (self.start, self.end)

    def map(self, fn: Callable[[T], U]) -> "Open[U]":
        return Open(fn(self.start), fn(self.end))

    def _render(self, render_bound: Callable[[T], str]) -> str:
        return f"{render_bound(self.start)}{OPEN_OPERATOR}{render_bound(self.end)}"


VersionNumberInterval = Interval[VersionNumber]
"""An interval of VersionNumbers, as stored in manifests."""

PackageInterval = Interval[Package]
"""An interval of Packages sharing one name."""


def to_version_interval(interval: "Interval[Package]") -> Tuple[str, "Interval[VersionNumber]"]:
    """
    Split a package interval into its package name and version interval.

    Raises:
        ValueError: If the bounds carry different package names
    """
    names = {bound.name for bound in interval.bounds()}
    if len(names) != 1:
        raise ValueError(
            f"package interval spans different names: {sorted(names)}"
        )
    return interval.element_key.name, interval.map(lambda package: package.version)
