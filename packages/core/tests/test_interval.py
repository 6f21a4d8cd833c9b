"""Tests for the Interval variants."""

import pytest

from versionitis_core import (
    HalfOpen,
    Interval,
    Open,
    Package,
    Single,
    VersionNumber,
    to_version_interval,
)

V = VersionNumber.of


# =============================================================================
# Containment
# =============================================================================


class TestContainment:
    """Test contains() for each variant"""

    def test_single_contains_only_its_value(self):
        interval = Single(V(1, 2, 3))
        assert interval.contains(V(1, 2, 3))
        assert not interval.contains(V(1, 2, 4))
        assert not interval.contains(V(1, 2))
        assert not interval.contains(V(1, 2, 3, 0))

    def test_half_open_excludes_end(self):
        interval = HalfOpen(V(1, 0), V(2, 0))
        assert interval.contains(V(1, 0))
        assert interval.contains(V(1, 99))
        assert not interval.contains(V(2, 0))
        assert not interval.contains(V(0, 9))

    def test_open_includes_end(self):
        """'Open' is inclusive at both ends"""
        interval = Open(V(1, 0), V(2, 0))
        assert interval.contains(V(1, 0))
        assert interval.contains(V(2, 0))
        assert not interval.contains(V(2, 0, 1))

    def test_degenerate_contains_nothing(self):
        """A range whose start is above its end is empty"""
        assert not HalfOpen(V(2, 0), V(1, 0)).contains(V(1, 5))
        assert not Open(V(2, 0), V(1, 0)).contains(V(2, 0))

    def test_empty_half_open(self):
        """HalfOpen with start == end contains nothing"""
        assert not HalfOpen(V(1, 0), V(1, 0)).contains(V(1, 0))

    def test_in_operator(self):
        assert V(1, 5) in HalfOpen(V(1, 0), V(2, 0))
        assert V(2, 5) not in HalfOpen(V(1, 0), V(2, 0))

    def test_package_bounds(self):
        """Package intervals compare name then version"""
        interval = Open(Package.semver("foo", 1, 2, 3), Package.semver("foo", 2, 0, 0))
        assert interval.contains(Package.semver("foo", 1, 5, 0))
        assert not interval.contains(Package.semver("foo", 2, 0, 1))


# =============================================================================
# Structure
# =============================================================================


class TestStructure:
    """Test constructors, keys, equality and mapping"""

    def test_factory_methods(self):
        assert Interval.single(V(1)) == Single(V(1))
        assert Interval.half_open(V(1), V(2)) == HalfOpen(V(1), V(2))
        assert Interval.open(V(1), V(2)) == Open(V(1), V(2))

    def test_element_key(self):
        assert Single(V(3)).element_key == V(3)
        assert HalfOpen(V(1), V(2)).element_key == V(1)
        assert Open(V(1), V(2)).element_key == V(1)

    def test_bounds(self):
        assert Single(V(3)).bounds() == (V(3),)
        assert Open(V(1), V(2)).bounds() == (V(1), V(2))

    def test_variants_not_equal(self):
        """Same bounds, different variant, are different intervals"""
        assert HalfOpen(V(1), V(2)) != Open(V(1), V(2))

    def test_hashable(self):
        assert len({HalfOpen(V(1), V(2)), HalfOpen(V(1), V(2))}) == 1

    def test_immutable(self):
        interval = Single(V(1))
        with pytest.raises(AttributeError):
            interval.value = V(2)

    def test_map_keeps_variant(self):
        interval = HalfOpen(Package.semver("foo", 1, 0, 0), Package.semver("foo", 2, 0, 0))
        mapped = interval.map(lambda package: package.version)
        assert mapped == HalfOpen(V(1, 0, 0), V(2, 0, 0))

    def test_to_version_interval(self):
        name, interval = to_version_interval(Single(Package.semver("foo", 1, 0, 0)))
        assert name == "foo"
        assert interval == Single(V(1, 0, 0))

    def test_to_version_interval_mixed_names(self):
        with pytest.raises(ValueError):
            to_version_interval(Open(Package.semver("foo", 1, 0, 0), Package.semver("bar", 2, 0, 0)))


# =============================================================================
# Text form
# =============================================================================


class TestToRange:
    """Test the compact text form"""

    def test_version_ranges(self):
        assert Single(V(1, 2, 3)).to_range() == "1.2.3"
        assert HalfOpen(V(1, 2, 3), V(2, 0, 0)).to_range() == "1.2.3<2.0.0"
        assert Open(V(1, 2, 3), V(2, 0, 0)).to_range() == "1.2.3<=2.0.0"

    def test_str_is_range(self):
        assert str(HalfOpen(V(1), V(2))) == "1<2"

    def test_package_range(self):
        """Package ranges write the shared name once"""
        interval = Open(Package.semver("foo", 1, 2, 3), Package.semver("foo", 2, 0, 0))
        assert interval.to_range() == "foo=1.2.3<=2.0.0"
        assert Single(Package.semver("foo", 1, 0, 0)).to_range() == "foo=1.0.0"

    def test_package_range_mixed_names(self):
        interval = HalfOpen(Package.semver("foo", 1, 0, 0), Package.semver("bar", 2, 0, 0))
        with pytest.raises(ValueError):
            interval.to_range()
