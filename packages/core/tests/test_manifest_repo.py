"""Tests for ManifestRepo."""

import pytest

from versionitis_core import Manifest, ManifestRepo


@pytest.fixture
def registry():
    manifest_repo = ManifestRepo()
    for name in ("fred-1.0.0", "fred-1.1.0", "barney-0.1.0", "wilma"):
        manifest_repo.add_str(name)
    return manifest_repo


class TestManifestRepo:
    """Test the manifest registry"""

    def test_handles_are_sequential(self):
        manifest_repo = ManifestRepo()
        assert manifest_repo.add_str("a-1") == 0
        assert manifest_repo.add_str("b-1") == 1

    def test_lookup(self, registry):
        manifest = registry.get("barney-0.1.0")
        assert manifest.name == "barney-0.1.0"
        assert registry.by_handle(registry.get_handle("barney-0.1.0")) is manifest

    def test_missing(self, registry):
        assert registry.get("dino") is None
        assert registry.get_handle("dino") is None
        assert not registry.has("dino")
        assert "dino" not in registry

    def test_unknown_handle(self, registry):
        with pytest.raises(IndexError):
            registry.by_handle(99)
        with pytest.raises(IndexError):
            registry.by_handle(-1)

    def test_replace_keeps_handle(self, registry):
        """Re-registering a name replaces the manifest in its slot"""
        handle = registry.get_handle("wilma")
        replacement = Manifest("wilma")
        replacement.add_dependency_str("fred=1.0.0")
        assert registry.add(replacement) == handle
        assert registry.by_handle(handle) is replacement
        assert len(registry) == 4

    def test_keys(self, registry):
        assert list(registry.keys()) == ["fred-1.0.0", "fred-1.1.0", "barney-0.1.0", "wilma"]

    def test_manifests_in_handle_order(self, registry):
        assert [m.name for m in registry.manifests()] == list(registry.keys())

    def test_packages_versioned(self, registry):
        assert registry.packages(versioned=True) == {"fred-1.0.0", "fred-1.1.0", "barney-0.1.0", "wilma"}

    def test_packages_base_names(self, registry):
        """Base names are split on the first '-'"""
        assert registry.packages(versioned=False) == {"fred", "barney", "wilma"}

    def test_packages_sorted(self, registry):
        assert registry.packages_sorted(False) == ["barney", "fred", "wilma"]
        assert registry.packages_sorted(True) == ["barney-0.1.0", "fred-1.0.0", "fred-1.1.0", "wilma"]
