"""
Manifest Registry
=================

Owns a collection of manifests. Manifests live in a list and are addressed
by their index (a "handle"); a name -> handle map provides lookup. Handles
stay valid for the registry's lifetime: registering a manifest under a name
that is already taken replaces the manifest in the existing slot.
"""

from typing import Dict, Iterator, List, Optional, Set

from versionitis_common.constants import PACKAGE_SEPARATOR
from versionitis_common.logger import get_logger

from .manifest import Manifest

logger = get_logger(__name__)


class ManifestRepo:
    """Registry of manifests keyed by manifest name."""

    def __init__(self):
        self._arena: List[Manifest] = []
        self._handles: Dict[str, int] = {}

    def add(self, manifest: Manifest) -> int:
        """
        Register a manifest.

        Returns:
            The manifest's handle
        """
        handle = self._handles.get(manifest.name)
        if handle is not None:
            self._arena[handle] = manifest
            logger.debug(f"Replaced manifest {manifest.name} (handle {handle})")
            return handle
        handle = len(self._arena)
        self._arena.append(manifest)
        self._handles[manifest.name] = handle
        logger.debug(f"Registered manifest {manifest.name} (handle {handle})")
        return handle

    def add_str(self, name: str) -> int:
        """Register a new, empty manifest called ``name``."""
        return self.add(Manifest(name))

    def get(self, name: str) -> Optional[Manifest]:
        handle = self._handles.get(name)
        return None if handle is None else self._arena[handle]

    def get_handle(self, name: str) -> Optional[int]:
        return self._handles.get(name)

    def by_handle(self, handle: int) -> Manifest:
        """
        Retrieve a manifest by handle.

        Raises:
            IndexError: If the handle was never issued
        """
        if not 0 <= handle < len(self._arena):
            raise IndexError(f"unknown manifest handle: {handle}")
        return self._arena[handle]

    def has(self, name: str) -> bool:
        return name in self._handles

    def keys(self) -> Iterator[str]:
        return iter(self._handles)

    def manifests(self) -> List[Manifest]:
        """All manifests, in handle order."""
        return list(self._arena)

    def packages(self, versioned: bool) -> Set[str]:
        """
        Names of the registered manifests.

        Args:
            versioned: Return full names (``foo-0.1.0``) when True, otherwise
                only base names (``foo``), split on the first ``-``
        """
        if versioned:
            return set(self._handles)
        return {name.split(PACKAGE_SEPARATOR, 1)[0] for name in self._handles}

    def packages_sorted(self, versioned: bool) -> List[str]:
        return sorted(self.packages(versioned))

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    def __len__(self) -> int:
        return len(self._handles)
