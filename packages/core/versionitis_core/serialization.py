"""
Serialization
=============

Converts repos and manifests to and from plain dicts and YAML.

Design Principles:
- Canonical strings only: packages are stored as version text under their
  name, intervals in the compact range form (``1.2.3<2.0.0``)
- Documents are validated with pydantic before any core value is built
- Never abort: malformed input raises ``SerializationError`` carrying the
  underlying detail; a missing file raises ``FileNotFoundError``
- Reconstruction goes through the public Repo/Manifest operations

Repo layout::

    packages:
      fred:
      - 0.1.0
      - 0.2.0
    unchecked: false

Manifest layout::

    name: fred-1.0.0
    dependencies:
      foo: 0.1.0
      bar: 0.1.0<1.0.0
"""

from pathlib import Path
from typing import Any, Dict, List, Union

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from versionitis_common.constants import MANIFEST_FILE_SUFFIXES
from versionitis_common.errors import SerializationError
from versionitis_common.logger import get_logger

from .interval import Interval
from .manifest import Manifest
from .manifest_repo import ManifestRepo
from .parser import parse_version_interval
from .repo import Repo
from .version import Package, VersionNumber, parse_package

logger = get_logger(__name__)

PathLike = Union[str, Path]

_PATH_SEPARATORS = ("/", "\\")


# =============================================================================
# DOCUMENT MODELS
# =============================================================================

class RepoDocument(BaseModel):
    """Validated form of a persisted Repo."""

    packages: Dict[str, List[str]] = {}
    unchecked: bool = False

    model_config = ConfigDict(extra="forbid")

    @field_validator("packages")
    @classmethod
    def validate_versions(cls, v: Dict[str, List[str]]) -> Dict[str, List[str]]:
        """Every entry must form a valid package with its name"""
        for name, versions in v.items():
            for version in versions:
                Package.from_parts(name, version)
        return v


class ManifestDocument(BaseModel):
    """Validated form of a persisted Manifest."""

    name: str
    dependencies: Dict[str, str] = {}

    model_config = ConfigDict(extra="forbid")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Manifest names cannot be blank"""
        if not v.strip():
            raise ValueError("manifest name cannot be empty")
        return v

    @field_validator("dependencies")
    @classmethod
    def validate_ranges(cls, v: Dict[str, str]) -> Dict[str, str]:
        """Every dependency range must parse"""
        for range_text in v.values():
            parse_version_interval(range_text)
        return v


# =============================================================================
# SCALARS
# =============================================================================

def package_to_str(package: Package) -> str:
    return package.spec


def package_from_str(text: str) -> Package:
    return parse_package(text)


def interval_to_str(interval: Interval[VersionNumber]) -> str:
    return interval.to_range()


def interval_from_str(text: str) -> Interval[VersionNumber]:
    return parse_version_interval(text)


# =============================================================================
# HELPERS
# =============================================================================

def _validate(model, data: Any, what: str):
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise SerializationError(f"Invalid {what} document: {e}") from e


def _load_yaml(text: str, source: str) -> Any:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SerializationError(f"Invalid YAML in {source}: {e}") from e
    if data is None:
        raise SerializationError(f"Document is empty: {source}")
    return data


def _dump_yaml(data: Dict[str, Any]) -> str:
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)


def _read(path: PathLike, what: str) -> str:
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"{what} file not found: {path}")
    return file_path.read_text(encoding="utf-8")


def _write(path: PathLike, content: str) -> Path:
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding="utf-8")
    return file_path


# =============================================================================
# REPO
# =============================================================================

def repo_to_dict(repo: Repo) -> Dict[str, Any]:
    return {
        "packages": {
            name: [str(package.version) for package in history]
            for name, history in repo.packages.items()
        },
        "unchecked": repo.unchecked,
    }


def repo_from_dict(data: Any) -> Repo:
    """
    Rebuild a Repo from its dict form.

    Entries are replayed with ``add_version_unchecked``. Unless the document
    is itself marked unchecked, ``dedup_sort`` then restores the clean state.

    Raises:
        SerializationError: If the document is malformed
    """
    document = _validate(RepoDocument, data, "repo")
    repo = Repo()
    for name, versions in document.packages.items():
        for version in versions:
            repo.add_version_unchecked(name, version)
    if not document.unchecked:
        repo.dedup_sort()
    return repo


def repo_to_yaml(repo: Repo) -> str:
    return _dump_yaml(repo_to_dict(repo))


def repo_from_yaml(text: str, source: str = "<string>") -> Repo:
    return repo_from_dict(_load_yaml(text, source))


def save_repo(repo: Repo, path: PathLike) -> Path:
    """Write a repo as YAML, creating parent directories as needed."""
    file_path = _write(path, repo_to_yaml(repo))
    logger.info(f"Saved repo with {len(repo)} package(s) to {file_path}")
    return file_path


def load_repo(path: PathLike) -> Repo:
    """
    Load a repo from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist
        SerializationError: If the file is not a valid repo document
    """
    repo = repo_from_yaml(_read(path, "Repo"), source=str(path))
    logger.info(f"Loaded repo with {len(repo)} package(s) from {path}")
    return repo


# =============================================================================
# MANIFEST
# =============================================================================

def manifest_to_dict(manifest: Manifest) -> Dict[str, Any]:
    return {
        "name": manifest.name,
        "dependencies": {
            name: interval.to_range() for name, interval in manifest.dependencies.items()
        },
    }


def manifest_from_dict(data: Any) -> Manifest:
    """
    Rebuild a Manifest from its dict form.

    Raises:
        SerializationError: If the document is malformed
    """
    document = _validate(ManifestDocument, data, "manifest")
    manifest = Manifest(document.name)
    for name, range_text in document.dependencies.items():
        manifest.add_dependency(name, parse_version_interval(range_text))
    return manifest


def manifest_to_yaml(manifest: Manifest) -> str:
    return _dump_yaml(manifest_to_dict(manifest))


def manifest_from_yaml(text: str, source: str = "<string>") -> Manifest:
    return manifest_from_dict(_load_yaml(text, source))


def save_manifest(manifest: Manifest, path: PathLike) -> Path:
    file_path = _write(path, manifest_to_yaml(manifest))
    logger.info(f"Saved manifest {manifest.name} to {file_path}")
    return file_path


def load_manifest(path: PathLike) -> Manifest:
    """
    Load a manifest from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist
        SerializationError: If the file is not a valid manifest document
    """
    manifest = manifest_from_yaml(_read(path, "Manifest"), source=str(path))
    logger.debug(f"Loaded manifest {manifest.name} from {path}")
    return manifest


def load_manifest_repo(directory: PathLike) -> ManifestRepo:
    """
    Load every ``*.yaml`` / ``*.yml`` manifest in a directory.

    Raises:
        FileNotFoundError: If the directory does not exist
        SerializationError: If any file is not a valid manifest document
    """
    dir_path = Path(directory)
    if not dir_path.is_dir():
        raise FileNotFoundError(f"Manifest directory not found: {directory}")

    manifest_repo = ManifestRepo()
    for file_path in sorted(dir_path.iterdir()):
        if file_path.is_file() and file_path.suffix in MANIFEST_FILE_SUFFIXES:
            manifest_repo.add(load_manifest(file_path))
    logger.info(f"Loaded {len(manifest_repo)} manifest(s) from {dir_path}")
    return manifest_repo


def save_manifest_repo(manifest_repo: ManifestRepo, directory: PathLike) -> List[Path]:
    """
    Write each manifest to ``<directory>/<name>.yaml``.

    Raises:
        SerializationError: If a manifest name contains a path separator;
            nothing is written in that case
    """
    manifests = manifest_repo.manifests()
    for manifest in manifests:
        if any(sep in manifest.name for sep in _PATH_SEPARATORS):
            raise SerializationError(
                f"Manifest name cannot be used as a file name: '{manifest.name}'"
            )
    dir_path = Path(directory)
    return [save_manifest(manifest, dir_path / f"{manifest.name}.yaml") for manifest in manifests]
