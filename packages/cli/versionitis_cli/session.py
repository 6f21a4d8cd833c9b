"""Repo state shared by the repo commands of one CLI invocation."""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from versionitis_common import get_settings
from versionitis_core import Repo, load_repo, save_repo


@dataclass
class RepoSession:
    """
    A repo file and the Repo loaded from it.

    Attributes:
        path: Location of the repo YAML file
        repo: The loaded repo (empty when the file does not exist yet)
        existed: Whether the file was present when the session opened
    """

    path: Path
    repo: Repo = field(default_factory=Repo)
    existed: bool = False

    @classmethod
    def open(cls, path: Optional[str] = None) -> "RepoSession":
        """Load ``path`` (default: the configured repo file) if it exists."""
        repo_path = Path(path or get_settings().repo_file)
        if repo_path.exists():
            return cls(path=repo_path, repo=load_repo(repo_path), existed=True)
        return cls(path=repo_path)

    def save(self) -> Path:
        return save_repo(self.repo, self.path)
