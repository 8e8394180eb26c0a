"""
I/O Layer for Release Image Tags

This module contains all I/O operations (file system, Git) separated from
the classification and validation logic. This is the "imperative shell"
that handles all side effects.
"""

import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from git import Repo


class IOLayer:
    """Handles all I/O operations for the application."""

    def __init__(self, repo: Optional[Repo] = None):
        """Initialize the I/O layer.

        Args:
            repo: Git repository object, only needed for reading tags
        """
        self.repo = repo

    # -----------------------------------------------------------------------------
    # File System Operations
    # -----------------------------------------------------------------------------

    def read_toml(self, path: str) -> Optional[Dict[str, Any]]:
        """Read a TOML file and return its contents.

        Args:
            path: Path to the TOML file

        Returns:
            Dictionary with TOML contents or None if file doesn't exist

        Raises:
            tomllib.TOMLDecodeError: If the file is not valid TOML
        """
        file_path = Path(path)
        if not file_path.exists():
            return None

        with file_path.open("rb") as f:
            return tomllib.load(f)

    def read_yaml(self, path: str) -> Optional[Dict[str, Any]]:
        """Read a YAML file and return its contents.

        Args:
            path: Path to the YAML file

        Returns:
            Dictionary with YAML contents or None if file doesn't exist
        """
        file_path = Path(path)
        if not file_path.exists():
            return None

        with file_path.open(encoding="utf-8") as f:
            return yaml.safe_load(f)

    # -----------------------------------------------------------------------------
    # Git Operations
    # -----------------------------------------------------------------------------

    def head_tags(self) -> List[str]:
        """List the names of all tags pointing at HEAD, sorted.

        Returns:
            Tag names (empty if no repository is attached)
        """
        if self.repo is None:
            return []

        head = self.repo.head.commit
        return sorted(tag.name for tag in self.repo.tags if tag.commit == head)
