"""
Environment Configuration Module

Handles parsing and validation of environment variables.
This is a pure module - no side effects, just data transformation.
"""

from dataclasses import dataclass
from typing import Dict, List
import logging

from .config import NODE_MANIFEST_PATH, WORKSPACE_MANIFEST_PATH

logger = logging.getLogger(__name__)


def _flag(env: Dict[str, str], name: str) -> bool:
    return env.get(name, "false").strip().lower() == "true"


@dataclass
class EnvironmentConfig:
    """Configuration parsed from environment variables."""

    image_tag: str = ""
    image_tag_from_git: bool = False
    release: bool = False
    manifest_path: str = NODE_MANIFEST_PATH
    workspace_manifest_path: str = WORKSPACE_MANIFEST_PATH
    prefix_table_path: str = ""
    target_path: str = "."
    github_output: str = ""

    @classmethod
    def from_env(cls, env: Dict[str, str]) -> "EnvironmentConfig":
        """Create configuration from environment variables.

        Args:
            env: Dictionary of environment variables (typically os.environ)

        Returns:
            EnvironmentConfig instance
        """
        image_tag = env.get("IMAGE_TAG", "").strip()
        image_tag_from_git = _flag(env, "IMAGE_TAG_FROM_GIT")
        if image_tag and image_tag_from_git:
            logger.warning("IMAGE_TAG is set, ignoring IMAGE_TAG_FROM_GIT=true")
            image_tag_from_git = False

        return cls(
            image_tag=image_tag,
            image_tag_from_git=image_tag_from_git,
            release=_flag(env, "RELEASE"),
            manifest_path=env.get("MANIFEST_PATH", "").strip() or NODE_MANIFEST_PATH,
            workspace_manifest_path=(
                env.get("WORKSPACE_MANIFEST_PATH", "").strip() or WORKSPACE_MANIFEST_PATH
            ),
            prefix_table_path=env.get("PREFIX_TABLE_PATH", "").strip(),
            target_path=env.get("TARGET_PATH", ".").strip() or ".",
            github_output=env.get("GITHUB_OUTPUT", "").strip(),
        )

    def validate(self) -> List[str]:
        """Validate the configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if not self.image_tag and not self.image_tag_from_git:
            errors.append("Either IMAGE_TAG or IMAGE_TAG_FROM_GIT=true must be set")

        if self.image_tag and any(c.isspace() for c in self.image_tag):
            errors.append(f"Invalid IMAGE_TAG '{self.image_tag}': tags cannot contain whitespace")

        if self.prefix_table_path and not self.prefix_table_path.endswith((".yaml", ".yml")):
            errors.append(f"PREFIX_TABLE_PATH must point to a YAML file, got '{self.prefix_table_path}'")

        return errors
