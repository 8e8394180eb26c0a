"""Data models for parsed tags and versions."""

import re
from dataclasses import dataclass
from typing import Optional

ReleaseGroup = str

# Exactly X.Y.Z, ASCII digits only
_VERSION_RE = re.compile(r"(?P<major>[0-9]+)\.(?P<minor>[0-9]+)\.(?P<patch>[0-9]+)")


@dataclass(frozen=True)
class ParsedVersion:
    """Three literal version components.

    Components are kept as the exact tokens they were read from, so
    ``ParsedVersion("01", "2", "3") != ParsedVersion("1", "2", "3")``.
    """
    major: str
    minor: str
    patch: str

    @classmethod
    def from_string(cls, value: str) -> Optional["ParsedVersion"]:
        """Parse an exact ``X.Y.Z`` version, or return None.

        Pre-release and build metadata (``1.2.3-rc.1``, ``1.2.3+abc``) do not
        parse, so a final release tag never matches a pre-release manifest.
        """
        if not isinstance(value, str):
            return None
        match = _VERSION_RE.fullmatch(value.strip())
        if not match:
            return None
        return cls(match.group("major"), match.group("minor"), match.group("patch"))

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


@dataclass(frozen=True)
class ReleaseTag:
    """A tag that matched the release grammar."""
    tag: str
    prefix: str
    version: ParsedVersion
    qualifier: Optional[str] = None


@dataclass(frozen=True)
class TagClassification:
    """Classification of an image tag."""
    tag: str
    release_group: ReleaseGroup
    is_release: bool
    release_tag: Optional[ReleaseTag] = None
