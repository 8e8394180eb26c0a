"""
Tag Classification Module

Pure functions for detecting release tags and resolving release groups.
This module contains no side effects - only tag analysis logic. None of the
functions raise: malformed input degrades to "not a release tag" and the
default release group.
"""

import re
from typing import Optional

from .config import DEFAULT_PREFIX_TABLE, MAX_TAG_LENGTH
from .models import ParsedVersion, ReleaseGroup, ReleaseTag, TagClassification
from .prefix_table import PrefixTable

# <prefix>-v<major>.<minor>.<patch>[<qualifier>], e.g. accudo-node-v1.2.3_performance
RELEASE_TAG_RE = re.compile(
    r"(?P<prefix>[A-Za-z0-9][A-Za-z0-9._-]*?)"
    r"-v(?P<major>[0-9]+)\.(?P<minor>[0-9]+)\.(?P<patch>[0-9]+)"
    r"(?P<qualifier>[_-][A-Za-z0-9][A-Za-z0-9._-]*)?"
)

# Version suffix, tolerating placeholders such as -vX.Y.Z
_VERSION_SUFFIX_RE = re.compile(r"-v[0-9A-Za-z]+\.[0-9A-Za-z]+\.[0-9A-Za-z]+")


def parse_release_tag(tag: str) -> Optional[ReleaseTag]:
    """
    Parse a tag against the release tag grammar.

    Args:
        tag: The image tag string

    Returns:
        ReleaseTag if the tag is a well-formed release tag, None otherwise
    """
    if not isinstance(tag, str) or len(tag) > MAX_TAG_LENGTH:
        return None

    match = RELEASE_TAG_RE.fullmatch(tag)
    if not match:
        return None

    return ReleaseTag(
        tag=tag,
        prefix=match.group("prefix"),
        version=ParsedVersion(match.group("major"), match.group("minor"), match.group("patch")),
        qualifier=match.group("qualifier"),
    )


def is_release_tag(tag: str) -> bool:
    """Check whether a tag follows the release grammar.

    Independent of which release group the prefix resolves to.
    """
    return parse_release_tag(tag) is not None


def informative_prefix(tag: str) -> str:
    """
    Extract the part of a tag that identifies its release group.

    Strips surrounding whitespace, an image reference ('repo:'), the version
    suffix ('-v1.2.3...', placeholders allowed) and any build qualifier
    ('_performance').

    Args:
        tag: The image tag string

    Returns:
        The informative prefix, possibly empty
    """
    if not isinstance(tag, str):
        return ""

    prefix = tag.strip()
    if ":" in prefix:
        prefix = prefix.rsplit(":", 1)[1]

    release_tag = parse_release_tag(prefix)
    if release_tag:
        return release_tag.prefix

    match = _VERSION_SUFFIX_RE.search(prefix)
    if match:
        prefix = prefix[:match.start()]

    return prefix.split("_", 1)[0]


def group_for_tag(tag: str, table: PrefixTable = DEFAULT_PREFIX_TABLE) -> ReleaseGroup:
    """
    Determine the release group of an image tag.

    Args:
        tag: The image tag string
        table: Prefix table to resolve against

    Returns:
        Release group name; the table's default group when nothing matches
    """
    return table.resolve_group(informative_prefix(tag))


def classify_tag(tag: str, table: PrefixTable = DEFAULT_PREFIX_TABLE) -> TagClassification:
    """Classify a tag into its release group and release/non-release verdict."""
    release_tag = parse_release_tag(tag)
    return TagClassification(
        tag=tag,
        release_group=group_for_tag(tag, table),
        is_release=release_tag is not None,
        release_tag=release_tag,
    )
