"""
Version Validation Module

Checks that a release tag carries the canonical version declared in the
project manifest. A mismatch is fatal for the release pipeline.
"""

import logging

from .exceptions import TagGrammarError, VersionMismatchError
from .tag_classification import parse_release_tag
from .version_source import VersionSource

logger = logging.getLogger(__name__)


def assert_tag_matches_source_version(tag: str, version_source: VersionSource) -> None:
    """
    Assert that the version embedded in a release tag equals the canonical version.

    Components are compared as literal tokens: 'v01.2.3' does not match '1.2.3'.
    The canonical version is read once per call and never cached.

    Args:
        tag: A release tag, e.g. 'accudo-node-v1.2.3'
        version_source: Supplies the canonical version

    Raises:
        TagGrammarError: If the tag is not a release tag
        VersionMismatchError: If the tag version differs from the canonical version
    """
    release_tag = parse_release_tag(tag)
    if release_tag is None:
        raise TagGrammarError(
            f"Not a release tag: {tag!r}. Expected <prefix>-v<major>.<minor>.<patch>",
            tag=tag,
        )

    canonical = version_source.get_canonical_version()

    if release_tag.version != canonical:
        raise VersionMismatchError(
            f"image tag does not match cargo version: {tag} "
            f"(tag version {release_tag.version}, cargo version {canonical})",
            tag=tag,
            tag_version=release_tag.version,
            canonical_version=canonical,
        )

    logger.debug("Tag %s matches canonical version %s", tag, canonical)
