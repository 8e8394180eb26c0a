"""
Configuration Module for Release Image Tags

This module contains the static configuration used throughout the application.

Constants:
    DEFAULT_RELEASE_GROUP: Release group used when no prefix rule matches
    DEFAULT_PREFIX_RULES: (prefix, release group) pairs, most specific first
    DEFAULT_PREFIX_TABLE: PrefixTable built from the two constants above
    MAX_TAG_LENGTH: Longest tag Docker accepts; longer tags are never release tags
    NODE_MANIFEST_PATH: Cargo manifest declaring the canonical release version
    WORKSPACE_MANIFEST_PATH: Workspace manifest consulted for inherited versions
    PACKAGE_VERSION_PATH: dpath glob of the version key in a package manifest
    WORKSPACE_VERSION_PATH: dpath glob of the version key in a workspace manifest
"""

from .prefix_table import build_prefix_table

DEFAULT_RELEASE_GROUP = "accudo-node"

# Order matters: 'accudo-indexer-grpc' must be checked before any broader prefix
DEFAULT_PREFIX_RULES = [
    ("accudo-indexer-grpc", "accudo-indexer-grpc"),
    ("accudo-node", "accudo-node"),
]

DEFAULT_PREFIX_TABLE = build_prefix_table(DEFAULT_PREFIX_RULES, DEFAULT_RELEASE_GROUP)

# Docker rejects tags longer than this
MAX_TAG_LENGTH = 128

NODE_MANIFEST_PATH = "accudo-node/Cargo.toml"
WORKSPACE_MANIFEST_PATH = "Cargo.toml"
PACKAGE_VERSION_PATH = "package/version"
WORKSPACE_VERSION_PATH = "workspace/package/version"
