#!/usr/bin/env python3

"""
Release Image Tag Check Script

Classifies an image tag into its release group and, when a release is being
cut, verifies that the tag's version matches the version declared in the
node's Cargo manifest. Any failure exits with status 1.
"""

import os
import sys
from git import Repo

from .config import DEFAULT_PREFIX_TABLE
from .environment import EnvironmentConfig
from .exceptions import PrefixTableError, ReleaseTagError
from .io_layer import IOLayer
from .prefix_table import PrefixTable, load_prefix_table
from .tag_classification import classify_tag, is_release_tag
from .utils import setup_logging, write_github_output
from .version_source import CargoManifestVersionSource
from .version_validation import assert_tag_matches_source_version


def load_table(config: EnvironmentConfig, io_layer: IOLayer) -> PrefixTable:
    """Load the configured prefix table, or the built-in one."""
    if not config.prefix_table_path:
        return DEFAULT_PREFIX_TABLE

    data = io_layer.read_yaml(config.prefix_table_path)
    if data is None:
        raise PrefixTableError(f"Prefix table not found: {config.prefix_table_path}")
    return load_prefix_table(data)


def resolve_image_tag(config: EnvironmentConfig, io_layer: IOLayer) -> str:
    """Return IMAGE_TAG, or the single release tag pointing at HEAD."""
    if config.image_tag:
        return config.image_tag

    release_tags = [tag for tag in io_layer.head_tags() if is_release_tag(tag)]
    if not release_tags:
        raise ReleaseTagError("No release tag points at HEAD")
    if len(release_tags) > 1:
        raise ReleaseTagError(
            f"Multiple release tags point at HEAD: {', '.join(release_tags)}. Set IMAGE_TAG explicitly"
        )
    return release_tags[0]


def main():
    """Main entry point."""
    setup_logging()
    try:
        # Step 1: Parse environment
        config = EnvironmentConfig.from_env(os.environ)

        # Step 2: Validate configuration
        errors = config.validate()
        if errors:
            for error in errors:
                print(f"Error: {error}")
            sys.exit(1)

        if config.target_path != ".":
            print(f"Changing to target directory: {config.target_path}")
            os.chdir(config.target_path)

        # Step 3: Setup I/O layer
        repo = Repo(".", search_parent_directories=True) if config.image_tag_from_git else None
        io_layer = IOLayer(repo)

        # Step 4: Classify
        table = load_table(config, io_layer)
        tag = resolve_image_tag(config, io_layer)
        classification = classify_tag(tag, table)

        print(f"Image tag: {tag}")
        print(f"Release group: {classification.release_group}")
        print(f"Release tag: {str(classification.is_release).lower()}")

        if config.github_output:
            write_github_output(config.github_output, {
                "release_group": classification.release_group,
                "is_release": str(classification.is_release).lower(),
            })

        # Step 5: Validate release version
        if config.release:
            version_source = CargoManifestVersionSource(
                io_layer,
                manifest_path=config.manifest_path,
                workspace_manifest_path=config.workspace_manifest_path,
            )
            assert_tag_matches_source_version(tag, version_source)
            print(f"Release tag {tag} matches cargo version in {config.manifest_path}")

    except ReleaseTagError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except Exception as e:
        print(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
