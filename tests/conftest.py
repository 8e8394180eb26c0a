"""Test fixtures for Release Image Tags.

Fixtures:
    cargo_workspace: Creates a temporary Cargo workspace with a node manifest
"""

import pytest


NODE_MANIFEST = """\
[package]
name = "accudo-node"
version = "{version}"
edition = "2021"

[dependencies]
anyhow = "1.0"
"""

WORKSPACE_MANIFEST = """\
[workspace]
resolver = "2"
members = ["accudo-node"]

[workspace.package]
version = "{version}"
"""


@pytest.fixture
def cargo_workspace(tmp_path):
    """Creates a temporary Cargo workspace for testing.

    tmp_path/
    ├── Cargo.toml
    └── accudo-node/
        └── Cargo.toml

    The node manifest declares version 1.2.3, the workspace 9.9.9, so tests
    can tell which manifest a version was read from.

    Returns:
        dict: root (Path), workspace_manifest (Path), node_manifest (Path)
    """
    workspace_manifest = tmp_path / "Cargo.toml"
    workspace_manifest.write_text(WORKSPACE_MANIFEST.format(version="9.9.9"))

    node_dir = tmp_path / "accudo-node"
    node_dir.mkdir()
    node_manifest = node_dir / "Cargo.toml"
    node_manifest.write_text(NODE_MANIFEST.format(version="1.2.3"))

    return {
        "root": tmp_path,
        "workspace_manifest": workspace_manifest,
        "node_manifest": node_manifest,
    }
