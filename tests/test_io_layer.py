"""Unit tests for the IOLayer file and Git reads."""

import tomllib

import pytest
from unittest.mock import Mock

from release_image_tags.io_layer import IOLayer


@pytest.fixture
def io_layer():
    """Create an IOLayer without a repository."""
    return IOLayer()


def make_tag(name, commit):
    """Create a mock Git tag reference."""
    tag = Mock()
    tag.name = name
    tag.commit = commit
    return tag


class TestFileReads:
    """Test file system reads."""

    def test_read_toml(self, io_layer, cargo_workspace):
        """Test TOML manifests are parsed into dictionaries."""
        data = io_layer.read_toml(str(cargo_workspace["node_manifest"]))
        assert data["package"]["name"] == "accudo-node"
        assert data["package"]["version"] == "1.2.3"

    def test_read_toml_missing(self, io_layer, tmp_path):
        """Test a missing TOML file reads as None."""
        assert io_layer.read_toml(str(tmp_path / "Cargo.toml")) is None

    def test_read_toml_invalid(self, io_layer, tmp_path):
        """Test malformed TOML raises the parser error."""
        path = tmp_path / "Cargo.toml"
        path.write_text("[package")
        with pytest.raises(tomllib.TOMLDecodeError):
            io_layer.read_toml(str(path))

    def test_read_yaml(self, io_layer, tmp_path):
        """Test YAML files are parsed into dictionaries."""
        path = tmp_path / "prefixes.yaml"
        path.write_text("default: accudo-node\nrules:\n  - prefix: accudo-node\n    group: accudo-node\n")
        data = io_layer.read_yaml(str(path))
        assert data == {"default": "accudo-node", "rules": [{"prefix": "accudo-node", "group": "accudo-node"}]}

    def test_read_yaml_missing(self, io_layer, tmp_path):
        """Test a missing YAML file reads as None."""
        assert io_layer.read_yaml(str(tmp_path / "prefixes.yaml")) is None


class TestHeadTags:
    """Test listing tags at HEAD."""

    def test_no_repo(self, io_layer):
        """Test no repository means no tags."""
        assert io_layer.head_tags() == []

    def test_tags_at_head(self):
        """Test only tags pointing at HEAD are returned, sorted."""
        head = Mock()
        other = Mock()
        repo = Mock()
        repo.head.commit = head
        repo.tags = [
            make_tag("accudo-node-v1.2.3", head),
            make_tag("accudo-node-v1.2.2", other),
            make_tag("accudo-indexer-grpc-v1.0.0", head),
        ]

        assert IOLayer(repo).head_tags() == ["accudo-indexer-grpc-v1.0.0", "accudo-node-v1.2.3"]
