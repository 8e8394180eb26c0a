"""
Version Source Module

Supplies the canonical release version. The validator depends only on the
narrow ``get_canonical_version()`` accessor; this module provides the Cargo
manifest reader used by the release pipeline and a fixed-value source.
"""

import logging
import tomllib
from typing import Any, Dict, Protocol

import dpath

from .config import (
    NODE_MANIFEST_PATH,
    PACKAGE_VERSION_PATH,
    WORKSPACE_MANIFEST_PATH,
    WORKSPACE_VERSION_PATH,
)
from .exceptions import ManifestError
from .io_layer import IOLayer
from .models import ParsedVersion

logger = logging.getLogger(__name__)


class VersionSource(Protocol):
    """Anything that can report the canonical version."""

    def get_canonical_version(self) -> ParsedVersion:
        ...


class StaticVersionSource:
    """Version source returning a version known up front."""

    def __init__(self, version: str):
        parsed = ParsedVersion.from_string(version)
        if parsed is None:
            raise ManifestError(f"Invalid canonical version '{version}', expected X.Y.Z")
        self.version = parsed

    def get_canonical_version(self) -> ParsedVersion:
        return self.version


class CargoManifestVersionSource:
    """Reads the canonical version from a Cargo manifest.

    Every call re-reads the manifest. When the package declares
    ``version.workspace = true`` the version is taken from
    ``[workspace.package]`` in the workspace manifest.
    """

    def __init__(
        self,
        io_layer: IOLayer,
        manifest_path: str = NODE_MANIFEST_PATH,
        workspace_manifest_path: str = WORKSPACE_MANIFEST_PATH,
    ):
        self.io_layer = io_layer
        self.manifest_path = manifest_path
        self.workspace_manifest_path = workspace_manifest_path

    def get_canonical_version(self) -> ParsedVersion:
        """Read and parse the declared version.

        Returns:
            ParsedVersion of the manifest version

        Raises:
            ManifestError: If a manifest is missing, malformed, or lacks a valid version
        """
        manifest = self._load(self.manifest_path)
        raw_version = self._lookup(manifest, PACKAGE_VERSION_PATH, self.manifest_path)

        if isinstance(raw_version, dict) and raw_version.get("workspace") is True:
            logger.debug(
                "%s inherits its version from %s", self.manifest_path, self.workspace_manifest_path
            )
            workspace = self._load(self.workspace_manifest_path)
            source_path = self.workspace_manifest_path
            raw_version = self._lookup(workspace, WORKSPACE_VERSION_PATH, source_path)
        else:
            source_path = self.manifest_path

        version = ParsedVersion.from_string(raw_version)
        if version is None:
            raise ManifestError(
                f"Invalid version {raw_version!r} in {source_path}, expected X.Y.Z",
                manifest_path=source_path,
            )

        logger.debug("Canonical version %s read from %s", version, source_path)
        return version

    def _load(self, path: str) -> Dict[str, Any]:
        try:
            data = self.io_layer.read_toml(path)
        except tomllib.TOMLDecodeError as e:
            raise ManifestError(f"Failed to parse {path}: {e}", manifest_path=path) from e
        except OSError as e:
            raise ManifestError(f"Failed to read {path}: {e}", manifest_path=path) from e

        if data is None:
            raise ManifestError(f"Manifest not found: {path}", manifest_path=path)
        return data

    @staticmethod
    def _lookup(data: Dict[str, Any], glob: str, path: str) -> Any:
        try:
            return dpath.get(data, glob)
        except KeyError as e:
            key = glob.replace("/", ".")
            raise ManifestError(f"No '{key}' declared in {path}", manifest_path=path) from e
