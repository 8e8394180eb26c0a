"""Custom exceptions for Release Image Tags."""


class ReleaseTagError(Exception):
    """Base class for all errors raised by this package."""


class PrefixTableError(ReleaseTagError):
    """Raised when a prefix table is malformed or its rules are mis-ordered."""


class TagGrammarError(ReleaseTagError):
    """Raised when a non-release tag is passed where a release tag is required."""

    def __init__(self, message: str, tag: str = None):
        self.tag = tag
        super().__init__(message)


class ValidationError(ReleaseTagError):
    """Raised when a release tag fails validation."""

    def __init__(self, message: str, tag: str = None):
        self.tag = tag
        super().__init__(message)


class VersionMismatchError(ValidationError):
    """Raised when the version embedded in a tag differs from the manifest version."""

    def __init__(self, message: str, tag: str, tag_version=None, canonical_version=None):
        self.tag_version = tag_version
        self.canonical_version = canonical_version
        super().__init__(message, tag=tag)


class ManifestError(ReleaseTagError):
    """Raised when the canonical version cannot be read from a manifest."""

    def __init__(self, message: str, manifest_path: str = None):
        self.manifest_path = manifest_path
        super().__init__(message)
