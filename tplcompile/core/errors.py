"""Error taxonomy for the encode and compile flows."""

from __future__ import annotations

from pathlib import Path


class TplCompileError(Exception):
    """Base class for all tplcompile errors."""


class ConfigurationError(TplCompileError):
    """Raised when a required argument or configuration value is missing or invalid."""


class MappingLoadError(TplCompileError):
    """Raised when the global data mapping is missing or malformed."""


class DescriptorError(TplCompileError):
    """Base class for per-descriptor failures."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


class StatError(DescriptorError):
    """Raised when a descriptor cannot be stat'ed."""


class DescriptorParseError(DescriptorError):
    """Raised when a descriptor is not valid YAML."""


class MissingUpstreamArtifact(DescriptorError):
    """Raised when the generated markup for a descriptor does not exist."""
