"""CLI argument parsers and validators."""

from __future__ import annotations

from pathlib import Path

import typer

from ..core.settings import Settings


def parse_root(value: str) -> Path:
    """Parse the project root option (default: cwd)."""
    if not value:
        return Path.cwd()
    root = Path(value)
    if not root.is_dir():
        raise typer.BadParameter(f"Not a directory: {value!r}")
    return root.resolve()


def build_settings(root: str) -> Settings:
    """Build settings for the given project root, keeping env overrides."""
    return Settings(root_dir=parse_root(root))
