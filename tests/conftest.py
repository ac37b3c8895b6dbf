"""Shared fixtures: a throwaway project tree laid out like a pattern library."""

from __future__ import annotations

from pathlib import Path

import pytest

from tplcompile.compiling import formatter
from tplcompile.core.settings import Settings


@pytest.fixture(autouse=True)
def _clear_options_cache():
    formatter._load_options.cache_clear()
    yield
    formatter._load_options.cache_clear()


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings rooted at an empty project with the standard directories."""
    settings = Settings(root_dir=tmp_path)
    settings.patterns_src.mkdir(parents=True)
    settings.patterns_pub.mkdir(parents=True)
    settings.data_file.parent.mkdir(parents=True)
    return settings


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def snapshot(root: Path) -> dict[str, bytes]:
    """Map every file under ``root`` to its bytes."""
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }
