"""File I/O helpers shared by the encode and compile flows."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path."""
    path.parent.mkdir(parents=True, exist_ok=True)


def atomic_write_text(
    path: Path, text: str, *, encoding: str = "utf-8", mode: int = 0o644
) -> None:
    """Write text to a file atomically using a temporary file.

    Args:
        path: Destination file path
        text: Text content to write
        encoding: Text encoding
        mode: File permissions (octal)
    """
    ensure_parent(path)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
        os.chmod(path, mode)
    finally:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)


def display_path(path: Path, root: Path) -> str:
    """Return ``path`` relative to ``root`` for log output, or as-is outside it."""
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)


def find_by_suffix(root: Path, suffix: str) -> list[Path]:
    """Find paths under ``root`` whose name ends with ``suffix``, sorted.

    The suffix is matched literally. Hidden files and anything under a hidden
    directory are skipped.
    """
    if not root.is_dir():
        return []
    return sorted(
        p
        for p in root.rglob("*")
        if p.name.endswith(suffix)
        and not any(part.startswith(".") for part in p.relative_to(root).parts)
    )
