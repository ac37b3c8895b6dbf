"""Encode template sources into generator-safe .mustache files."""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.errors import ConfigurationError
from ..core.io import atomic_write_text, display_path, find_by_suffix
from ..core.models import EncodedTemplate, EncodeResult
from ..core.settings import Settings
from . import datafile
from .dialects import Dialect, get_dialect

logger = logging.getLogger(__name__)

ENCODED_EXT = ".mustache"
SIDECAR_EXT = ".json"


def normalize_extension(extension: str | None) -> str:
    """Return the extension with a leading separator.

    Raises:
        ConfigurationError: If no extension was given
    """
    ext = (extension or "").strip()
    if not ext or ext == ".":
        raise ConfigurationError(
            "Need an extension argument to identify your source files by extension!"
        )
    return ext if ext.startswith(".") else f".{ext}"


def find_sources(root: Path, ext: str) -> list[Path]:
    """Find every file under ``root`` whose name ends with ``ext``."""
    return [p for p in find_by_suffix(root, ext) if p.is_file()]


def sibling(path: Path, ext: str, new_ext: str) -> Path:
    """Replace the trailing ``ext`` of ``path`` with ``new_ext``."""
    return path.with_name(path.name[: -len(ext)] + new_ext)


class TagEncoder:
    """Rewrites template sources in place into their encoded siblings."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def encode_file(self, source: Path, ext: str, dialect: Dialect) -> EncodedTemplate:
        """Encode one source file, write its sidecar and delete the source.

        Args:
            source: Template source file
            ext: Normalized source extension
            dialect: Encoding strategy

        Returns:
            Record of the files written
        """
        enc = self.settings.encoding
        root = self.settings.root_dir

        content = dialect.encode(source.read_text(encoding=enc))

        encoded_path = sibling(source, ext, ENCODED_EXT)
        sidecar_path = sibling(source, ext, SIDECAR_EXT)

        atomic_write_text(encoded_path, content, encoding=enc)
        atomic_write_text(sidecar_path, dialect.sidecar_text(), encoding=enc)

        logger.info(
            f"{display_path(source, root)} encoded to {display_path(encoded_path, root)}."
        )

        source.unlink()

        return EncodedTemplate(
            source_path=source, encoded_path=encoded_path, sidecar_path=sidecar_path
        )

    def encode(self, dialect: str, extension: str | None) -> EncodeResult:
        """Encode every source template matching ``extension``.

        This is a one-way migration: sources are deleted once encoded.

        Args:
            dialect: Template dialect tag, e.g. "hbs"
            extension: Source extension, with or without the leading dot

        Returns:
            Encoded files and the entries added to the global data mapping

        Raises:
            ConfigurationError: If the extension is missing or the dialect unknown
        """
        ext = normalize_extension(extension)
        if ext in (ENCODED_EXT, SIDECAR_EXT):
            raise ConfigurationError(f"Cannot encode files that already end in {ext}")
        strategy = get_dialect(dialect)

        mapping = datafile.load_mapping(self.settings.data_file, self.settings.encoding)
        sources = find_sources(self.settings.patterns_src, ext)
        logger.debug(f"Found {len(sources)} {ext} file(s)")

        result = EncodeResult(dialect=strategy.name, extension=ext)
        for source in sources:
            result.templates.append(self.encode_file(source, ext, strategy))

        if result.templates:
            pending = datafile.missing_keys(mapping, strategy.data_keys)
            result.added_keys = datafile.append_keys(
                mapping, pending, self.settings.encoding
            )

        return result
