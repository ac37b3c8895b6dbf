"""Descriptor loading and output routing."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import Any

import yaml

from ..core.errors import DescriptorParseError, MissingUpstreamArtifact, StatError
from ..core.io import find_by_suffix
from ..core.models import CompileTarget
from ..core.settings import Settings

logger = logging.getLogger(__name__)

DESCRIPTOR_EXT = ".yml"
MARKUP_SUFFIX = ".markup-only.html"


def find_descriptors(root: Path) -> list[Path]:
    """Find every descriptor under ``root``."""
    return find_by_suffix(root, DESCRIPTOR_EXT)


def normalize_ext(value: str) -> str:
    ext = value.strip()
    return ext if ext.startswith(".") else f".{ext}"


def pattern_id(descriptor: Path, patterns_root: Path) -> str:
    """Flatten a descriptor path into the generator's pattern identifier.

    ``00-atoms/buttons/button~primary.yml`` becomes ``00-atoms-buttons-button-primary``.
    """
    relative = descriptor.relative_to(patterns_root).as_posix()
    relative = relative[: -len(DESCRIPTOR_EXT)]
    return relative.replace("/", "-").replace("~", "-")


def markup_path(pub_root: Path, pid: str) -> Path:
    return pub_root / pid / f"{pid}{MARKUP_SUFFIX}"


def parse_descriptor(path: Path, encoding: str = "utf-8") -> dict[str, Any] | None:
    """Read a descriptor's YAML content.

    Returns:
        Parsed mapping, or None if the path is not a regular file or the
        document is not a mapping

    Raises:
        StatError: If the path cannot be stat'ed
        DescriptorParseError: If the file cannot be read or parsed
    """
    try:
        st = os.stat(path)
    except OSError as e:
        raise StatError(path, str(e)) from e

    if not stat.S_ISREG(st.st_mode):
        return None

    try:
        data = yaml.safe_load(path.read_text(encoding=encoding))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise DescriptorParseError(path, str(e)) from e

    if not isinstance(data, dict):
        return None
    return data


def route(path: Path, data: dict[str, Any], settings: Settings) -> CompileTarget | None:
    """Compute where a descriptor's generated markup is and where it compiles to.

    Returns None when either routing field is missing or empty.
    """
    compile_dir = data.get("tpl_compile_dir")
    compile_ext = data.get("tpl_compile_ext")
    if not compile_dir or not compile_ext:
        return None

    # Always relative to the backend root.
    compile_dir = str(compile_dir).strip().lstrip("/\\")
    compile_ext = str(compile_ext).strip()
    if not compile_dir or not compile_ext:
        return None

    pid = pattern_id(path, settings.patterns_src)
    dest = settings.backend / compile_dir / f"{path.stem}{normalize_ext(compile_ext)}"

    return CompileTarget(
        descriptor_path=path,
        pattern_id=pid,
        markup_path=markup_path(settings.patterns_pub, pid),
        dest_path=dest,
    )


def load_target(path: Path, settings: Settings) -> CompileTarget | None:
    """Parse and route a single descriptor; None if it is inert."""
    data = parse_descriptor(path, settings.encoding)
    if data is None:
        logger.debug(f"Skipping {path}: not a regular file or not a mapping")
        return None

    target = route(path, data, settings)
    if target is None:
        logger.debug(f"Skipping {path}: no tpl_compile_dir/tpl_compile_ext")
    return target


def read_markup(target: CompileTarget, encoding: str = "utf-8") -> str:
    """Read the generated markup for a routed descriptor.

    Raises:
        MissingUpstreamArtifact: If the generator has not produced the file
    """
    try:
        return target.markup_path.read_text(encoding=encoding)
    except FileNotFoundError as e:
        raise MissingUpstreamArtifact(
            target.descriptor_path, f"generated markup not found at {target.markup_path}"
        ) from e
