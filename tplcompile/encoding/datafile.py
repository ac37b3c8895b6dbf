"""Global data mapping: load once, append missing reserved keys once."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from ..core.errors import MappingLoadError
from ..core.io import atomic_write_text

logger = logging.getLogger(__name__)

_CLOSING_BRACE = re.compile(r"\s*\}(\s*)$")


@dataclass
class DataMapping:
    """In-memory view of the global data mapping file."""

    path: Path
    data: dict[str, Any] = field(default_factory=dict)
    text: str = ""
    # False when the file exists but could not be parsed.
    writable: bool = True


def read_mapping(path: Path, encoding: str = "utf-8") -> DataMapping:
    """Read and parse the mapping file.

    Raises:
        MappingLoadError: If the file is missing, unreadable or not a JSON object
    """
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise MappingLoadError(f"Cannot read {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MappingLoadError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise MappingLoadError(f"{path} does not contain a JSON object")

    return DataMapping(path=path, data=data, text=text)


def load_mapping(path: Path, encoding: str = "utf-8") -> DataMapping:
    """Load the mapping, falling back to an empty one on any load failure.

    A missing file can be created later; an existing but malformed file is
    left alone.
    """
    try:
        return read_mapping(path, encoding)
    except MappingLoadError as e:
        logger.debug(f"Using empty data mapping: {e}")
        return DataMapping(path=path, writable=not path.exists())


def missing_keys(mapping: DataMapping, wanted: Mapping[str, str]) -> dict[str, str]:
    """Return the entries of ``wanted`` whose keys are absent from the mapping."""
    return {key: value for key, value in wanted.items() if key not in mapping.data}


def _splice(text: str, key: str, value: str) -> str:
    entry = f",\n  {json.dumps(key)}: {json.dumps(value)}\n}}"
    return _CLOSING_BRACE.sub(lambda m: entry + m.group(1), text, count=1)


def append_keys(
    mapping: DataMapping, additions: Mapping[str, str], encoding: str = "utf-8"
) -> dict[str, str]:
    """Append new entries to the mapping file and return what was written.

    Existing keys are never rewritten. A non-empty mapping keeps its original
    formatting; the new entries are spliced in before the closing brace.

    Args:
        mapping: Loaded mapping
        additions: Entries to add
        encoding: Text encoding

    Returns:
        Entries actually added
    """
    added = {key: value for key, value in additions.items() if key not in mapping.data}
    if not added:
        return {}

    if not mapping.writable:
        logger.warning(
            f"Not updating malformed data file {mapping.path}; "
            f"add {', '.join(added)} manually"
        )
        return {}

    if mapping.data:
        text = mapping.text
        for key, value in added.items():
            text = _splice(text, key, value)
    else:
        text = json.dumps(added, indent=2) + "\n"

    data = json.loads(text)
    atomic_write_text(mapping.path, text, encoding=encoding)

    mapping.data = data
    mapping.text = text
    logger.debug(f"Added {', '.join(added)} to {mapping.path}")
    return added
