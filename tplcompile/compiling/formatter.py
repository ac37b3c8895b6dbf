"""HTML formatter adapter and layered formatter options."""

from __future__ import annotations

import json
import logging
import re
from functools import lru_cache
from pathlib import Path

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter
from pydantic import ValidationError

from ..core.errors import ConfigurationError
from ..core.models import FormatterOptions
from ..core.settings import Settings

logger = logging.getLogger(__name__)

DEFAULT_RC = Path(__file__).resolve().parent.parent / "defaults" / "jsbeautifyrc.json"

_TEMPLATE_TAG = re.compile(r"\{\{!--.*?--\}\}|\{\{\{.*?\}\}\}|\{\{.*?\}\}", re.DOTALL)

# Valid as text, attribute name and attribute value.
TAG_PLACEHOLDER = "tplcompile-tag-{}-"
# A placeholder parsed as a valueless attribute is written back as name="".
_PLACEHOLDER = re.compile(r'tplcompile-tag-(\d+)-(?:="")?')


@lru_cache(maxsize=None)
def _load_options(path: Path) -> FormatterOptions:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot load formatter options from {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Formatter options in {path} must be a JSON object")

    # js-beautify rc files may carry per-language sections.
    html_section = raw.get("html")
    if isinstance(html_section, dict):
        raw = {**raw, **html_section}

    try:
        return FormatterOptions.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid formatter options in {path}: {e}") from e


def load_options(path: Path) -> FormatterOptions:
    """Load formatter options from ``path``, cached by absolute path.

    Args:
        path: JSON rc file

    Returns:
        Immutable formatter options

    Raises:
        ConfigurationError: If the file is unreadable or invalid
    """
    return _load_options(path.resolve())


def resolve_options(settings: Settings) -> FormatterOptions:
    """Load the project rc file if present, else the bundled default."""
    project_rc = settings.project_rc
    if project_rc.is_file():
        logger.debug(f"Using formatter options from {project_rc}")
        return load_options(project_rc)

    logger.debug(f"Using bundled formatter options from {DEFAULT_RC}")
    return load_options(DEFAULT_RC)


def _stash_tags(content: str) -> tuple[str, list[str]]:
    tags: list[str] = []

    def stash(match: re.Match[str]) -> str:
        tags.append(match.group(0))
        return TAG_PLACEHOLDER.format(len(tags) - 1)

    return _TEMPLATE_TAG.sub(stash, content), tags


def _unstash_tags(content: str, tags: list[str]) -> str:
    return _PLACEHOLDER.sub(lambda m: tags[int(m.group(1))], content)


def format_html(content: str, options: FormatterOptions) -> str:
    """Pretty-print HTML, changing only whitespace.

    Template tags are swapped for placeholders while the markup is parsed, so
    tags in text, attribute values and start tags come back verbatim. Text is
    re-escaped with minimal entity substitution.

    Args:
        content: HTML markup
        options: Formatter options

    Returns:
        Formatted markup
    """
    formatter = HTMLFormatter(
        entity_substitution=EntitySubstitution.substitute_xml,
        void_element_close_prefix="/" if options.void_element_slash else None,
        indent=options.indent,
    )
    stashed, tags = _stash_tags(content)
    soup = BeautifulSoup(stashed, options.parser)
    formatted = _unstash_tags(soup.prettify(formatter=formatter), tags).rstrip()

    if options.end_with_newline:
        formatted += "\n"
    return formatted
