"""Reversible tag encoding for template dialects.

Template tags are rewritten into tokens that a second ``{{ }}`` consuming
generator renders back into the original delimiters. For Handlebars every
``{{`` becomes the triple-stache ``{{{<%}}}`` and every ``}}`` becomes
``{{{%>}}}``; the generator resolves ``<%`` and ``%>`` through the sidecar key
pair file (or through the global data mapping, which hides them as HTML
comments in every other view).
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Callable, Mapping

from ..core.errors import ConfigurationError

OPEN_MARKER = "<%"
CLOSE_MARKER = "%>"

HBS_OPEN_TOKEN = "{{{" + OPEN_MARKER + "}}}"
HBS_CLOSE_TOKEN = "{{{" + CLOSE_MARKER + "}}}"


def encode_hbs(content: str) -> str:
    """Encode Handlebars tags in a single scan over brace runs.

    Open braces pair up left to right; an odd trailing brace stays literal.
    Close braces are taken greedily in groups of three, where the leading
    brace stays literal, then a remaining pair becomes a close token and a
    remaining single brace stays literal.

    Args:
        content: Template source

    Returns:
        Encoded template text
    """
    pieces: list[str] = []
    i = 0
    length = len(content)

    while i < length:
        char = content[i]
        if char not in "{}":
            start = i
            while i < length and content[i] not in "{}":
                i += 1
            pieces.append(content[start:i])
            continue

        start = i
        while i < length and content[i] == char:
            i += 1
        run = i - start

        if char == "{":
            pieces.append(HBS_OPEN_TOKEN * (run // 2))
            if run % 2:
                pieces.append("{")
            continue

        while run >= 3:
            pieces.append("}" + HBS_CLOSE_TOKEN)
            run -= 3
        if run == 2:
            pieces.append(HBS_CLOSE_TOKEN)
        elif run == 1:
            pieces.append("}")

    return "".join(pieces)


def decode_hbs(content: str, keys: Mapping[str, str] | None = None) -> str:
    """Substitute marker values back into encoded Handlebars tokens.

    Args:
        content: Encoded template text
        keys: Marker values; defaults to the sidecar key pair

    Returns:
        Text with the open/close tokens replaced
    """
    values = HBS.sidecar if keys is None else keys
    content = content.replace(HBS_OPEN_TOKEN, values[OPEN_MARKER])
    return content.replace(HBS_CLOSE_TOKEN, values[CLOSE_MARKER])


@dataclass(frozen=True)
class Dialect:
    """Encoding strategy for one template dialect."""

    name: str
    encode: Callable[[str], str]
    decode: Callable[..., str]
    # Written next to every encoded file; restores the real delimiters.
    sidecar: dict[str, str] = field(default_factory=dict)
    # Added to the global data mapping; hides the tokens in other views.
    data_keys: dict[str, str] = field(default_factory=dict)

    def sidecar_text(self) -> str:
        return json.dumps(self.sidecar, indent=2) + "\n"


HBS = Dialect(
    name="hbs",
    encode=encode_hbs,
    decode=decode_hbs,
    sidecar={OPEN_MARKER: "{{", CLOSE_MARKER: "}}"},
    data_keys={OPEN_MARKER: "<!--", CLOSE_MARKER: "-->"},
)

DIALECTS: dict[str, Dialect] = {HBS.name: HBS}


def get_dialect(name: str) -> Dialect:
    """Look up a registered dialect by tag.

    Raises:
        ConfigurationError: If the dialect is not registered
    """
    try:
        return DIALECTS[name]
    except KeyError:
        supported = ", ".join(sorted(DIALECTS))
        raise ConfigurationError(
            f"Unsupported template dialect {name!r} (supported: {supported})"
        ) from None
