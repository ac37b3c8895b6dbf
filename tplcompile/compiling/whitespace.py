"""Protect Handlebars block tags from the HTML pretty-printer.

The formatter only indents ``{{#each}}``-style blocks correctly when the
identifier sits right after the control character. Before formatting, the
identifier is moved next to the control character and the original
whitespace is parked after it, followed by a non-breaking space marking the
spot. After formatting, the move is reversed and the marker dropped.
"""

from __future__ import annotations

import re

# Not enterable by keyboard, so it never occurs in authored templates.
MARKER = "\u00a0"

CONTROL_CHARS = ("#", "^", "/")

_WS = r"[^\S\u00a0]+"
_IDENT = r"[^\s}]+"

_PRE = [
    re.compile(rf"(\{{\{{{re.escape(c)})({_WS})({_IDENT})") for c in CONTROL_CHARS
]
_POST = [
    re.compile(rf"(\{{\{{{re.escape(c)})({_IDENT})({_WS}){MARKER}")
    for c in CONTROL_CHARS
]


def protect(content: str) -> str:
    """``{{#  name}}`` -> ``{{#name  <marker>}}``"""
    for pattern in _PRE:
        content = pattern.sub(
            lambda m: m.group(1) + m.group(3) + m.group(2) + MARKER, content
        )
    return content


def restore(content: str) -> str:
    """``{{#name  <marker>}}`` -> ``{{#  name}}``"""
    for pattern in _POST:
        content = pattern.sub(lambda m: m.group(1) + m.group(3) + m.group(2), content)
    return content
