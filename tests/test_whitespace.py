"""Tests for the block-tag whitespace normalizer."""

from __future__ import annotations

import pytest

from tplcompile.compiling.whitespace import MARKER, protect, restore


def test_protect_moves_identifier_next_to_control_char():
    assert protect("{{#  name}}") == "{{#name  " + MARKER + "}}"


def test_restore_reverses_protect():
    assert restore("{{#name  " + MARKER + "}}") == "{{#  name}}"


@pytest.mark.parametrize(
    "content",
    [
        "{{#  name}}",
        "{{^ items}}none{{/ items}}",
        "{{# each list}}<li>{{this}}</li>{{/ each}}",
        "<ul>\n{{#\tpeople}}\n<li>{{name}}</li>\n{{/\tpeople}}\n</ul>",
    ],
)
def test_round_trip(content):
    protected = protect(content)

    assert restore(protected) == content


@pytest.mark.parametrize("char", ["#", "^", "/"])
def test_each_control_char(char):
    protected = protect("{{" + char + " block}}")

    assert protected == "{{" + char + "block " + MARKER + "}}"
    assert restore(protected) == "{{" + char + " block}}"


def test_tags_without_space_are_untouched():
    content = "{{#each items}}{{this}}{{/each}}"

    assert protect(content) == content
    assert restore(content) == content


def test_plain_whitespace_without_marker_is_not_restored():
    assert restore("{{#name  }}") == "{{#name  }}"
