"""Tests for the command line interface."""

from __future__ import annotations

from typer.testing import CliRunner

from tests.conftest import snapshot, write
from tplcompile.cli import app

runner = CliRunner()


def test_encode(settings):
    write(settings.patterns_src / "button.hbs", "<button>{{label}}</button>")

    result = runner.invoke(
        app, ["encode", "hbs", "-e", "hbs", "--root", str(settings.root_dir)]
    )

    assert result.exit_code == 0
    assert (settings.patterns_src / "button.mustache").exists()
    assert not (settings.patterns_src / "button.hbs").exists()


def test_encode_defaults_to_hbs(settings):
    write(settings.patterns_src / "button.hbs", "{{label}}")

    result = runner.invoke(
        app, ["encode", "--extension", ".hbs", "--root", str(settings.root_dir)]
    )

    assert result.exit_code == 0
    assert (settings.patterns_src / "button.mustache").exists()


def test_encode_without_extension_fails(settings):
    write(settings.patterns_src / "button.hbs", "{{label}}")
    before = snapshot(settings.root_dir)

    result = runner.invoke(app, ["encode", "hbs", "--root", str(settings.root_dir)])

    assert result.exit_code == 1
    assert snapshot(settings.root_dir) == before


def test_compile(settings):
    write(
        settings.patterns_src / "page.yml",
        "tpl_compile_dir: views\ntpl_compile_ext: php\n",
    )
    write(settings.patterns_pub / "page" / "page.markup-only.html", "<p>{{x}}</p>")

    result = runner.invoke(app, ["compile", "--root", str(settings.root_dir)])

    assert result.exit_code == 0
    assert (settings.backend / "views" / "page.php").exists()


def test_compile_strict_missing_markup(settings):
    write(
        settings.patterns_src / "page.yml",
        "tpl_compile_dir: views\ntpl_compile_ext: php\n",
    )

    result = runner.invoke(
        app, ["compile", "--strict", "--root", str(settings.root_dir)]
    )

    assert result.exit_code == 1


def test_bad_root(tmp_path):
    result = runner.invoke(app, ["compile", "--root", str(tmp_path / "missing")])

    assert result.exit_code != 0
