"""Main CLI application."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from typing_extensions import Annotated

from ..compiling import CompilePipeline
from ..core.errors import TplCompileError
from ..encoding import TagEncoder
from .parsers import build_settings

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="tplcompile",
    help="Encode Handlebars templates for a pattern-library generator and compile them back.",
    no_args_is_help=True,
)

RootOption = Annotated[
    str,
    typer.Option(
        "--root",
        help="Project root containing source/, public/ and backend/ (default: cwd).",
        metavar="DIR",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable verbose logging.",
    ),
]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )


@app.command()
def encode(
    dialect: Annotated[
        str,
        typer.Argument(help="Template dialect of the source files."),
    ] = "hbs",
    extension: Annotated[
        Optional[str],
        typer.Option(
            "--extension",
            "-e",
            help="Extension identifying the source files, e.g. hbs or .hbs.",
            metavar="EXT",
        ),
    ] = None,
    root: RootOption = "",
    verbose: VerboseOption = False,
) -> None:
    """Encode template tags in source files and rename them to .mustache."""
    _configure_logging(verbose)

    settings = build_settings(root)
    logger.debug(f"Encoding {dialect} templates under {settings.patterns_src}")

    try:
        result = TagEncoder(settings).encode(dialect, extension)
    except TplCompileError as e:
        logger.error(f"Error: {e}")
        raise typer.Exit(code=1) from e

    logger.debug(f"Completed: {len(result.templates)} file(s) encoded")


@app.command(name="compile")
def compile_(
    root: RootOption = "",
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Stop at the first descriptor whose generated markup is missing.",
        ),
    ] = False,
    verbose: VerboseOption = False,
) -> None:
    """Compile generated pattern markup into backend templates."""
    _configure_logging(verbose)

    settings = build_settings(root)

    try:
        result = CompilePipeline(settings, strict=strict).run()
    except TplCompileError as e:
        logger.error(f"Error: {e}")
        raise typer.Exit(code=1) from e

    logger.debug(
        f"Completed: {len(result.compiled)} compiled, "
        f"{len(result.skipped)} skipped, {len(result.failed)} failed"
    )


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
