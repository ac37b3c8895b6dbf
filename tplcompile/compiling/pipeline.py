"""Compile generated pattern markup into backend templates."""

from __future__ import annotations

import logging
from typing import Callable

from ..core.errors import DescriptorError, MissingUpstreamArtifact
from ..core.io import atomic_write_text, display_path
from ..core.models import CompileResult, CompileTarget, FormatterOptions
from ..core.settings import Settings
from . import descriptors, whitespace
from .formatter import format_html, resolve_options

logger = logging.getLogger(__name__)

Formatter = Callable[[str, FormatterOptions], str]


class CompilePipeline:
    """Routes every descriptor's generated markup to its backend destination.

    Args:
        settings: Project layout
        formatter: Pretty-printer; defaults to :func:`format_html`
        strict: Halt the batch when generated markup is missing instead of
            skipping the descriptor
    """

    def __init__(
        self,
        settings: Settings,
        formatter: Formatter | None = None,
        strict: bool = False,
    ) -> None:
        self.settings = settings
        self.formatter = formatter or format_html
        self.strict = strict

    def compile_target(self, target: CompileTarget, options: FormatterOptions) -> None:
        """Format one descriptor's generated markup and write it to its destination."""
        content = descriptors.read_markup(target, self.settings.encoding)

        content = whitespace.protect(content)
        content = self.formatter(content, options)
        content = whitespace.restore(content)

        atomic_write_text(target.dest_path, content, encoding=self.settings.encoding)
        logger.info(
            f"Template {display_path(target.dest_path, self.settings.root_dir)} compiled."
        )

    def run(self) -> CompileResult:
        """Compile every routed descriptor under the source patterns root.

        Returns:
            Compiled, skipped and failed descriptor paths

        Raises:
            MissingUpstreamArtifact: In strict mode, when generated markup is missing
        """
        options = resolve_options(self.settings)
        paths = descriptors.find_descriptors(self.settings.patterns_src)
        logger.debug(f"Found {len(paths)} descriptor(s)")

        result = CompileResult()
        for path in paths:
            try:
                target = descriptors.load_target(path, self.settings)
            except DescriptorError as e:
                logger.error(str(e))
                result.failed.append(path)
                continue

            if target is None:
                result.skipped.append(path)
                continue

            try:
                self.compile_target(target, options)
            except MissingUpstreamArtifact as e:
                if self.strict:
                    raise
                logger.error(str(e))
                result.failed.append(path)
                continue

            result.compiled.append(target.dest_path)

        return result
