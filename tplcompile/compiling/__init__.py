"""Compile generated markup into backend templates."""

from .pipeline import CompilePipeline

__all__ = ["CompilePipeline"]
