"""tplcompile - Handlebars tag encoder and backend template compiler.

Encodes template tags so a pattern-library generator carries them through
untouched, then compiles the generated markup into backend templates.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
