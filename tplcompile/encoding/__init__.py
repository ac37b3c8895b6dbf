"""Template tag encoding."""

from .dialects import DIALECTS, Dialect, get_dialect
from .encoder import TagEncoder

__all__ = ["DIALECTS", "Dialect", "TagEncoder", "get_dialect"]
