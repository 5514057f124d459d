"""Template resolution and rendering."""

from .engine import get_template
from .resolver import locate_template

__all__ = ["get_template", "locate_template"]
