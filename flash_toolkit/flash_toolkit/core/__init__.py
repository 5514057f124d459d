"""Domain models shared across the toolkit."""

from .models import Sidebar, TemplateArgs

__all__ = ["Sidebar", "TemplateArgs"]
