"""Flash Toolkit - theme companion helpers.

Template override resolution, a deferred script queue and small markup
helpers built around a filter/action hook registry.
"""

__version__ = "1.0.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .hooks import HookRegistry
from .scripts import ScriptQueue
from .settings import Settings
from .toolkit import FlashToolkit

# Re-export main CLI entry point
from .cli import main

__all__ = ["FlashToolkit", "HookRegistry", "ScriptQueue", "Settings", "main"]
