from .queue import ScriptQueue

__all__ = ["ScriptQueue"]
