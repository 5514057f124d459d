"""Deferred JavaScript output."""

from __future__ import annotations

import logging
import re
from typing import TextIO

from ..hooks import HookRegistry

logger = logging.getLogger(__name__)

# &#39; / &#x27; with optional zero padding and trailing semicolon
_ENCODED_APOSTROPHE = re.compile(r"&#(x)?0*(?(1)27|39);?", re.IGNORECASE)

SCRIPT_WRAPPER = (
    "<!-- Flash Toolkit JavaScript -->\n"
    '<script type="text/javascript">\n'
    "jQuery(function($) {{ {code} }});\n"
    "</script>\n"
)


def strip_invalid_utf8(text: str) -> str:
    """Drop characters that cannot be encoded as UTF-8 (lone surrogates)."""
    return text.encode("utf-8", errors="ignore").decode("utf-8")


def sanitize_js(code: str) -> str:
    """Best-effort cleanup of queued script text.

    Args:
        code: Accumulated script text

    Returns:
        Text with invalid sequences dropped, encoded apostrophes restored
        and carriage returns removed
    """
    code = strip_invalid_utf8(code)
    code = _ENCODED_APOSTROPHE.sub("'", code)
    return code.replace("\r", "")


class ScriptQueue:
    """Per-request buffer of script snippets emitted once in the footer."""

    def __init__(self, hooks: HookRegistry) -> None:
        self.hooks = hooks
        self.buffer: str | None = None

    def enqueue(self, code: str | bytes) -> None:
        if isinstance(code, bytes):
            code = code.decode("utf-8", errors="ignore")

        if not self.buffer:
            self.buffer = ""

        self.buffer += "\n" + code + "\n"

    def flush(self, out: TextIO) -> str | None:
        """Write the queued scripts to *out* and reset the buffer.

        Args:
            out: Stream receiving the script block

        Returns:
            The emitted text, or None when nothing was queued
        """
        if not self.buffer:
            return None

        try:
            code = sanitize_js(self.buffer)
            js = self.hooks.apply_filters(
                "flash_toolkit_queued_js", SCRIPT_WRAPPER.format(code=code)
            )
            if js:
                out.write(js)
                logger.debug(f"Printed {len(js)} byte(s) of queued JavaScript")
            return js or None
        finally:
            self.buffer = None
