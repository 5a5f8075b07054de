from __future__ import annotations

import logging
import os
from dataclasses import dataclass

__all__ = ["Settings", "settings"]

logger = logging.getLogger(__name__)

TRUTHY = ("1", "true", "yes", "on")

@dataclass(frozen=True)
class Settings:
    """Deployment wide rendering options.

    Args
        strict (bool): Unknown property names raise `UnknownProperty` instead of passing through.
        indent (str): Text written once per indentation level in pretty mode. Defaults to four spaces.
    """

    strict: bool = False
    indent: str = "    "

    @staticmethod
    def from_env() -> Settings:
        """Build settings from `JSS_STRICT` and `JSS_INDENT_WIDTH`."""
        strict = os.environ.get("JSS_STRICT", "").strip().lower() in TRUTHY
        width = os.environ.get("JSS_INDENT_WIDTH", "").strip()
        if width == "":
            return Settings(strict=strict)
        if not width.isdigit():
            logger.warning("ignoring JSS_INDENT_WIDTH=%r, expected a number of spaces", width)
            return Settings(strict=strict)
        return Settings(strict=strict, indent=" " * int(width))

# Read once; never mutated afterwards.
settings = Settings.from_env()
