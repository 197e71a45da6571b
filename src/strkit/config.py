"""
strkit configuration.

Settings come from defaults overridden by environment variables:

    STRKIT_LOG_LEVEL    logging level name for the CLI (default WARNING)
    STRKIT_KEEP_EMPTY   default empty-token policy for `strkit split` (0/1)
    NO_COLOR            disable colored CLI output when set
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (got {value!r})")


@dataclass
class ToolkitConfig:
    """
    Runtime configuration for strkit.

    Example:
        config = ToolkitConfig.from_env()
        logging.basicConfig(level=config.log_level)
    """

    log_level: str = "WARNING"
    keep_empty: bool = False
    color: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ToolkitConfig:
        """Build a configuration from environment variables."""
        env = os.environ if environ is None else environ
        config = cls()

        if "STRKIT_LOG_LEVEL" in env:
            level = env["STRKIT_LOG_LEVEL"].strip().upper()
            if not isinstance(logging.getLevelName(level), int):
                raise ValueError(f"STRKIT_LOG_LEVEL is not a logging level (got {level!r})")
            config.log_level = level

        if "STRKIT_KEEP_EMPTY" in env:
            config.keep_empty = _parse_bool("STRKIT_KEEP_EMPTY", env["STRKIT_KEEP_EMPTY"])

        if env.get("NO_COLOR") or (environ is None and not sys.stdout.isatty()):
            config.color = False

        return config


_default_config: Optional[ToolkitConfig] = None


def get_config() -> ToolkitConfig:
    """Return the process-wide configuration, reading the environment on first use."""
    global _default_config
    if _default_config is None:
        _default_config = ToolkitConfig.from_env()
    return _default_config
