"""Filter defaults handed to the core.

settings.py reads them from config.json; the CLI falls back to them when a
filter command leaves out --component or --mode.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FilterConfig:
    """Defaults applied when a filter command omits component or mode."""

    default_component: str
    default_mode: str
    cache_size: int
