"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to any storage-specific types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Person:
    """A single contact entry as seen by the filtering core."""

    name: str
    phone: str
    email: str
    address: str
    tags: Tuple[str, ...] = ()
    departments: Tuple[str, ...] = ()
