"""Ports (interfaces) used by the core filtering service.

Ports define the minimal contracts for contact sources so that the core can
be reused with different backends.
"""

from __future__ import annotations

from typing import List, Protocol

from core.models import Person


class ContactSourcePort(Protocol):
    """Contact loading required by the filtering service."""

    def load_contacts(self) -> List[Person]:
        ...
