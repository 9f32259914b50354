"""JSON contact source adapter.

Implements the core ContactSourcePort by reading a JSON address book.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, List, Tuple

from core.models import Person

LOGGER = logging.getLogger(__name__)


def _labels(value: Any) -> Tuple[str, ...]:
    """Normalize a tag/department field to a tuple of labels."""

    if value is None:
        return ()
    if isinstance(value, str):
        return (value,) if value.strip() else ()
    return tuple(str(item) for item in value if str(item).strip())


def person_from_dict(entry: dict) -> Person:
    """Build a Person from one JSON object; only name is required."""

    name = entry.get("name")
    if not name:
        raise ValueError("name is required")
    return Person(
        name=str(name),
        phone=str(entry.get("phone", "")),
        email=str(entry.get("email", "")),
        address=str(entry.get("address", "")),
        tags=_labels(entry.get("tags")),
        # Older address books used the singular key.
        departments=_labels(entry.get("departments", entry.get("department"))),
    )


class JsonContactSource:
    """Thin JSON reader that satisfies the ContactSourcePort contract."""

    def __init__(self, path: str) -> None:
        self._path = path

    def load_contacts(self) -> List[Person]:
        """Read all contacts from the file.

        Accepts either a top-level list or an object with a "contacts" list.
        """

        if not os.path.exists(self._path):
            raise FileNotFoundError(f"Contacts file not found: {self._path}")

        with open(self._path, "r", encoding="utf-8") as handle:
            data = json.load(handle)

        entries = data.get("contacts", []) if isinstance(data, dict) else data
        if not isinstance(entries, list):
            raise ValueError(f"Expected a list of contacts in {self._path}")

        contacts: List[Person] = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise ValueError(f"Contact #{index} must be an object")
            try:
                contacts.append(person_from_dict(entry))
            except ValueError as exc:
                raise ValueError(f"Contact #{index} is invalid: {exc}") from exc

        LOGGER.debug("Read %s contacts from %s", len(contacts), self._path)
        return contacts
