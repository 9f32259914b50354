"""Shared contact formatting helpers.

Keeping formatting here prevents drift between the list and filter commands
and keeps output consistent regardless of how it is printed.
"""

from __future__ import annotations

from typing import Iterable, Optional

from rich.table import Table

from core.models import Person
from core.predicates import ComponentPredicate

COLUMNS = ("Name", "Phone", "Email", "Address", "Tags", "Departments")


def _join_labels(labels: Iterable[str]) -> str:
    return ", ".join(labels)


def format_contact_line(person: Person) -> str:
    """Return a single-line, plain-text rendering of a contact."""

    parts = [person.name, person.phone, person.email, person.address]
    if person.tags:
        parts.append(f"tags: {_join_labels(person.tags)}")
    if person.departments:
        parts.append(f"departments: {_join_labels(person.departments)}")
    return " | ".join(part for part in parts if part)


def build_contacts_table(
    contacts: Iterable[Person],
    predicate: Optional[ComponentPredicate] = None,
) -> Table:
    """Build a rich table of contacts, titled with the active filter if any."""

    rows = list(contacts)
    if predicate is None:
        title = f"Contacts ({len(rows)})"
    else:
        title = f"Contacts matching {predicate.describe()} ({len(rows)})"

    table = Table(title=title)
    for column in COLUMNS:
        table.add_column(column)
    for person in rows:
        table.add_row(
            person.name,
            person.phone,
            person.email,
            person.address,
            _join_labels(person.tags),
            _join_labels(person.departments),
        )
    return table
