from __future__ import annotations

import json

import pytest

from adapters.json_contacts import JsonContactSource, person_from_dict
from core.models import Person


def _write(tmp_path, payload) -> str:
    path = tmp_path / "contacts.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_load_contacts_from_object(tmp_path) -> None:
    path = _write(
        tmp_path,
        {
            "contacts": [
                {
                    "name": "Alice",
                    "phone": "123",
                    "email": "alice@example.com",
                    "address": "Street 1",
                    "tags": ["dev", "ops"],
                    "departments": ["Engineering"],
                }
            ]
        },
    )
    contacts = JsonContactSource(path).load_contacts()
    assert contacts == [
        Person(
            name="Alice",
            phone="123",
            email="alice@example.com",
            address="Street 1",
            tags=("dev", "ops"),
            departments=("Engineering",),
        )
    ]


def test_load_contacts_from_list_with_defaults(tmp_path) -> None:
    path = _write(tmp_path, [{"name": "Bob", "department": "Sales", "tags": "friends"}])
    (person,) = JsonContactSource(path).load_contacts()
    assert person.phone == ""
    assert person.tags == ("friends",)
    assert person.departments == ("Sales",)


def test_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        JsonContactSource(str(tmp_path / "nope.json")).load_contacts()


def test_invalid_entry_names_its_index(tmp_path) -> None:
    path = _write(tmp_path, [{"name": "Bob"}, {"phone": "1"}])
    with pytest.raises(ValueError, match="#1"):
        JsonContactSource(path).load_contacts()


def test_blank_labels_are_dropped() -> None:
    person = person_from_dict({"name": "Carl", "tags": ["", "dev", " "], "departments": None})
    assert person.tags == ("dev",)
    assert person.departments == ()
