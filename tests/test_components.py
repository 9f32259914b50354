from __future__ import annotations

import pytest

from core.components import Component, extract, parse_component
from core.errors import InvalidPatternError, UnreachableComponentError
from core.models import Person


def _person(**overrides) -> Person:
    fields = dict(
        name="Alice Pauline",
        phone="94351253",
        email="Alice@Example.com",
        address="123, Jurong West Ave 6",
        tags=("Friends", "CS Dev"),
        departments=(),
    )
    fields.update(overrides)
    return Person(**fields)


def test_single_valued_components_are_lowercased() -> None:
    person = _person()
    assert list(extract(person, Component.NAME)) == ["alice pauline"]
    assert list(extract(person, Component.EMAIL)) == ["alice@example.com"]
    assert list(extract(person, Component.PHONE)) == ["94351253"]
    assert list(extract(person, Component.ADDRESS)) == ["123, jurong west ave 6"]


def test_tags_yield_one_value_per_label() -> None:
    assert list(extract(_person(), Component.TAG)) == ["friends", "cs dev"]


def test_missing_tags_yield_nothing() -> None:
    assert list(extract(_person(tags=()), Component.TAG)) == []


def test_missing_departments_yield_nothing() -> None:
    assert list(extract(_person(), Component.DEPARTMENT)) == []
    person = _person(departments=("Sales", "HR"))
    assert list(extract(person, Component.DEPARTMENT)) == ["sales", "hr"]


def test_every_component_has_an_extractor() -> None:
    person = _person(departments=("Sales",))
    for component in Component:
        assert all(isinstance(value, str) for value in extract(person, component))


def test_unknown_component_is_unreachable() -> None:
    with pytest.raises(UnreachableComponentError):
        list(extract(_person(), "nickname"))


def test_parse_component_ignores_case() -> None:
    assert parse_component("Tag") is Component.TAG
    assert parse_component("  department ") is Component.DEPARTMENT


@pytest.mark.parametrize("name", ["", "   ", None, "nickname"])
def test_parse_component_rejects_unknown(name) -> None:
    with pytest.raises(InvalidPatternError):
        parse_component(name)
