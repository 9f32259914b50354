"""Contact components and value extraction (core domain)."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Iterable, Iterator

from core.errors import InvalidPatternError, UnreachableComponentError
from core.models import Person


class Component(Enum):
    """Fields of a Person that can be matched like strings."""

    NAME = "name"
    ADDRESS = "address"
    EMAIL = "email"
    TAG = "tag"
    PHONE = "phone"
    DEPARTMENT = "department"


_EXTRACTORS: Dict[Component, Callable[[Person], Iterable[str]]] = {
    Component.NAME: lambda person: (person.name,),
    Component.EMAIL: lambda person: (person.email,),
    Component.PHONE: lambda person: (person.phone,),
    Component.ADDRESS: lambda person: (person.address,),
    Component.TAG: lambda person: person.tags,
    Component.DEPARTMENT: lambda person: person.departments,
}


def extract(person: Person, component: Component) -> Iterator[str]:
    """Yield the lowercased values of a component.

    Single-valued components yield exactly one value, tags and departments
    yield one value per label (possibly none).
    """

    extractor = _EXTRACTORS.get(component)
    if extractor is None:
        raise UnreachableComponentError(f"Unexpected component: {component!r}")
    return (value.lower() for value in extractor(person))


def parse_component(name: str) -> Component:
    """Look up a component by name, ignoring case and surrounding spaces."""

    if name is None or not str(name).strip():
        raise InvalidPatternError("component is required")
    key = str(name).strip().lower()
    for component in Component:
        if component.value == key:
            return component
    choices = ", ".join(component.value for component in Component)
    raise InvalidPatternError(f"unknown component {name!r} (expected one of: {choices})")
