"""Core contact filtering service.

This module is storage-agnostic. It only relies on the contact source port,
enabling other contact backends without changes here.
"""

from __future__ import annotations

from collections import OrderedDict
import logging
from typing import List, Optional

from core.models import Person
from core.ports import ContactSourcePort
from core.predicates import ComponentPredicate

LOGGER = logging.getLogger(__name__)

HISTORY_LIMIT = 20


class ContactFilter:
    """Applies predicates to the contacts of a source and memoizes results."""

    def __init__(self, source: ContactSourcePort, cache_size: int = 32) -> None:
        if cache_size < 0:
            raise ValueError("cache_size must be >= 0")
        self._source = source
        self._cache_size = cache_size
        self._contacts: Optional[List[Person]] = None
        self._cache: "OrderedDict[ComponentPredicate, List[Person]]" = OrderedDict()
        self._history: List[ComponentPredicate] = []

    @property
    def contacts(self) -> List[Person]:
        if self._contacts is None:
            self._contacts = list(self._source.load_contacts())
            LOGGER.info("Loaded %s contacts", len(self._contacts))
        return list(self._contacts)

    @property
    def history(self) -> List[ComponentPredicate]:
        """Recent filters, oldest first, with consecutive repeats collapsed."""

        return list(self._history)

    def apply(self, predicate: ComponentPredicate) -> List[Person]:
        """Return the contacts matching predicate, in source order."""

        self._remember(predicate)

        cached = self._cache.get(predicate)
        if cached is not None:
            # Equal predicates always produce the same result for the same contacts.
            self._cache.move_to_end(predicate)
            LOGGER.debug("Cache hit for %s", predicate.describe())
            return list(cached)

        matches = [person for person in self.contacts if predicate.test(person)]
        LOGGER.info("Filter %s matched %s contact(s)", predicate.describe(), len(matches))

        if self._cache_size:
            self._cache[predicate] = matches
            while len(self._cache) > self._cache_size:
                self._cache.popitem(last=False)
        return list(matches)

    def reload(self) -> None:
        """Drop loaded contacts and cached results; the next apply reloads."""

        self._contacts = None
        self._cache.clear()
        LOGGER.info("Contact cache cleared")

    def _remember(self, predicate: ComponentPredicate) -> None:
        if self._history and self._history[-1] == predicate:
            return
        self._history.append(predicate)
        del self._history[:-HISTORY_LIMIT]
