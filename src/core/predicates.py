"""Component predicates and match modes (core domain)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import re
from typing import Callable, Dict, Optional, Union

from core.components import Component, extract, parse_component
from core.errors import InvalidPatternError
from core.models import Person


class MatchMode(Enum):
    """How a component value is compared against the pattern.

    Values are the keywords used in filter commands.
    """

    EQUALS = "is"
    NOT_EQUALS = "isnt"
    CONTAINS = "has"
    NOT_CONTAINS = "hasnt"
    STARTS_WITH = "startswith"
    ENDS_WITH = "endswith"
    ANY_WORD = "word"
    NO_WORD = "noword"


WORD_MODES = frozenset({MatchMode.ANY_WORD, MatchMode.NO_WORD})


def parse_mode(keyword: str) -> MatchMode:
    """Look up a match mode by command keyword or member name."""

    if keyword is None or not str(keyword).strip():
        raise InvalidPatternError("match mode is required")
    key = str(keyword).strip().lower()
    for mode in MatchMode:
        if key in (mode.value, mode.name.lower()):
            return mode
    choices = ", ".join(mode.value for mode in MatchMode)
    raise InvalidPatternError(f"unknown match mode {keyword!r} (expected one of: {choices})")


def make_words_pattern(pattern: str) -> re.Pattern:
    """Compile a matcher for any space-separated token of pattern as a whole word.

    Tokens are escaped, so regex syntax in user input is matched literally.
    Empty tokens from leading, trailing or repeated spaces are skipped; an
    empty alternative would match at every word boundary.
    """

    tokens = [token for token in pattern.split(" ") if token]
    alternatives = "|".join(re.escape(token) for token in tokens)
    return re.compile(rf"\b({alternatives})\b")


_ValueRule = Callable[[str, "ComponentPredicate"], bool]

_RULES: Dict[MatchMode, _ValueRule] = {
    MatchMode.EQUALS: lambda value, pred: value == pred.pattern,
    MatchMode.NOT_EQUALS: lambda value, pred: value != pred.pattern,
    MatchMode.CONTAINS: lambda value, pred: pred.pattern in value,
    MatchMode.NOT_CONTAINS: lambda value, pred: pred.pattern not in value,
    MatchMode.STARTS_WITH: lambda value, pred: value.startswith(pred.pattern),
    MatchMode.ENDS_WITH: lambda value, pred: value.endswith(pred.pattern),
    MatchMode.ANY_WORD: lambda value, pred: pred.words.search(value) is not None,
    MatchMode.NO_WORD: lambda value, pred: pred.words.search(value) is None,
}


@dataclass(frozen=True)
class ComponentPredicate:
    """Case-insensitive test of one Person component against a pattern.

    The pattern is lowercased on construction and the original casing is
    dropped, so two predicates compare equal whenever their mode, component
    and lowercased pattern agree. Instances are hashable and safe to share.

    A predicate holds if at least one extracted value satisfies the mode.
    This applies to the negated modes too: ``isnt``, ``hasnt`` and
    ``noword`` hold as soon as one tag or department fails to match, even
    if another one matches.
    """

    pattern: str
    component: Component
    mode: MatchMode
    words: Optional[re.Pattern] = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.pattern is None or self.component is None or self.mode is None:
            raise InvalidPatternError("pattern, component and mode are required")
        if not isinstance(self.pattern, str):
            raise InvalidPatternError(f"pattern must be text, got {type(self.pattern).__name__}")
        if not isinstance(self.component, Component):
            raise InvalidPatternError(f"invalid component: {self.component!r}")
        if not isinstance(self.mode, MatchMode):
            raise InvalidPatternError(f"invalid match mode: {self.mode!r}")
        if not self.pattern.strip():
            raise InvalidPatternError("pattern must not be empty")

        normalized = self.pattern.lower()
        object.__setattr__(self, "pattern", normalized)
        if self.mode in WORD_MODES:
            object.__setattr__(self, "words", make_words_pattern(normalized))

    def test(self, person: Person) -> bool:
        rule = _RULES[self.mode]
        return any(rule(value, self) for value in extract(person, self.component))

    def __call__(self, person: Person) -> bool:
        return self.test(person)

    def describe(self) -> str:
        return f'{self.component.value} {self.mode.value} "{self.pattern}"'


def build_predicate(
    pattern: str,
    component: Union[Component, str],
    mode: Union[MatchMode, str],
) -> ComponentPredicate:
    """Build a predicate from enum members or their textual names.

    Textual names come from config files and the command line; both are
    looked up case-insensitively.
    """

    if isinstance(component, str):
        component = parse_component(component)
    if isinstance(mode, str):
        mode = parse_mode(mode)
    return ComponentPredicate(pattern=pattern, component=component, mode=mode)
