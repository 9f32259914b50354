"""Error kinds raised by the core filtering logic."""

from __future__ import annotations


class InvalidPatternError(ValueError):
    """Raised when a filter cannot be built from the given input."""


class UnreachableComponentError(RuntimeError):
    """Raised when extraction meets a component outside the known set.

    Construction validates components, so this signals a programming error
    upstream rather than bad user input.
    """
