"""
Exception classes for thenby.

Comparators themselves never raise for odd data; these errors are only
raised while a comparator or sort spec is being built.
"""


class ThenByError(Exception):
    """Base class for errors raised by thenby."""
    pass


class InvalidCriterionError(ThenByError, ValueError):
    """Raised when a sort criterion cannot be turned into a comparison step.

    Examples:
        - ``first_by(None)``
        - a ``Compare``/``Extract`` tag wrapping something that is not callable
    """
    pass


class SortSpecError(ThenByError, ValueError):
    """Raised when a declarative sort spec (YAML or mapping) is malformed."""
    pass
