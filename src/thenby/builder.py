from __future__ import annotations

import functools
from typing import Any, Callable, Iterable, List, Tuple

from .criteria import Step, resolve
from .models import SortOptions
from .registry import ComparatorRegistry, default_registry


class ThenBy:
    """A composed comparator built by :func:`first_by`.

    Calling it with two records returns a negative number if the first sorts
    before the second, a positive number if it sorts after, and zero if every
    criterion ties. Each :meth:`then_by` returns a new comparator; the
    receiver is left untouched and can be extended in other directions.
    """

    __slots__ = ("_previous", "_steps", "_registry")

    def __init__(
        self,
        step: Step,
        previous: ThenBy | None = None,
        *,
        registry: ComparatorRegistry | None = None,
    ) -> None:
        self._previous = previous
        self._steps: Tuple[Step, ...] = (previous._steps if previous is not None else ()) + (step,)
        self._registry = registry or default_registry

    def __call__(self, a: Any, b: Any) -> Any:
        result = 0
        for step in self._steps:
            result = step(a, b)
            # Only a tie falls through to the next criterion
            if result:
                return result
        return result

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        return f"<ThenBy criteria={len(self._steps)}>"

    @property
    def previous(self) -> ThenBy | None:
        return self._previous

    def then_by(
        self,
        criterion: Any,
        options: Any = None,
        *,
        registry: ComparatorRegistry | None = None,
        **overrides: Any,
    ) -> ThenBy:
        """Return a comparator that breaks this one's ties with ``criterion``."""
        registry = registry or self._registry
        step = resolve(criterion, SortOptions.coerce(options, **overrides), registry)
        return ThenBy(step, self, registry=registry)

    thenBy = then_by

    @property
    def key(self) -> Callable[[Any], Any]:
        """Key function for ``sorted()``/``list.sort()``."""
        return functools.cmp_to_key(self)

    def sort(self, records: Iterable[Any], *, reverse: bool = False) -> List[Any]:
        return sorted(records, key=self.key, reverse=reverse)


def first_by(
    criterion: Any,
    options: Any = None,
    *,
    registry: ComparatorRegistry | None = None,
    **overrides: Any,
) -> ThenBy:
    """Start a comparator chain with a single criterion.

    ``criterion`` is a two-argument comparator, a one-argument extractor, a
    property name, or one of the explicit ``Compare``/``Extract``/``Key``
    wrappers. ``options`` is a direction shorthand (``1``, ``-1``, ``"asc"``,
    ``"desc"``), a mapping, or a :class:`SortOptions`; keyword overrides such
    as ``ignore_case=True`` are merged on top.

    >>> people = [{"name": "bob", "age": 30}, {"name": "Al", "age": 30}]
    >>> by_age = first_by("age", "desc").then_by("name", ignore_case=True)
    >>> [p["name"] for p in sorted(people, key=by_age.key)]
    ['Al', 'bob']
    """
    step = resolve(criterion, SortOptions.coerce(options, **overrides), registry)
    return ThenBy(step, registry=registry)


firstBy = first_by
