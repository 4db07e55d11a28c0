"""Sort criteria and their resolution into comparison steps.

A criterion is one of:

* a binary comparator ``(a, b) -> number``,
* a unary extractor ``(record) -> value``,
* a property name read from each record.

Plain callables are told apart by how many positional arguments they take,
which mirrors how callers usually write them (``lambda a, b: ...`` versus
``lambda r: ...``). That guess can be wrong for callables with unusual
signatures; wrap them in :class:`Compare`, :class:`Extract` or :class:`Key`
to state the kind explicitly.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Union

from .comparators import default_compare, identity, ignore_case
from .exceptions import InvalidCriterionError
from .models import SortOptions
from .registry import ComparatorRegistry, default_registry

logger = logging.getLogger(__name__)

Step = Callable[[Any, Any], Any]

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


@dataclass(frozen=True)
class Compare:
    """A full pairwise comparator for one sort dimension."""

    func: Callable[[Any, Any], Any]

    def __post_init__(self) -> None:
        if not callable(self.func):
            raise InvalidCriterionError(f"Compare expects a callable, got {self.func!r}")


@dataclass(frozen=True)
class Extract:
    """A function selecting the value to sort on from a record."""

    func: Callable[[Any], Any]

    def __post_init__(self) -> None:
        if not callable(self.func):
            raise InvalidCriterionError(f"Extract expects a callable, got {self.func!r}")


@dataclass(frozen=True)
class Key:
    """A property name (or index, for sequence records) to sort on."""

    name: Any

    def __post_init__(self) -> None:
        if self.name is None:
            raise InvalidCriterionError("Key name cannot be None")

    def read(self, record: Any) -> Any:
        return read_key(record, self.name)


Criterion = Union[Compare, Extract, Key, Callable[..., Any], str]


def read_key(record: Any, name: Any) -> Any:
    """Read ``name`` from ``record``; absent or ``None`` values become ``""``.

    Subscript lookup comes first (dicts, rows, sequences), then attributes
    for plain objects.
    """
    try:
        value = record.get(name) if isinstance(record, Mapping) else record[name]
    except (LookupError, TypeError):
        value = None
        if isinstance(name, str) and not isinstance(record, Mapping):
            value = getattr(record, name, None)
    return "" if value is None else value


def takes_single_argument(func: Callable[..., Any]) -> bool:
    """Return True if ``func`` looks like a one-argument extractor.

    Callables whose signature cannot be inspected (some builtins) are assumed
    to be extractors, as are callables whose positional parameters all have
    defaults (``float``, ``int``).
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return True
    positional = [p for p in signature.parameters.values() if p.kind in _POSITIONAL]
    required = [p for p in positional if p.default is inspect.Parameter.empty]
    if len(required) >= 2:
        return False
    if len(required) == 1:
        return True
    return bool(positional)


def classify(criterion: Any) -> Union[Compare, Extract, Key]:
    if criterion is None:
        raise InvalidCriterionError("A sort criterion is required, got None")
    if isinstance(criterion, (Compare, Extract, Key)):
        return criterion
    if callable(criterion):
        if takes_single_argument(criterion):
            return Extract(criterion)
        return Compare(criterion)
    if not isinstance(criterion, (str, int)):
        logger.warning("Treating %r as a property name; pass a str, a callable or a Key", criterion)
    return Key(criterion)


def _resolve_cmp(cmp: Any, registry: ComparatorRegistry) -> Step:
    if cmp is None:
        return default_compare
    if isinstance(cmp, str):
        return registry.get(cmp)
    return cmp


def resolve(criterion: Any, options: SortOptions, registry: ComparatorRegistry | None = None) -> Step:
    """Turn a criterion plus options into a single ``(a, b) -> number`` step."""
    registry = registry or default_registry
    kind = classify(criterion)
    kind_name = type(kind).__name__

    if isinstance(kind, Key):
        kind = Extract(kind.read)

    if isinstance(kind, Extract):
        extractor = kind.func
        preprocess = ignore_case if options.ignore_case else identity
        cmp = _resolve_cmp(options.cmp, registry)

        def step(a: Any, b: Any) -> Any:
            return cmp(preprocess(extractor(a)), preprocess(extractor(b)))
    else:
        step = kind.func

    logger.debug(
        "Resolved criterion %r as %s (direction=%s, ignore_case=%s)",
        criterion,
        kind_name,
        options.direction.name,
        options.ignore_case,
    )

    if options.descending:
        ascending = step

        def step(a: Any, b: Any) -> Any:
            return -ascending(a, b)

    return step
