from __future__ import annotations

import math
import re
from typing import Any, Tuple

from .registry import ComparatorRegistry, default_registry

_DIGIT_RUNS = re.compile(r"(\d+)")


def _to_string(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _safe_float(value: Any) -> float | None:
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(result) else result


def _safe_len(value: Any) -> int:
    try:
        return len(value)
    except TypeError:
        return len(_to_string(value) or "")


def identity(value: Any) -> Any:
    return value


def ignore_case(value: Any) -> Any:
    """Lowercase text values; everything else passes through unchanged."""
    return value.lower() if isinstance(value, str) else value


# Value comparators return -1, 0 or 1

def default_compare(left: Any, right: Any) -> int:
    """Order two values with ``<`` and ``>``.

    Values that cannot be ordered against each other (for example the empty
    string that stands in for a missing property against a number) are
    compared by their string forms instead, so the comparator never raises
    while a sort is in progress.
    """
    try:
        if left < right:
            return -1
        if left > right:
            return 1
        return 0
    except TypeError:
        ls, rs = str(left), str(right)
        return -1 if ls < rs else 1 if ls > rs else 0


def cmp_casefold(left: Any, right: Any) -> int:
    if isinstance(left, str):
        left = left.casefold()
    if isinstance(right, str):
        right = right.casefold()
    return default_compare(left, right)


def _natural_key(value: Any) -> Tuple[Tuple[int, Any], ...]:
    text = _to_string(value) or ""
    key = []
    for part in _DIGIT_RUNS.split(text):
        if not part:
            continue
        if part.isdigit():
            key.append((0, int(part)))
        else:
            key.append((1, part))
    return tuple(key)


def cmp_natural(left: Any, right: Any) -> int:
    return default_compare(_natural_key(left), _natural_key(right))


def cmp_numeric(left: Any, right: Any) -> int:
    lf = _safe_float(left)
    rf = _safe_float(right)
    # Non-numeric values sort after every number
    if lf is None or rf is None:
        if lf is None and rf is None:
            return 0
        return 1 if lf is None else -1
    return default_compare(lf, rf)


def cmp_length(left: Any, right: Any) -> int:
    return default_compare(_safe_len(left), _safe_len(right))


# Register default comparators

def register_default_comparators(registry: ComparatorRegistry) -> None:
    registry.register("default", default_compare, "Plain < / > ordering, string fallback for mixed types")
    registry.register("casefold", cmp_casefold, "Unicode caseless ordering of text values")
    registry.register("natural", cmp_natural, "Natural ordering: digit runs compare numerically")
    registry.register("numeric", cmp_numeric, "Compare as numbers; non-numeric values sort last")
    registry.register("length", cmp_length, "Compare by len() of the values")


register_default_comparators(default_registry)
