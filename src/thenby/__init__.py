from .builder import ThenBy, first_by, firstBy
from .criteria import Compare, Extract, Key
from .exceptions import InvalidCriterionError, SortSpecError, ThenByError
from .models import Direction, SortKeySpec, SortOptions, SortSpec
from .registry import ComparatorRegistry, default_registry

# Ensure built-in comparators are registered on package import
from . import comparators as _comparators  # noqa: F401

__all__ = [
    "ThenBy",
    "first_by",
    "firstBy",
    "Compare",
    "Extract",
    "Key",
    "Direction",
    "SortOptions",
    "SortKeySpec",
    "SortSpec",
    "ComparatorRegistry",
    "default_registry",
    "ThenByError",
    "InvalidCriterionError",
    "SortSpecError",
]
