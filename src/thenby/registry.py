from __future__ import annotations

from typing import Any, Callable

ValueComparator = Callable[[Any, Any], float]


class ComparatorRegistry:
    def __init__(self) -> None:
        self._name_to_comparator: dict[str, ValueComparator] = {}
        self._name_to_description: dict[str, str] = {}

    def register(self, name: str, func: ValueComparator, description: str | None = None) -> None:
        normalized = name.strip().lower()
        if not normalized:
            raise ValueError("Comparator name cannot be empty")
        if not callable(func):
            raise TypeError(f"Comparator '{name}' must be callable")
        self._name_to_comparator[normalized] = func
        if description:
            self._name_to_description[normalized] = description

    def get(self, name: str) -> ValueComparator:
        normalized = name.strip().lower()
        try:
            return self._name_to_comparator[normalized]
        except KeyError as exc:
            available = ", ".join(sorted(self._name_to_comparator))
            raise KeyError(f"Comparator '{name}' not found. Available: {available}") from exc

    def describe(self, name: str) -> str | None:
        return self._name_to_description.get(name.strip().lower())

    def names(self) -> list[str]:
        return sorted(self._name_to_comparator.keys())


# Default registry with built-in comparators populated in comparators.py
default_registry = ComparatorRegistry()
