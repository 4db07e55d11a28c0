from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, List, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import SortSpecError

if TYPE_CHECKING:
    from .builder import ThenBy
    from .registry import ComparatorRegistry


class Direction(int, Enum):
    ASC = 1
    DESC = -1

    @classmethod
    def parse(cls, value: Any) -> "Direction":
        """Map ``-1``/``"desc"`` to DESC; anything else is ascending."""
        if isinstance(value, str):
            return cls.DESC if value == "desc" else cls.ASC
        if value == -1:
            return cls.DESC
        return cls.ASC


class SortOptions(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    direction: Direction = Field(Direction.ASC, description="Ascending (1, 'asc') or descending (-1, 'desc')")
    ignore_case: bool = Field(
        False,
        alias="ignoreCase",
        description="Lowercase text values before comparing (extractor and key criteria only)",
    )
    cmp: Callable[[Any, Any], Any] | str | None = Field(
        default=None,
        description="Value comparator, or the name of one in a ComparatorRegistry",
    )

    @field_validator("direction", mode="before")
    @classmethod
    def _normalize_direction(cls, v: Any) -> Direction:
        return Direction.parse(v)

    @property
    def descending(self) -> bool:
        return self.direction is Direction.DESC

    @classmethod
    def coerce(cls, options: Any = None, **overrides: Any) -> "SortOptions":
        """Build options from None, a direction shorthand, a mapping or an instance.

        Keyword overrides (``direction``, ``ignore_case``/``ignoreCase``, ``cmp``)
        are applied on top.
        """
        if options is None:
            base = cls()
        elif isinstance(options, SortOptions):
            base = options
        elif isinstance(options, Mapping):
            base = cls.model_validate(dict(options))
        else:
            base = cls(direction=options)
        if not overrides:
            return base
        data = {name: getattr(base, name) for name in cls.model_fields}
        update = cls.model_validate(overrides)
        data.update({name: getattr(update, name) for name in update.model_fields_set})
        return cls.model_validate(data)


class SortKeySpec(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    key: str = Field(..., description="Property name read from each record")
    direction: Direction = Field(Direction.ASC)
    ignore_case: bool = Field(False, alias="ignoreCase")
    cmp: str | None = Field(default=None, description="Registered comparator name")

    @field_validator("key")
    @classmethod
    def _validate_key(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("key must be a non-empty property name")
        return v

    @field_validator("direction", mode="before")
    @classmethod
    def _normalize_direction(cls, v: Any) -> Direction:
        return Direction.parse(v)

    def options(self) -> SortOptions:
        return SortOptions(direction=self.direction, ignore_case=self.ignore_case, cmp=self.cmp)


class SortSpec(BaseModel):
    keys: List[SortKeySpec]

    @field_validator("keys", mode="before")
    @classmethod
    def _expand_shorthand(cls, v: Any) -> Any:
        # A bare string entry is shorthand for {"key": <string>}
        if isinstance(v, list):
            return [{"key": item} if isinstance(item, str) else item for item in v]
        return v

    @field_validator("keys")
    @classmethod
    def _validate_keys_non_empty(cls, v: List[SortKeySpec]) -> List[SortKeySpec]:
        if not v:
            raise ValueError("SortSpec must contain at least one key")
        return v

    @classmethod
    def from_mapping(cls, raw: Any) -> "SortSpec":
        if not isinstance(raw, Mapping) or "keys" not in raw:
            raise SortSpecError("Sort spec must be a mapping with a 'keys' list")
        try:
            return cls.model_validate(dict(raw))
        except ValidationError as exc:
            raise SortSpecError(str(exc)) from exc

    @classmethod
    def from_yaml(cls, yaml_text: str) -> "SortSpec":
        try:
            raw = yaml.safe_load(yaml_text)
        except yaml.YAMLError as exc:
            raise SortSpecError(f"Invalid sort spec YAML: {exc}") from exc
        return cls.from_mapping(raw)

    @classmethod
    def from_yaml_file(cls, path: str) -> "SortSpec":
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_yaml(f.read())

    def build(self, registry: "ComparatorRegistry | None" = None) -> "ThenBy":
        from .builder import first_by

        first, *rest = self.keys
        comparator = first_by(first.key, first.options(), registry=registry)
        for spec in rest:
            comparator = comparator.then_by(spec.key, spec.options())
        return comparator
