from __future__ import annotations

import pytest
from pydantic import ValidationError

from thenby import Direction, SortOptions, SortSpec, SortSpecError


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, Direction.ASC),
        (1, Direction.ASC),
        ("asc", Direction.ASC),
        (-1, Direction.DESC),
        ("desc", Direction.DESC),
        (Direction.DESC, Direction.DESC),
        ("DESC", Direction.ASC),
        ("-1", Direction.ASC),
        (0, Direction.ASC),
    ],
)
def test_direction_parse(value, expected):
    assert Direction.parse(value) is expected


def test_options_defaults():
    opts = SortOptions()
    assert opts.direction is Direction.ASC
    assert opts.ignore_case is False
    assert opts.cmp is None
    assert not opts.descending


def test_options_coerce_shorthand_and_mappings():
    assert SortOptions.coerce().direction is Direction.ASC
    assert SortOptions.coerce("desc").descending
    assert SortOptions.coerce(-1).descending
    assert SortOptions.coerce({"ignoreCase": True}).ignore_case
    assert SortOptions.coerce({"ignore_case": True, "direction": "desc"}).descending


def test_options_coerce_overrides_merge():
    opts = SortOptions.coerce({"direction": -1, "cmp": "natural"}, ignore_case=True)
    assert opts.descending
    assert opts.ignore_case
    assert opts.cmp == "natural"

    opts = SortOptions.coerce("desc", direction="asc")
    assert not opts.descending


def test_options_are_frozen():
    opts = SortOptions()
    with pytest.raises(ValidationError):
        opts.ignore_case = True


def test_options_reject_bad_cmp():
    with pytest.raises(ValidationError):
        SortOptions(cmp=42)


def test_sort_spec_from_yaml(city_data):
    spec = SortSpec.from_yaml(
        """
keys:
  - country
  - key: population
    direction: desc
"""
    )
    assert [k.key for k in spec.keys] == ["country", "population"]
    assert spec.keys[1].direction is Direction.DESC
    result = spec.build().sort(city_data)
    assert result[0]["name"] == "Berlin"
    assert result[5]["name"] == "The Hague"


def test_sort_spec_with_named_cmp_and_ignore_case(czech_cities):
    spec = SortSpec.from_mapping(
        {"keys": [{"key": "name", "ignoreCase": True}, {"key": "id", "cmp": "numeric", "direction": -1}]}
    )
    assert spec.keys[0].ignore_case
    assert [r["name"] for r in spec.build().sort(czech_cities)] == ["Brno", "karvina", "Ostrava", "prague"]


def test_sort_spec_from_yaml_file(tmp_path, city_data):
    path = tmp_path / "sort.yaml"
    path.write_text("keys:\n  - key: id\n    direction: -1\n", encoding="utf-8")
    spec = SortSpec.from_yaml_file(str(path))
    assert [r["id"] for r in spec.build().sort(city_data)] == [44, 43, 42, 12, 7, 5]


@pytest.mark.parametrize(
    "text",
    [
        "keys: []\n",
        "- country\n",
        "sort: [country]\n",
        "keys:\n  - key: ''\n",
        "keys: [country\n",
    ],
)
def test_sort_spec_errors(text):
    with pytest.raises(SortSpecError):
        SortSpec.from_yaml(text)


def test_sort_spec_unknown_cmp_fails_on_build():
    spec = SortSpec.from_mapping({"keys": [{"key": "a", "cmp": "nope"}]})
    with pytest.raises(KeyError):
        spec.build()
