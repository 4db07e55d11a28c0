from __future__ import annotations

from typing import Any, Dict, List

import pytest


@pytest.fixture
def city_data() -> List[Dict[str, Any]]:
    return [
        {"id": 7, "name": "Amsterdam", "population": 750000, "country": "Netherlands"},
        {"id": 12, "name": "The Hague", "population": 450000, "country": "Netherlands"},
        {"id": 43, "name": "Rotterdam", "population": 600000, "country": "Netherlands"},
        {"id": 5, "name": "Berlin", "population": 3000000, "country": "Germany"},
        {"id": 42, "name": "Düsseldorf", "population": 550000, "country": "Germany"},
        {"id": 44, "name": "Stuttgard", "population": 600000, "country": "Germany"},
    ]


@pytest.fixture
def czech_cities() -> List[Dict[str, Any]]:
    return [
        {"id": 2, "name": "Ostrava", "population": 750000, "country": "czech republic"},
        {"id": 4, "name": "karvina", "population": 450000, "country": "Czech Republic"},
        {"id": 6, "name": "Brno", "population": 600000, "country": "czech Republic"},
        {"id": 8, "name": "prague", "population": 3000000, "country": "Czech republic"},
    ]


@pytest.fixture
def cities_with_gaps() -> List[Dict[str, Any]]:
    return [
        {"id": 7, "name": "Amsterdam", "population": 750000, "country": "Netherlands"},
        {"id": 12, "name": "The Hague", "population": 450000, "country": "Netherlands"},
        {"id": 43, "name": "Rotterdam", "population": 600000},
        {"id": 5, "name": "Berlin", "population": 3000000, "country": "Germany"},
        {"id": 42, "name": "Düsseldorf", "country": "Germany"},
        {"id": 44, "population": 600000, "country": "Germany"},
    ]
