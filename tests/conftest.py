"""Shared fixtures: raw catalog records and isolated settings."""

from __future__ import annotations

from typing import Any

import pytest

from core.config import AppSettings


def raw_product(**overrides: Any) -> dict[str, Any]:
    """A DummyJSON-shaped product record (extra upstream fields included)."""

    record: dict[str, Any] = {
        "id": 1,
        "title": "Essence Mascara Lash Princess",
        "description": "Popular mascara known for its volumizing effects.",
        "price": 100.0,
        "discountPercentage": 20.0,
        "rating": 4.94,
        "stock": 5,
        "brand": "Essence",
        "category": "electronics",
        "thumbnail": "https://cdn.dummyjson.com/products/1/thumbnail.png",
        "images": ["https://cdn.dummyjson.com/products/1/1.png"],
        "tags": ["beauty", "mascara"],
        "sku": "RCH45Q1A",
    }
    record.update(overrides)
    return record


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, catalog_base_url="https://catalog.test")


@pytest.fixture
def electronics_record() -> dict[str, Any]:
    return raw_product()


@pytest.fixture
def groceries_record() -> dict[str, Any]:
    record = raw_product(
        id=2,
        title="Apple",
        price=50.0,
        discountPercentage=0.0,
        category="groceries",
    )
    # DummyJSON omite `brand` en groceries.
    record.pop("brand")
    return record
