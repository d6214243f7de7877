import pytest
from pydantic import ValidationError

from core.domain.errors import RemoteServiceError
from core.domain.models import CatalogRecord
from core.domain.pricing import TaxTable

from conftest import raw_product


def test_from_raw_maps_camel_case_and_ignores_extra_fields(electronics_record):
    record = CatalogRecord.from_raw(electronics_record)

    assert record.id == 1
    assert record.discount_percentage == 20.0
    assert record.brand == "Essence"
    assert record.images == ("https://cdn.dummyjson.com/products/1/1.png",)
    assert not hasattr(record, "tags")


def test_missing_brand_is_allowed(groceries_record):
    record = CatalogRecord.from_raw(groceries_record)

    assert record.brand is None
    assert record.category == "groceries"


def test_record_is_immutable(electronics_record):
    record = CatalogRecord.from_raw(electronics_record)

    with pytest.raises(ValidationError):
        record.price = 1.0  # type: ignore[misc]


def test_price_after_discount(electronics_record):
    record = CatalogRecord.from_raw(electronics_record)

    assert record.price_after_discount() == pytest.approx(80.0)


def test_price_breakdown_uses_given_tax_table(groceries_record):
    record = CatalogRecord.from_raw(groceries_record)

    assert record.price_breakdown().total_with_tax == pytest.approx(51.50)
    table = TaxTable(default_rate=0.1, category_rates={"groceries": 0.1})
    assert record.price_breakdown(table).total_with_tax == pytest.approx(55.0)


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"price": -1}, "price"),
        ({"discountPercentage": 120}, "discountPercentage"),
        ({"id": 0}, "id"),
        ({"stock": -3}, "stock"),
        ({"price": "free"}, "price"),
    ],
)
def test_malformed_record_is_reported_as_remote_error(overrides, field):
    raw = raw_product(id=7, **overrides) if "id" not in overrides else raw_product(**overrides)

    with pytest.raises(RemoteServiceError) as excinfo:
        CatalogRecord.from_raw(raw)

    assert excinfo.value.status_code is None
    assert field in excinfo.value.message
    assert "malformed product record" in excinfo.value.message


def test_missing_required_field_is_reported():
    raw = raw_product(id=9)
    raw.pop("title")

    with pytest.raises(RemoteServiceError, match=r"id=9.*title"):
        CatalogRecord.from_raw(raw)
