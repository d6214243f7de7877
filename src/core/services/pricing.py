"""Motor de precios: funciones puras de descuento e impuestos.

Descuento e impuesto están desacoplados; el llamador decide el orden. La
orquestación aplica el impuesto sobre el precio ya descontado.

Convenciones:
- Porcentajes en [0, 100] (se dividen entre 100 internamente).
- Tasas en [0, 1].
- Floats sin redondeo interno.
"""

from __future__ import annotations

import math

from core.domain.errors import InvalidInput
from core.domain.pricing import DEFAULT_TAX_TABLE, PriceBreakdown, TaxTable


def _check_price(price: float) -> None:
    if math.isnan(price) or price < 0:
        raise InvalidInput("Price cannot be negative")


def discount_amount(price: float, discount_percentage: float) -> float:
    _check_price(price)
    # NaN falla la comparación encadenada.
    if not 0 <= discount_percentage <= 100:
        raise InvalidInput("Discount percentage must be between 0 and 100")
    return price * (discount_percentage / 100)


def final_price(price: float, discount_percentage: float) -> float:
    return price - discount_amount(price, discount_percentage)


def tax_rate(category: str, table: TaxTable = DEFAULT_TAX_TABLE) -> float:
    """Tasa para `category`; categorías no listadas reciben la tasa estándar."""

    return table.rate_for(category)


def tax_amount(price: float, category: str, table: TaxTable = DEFAULT_TAX_TABLE) -> float:
    _check_price(price)
    return price * tax_rate(category, table)


def price_with_tax(price: float, category: str, table: TaxTable = DEFAULT_TAX_TABLE) -> float:
    """Precio + impuesto. No aplica descuento: el llamador lo hace antes."""

    return price + tax_amount(price, category, table)


def price_breakdown(
    price: float,
    discount_percentage: float,
    category: str,
    table: TaxTable = DEFAULT_TAX_TABLE,
) -> PriceBreakdown:
    """Compone descuento e impuesto (impuesto sobre el precio descontado)."""

    discount = discount_amount(price, discount_percentage)
    discounted = price - discount
    tax = tax_amount(discounted, category, table)
    return PriceBreakdown(
        price=price,
        discount_percentage=discount_percentage,
        discount_amount=discount,
        final_price=discounted,
        category=category,
        tax_rate=tax_rate(category, table),
        tax_amount=tax,
        total_with_tax=discounted + tax,
    )
