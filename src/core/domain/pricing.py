"""Estructuras de precio: tabla de impuestos y desglose calculado.

La tabla de impuestos es configuración inyectable (categoría -> tasa) con
una tasa por defecto; no hay error de "categoría desconocida".
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

STANDARD_TAX_RATE = 0.0475
GROCERY_TAX_RATE = 0.03
GROCERY_CATEGORY = "groceries"


class TaxTable(BaseModel):
    """Tasas de impuesto por categoría (decimales en [0, 1])."""

    model_config = ConfigDict(frozen=True)

    default_rate: float = Field(
        default=STANDARD_TAX_RATE,
        ge=0.0,
        le=1.0,
        description="Tasa aplicada a cualquier categoría sin entrada propia.",
    )
    category_rates: dict[str, float] = Field(
        default_factory=lambda: {GROCERY_CATEGORY: GROCERY_TAX_RATE},
        description="Tasas reducidas/específicas por categoría (case-insensitive).",
    )

    @field_validator("category_rates")
    @classmethod
    def _normalize_rates(cls, value: dict[str, float]) -> dict[str, float]:
        out: dict[str, float] = {}
        for category, rate in value.items():
            if not 0.0 <= rate <= 1.0:
                raise ValueError(f"tax rate for '{category}' must be between 0 and 1")
            out[category.strip().lower()] = rate
        return out

    def rate_for(self, category: str) -> float:
        return self.category_rates.get(category.strip().lower(), self.default_rate)


DEFAULT_TAX_TABLE = TaxTable()


class PriceBreakdown(BaseModel):
    """Desglose derivado (descuento -> precio final -> impuesto -> total).

    Sin redondeo: los dos decimales se aplican solo al presentar.
    """

    model_config = ConfigDict(frozen=True)

    price: float
    discount_percentage: float
    discount_amount: float
    final_price: float
    category: str
    tax_rate: float
    tax_amount: float
    total_with_tax: float
