"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta en el borde: un registro crudo del catálogo se
  convierte en `CatalogRecord` una sola vez y no se vuelve a mutar.
- Serialización estable para exportar resultados (JSON).

Nota:
- Estos modelos describen *qué* es un producto, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic.config import ConfigDict

from core.domain.errors import RemoteServiceError
from core.domain.pricing import DEFAULT_TAX_TABLE, PriceBreakdown, TaxTable
from core.services import pricing as pricing_engine


class CatalogRecord(BaseModel):
    """Un producto del catálogo remoto.

    Los campos llegan en camelCase (`discountPercentage`); en Python se
    exponen en snake_case. Campos extra del upstream se ignoran.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: int = Field(
        ...,
        gt=0,
        description="Identificador del producto en el catálogo.",
    )
    title: str = Field(
        ...,
        description="Nombre comercial.",
    )
    description: str = Field(
        default="",
        description="Texto libre del producto.",
    )
    price: float = Field(
        ...,
        ge=0.0,
        description="Precio base antes de descuento e impuestos.",
    )
    discount_percentage: float = Field(
        default=0.0,
        ge=0.0,
        le=100.0,
        alias="discountPercentage",
        description="Descuento en porcentaje (0..100).",
    )
    rating: float = Field(
        default=0.0,
        description="Valoración media (solo informativa).",
    )
    stock: int = Field(
        default=0,
        ge=0,
        description="Unidades disponibles.",
    )
    brand: str | None = Field(
        default=None,
        description="Marca (el catálogo la omite en algunas categorías).",
    )
    category: str = Field(
        ...,
        description="Categoría libre; determina la tasa de impuesto.",
    )
    thumbnail: str = Field(
        default="",
        description="URL de la miniatura.",
    )
    images: tuple[str, ...] = Field(
        default=(),
        description="URLs de imágenes, en el orden del catálogo.",
    )

    @classmethod
    def from_raw(cls, raw: dict[str, Any]) -> "CatalogRecord":
        """Valida un registro crudo.

        Un registro malformado es culpa del upstream: se reporta como
        `RemoteServiceError` sin código de estado.
        """

        try:
            return cls.model_validate(raw)
        except ValidationError as exc:
            ident = raw.get("id") if isinstance(raw, dict) else None
            fields = ", ".join(
                ".".join(str(p) for p in err["loc"]) or "record" for err in exc.errors()
            )
            raise RemoteServiceError(
                f"Catalog returned a malformed product record (id={ident}): {fields}"
            ) from exc

    def price_after_discount(self) -> float:
        return pricing_engine.final_price(self.price, self.discount_percentage)

    def price_breakdown(self, tax_table: TaxTable | None = None) -> PriceBreakdown:
        return pricing_engine.price_breakdown(
            self.price,
            self.discount_percentage,
            self.category,
            tax_table or DEFAULT_TAX_TABLE,
        )


class PricedProduct(BaseModel):
    """Producto + desglose de precio, listo para render o exportación."""

    model_config = ConfigDict(frozen=True)

    product: CatalogRecord
    pricing: PriceBreakdown
