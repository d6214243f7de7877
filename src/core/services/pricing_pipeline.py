"""Orquestación: consulta -> registros -> precios.

Este módulo concentra el flujo que la CLI dispara. La CLI solo construye
un `CatalogQuery`, llama a `run_pricing` y se ocupa de pintar el
resultado; los efectos (consola, exportación) quedan fuera del Core.

Sin recuperación parcial: si falla la consulta o un solo registro, falla
todo el lote.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from core.domain.errors import InvalidInput
from core.domain.models import CatalogRecord, PricedProduct
from core.domain.pricing import DEFAULT_TAX_TABLE, TaxTable
from core.interfaces.catalog import CatalogSource, RawRecord

logger = logging.getLogger(__name__)


class QueryKind(str, Enum):
    """Modo de consulta contra el catálogo."""

    ALL = "all"
    BY_ID = "id"
    CATEGORY = "category"
    SEARCH = "search"


@dataclass
class CatalogQuery:
    """Parámetros de una consulta al catálogo."""

    kind: QueryKind = QueryKind.ALL
    value: str | int | None = None
    limit: int = 10


@dataclass
class PipelineResult:
    """Salida de una ejecución del pipeline."""

    query: CatalogQuery
    products: list[PricedProduct] = field(default_factory=list)

    @property
    def total_with_tax(self) -> float:
        return sum(p.pricing.total_with_tax for p in self.products)


async def fetch_raw(source: CatalogSource, query: CatalogQuery) -> list[RawRecord]:
    """Una sola petición (awaited) según el tipo de consulta."""

    if query.kind is not QueryKind.ALL and query.value is None:
        raise InvalidInput(f"A value is required for {query.kind.value} queries")

    if query.kind is QueryKind.BY_ID:
        return [await source.fetch_by_id(int(query.value))]
    if query.kind is QueryKind.CATEGORY:
        return await source.fetch_by_category(str(query.value), query.limit)
    if query.kind is QueryKind.SEARCH:
        return await source.search(str(query.value), query.limit)
    return await source.fetch_all(query.limit)


def price_records(
    raw_records: list[RawRecord],
    tax_table: TaxTable = DEFAULT_TAX_TABLE,
) -> list[PricedProduct]:
    """Construye `CatalogRecord` y su desglose, en el orden recibido."""

    priced: list[PricedProduct] = []
    for raw in raw_records:
        record = CatalogRecord.from_raw(raw)
        priced.append(PricedProduct(product=record, pricing=record.price_breakdown(tax_table)))
    return priced


async def run_pricing(
    query: CatalogQuery,
    *,
    source: CatalogSource,
    tax_table: TaxTable = DEFAULT_TAX_TABLE,
) -> PipelineResult:
    raw_records = await fetch_raw(source, query)
    logger.info("Fetched %d raw record(s) for %s query", len(raw_records), query.kind.value)
    return PipelineResult(query=query, products=price_records(raw_records, tax_table))
