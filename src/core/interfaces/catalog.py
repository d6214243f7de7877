"""Contrato de fuentes de catálogo.

Por qué Protocol:
- El pipeline no conoce httpx; cualquier objeto con estas cuatro
  corrutinas sirve (cliente real, stub en tests).
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

RawRecord = dict[str, Any]


@runtime_checkable
class CatalogSource(Protocol):
    """Lectura de registros crudos del catálogo.

    Reglas de diseño:
    - Todas las operaciones son asíncronas (I/O HTTP) y se esperan una a una.
    - Devuelven registros crudos; la validación es del dominio.
    - Los fallos se reportan con la taxonomía de `core.domain.errors`.
    """

    async def fetch_all(self, limit: int) -> list[RawRecord]:
        ...

    async def fetch_by_id(self, product_id: int) -> RawRecord:
        ...

    async def fetch_by_category(self, category: str, limit: int) -> list[RawRecord]:
        ...

    async def search(self, query: str, limit: int) -> list[RawRecord]:
        ...
