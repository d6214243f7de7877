"""Exportación JSON de productos con su desglose de precio.

Por qué JSON:
- Interoperabilidad con hojas de cálculo y otros pipelines.
- Es una exportación explícita del usuario, no un almacén de precios.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from core.domain.models import PricedProduct


def export_priced_json(*, products: Iterable[PricedProduct], output_path: Path) -> Path:
    """Exporta la lista de `PricedProduct` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = [item.model_dump(mode="json") for item in products]
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
