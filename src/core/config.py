"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP) y servicios (precios) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.pricing import GROCERY_CATEGORY, GROCERY_TAX_RATE, STANDARD_TAX_RATE, TaxTable

DEFAULT_CATALOG_BASE_URL = "https://dummyjson.com"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "catalog-pricer"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "catalog-pricer"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "catalog-pricer"
    return Path.home() / ".config" / "catalog-pricer"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# catalog-pricer user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación."""

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_PRICER_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    catalog_base_url: str = Field(
        default=DEFAULT_CATALOG_BASE_URL,
        min_length=8,
        description="Base URL del catálogo de productos (API compatible DummyJSON).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="catalog-pricer/0.1",
        min_length=1,
        description="User-Agent para las peticiones al catálogo.",
    )
    default_limit: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Número de productos por consulta cuando no se indica --limit.",
    )

    standard_tax_rate: float = Field(
        default=STANDARD_TAX_RATE,
        ge=0.0,
        le=1.0,
        description="Tasa de impuesto para categorías sin tasa propia.",
    )
    category_tax_rates: dict[str, Annotated[float, Field(ge=0.0, le=1.0)]] = Field(
        default_factory=lambda: {GROCERY_CATEGORY: GROCERY_TAX_RATE},
        description='Tasas por categoría, como JSON: {"groceries": 0.03}.',
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return level

    def tax_table(self) -> TaxTable:
        return TaxTable(
            default_rate=self.standard_tax_rate,
            category_rates=self.category_tax_rates,
        )
