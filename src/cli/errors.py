"""Reporte de errores para la CLI.

Único punto donde se capturan los errores del Core: se muestra una línea
descriptiva por categoría (sin traceback) y el detalle va a logging DEBUG.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError
from pydantic_settings import SettingsError
from rich.console import Console
from rich.markup import escape

from core.domain.errors import ConnectivityError, InvalidInput, RemoteServiceError

logger = logging.getLogger(__name__)


def _describe_validation(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "settings"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def describe_error(error: BaseException) -> str:
    """Mensaje de una línea según la categoría del error."""

    if isinstance(error, RemoteServiceError):
        status = f" - Status {error.status_code}" if error.status_code else ""
        return f"[API Error{status}]: {error.message}"
    if isinstance(error, ConnectivityError):
        return f"[Network Error]: {error}"
    if isinstance(error, InvalidInput):
        return f"[Invalid Input]: {error}"
    if isinstance(error, ValidationError):
        return f"[Config Error]: {_describe_validation(error)}"
    if isinstance(error, SettingsError):
        return f"[Config Error]: {error}"
    return f"[Error]: {error}"


def report_error(console: Console, error: BaseException) -> None:
    logger.debug("Command failed", exc_info=error)
    console.print(escape(describe_error(error)), style="bold red", soft_wrap=True)
