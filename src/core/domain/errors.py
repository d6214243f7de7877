"""Taxonomía de errores del catálogo.

Jerarquía:
- `CatalogError`: raíz común (la CLI captura aquí).
- `InvalidInput`: valor numérico fuera de dominio (precio negativo, % fuera de rango).
- `RemoteServiceError`: el catálogo respondió con fallo (código HTTP opcional).
- `NotFound`: caso particular de `RemoteServiceError` (404).
- `ConnectivityError`: no se pudo alcanzar el servicio.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base de todos los errores del dominio."""


class InvalidInput(CatalogError, ValueError):
    """Argumento numérico fuera del dominio permitido."""


class RemoteServiceError(CatalogError):
    """Fallo reportado por el catálogo remoto.

    `status_code` es `None` cuando el fallo no vino de un status HTTP
    (payload inesperado, registro malformado, etc.).
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotFound(RemoteServiceError):
    """El recurso (producto o categoría) no existe upstream."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=404)


class ConnectivityError(CatalogError):
    """La petición no llegó al servicio (DNS, conexión, timeout)."""
