"""Parámetros de la aplicación."""

from __future__ import annotations

from dataclasses import dataclass


API_URL = "https://jsonplaceholder.typicode.com/users"
PAGE_SIZE = 14
COPIES = 5


@dataclass(frozen=True)
class DirectorySettings:
    """Valores de configuración del directorio.

    Se usan los valores por defecto en la aplicación de escritorio; las
    pruebas pueden construir instancias con otros valores.
    """

    api_url: str = API_URL
    # Segundos de espera para la petición HTTP
    timeout: float = 10.0
    page_size: int = PAGE_SIZE
    # Copias del conjunto base para la demostración
    copias: int = COPIES


__all__ = ["API_URL", "COPIES", "DirectorySettings", "PAGE_SIZE"]
