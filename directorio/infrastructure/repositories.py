"""Implementaciones de repositorios para acceso a datos."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence

from directorio.config import COPIES
from directorio.core.cancellation import CancellationToken, CancelledError
from directorio.infrastructure.api_client import APIClient
from directorio.models.user import User

logger = logging.getLogger(__name__)


def expandir_usuarios(usuarios: Sequence[User], copias: int = COPIES) -> tuple[User, ...]:
    """Replica el conjunto base ``copias`` veces para la demostración.

    La copia ``i`` desplaza cada id en ``i * n`` y agrega el sufijo
    ``i + 1`` al nombre. Los ids resultantes son únicos siempre que los ids
    base sean enteros consecutivos pequeños, como los que entrega el
    servicio; no es una deduplicación general.
    """

    n = len(usuarios)
    return tuple(
        replace(usuario, id=usuario.id + i * n, name=f"{usuario.name} {i + 1}")
        for i in range(copias)
        for usuario in usuarios
    )


class UserRepository:
    """Repositorio de usuarios basado en un cliente API."""

    def __init__(self, api_client: APIClient, copias: int = COPIES) -> None:
        self._api_client = api_client
        self._copias = copias

    def obtener_usuarios(self, token: CancellationToken | None = None) -> tuple[User, ...]:
        """Devuelve la colección completa de usuarios ya expandida.

        Lanza :class:`~directorio.core.errors.RecordSourceError` si la
        descarga o el formato fallan, y :class:`CancelledError` si el token
        se canceló durante la descarga.
        """

        usuarios_crudos = self._api_client.obtener_usuarios()
        if token is not None and token.cancelled:
            raise CancelledError("Carga de usuarios cancelada")

        base = [User.from_payload(datos) for datos in usuarios_crudos]
        coleccion = expandir_usuarios(base, self._copias)
        logger.info("Colección cargada: %d usuarios base, %d en total", len(base), len(coleccion))
        return coleccion


__all__ = ["UserRepository", "expandir_usuarios"]
