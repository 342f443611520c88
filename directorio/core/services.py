"""Filtrado y ordenamiento de la colección de usuarios."""

from __future__ import annotations

import locale
from enum import Enum
from typing import Iterable

from directorio.models.user import User


class SortOrder(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


def normalizar_consulta(consulta: str) -> str:
    return consulta.strip().lower()


def coincide(usuario: User, consulta_normalizada: str) -> bool:
    """Indica si la consulta aparece en el nombre, email o empresa."""

    if not consulta_normalizada:
        return True
    return (
        consulta_normalizada in usuario.name.lower()
        or consulta_normalizada in usuario.email.lower()
        or consulta_normalizada in usuario.company_name.lower()
    )


def clave_orden(usuario: User) -> str:
    # LC_COLLATE del proceso; en Unix QApplication lo toma del entorno
    return locale.strxfrm(usuario.name.lower())


def filtrar_y_ordenar(
    usuarios: Iterable[User], consulta: str, orden: SortOrder = SortOrder.ASCENDING
) -> tuple[User, ...]:
    """Filtra por ``consulta`` y ordena por nombre según ``orden``.

    El ordenamiento es estable: usuarios con el mismo nombre conservan el
    orden de la colección en ambos sentidos.
    """

    consulta_normalizada = normalizar_consulta(consulta)
    coincidencias = [usuario for usuario in usuarios if coincide(usuario, consulta_normalizada)]
    ordenados = sorted(
        coincidencias,
        key=clave_orden,
        reverse=orden == SortOrder.DESCENDING,
    )
    return tuple(ordenados)


__all__ = [
    "SortOrder",
    "clave_orden",
    "coincide",
    "filtrar_y_ordenar",
    "normalizar_consulta",
]
