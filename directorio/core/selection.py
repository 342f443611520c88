"""Selección simple de usuarios."""

from __future__ import annotations


def alternar_seleccion(actual: int | None, user_id: int) -> int | None:
    """Selecciona ``user_id`` o lo deselecciona si ya estaba seleccionado.

    No se valida que el id exista en la colección.
    """

    return None if actual == user_id else user_id


__all__ = ["alternar_seleccion"]
