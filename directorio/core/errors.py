"""Errores del origen de datos de usuarios."""

from __future__ import annotations


class RecordSourceError(Exception):
    """Fallo al obtener la colección de usuarios.

    El mensaje es legible por el usuario y se muestra tal cual en la UI.
    """

    DEFAULT_MESSAGE = "No se pudieron obtener los usuarios"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.DEFAULT_MESSAGE)

    @property
    def message(self) -> str:
        return str(self)


class TransportError(RecordSourceError):
    """Servicio inalcanzable, timeout o respuesta HTTP no exitosa."""

    def __init__(self, message: str | None = None, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class ParseError(RecordSourceError):
    """La respuesta no tiene la forma de una lista de usuarios."""


__all__ = ["ParseError", "RecordSourceError", "TransportError"]
