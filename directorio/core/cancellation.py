"""Token de cancelación para cargas en segundo plano."""

from __future__ import annotations

import threading


class CancellationToken:
    """Marca compartida entre la ventana y el hilo que descarga usuarios.

    La ventana cancela el token al cerrarse; el hilo lo consulta antes de
    procesar la respuesta y el controlador descarta resultados de tokens
    cancelados.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


class CancelledError(Exception):
    """La carga fue cancelada antes de completarse."""


__all__ = ["CancellationToken", "CancelledError"]
