"""Estado de la aplicación."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from directorio.core.services import SortOrder
from directorio.models.user import User


class LoadStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class DirectoryState:
    """Combinación completa de colección, consulta, orden, página y selección.

    Es inmutable: cada cambio produce una instancia nueva con
    :func:`dataclasses.replace`, de modo que los observadores nunca ven una
    combinación parcial.
    """

    status: LoadStatus = LoadStatus.LOADING
    usuarios: tuple[User, ...] = ()
    error_message: str | None = None
    consulta: str = ""
    orden: SortOrder = SortOrder.ASCENDING
    pagina: int = 1
    seleccionado: int | None = None


__all__ = ["DirectoryState", "LoadStatus"]
