"""Paginación de la secuencia filtrada."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, TypeVar

from directorio.config import PAGE_SIZE

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class PageWindow:
    """Ventana visible de una página.

    ``total_paginas`` es 0 cuando no hay elementos; en ese caso la UI no
    muestra controles de paginación y ``pagina_efectiva`` vale 1.
    """

    visibles: tuple
    total_paginas: int
    pagina_efectiva: int


def total_paginas(cantidad: int, tamano: int = PAGE_SIZE) -> int:
    return -(-cantidad // tamano) if cantidad > 0 else 0


def ajustar_pagina(pagina: int, total: int) -> int:
    """Limita ``pagina`` al rango ``[1, max(1, total)]``."""

    return max(1, min(pagina, max(1, total)))


def paginar(secuencia: Sequence[T], pagina: int, tamano: int = PAGE_SIZE) -> PageWindow:
    if tamano < 1:
        raise ValueError("El tamaño de página debe ser positivo")

    total = total_paginas(len(secuencia), tamano)
    efectiva = ajustar_pagina(pagina, total)
    inicio = (efectiva - 1) * tamano
    return PageWindow(
        visibles=tuple(secuencia[inicio : inicio + tamano]),
        total_paginas=total,
        pagina_efectiva=efectiva,
    )


def pagina_anterior(pagina: int) -> int:
    return max(1, pagina - 1)


def pagina_siguiente(pagina: int, total: int) -> int:
    return ajustar_pagina(pagina + 1, total)


__all__ = [
    "PageWindow",
    "ajustar_pagina",
    "pagina_anterior",
    "pagina_siguiente",
    "paginar",
    "total_paginas",
]
