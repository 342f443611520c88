"""Controlador del directorio y la instantánea que consume la vista.

``DirectoryController`` es el único dueño del estado. Todas las acciones
producen un ``DirectoryState`` nuevo que pasa por ``_aplicar``, donde se
aplican las reglas de página (reinicio al cambiar la consulta y ajuste al
rango válido) antes de recalcular la instantánea y notificar a los
observadores.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Iterable

from directorio.config import DirectorySettings
from directorio.core.cancellation import CancellationToken
from directorio.core.pagination import PageWindow, pagina_anterior, pagina_siguiente, paginar
from directorio.core.selection import alternar_seleccion
from directorio.core.services import SortOrder, filtrar_y_ordenar
from directorio.core.state import DirectoryState, LoadStatus
from directorio.models.user import User

logger = logging.getLogger(__name__)

Listener = Callable[["ViewSnapshot"], None]


@dataclass(frozen=True)
class ViewSnapshot:
    """Todo lo que la vista necesita para dibujar una pantalla."""

    status: LoadStatus
    error_message: str | None
    visible_items: tuple[User, ...]
    current_page: int
    total_pages: int
    selected_id: int | None
    total_count: int
    visible_count: int
    filtered_count: int

    @property
    def is_loading(self) -> bool:
        return self.status == LoadStatus.LOADING

    @property
    def is_error(self) -> bool:
        return self.status == LoadStatus.ERROR

    @property
    def is_empty(self) -> bool:
        """Colección cargada pero sin resultados para la consulta."""

        return self.status == LoadStatus.READY and self.filtered_count == 0

    @property
    def show_pagination(self) -> bool:
        return self.status == LoadStatus.READY and self.total_pages > 0

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def page_numbers(self) -> range:
        return range(1, self.total_pages + 1)

    def is_selected(self, user_id: int) -> bool:
        return self.selected_id == user_id


class DirectoryController:
    """Coordina carga, filtrado, paginación y selección."""

    def __init__(self, settings: DirectorySettings | None = None) -> None:
        self.settings = settings or DirectorySettings()
        self._state = DirectoryState()
        self._token: CancellationToken | None = None
        self._listeners: list[Listener] = []

        self._memo_usuarios: tuple[User, ...] | None = None
        self._memo_consulta: str | None = None
        self._memo_orden: SortOrder | None = None
        self._memo_resultado: tuple[User, ...] = ()

        filtrados = self._filtrados(self._state)
        self._snapshot = self._componer(self._state, filtrados, paginar(filtrados, 1, self.settings.page_size))

    # ------------------------------------------------------------------
    # Lectura
    # ------------------------------------------------------------------
    @property
    def state(self) -> DirectoryState:
        return self._state

    @property
    def snapshot(self) -> ViewSnapshot:
        return self._snapshot

    @property
    def carga_en_curso(self) -> bool:
        return self._token is not None

    def suscribir(self, listener: Listener) -> Callable[[], None]:
        """Registra ``listener`` y devuelve la función para darlo de baja."""

        self._listeners.append(listener)

        def _baja() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _baja

    # ------------------------------------------------------------------
    # Carga
    # ------------------------------------------------------------------
    def iniciar_carga(self) -> CancellationToken | None:
        """Reinicia el estado y comienza una carga completa.

        Devuelve el token de la nueva carga, o ``None`` si ya hay una en
        curso.
        """

        if self._token is not None:
            logger.debug("Carga en curso; se ignora la nueva solicitud")
            return None

        self._token = CancellationToken()
        self._aplicar(DirectoryState())
        logger.info("Carga de usuarios iniciada")
        return self._token

    def completar_carga(self, token: CancellationToken, usuarios: Iterable[User]) -> bool:
        if not self._es_vigente(token):
            return False
        self._token = None
        self._aplicar(
            replace(self._state, status=LoadStatus.READY, usuarios=tuple(usuarios), error_message=None)
        )
        return True

    def fallar_carga(self, token: CancellationToken, mensaje: str | None) -> bool:
        if not self._es_vigente(token):
            return False
        self._token = None
        logger.error("Error cargando usuarios: %s", mensaje)
        self._aplicar(
            replace(
                self._state,
                status=LoadStatus.ERROR,
                usuarios=(),
                error_message=mensaje or "No se pudieron obtener los usuarios",
            )
        )
        return True

    def cancelar_carga(self) -> None:
        """Cancela la carga en curso; su resultado será descartado."""

        if self._token is None:
            return
        self._token.cancel()
        self._token = None
        logger.info("Carga de usuarios cancelada")

    # ------------------------------------------------------------------
    # Acciones de la vista
    # ------------------------------------------------------------------
    def establecer_consulta(self, consulta: str) -> None:
        self._aplicar(replace(self._state, consulta=consulta))

    def establecer_orden(self, orden: SortOrder) -> None:
        self._aplicar(replace(self._state, orden=SortOrder(orden)))

    def ir_a_pagina(self, pagina: int) -> None:
        self._aplicar(replace(self._state, pagina=pagina))

    def pagina_anterior(self) -> None:
        self.ir_a_pagina(pagina_anterior(self._snapshot.current_page))

    def pagina_siguiente(self) -> None:
        self.ir_a_pagina(pagina_siguiente(self._snapshot.current_page, self._snapshot.total_pages))

    def alternar_seleccion(self, user_id: int) -> None:
        self._aplicar(replace(self._state, seleccionado=alternar_seleccion(self._state.seleccionado, user_id)))

    # ------------------------------------------------------------------
    # Internos
    # ------------------------------------------------------------------
    def _es_vigente(self, token: CancellationToken) -> bool:
        if token.cancelled or token is not self._token:
            logger.debug("Resultado de una carga cancelada o antigua descartado")
            return False
        return True

    def _aplicar(self, nuevo: DirectoryState) -> None:
        anterior = self._state
        if nuevo.consulta != anterior.consulta:
            nuevo = replace(nuevo, pagina=1)

        filtrados = self._filtrados(nuevo)
        ventana = paginar(filtrados, nuevo.pagina, self.settings.page_size)
        if ventana.pagina_efectiva != nuevo.pagina:
            nuevo = replace(nuevo, pagina=ventana.pagina_efectiva)

        self._state = nuevo
        self._snapshot = self._componer(nuevo, filtrados, ventana)
        logger.debug(
            "Estado: %s, consulta=%r, orden=%s, página %d/%d",
            nuevo.status.value,
            nuevo.consulta,
            nuevo.orden.value,
            self._snapshot.current_page,
            self._snapshot.total_pages,
        )
        for listener in list(self._listeners):
            listener(self._snapshot)

    def _filtrados(self, estado: DirectoryState) -> tuple[User, ...]:
        if (
            estado.usuarios is self._memo_usuarios
            and estado.consulta == self._memo_consulta
            and estado.orden == self._memo_orden
        ):
            return self._memo_resultado

        self._memo_resultado = filtrar_y_ordenar(estado.usuarios, estado.consulta, estado.orden)
        self._memo_usuarios = estado.usuarios
        self._memo_consulta = estado.consulta
        self._memo_orden = estado.orden
        return self._memo_resultado

    def _componer(
        self, estado: DirectoryState, filtrados: tuple[User, ...], ventana: PageWindow
    ) -> ViewSnapshot:
        listo = estado.status == LoadStatus.READY
        visibles = ventana.visibles if listo else ()
        return ViewSnapshot(
            status=estado.status,
            error_message=estado.error_message,
            visible_items=visibles,
            current_page=ventana.pagina_efectiva,
            total_pages=ventana.total_paginas if listo else 0,
            selected_id=estado.seleccionado,
            total_count=len(estado.usuarios),
            visible_count=len(visibles),
            filtered_count=len(filtrados) if listo else 0,
        )


__all__ = ["DirectoryController", "ViewSnapshot"]
