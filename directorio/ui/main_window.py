"""Ventana principal del directorio de usuarios."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, Qt, QThread, pyqtSignal
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import (
    QComboBox,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from directorio.core.cancellation import CancellationToken, CancelledError
from directorio.core.errors import RecordSourceError
from directorio.core.services import SortOrder
from directorio.core.viewmodel import DirectoryController, ViewSnapshot
from directorio.infrastructure.repositories import UserRepository
from directorio.ui.user_card import UserCard

logger = logging.getLogger(__name__)


class _LoadWorker(QObject):
    finished = pyqtSignal(object, object)
    error = pyqtSignal(object, str)
    cancelled = pyqtSignal()

    def __init__(self, repository: UserRepository, token: CancellationToken) -> None:
        super().__init__()
        self.repository = repository
        self.token = token

    def run(self) -> None:
        try:
            usuarios = self.repository.obtener_usuarios(self.token)
        except CancelledError:
            self.cancelled.emit()
            return
        except RecordSourceError as exc:
            self.error.emit(self.token, exc.message)
            return
        except Exception as exc:  # pragma: no cover - mostrado en UI
            logger.exception("Fallo inesperado cargando usuarios")
            self.error.emit(self.token, str(exc))
            return
        self.finished.emit(self.token, usuarios)


class MainWindow(QMainWindow):
    """Listado de usuarios en tarjetas con búsqueda, orden y paginación."""

    GRID_COLUMNS = 3

    def __init__(self, *, controller: DirectoryController, repository: UserRepository) -> None:
        super().__init__()
        self.controller = controller
        self.repository = repository
        self._load_thread: QThread | None = None
        self._load_worker: _LoadWorker | None = None

        self.setWindowTitle("Directorio de usuarios")
        self.resize(1100, 760)

        self._build_ui()
        self._apply_styles()

        self._unsubscribe = self.controller.suscribir(self._render)
        self._reload_data()

    # ------------------------------------------------------------------ UI
    def _build_ui(self) -> None:
        header = QLabel("Directorio de usuarios")
        header.setObjectName("header")

        self.search_box = QLineEdit(placeholderText="Buscar por nombre, email o empresa...")
        self.search_box.textChanged.connect(self.controller.establecer_consulta)

        self.sort_combo = QComboBox()
        self.sort_combo.addItem("Orden A–Z", SortOrder.ASCENDING)
        self.sort_combo.addItem("Orden Z–A", SortOrder.DESCENDING)
        self.sort_combo.currentIndexChanged.connect(self._on_sort_changed)

        self.refresh_button = QPushButton("Recargar")
        self.refresh_button.clicked.connect(self._reload_data)

        controls = QHBoxLayout()
        controls.addWidget(self.search_box, 1)
        controls.addWidget(self.sort_combo)
        controls.addWidget(self.refresh_button)

        self.status_label = QLabel("")
        self.status_label.setObjectName("statusLabel")
        self.status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.grid_container = QWidget()
        self.grid_layout = QGridLayout(self.grid_container)
        self.grid_layout.setSpacing(12)
        self.grid_layout.setAlignment(Qt.AlignmentFlag.AlignTop)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setWidget(self.grid_container)

        self.pagination_bar = QWidget()
        self.pagination_layout = QHBoxLayout(self.pagination_bar)
        self.pagination_layout.setContentsMargins(0, 0, 0, 0)

        self.footer_label = QLabel("")
        self.footer_label.setObjectName("footer")
        self.footer_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        layout = QVBoxLayout()
        layout.addWidget(header)
        layout.addLayout(controls)
        layout.addWidget(self.status_label)
        layout.addWidget(self.scroll_area, 1)
        layout.addWidget(self.pagination_bar)
        layout.addWidget(self.footer_label)

        container = QWidget()
        container.setLayout(layout)
        self.setCentralWidget(container)

    def _apply_styles(self) -> None:
        self.setStyleSheet(
            """
            #header {
                font-size: 16pt;
                font-weight: 700;
                color: #7f1d1d;
            }
            #statusLabel {
                color: #7f1d1d;
                font-weight: 600;
                padding: 12px;
            }
            #statusLabel[error="true"] {
                color: #b91c1c;
            }
            #userCard {
                background: #fff;
                border: 1px solid #fecdd3;
                border-radius: 10px;
            }
            #userCard[selected="true"] {
                background: #fee2e2;
                border: 2px solid #e11d48;
            }
            #cardTitle {
                font-weight: 700;
            }
            QPushButton[active="true"] {
                background: #e11d48;
                color: #fff;
                font-weight: 700;
            }
            #footer {
                color: #9f1239;
            }
            """
        )

    # --------------------------------------------------------------- acciones
    def _reload_data(self) -> None:
        """Lanza la carga de usuarios en un hilo aparte."""

        token = self.controller.iniciar_carga()
        if token is None:
            return

        self.search_box.blockSignals(True)
        self.search_box.clear()
        self.search_box.blockSignals(False)
        self.sort_combo.blockSignals(True)
        self.sort_combo.setCurrentIndex(0)
        self.sort_combo.blockSignals(False)

        self._iniciar_hilo_carga(token)

    def _iniciar_hilo_carga(self, token: CancellationToken) -> None:
        thread = QThread(self)
        worker = _LoadWorker(self.repository, token)
        worker.moveToThread(thread)

        thread.started.connect(worker.run)
        worker.finished.connect(thread.quit)
        worker.error.connect(thread.quit)
        worker.cancelled.connect(thread.quit)
        worker.finished.connect(self._on_load_completed)
        worker.error.connect(self._on_load_failed)
        thread.finished.connect(lambda: self._limpiar_hilo_carga(thread, worker))

        self._load_thread = thread
        self._load_worker = worker
        thread.start()

    def _on_load_completed(self, token: CancellationToken, usuarios: tuple) -> None:
        self.controller.completar_carga(token, usuarios)

    def _on_load_failed(self, token: CancellationToken, message: str) -> None:
        self.controller.fallar_carga(token, message)

    def _on_sort_changed(self, index: int) -> None:
        orden = self.sort_combo.itemData(index)
        if orden is not None:
            self.controller.establecer_orden(orden)

    def _limpiar_hilo_carga(self, thread: QThread, worker: _LoadWorker) -> None:
        worker.deleteLater()
        thread.deleteLater()
        if self._load_thread is thread:
            self._load_thread = None
            self._load_worker = None
        self.refresh_button.setEnabled(not self.controller.carga_en_curso)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.controller.cancelar_carga()
        self._unsubscribe()
        if self._load_thread is not None:
            # El timeout aplica a cada operación de socket, no a la carga completa
            self._load_thread.quit()
            self._load_thread.wait()
        super().closeEvent(event)

    # ------------------------------------------------------------ renderizado
    def _render(self, snapshot: ViewSnapshot) -> None:
        self.refresh_button.setEnabled(not self.controller.carga_en_curso)
        self._render_status(snapshot)
        self._render_cards(snapshot)
        self._render_pagination(snapshot)
        self.footer_label.setText(
            f"Mostrando {snapshot.visible_count} de {snapshot.total_count} usuarios"
        )

    def _render_status(self, snapshot: ViewSnapshot) -> None:
        if snapshot.is_loading:
            message = "Cargando usuarios…"
        elif snapshot.is_error:
            message = f"Error: {snapshot.error_message}"
        elif snapshot.is_empty:
            message = "No se encontraron registros."
        else:
            message = ""

        self.status_label.setText(message)
        self.status_label.setVisible(bool(message))
        self.status_label.setProperty("error", snapshot.is_error)
        self.status_label.style().unpolish(self.status_label)
        self.status_label.style().polish(self.status_label)

    def _render_cards(self, snapshot: ViewSnapshot) -> None:
        _clear_layout(self.grid_layout)
        for index, user in enumerate(snapshot.visible_items):
            card = UserCard(
                user,
                selected=snapshot.is_selected(user.id),
                on_click=lambda user_id=user.id: self.controller.alternar_seleccion(user_id),
            )
            row, column = divmod(index, self.GRID_COLUMNS)
            self.grid_layout.addWidget(card, row, column)
        self.scroll_area.setVisible(snapshot.visible_count > 0)

    def _render_pagination(self, snapshot: ViewSnapshot) -> None:
        _clear_layout(self.pagination_layout)
        self.pagination_bar.setVisible(snapshot.show_pagination)
        if not snapshot.show_pagination:
            return

        self.pagination_layout.addStretch(1)

        btn_prev = QPushButton("← Anterior")
        btn_prev.setEnabled(snapshot.has_previous)
        btn_prev.clicked.connect(self.controller.pagina_anterior)
        self.pagination_layout.addWidget(btn_prev)

        for number in snapshot.page_numbers:
            btn = QPushButton(str(number))
            btn.setProperty("active", number == snapshot.current_page)
            btn.clicked.connect(lambda _checked=False, n=number: self.controller.ir_a_pagina(n))
            self.pagination_layout.addWidget(btn)

        btn_next = QPushButton("Siguiente →")
        btn_next.setEnabled(snapshot.has_next)
        btn_next.clicked.connect(self.controller.pagina_siguiente)
        self.pagination_layout.addWidget(btn_next)

        self.pagination_layout.addStretch(1)


def _clear_layout(layout) -> None:
    while layout.count():
        item = layout.takeAt(0)
        widget = item.widget()
        if widget is not None:
            widget.deleteLater()


__all__ = ["MainWindow"]
