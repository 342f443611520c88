"""Punto de entrada de la aplicación.

Crea los componentes de infraestructura, el controlador del directorio y
arranca la interfaz gráfica principal.
"""

from __future__ import annotations

import sys

from PyQt6.QtWidgets import QApplication

from directorio.config import DirectorySettings
from directorio.core.viewmodel import DirectoryController
from directorio.infrastructure.api_client import APIClient
from directorio.infrastructure.repositories import UserRepository
from directorio.logging_config import setup_logging
from directorio.ui.main_window import MainWindow


def main() -> None:
    """Arranca la aplicación PyQt6 con las dependencias configuradas."""

    setup_logging()
    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    settings = DirectorySettings()
    api_client = APIClient(settings.api_url, timeout=settings.timeout)
    repository = UserRepository(api_client, copias=settings.copias)
    controller = DirectoryController(settings)

    window = MainWindow(controller=controller, repository=repository)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":  # pragma: no cover - punto de entrada interactivo
    main()
