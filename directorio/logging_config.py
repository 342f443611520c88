"""Configuración del logger de la aplicación."""

from __future__ import annotations

import logging
import sys


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """Configura el logger del espacio de nombres ``directorio``.

    Parameters
    ----------
    level:
        Nivel de logging (``logging.DEBUG``, ``logging.INFO``...).
    log_file:
        Ruta opcional para guardar también los mensajes en un archivo.
    """

    logger = logging.getLogger("directorio")
    logger.setLevel(level)

    # Evita handlers duplicados si se llama más de una vez
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging inicializado.")
    return logger


__all__ = ["setup_logging"]
