"""Cliente HTTP del servicio de usuarios.

Encapsula la petición GET al endpoint remoto y traduce los fallos de red y
de formato a las excepciones de :mod:`directorio.core.errors`.
"""

from __future__ import annotations

import http.client
import json
import logging
import socket
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from directorio.config import API_URL
from directorio.core.errors import ParseError, TransportError

logger = logging.getLogger(__name__)


class APIClient:
    """Provee acceso a los usuarios del backend."""

    def __init__(self, api_url: str = API_URL, timeout: float = 10.0) -> None:
        self.api_url = api_url
        self.timeout = timeout

    def obtener_usuarios(self) -> list[Any]:
        """Descarga la lista cruda de usuarios.

        Devuelve los elementos del arreglo JSON sin validar su contenido.
        """

        logger.info("Solicitando usuarios a %s", self.api_url)
        request = Request(self.api_url, headers={"Accept": "application/json"})
        try:
            with urlopen(request, timeout=self.timeout) as response:
                raw_data = response.read()
        except HTTPError as exc:
            logger.warning("El servicio respondió HTTP %s", exc.code)
            raise TransportError(f"Error HTTP {exc.code} al consultar usuarios.", status=exc.code) from exc
        except URLError as exc:
            if isinstance(exc.reason, socket.timeout):
                message = "La consulta de usuarios expiró por timeout."
            else:
                message = f"No se pudo conectar al servicio: {exc.reason}."
            logger.warning(message)
            raise TransportError(message) from exc
        except socket.timeout as exc:
            logger.warning("Timeout leyendo la respuesta de usuarios")
            raise TransportError("La consulta de usuarios expiró por timeout.") from exc
        except (http.client.HTTPException, OSError) as exc:
            # urlopen no envuelve los fallos de getresponse() ni de read()
            logger.warning("Conexión interrumpida consultando usuarios: %r", exc)
            raise TransportError("La conexión con el servicio de usuarios se interrumpió.") from exc

        try:
            payload = json.loads(raw_data)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ParseError(f"Respuesta inválida del servicio de usuarios ({exc}).") from exc

        if not isinstance(payload, list):
            raise ParseError("Formato inesperado al leer usuarios.")

        logger.debug("Recibidos %d usuarios", len(payload))
        return payload


__all__ = ["APIClient"]
