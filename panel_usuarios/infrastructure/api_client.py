"""Cliente HTTP del directorio remoto de usuarios.

Implementa el contrato REST ``/users`` (listar, crear, actualizar y
eliminar). Todos los fallos, sean de red, de código HTTP o de formato, se
traducen a :class:`ApiError` con un mensaje legible para mostrar en la UI.
"""

from __future__ import annotations

import http.client
import json
import logging
import socket
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from panel_usuarios.config import AppConfig
from panel_usuarios.errors import ApiError

logger = logging.getLogger(__name__)


class APIClient:
    """Provee acceso a los usuarios del backend."""

    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or AppConfig()

    @property
    def users_url(self) -> str:
        return self._config.users_url

    # ------------------------------------------------------------------
    # Operaciones
    # ------------------------------------------------------------------
    def obtener_usuarios(self) -> list[dict]:
        """Recupera todos los usuarios. Solo se acepta el código 200."""

        status, payload = self._request("GET", self.users_url)
        if status != 200:
            raise ApiError(
                f"Respuesta inesperada del servicio (código {status})",
                status=status,
                url=self.users_url,
            )
        if not isinstance(payload, list):
            raise ApiError("Formato inesperado al leer usuarios.", status=status, url=self.users_url)
        return payload

    def crear_usuario(self, datos: dict) -> None:
        self._request("POST", self.users_url, datos, parse=False)

    def actualizar_usuario(self, user_id: int, datos: dict) -> None:
        self._request("PUT", f"{self.users_url}/{user_id}", datos, parse=False)

    def eliminar_usuario(self, user_id: int) -> None:
        self._request("DELETE", f"{self.users_url}/{user_id}", parse=False)

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------
    def _request(
        self, method: str, url: str, body: dict | None = None, *, parse: bool = True
    ) -> tuple[int, Any]:
        """Ejecuta la petición; con ``parse=False`` el cuerpo de la respuesta se descarta."""

        headers = {"Accept": "application/json"}
        data = None
        if body is not None:
            data = json.dumps(body).encode("utf-8")
            headers["Content-Type"] = "application/json; charset=UTF-8"

        logger.debug("%s %s", method, url)
        try:
            with urlopen(
                Request(url, data=data, headers=headers, method=method),
                timeout=self._config.timeout,
            ) as response:
                status = response.status
                raw = response.read()
        except HTTPError as exc:
            raise ApiError(
                f"La solicitud falló con código {exc.code}", status=exc.code, url=url
            ) from exc
        except URLError as exc:
            if isinstance(exc.reason, socket.timeout):
                raise ApiError("La solicitud expiró por timeout.", url=url) from exc
            raise ApiError(f"Error de red: {exc.reason}", url=url) from exc
        except TimeoutError as exc:
            raise ApiError("La solicitud expiró por timeout.", url=url) from exc
        except (OSError, http.client.HTTPException) as exc:
            raise ApiError(f"Error de red: {exc}", url=url) from exc

        if not parse or not raw.strip():
            return status, None
        try:
            return status, json.loads(raw)
        except ValueError as exc:
            raise ApiError(f"Respuesta inválida del servicio ({exc}).", status=status, url=url) from exc


__all__ = ["APIClient"]
