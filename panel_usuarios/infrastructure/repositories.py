"""Implementaciones de repositorios para acceso a datos."""

from __future__ import annotations

from panel_usuarios.errors import ApiError
from panel_usuarios.infrastructure.api_client import APIClient
from panel_usuarios.models.user import UserRecord


class UserRepository:
    """Repositorio de usuarios basado en un cliente API."""

    def __init__(self, api_client: APIClient) -> None:
        self._api_client = api_client

    def obtener_usuarios(self) -> list[UserRecord]:
        """Devuelve la lista completa de usuarios."""

        usuarios_crudos = self._api_client.obtener_usuarios()
        try:
            return [UserRecord.from_dict(datos) for datos in usuarios_crudos]
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise ApiError(f"Usuario con formato inesperado ({exc}).") from exc

    def crear(self, usuario: UserRecord) -> None:
        self._api_client.crear_usuario(usuario.to_dict())

    def actualizar(self, usuario: UserRecord) -> None:
        self._api_client.actualizar_usuario(usuario.id, usuario.to_dict())

    def eliminar(self, user_id: int) -> None:
        self._api_client.eliminar_usuario(user_id)


__all__ = ["UserRepository"]
