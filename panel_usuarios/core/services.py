"""Servicios de aplicación que coordinan el acceso a datos."""

from __future__ import annotations

import logging
from typing import Iterable

from panel_usuarios.infrastructure.repositories import UserRepository
from panel_usuarios.models.user import UserRecord

logger = logging.getLogger(__name__)


def siguiente_id(usuarios: Iterable[UserRecord]) -> int:
    """Máximo ``id`` presente más uno (1 para una lista vacía)."""

    return max((usuario.id for usuario in usuarios), default=0) + 1


class UserService:
    """Orquesta las operaciones remotas sobre usuarios."""

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def obtener_todos(self) -> list[UserRecord]:
        return self._repository.obtener_usuarios()

    def crear(self, usuario: UserRecord) -> UserRecord:
        self._repository.crear(usuario)
        logger.info("Usuario creado (id=%s)", usuario.id)
        return usuario

    def actualizar(self, usuario: UserRecord) -> UserRecord:
        self._repository.actualizar(usuario)
        logger.info("Usuario actualizado (id=%s)", usuario.id)
        return usuario

    def eliminar(self, user_id: int) -> None:
        self._repository.eliminar(user_id)
        logger.info("Usuario eliminado (id=%s)", user_id)


__all__ = ["UserService", "siguiente_id"]
