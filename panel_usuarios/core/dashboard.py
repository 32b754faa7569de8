"""Controlador del panel de usuarios.

Reúne las acciones que dispara la interfaz (cargar, enviar, editar,
cancelar y eliminar) sobre un :class:`DashboardState`. Cada acción que
modifica el formulario o la lista se refleja después en el almacén local.

Los fallos remotos y de validación nunca se propagan a la UI: se guardan
como un único texto de error que sobrescribe al anterior.
"""

from __future__ import annotations

import logging
from typing import Protocol, Sequence

from panel_usuarios.core.services import UserService, siguiente_id
from panel_usuarios.core.state import DashboardState
from panel_usuarios.core.validation import validar_formulario
from panel_usuarios.errors import ApiError, ValidationError
from panel_usuarios.models.user import UserRecord

logger = logging.getLogger(__name__)

_CAMPOS = {
    "name": "name",
    "username": "username",
    "email": "email",
    "companyName": "company_name",
}


class StateStore(Protocol):
    def guardar(self, formulario: dict[str, str], usuarios: Sequence[UserRecord]) -> None:
        ...


class DirectoryDashboard:
    """Acciones del panel sobre el estado compartido."""

    def __init__(
        self,
        *,
        user_service: UserService,
        state: DashboardState | None = None,
        store: StateStore | None = None,
    ) -> None:
        self.user_service = user_service
        self.state = state or DashboardState()
        self.store = store

    # ------------------------------------------------------------------
    # Acciones
    # ------------------------------------------------------------------
    def cargar(self) -> None:
        """Reemplaza la lista con los usuarios remotos."""

        try:
            usuarios = self.user_service.obtener_todos()
        except ApiError as exc:
            logger.warning("No se pudieron cargar usuarios: %s", exc.message)
            self.state.usuarios = []
            self.state.error_text = exc.message
        else:
            self.state.usuarios = usuarios
            self.state.error_text = ""
        self._persistir()

    def actualizar_campo(self, clave: str, valor: str) -> None:
        """Registra un cambio de un campo del formulario (``name``, ``companyName``...)."""

        try:
            atributo = _CAMPOS[clave]
        except KeyError:
            raise ValueError(f"Campo de formulario desconocido: {clave}") from None
        setattr(self.state, atributo, valor)
        self._persistir()

    def enviar(self) -> bool:
        """Valida el formulario y crea o actualiza el usuario.

        Devuelve ``True`` si la operación remota terminó bien.
        """

        try:
            validar_formulario(self.state.formulario())
        except ValidationError as exc:
            logger.warning("Formulario inválido: %s", exc.message)
            self.state.error_text = exc.message
            return False

        editando = self.state.editando
        if editando is not None:
            return self._actualizar(self.state.construir_usuario(editando.id))
        return self._crear(self.state.construir_usuario(siguiente_id(self.state.usuarios)))

    def iniciar_edicion(self, usuario: UserRecord) -> None:
        self.state.editando = usuario
        self.state.copiar_usuario(usuario)
        self._persistir()

    def cancelar_edicion(self) -> None:
        self.state.editando = None
        self.state.limpiar_formulario()
        self._persistir()

    def eliminar(self, user_id: int) -> bool:
        try:
            self.user_service.eliminar(user_id)
        except ApiError as exc:
            logger.warning("No se pudo eliminar el usuario %s: %s", user_id, exc.message)
            self.state.error_text = exc.message
            return False

        self.state.usuarios = [u for u in self.state.usuarios if u.id != user_id]
        self._persistir()
        return True

    # ------------------------------------------------------------------
    # Internos
    # ------------------------------------------------------------------
    def _crear(self, usuario: UserRecord) -> bool:
        try:
            self.user_service.crear(usuario)
        except ApiError as exc:
            logger.warning("No se pudo crear el usuario: %s", exc.message)
            self.state.error_text = exc.message
            return False

        self.state.usuarios = [*self.state.usuarios, usuario]
        self.state.limpiar_formulario()
        self._persistir()
        return True

    def _actualizar(self, usuario: UserRecord) -> bool:
        try:
            self.user_service.actualizar(usuario)
        except ApiError as exc:
            logger.warning("No se pudo actualizar el usuario %s: %s", usuario.id, exc.message)
            self.state.error_text = exc.message
            return False

        self.state.usuarios = [
            usuario if existente.id == usuario.id else existente
            for existente in self.state.usuarios
        ]
        self.state.editando = None
        self._persistir()
        return True

    def _persistir(self) -> None:
        if self.store is None:
            return
        self.store.guardar(self.state.formulario(), self.state.usuarios)


__all__ = ["DirectoryDashboard", "StateStore"]
