"""Estado compartido del panel."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from panel_usuarios.models.user import Company, UserRecord


@dataclass
class DashboardState:
    """Mantiene los usuarios visibles, el formulario y el modo edición."""

    usuarios: List[UserRecord] = field(default_factory=list)
    name: str = ""
    username: str = ""
    email: str = ""
    company_name: str = ""
    error_text: str = ""
    editando: UserRecord | None = None

    @property
    def is_editing(self) -> bool:
        return self.editando is not None

    def formulario(self) -> dict[str, str]:
        """Campos del formulario con las claves del almacén local."""

        return {
            "name": self.name,
            "username": self.username,
            "email": self.email,
            "companyName": self.company_name,
        }

    def cargar_formulario(self, valores: dict[str, str]) -> None:
        self.name = valores.get("name", "")
        self.username = valores.get("username", "")
        self.email = valores.get("email", "")
        self.company_name = valores.get("companyName", "")

    def copiar_usuario(self, usuario: UserRecord) -> None:
        self.name = usuario.name
        self.username = usuario.username
        self.email = usuario.email
        self.company_name = usuario.company_name

    def limpiar_formulario(self) -> None:
        self.name = self.username = self.email = self.company_name = ""

    def construir_usuario(self, user_id: int) -> UserRecord:
        return UserRecord(
            id=user_id,
            name=self.name,
            username=self.username,
            email=self.email,
            company=Company(name=self.company_name),
        )


__all__ = ["DashboardState"]
