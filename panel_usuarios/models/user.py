"""Definiciones de modelos de dominio."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class Company:
    """Empresa embebida en el registro de usuario (solo el nombre)."""

    name: str = ""


@dataclass(frozen=True, slots=True)
class UserRecord:
    """Usuario del directorio remoto.

    El ``id`` se asigna en el cliente como el máximo existente más uno, por lo
    que solo es único dentro de la lista local.
    """

    id: int
    name: str
    username: str
    email: str
    company: Company = Company()

    @property
    def company_name(self) -> str:
        return self.company.name

    @classmethod
    def from_dict(cls, datos: Mapping[str, Any]) -> "UserRecord":
        """Construye el registro a partir del JSON remoto.

        Las claves adicionales (address, phone, website...) se ignoran.
        """

        company = datos.get("company") or {}
        return cls(
            id=int(datos["id"]),
            name=str(datos.get("name", "")),
            username=str(datos.get("username", "")),
            email=str(datos.get("email", "")),
            company=Company(name=str(company.get("name", ""))),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "username": self.username,
            "email": self.email,
            "company": {"name": self.company.name},
        }


__all__ = ["Company", "UserRecord"]
