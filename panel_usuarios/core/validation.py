"""Validación local del formulario de usuario."""

from __future__ import annotations

import re
from typing import Mapping

from panel_usuarios.errors import ValidationError

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,4}")

REQUIRED_FIELDS = ("name", "username", "email", "companyName")

MSG_CAMPOS_VACIOS = "Por favor complete todos los datos."
MSG_EMAIL_INVALIDO = "Por favor ingrese un correo electrónico válido."


def email_valido(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def validar_formulario(formulario: Mapping[str, str]) -> None:
    """Lanza :class:`ValidationError` si el formulario no puede enviarse.

    Un campo con solo espacios cuenta como vacío. El correo se compara
    completo contra ``EMAIL_PATTERN`` (dominio de nivel superior de 2 a 4
    letras).
    """

    vacios = [campo for campo in REQUIRED_FIELDS if not formulario.get(campo, "").strip()]
    if vacios:
        raise ValidationError(MSG_CAMPOS_VACIOS, details={"campos": ", ".join(vacios)})

    if not email_valido(formulario["email"]):
        raise ValidationError(MSG_EMAIL_INVALIDO, details={"email": formulario["email"]})


__all__ = [
    "EMAIL_PATTERN",
    "MSG_CAMPOS_VACIOS",
    "MSG_EMAIL_INVALIDO",
    "REQUIRED_FIELDS",
    "email_valido",
    "validar_formulario",
]
