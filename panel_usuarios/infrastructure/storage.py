"""Espejo local del estado del panel sobre ``QSettings``.

Las claves son las mismas que usa la versión web del panel: ``name``,
``username``, ``email``, ``companyName`` y ``userData`` (lista serializada
en JSON).
"""

from __future__ import annotations

import json
from typing import Sequence

from PyQt6.QtCore import QSettings

from panel_usuarios.config import AppConfig
from panel_usuarios.models.user import UserRecord

FORM_KEYS = ("name", "username", "email", "companyName")
USER_DATA_KEY = "userData"


class LocalStore:
    """Almacén clave-valor persistente entre ejecuciones."""

    def __init__(self, settings: QSettings) -> None:
        self._settings = settings

    @classmethod
    def from_config(cls, config: AppConfig) -> "LocalStore":
        if config.settings_path:
            return cls(QSettings(config.settings_path, QSettings.Format.IniFormat))
        return cls(QSettings(config.settings_org, config.settings_app))

    def guardar(self, formulario: dict[str, str], usuarios: Sequence[UserRecord]) -> None:
        """Escribe los campos del formulario y la lista actual."""

        for clave in FORM_KEYS:
            self._settings.setValue(clave, formulario.get(clave, ""))
        self._settings.setValue(
            USER_DATA_KEY, json.dumps([usuario.to_dict() for usuario in usuarios])
        )
        self._settings.sync()

    def leer_formulario(self) -> dict[str, str]:
        """Recupera el borrador del formulario guardado en la última sesión."""

        return {clave: str(self._settings.value(clave, "") or "") for clave in FORM_KEYS}


__all__ = ["FORM_KEYS", "USER_DATA_KEY", "LocalStore"]
