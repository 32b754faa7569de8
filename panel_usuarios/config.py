"""Configuración de la aplicación.

Las fuentes se combinan en orden de prioridad:
    1. Valores por defecto (definidos en ``AppConfig``)
    2. Variables de entorno ``PANEL_USUARIOS_*``
    3. Argumentos explícitos de ``load_config``

Ejemplo:
    >>> config = load_config(timeout=5)
    >>> config.timeout
    5.0
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional

from panel_usuarios.errors import ConfigurationError

ENV_PREFIX = "PANEL_USUARIOS_"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class AppConfig:
    """Parámetros de conexión, persistencia local y logging."""

    api_base: str = "https://jsonplaceholder.typicode.com"
    timeout: float = 10.0
    settings_org: str = "Intysoft"
    settings_app: str = "PanelUsuarios"
    # Si se indica, QSettings escribe en este archivo INI en lugar del
    # almacenamiento nativo de la plataforma.
    settings_path: Optional[str] = None
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    @property
    def users_url(self) -> str:
        return f"{self.api_base.rstrip('/')}/users"

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def _from_env(environ: Mapping[str, str]) -> dict[str, Any]:
    valores: dict[str, Any] = {}
    for campo in fields(AppConfig):
        clave = ENV_PREFIX + campo.name.upper()
        if clave in environ and environ[clave] != "":
            valores[campo.name] = environ[clave]
    return valores


def _normalize(valores: dict[str, Any]) -> dict[str, Any]:
    normalizados = dict(valores)

    if "timeout" in normalizados:
        try:
            timeout = float(normalizados["timeout"])
        except (TypeError, ValueError):
            raise ConfigurationError(
                "El timeout debe ser numérico",
                details={"timeout": str(normalizados["timeout"])},
            ) from None
        if timeout <= 0:
            raise ConfigurationError(
                "El timeout debe ser mayor que cero", details={"timeout": str(timeout)}
            )
        normalizados["timeout"] = timeout

    if "log_level" in normalizados:
        nivel = str(normalizados["log_level"]).upper()
        if nivel not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Nivel de log desconocido: {normalizados['log_level']}",
                details={"log_level": str(normalizados["log_level"])},
            )
        normalizados["log_level"] = nivel

    if "api_base" in normalizados and not str(normalizados["api_base"]).strip():
        raise ConfigurationError("La URL base del API no puede estar vacía")

    return normalizados


def load_config(environ: Optional[Mapping[str, str]] = None, **overrides: Any) -> AppConfig:
    """Construye la configuración efectiva.

    Los argumentos con valor ``None`` se ignoran, de modo que el llamador puede
    pasar opciones no indicadas sin pisar el entorno.
    """

    environ = os.environ if environ is None else environ
    desconocidos = set(overrides) - {campo.name for campo in fields(AppConfig)}
    if desconocidos:
        raise ConfigurationError(
            f"Opciones de configuración desconocidas: {', '.join(sorted(desconocidos))}"
        )

    valores = _from_env(environ)
    valores.update({clave: valor for clave, valor in overrides.items() if valor is not None})
    return replace(AppConfig(), **_normalize(valores))


__all__ = ["AppConfig", "ENV_PREFIX", "load_config"]
