"""Jerarquía de excepciones del panel de usuarios."""

from __future__ import annotations

from typing import Dict, Optional


class PanelUsuariosError(Exception):
    """Excepción base de la aplicación."""

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ConfigurationError(PanelUsuariosError):
    """Valor de configuración inválido."""


class ValidationError(PanelUsuariosError):
    """Los datos del formulario no superan la validación local."""


class ApiError(PanelUsuariosError):
    """Fallo de una llamada remota (red, código HTTP o respuesta ilegible)."""

    def __init__(self, message: str, *, status: int | None = None, url: str | None = None) -> None:
        details: Dict[str, str] = {}
        if status is not None:
            details["status"] = str(status)
        if url:
            details["url"] = url
        super().__init__(message, details)
        self.status = status
        self.url = url


__all__ = ["PanelUsuariosError", "ConfigurationError", "ValidationError", "ApiError"]
