"""Pruebas de la carga de configuración."""

import logging

import pytest

from panel_usuarios.config import AppConfig, load_config
from panel_usuarios.errors import ConfigurationError


def test_defaults():
    config = load_config(environ={})

    assert config == AppConfig()
    assert config.users_url == "https://jsonplaceholder.typicode.com/users"
    assert config.log_level_value == logging.WARNING


def test_environment_overrides_defaults():
    config = load_config(
        environ={
            "PANEL_USUARIOS_API_BASE": "http://localhost:3000/",
            "PANEL_USUARIOS_TIMEOUT": "2.5",
            "PANEL_USUARIOS_LOG_LEVEL": "debug",
        }
    )

    assert config.users_url == "http://localhost:3000/users"
    assert config.timeout == 2.5
    assert config.log_level == "DEBUG"


def test_explicit_overrides_win_over_environment():
    config = load_config(
        environ={"PANEL_USUARIOS_TIMEOUT": "2"}, timeout=7, settings_path=None
    )

    assert config.timeout == 7.0
    assert config.settings_path is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"timeout": "abc"},
        {"timeout": 0},
        {"log_level": "verbose"},
        {"api_base": "  "},
        {"colour": "red"},
    ],
)
def test_invalid_values_raise(overrides):
    with pytest.raises(ConfigurationError):
        load_config(environ={}, **overrides)
