"""Punto de entrada de la aplicación.

Crea la configuración, los componentes de infraestructura, servicios y
estado, y arranca la interfaz gráfica principal.
"""

from __future__ import annotations

import logging
import sys

from PyQt6.QtWidgets import QApplication

from panel_usuarios.config import AppConfig, load_config
from panel_usuarios.core.dashboard import DirectoryDashboard
from panel_usuarios.core.services import UserService
from panel_usuarios.core.state import DashboardState
from panel_usuarios.errors import ConfigurationError
from panel_usuarios.infrastructure.api_client import APIClient
from panel_usuarios.infrastructure.repositories import UserRepository
from panel_usuarios.infrastructure.storage import LocalStore
from panel_usuarios.logging_config import setup_logging
from panel_usuarios.ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def build_dashboard(config: AppConfig, store: LocalStore | None = None) -> DirectoryDashboard:
    """Arma el controlador con sus dependencias y restaura el borrador del formulario."""

    repository = UserRepository(APIClient(config))
    user_service = UserService(repository)
    store = store or LocalStore.from_config(config)

    state = DashboardState()
    state.cargar_formulario(store.leer_formulario())
    return DirectoryDashboard(user_service=user_service, state=state, store=store)


def main() -> None:
    """Arranca la aplicación PyQt6 con las dependencias configuradas."""

    try:
        config = load_config()
    except ConfigurationError as exc:
        print(f"Configuración inválida: {exc}", file=sys.stderr)
        sys.exit(2)

    setup_logging(config.log_level_value, config.log_file)
    logger.info("Usando el servicio %s", config.users_url)

    app = QApplication(sys.argv)
    app.setStyle("Fusion")
    app.setOrganizationName(config.settings_org)
    app.setApplicationName(config.settings_app)

    window = MainWindow(dashboard=build_dashboard(config))
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":  # pragma: no cover - punto de entrada interactivo
    main()
