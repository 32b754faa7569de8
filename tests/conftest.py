"""Fixtures compartidas de las pruebas del panel de usuarios."""

import os

import pytest

from fakes import FakeRepository, MemoryStore, make_user
from panel_usuarios.core.dashboard import DirectoryDashboard
from panel_usuarios.core.services import UserService
from panel_usuarios.core.state import DashboardState

# Debe definirse antes de crear cualquier QApplication.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def sample_users():
    return [
        make_user(1),
        make_user(2, "Ervin Howell", "Antonette", "shanna@melissa.tv", "Deckow-Crist"),
        make_user(3, "Clementine Bauch", "Samantha", "nathan@yesenia.net", "Romaguera-Jacobson"),
    ]


@pytest.fixture
def repository(sample_users):
    return FakeRepository(sample_users)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def dashboard(repository, store):
    return DirectoryDashboard(
        user_service=UserService(repository), state=DashboardState(), store=store
    )


@pytest.fixture
def valid_form():
    return {
        "name": "Chelsey Dietrich",
        "username": "Kamren",
        "email": "lucio_hettinger@annie.ca",
        "companyName": "Keebler LLC",
    }


@pytest.fixture(scope="session")
def qapp():
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
