"""Pruebas del cliente HTTP con ``urlopen`` reemplazado."""

import http.client
import json
import socket
from urllib.error import HTTPError, URLError

import pytest

from panel_usuarios.config import AppConfig
from panel_usuarios.errors import ApiError
from panel_usuarios.infrastructure import api_client
from panel_usuarios.infrastructure.api_client import APIClient
from panel_usuarios.infrastructure.repositories import UserRepository

BASE = "http://directorio.test"


class FakeResponse:
    def __init__(self, status=200, body=b""):
        self.status = status
        self._body = body

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


@pytest.fixture
def requests(monkeypatch):
    """Registra las peticiones y devuelve las respuestas encoladas."""

    enviadas = []
    respuestas = []

    def fake_urlopen(request, timeout):
        enviadas.append((request, timeout))
        respuesta = respuestas.pop(0)
        if isinstance(respuesta, Exception):
            raise respuesta
        return respuesta

    monkeypatch.setattr(api_client, "urlopen", fake_urlopen)
    return enviadas, respuestas


@pytest.fixture
def client():
    return APIClient(AppConfig(api_base=BASE + "/", timeout=3))


def test_get_users(client, requests):
    enviadas, respuestas = requests
    respuestas.append(FakeResponse(200, json.dumps([{"id": 1}]).encode()))

    assert client.obtener_usuarios() == [{"id": 1}]

    request, timeout = enviadas[0]
    assert request.get_method() == "GET"
    assert request.full_url == f"{BASE}/users"
    assert timeout == 3


def test_get_users_rejects_non_200(client, requests):
    _, respuestas = requests
    respuestas.append(FakeResponse(204, b""))

    with pytest.raises(ApiError) as excinfo:
        client.obtener_usuarios()

    assert excinfo.value.status == 204


def test_get_users_rejects_non_list(client, requests):
    _, respuestas = requests
    respuestas.append(FakeResponse(200, b'{"id": 1}'))

    with pytest.raises(ApiError, match="Formato inesperado"):
        client.obtener_usuarios()


def test_post_sends_json_body(client, requests):
    enviadas, respuestas = requests
    respuestas.append(FakeResponse(201, b'{"id": 11}'))
    datos = {"id": 4, "name": "N", "username": "u", "email": "a@b.co", "company": {"name": "C"}}

    assert client.crear_usuario(datos) is None

    request, _ = enviadas[0]
    assert request.get_method() == "POST"
    assert json.loads(request.data) == datos
    assert request.get_header("Content-type").startswith("application/json")


def test_put_and_delete_target_user_url(client, requests):
    enviadas, respuestas = requests
    respuestas.extend([FakeResponse(200, b"{}"), FakeResponse(200, b"{}")])

    client.actualizar_usuario(2, {"id": 2})
    client.eliminar_usuario(2)

    assert [(r.get_method(), r.full_url) for r, _ in enviadas] == [
        ("PUT", f"{BASE}/users/2"),
        ("DELETE", f"{BASE}/users/2"),
    ]


def test_http_error_message(client, requests):
    _, respuestas = requests
    respuestas.append(HTTPError(f"{BASE}/users/99", 404, "Not Found", None, None))

    with pytest.raises(ApiError) as excinfo:
        client.eliminar_usuario(99)

    assert str(excinfo.value) == "La solicitud falló con código 404"
    assert excinfo.value.status == 404
    assert excinfo.value.details["url"] == f"{BASE}/users/99"


def test_network_error_message(client, requests):
    _, respuestas = requests
    respuestas.append(URLError("connection refused"))

    with pytest.raises(ApiError, match="Error de red: connection refused"):
        client.obtener_usuarios()


def test_timeout_message(client, requests):
    _, respuestas = requests
    respuestas.append(URLError(socket.timeout("timed out")))

    with pytest.raises(ApiError, match="timeout"):
        client.obtener_usuarios()


def test_invalid_json(client, requests):
    _, respuestas = requests
    respuestas.append(FakeResponse(200, b"<html>"))

    with pytest.raises(ApiError, match="Respuesta inválida"):
        client.obtener_usuarios()


def test_repository_maps_records(client, requests):
    _, respuestas = requests
    payload = [
        {"id": 1, "name": "A", "username": "a", "email": "a@a.io", "company": {"name": "X"}},
        {"id": 2, "name": "B", "username": "b", "email": "b@b.io", "company": {"name": "Y"}},
    ]
    respuestas.append(FakeResponse(200, json.dumps(payload).encode()))

    usuarios = UserRepository(client).obtener_usuarios()

    assert [usuario.to_dict() for usuario in usuarios] == payload


def test_repository_rejects_malformed_record(client, requests):
    _, respuestas = requests
    respuestas.append(FakeResponse(200, b'[{"name": "sin id"}]'))

    with pytest.raises(ApiError, match="formato inesperado"):
        UserRepository(client).obtener_usuarios()


class TruncatedResponse(FakeResponse):
    def read(self):
        raise http.client.IncompleteRead(b"[{")


def test_non_utf8_body(client, requests):
    _, respuestas = requests
    respuestas.append(FakeResponse(200, b"\x80\x81 not utf8"))

    with pytest.raises(ApiError, match="Respuesta inválida"):
        client.obtener_usuarios()


def test_truncated_read(client, requests):
    _, respuestas = requests
    respuestas.append(TruncatedResponse(200))

    with pytest.raises(ApiError, match="Error de red"):
        client.obtener_usuarios()


def test_bad_status_line(client, requests):
    _, respuestas = requests
    respuestas.append(http.client.BadStatusLine("garbage"))

    with pytest.raises(ApiError, match="Error de red"):
        client.eliminar_usuario(1)


@pytest.mark.parametrize("body", [b"OK", b"<html>deleted</html>", b"\xff"])
def test_mutation_bodies_are_not_decoded(client, requests, body):
    _, respuestas = requests
    respuestas.extend([FakeResponse(200, body), FakeResponse(201, body), FakeResponse(200, body)])
    datos = {"id": 1}

    assert client.eliminar_usuario(1) is None
    assert client.crear_usuario(datos) is None
    assert client.actualizar_usuario(1, datos) is None
