"""
Tests del aviso por webhook después de una reserva
"""
import json

import httpx

from canchas_api import config
from canchas_api.routers import reservas
from canchas_api.services import webhook

WEBHOOK_URL = "http://hooks.test/reservas"


def test_notify_reserva_envia_json():
    recibidos = []

    def handler(request):
        recibidos.append((str(request.url), json.loads(request.content)))
        return httpx.Response(200)

    ok = webhook.notify_reserva(
        {"id": 1, "cancha": "Pádel 1"},
        url=WEBHOOK_URL,
        transport=httpx.MockTransport(handler),
    )

    assert ok is True
    assert recibidos == [(WEBHOOK_URL, {"id": 1, "cancha": "Pádel 1"})]


def test_notify_reserva_sin_url_no_hace_nada():
    def handler(request):
        raise AssertionError("no debería llamarse")

    assert webhook.notify_reserva({"id": 1}, transport=httpx.MockTransport(handler)) is False


def test_notify_reserva_error_http_no_propaga():
    transport = httpx.MockTransport(lambda request: httpx.Response(500))
    assert webhook.notify_reserva({"id": 1}, url=WEBHOOK_URL, transport=transport) is False


def test_notify_reserva_error_de_conexion_no_propaga():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    transport = httpx.MockTransport(handler)
    assert webhook.notify_reserva({"id": 1}, url=WEBHOOK_URL, transport=transport) is False


def test_reserva_notifica_webhook(client, reserva_data, monkeypatch):
    """
    Test: Con WEBHOOK_URL configurado se envían todos los datos de la reserva
    """
    enviados = []
    monkeypatch.setattr(config, "WEBHOOK_URL", WEBHOOK_URL)
    monkeypatch.setattr(reservas, "notify_reserva", enviados.append)

    response = client.post("/reservar", json=reserva_data)

    assert response.status_code == 200
    assert enviados == [{"id": response.json()["id"], **reserva_data}]


def test_reserva_sin_webhook_configurado(client, reserva_data, monkeypatch):
    enviados = []
    monkeypatch.setattr(reservas, "notify_reserva", enviados.append)

    assert client.post("/reservar", json=reserva_data).status_code == 200
    assert enviados == []


def test_fallo_del_webhook_no_afecta_la_reserva(client, db, reserva_data, monkeypatch):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    transport = httpx.MockTransport(handler)
    monkeypatch.setattr(config, "WEBHOOK_URL", WEBHOOK_URL)
    monkeypatch.setattr(
        reservas,
        "notify_reserva",
        lambda payload: webhook.notify_reserva(payload, transport=transport),
    )

    response = client.post("/reservar", json=reserva_data)

    assert response.status_code == 200
    assert response.json()["ok"] is True
    response = client.get(
        "/disponibilidad", params={"cancha": "Pádel 1", "fecha": "2025-06-01"}
    )
    assert response.json() == {"ocupados": ["18:00"]}
