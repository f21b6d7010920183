"""Testes do webhook /webhook/whatsapp (handshake GET e envelope POST)."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.routes import create_api_router
from api.routes.whatsapp import webhook
from config.settings import WhatsAppSettings

URL = "/webhook/whatsapp/"

FLOW_ENVELOPE = {
    "object": "whatsapp_business_account",
    "entry": [
        {
            "changes": [
                {
                    "value": {
                        "messages": [
                            {
                                "id": "wamid.1",
                                "from": "33123456789",
                                "timestamp": "1717000000",
                                "interactive": {
                                    "type": "nfm_reply",
                                    "nfm_reply": {"response_json": '{"choice": "x"}'},
                                },
                            }
                        ]
                    }
                }
            ]
        }
    ],
}


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch, whatsapp_settings: WhatsAppSettings) -> TestClient:
    monkeypatch.setattr(webhook, "get_whatsapp_settings", lambda: whatsapp_settings)
    app = FastAPI()
    app.include_router(create_api_router())
    return TestClient(app)


def _handshake(token: str) -> dict[str, str]:
    return {"hub.mode": "subscribe", "hub.verify_token": token, "hub.challenge": "1158201444"}


def test_handshake_echoes_challenge(client: TestClient) -> None:
    response = client.get(URL, params=_handshake("verify-me"))

    assert response.status_code == 200
    assert response.text == "1158201444"
    assert response.headers["content-type"].startswith("text/plain")


def test_handshake_wrong_token(client: TestClient) -> None:
    response = client.get(URL, params=_handshake("wrong"))

    assert response.status_code == 403
    assert response.text == "Forbidden"


def test_handshake_without_configured_token(
    client: TestClient,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(webhook, "get_whatsapp_settings", lambda: WhatsAppSettings())

    response = client.get(URL, params=_handshake(""))

    assert response.status_code == 403


def test_post_returns_flow_result(client: TestClient) -> None:
    response = client.post(URL, json=FLOW_ENVELOPE, headers={"x-correlation-id": "corr-1"})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "received"
    assert body["correlation_id"] == "corr-1"
    assert body["flow"] == {
        "success": True,
        "messageId": "wamid.1",
        "from": "33123456789",
        "timestamp": "1717000000",
        "flowToken": '{"choice": "x"}',
        "flowData": {"choice": "x"},
    }


def test_post_uses_request_id_header(client: TestClient) -> None:
    response = client.post(URL, json={"entry": []}, headers={"x-request-id": "req-7"})

    assert response.json()["correlation_id"] == "req-7"


def test_post_without_message_generates_correlation_id(client: TestClient) -> None:
    body = client.post(URL, json={"entry": []}).json()

    assert len(body["correlation_id"]) == 32
    assert body["flow"]["success"] is False


def test_post_invalid_json(client: TestClient) -> None:
    response = client.post(
        URL,
        content=b"{invalid}",
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 400
    assert response.text == "Bad Request"
