"""Tests for webhook routes."""

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.db import get_db
from app.models.conversation import Conversation
from app.models.customer import Customer
from app.models.message import Message


@pytest.fixture
def client_no_auth(db):
    """Client with db override (webhooks carry no staff principal)."""
    app = create_app(testing=True)

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def sunshine_env(monkeypatch):
    monkeypatch.setenv("SUNSHINE_APP_ID", "app-1")
    monkeypatch.setenv("SUNSHINE_API_KEY_ID", "key-id")
    monkeypatch.setenv("SUNSHINE_API_KEY_SECRET", "key-secret")
    monkeypatch.setenv("SUNSHINE_WEBHOOK_SECRET", "hook-secret")


HEADERS = {"X-API-Key": "hook-secret"}


def customer_message_payload(message_id="prov-1", conversation_id="ext-1"):
    return {
        "app": {"id": "app-1"},
        "webhook": {"id": "wh-1", "version": "v2"},
        "events": [
            {
                "id": "evt-1",
                "type": "conversation:message",
                "createdAt": "2026-01-01T00:00:00Z",
                "payload": {
                    "conversation": {"id": conversation_id, "type": "personal"},
                    "message": {
                        "id": message_id,
                        "received": "2026-01-01T00:00:00Z",
                        "author": {
                            "type": "user",
                            "userId": "user-1",
                            "displayName": "Jane Doe",
                        },
                        "content": {"type": "text", "text": "hello"},
                        "source": {"type": "whatsapp"},
                    },
                },
            }
        ],
    }


def test_sunshine_webhook_disabled(client_no_auth: TestClient, monkeypatch):
    for name in ("SUNSHINE_APP_ID", "SUNSHINE_API_KEY_ID", "SUNSHINE_API_KEY_SECRET"):
        monkeypatch.delenv(name, raising=False)
    resp = client_no_auth.post("/webhooks/sunshine", json=customer_message_payload())
    assert resp.status_code == 503


def test_sunshine_webhook_invalid_secret(client_no_auth: TestClient, sunshine_env):
    resp = client_no_auth.post(
        "/webhooks/sunshine",
        json=customer_message_payload(),
        headers={"X-API-Key": "wrong"},
    )
    assert resp.status_code == 403


def test_sunshine_webhook_invalid_payload(client_no_auth: TestClient, sunshine_env):
    resp = client_no_auth.post(
        "/webhooks/sunshine", json={"events": [{"payload": {}}]}, headers=HEADERS
    )
    assert resp.status_code == 400


def test_sunshine_webhook_invalid_json(client_no_auth: TestClient, sunshine_env):
    resp = client_no_auth.post(
        "/webhooks/sunshine",
        content=b"not json",
        headers={**HEADERS, "Content-Type": "application/json"},
    )
    assert resp.status_code == 400


def test_sunshine_webhook_persists_customer_message(
    client_no_auth: TestClient, sunshine_env, db
):
    resp = client_no_auth.post(
        "/webhooks/sunshine", json=customer_message_payload(), headers=HEADERS
    )
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "processed": 1}

    customer = db.query(Customer).filter(Customer.external_id == "user-1").one()
    assert customer.display_name == "Jane Doe"
    conversation = (
        db.query(Conversation)
        .filter(Conversation.sunshine_conversation_id == "ext-1")
        .one()
    )
    assert conversation.type == "customer"
    assert conversation.customer_id == customer.id
    assert conversation.source == "whatsapp"
    message = db.query(Message).filter(Message.sunshine_message_id == "prov-1").one()
    assert message.conversation_id == conversation.id
    assert message.author_type == "customer"
    assert message.author_id == customer.id
    assert message.content == {"type": "text", "text": "hello"}


def test_sunshine_webhook_redelivery_is_idempotent(
    client_no_auth: TestClient, sunshine_env, db
):
    for _ in range(2):
        resp = client_no_auth.post(
            "/webhooks/sunshine", json=customer_message_payload(), headers=HEADERS
        )
        assert resp.status_code == 200
    assert db.query(Message).count() == 1
    assert db.query(Conversation).count() == 1
    assert db.query(Customer).count() == 1


def test_sunshine_webhook_ignores_other_events(
    client_no_auth: TestClient, sunshine_env, db
):
    payload = {"events": [{"type": "conversation:read", "payload": {}}]}
    resp = client_no_auth.post("/webhooks/sunshine", json=payload, headers=HEADERS)
    assert resp.status_code == 200
    assert resp.json()["processed"] == 0
    assert db.query(Message).count() == 0


def test_business_echo_without_staff_is_system_message(
    client_no_auth: TestClient, sunshine_env, db
):
    payload = customer_message_payload()
    payload["events"][0]["payload"]["message"]["author"] = {
        "type": "business",
        "displayName": "Bot",
    }
    resp = client_no_auth.post("/webhooks/sunshine", json=payload, headers=HEADERS)
    assert resp.status_code == 200
    message = db.query(Message).one()
    assert message.author_type == "system"
    assert message.author_id is None
    assert db.query(Customer).count() == 0


def test_business_echo_does_not_set_conversation_source(
    client_no_auth: TestClient, sunshine_env, db
):
    echo = customer_message_payload(message_id="prov-echo")
    echo["events"][0]["payload"]["message"]["author"] = {
        "type": "business",
        "displayName": "StaffChat",
    }
    echo["events"][0]["payload"]["message"]["source"] = {"type": "api:conversations"}
    resp = client_no_auth.post("/webhooks/sunshine", json=echo, headers=HEADERS)
    assert resp.status_code == 200

    conversation = db.query(Conversation).one()
    assert conversation.source is None

    resp = client_no_auth.post(
        "/webhooks/sunshine", json=customer_message_payload(), headers=HEADERS
    )
    assert resp.status_code == 200
    db.refresh(conversation)
    assert conversation.source == "whatsapp"
    assert conversation.customer_id is not None
