"""Tests for chat and Sunshine webhook schemas."""

import pytest
from pydantic import ValidationError

from app.constants.chat import AuthorType, ConversationType
from app.schemas.chat import (
    ConversationCreate,
    MessageContent,
    SendMessageRequest,
)
from app.schemas.sunshine import SunshineEvent, SunshineWebhookPayload


class TestSendMessageRequest:
    def test_text_only(self):
        request = SendMessageRequest(text="hi")
        assert request.text == "hi"
        assert request.content is None

    def test_structured_content_keeps_extra_fields(self):
        request = SendMessageRequest(
            content={"type": "image", "mediaUrl": "https://example.com/a.png"}
        )
        assert request.content.model_dump() == {
            "type": "image",
            "mediaUrl": "https://example.com/a.png",
        }

    def test_neither_text_nor_content(self):
        with pytest.raises(ValidationError):
            SendMessageRequest()

    def test_both_text_and_content(self):
        with pytest.raises(ValidationError):
            SendMessageRequest(text="a", content=MessageContent(type="text"))


def test_conversation_create_defaults():
    data = ConversationCreate()
    assert data.type == ConversationType.CUSTOMER
    assert data.customer_id is None
    assert data.metadata == {}


def test_author_type_values():
    assert {a.value for a in AuthorType} == {"staff", "customer", "system"}


class TestSunshineWebhookPayload:
    def test_message_event(self):
        event = SunshineEvent.model_validate(
            {
                "type": "conversation:message",
                "createdAt": "2026-01-01T00:00:00Z",
                "payload": {
                    "conversation": {"id": "ext-1"},
                    "message": {
                        "id": "m-1",
                        "author": {"type": "user", "userId": "u-1", "displayName": "Jo"},
                        "content": {"type": "text", "text": "hello"},
                    },
                },
            }
        )
        assert event.is_message
        assert event.payload.message.author.user_id == "u-1"
        assert event.payload.message.author.display_name == "Jo"

    def test_non_message_event(self):
        event = SunshineEvent.model_validate({"type": "conversation:read"})
        assert not event.is_message

    def test_message_event_without_message_body(self):
        event = SunshineEvent.model_validate(
            {"type": "conversation:message", "payload": {"conversation": {"id": "c"}}}
        )
        assert not event.is_message

    def test_empty_envelope(self):
        assert SunshineWebhookPayload.model_validate({}).events == []
