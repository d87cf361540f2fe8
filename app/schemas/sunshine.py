"""
Sunshine Conversations webhook payload schemas.

Matches the v2 webhook body: an envelope with a list of events. Only the
fields the inbound write path reads are declared; everything else is kept.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

MESSAGE_EVENT_TYPE = "conversation:message"


class SunshineAuthor(BaseModel):
    """Message author. type is 'user' (customer) or 'business' (us)."""

    type: str
    user_id: Optional[str] = Field(None, alias="userId")
    display_name: Optional[str] = Field(None, alias="displayName")

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class SunshineSource(BaseModel):
    """Channel the message came through (whatsapp, messenger, web, ...)."""

    type: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class SunshineMessage(BaseModel):
    id: str
    author: SunshineAuthor
    content: dict[str, Any]
    source: Optional[SunshineSource] = None
    metadata: Optional[dict[str, Any]] = None
    received: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class SunshineConversationRef(BaseModel):
    id: str
    type: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class SunshineEventPayload(BaseModel):
    conversation: Optional[SunshineConversationRef] = None
    message: Optional[SunshineMessage] = None

    model_config = ConfigDict(extra="allow")


class SunshineEvent(BaseModel):
    id: Optional[str] = None
    type: str
    created_at: Optional[str] = Field(None, alias="createdAt")
    payload: SunshineEventPayload = Field(default_factory=SunshineEventPayload)

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @property
    def is_message(self) -> bool:
        return (
            self.type == MESSAGE_EVENT_TYPE
            and self.payload.conversation is not None
            and self.payload.message is not None
        )


class SunshineWebhookPayload(BaseModel):
    """Webhook body (root object)."""

    app: Optional[dict[str, Any]] = None
    webhook: Optional[dict[str, Any]] = None
    events: list[SunshineEvent] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")
