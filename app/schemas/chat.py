"""Pydantic schemas for conversations, messages, customers and staff."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.constants.chat import AuthorType, ConversationType

# -----------------------------------------------------------------------------
# Message content
# -----------------------------------------------------------------------------


class MessageContent(BaseModel):
    """Structured message payload, forwarded as-is to the provider.

    Only `type` is required; provider-specific keys (mediaUrl, actions, ...)
    are kept as extra fields.
    """

    type: str

    model_config = ConfigDict(extra="allow")


class TextContent(MessageContent):
    """Plain text message payload."""

    type: Literal["text"] = "text"
    text: str


# -----------------------------------------------------------------------------
# Write payloads
# -----------------------------------------------------------------------------


class ConversationCreate(BaseModel):
    """Candidate conversation data for the reconciler.

    Only `customer_id` and `source` are applied to an existing row, and only
    while they are empty.
    """

    type: ConversationType = ConversationType.CUSTOMER
    customer_id: Optional[int] = None
    source: Optional[str] = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class MessageCreate(BaseModel):
    """Fields for a message row, minus the provider identity."""

    conversation_id: int
    content: dict[str, Any]
    author_type: AuthorType
    author_id: Optional[int] = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class SendMessageRequest(BaseModel):
    """Body of POST /conversations/{id}/messages: either text or content."""

    text: Optional[str] = None
    content: Optional[MessageContent] = None

    @model_validator(mode="after")
    def exactly_one_payload(self) -> "SendMessageRequest":
        if (self.text is None) == (self.content is None):
            raise ValueError("Provide exactly one of 'text' or 'content'")
        return self


# -----------------------------------------------------------------------------
# Read schemas
# -----------------------------------------------------------------------------


class ConversationRead(BaseModel):
    id: int
    sunshine_conversation_id: Optional[str] = None
    type: ConversationType
    customer_id: Optional[int] = None
    source: Optional[str] = None
    metadata: dict[str, Any] = Field(
        default_factory=dict, validation_alias="metadata_"
    )
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class MessageRead(BaseModel):
    id: int
    conversation_id: int
    content: dict[str, Any]
    author_type: AuthorType
    author_id: Optional[int] = None
    sunshine_message_id: Optional[str] = None
    metadata: dict[str, Any] = Field(
        default_factory=dict, validation_alias="metadata_"
    )
    created_at: datetime

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class StaffConversationRead(BaseModel):
    id: int
    staff_id: int
    conversation_id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CustomerRead(BaseModel):
    id: int
    external_id: Optional[str] = None
    display_name: Optional[str] = None
    metadata: dict[str, Any] = Field(
        default_factory=dict, validation_alias="metadata_"
    )
    created_at: datetime

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
