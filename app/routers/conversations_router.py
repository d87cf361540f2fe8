"""Conversations API: list, get, join, messages, send."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.constants.chat import ConversationType, MessageOrder
from app.schemas.chat import (
    ConversationRead,
    MessageRead,
    SendMessageRequest,
    StaffConversationRead,
)
from app.routers.utils.dependencies import get_abilities
from app.services.abilities import Abilities

conversations_router = APIRouter(prefix="/conversations", tags=["Conversation"])
messages_router = APIRouter(prefix="/messages", tags=["Message"])


@conversations_router.get("", response_model=List[ConversationRead])
def list_conversations(
    type: Optional[ConversationType] = Query(None),
    customer_id: Optional[int] = Query(None),
    limit: Optional[int] = Query(None),
    offset: Optional[int] = Query(None),
    abilities: Abilities = Depends(get_abilities),
) -> List[ConversationRead]:
    """List conversations visible to the current staff member."""
    conversations = abilities.get_conversations(
        type=type, customer_id=customer_id, limit=limit, offset=offset
    )
    return [ConversationRead.model_validate(c) for c in conversations]


@conversations_router.get("/{conversation_id}", response_model=ConversationRead)
def get_conversation(
    conversation_id: int,
    abilities: Abilities = Depends(get_abilities),
) -> ConversationRead:
    conversation = abilities.get_conversation_by_id(conversation_id)
    if conversation is None:
        raise HTTPException(status_code=404, detail="Conversation not found")
    return ConversationRead.model_validate(conversation)


@conversations_router.get(
    "/{conversation_id}/messages", response_model=List[MessageRead]
)
def list_conversation_messages(
    conversation_id: int,
    order: MessageOrder = Query(MessageOrder.DESC),
    limit: Optional[int] = Query(None),
    offset: Optional[int] = Query(None),
    abilities: Abilities = Depends(get_abilities),
) -> List[MessageRead]:
    """List messages of a conversation; empty if the conversation is not visible."""
    messages = abilities.get_messages(
        conversation_id=conversation_id, order=order, limit=limit, offset=offset
    )
    return [MessageRead.model_validate(m) for m in messages]


@conversations_router.post(
    "/{conversation_id}/join", response_model=StaffConversationRead
)
def join_conversation(
    conversation_id: int,
    abilities: Abilities = Depends(get_abilities),
) -> StaffConversationRead:
    membership = abilities.join_conversation(conversation_id)
    return StaffConversationRead.model_validate(membership)


@conversations_router.post(
    "/{conversation_id}/messages", response_model=MessageRead, status_code=201
)
def send_message(
    conversation_id: int,
    body: SendMessageRequest,
    abilities: Abilities = Depends(get_abilities),
) -> MessageRead:
    """Send a message as the current staff member (joins the conversation)."""
    if body.text is not None:
        message = abilities.send_text_message(conversation_id, body.text)
    else:
        message = abilities.send_message(conversation_id, body.content)
    return MessageRead.model_validate(message)


@messages_router.get("/{message_id}", response_model=MessageRead)
def get_message(
    message_id: int,
    abilities: Abilities = Depends(get_abilities),
) -> MessageRead:
    message = abilities.get_message_by_id(message_id)
    if message is None:
        raise HTTPException(status_code=404, detail="Message not found")
    return MessageRead.model_validate(message)
