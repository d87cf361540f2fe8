"""
Outbound message dispatch.

Posts a staff message to the provider when the conversation is bridged, then
persists it through the keyed upsert shared with the inbound webhook. The
provider's webhook echo can land before this call persists; whichever write
reaches the upsert first creates the row and the other returns it.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from app.adapters.base import BaseProviderAdapter
from app.constants.chat import AuthorType, ConversationType
from app.infra.logging_config import get_logger
from app.models.conversation import Conversation
from app.models.message import Message
from app.models.staff import Staff
from app.schemas.chat import MessageContent, MessageCreate
from app.services.message_service import MessageService

logger = get_logger("message_dispatcher")


class MessageDispatcher:
    """Send-and-persist for staff-authored messages."""

    def __init__(
        self,
        db: Session,
        adapter: Optional[BaseProviderAdapter] = None,
        message_service: Optional[MessageService] = None,
    ) -> None:
        self.db = db
        self.adapter = adapter
        self.message_service = message_service or MessageService(db)

    def is_bridged(self, conversation: Conversation) -> bool:
        return (
            self.adapter is not None
            and conversation.type == ConversationType.CUSTOMER
        )

    def dispatch(
        self, staff: Staff, conversation: Conversation, content: MessageContent
    ) -> Message:
        """
        Persist `content` as a staff message in `conversation`.

        Access checks are the caller's job. Provider errors propagate and
        leave no local row behind.
        """
        unsaved = MessageCreate(
            conversation_id=conversation.id,
            content=content.model_dump(mode="json"),
            author_type=AuthorType.STAFF,
            author_id=staff.id,
            metadata={},
        )

        if not self.is_bridged(conversation):
            return self.message_service.create_message(unsaved)

        sunshine_message_id = None
        if conversation.sunshine_conversation_id:
            sunshine_message_id = self.adapter.post_message(
                conversation.sunshine_conversation_id, content, staff
            )

        message, created = self.message_service.upsert_message(
            sunshine_message_id, unsaved
        )
        if not created:
            logger.info(
                "Message %s was already stored by the webhook path",
                sunshine_message_id,
            )
        return message
