"""Conversation reconciliation and staff membership."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from app.models.conversation import Conversation
from app.models.staff_conversation import StaffConversation
from app.schemas.chat import ConversationCreate
from app.utils.db.upsert import insert_or_ignore

logger = logging.getLogger(__name__)


class ConversationService:
    """Create-or-fetch conversations keyed by the provider's conversation id."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def get_by_sunshine_id(
        self, sunshine_conversation_id: str
    ) -> Optional[Conversation]:
        return (
            self.db.query(Conversation)
            .filter(Conversation.sunshine_conversation_id == sunshine_conversation_id)
            .first()
        )

    def upsert_conversation(
        self, sunshine_conversation_id: str, data: ConversationCreate
    ) -> Conversation:
        """
        Create the conversation if it doesn't exist yet, then fill-once.

        On an existing row only `customer_id` and `source` may change, and only
        from empty to a value. The follow-up update is a separate statement:
        a concurrent caller may fill the same field first, which is harmless
        since these fields never go back to empty.
        """
        insert_or_ignore(
            self.db,
            Conversation,
            {
                "sunshine_conversation_id": sunshine_conversation_id,
                "type": data.type.value,
                "customer_id": data.customer_id,
                "source": data.source,
                "metadata": data.metadata,
            },
            index_elements=["sunshine_conversation_id"],
        )
        conversation = self.get_by_sunshine_id(sunshine_conversation_id)

        update: Dict[str, Any] = {}
        if conversation.customer_id is None and data.customer_id is not None:
            update["customer_id"] = data.customer_id
        if not conversation.source and isinstance(data.source, str) and data.source:
            update["source"] = data.source

        if update:
            logger.debug(
                "Filling conversation %s fields %s", conversation.id, sorted(update)
            )
            for key, value in update.items():
                setattr(conversation, key, value)
            self.db.commit()
            self.db.refresh(conversation)
        return conversation

    def ensure_staff_membership(
        self, staff_id: int, conversation_id: int
    ) -> StaffConversation:
        """Idempotently record that a staff member joined a conversation."""
        insert_or_ignore(
            self.db,
            StaffConversation,
            {"staff_id": staff_id, "conversation_id": conversation_id},
            index_elements=["staff_id", "conversation_id"],
        )
        return (
            self.db.query(StaffConversation)
            .filter(
                StaffConversation.staff_id == staff_id,
                StaffConversation.conversation_id == conversation_id,
            )
            .one()
        )
