"""
Staff-scoped access to conversations and messages.

An `Abilities` instance is built per authenticated staff member; every read
it performs is filtered through the conversation rules for that member and
every write is checked against them.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from app.constants.chat import MessageOrder
from app.exceptions import ForbiddenError
from app.models.conversation import Conversation
from app.models.message import Message
from app.models.staff import Staff
from app.models.staff_conversation import StaffConversation
from app.schemas.chat import MessageContent, TextContent
from app.services.abilities.helpers import compact, normalize_pages
from app.services.abilities.rules import (
    allowed_conversation_types,
    conversation_clauses,
    message_clauses,
)
from app.services.conversation_service import ConversationService
from app.services.message_dispatcher import MessageDispatcher


class Abilities:
    """Secure methods for one staff member; security rules are applied to every query."""

    def __init__(
        self,
        db: Session,
        staff: Staff,
        dispatcher: Optional[MessageDispatcher] = None,
    ) -> None:
        self.db = db
        self.staff = staff
        self.dispatcher = dispatcher or MessageDispatcher(db)
        self._conversation_svc = ConversationService(db)

    # --- CONVERSATIONS

    def get_conversations(
        self,
        type: Optional[str] = None,
        id: Optional[int] = None,
        customer_id: Optional[int] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Conversation]:
        """Conversations I'm entitled to see, most recently updated first."""
        pages = normalize_pages(limit, offset)
        filters = compact({"type": type, "id": id, "customer_id": customer_id})
        return (
            self.db.query(Conversation)
            .filter(*conversation_clauses(self.staff))
            .filter_by(**filters)
            .order_by(Conversation.updated_at.desc(), Conversation.id.desc())
            .offset(pages.offset)
            .limit(pages.limit)
            .all()
        )

    def get_conversation_by_id(self, conversation_id: int) -> Optional[Conversation]:
        """The conversation if I may see it; None whether it's missing or hidden."""
        found = self.get_conversations(id=conversation_id, offset=0, limit=1)
        return found[0] if found else None

    def add_to_conversation(
        self, conversation_id: int, staff: Staff
    ) -> StaffConversation:
        """Add `staff` to a conversation I can see and they are allowed to join."""
        conversation = self.get_conversation_by_id(conversation_id)
        if conversation is None:
            # I can't add someone to a conversation I don't have access to
            raise ForbiddenError("Conversation is not accessible")

        if conversation.type not in allowed_conversation_types(staff):
            # I can't add someone to a conversation they are not allowed to see
            raise ForbiddenError(
                f"Staff {staff.id} may not join {conversation.type} conversations"
            )

        return self._conversation_svc.ensure_staff_membership(
            staff.id, conversation_id
        )

    def join_conversation(self, conversation_id: int) -> StaffConversation:
        return self.add_to_conversation(conversation_id, self.staff)

    # --- MESSAGES

    def get_messages(
        self,
        conversation_id: Optional[int] = None,
        id: Optional[int] = None,
        order: MessageOrder | str = MessageOrder.DESC,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Message]:
        """Messages of conversations I'm entitled to see."""
        pages = normalize_pages(limit, offset)
        filters = compact({"id": id, "conversation_id": conversation_id})
        if MessageOrder(order) == MessageOrder.ASC:
            ordering = (Message.created_at.asc(), Message.id.asc())
        else:
            ordering = (Message.created_at.desc(), Message.id.desc())
        return (
            self.db.query(Message)
            .filter(*message_clauses(self.staff))
            .filter_by(**filters)
            .order_by(*ordering)
            .offset(pages.offset)
            .limit(pages.limit)
            .all()
        )

    def get_message_by_id(self, message_id: int) -> Optional[Message]:
        found = self.get_messages(id=message_id, offset=0, limit=1)
        return found[0] if found else None

    def send_message(self, conversation_id: int, content: MessageContent) -> Message:
        """Send a message as me. Sending implies joining the conversation."""
        conversation = self.get_conversation_by_id(conversation_id)
        if conversation is None:
            raise ForbiddenError("Conversation is not accessible")

        self.join_conversation(conversation_id)
        return self.dispatcher.dispatch(self.staff, conversation, content)

    def send_text_message(self, conversation_id: int, text: str) -> Message:
        return self.send_message(conversation_id, TextContent(text=text))
