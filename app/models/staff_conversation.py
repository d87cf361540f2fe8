"""StaffConversation model: a staff member participating in a conversation."""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, UniqueConstraint

from app.db import Base
from app.models.mixins import TimestampMixin


class StaffConversation(Base, TimestampMixin):
    __tablename__ = "staff_conversations"

    __table_args__ = (
        UniqueConstraint(
            "staff_id", "conversation_id", name="uq_staff_conversations_staff_conversation"
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    staff_id = Column(
        Integer, ForeignKey("staff.id", ondelete="CASCADE"), nullable=False
    )
    conversation_id = Column(
        Integer, ForeignKey("conversations.id", ondelete="CASCADE"), nullable=False
    )
