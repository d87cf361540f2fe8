"""Message model: one row per logical message, immutable after creation."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from app.db import Base
from app.models.types import JSONType


class Message(Base):
    """
    A message inside a conversation.

    `sunshine_message_id` is unique when present: the store enforces at most
    one row per provider message, whichever writer gets there first.
    """

    __tablename__ = "messages"

    __table_args__ = (
        Index("ix_messages_conversation_created", "conversation_id", "created_at"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    conversation_id = Column(
        Integer,
        ForeignKey("conversations.id", ondelete="CASCADE"),
        nullable=False,
    )
    content = Column(JSONType, nullable=False)
    author_type = Column(String(16), nullable=False)  # 'staff' | 'customer' | 'system'
    author_id = Column(Integer, nullable=True)
    sunshine_message_id = Column(String(255), unique=True, nullable=True)
    metadata_ = Column("metadata", JSONType, nullable=False, default=dict)
    created_at = Column(
        DateTime, default=lambda: datetime.now(timezone.utc), nullable=False
    )

    conversation = relationship("Conversation", back_populates="messages")
