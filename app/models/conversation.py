"""
Conversation model: one thread of messages.

`sunshine_conversation_id` is the provider's identity for the thread and the
key used by the reconciler. `customer_id` and `source` are fill-once.
"""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from app.constants.chat import ConversationType
from app.db import Base
from app.models.mixins import TimestampMixin
from app.models.types import JSONType


class Conversation(Base, TimestampMixin):
    __tablename__ = "conversations"
    __table_args__ = (
        Index("ix_conversations_updated_at_id", "updated_at", "id"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    sunshine_conversation_id = Column(String(255), unique=True, nullable=True)
    type = Column(String(32), nullable=False, default=ConversationType.CUSTOMER.value)
    customer_id = Column(
        Integer, ForeignKey("customers.id", ondelete="SET NULL"), nullable=True
    )
    source = Column(String(64), nullable=True)
    metadata_ = Column("metadata", JSONType, nullable=False, default=dict)

    customer = relationship("Customer")
    messages = relationship(
        "Message",
        back_populates="conversation",
        order_by="Message.created_at",
    )
