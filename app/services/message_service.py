"""
Message persistence.

Both writers of provider-originated messages, the outbound dispatcher and the
inbound webhook command, persist through `upsert_message`. The unique index on
`sunshine_message_id` decides which one creates the row; the other reads it.
"""

from __future__ import annotations

from typing import Optional, Tuple

from sqlalchemy.orm import Session

from app.models.message import Message
from app.schemas.chat import MessageCreate
from app.utils.db.upsert import insert_or_ignore


class MessageService:
    def __init__(self, db: Session) -> None:
        self.db = db

    def get_by_sunshine_id(self, sunshine_message_id: str) -> Optional[Message]:
        return (
            self.db.query(Message)
            .filter(Message.sunshine_message_id == sunshine_message_id)
            .first()
        )

    def create_message(self, data: MessageCreate) -> Message:
        """Insert a message with no provider identity."""
        dump = data.model_dump(mode="json")
        extra = dump.pop("metadata", None)
        msg = Message(metadata_=extra or {}, sunshine_message_id=None, **dump)
        self.db.add(msg)
        self.db.commit()
        self.db.refresh(msg)
        return msg

    def upsert_message(
        self, sunshine_message_id: Optional[str], data: MessageCreate
    ) -> Tuple[Message, bool]:
        """
        Create the message unless a row with this provider id already exists.
        Returns (message, created).

        An existing row wins and is returned untouched. A null id cannot
        collide with anything, so it goes straight to create.
        """
        if sunshine_message_id is None:
            return self.create_message(data), True
        dump = data.model_dump(mode="json")
        created = insert_or_ignore(
            self.db,
            Message,
            {**dump, "sunshine_message_id": sunshine_message_id},
            index_elements=["sunshine_message_id"],
        )
        return self.get_by_sunshine_id(sunshine_message_id), created
