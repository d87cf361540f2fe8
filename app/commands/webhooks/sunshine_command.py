"""
Command to handle Sunshine Conversations webhooks.

Validates the webhook secret, parses the event envelope and, for each
conversation:message event, upserts the customer, the conversation and the
message. The message goes through the same keyed upsert as outbound sends, so
an echo of a staff message never produces a second row.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from app.adapters.sunshine import STAFF_ID_METADATA_KEY, SunshineAdapter
from app.commands.base_sunshine import BaseSunshineCommand
from app.config import get_settings
from app.constants.chat import AuthorType, ConversationType
from app.models.message import Message
from app.schemas.chat import ConversationCreate, MessageCreate
from app.schemas.sunshine import SunshineEvent
from app.services.conversation_service import ConversationService
from app.services.customer_service import CustomerService
from app.services.message_service import MessageService

CUSTOMER_AUTHOR = "user"
BUSINESS_AUTHOR = "business"


class SunshineWebhookCommand(BaseSunshineCommand):
    """
    Command to handle Sunshine webhook deliveries.
    Validates X-API-Key, parses the payload, persists message events.
    """

    def __init__(
        self, db: Session, adapter: Optional[SunshineAdapter] = None
    ) -> None:
        self.db = db
        self.settings = get_settings()
        self._adapter = adapter or self.get_sunshine_adapter()
        self.customer_service = CustomerService(db)
        self.conversation_service = ConversationService(db)
        self.message_service = MessageService(db)
        self.logger = logging.getLogger(__name__)

    def execute(
        self, headers: dict[str, str], body: Any
    ) -> dict[str, Any]:
        """
        Execute the webhook: validate secret, parse body, persist message events.

        Args:
            headers: Request headers (for secret validation).
            body: Decoded JSON body.

        Returns:
            dict: {"status": "ok", "processed": <number of message events>}.

        Raises:
            HTTPException: 503 if Sunshine is not configured, 403 on invalid
                secret, 400 on an invalid payload.
        """
        if self._adapter is None:
            raise HTTPException(
                status_code=503,
                detail="Sunshine integration is not configured",
            )
        if not self._adapter.verify_webhook(
            self.settings.sunshine_webhook_secret, headers
        ):
            raise HTTPException(status_code=403, detail="Invalid webhook secret")
        if not isinstance(body, dict):
            raise HTTPException(status_code=400, detail="Body must be a JSON object")
        try:
            payload = self._adapter.parse_webhook(body)
        except ValueError as e:
            self.logger.warning("Sunshine webhook parse error: %s", e)
            raise HTTPException(
                status_code=400, detail="Invalid Sunshine webhook payload"
            ) from e

        processed = 0
        for event in payload.events:
            if not event.is_message:
                self.logger.debug("Ignoring Sunshine event type %s", event.type)
                continue
            self.process_message_event(event)
            processed += 1

        self.logger.info("Sunshine webhook processed %d message event(s)", processed)
        return {"status": "ok", "processed": processed}

    def process_message_event(self, event: SunshineEvent) -> Message:
        """Persist one conversation:message event. Safe to replay."""
        sunshine_conversation = event.payload.conversation
        sunshine_message = event.payload.message
        author = sunshine_message.author

        customer_id = None
        if author.type == CUSTOMER_AUTHOR and author.user_id:
            customer = self.customer_service.upsert_customer(
                author.user_id, author.display_name
            )
            customer_id = customer.id

        # business echoes report the API source, not the customer's channel
        source = None
        if author.type == CUSTOMER_AUTHOR and sunshine_message.source:
            source = sunshine_message.source.type
        conversation = self.conversation_service.upsert_conversation(
            sunshine_conversation.id,
            ConversationCreate(
                type=ConversationType.CUSTOMER,
                customer_id=customer_id,
                source=source,
            ),
        )

        author_type, author_id = self._resolve_author(
            author.type, customer_id, sunshine_message.metadata
        )
        message, created = self.message_service.upsert_message(
            sunshine_message.id,
            MessageCreate(
                conversation_id=conversation.id,
                content=sunshine_message.content,
                author_type=author_type,
                author_id=author_id,
                metadata=sunshine_message.metadata or {},
            ),
        )
        if not created:
            self.logger.info(
                "Sunshine message %s already stored, skipping", sunshine_message.id
            )
        return message

    @staticmethod
    def _resolve_author(
        author_type: str,
        customer_id: Optional[int],
        metadata: Optional[dict[str, Any]],
    ) -> tuple[AuthorType, Optional[int]]:
        """Customer messages belong to the customer; our own echoes to the staff member."""
        if author_type == CUSTOMER_AUTHOR:
            return AuthorType.CUSTOMER, customer_id
        staff_id = (metadata or {}).get(STAFF_ID_METADATA_KEY)
        if author_type == BUSINESS_AUTHOR and isinstance(staff_id, int):
            return AuthorType.STAFF, staff_id
        return AuthorType.SYSTEM, None
