"""
Messaging provider adapter interface.

Adapters hide the provider's transport and payload shapes from the core:
the dispatcher posts through `post_message`, the webhook command parses and
verifies through the other two methods.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from app.models.staff import Staff
from app.schemas.chat import MessageContent


class BaseProviderAdapter(ABC):
    """Contract for provider adapters."""

    @abstractmethod
    def post_message(
        self,
        external_conversation_id: str,
        content: MessageContent,
        staff: Optional[Staff] = None,
    ) -> str:
        """Post content to the external conversation. Return the provider message id.

        Raise ProviderError on failure; nothing is retried.
        """
        ...

    @abstractmethod
    def parse_webhook(self, raw_payload: dict[str, Any]) -> Any:
        """Parse a raw webhook body into the provider's envelope. Raise ValueError if invalid."""
        ...

    def verify_webhook(
        self, secret: Optional[str], request_headers: Optional[dict[str, str]] = None
    ) -> bool:
        """Return True if the request is authentic or no secret is configured."""
        return True
