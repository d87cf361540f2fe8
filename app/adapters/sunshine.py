"""
Sunshine Conversations adapter.

Talks to the v2 REST API with basic auth (API key id / secret).
"""

from __future__ import annotations

from typing import Any, Optional

import requests
from pydantic import ValidationError

from app.adapters.base import BaseProviderAdapter
from app.exceptions import ProviderError
from app.infra.logging_config import get_logger
from app.models.staff import Staff
from app.schemas.chat import MessageContent
from app.schemas.sunshine import SunshineWebhookPayload

logger = get_logger("sunshine_adapter")

MESSAGES_PATH = "/v2/apps/{app_id}/conversations/{conversation_id}/messages"
BUSINESS_AUTHOR = "business"
STAFF_ID_METADATA_KEY = "staffId"
TIMEOUT_SECONDS = 30


class SunshineAdapter(BaseProviderAdapter):
    """Post messages to Sunshine and read its webhooks."""

    WEBHOOK_SECRET_HEADER = "X-API-Key"

    def __init__(
        self,
        app_id: str,
        key_id: str,
        key_secret: str,
        api_url: str = "https://api.smooch.io",
        app_name: str = "StaffChat",
        webhook_secret: Optional[str] = None,
        timeout: float = TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._app_id = app_id
        self._auth = (key_id, key_secret)
        self._api_url = api_url.rstrip("/")
        self._app_name = app_name
        self._webhook_secret = webhook_secret
        self._timeout = timeout
        self._session = session or requests.Session()

    def messages_url(self, conversation_id: str) -> str:
        path = MESSAGES_PATH.format(
            app_id=self._app_id, conversation_id=conversation_id
        )
        return f"{self._api_url}{path}"

    def build_message_body(
        self, content: MessageContent, staff: Optional[Staff] = None
    ) -> dict[str, Any]:
        body: dict[str, Any] = {
            "author": {"type": BUSINESS_AUTHOR, "displayName": self._app_name},
            "content": content.model_dump(mode="json"),
        }
        if staff is not None:
            # Echoed back in the webhook so the inbound path can attribute it
            body["metadata"] = {STAFF_ID_METADATA_KEY: staff.id}
        return body

    def post_message(
        self,
        external_conversation_id: str,
        content: MessageContent,
        staff: Optional[Staff] = None,
    ) -> str:
        url = self.messages_url(external_conversation_id)
        try:
            resp = self._session.post(
                url,
                json=self.build_message_body(content, staff),
                auth=self._auth,
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            raise ProviderError(f"Sunshine request failed: {e}") from e

        if resp.status_code >= 400:
            raise ProviderError(
                f"HTTP {resp.status_code}: {resp.text[:500] if resp.text else 'no body'}",
                status_code=resp.status_code,
            )

        try:
            messages = resp.json().get("messages") or []
            message_id = messages[0]["id"]
        except (ValueError, AttributeError, IndexError, KeyError, TypeError) as e:
            raise ProviderError(f"Unexpected Sunshine response: {e}") from e

        logger.info(
            "Posted message %s to Sunshine conversation %s",
            message_id,
            external_conversation_id,
        )
        return message_id

    def parse_webhook(self, raw_payload: dict[str, Any]) -> SunshineWebhookPayload:
        try:
            return SunshineWebhookPayload.model_validate(raw_payload)
        except ValidationError as e:
            raise ValueError(f"Invalid Sunshine webhook payload: {e}") from e

    def verify_webhook(
        self, secret: Optional[str], request_headers: Optional[dict[str, str]] = None
    ) -> bool:
        """Compare the X-API-Key header with the configured webhook secret."""
        expected = secret or self._webhook_secret
        if not expected:
            return True
        request_headers = request_headers or {}
        header_lower = self.WEBHOOK_SECRET_HEADER.lower()
        actual = None
        for key, value in request_headers.items():
            if key.lower() == header_lower:
                actual = value
                break
        return actual == expected
