"""
Webhook routes for inbound provider events.

Sunshine POSTs event envelopes here; we verify, persist, and return 200.
Webhooks do not carry a staff principal.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from app.commands.webhooks.sunshine_command import SunshineWebhookCommand
from app.db import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/webhooks", tags=["webhooks"])


@router.post("/sunshine")
async def sunshine_webhook(
    request: Request,
    db: Session = Depends(get_db),
) -> dict[str, Any]:
    """Receive Sunshine webhook events. Verify X-API-Key if SUNSHINE_WEBHOOK_SECRET is set."""
    try:
        body = await request.json()
    except Exception as e:
        logger.warning("Sunshine webhook invalid JSON: %s", e)
        raise HTTPException(status_code=400, detail="Invalid JSON body") from e
    headers = dict(request.headers) if request.headers else {}
    command = SunshineWebhookCommand(db)
    return command.execute(headers, body)
