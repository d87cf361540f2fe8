"""
Base command for Sunshine-related operations.

Provides a shared way to obtain a configured SunshineAdapter for the webhook
command and the staff-facing send path.
"""

from __future__ import annotations

from app.adapters.sunshine import SunshineAdapter
from app.config import get_settings


class BaseSunshineCommand:
    """
    Base for Sunshine-related commands.
    Provides a shared way to obtain a configured SunshineAdapter.
    """

    @staticmethod
    def get_sunshine_adapter() -> SunshineAdapter | None:
        """Return configured SunshineAdapter or None if the bridge is not configured."""
        settings = get_settings()
        if not settings.sunshine_enabled:
            return None
        return SunshineAdapter(
            app_id=settings.sunshine_app_id,
            key_id=settings.sunshine_api_key_id,
            key_secret=settings.sunshine_api_key_secret,
            api_url=settings.sunshine_api_url,
            app_name=settings.app_name,
            webhook_secret=settings.sunshine_webhook_secret,
            timeout=settings.provider_timeout_seconds,
        )
