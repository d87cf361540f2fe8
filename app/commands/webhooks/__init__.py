"""Webhook commands for inbound provider events."""

from app.commands.webhooks.sunshine_command import SunshineWebhookCommand

__all__ = ["SunshineWebhookCommand"]
