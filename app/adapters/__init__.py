"""Messaging provider adapters."""

from app.adapters.base import BaseProviderAdapter
from app.adapters.sunshine import SunshineAdapter

__all__ = ["BaseProviderAdapter", "SunshineAdapter"]
