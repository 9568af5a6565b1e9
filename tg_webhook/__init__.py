"""Telegram webhook acknowledgment service."""

__version__ = "1.0.0"
