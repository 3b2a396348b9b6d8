"""Telegram Bot API wire layer."""

from src.core.telegram.client import TelegramClient, TransmissionError, telegram_client
from src.core.telegram.models import (
    DecodeError,
    InvalidUpdateIdError,
    Update,
    decode_update,
)

__all__ = [
    "DecodeError",
    "InvalidUpdateIdError",
    "TelegramClient",
    "TransmissionError",
    "Update",
    "decode_update",
    "telegram_client",
]
