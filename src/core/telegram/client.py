"""Telegram Bot API HTTP client."""

import logging
from typing import Optional

import httpx

from src.core.config import Settings, settings

logger = logging.getLogger(__name__)


class TransmissionError(Exception):
    """Exception raised when a Telegram API call cannot be completed."""

    pass


class TelegramClient:
    """HTTP client for the Telegram Bot API."""

    def __init__(
        self,
        config: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or settings
        self._transport = transport

    def _get_client(self) -> httpx.AsyncClient:
        """Create an async HTTP client for one API call."""
        return httpx.AsyncClient(
            transport=self._transport,
            timeout=self.config.http_timeout_seconds,
        )

    async def send_message(self, chat_id: int, text: str) -> str:
        """
        Send a text message to a chat.

        The call is not retried, and the HTTP status is only logged: any
        response whose body could be read counts as delivered.

        Args:
            chat_id: Destination chat
            text: Message content

        Returns:
            Raw response body from Telegram

        Raises:
            TransmissionError: If the request fails or its body can't be read
        """
        form = {"chat_id": str(chat_id), "text": text}

        try:
            async with self._get_client() as client:
                response = await client.post(self.config.send_message_url, data=form)
                body = response.text
        except httpx.HTTPError as e:
            logger.error(f"Error when posting text to chat {chat_id}: {e}")
            raise TransmissionError(f"Failed to send message to {chat_id}: {e}") from e

        if response.is_success:
            logger.debug(f"Body of the telegram response: {body}")
        else:
            logger.warning(
                f"Telegram answered {response.status_code} for chat {chat_id}: {body}"
            )

        return body

    async def check_health(self) -> bool:
        """
        Check if the bot token is accepted by Telegram.

        Returns:
            True if getMe answers 200, False otherwise
        """
        try:
            async with self._get_client() as client:
                response = await client.get(f"{self.config.bot_api_url}/getMe")
                return response.status_code == 200
        except httpx.HTTPError as e:
            logger.error(f"Telegram health check failed: {e}")
            return False


# Singleton instance for dependency injection
telegram_client = TelegramClient()
