"""Webhook update handling: decode, build a reply, send it back."""

import logging
from typing import Optional, Union

from src.core.config import Settings, settings
from src.core.telegram import (
    DecodeError,
    TelegramClient,
    TransmissionError,
    decode_update,
)
from src.services.movie_finder.keywords import extract_keywords
from src.services.movie_finder.models import HandleResult
from src.services.movie_finder.service import MovieFinderService

logger = logging.getLogger(__name__)

GREETING_TEXT = (
    "Hey dude!\nGive me some keywords (comma delimited) to recommend you movies :D"
)

NO_KEYWORDS_TEXT = (
    "I couldn't find any keywords in that.\n"
    "Send me some keywords separated by commas, like: drama, heist"
)


class UpdateHandler:
    """Handles one Telegram update per call; keeps no state between calls."""

    START_COMMANDS = ("/start", "start")

    def __init__(
        self,
        config: Optional[Settings] = None,
        telegram: Optional[TelegramClient] = None,
        movie_finder: Optional[MovieFinderService] = None,
    ):
        self.config = config or settings
        self.telegram = telegram or TelegramClient(self.config)
        self.movie_finder = movie_finder or MovieFinderService(self.config)

    def is_start_command(self, text: str) -> bool:
        """Check if the message asks for the greeting."""
        return text.strip().lower() in self.START_COMMANDS

    async def build_reply(self, text: str) -> str:
        """
        Compute the reply for a lower-cased message text.

        A failed lookup yields an empty reply; the failure itself is logged
        by the movie finder.
        """
        if self.is_start_command(text):
            return GREETING_TEXT

        keywords = extract_keywords(text)
        if not keywords:
            return NO_KEYWORDS_TEXT

        result = await self.movie_finder.find_movies(keywords)
        return result.reply_text()

    async def handle(self, payload: Union[bytes, str]) -> HandleResult:
        """
        Process one webhook body.

        Args:
            payload: Raw request body

        Returns:
            HandleResult describing whether a reply went out
        """
        try:
            update = decode_update(payload)
        except DecodeError as e:
            logger.error(f"Error parsing incoming update: {e}")
            return HandleResult(status="ignored", error=str(e))

        logger.debug(f"Received update {update}")

        chat_id = update.message.chat.id
        reply_text = await self.build_reply(update.message.text.lower())

        try:
            response_body = await self.telegram.send_message(chat_id, reply_text)
        except TransmissionError as e:
            logger.error(f"Got error from telegram for chat {chat_id}: {e}")
            return HandleResult(
                status="failed", chat_id=chat_id, reply_text=reply_text, error=str(e)
            )

        logger.info(f"Successfully distributed to chat id {chat_id}")
        return HandleResult(
            status="sent",
            chat_id=chat_id,
            reply_text=reply_text,
            telegram_response=response_body,
        )


# Singleton instance
update_handler = UpdateHandler()
