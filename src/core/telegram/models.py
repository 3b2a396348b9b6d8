"""Pydantic models for Telegram webhook updates."""

import logging
from typing import Union

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)


class DecodeError(ValueError):
    """Raised when an inbound payload is not a well-formed update."""

    pass


class InvalidUpdateIdError(DecodeError):
    """Raised when an update decodes with update_id 0."""

    pass


class Chat(BaseModel):
    """Conversation a message belongs to."""

    id: int = 0

    def __str__(self) -> str:
        return f"(id: {self.id})"


class Audio(BaseModel):
    """Audio file attached to a message."""

    file_id: str = ""
    duration: int = 0

    def __str__(self) -> str:
        return f"(file id: {self.file_id}, duration: {self.duration})"


class Voice(Audio):
    """Voice note; carries the same fields we read from an audio file."""

    pass


class Document(BaseModel):
    """Generic file attached to a message."""

    file_id: str = ""
    file_name: str = ""

    def __str__(self) -> str:
        return f"(file id: {self.file_id}, file name: {self.file_name})"


class Message(BaseModel):
    """Message content from an update."""

    text: str = ""
    chat: Chat = Chat()
    audio: Audio = Audio()
    voice: Voice = Voice()
    document: Document = Document()

    def __str__(self) -> str:
        return f"(text: {self.text}, chat: {self.chat}, audio {self.audio})"


class Update(BaseModel):
    """Telegram update delivered to the webhook on every user interaction."""

    update_id: int = 0
    message: Message = Message()

    def __str__(self) -> str:
        return f"(update id: {self.update_id}, message: {self.message})"


def decode_update(payload: Union[bytes, str]) -> Update:
    """
    Decode a raw webhook body into an Update.

    Args:
        payload: JSON-encoded update as received from Telegram

    Returns:
        The decoded Update

    Raises:
        DecodeError: If the payload is not JSON matching the update shape
        InvalidUpdateIdError: If the update id is 0
    """
    try:
        update = Update.model_validate_json(payload)
    except ValidationError as e:
        logger.error(f"Could not decode incoming update: {e}")
        raise DecodeError(f"Malformed update payload: {e}") from e

    if update.update_id == 0:
        logger.error("Invalid update id, got update id = 0")
        raise InvalidUpdateIdError(
            "Invalid update id. 0 indicates failure to parse incoming update"
        )

    return update
