"""Pydantic models for the Movie Finder service."""

from typing import Optional

from pydantic import BaseModel


class MovieLookupResult(BaseModel):
    """Outcome of one scrape of the movie listing site."""

    keywords: list[str]
    search_url: str
    titles: list[str] = []
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def reply_text(self) -> str:
        """Titles as sent to the chat, each followed by a newline."""
        return "".join(f"{title}\n" for title in self.titles)


class HandleResult(BaseModel):
    """What happened to one inbound webhook call."""

    status: str  # "ignored", "sent" or "failed"
    chat_id: Optional[int] = None
    reply_text: Optional[str] = None
    error: Optional[str] = None
    telegram_response: Optional[str] = None


class SearchRequest(BaseModel):
    """Request model for a manual movie lookup."""

    keywords: str
    chat_id: Optional[int] = None  # If set, the result is also sent to this chat


class SearchResponse(BaseModel):
    """Response model for a manual movie lookup."""

    keywords: list[str]
    search_url: str
    titles: list[str]
    error: Optional[str] = None
    sent_to: Optional[int] = None
