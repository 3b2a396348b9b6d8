"""FastAPI router for manual movie lookups."""

import logging

from fastapi import APIRouter, HTTPException

from src.core.telegram import TransmissionError, telegram_client
from src.services.movie_finder.keywords import extract_keywords
from src.services.movie_finder.models import SearchRequest, SearchResponse
from src.services.movie_finder.service import movie_finder

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/movie-finder", tags=["movie-finder"])


@router.post("/search", response_model=SearchResponse)
async def search_movies(request: SearchRequest) -> SearchResponse:
    """
    Look up movies for comma-delimited keywords.

    - Uses the same keyword rules and scrape as the webhook
    - If chat_id is provided, sends the title list to that chat
    """
    keywords = extract_keywords(request.keywords.lower())
    if not keywords:
        raise HTTPException(status_code=400, detail="No keywords given")

    result = await movie_finder.find_movies(keywords)

    sent_to = None
    if request.chat_id is not None:
        try:
            await telegram_client.send_message(request.chat_id, result.reply_text())
            sent_to = request.chat_id
        except TransmissionError as e:
            logger.error(f"Failed to send lookup result to {request.chat_id}: {e}")

    return SearchResponse(
        keywords=result.keywords,
        search_url=result.search_url,
        titles=result.titles,
        error=result.error,
        sent_to=sent_to,
    )
