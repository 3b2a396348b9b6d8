"""Movie Finder Service - keyword movie recommendations over Telegram."""

from src.services.movie_finder.handler import UpdateHandler, update_handler
from src.services.movie_finder.router import router
from src.services.movie_finder.service import MovieFinderService, movie_finder

__all__ = [
    "MovieFinderService",
    "UpdateHandler",
    "movie_finder",
    "router",
    "update_handler",
]
