"""Scraper package for the agenda listing."""

from brestagenda.scrapers.base import (
    BaseScraper,
    ExtractError,
    FetchError,
    NoEventsError,
    ScrapeError,
    ServerError,
)
from brestagenda.scrapers.brest import BrestAgendaScraper

__all__ = [
    "BaseScraper",
    "BrestAgendaScraper",
    "ExtractError",
    "FetchError",
    "NoEventsError",
    "ScrapeError",
    "ServerError",
]
