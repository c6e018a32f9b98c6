"""Scraper for the brest.fr municipal agenda."""

from __future__ import annotations

import logging
from datetime import date

from bs4 import BeautifulSoup, Tag

from brestagenda.models import Event, Page, parse_date
from brestagenda.scrapers.base import (
    BaseScraper,
    ExtractError,
    FetchError,
    NoEventsError,
    ServerError,
)

logger = logging.getLogger(__name__)

ITEM_SELECTOR = "article.listItem"
TITLE_SELECTOR = "h3.title"
DESC_SELECTOR = "div.chapeau"
CATEGORY_SELECTOR = 'p[class="category"]'
LINK_SELECTOR = 'a[class="linkView"]'
DATES_SELECTOR = 'p[class="date"] time'
NEXT_SELECTOR = 'link[rel~="next"]'


def _parse_datetime_attr(node: Tag, item_title: str) -> date:
    value = node.get("datetime") or ""
    try:
        return parse_date(value)
    except ValueError as exc:
        raise ExtractError(f"event {item_title!r}: invalid date {value!r}") from exc


def _parse_item(item: Tag, base_url: str) -> Event:
    """Convert one ``listItem`` article into an Event."""
    title = BaseScraper.text_of(item.select_one(TITLE_SELECTOR))

    link = ""
    anchor = item.select_one(LINK_SELECTOR)
    href = anchor.get("href") if anchor is not None else None
    if href:
        try:
            link = BaseScraper.absolute_url(base_url, href)
        except ValueError as exc:
            raise ExtractError(f"event {title!r}: invalid link {href!r}: {exc}") from exc

    dates = item.select(DATES_SELECTOR)
    if not dates:
        raise ExtractError(f"event {title!r}: missing start date")
    start = _parse_datetime_attr(dates[0], title)
    end = None
    if len(dates) > 1 and dates[1].get("datetime"):
        end = _parse_datetime_attr(dates[1], title)

    return Event(
        title=title,
        start=start,
        end=end,
        description=BaseScraper.text_of(item.select_one(DESC_SELECTOR)),
        category=BaseScraper.text_of(item.select_one(CATEGORY_SELECTOR)),
        link=link,
    )


def extract_events(soup: BeautifulSoup, base_url: str) -> list[Event]:
    """Extract every listed event of *soup*, in document order.

    Raises:
        ExtractError: if any item has a missing or malformed start date, or
            a malformed end date. No events of the page are returned then.
    """
    return [_parse_item(item, base_url) for item in soup.select(ITEM_SELECTOR)]


def extract_next(soup: BeautifulSoup) -> str:
    """Return the ``rel=next`` href of the document, or '' on the last page."""
    node = soup.select_one(NEXT_SELECTOR)
    if node is None:
        return ""
    return (node.get("href") or "").strip()


def extract_page(soup: BeautifulSoup, base_url: str) -> Page:
    """Extract events and the next page reference of one listing page."""
    return Page(events=extract_events(soup, base_url), next=extract_next(soup))


class BrestAgendaScraper(BaseScraper):
    """Scrapes the agenda listing at https://www.brest.fr/actus-agenda/.

    Listing pages hold ``<article class="listItem">`` entries and link to the
    following page with ``<link rel="next">``. One page of the upstream
    pagination consistently answers HTTP 500; the crawl stops there and
    keeps what it already has.
    """

    name = "brest"

    def _scrape_impl(self) -> list[Event]:
        base_url = self.config.base_url
        events: list[Event] = []
        path = self.config.start_path
        pages = 0

        while path:
            try:
                url = self.absolute_url(base_url, path)
            except ValueError as exc:
                raise FetchError(f"invalid page address {path!r}: {exc}") from exc
            try:
                resp = self.fetch(url)
            except ServerError:
                logger.warning("%s: %s answered 500, stopping crawl", self.name, url)
                break

            soup = BeautifulSoup(resp.text, "html.parser")
            page = extract_page(soup, base_url)
            logger.debug("%s: %d event(s) on %s", self.name, len(page.events), url)
            events.extend(page.events)
            pages += 1
            path = page.next

        if not events:
            raise NoEventsError("no event found")

        logger.info(
            "%s: scraped %d event(s) across %d page(s)",
            self.name, len(events), pages,
        )
        return events
