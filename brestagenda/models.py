"""Event data model."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Optional

DATE_FORMAT = "%Y-%m-%d"

# Zero timestamp written by older exports for single-day events.
ZERO_TIMESTAMP = "0001-01-01T00:00:00Z"


def parse_date(value: str) -> date:
    """Parse '2026-03-15' into a date.

    Raises:
        ValueError: if *value* is not a ``YYYY-MM-DD`` date.
    """
    return datetime.strptime(value.strip(), DATE_FORMAT).date()


def _json_text(data: dict, key: str) -> str:
    """String field of a JSON event; null and missing map to ''."""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key}: expected a string, got {value!r}")
    return value


def _parse_json_date(value: object, key: str) -> Optional[date]:
    """Parse a JSON ``Start``/``End`` value, accepting full timestamps."""
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{key}: expected a date string, got {value!r}")
    if not value or value == ZERO_TIMESTAMP:
        return None
    value = value.strip()
    if len(value) > 10:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    return parse_date(value)


@dataclass
class Event:
    """A single agenda entry."""

    title: str
    start: date
    end: Optional[date] = None  # None for single-day events
    description: str = ""
    category: str = ""
    link: str = ""  # Absolute URL of the detail page

    @property
    def last_day(self) -> date:
        """Last inclusive day of the event."""
        return self.end or self.start

    @property
    def end_boundary(self) -> date:
        """Day after the last inclusive day."""
        return self.last_day + timedelta(days=1)

    def to_dict(self) -> dict:
        """Serialize to the exported JSON object."""
        return {
            "Title": self.title,
            "Desc": self.description,
            "Category": self.category,
            "Link": self.link,
            "Start": self.start.strftime(DATE_FORMAT),
            "End": self.end.strftime(DATE_FORMAT) if self.end else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Event:
        """Deserialize from an exported JSON object."""
        if not isinstance(data, dict):
            raise ValueError(f"expected an event object, got {data!r}")
        title = _json_text(data, "Title")
        start = _parse_json_date(data.get("Start"), "Start")
        if start is None:
            raise ValueError(f"event {title!r} has no start date")
        return cls(
            title=title,
            start=start,
            end=_parse_json_date(data.get("End"), "End"),
            description=_json_text(data, "Desc"),
            category=_json_text(data, "Category"),
            link=_json_text(data, "Link"),
        )

    def __repr__(self) -> str:
        span = f"{self.start}..{self.end}" if self.end else str(self.start)
        return f"<Event '{self.title}' on {span}>"


@dataclass
class Page:
    """Extraction result for one listing page."""

    events: list[Event] = field(default_factory=list)
    next: str = ""  # Empty on the last page
