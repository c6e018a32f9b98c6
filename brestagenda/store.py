"""JSON-backed event store."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from brestagenda.models import Event

logger = logging.getLogger(__name__)


class EventStore:
    """Reads and writes a flat JSON array of events.

    File layout::

        [
          {"Title": ..., "Desc": ..., "Category": ..., "Link": ...,
           "Start": "2026-03-15", "End": null},
          ...
        ]
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load_events(self) -> list[Event]:
        """Load all events from disk, in file order."""
        with open(self.path, "r", encoding="utf-8") as f:
            raw = json.load(f)
        if not isinstance(raw, list):
            raise ValueError(f"{self.path}: expected a JSON array of events")
        events = []
        for index, item in enumerate(raw):
            if not isinstance(item, dict):
                raise ValueError(f"{self.path}: entry {index} is not an event object")
            try:
                events.append(Event.from_dict(item))
            except ValueError as exc:
                raise ValueError(f"{self.path}: entry {index}: {exc}") from exc
        logger.debug("Loaded %d event(s) from %s", len(events), self.path)
        return events

    def save_events(self, events: list[Event]) -> None:
        """Write events to disk, overwriting any existing file.

        Order is preserved as given.
        """
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump([e.to_dict() for e in events], f, indent=2, ensure_ascii=False)
        logger.info("Wrote %s (%d events)", self.path, len(events))
