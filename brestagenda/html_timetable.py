"""Render events as a static HTML timetable relative to today."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from pathlib import Path
from typing import Optional, Sequence

from brestagenda.config import MONTH_DAYS, WEEKDAYS
from brestagenda.models import DATE_FORMAT, Event

logger = logging.getLogger(__name__)


@dataclass
class TimetableEntry:
    """One event prepared for display."""

    link: str
    start: str
    end: str
    delta: int
    delta_str: str
    weekday: str
    title: str


@dataclass
class Timetable:
    """Entries split around today, each bucket sorted by delta."""

    before: list[TimetableEntry]
    after: list[TimetableEntry]

    @property
    def has_separator(self) -> bool:
        return bool(self.before) and bool(self.after)


def _escape_html(text: str) -> str:
    """Basic HTML escape."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )


def format_delta(days: int, month_days: int = MONTH_DAYS) -> str:
    """Format a signed day count: 15 -> '+15j', 45 -> '+1m', 0 -> ''."""
    if days == 0:
        return ""
    if abs(days) > month_days:
        months = abs(days) // month_days
        return f"{'-' if days < 0 else '+'}{months}m"
    return f"{days:+d}j"


def _weekday(day: date, weekdays: Sequence[str]) -> str:
    # isoweekday() is 1 for Monday .. 7 for Sunday; the table starts on Sunday.
    return weekdays[day.isoweekday() % 7]


def build_entry(
    event: Event,
    today: date,
    weekdays: Sequence[str] = WEEKDAYS,
    month_days: int = MONTH_DAYS,
) -> Optional[tuple[bool, TimetableEntry]]:
    """Classify *event* against *today*.

    Returns:
        ``(started, entry)`` where *started* is True for events that began
        before today, or None if the event is entirely in the past.
    """
    end_boundary = event.end_boundary
    if today >= end_boundary:
        return None

    started = event.start < today
    if started:
        # Count down to the day after the last one.
        rel_date = end_boundary
        delta = -(rel_date - today).days
    else:
        rel_date = event.start
        delta = (rel_date - today).days

    entry = TimetableEntry(
        link=event.link,
        start=event.start.strftime(DATE_FORMAT),
        end=(end_boundary - timedelta(days=1)).strftime(DATE_FORMAT),
        delta=delta,
        delta_str=format_delta(delta, month_days),
        weekday=_weekday(rel_date, weekdays),
        title=event.title,
    )
    return started, entry


def build_timetable(
    events: list[Event],
    today: date,
    weekdays: Sequence[str] = WEEKDAYS,
    month_days: int = MONTH_DAYS,
) -> Timetable:
    """Split *events* into started / upcoming entries, sorted by delta."""
    before: list[TimetableEntry] = []
    after: list[TimetableEntry] = []
    skipped = 0

    for event in events:
        result = build_entry(event, today, weekdays, month_days)
        if result is None:
            skipped += 1
            continue
        started, entry = result
        (before if started else after).append(entry)

    before.sort(key=lambda e: e.delta)
    after.sort(key=lambda e: e.delta)
    logger.debug(
        "Timetable for %s: %d started, %d upcoming, %d past skipped",
        today, len(before), len(after), skipped,
    )
    return Timetable(before=before, after=after)


def _render_row(entry: TimetableEntry) -> str:
    return f'''
    <tr>
        <td style="white-space:nowrap">{entry.start}</td>
        <td>→</td>
        <td style="white-space:nowrap">{entry.end}</td>
        <td>[{_escape_html(entry.weekday)}]</td>
        <td>{entry.delta_str}</td>
        <td><a href="{_escape_html(entry.link)}">{_escape_html(entry.title)}</a></td>
    </tr>'''


PAGE_HEAD = """<html>
<head>
    <meta charset="utf-8">
    <title>Agenda Brest</title>
    <style>
    a:link {
        text-decoration: none;
    }

    a:visited {
        text-decoration: none;
    }

    a:hover {
        text-decoration: underline;
    }

    a:active {
        text-decoration: underline;
    }
    </style>
</head>
<body>
<table>"""

PAGE_TAIL = """
</table>
</body>
</html>
"""


def render_timetable(
    events: list[Event],
    today: Optional[date] = None,
    weekdays: Sequence[str] = WEEKDAYS,
    month_days: int = MONTH_DAYS,
) -> str:
    """Render the timetable page for *events* as seen on *today*."""
    timetable = build_timetable(events, today or date.today(), weekdays, month_days)

    html_parts: list[str] = [PAGE_HEAD]
    html_parts.extend(_render_row(entry) for entry in timetable.before)
    if timetable.has_separator:
        html_parts.append('\n</table>\n<hr id="now">\n<table>')
    html_parts.extend(_render_row(entry) for entry in timetable.after)
    html_parts.append(PAGE_TAIL)
    return "".join(html_parts)


def write_timetable(
    events: list[Event],
    path: Path,
    today: Optional[date] = None,
    weekdays: Sequence[str] = WEEKDAYS,
    month_days: int = MONTH_DAYS,
) -> Path:
    """Render *events* and write the page to *path*, overwriting it."""
    html = render_timetable(events, today, weekdays, month_days)
    path = Path(path)
    path.write_text(html, encoding="utf-8")
    logger.info("Wrote %s (%d events)", path, len(events))
    return path
