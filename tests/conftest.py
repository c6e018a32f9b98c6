"""Shared fixtures: synthetic agenda listing pages."""

from __future__ import annotations

from typing import Optional

import pytest

BASE_URL = "https://www.brest.fr"


def listing_item(
    title: str,
    start: str,
    end: Optional[str] = None,
    href: Optional[str] = "/evt/1.html",
    desc: Optional[str] = "Une description",
    category: Optional[str] = "Concert",
) -> str:
    """Build one ``<article class="listItem">`` block."""
    parts = ['<article class="listItem clearfix">']
    if href is not None:
        parts.append(f'<a class="linkView" href="{href}">')
    parts.append(f'<h3 class="title">\n  {title}  \n</h3>')
    if href is not None:
        parts.append("</a>")
    if category is not None:
        parts.append(f'<p class="category"> {category} </p>')
    if desc is not None:
        parts.append(f'<div class="chapeau">\n{desc}\n</div>')
    dates = f'<time datetime="{start}">{start}</time>'
    if end is not None:
        dates += f' au <time datetime="{end}">{end}</time>'
    parts.append(f'<p class="date">{dates}</p>')
    parts.append("</article>")
    return "\n".join(parts)


def listing_page(items: list[str], next_href: Optional[str] = None) -> str:
    """Wrap items into a full listing document."""
    head = '<meta charset="utf-8"><title>Agenda</title>'
    if next_href is not None:
        head += f'<link rel="next" href="{next_href}">'
    body = "\n".join(items)
    return f"<html><head>{head}</head><body><section>{body}</section></body></html>"


@pytest.fixture
def base_url() -> str:
    return BASE_URL
