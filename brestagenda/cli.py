"""Command-line interface for brestagenda."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Optional

import click

from brestagenda.config import Config
from brestagenda.html_timetable import write_timetable
from brestagenda.scrapers import BrestAgendaScraper, ScrapeError
from brestagenda.store import EventStore

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(format=LOG_FORMAT, level=level)


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Crawl and reformat the brest.fr agenda."""
    _setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj.setdefault("config", Config())


@cli.command()
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--dump-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Optionally dump raw page content to this directory.",
)
@click.pass_context
def crawl(ctx: click.Context, path: Path, dump_dir: Optional[Path]) -> None:
    """Crawl the brest.fr agenda and write events to PATH as JSON."""
    config: Config = ctx.obj["config"]
    try:
        if dump_dir is not None:
            dump_dir.mkdir(parents=True, exist_ok=True)
            config.dump_dir = dump_dir
        events = BrestAgendaScraper(config).scrape()
        EventStore(path).save_events(events)
    except (ScrapeError, OSError) as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"Wrote {len(events)} event(s) to {path}")


@cli.command("format")
@click.argument("json_path", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def format_cmd(ctx: click.Context, json_path: Path, path: Path) -> None:
    """Write the events of JSON_PATH as an HTML timetable to PATH."""
    config: Config = ctx.obj["config"]
    try:
        events = EventStore(json_path).load_events()
        write_timetable(
            events,
            path,
            today=date.today(),
            weekdays=config.weekdays,
            month_days=config.month_days,
        )
    except (OSError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"Published: {path} ({len(events)} events)")
