#!/usr/bin/env python3
"""twextract command line interface."""
from __future__ import annotations

import json
import sys

import rich_click as click
from rich.console import Console
from rich.table import Table
from rich_click import RichCommand, RichGroup

from twextract import __version__
from twextract.core.config import INDEX_UNITS, ConfigurationError, load_config, setup_logging
from twextract.core.logging import LogContext
from twextract.extraction import Extractor
from twextract.extraction.pattern_cache import get_cache_stats
from twextract.extraction.regex_patterns import PATTERN_NAMES, require_patterns

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.USE_MARKDOWN = False
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.SHOW_METAVARS_COLUMN = False
click.rich_click.APPEND_METAVARS_HELP = True
click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
click.rich_click.ERRORS_SUGGESTION = "Try running the '--help' flag for more information."

logger = setup_logging(__name__, include_console=False)

KINDS = ("entities", "hashtags", "cashtags", "urls", "mentions", "lists", "reply", "all")


def _entities_for_kind(extractor: Extractor, kind: str):
    if kind == "entities":
        return extractor.extract_entities_with_indices()
    if kind == "hashtags":
        return extractor.extract_hashtags_with_indices()
    if kind == "cashtags":
        return extractor.extract_cashtags_with_indices()
    if kind == "urls":
        return extractor.extract_urls_with_indices()
    if kind == "mentions":
        return extractor.extract_mentioned_screen_names_with_indices()
    return extractor.extract_mentions_or_lists_with_indices()


def _print_table(entities, title: str) -> None:
    console = Console()
    if not entities:
        console.print(f"[dim]No {title} found[/dim]")
        return

    table = Table(title=title)
    table.add_column("Type", style="cyan")
    table.add_column("Text", style="green")
    table.add_column("List", style="magenta")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    for entity in entities:
        table.add_row(
            entity.type.value,
            entity.text,
            entity.list_slug or "",
            str(entity.start),
            str(entity.end),
        )
    console.print(table)


@click.group(cls=RichGroup, context_settings={"help_option_names": ["-h", "--help"], "max_content_width": 120})
@click.version_option(version=__version__, prog_name="twextract")
def main():
    """[bold color(6)]twextract[/bold color(6)] - hashtags, cashtags, URLs and @mentions from tweets

    \b
    [green]   twextract extract "Hello #world"             [/green] [italic]# Every entity, overlaps resolved[/italic]
    [green]   twextract extract --kind urls --json -       [/green] [italic]# URLs from stdin as JSON[/italic]
    [green]   twextract patterns                           [/green] [italic]# Pattern catalog and cache state[/italic]
    """


@main.command(cls=RichCommand)
@click.argument("text")
@click.option(
    "--kind",
    type=click.Choice(KINDS),
    default="entities",
    show_default=True,
    help="Entity kind to extract; 'all' prints every kind at once",
)
@click.option("--no-bare-urls", is_flag=True, help="Only extract URLs that carry a protocol")
@click.option("--index-unit", type=click.Choice(INDEX_UNITS), default=None, help="Unit for reported offsets")
@click.option("--json", "as_json", is_flag=True, help="Output results as JSON")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a twextract.jsonc config file",
)
def extract(text, kind, no_bare_urls, index_unit, as_json, config_path):
    """Extract entities from TEXT ('-' reads standard input)"""
    if text == "-":
        text = sys.stdin.read()

    try:
        config = load_config(config_path)
        changes = {}
        if no_bare_urls:
            changes["allow_url_without_protocol"] = False
        if index_unit:
            changes["index_unit"] = index_unit
        if changes:
            config = config.evolve(**changes)
        extractor = Extractor(text, config)
    except ConfigurationError as e:
        raise click.UsageError(str(e)) from e

    with LogContext(command="extract", kind=kind):
        if kind == "all":
            click.echo(json.dumps(extractor.extract(), ensure_ascii=False, indent=2))
            return

        if kind == "reply":
            reply = extractor.extract_reply_screen_name()
            if as_json:
                click.echo(json.dumps({"replyto": reply}))
            elif reply is None:
                Console().print("[dim]Not a reply[/dim]")
            else:
                click.echo(reply)
            return

        entities = _entities_for_kind(extractor, kind)
        logger.debug(f"Extracted {len(entities)} entities")
        if as_json:
            include_slug = kind in ("entities", "lists")
            payload = [entity.to_dict(include_list_slug=include_slug) for entity in entities]
            click.echo(json.dumps(payload, ensure_ascii=False))
        else:
            _print_table(entities, kind)


@main.command(cls=RichCommand)
@click.option("--json", "as_json", is_flag=True, help="Output results as JSON")
def patterns(as_json):
    """List the pattern catalog and cache statistics"""
    try:
        require_patterns(*PATTERN_NAMES)
    except ConfigurationError as e:
        raise click.UsageError(str(e)) from e

    stats = get_cache_stats()
    if as_json:
        click.echo(json.dumps({"patterns": list(PATTERN_NAMES), "cache": stats}))
        return

    console = Console()
    table = Table(title="Pattern catalog")
    table.add_column("Name", style="cyan")
    for name in PATTERN_NAMES:
        table.add_row(name)
    console.print(table)
    console.print(
        f"Cache: {int(stats['size'])} compiled, {int(stats['hits'])} hits, "
        f"{int(stats['misses'])} misses, hit ratio {stats['hit_ratio']:.2f}"
    )


if __name__ == "__main__":
    main()
