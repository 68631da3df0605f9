import logging

from functools import cached_property
from pathlib import Path

import click

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.traceback import install as install_traceback

from sitelisting.grid import column_span
from sitelisting.listing import Listing
from sitelisting.reshaper import reshape_listing
from sitelisting.script import page_count, template_js_script
from sitelisting.sorting import compute_sorting_targets
from sitelisting.text import truncate_text
from sitelisting.yaml_io import ListingYAML


logger = logging.getLogger(__name__)

console = Console()
install_traceback(show_locals=False, word_wrap=True, console=console)


class Context:
    def __init__(self, log_level: str | None = None):
        self.log_level = log_level

    @cached_property
    def settings(self):
        """Return the settings for the current context."""
        from sitelisting.settings import get_settings
        return get_settings()

    def configure_logging(self) -> None:
        logging.basicConfig(
            level=self.log_level or self.settings.log_level,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
            force=True,
        )


LISTING_FILE = click.argument("listing_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))


@click.group()
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']), default=None, help='Override the configured log level.')
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """sitelisting: prepare document listings and their list.js bindings."""
    ctx.obj = Context(log_level)
    ctx.obj.configure_logging()


@cli.command()
@LISTING_FILE
@click.pass_obj
def reshape(ctx: Context, listing_file: Path) -> None:
    """Print the listing as its template sees it, with computed values."""
    listing = ListingYAML.load_listing(listing_file)
    click.echo(ListingYAML.dump_listing(reshape_listing(listing)), nl=False)


@cli.command()
@LISTING_FILE
@click.option('--items', 'item_count', type=click.IntRange(min=0), default=0, show_default=True, help='Number of items the listing renders.')
@click.option('--id', 'listing_id', default=None, help='Element id to bind to; defaults to the listing id.')
@click.pass_obj
def script(ctx: Context, listing_file: Path, item_count: int, listing_id: str | None) -> None:
    """Print the list.js script that makes the listing sortable and pageable."""
    listing = ListingYAML.load_listing(listing_file)
    if item_count > page_count(listing):
        logger.info("%d items exceed a page of %d, pagination enabled", item_count, page_count(listing))
    click.echo(template_js_script(listing_id or listing.id, listing, item_count))


@cli.command("sort-targets")
@LISTING_FILE
@click.pass_obj
def sort_targets(ctx: Context, listing_file: Path) -> None:
    """Show the identifier each column sorts on."""
    listing: Listing = ListingYAML.load_listing(listing_file)
    table = Table(title=f"Sort targets: {listing.id}")
    table.add_column("Column", style="cyan")
    table.add_column("Type")
    table.add_column("Linked")
    table.add_column("Sort target", style="green")
    for column, target in compute_sorting_targets(listing).items():
        table.add_row(column, listing.column_type(column).value, "yes" if listing.is_linked(column) else "", target)
    console.print(table)


@cli.command()
@click.argument("text")
@click.option('--length', type=click.IntRange(min=1), required=True, help='Maximum length including the ellipsis.')
def truncate(text: str, length: int) -> None:
    """Truncate TEXT the way listing descriptions are truncated."""
    click.echo(truncate_text(text, length))


@cli.command()
@click.argument("count", type=click.IntRange(min=1))
def span(count: int) -> None:
    """Show the card span a grid of COUNT columns uses."""
    click.echo(str(column_span(count)))


if __name__ == "__main__":
    cli()
