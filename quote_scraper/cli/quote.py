"""Quote lookup CLI commands."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import orjson
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from quote_scraper.config import load_scraper_config
from quote_scraper.models.config import EngineConfig, ScraperConfig
from quote_scraper.models.stock import AttributeId, Stock
from quote_scraper.scraper import QuoteScraper
from quote_scraper.sources.registry import SOURCES


console = Console()
err_console = Console(stderr=True)

TickersArg = Annotated[
    Optional[list[str]],
    typer.Argument(help="TICKER or TICKER:EXCHANGE (e.g. GOOG:NASDAQ)", show_default=False),
]
ConfigOpt = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Config file (default: config/scraper.yaml if present)"),
]
WorkersOpt = Annotated[
    Optional[int],
    typer.Option("--workers", "-w", min=1, max=16, help="Sources fetched in parallel"),
]
VerboseOpt = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable verbose logging"),
]


def setup_logging(verbose: bool = False) -> None:
    """Setup logging with rich handler."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
    )


def _load_config(config_path: Path | None, workers: int | None) -> ScraperConfig:
    try:
        config = load_scraper_config(config_path)
    except (FileNotFoundError, ValidationError) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if workers is not None:
        config.engine = EngineConfig(max_workers=workers)
    return config


def _parse_stocks(tokens: list[str] | None) -> list[Stock]:
    if not tokens:
        err_console.print("[red]Error:[/red] No arguments were provided")
        raise typer.Exit(1)

    stocks = []
    for token in tokens:
        try:
            stocks.append(Stock.parse(token))
        except ValidationError:
            err_console.print(f"[red]Error:[/red] Invalid ticker: {escape(repr(token))}")
            raise typer.Exit(1)
    return stocks


def quote(
    tickers: TickersArg = None,
    config_path: ConfigOpt = None,
    workers: WorkersOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Print price and percent change for each ticker.

    Example:
        quote-scraper quote GOOG:NASDAQ MSFT
    """
    setup_logging(verbose)
    stocks = _parse_stocks(tickers)
    config = _load_config(config_path, workers)

    with QuoteScraper(config) as scraper:
        for stock in stocks:
            typer.echo(scraper.quote(stock))


def resolve(
    tickers: TickersArg = None,
    attributes: Annotated[
        Optional[list[AttributeId]],
        typer.Option("--attr", "-a", help="Attribute to resolve (repeatable, default: all)"),
    ] = None,
    config_path: ConfigOpt = None,
    workers: WorkersOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Print every requested attribute for each ticker as JSON."""
    setup_logging(verbose)
    stocks = _parse_stocks(tickers)
    config = _load_config(config_path, workers)

    with QuoteScraper(config) as scraper:
        for stock in stocks:
            resolution = scraper.resolve(stock, attributes or None)
            payload = {
                "ticker": stock.ticker,
                "exchange": stock.exchange,
                "attributes": {
                    attribute_id.value: result.to_dict()
                    for attribute_id, result in resolution.items()
                },
            }
            typer.echo(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode())


def list_sources() -> None:
    """List registered quote sources."""
    table = Table(title="Quote Sources")
    table.add_column("Source")
    table.add_column("Base URL")
    table.add_column("Needs exchange")
    table.add_column("Attributes")

    for source in SOURCES:
        table.add_row(
            source.name,
            source.base_url,
            "yes" if source.needs_exchange else "no",
            ", ".join(attribute_id.value for attribute_id in source.rules),
        )

    console.print(table)
