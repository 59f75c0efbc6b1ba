"""CLI entry point for quote-scraper."""

import typer

from .quote import list_sources, quote, resolve

app = typer.Typer(
    name="quote-scraper",
    help="Best-effort stock quotes scraped from several public sites.",
    no_args_is_help=True,
)

# Register commands
app.command("quote")(quote)
app.command("resolve")(resolve)
app.command("sources")(list_sources)


if __name__ == "__main__":
    app()
