"""TCG Search CLI.

Commands:
- games: List games available as search filters
- search: Search cards and show the cheapest variant with price changes
- web serve: Run the FastAPI web UI
"""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from tcgsearch.config import get_config
from tcgsearch.core.logging import configure_logging
from tcgsearch.formatting import ChangeCategory, present_cards
from tcgsearch.integration.justtcg_client import JustTCGClient

app = typer.Typer(
    name="tcgsearch",
    help="TCG Search - card price lookup over the JustTCG API",
    no_args_is_help=True,
)
web_cli = typer.Typer(help="Web UI")
app.add_typer(web_cli, name="web")

console = Console()

_CHANGE_COLOURS = {
    ChangeCategory.POSITIVE: "green",
    ChangeCategory.NEGATIVE: "red",
    ChangeCategory.FLAT: "white",
    ChangeCategory.UNKNOWN: "dim",
}


@app.callback()
def main() -> None:
    configure_logging(get_config())


@app.command()
def games():
    """List games available as search filters."""
    config = get_config()

    async def _games():
        async with JustTCGClient.from_config(config) as client:
            return await client.get_games()

    results = asyncio.run(_games())
    if not results:
        console.print("[yellow]No games returned[/yellow]")
        raise typer.Exit(code=1)

    table = Table(title="Games")
    table.add_column("Slug", style="cyan")
    table.add_column("Name")
    for game in results:
        table.add_row(game.slug, game.name)
    console.print(table)


@app.command()
def search(
    query: str = typer.Argument(..., help="Card name, set, or keyword"),
    game: str | None = typer.Option(None, "--game", "-g", help="Game slug filter"),
):
    """Search cards and show the cheapest variant with price changes."""
    config = get_config()

    async def _search():
        async with JustTCGClient.from_config(config) as client:
            return await client.search_cards(query, game)

    cards = present_cards(asyncio.run(_search()), config.tcgplayer_product_url)
    if not cards:
        console.print(f"[yellow]No cards found for[/yellow] {query!r}")
        raise typer.Exit(code=1)

    table = Table(title=f"Results for {query!r}")
    table.add_column("Name", style="bold", no_wrap=True)
    table.add_column("Set • Number • Rarity")
    table.add_column("Variant")
    table.add_column("Price", justify="right", no_wrap=True)
    for label in ("24h", "7d", "30d"):
        table.add_column(label, justify="right", no_wrap=True)

    for card in cards:
        changes = [
            f"[{_CHANGE_COLOURS[badge.category]}]{badge.text}[/]"
            for badge in card.changes
        ]
        table.add_row(card.name, card.details, card.variant_label, card.price, *changes)
    console.print(table)


@web_cli.command("serve")
def web_serve(
    host: str = typer.Option("0.0.0.0", help="Host to bind"),
    port: int = typer.Option(8000, help="Port to bind"),
    reload: bool = typer.Option(False, help="Enable autoreload (dev only)"),
):
    """Run FastAPI-powered web UI."""
    import uvicorn

    typer.echo(f"Starting web UI on http://{host}:{port}")
    uvicorn.run("tcgsearch.web.app:app", host=host, port=port, reload=reload, workers=1)
