"""CLI entry point for coingecko."""

import typer

from .api import app as api_app

app = typer.Typer(
    name="coingecko",
    help="CoinGecko market-data API client.",
    no_args_is_help=True,
)

# Register subcommands
app.add_typer(api_app, name="api", help="Query API endpoints")


if __name__ == "__main__":
    app()
