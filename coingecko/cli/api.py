"""API query CLI commands."""

import logging
import re
from collections.abc import Callable
from datetime import date, datetime
from typing import Annotated, Any, Optional

import orjson
import typer
from pydantic import BaseModel, TypeAdapter
from rich.console import Console
from rich.logging import RichHandler

from coingecko.client import ENDPOINTS, CoinGeckoApiError, CoinGeckoClient
from coingecko.config import load_config
from coingecko.models.config import ClientConfig
from coingecko.models.params import MarketsOrder, OhlcDays


app = typer.Typer(help="Query the CoinGecko API")
console = Console()

_ANY = TypeAdapter(Any)

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_DATETIME_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T")

HostOption = Annotated[
    Optional[str],
    typer.Option("--host", help="API base URL (default: from config or public host)"),
]
ApiKeyOption = Annotated[
    Optional[str],
    typer.Option("--api-key", envvar="COINGECKO_API_KEY", help="Pro API key"),
]
VerboseOption = Annotated[
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
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def build_config(host: str | None, api_key: str | None) -> ClientConfig:
    """Load coingecko.yaml when present, then apply CLI overrides."""
    try:
        config = ClientConfig.from_yaml(load_config("coingecko"))
    except FileNotFoundError:
        config = ClientConfig()
    return config.with_overrides(host=host, api_key=api_key)


def print_result(result: Any) -> None:
    """Render a response model (or list/dict of them) as JSON."""
    if isinstance(result, BaseModel):
        data = result.model_dump(mode="json")
    else:
        data = _ANY.dump_python(result, mode="json")
    console.print_json(orjson.dumps(data).decode())


def run(
    call: Callable[[CoinGeckoClient], Any],
    host: str | None,
    api_key: str | None,
    verbose: bool,
) -> None:
    """Execute one API call and print its result, exiting 1 on API errors."""
    setup_logging(verbose)
    logger = logging.getLogger(__name__)
    config = build_config(host, api_key)

    try:
        with CoinGeckoClient(config) as client:
            result = call(client)
    except CoinGeckoApiError as e:
        console.print(f"[red]Error:[/red] {e}")
        logger.debug("Request failed", exc_info=True)
        raise typer.Exit(1)

    print_result(result)


def _split(values: str) -> list[str]:
    return [v.strip() for v in values.split(",") if v.strip()]


def _parse_arg(value: str) -> Any:
    """Interpret a key=value CLI argument: booleans, ISO dates and datetimes, lists."""
    if value in ("true", "false"):
        return value == "true"
    if _DATE_RE.match(value):
        return date.fromisoformat(value)
    if _DATETIME_RE.match(value):
        return datetime.fromisoformat(value)
    if "," in value:
        return _split(value)
    return value


@app.command("ping")
def ping(host: HostOption = None, api_key: ApiKeyOption = None, verbose: VerboseOption = False) -> None:
    """Check API server status."""
    run(lambda client: client.ping(), host, api_key, verbose)


@app.command("price")
def price(
    ids: Annotated[str, typer.Argument(help="Comma-separated coin ids, e.g. bitcoin,ethereum")],
    vs_currencies: Annotated[
        str, typer.Option("--vs", help="Comma-separated target currencies")
    ] = "usd",
    market_cap: Annotated[bool, typer.Option("--market-cap", help="Include market cap")] = False,
    volume: Annotated[bool, typer.Option("--volume", help="Include 24h volume")] = False,
    change: Annotated[bool, typer.Option("--change", help="Include 24h change")] = False,
    last_updated: Annotated[bool, typer.Option("--last-updated", help="Include last update time")] = False,
    host: HostOption = None,
    api_key: ApiKeyOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Get current coin prices.

    Example:
        coingecko api price bitcoin,ethereum --vs usd,eur --change
    """
    run(
        lambda client: client.price(
            _split(ids), _split(vs_currencies), market_cap, volume, change, last_updated
        ),
        host,
        api_key,
        verbose,
    )


@app.command("markets")
def markets(
    vs_currency: Annotated[str, typer.Option("--vs", help="Target currency")] = "usd",
    category: Annotated[Optional[str], typer.Option("--category", "-c", help="Category filter")] = None,
    order: Annotated[MarketsOrder, typer.Option("--order", help="Sort order")] = MarketsOrder.MARKET_CAP_DESC,
    per_page: Annotated[int, typer.Option("--per-page", "-p", help="Rows per page")] = 10,
    page: Annotated[int, typer.Option("--page", help="Page number")] = 1,
    host: HostOption = None,
    api_key: ApiKeyOption = None,
    verbose: VerboseOption = False,
) -> None:
    """List coins with market data."""
    run(
        lambda client: client.coins_markets(
            vs_currency, category=category, order=order, per_page=per_page, page=page
        ),
        host,
        api_key,
        verbose,
    )


@app.command("ohlc")
def ohlc(
    coin_id: Annotated[str, typer.Argument(help="Coin id")],
    vs_currency: Annotated[str, typer.Option("--vs", help="Target currency")] = "usd",
    days: Annotated[int, typer.Option("--days", "-d", help="1, 7, 14, 30, 90, 180 or 365")] = 1,
    host: HostOption = None,
    api_key: ApiKeyOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Get OHLC candles for a coin."""
    try:
        window = OhlcDays(days)
    except ValueError:
        console.print(f"[red]Error:[/red] Unsupported days value: {days}")
        console.print(f"Supported values: {', '.join(str(d.value) for d in OhlcDays)}")
        raise typer.Exit(1)

    run(lambda client: client.coin_ohlc(coin_id, vs_currency, window), host, api_key, verbose)


@app.command("chart")
def chart(
    coin_id: Annotated[str, typer.Argument(help="Coin id")],
    vs_currency: Annotated[str, typer.Option("--vs", help="Target currency")] = "usd",
    days: Annotated[str, typer.Option("--days", "-d", help="Days back, or 'max'")] = "1",
    daily: Annotated[bool, typer.Option("--daily", help="One data point per day")] = False,
    host: HostOption = None,
    api_key: ApiKeyOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Get historical market chart data for a coin."""
    run(
        lambda client: client.coin_market_chart(coin_id, vs_currency, days, daily),
        host,
        api_key,
        verbose,
    )


@app.command("trending")
def trending(host: HostOption = None, api_key: ApiKeyOption = None, verbose: VerboseOption = False) -> None:
    """Show trending coins."""
    run(lambda client: client.trending(), host, api_key, verbose)


@app.command("global")
def global_data(host: HostOption = None, api_key: ApiKeyOption = None, verbose: VerboseOption = False) -> None:
    """Show global market data."""
    run(lambda client: client.global_data(), host, api_key, verbose)


@app.command("url")
def show_url(
    operation: Annotated[str, typer.Argument(help="Operation name, e.g. ping, coin_ohlc")],
    args: Annotated[
        Optional[list[str]],
        typer.Argument(help="key=value arguments; lists are comma-separated"),
    ] = None,
    host: HostOption = None,
    api_key: ApiKeyOption = None,
) -> None:
    """Print the request URL for an operation without sending it.

    Example:
        coingecko api url coin_ohlc id=bitcoin vs_currency=usd days=7
    """
    if operation not in ENDPOINTS:
        console.print(f"[red]Error:[/red] Unknown operation: {operation}")
        console.print(f"Known operations: {', '.join(sorted(ENDPOINTS))}")
        raise typer.Exit(1)

    kwargs: dict[str, Any] = {}
    for item in args or []:
        key, sep, value = item.partition("=")
        if not sep:
            console.print(f"[red]Error:[/red] Expected key=value, got: {item}")
            raise typer.Exit(1)
        kwargs[key] = _parse_arg(value)

    client = CoinGeckoClient(build_config(host, api_key))
    try:
        url = client.request_url(operation, **kwargs)
    except (KeyError, TypeError) as e:
        console.print(f"[red]Error:[/red] Missing argument for {operation}: {e}")
        raise typer.Exit(1)

    console.print(url, soft_wrap=True, highlight=False, markup=False)


if __name__ == "__main__":
    app()
