"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
import json

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.pricing import GROCERY_CATEGORY

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url, params={"limit": 1})
        return response.is_success, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or type(exc).__name__


def _settings_from(ctx: typer.Context) -> AppSettings:
    state = ctx.obj
    return state.settings if state is not None else AppSettings()


@app.command()
def run(ctx: typer.Context) -> None:
    """Show the effective configuration and check connectivity to the catalog."""

    settings = _settings_from(ctx)

    table = Table(title="catalog-pricer Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Catalog base_url", "OK", settings.catalog_base_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Standard tax rate", "OK", f"{settings.standard_tax_rate:g}")
    for name, rate in sorted(settings.tax_table().category_rates.items()):
        table.add_row(f"Tax rate: {name}", "OK", f"{rate:g}")
    table.add_row("User config", "OK", str(get_user_env_file()))

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(f"{settings.catalog_base_url.rstrip('/')}/products", settings))
    table.add_row("Catalog connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        raise typer.Exit(code=1)


@app.command()
def setup(ctx: typer.Context) -> None:
    """Interactive setup (stores config in the user config .env)."""

    settings = _settings_from(ctx)

    base_url = typer.prompt("Catalog base URL", default=settings.catalog_base_url, show_default=True).strip()
    standard = typer.prompt("Standard tax rate (0..1)", default=settings.standard_tax_rate, type=float)
    grocery = typer.prompt(
        "Groceries tax rate (0..1)",
        default=settings.tax_table().rate_for(GROCERY_CATEGORY),
        type=float,
    )

    if not base_url:
        raise typer.BadParameter("base URL is required")
    for rate in (standard, grocery):
        if not 0.0 <= rate <= 1.0:
            raise typer.BadParameter("tax rates must be between 0 and 1")

    rates = dict(settings.category_tax_rates)
    rates[GROCERY_CATEGORY] = grocery
    encoded = json.dumps(rates, sort_keys=True)

    env_path = write_user_env_vars(
        {
            "CATALOG_PRICER_CATALOG_BASE_URL": base_url,
            "CATALOG_PRICER_STANDARD_TAX_RATE": str(standard),
            "CATALOG_PRICER_CATEGORY_TAX_RATES": encoded,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
