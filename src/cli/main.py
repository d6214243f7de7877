"""CLI principal (Typer + Rich).

Comandos:
- list / show / category / search: consultan el catálogo y muestran precios.
- doctor: diagnóstico de configuración y conectividad.

La CLI es el único punto que captura errores: pinta una línea por
categoría y termina con código 1.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

import typer
from pydantic import ValidationError
from pydantic_settings import SettingsError
from rich.console import Console
from rich.logging import RichHandler

from adapters.catalog_client import CatalogClient
from adapters.json_exporter import export_priced_json
from cli import doctor
from cli.errors import report_error
from cli.ui_components import build_pricing_table, build_product_panel, print_banner
from core.config import AppSettings
from core.services.pricing_pipeline import CatalogQuery, PipelineResult, QueryKind, run_pricing

app = typer.Typer(
    no_args_is_help=True,
    help="Fetch products from a remote catalog and show discount and tax pricing.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


@dataclass
class CliState:
    settings: AppSettings
    banner: bool = True


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    base_url: str | None = typer.Option(
        None,
        "--base-url",
        help="Override the catalog base URL.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
) -> None:
    try:
        settings = AppSettings()
    except (ValidationError, SettingsError) as exc:
        report_error(_err_console, exc)
        raise typer.Exit(code=1) from exc
    if base_url:
        settings = settings.model_copy(update={"catalog_base_url": base_url})
    _configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = CliState(settings=settings, banner=not no_banner)


def _execute(ctx: typer.Context, query: CatalogQuery, export_json: Path | None) -> None:
    state: CliState = ctx.obj
    if state.banner:
        print_banner(_console)
        _console.print("\nFetching products from API...\n")

    try:
        result = asyncio.run(
            run_pricing(
                query,
                source=CatalogClient(state.settings),
                tax_table=state.settings.tax_table(),
            )
        )
    except Exception as exc:
        report_error(_err_console, exc)
        raise typer.Exit(code=1) from exc

    _render(result)

    if export_json is not None:
        try:
            path = export_priced_json(products=result.products, output_path=export_json)
        except OSError as exc:
            report_error(_err_console, exc)
            raise typer.Exit(code=1) from exc
        _console.print(f"[green]Exported JSON:[/green] {path}")


def _render(result: PipelineResult) -> None:
    if result.query.kind is QueryKind.BY_ID:
        for item in result.products:
            _console.print(build_product_panel(item))
        return

    _console.print(f"Successfully fetched {len(result.products)} products\n")
    if result.products:
        _console.print(build_pricing_table(result.products))
        _console.print(f"\nGrand total (with tax): ${result.total_with_tax:.2f}")


def _resolve_limit(ctx: typer.Context, limit: int | None) -> int:
    return limit if limit is not None else ctx.obj.settings.default_limit


_LIMIT_OPTION = typer.Option(None, "--limit", "-n", min=1, max=100, help="Maximum number of products.")
_EXPORT_OPTION = typer.Option(None, "--export-json", help="Write the priced products to a JSON file.")


@app.command("list")
def list_products(
    ctx: typer.Context,
    limit: int | None = _LIMIT_OPTION,
    export_json: Path | None = _EXPORT_OPTION,
) -> None:
    """List products from the default catalog endpoint."""

    _execute(ctx, CatalogQuery(kind=QueryKind.ALL, limit=_resolve_limit(ctx, limit)), export_json)


@app.command()
def show(
    ctx: typer.Context,
    product_id: int = typer.Argument(..., min=1, help="Product identifier."),
    export_json: Path | None = _EXPORT_OPTION,
) -> None:
    """Show one product with its full price breakdown."""

    _execute(ctx, CatalogQuery(kind=QueryKind.BY_ID, value=product_id), export_json)


@app.command()
def category(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Catalog category (e.g. 'groceries')."),
    limit: int | None = _LIMIT_OPTION,
    export_json: Path | None = _EXPORT_OPTION,
) -> None:
    """List products of one category."""

    query = CatalogQuery(kind=QueryKind.CATEGORY, value=name, limit=_resolve_limit(ctx, limit))
    _execute(ctx, query, export_json)


@app.command()
def search(
    ctx: typer.Context,
    query_text: str = typer.Argument(..., metavar="QUERY", help="Free-text search."),
    limit: int | None = _LIMIT_OPTION,
    export_json: Path | None = _EXPORT_OPTION,
) -> None:
    """Search products by keyword."""

    query = CatalogQuery(kind=QueryKind.SEARCH, value=query_text, limit=_resolve_limit(ctx, limit))
    _execute(ctx, query, export_json)


def run() -> None:
    app()
