"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- El redondeo a dos decimales ocurre solo aquí, al presentar.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import PricedProduct


def _money(value: float) -> str:
    return f"${value:.2f}"


def _percent(rate: float) -> str:
    return f"{rate * 100:g}%"


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("E-COMMERCE PRODUCT MANAGEMENT SYSTEM", style="bold cyan")
    subtitle = Text("Catálogo • Descuentos • Impuestos", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_pricing_table(products: list[PricedProduct], *, title: str = "Products") -> Table:
    """Tabla resumen: un producto por fila con su desglose de precio."""

    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True, justify="right")
    table.add_column("Title", style="white")
    table.add_column("Category", style="magenta")
    table.add_column("Price", justify="right")
    table.add_column("Discount", justify="right")
    table.add_column("Final", justify="right", style="green")
    table.add_column("Tax", justify="right")
    table.add_column("Total", justify="right", style="bold green")

    for item in products:
        p = item.product
        b = item.pricing
        table.add_row(
            str(p.id),
            p.title,
            p.category,
            _money(b.price),
            f"{b.discount_percentage:g}%",
            _money(b.final_price),
            f"{_money(b.tax_amount)} ({_percent(b.tax_rate)})",
            _money(b.total_with_tax),
        )
    return table


def build_product_panel(item: PricedProduct) -> Panel:
    """Ficha de un producto (detalle + desglose de precio)."""

    p = item.product
    b = item.pricing
    body = Text()
    body.append(f"ID: {p.id}\n")
    body.append(f"Brand: {p.brand or '-'}\n")
    body.append(f"Category: {p.category}\n")
    body.append(f"Description: {p.description}\n\n")
    body.append(f"Price: {_money(p.price)}\n")
    body.append(f"Discount: {p.discount_percentage:g}% (-{_money(b.discount_amount)})\n")
    body.append(f"Price After Discount: {_money(b.final_price)}\n", style="green")
    body.append(f"Tax ({_percent(b.tax_rate)}): {_money(b.tax_amount)}\n")
    body.append(f"Total With Tax: {_money(b.total_with_tax)}\n", style="bold green")
    body.append(f"\nRating: {p.rating}/5\n")
    body.append(f"Stock: {p.stock} units", style="dim")

    return Panel(body, title=Text(f"Product: {p.title}", style="bold yellow"), border_style="yellow")
