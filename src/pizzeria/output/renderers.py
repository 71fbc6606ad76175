"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pizzeria.output.console import create_console, get_output, style_for_status

if TYPE_CHECKING:
    from rich.console import Console

    from pizzeria.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if result.op == "list_orders" and isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items)

    if "id" in result.data:
        return str(result.data["id"])

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="pz.ok")
    op = Text(f"  {result.op}", style="pz.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="pz.key")
    if key == "id":
        v = Text(str(value), style="pz.id")
    elif key.endswith("status"):
        v = Text(str(value), style=style_for_status(str(value)))
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text.assemble(("  warning: ", "pz.warning"), warning))


def _menu_table(title: str, rows: list[dict[str, Any]], *, verbose: bool = False) -> Table:
    table = Table(title=title, show_header=True, pad_edge=False, expand=False)
    table.add_column("#", style="pz.id", no_wrap=True)
    table.add_column("Name", style="pz.name")
    table.add_column("Base", justify="right")
    table.add_column("Price", style="pz.price", justify="right")
    if verbose:
        table.add_column("Details", style="dim")
    for row in rows:
        cells = [
            str(row.get("number", "")),
            str(row.get("name", "")),
            f"${row.get('base_price', '')}",
            f"${row.get('price', '')}",
        ]
        if verbose:
            cells.append(str(row.get("description", "")))
        table.add_row(*cells)
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="pz.error")
    op = Text(f"  {result.op}", style="pz.op")
    console.print(label, op, Text(" — "), Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Menu renderers ────────────────────────────────────────────────────


def _render_menu(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    shop = (result.meta or {}).get("shop")
    if shop:
        console.print(Text(str(shop), style="pz.name"))
    sections = (
        ("Pizzas", "pizzas"),
        ("Drinks", "drinks"),
        ("Side Dishes", "side_dishes"),
    )
    for title, key in sections:
        console.print(_menu_table(title, result.data.get(key, []), verbose=verbose))


def _render_toppings(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(title="Available Toppings", show_header=True, pad_edge=False, expand=False)
    table.add_column("#", style="pz.id", no_wrap=True)
    table.add_column("Name", style="pz.name")
    table.add_column("Price", style="pz.price", justify="right")
    for item in result.data.get("items", []):
        table.add_row(str(item["number"]), str(item["name"]), f"${item['price']}")
    console.print(table)


# ── Order renderers ───────────────────────────────────────────────────


def _render_receipt(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render place_order / get_order as a receipt panel."""
    d = result.data
    if result.op == "place_order":
        _status_line(console, result)

    body = Text()
    body.append(f"type: {d.get('type', '')}\n", style="pz.key")
    status = str(d.get("status", ""))
    body.append("status: ", style="pz.key")
    body.append(f"{status}\n", style=style_for_status(status))

    items = d.get("items", [])
    if items:
        body.append("\n")
        for item in items:
            body.append(f"{item['description']}\n")
    else:
        body.append("\n(no items)\n", style="dim")

    if "delivery_address" in d:
        body.append(
            f"\nDelivery Address: {d['delivery_address']} | Fee: ${d.get('delivery_fee', '0.00')}\n"
        )
    body.append(f"\nTotal: ${d.get('total', '0.00')}", style="bold")

    customer = d.get("customer") or "guest"
    title = f"Order #{d.get('id', '?')} for {customer}"
    console.print(Panel(body, title=title, border_style="dim", expand=False))
    _warnings(console, result)


def _render_order_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="pz.id", no_wrap=True)
    table.add_column("Customer", style="pz.name")
    table.add_column("Type")
    table.add_column("Status")
    table.add_column("Items", justify="right")
    table.add_column("Total", style="pz.price", justify="right")
    for item in items:
        status = str(item.get("status", ""))
        table.add_row(
            str(item.get("id", "")),
            str(item.get("customer", "")),
            str(item.get("type", "")),
            Text(status, style=style_for_status(status)),
            str(item.get("items", 0)),
            f"${item.get('total', '0.00')}",
        )
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} orders")


def _render_status_change(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    for key in ("id", "previous_status", "status"):
        if key in result.data:
            _field(console, key, result.data[key])


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    _warnings(console, result)
    if verbose and result.meta:
        console.print(Text("  meta:", style="dim"))
        for k, v in result.meta.items():
            console.print(Text(f"    {k}: {v}"))


_OP_RENDERERS: dict[str, Any] = {
    # Menu
    "menu": _render_menu,
    "toppings": _render_toppings,
    # Orders
    "place_order": _render_receipt,
    "get_order": _render_receipt,
    "list_orders": _render_order_table,
    "update_status": _render_status_change,
}
