"""CLI entrypoint for the BPQ helper."""

from __future__ import annotations

import logging

import typer
from rich import print
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bpq_helper.catalog import CatalogError, ensure_valid, load_catalog, validate_catalog
from bpq_helper.config import settings
from bpq_helper.matching import FIELD_COUNT
from bpq_helper.models import ShelfCatalog
from bpq_helper.presentation import HelperView, order_color, preview_viewbox
from bpq_helper.session import QuerySession

app = typer.Typer(help="Match Butler PQ riddle fragments to bookshelves")
console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    data_file: str = typer.Option(None, help="JSON file with regions and riddles (defaults to bundled data)"),
) -> None:
    logging.basicConfig(level=settings.log_level)
    ctx.obj = {"data_file": data_file or settings.data_file}


def _load(ctx: typer.Context, *, check: bool = True) -> ShelfCatalog:
    data_file = (ctx.obj or {}).get("data_file")
    try:
        catalog = load_catalog(data_file)
        return ensure_valid(catalog) if check else catalog
    except CatalogError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)


def _render(view: HelperView) -> None:
    fields = Table(title="Riddle fields")
    fields.add_column("#", justify="right")
    fields.add_column("Text")
    fields.add_column("Result")
    fields.add_column("Preview")
    for report in view.fields:
        fields.add_row(str(report.order), escape(report.query), report.feedback, escape(report.preview_status))
    console.print(fields)

    active = view.active_shelves()
    if not active:
        console.print("[dim]No shelves highlighted.[/dim]")
        return

    shelves = Table(title="Highlighted shelves")
    shelves.add_column("Shelf")
    shelves.add_column("Label")
    shelves.add_column("Badges")
    for shelf in active:
        badges = " ".join(f"[bold {order_color(order)}]{order}[/]" for order in shelf.orders)
        shelves.add_row(f"[{shelf.color}]{escape(shelf.region.id)}[/]", escape(shelf.region.label), badges)
    console.print(shelves)


@app.command()
def match(
    ctx: typer.Context,
    queries: list[str] = typer.Argument(None, help=f"Up to {FIELD_COUNT} riddle fragments, one per field"),
) -> None:
    """Show which shelves each riddle fragment points to."""
    queries = list(queries or [])
    if len(queries) > FIELD_COUNT:
        raise typer.BadParameter(f"At most {FIELD_COUNT} riddle fragments are supported, got {len(queries)}")

    session = QuerySession(_load(ctx))
    for order, text in enumerate(queries, start=1):
        session.set_field(order, text)
    _render(session.view())


@app.command()
def shelves(ctx: typer.Context) -> None:
    """List the shelves in the loaded catalog."""
    catalog = _load(ctx)
    table = Table(title="Shelves")
    table.add_column("Id")
    table.add_column("Label")
    table.add_column("Rect (%)")
    table.add_column("Rect (px)")
    for region in catalog.regions:
        px = preview_viewbox(region)
        table.add_row(
            escape(region.id),
            escape(region.label),
            f"{region.x:g},{region.y:g} {region.width:g}x{region.height:g}",
            f"{px[0]:.0f},{px[1]:.0f} {px[2]:.0f}x{px[3]:.0f}",
        )
    console.print(table)


@app.command()
def validate(ctx: typer.Context) -> None:
    """Check the shelf data for duplicate ids, dangling riddles and bad rectangles."""
    catalog = _load(ctx, check=False)
    problems = validate_catalog(catalog)
    if problems:
        print({"valid": False, "problems": problems})
        raise typer.Exit(code=1)
    print({"valid": True, "regions": len(catalog.regions), "riddles": len(catalog.riddles)})


@app.command()
def interactive(ctx: typer.Context) -> None:
    """Edit the four riddle fields in a prompt loop."""
    session = QuerySession(_load(ctx))
    print(
        {
            "app": settings.app_name,
            "interactive": "started",
            "hint": f"Type '<1-{FIELD_COUNT}> <text>' to set a field, 'reset' to clear all, 'quit' to exit.",
        }
    )

    while True:
        try:
            line = input("> ")
        except EOFError:
            break

        command = line.strip()
        if not command:
            continue
        if command.lower() in ("quit", "exit"):
            break
        if command.lower() == "reset":
            session.reset()
            _render(session.view())
            continue

        head, _, text = command.partition(" ")
        if not head.isdigit():
            print({"error": f"Start the line with a field number 1-{FIELD_COUNT}, 'reset' or 'quit'."})
            continue
        try:
            session.set_field(int(head), text)
        except ValueError as exc:
            print({"error": str(exc)})
            continue
        _render(session.view())

    print({"interactive": "stopped"})


if __name__ == "__main__":
    app()
