"""Command-line interface for panelkit.

Inspect registered widgets and the configuration they hand to the
composition layer.
"""

from __future__ import annotations

import json
from typing import Annotated, NoReturn

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from panelkit import __version__
from panelkit.errors import WidgetError
from panelkit.logging_config import setup_logging
from panelkit.models import Settings
from panelkit.widgets import create_widget, get_widget_class, list_widget_names

console = Console()

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="panelkit - inspect widget configuration",
)


def _fail(exc: Exception) -> NoReturn:
    """Report an error in red and exit with status 1."""
    console.print(f"[red]Error: {escape(str(exc))}[/]")
    raise typer.Exit(1) from exc


@app.callback(invoke_without_command=True)
def default_callback(
    ctx: typer.Context,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version", is_eager=True),
    ] = False,
) -> None:
    """panelkit - inspect widget configuration."""
    if version:
        console.print(f"panelkit {__version__}")
        raise typer.Exit(0)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit(0)

    try:
        settings = Settings.from_env()
    except ValidationError as exc:
        _fail(exc)
    if debug:
        settings = settings.model_copy(update={"debug": True})
    setup_logging(settings.effective_log_level)


@app.command(name="list")
def list_widgets() -> None:
    """List registered widgets and their class-level properties."""
    table = Table(title="Widgets")
    table.add_column("Name", style="cyan")
    table.add_column("Class")
    table.add_column("Properties")
    for name in list_widget_names():
        cls = get_widget_class(name)
        table.add_row(name, cls.__name__, json.dumps(dict(cls.js_properties())))
    console.print(table)


@app.command(name="show")
def show(
    name: Annotated[str, typer.Argument(help="Registered widget name")],
    option: Annotated[
        list[str] | None,
        typer.Option("--option", "-o", help="Instance override as key=value"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print raw JSON"),
    ] = False,
) -> None:
    """Show the resolved configuration of a widget.

    Examples:
        panelkit show border_layout_panel
        panelkit show border_layout_panel -o title=Main --json
    """
    try:
        widget = create_widget(name, options=option or {})
    except (WidgetError, ValidationError) as exc:
        _fail(exc)

    payload = json.dumps(dict(widget.js_config()), indent=2, sort_keys=True)
    if as_json:
        typer.echo(payload)
        return
    console.print(Panel(payload, title=type(widget).__name__, border_style="green"))


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
