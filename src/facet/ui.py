# src/facet/ui.py

from typing import List, Tuple

from rich.align import Align
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from facet.core.logging import LEVELS, color_palette, log


def display_resource_routes(
    routes: List[Tuple[str, str]],
    permit: List[str],
    identifier: List[str],
) -> None:
    """Prints the routes and queryable fields of one resource."""
    if log.level > LEVELS["INFO"]:
        return

    console = log.console

    routes_table = Table(box=None, padding=(0, 1), show_header=False, show_edge=False)
    routes_table.add_column("Method", no_wrap=True, width=10)
    routes_table.add_column("Path")
    for method, path in routes:
        routes_table.add_row(color_palette["method"](method), color_palette["path"](path))
    console.print(routes_table)

    fields = " ".join(
        color_palette["identifier"](f"{field}*") if field in identifier else color_palette["field"](field)
        for field in permit
    )
    console.print(f"  [bold]Fields[/bold]: {fields or '[dim]none[/dim]'}")
    console.print()


def print_welcome(project_name: str, version: str, host: str, port: int) -> None:
    """Prints a welcome message using a rich Panel."""
    docs_url = f"http://{host}:{port}/docs"
    message = Text.from_markup(
        f"API Documentation available at [link={docs_url}]{docs_url}[/link]"
    )
    panel = Panel(
        Align.center(message, vertical="middle"),
        title=f"[bold green]{project_name} v{version}[/bold green]",
        border_style="blue",
        padding=(1, 2),
    )
    log.console.print(panel)
