# src/facet/core/logging.py
"""Console logging for facet, rendered with rich."""

import time
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, Optional

from rich.console import Console


def _style(style: str) -> Callable[[Any], str]:
    return lambda text: f"[{style}]{text}[/{style}]"


color_palette: Dict[str, Callable[[Any], str]] = {
    "resource": _style("bold cyan"),
    "field": _style("green"),
    "identifier": _style("yellow"),
    "method": _style("bold magenta"),
    "path": _style("blue"),
}

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


class Logger:
    """Leveled console logger with section headers, timers and indentation."""

    def __init__(self, console: Optional[Console] = None, level: str = "INFO"):
        self.console = console or Console()
        self.level = LEVELS.get(level.upper(), LEVELS["INFO"])
        self._indent = 0

    def set_level(self, level: str) -> None:
        self.level = LEVELS.get(level.upper(), LEVELS["INFO"])

    def _emit(self, level: str, prefix: str, message: str) -> None:
        if LEVELS[level] < self.level:
            return
        pad = "  " * self._indent
        self.console.print(f"{pad}{prefix} {message}")

    def debug(self, message: str) -> None:
        self._emit("DEBUG", "[dim]·[/dim]", f"[dim]{message}[/dim]")

    def info(self, message: str) -> None:
        self._emit("INFO", "[blue]ℹ[/blue]", message)

    def success(self, message: str) -> None:
        self._emit("INFO", "[green]✓[/green]", message)

    def error(self, message: str) -> None:
        self._emit("ERROR", "[red]✗[/red]", message)

    def section(self, title: str) -> None:
        if self.level > LEVELS["INFO"]:
            return
        self.console.rule(f"[bold]{title}[/bold]")

    @contextmanager
    def indented(self) -> Iterator[None]:
        self._indent += 1
        try:
            yield
        finally:
            self._indent -= 1

    @contextmanager
    def timed(self, label: str) -> Iterator[None]:
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = (time.perf_counter() - start) * 1000
            self.info(f"{label} [dim]({elapsed:.1f} ms)[/dim]")


log = Logger()
