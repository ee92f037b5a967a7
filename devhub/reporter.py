"""User-facing output.

``Reporter`` is the interface the scaffolder talks to; its base
implementation prints nothing, which keeps library use and tests quiet.
``ConsoleReporter`` renders the same events with Rich.  Messages are plain
text: any square brackets in them (paths, subprocess output) are printed
as-is rather than read as Rich markup.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel


class Reporter:
    """Silent reporter."""

    @contextmanager
    def task(self, message: str, done: str | None = None) -> Iterator[None]:
        """Wrap a long-running step; *done* is reported when it finishes."""
        yield

    def heading(self, message: str) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass


class ConsoleReporter(Reporter):
    """Reporter that writes to a Rich console with spinners for tasks."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    @contextmanager
    def task(self, message: str, done: str | None = None) -> Iterator[None]:
        with self.console.status(f"[cyan]{escape(message)}[/cyan]", spinner="dots"):
            yield
        if done:
            self.success(done)

    def heading(self, message: str) -> None:
        self.console.print()
        self.console.print(f"[bold blue]{escape(message)}[/bold blue]")

    def info(self, message: str) -> None:
        self.console.print(escape(message))

    def success(self, message: str) -> None:
        self.console.print(f"[bold green]✔ {escape(message)}[/bold green]")

    def warning(self, message: str) -> None:
        self.console.print(f"[bold yellow]{escape(message)}[/bold yellow]")

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]{escape(message)}[/bold red]")

    def banner(self, version: str) -> None:
        """Print the welcome panel shown when the CLI starts."""
        self.console.print()
        self.console.print(
            Panel(
                "[bold]Create a new project from a template[/bold]",
                title=f"[bold cyan]DevHub v{escape(version)}[/bold cyan]",
                border_style="cyan",
                expand=False,
            )
        )
        self.console.print()
