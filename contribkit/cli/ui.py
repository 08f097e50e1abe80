# contribkit/cli/ui.py
"""
Shared UI helpers for CLI commands.

Usage:
    from contribkit.cli.ui import ui

    ui.header("contrib check")
    ui.success("Done!")
    ui.summary(results)
"""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm
from rich.table import Table

from contribkit.core.runner import Step, StepResult

console = Console()


class UI:
    """
    Unified UI helpers.

    Messages are escaped before printing, so text like "[dev]" is shown
    literally instead of being read as Rich markup.
    """

    # -------------------------------------------------------------------------
    # Output Methods
    # -------------------------------------------------------------------------

    def print(self, msg: str, style: str = "") -> None:
        """Print with optional Rich styling."""
        if style:
            console.print(f"[{style}]{escape(msg)}[/{style}]")
        else:
            console.print(escape(msg))

    def header(self, title: str, subtitle: str = "") -> None:
        """Print a command header in a fitted box."""
        if subtitle:
            content = f"[bold]{escape(title)}[/bold]\n[dim]{escape(subtitle)}[/dim]"
        else:
            content = f"[bold]{escape(title)}[/bold]"
        console.print(Panel.fit(content, border_style="blue"))

    def section(self, title: str) -> None:
        """Print a section header."""
        console.print(f"\n[bold cyan]{escape(title)}[/bold cyan]")

    def command(self, step: Step) -> None:
        """Announce a step that is about to run."""
        console.print(f"\n[bold cyan]{escape(step.name)}[/bold cyan]")
        if step.cmd:
            console.print(f"[dim]$ {escape(step.describe())}[/dim]")

    def success(self, msg: str) -> None:
        console.print(f"[green]✓[/green] {escape(msg)}")

    def error(self, msg: str) -> None:
        console.print(f"[red]✗[/red] {escape(msg)}")

    def warning(self, msg: str, detail: str = "") -> None:
        detail_str = f" [dim]({escape(detail)})[/dim]" if detail else ""
        console.print(f"[yellow]⚠[/yellow] {escape(msg)}{detail_str}")

    def info(self, msg: str) -> None:
        """Print an info/dim message."""
        console.print(f"[dim]{escape(msg)}[/dim]")

    def status(self, name: str, ok: bool, detail: str = "") -> None:
        """Print a status line (check/x with name and optional detail)."""
        icon = "✓" if ok else "✗"
        color = "green" if ok else "red"
        detail_str = f" [dim]({escape(detail)})[/dim]" if detail else ""
        console.print(f"  [{color}]{icon}[/{color}] {escape(name)}{detail_str}")

    def result(self, result: StepResult) -> None:
        """One-line outcome of a step that just ran."""
        if result.skipped:
            return
        duration = f"{result.duration:.1f}s"
        detail = f"{result.message}, {duration}" if result.message else duration
        self.status(result.name, result.success, detail)

    def summary(self, results: Iterable[StepResult], title: str = "Summary") -> None:
        """Table of all step outcomes."""
        table = Table(title=title, show_header=True, header_style="bold")
        table.add_column("Step")
        table.add_column("Status")
        table.add_column("Time", justify="right")
        table.add_column("Detail", style="dim")

        for r in results:
            if r.skipped:
                status = "[dim]SKIP[/dim]"
            elif r.success:
                status = "[green]PASS[/green]"
            else:
                status = "[red]FAIL[/red]"
            duration = f"{r.duration:.1f}s" if r.duration > 0 else ""
            table.add_row(escape(r.name), status, duration, escape(r.message))

        console.print()
        console.print(table)

    # -------------------------------------------------------------------------
    # Prompt Methods
    # -------------------------------------------------------------------------

    def prompt_confirm(self, prompt: str, default: bool = False) -> bool:
        """Prompt for yes/no confirmation."""
        return Confirm.ask(prompt, default=default)


ui = UI()
