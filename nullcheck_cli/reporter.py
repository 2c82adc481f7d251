"""Turns a :class:`CheckResult` into console output and an exit code."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .models import CheckResult


def format_diagnostic(path: Path, warn_only: bool) -> str:
    """Format one finding as ``path:line: severity: message``.

    That shape is what the Xcode issue navigator picks up from build phase
    output.
    """
    severity = "warning" if warn_only else "error"
    return f"{path}:0: {severity}: missing nullability in file {path}"


class Reporter:
    def __init__(self, warn_only: bool = False, verbose: bool = False, console: Optional[Console] = None):
        self.warn_only = warn_only
        self.verbose = verbose
        self.console = console or Console(stderr=True, highlight=False)

    def bail_out(self, message: str) -> int:
        typer.echo(message, err=True)
        return 0 if self.warn_only else 1

    def report(self, result: CheckResult) -> int:
        # stdout carries only the plain lines; the summary table goes to stderr.
        if self.verbose:
            for reference in result.traversal.unresolved:
                typer.echo(f"import not found/excluded: {reference}")
            self.console.print(self._summary_table(result))

        if result.ok:
            return 0
        diagnostics = [format_diagnostic(path, self.warn_only) for path in result.missing_nullability]
        return self.bail_out("\n".join(diagnostics))

    def _summary_table(self, result: CheckResult) -> Table:
        traversal = result.traversal
        missing = set(result.missing_nullability)
        table = Table(title=f"Imports reachable from {escape(traversal.entry_file.name)}")
        table.add_column("Import", style="cyan")
        table.add_column("Resolved to")
        table.add_column("Nullability")

        for reference in traversal.references:
            path = traversal.resolved.get(reference)
            if path is None:
                table.add_row(escape(reference), "[dim]not found/excluded[/dim]", "-")
            elif path in missing:
                table.add_row(escape(reference), escape(str(path)), "[red]missing[/red]")
            else:
                table.add_row(escape(reference), escape(str(path)), "[green]ok[/green]")

        table.caption = (
            f"{len(traversal.resolved_files)} header(s) checked, "
            f"{len(result.missing_nullability)} missing nullability"
        )
        return table
