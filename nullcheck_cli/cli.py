"""Typer-based CLI for nullcheck.

Checks headers for nullability annotations. Each header reached from the
given entry header through ``#import`` statements must contain at least ONE
nullability annotation, because clang warns about every missing annotation
in a header as soon as one is present. The main use is the bridging header
of a mixed Objective-C/Swift project; it is fast enough to run as a build
phase on every build.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import click
import typer
from rich.console import Console
from rich.logging import RichHandler
from typer.core import TyperCommand

from . import __version__
from .config import build_config, split_path_list
from .config_manager import find_config_file, load_config
from .errors import ConfigurationError, EmptyUniverseError
from .orchestrator import NullabilityOrchestrator
from .reporter import Reporter

app = typer.Typer(
    help="🔎 nullcheck: verify nullability annotations across an import graph.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


class CheckCommand(TyperCommand):
    """Bad arguments exit with 1 like every other fatal configuration error."""

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            exc.exit_code = 1
            raise


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        typer.echo(f"nullcheck v{__version__}")
        raise typer.Exit()


def _configure_logging(debug: bool) -> None:
    if not debug:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command(cls=CheckCommand)
def check(
    header_file: Optional[Path] = typer.Argument(
        None,
        help="Starting point of the search; all #import statements are followed recursively from here.",
        show_default=False,
    ),
    include_paths: Optional[List[str]] = typer.Option(
        None,
        "--include-paths",
        "-i",
        help="Comma-separated paths searched for imported headers. Defaults to the current directory.",
    ),
    exclude_paths: Optional[List[str]] = typer.Option(
        None,
        "--exclude-paths",
        "-e",
        help="Comma-separated paths excluded from the header search.",
    ),
    warn_only: bool = typer.Option(False, "--warn-only", "-w", help="On missing nullability, exit with 0 nonetheless."),
    verbose: Optional[bool] = typer.Option(None, "--verbose/--no-verbose", "-v", help="Run verbosely."),
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="TOML file with defaults (default: ./nullcheck.toml if present)."
    ),
    debug: bool = typer.Option(False, "--debug", help="Log traversal details to stderr."),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
):
    """Check that every header imported from HEADER_FILE contains nullability annotations."""
    _configure_logging(debug)

    try:
        settings = load_config(find_config_file(config_file))
        cli_includes = [Path(p) for p in split_path_list(include_paths)]
        cli_excludes = [Path(p) for p in split_path_list(exclude_paths)]
        check_config = build_config(
            header_file,
            include_paths=cli_includes or settings["include_paths"],
            exclude_paths=cli_excludes or settings["exclude_paths"],
            warn_only=warn_only or settings["warn_only"],
            verbose=settings["verbose"] if verbose is None else verbose,
        )
    except ConfigurationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    reporter = Reporter(warn_only=check_config.warn_only, verbose=check_config.verbose)
    try:
        result = NullabilityOrchestrator(check_config).run()
    except EmptyUniverseError as exc:
        raise typer.Exit(code=reporter.bail_out(str(exc)))

    raise typer.Exit(code=reporter.report(result))


if __name__ == "__main__":
    app()
