"""CLI entry point for podexport."""

import asyncio
import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from podexport.config.logging import setup_logging
from podexport.config.manager import ConfigManager
from podexport.export.exporter import Exporter
from podexport.library.locator import locate_library
from podexport.utils.errors import ConfigError, PodExportError
from podexport.utils.reveal import reveal_in_file_browser

app = typer.Typer(
    name="podexport",
    help="Export downloaded Apple Podcasts episodes as tagged MP3 files",
    invoke_without_command=True,
)
console = Console()
err_console = Console(stderr=True)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
) -> None:
    """Export cached podcast episodes into a readable folder tree."""
    # Initialize logging before any command runs
    setup_logging(verbose=verbose, log_file=log_file)

    if ctx.invoked_subcommand is None:
        _export_impl(verbose=verbose)


def _export_impl(verbose: bool = False) -> None:
    try:
        config = ConfigManager().load_config()
        if not verbose:
            logging.getLogger("podexport").setLevel(config.log_level)

        paths = locate_library(config)
        report = asyncio.run(Exporter(config).run(paths))

    except PodExportError as e:
        err_console.print(f"[red]✗[/red] {escape(str(e))}")
        sys.exit(1)

    output_dir = escape(str(report.output_dir))
    console.print(f"\n\n[green]✓[/green] Successful Export to '{output_dir}' folder!")

    summary = f"{len(report.exported)} of {report.total} episode(s) exported"
    if report.failed:
        summary += f", [yellow]{len(report.failed)} skipped[/yellow] (see errors above)"
    console.print(f"[dim]{summary}[/dim]")

    if config.reveal_output:
        reveal_in_file_browser(report.output_dir)


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from podexport import __version__

    console.print(f"[bold cyan]podexport[/bold cyan] v{__version__}")


@app.command("config")
def config_command(
    action: str = typer.Argument("show", help="Action: show or path"),
) -> None:
    """Show the podexport configuration.

    Examples:
        podexport config show

        podexport config path
    """
    try:
        manager = ConfigManager()

        if action == "path":
            console.print(str(manager.config_file))

        elif action == "show":
            config = manager.load_config()

            console.print("\n[bold]podexport Configuration[/bold]\n")

            table = Table(show_header=False, box=None)
            table.add_column("Key", style="cyan")
            table.add_column("Value", style="white")

            table.add_row("Config file", escape(str(manager.config_file)))
            table.add_row("", "")
            table.add_row("Output directory", escape(str(config.output_dir())))
            table.add_row("Library directory", escape(str(config.library_dir or "auto")))
            table.add_row("Max file name length", str(config.max_filename_length))
            table.add_row("Fallback podcast title", escape(config.fallback_podcast_title))
            table.add_row("Reveal output", "✓" if config.reveal_output else "✗")
            table.add_row("Log level", config.log_level)

            console.print(table)

        else:
            err_console.print(f"[red]✗[/red] Unknown action: {escape(action)}")
            err_console.print("Valid actions: show, path")
            sys.exit(1)

    except ConfigError as e:
        err_console.print(f"[red]✗[/red] {escape(str(e))}")
        sys.exit(1)


if __name__ == "__main__":
    app()
