# Author: PB
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/eiplint/cli/main.py

"""
Command line entry point: `eiplint check` runs the filename rule over
proposal files and reports diagnostics as a table or JSON.
"""

# Standard library imports
import asyncio
from importlib.metadata import version
from pathlib import Path
from typing import Optional

# Third-party imports
import typer
from rich.console import Console

# Local eiplint imports
from eiplint.cli.utils import EXIT_DIAGNOSTICS, handle_operation_error
from eiplint.config.manager import LintConfig, load_merged_lint_config
from eiplint.core.lint import lint_files
from eiplint.data.eip_number import require_filename_eip_num
from eiplint.data.filename_validation import AssertValidFilename
from eiplint.data.files import load_files
from eiplint.system.display import diagnostics_to_json, diagnostics_to_table
from eiplint.system.exceptions import EipLintError
from eiplint.system.logging_setup import setup_logging

app = typer.Typer(
    help="""eiplint - Structural checks for EIP submissions

[bold red]Validation:[/bold red] check
""",
    rich_markup_mode="rich"
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        try:
            pkg_version = version("eiplint")
        except Exception as e:
            handle_operation_error(console, "retrieving version", e)
        console.print(f"eiplint version {pkg_version}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
) -> None:
    """eiplint - Structural checks for EIP submissions."""
    pass


@app.command()
def check(
    paths: list[Path] = typer.Argument(..., help="Files to check"),
    root: Path = typer.Option(Path("."), "--root", help="Repository root that filenames are relative to"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Use this config file instead of the eiplint.yml search paths"),
    to_json: bool = typer.Option(False, "--json", help="Output results as JSON"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress output, report through exit code only"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """[bold red]Validation[/bold red]: Check that proposal filenames follow 'EIPS/eip-####.md'."""
    try:
        config = LintConfig.load(config_path) if config_path else load_merged_lint_config()
    except EipLintError as e:
        handle_operation_error(console, "loading config", e)

    setup_logging(level="DEBUG" if debug else config.log_level, config=config)

    try:
        files = load_files(paths, root)
        validator = AssertValidFilename(require_filename_eip_num)
        diagnostics = asyncio.run(lint_files(files, validator))
    except EipLintError as e:
        handle_operation_error(console, "checking files", e)

    if to_json or config.output_format == "json":
        if not quiet:
            typer.echo(diagnostics_to_json(diagnostics))
    elif not quiet:
        if diagnostics:
            console.print(diagnostics_to_table(diagnostics))
        else:
            console.print(f"[green]✓[/green] {len(files)} file(s) checked, no problems found")

    if diagnostics:
        raise typer.Exit(EXIT_DIAGNOSTICS)


if __name__ == "__main__":
    app()
