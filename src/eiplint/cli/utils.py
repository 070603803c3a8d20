# Author: PB
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/eiplint/cli/utils.py

"""
CLI utility functions shared by eiplint commands.

All functions handle console output and typer exits consistently:
exit code 1 means lint diagnostics were found, exit code 2 means the
run itself failed.
"""

from typing import NoReturn

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from eiplint.system.exceptions import EipLintError

EXIT_DIAGNOSTICS = 1
EXIT_ERROR = 2


def handle_operation_error(console: Console, operation: str, error: Exception) -> NoReturn:
    """
    Report a failed operation and exit.

    Args:
        console: Rich console for output
        operation: Short description of what was being done
        error: The exception that stopped the operation

    Raises:
        typer.Exit: Always, with EXIT_ERROR
    """
    logger.debug(f"Error while {operation}: {error!r}")
    if isinstance(error, EipLintError):
        console.print(f"[red]✗[/red] Error {operation}: {escape(str(error))}")
    else:
        console.print(f"[red]✗[/red] Unexpected error {operation}: {type(error).__name__}: {escape(str(error))}")
    raise typer.Exit(EXIT_ERROR)
