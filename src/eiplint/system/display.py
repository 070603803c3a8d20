# Author: PB
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/eiplint/system/display.py

import json

from rich.markup import escape
from rich.table import Table

from eiplint.core.lint import FileDiagnostic


def diagnostics_to_table(diagnostics: list[FileDiagnostic]) -> Table:
    """Convert lint diagnostics to a rich Table for display.

    Args:
        diagnostics: Diagnostics in the order they should be shown

    Returns:
        Rich Table object ready for display
    """
    table = Table(title="Filename problems")
    table.add_column("File", style="cyan")
    table.add_column("Problem")

    for diagnostic in diagnostics:
        table.add_row(escape(diagnostic.filename), escape(diagnostic.message))

    return table


def diagnostics_to_json(diagnostics: list[FileDiagnostic]) -> str:
    return json.dumps(
        [{"filename": d.filename, "message": d.message} for d in diagnostics],
        indent=2
    )
