# Author: PB
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/eiplint/cli/__init__.py

from eiplint.cli.main import app

__all__ = ["app"]
