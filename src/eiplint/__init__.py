# Author: PB
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/eiplint/__init__.py

"""eiplint - structural lint rules for EIP submissions."""

from eiplint.data.files import FILE_RE, File
from eiplint.data.filename_validation import AssertValidFilename

__all__ = ["AssertValidFilename", "File", "FILE_RE"]
