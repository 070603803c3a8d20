# Author: PB
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/eiplint/core/lint.py

import asyncio
from dataclasses import dataclass
from typing import Iterable

from loguru import logger

from eiplint.data.files import File
from eiplint.data.filename_validation import AssertValidFilename


@dataclass(frozen=True)
class FileDiagnostic:
    """A diagnostic tied to the file that produced it."""
    filename: str
    message: str


async def lint_files(files: Iterable[File], validator: AssertValidFilename) -> list[FileDiagnostic]:
    """Run the filename rule over many files concurrently.

    Results keep the order of `files`; valid files produce nothing.
    A resolver fault in any file propagates to the caller.
    """
    files = list(files)
    results = await asyncio.gather(*(validator.validate(file) for file in files))

    diagnostics = [
        FileDiagnostic(filename=file.filename, message=message)
        for file, message in zip(files, results)
        if message is not None
    ]
    logger.debug(f"Linted {len(files)} files, {len(diagnostics)} diagnostics")
    return diagnostics
