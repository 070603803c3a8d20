# Author: PB
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/eiplint/data/files.py

import re
from pathlib import Path
from typing import Final, Iterable

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from eiplint.system.exceptions import ValidationError


# Proposals live directly in the EIPS folder
FILE_RE: Final[re.Pattern[str]] = re.compile(r"^EIPS/eip-(\d+)\.md$", re.MULTILINE)


class File(BaseModel):
    """A candidate document under review."""
    model_config = ConfigDict(frozen=True)

    filename: str = Field(min_length=1, description="Posix path relative to the repository root")
    content: str = ""


def load_file(path: Path, root: Path) -> File:
    """Read a file from disk into a File named relative to `root`.

    Args:
        path: File to read (absolute, or relative to the working directory)
        root: Repository root the filename is reported against

    Returns:
        File with a posix-style relative filename

    Raises:
        ValidationError: If the path is outside root or cannot be read
    """
    resolved = Path(path).resolve()
    try:
        rel_path = resolved.relative_to(Path(root).resolve())
    except ValueError:
        raise ValidationError(f"{path} is not inside repository root {root}")

    try:
        content = resolved.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ValidationError(f"Cannot read {path}: {e}") from e

    logger.debug(f"Loaded {rel_path.as_posix()} ({len(content)} chars)")
    return File(filename=rel_path.as_posix(), content=content)


def load_files(paths: Iterable[Path], root: Path) -> list[File]:
    return [load_file(path, root) for path in paths]
