# Author: PB
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/eiplint/data/eip_number.py

"""Default EIP number resolver used by the command line tool.

The resolver also answers for files in an EIP's asset directory, so rules
that accept asset paths can share it. `AssertValidFilename` only hands it
filenames that already match `FILE_RE`.
"""

import re

from loguru import logger

from eiplint.system.exceptions import ResolverError


_EIP_NUM_RE = re.compile(r"eip-(\d+)\.md$")
_ASSETS_EIP_NUM_RE = re.compile(r"^assets/eip-(\d+)/")


async def require_filename_eip_num(filename: str) -> int:
    """Derive the EIP number encoded in a filename.

    Accepts both proposal files (`EIPS/eip-1234.md`) and files in an EIP's
    asset directory (`assets/eip-1234/diagram.png`).

    Raises:
        ResolverError: If the filename carries no EIP number at all
    """
    match = _EIP_NUM_RE.search(filename) or _ASSETS_EIP_NUM_RE.search(filename)
    if not match:
        raise ResolverError(f"Could not find an EIP number in filename {filename}", filename=filename)

    eip_num = int(match.group(1))
    logger.debug(f"Resolved {filename} to EIP {eip_num}")
    return eip_num
