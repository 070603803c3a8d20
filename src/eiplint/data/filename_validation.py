# Author: PB
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/eiplint/data/filename_validation.py

from typing import Awaitable, Callable, Optional

from loguru import logger

from eiplint.data.files import FILE_RE, File


class AssertValidFilename:
    """Lint rule: a proposal's filename must be `EIPS/eip-####.md` and carry an EIP number."""

    def __init__(self, require_filename_eip_num: Callable[[str], Awaitable[int]]):
        self.require_filename_eip_num = require_filename_eip_num

    async def validate(self, file: File) -> Optional[str]:
        """
        Check whether the provided file's filename is valid.

        Args:
            file: File under review; only its filename is read

        Returns:
            None if the filename is valid, otherwise a diagnostic message.
            Exceptions raised by the resolver are not caught.
        """
        filename = file.filename

        # Formatted correctly and in the EIPS folder
        if not FILE_RE.search(filename):
            logger.debug(f"{filename} does not match {FILE_RE.pattern}")
            return f"Filename {filename} is not in EIP format 'EIPS/eip-####.md'"

        # A zero result counts as not found
        filename_eip_num = await self.require_filename_eip_num(filename)
        if not filename_eip_num:
            return f"No EIP number was found to be associated with filename {filename}"

        return None

    assert_valid_filename = validate
