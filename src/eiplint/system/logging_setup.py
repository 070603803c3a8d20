# Author: PB
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/eiplint/system/logging_setup.py

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from eiplint.config.manager import LintConfig, load_merged_lint_config


def detect_repo_name() -> Optional[str]:
    """Detect the current repository name from the working directory.

    Returns:
        Repository name or None if not detected
    """
    cwd = Path.cwd()
    if cwd.name and cwd.name != "/":
        return cwd.name

    return None


def setup_logging(level: str = "WARNING", config: Optional[LintConfig] = None) -> None:
    """Setup loguru logging for the entire application.

    Configures:
    - Console output: `level` and above (WARNING by default, clean CLI output)
    - File output: DEBUG+ if local_log is configured in user config
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=level,
        format="<level>{level}</level>: {message}",
        colorize=True
    )

    try:
        lint_config = config if config is not None else load_merged_lint_config()
        if lint_config.local_log:
            log_dir = Path(lint_config.local_log)
            log_dir.mkdir(parents=True, exist_ok=True)

            repo_name = detect_repo_name() or "global"
            log_file = log_dir / f"eiplint-{repo_name}.log"

            logger.add(
                log_file,
                level="DEBUG",
                format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
                rotation="10 MB",
                retention="30 days",
                compression="gz"
            )
            logger.debug(f"File logging enabled: {log_file}")

    except Exception as e:
        # Don't fail the lint run if logging setup fails
        logger.warning(f"Failed to setup file logging: {e}")
