# Author: PB
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/eiplint/config/manager.py

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Literal, Final

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, ValidationError as PydanticValidationError

from eiplint.system.exceptions import ConfigError


# ---- Constants ----

USER_CFG: Final = "eiplint.yml"


def _get_user_config_search_paths() -> tuple[Path, ...]:
    """Get config file search paths (ordered by priority: lowest to highest).

    Evaluated at call time so environment overrides set by tests are honored.
    """
    return (
        Path("/etc/eiplint") / USER_CFG,  # System defaults
        Path.home() / ".config" / "eiplint" / USER_CFG,  # User config
        Path(os.getenv("XDG_CONFIG_HOME", "")) / "eiplint" / USER_CFG,  # XDG override
        Path(os.getenv("EIPLINT_CONFIG_HOME", "")) / USER_CFG,  # Explicit override (highest priority)
    )


def _load_merged_config_data(candidates: tuple[Path, ...]) -> dict:
    """Load and merge config data from candidate paths.

    Args:
        candidates: Paths to check for config files

    Returns:
        Merged configuration data (empty if no file exists)

    Raises:
        ConfigError: If a config file exists but cannot be parsed
    """
    merged_data = {}
    found_configs = []

    for candidate in candidates:
        # Unset env vars collapse to a bare relative filename
        if candidate == Path("") / USER_CFG or candidate == Path("eiplint") / USER_CFG:
            continue
        if not candidate.exists():
            continue
        try:
            with candidate.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load config from {candidate}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {candidate} must contain a mapping")

        merged_data.update(data)  # Later configs override earlier ones
        found_configs.append(str(candidate))
        logger.debug(f"Loaded config from {candidate}")

    if found_configs:
        logger.debug(f"Merged config from: {', '.join(found_configs)}")
    else:
        logger.debug(f"No {USER_CFG} found, using defaults")
    return merged_data


class LintConfig(BaseModel):
    """User configuration for eiplint runs."""
    model_config = ConfigDict(extra="forbid")

    # Optional logging configuration
    local_log: Optional[Path] = None
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    output_format: Literal["pretty", "json"] = "pretty"

    @classmethod
    def load(cls, config_path: Path) -> "LintConfig":
        """Load config from a single file, ignoring the search paths."""
        if not config_path.is_file():
            raise ConfigError(f"Config file {config_path} not found")
        data = _load_merged_config_data((config_path,))
        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            raise ConfigError(f"Invalid config in {config_path}: {e}") from e


def load_merged_lint_config() -> LintConfig:
    """Load and merge config from all locations (system defaults + user overrides)."""
    candidates = _get_user_config_search_paths()
    merged_data = _load_merged_config_data(candidates)
    try:
        return LintConfig.model_validate(merged_data)
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid {USER_CFG}: {e}") from e
