"""
Runtime configuration for the portfolio terminal.

This module provides:
- load_envs(): load PORTFOLIO_PROFILE and PORTFOLIO_LOG_LEVEL from a .env file
  if they are not already present in the environment.
- RuntimeConfig: a dataclass holding runtime settings, including the profile
  path, the headless command text and the log level.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values

# Environment variable names
PORTFOLIO_PROFILE_ENV: str = "PORTFOLIO_PROFILE"
PORTFOLIO_LOG_LEVEL_ENV: str = "PORTFOLIO_LOG_LEVEL"


def load_envs(env_file: Optional[str] = None) -> None:
    """
    Load PORTFOLIO_PROFILE and PORTFOLIO_LOG_LEVEL from a .env file
    into the process environment if they are not already set.
    """
    env_values = dotenv_values(env_file) if env_file else dotenv_values()
    for key in (PORTFOLIO_PROFILE_ENV, PORTFOLIO_LOG_LEVEL_ENV):
        if not os.environ.get(key):
            val = env_values.get(key)
            if val:
                os.environ[key] = str(val)


@dataclass(frozen=True)
class RuntimeConfig:
    """
    Holds runtime configuration for the portfolio terminal.

    Attributes:
        profile_path: JSON file overriding the default author profile (if provided).
        command: Text to run in headless mode; one command per line (if provided).
        log_level: Level for the file logger.
    """

    profile_path: Optional[Path] = None
    command: Optional[str] = None
    log_level: int = logging.INFO


def get_config_dir() -> Path:
    """
    Return the portfolio terminal config directory under XDG_CONFIG_HOME or fallback to ~/.config.
    """
    config_home = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return config_home / "portfolio_terminal"


def get_data_dir() -> Path:
    """
    Return the portfolio terminal data directory under XDG_DATA_HOME or fallback to ~/.local/share.
    """
    data_home = Path(os.environ.get("XDG_DATA_HOME", Path.home() / ".local/share"))
    return data_home / "portfolio_terminal"
