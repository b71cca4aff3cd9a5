"""
Configuration loader for gitguide.

Settings come from a guide.env file (see envparse) with environment
variables taking precedence for the location of that file.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from . import envparse

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "GITGUIDE_CONFIG"
DEFAULT_CONFIG_NAME = "guide.env"
DEFAULT_STATE_PATH = "~/.gitguide/state.json"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class GuideConfig:
    """Simulated repository identity and local settings."""
    repo_name: str = "my-project"
    repo_owner: str = "user"
    remote_url: str = ""  # Derived from owner/name when empty
    hosting_marker: str = "github.com"  # Clone URLs must mention this (or be remote_url)
    state_path: Path = Path(DEFAULT_STATE_PATH).expanduser()
    log_level: str = "WARNING"

    def __post_init__(self):
        if not self.remote_url:
            self.remote_url = f"https://{self.hosting_marker}/{self.repo_owner}/{self.repo_name}.git"


def resolve_config_path(explicit: str | None = None) -> Path:
    """Pick the config file: explicit path, then $GITGUIDE_CONFIG, then ./guide.env."""
    if explicit:
        return Path(explicit).expanduser()
    from_env = os.environ.get(CONFIG_ENV_VAR)
    if from_env:
        return Path(from_env).expanduser()
    return Path.cwd() / DEFAULT_CONFIG_NAME


def load_guide_config(config_path: Path | None = None) -> GuideConfig:
    """Load guide.env and return GuideConfig.

    A missing file yields the defaults. Malformed files raise ValueError.
    """
    if config_path is None or not config_path.exists():
        return GuideConfig()

    env = envparse.load_env(config_path)

    log_level = env.get("LOG_LEVEL", "WARNING").upper()
    if log_level not in VALID_LOG_LEVELS:
        logger.warning(f"Unknown LOG_LEVEL '{log_level}', using WARNING")
        log_level = "WARNING"

    return GuideConfig(
        repo_name=env.get("REPO_NAME", "my-project"),
        repo_owner=env.get("REPO_OWNER", "user"),
        remote_url=env.get("REMOTE_URL", ""),
        hosting_marker=env.get("HOSTING_MARKER", "github.com"),
        state_path=Path(env.get("STATE_PATH", DEFAULT_STATE_PATH)).expanduser(),
        log_level=log_level,
    )
