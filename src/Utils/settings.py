"""
Settings loader
===============
Reads the run configuration from config.toml. Every key is optional,
missing keys fall back to the module defaults in src/*/config.py.

    [report]
    mode = "list"          # or "best"
    policy = "adjusted"    # or "simple"

    [fetch]
    url = "https://www.njlottery.com/api/v1/instant-games/games/"
    page_size = 1000
    timeout = 10           # must be > 0

    [fetch.headers]        # merged over the default accept/user-agent headers
    user-agent = "Mozilla/5.0 ..."
"""
from pathlib import Path
from typing import Optional, Union
import logging

import toml
from pydantic import BaseModel, Field, ValidationError, field_validator

from src.DataProviders.njlottery import FetchConfig
from src.EVEngine import config as ev_config
from src.EVEngine.ev_calculator import POLICIES
from src.Services.report import MODE_LIST, MODES

logger = logging.getLogger("Settings")

BASE_DIR = Path(__file__).resolve().parents[2]
CONFIG_PATH = BASE_DIR / "config.toml"


class SettingsError(Exception):
    """config.toml could not be read or holds invalid values."""


class ReportSettings(BaseModel):
    mode: str = Field(default=MODE_LIST)
    policy: str = Field(default=ev_config.DEFAULT_POLICY)

    @field_validator("mode")
    @classmethod
    def _check_mode(cls, v: str) -> str:
        if v not in MODES:
            raise ValueError(f"mode must be one of {MODES}")
        return v

    @field_validator("policy")
    @classmethod
    def _check_policy(cls, v: str) -> str:
        if v not in POLICIES:
            raise ValueError(f"policy must be one of {tuple(sorted(POLICIES))}")
        return v


class Settings(BaseModel):
    report: ReportSettings = Field(default_factory=ReportSettings)
    fetch: FetchConfig = Field(default_factory=FetchConfig)


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load settings from a TOML file.
    A missing default file means built-in defaults; a missing explicit path is an error.
    """
    explicit = path is not None
    path = Path(path) if explicit else CONFIG_PATH

    if not path.exists():
        if explicit:
            raise SettingsError(f"Config file not found: {path}")
        logger.debug(f"No config at {path}, using defaults")
        return Settings()

    try:
        data = toml.load(path)
    except (toml.TomlDecodeError, OSError) as e:
        raise SettingsError(f"Could not read {path}: {e}") from e

    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {path}:\n{e}") from e

    logger.debug(f"Loaded settings from {path}")
    return settings
