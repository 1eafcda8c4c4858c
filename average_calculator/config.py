from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .categories import DEFAULT_TYPE, is_valid_type
from .env import get_config_path_override, get_log_level_override
from .window import WINDOW_SIZE


log = logging.getLogger(__name__)


APP_NAME = "AverageCalculator"
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def get_config_dir() -> Path:
    if os.name == "nt":
        base = os.getenv("APPDATA", str(Path.home() / "AppData" / "Roaming"))
        return Path(base) / APP_NAME
    else:
        return Path.home() / ".config" / APP_NAME


CONFIG_PATH = get_config_dir() / "config.json"


class Preferences(BaseModel):
    window_size: int = Field(WINDOW_SIZE, ge=1, le=1000)
    decimals: int = Field(2, ge=0, le=10)
    default_category: str = Field(DEFAULT_TYPE)
    theme: str = Field("light")
    font_scale: float = Field(1.0, gt=0.0, le=4.0)
    log_level: str = Field("INFO")

    @field_validator("theme")
    @classmethod
    def _v_theme(cls, v: str) -> str:
        return v if v in {"light", "dark"} else "light"

    @field_validator("default_category")
    @classmethod
    def _v_category(cls, v: str) -> str:
        return v if is_valid_type(v) else DEFAULT_TYPE

    @field_validator("log_level")
    @classmethod
    def _v_log_level(cls, v: str) -> str:
        v = str(v).upper()
        return v if v in LOG_LEVELS else "INFO"


def load_preferences(path: Optional[Path] = None) -> Preferences:
    """Read preferences from JSON, then apply environment overrides.

    Never writes anything back. Missing or broken files fall back to defaults.
    """
    if path is None:
        override = get_config_path_override()
        path = Path(override) if override else CONFIG_PATH
    data: dict = {}
    try:
        if path.exists():
            data = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ValueError("config root must be an object")
    except Exception:
        log.exception("Failed to read preferences from %s; using defaults", path)
        data = {}
    level = get_log_level_override()
    if level:
        data["log_level"] = level
    try:
        return Preferences(**data)
    except Exception:
        log.exception("Invalid preferences in %s; using defaults", path)
        return Preferences(log_level=level) if level else Preferences()
