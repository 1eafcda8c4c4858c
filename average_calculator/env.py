from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


ENV_PATH = Path(".env")


def load_env() -> None:
    load_dotenv(dotenv_path=ENV_PATH, override=False)


def get_config_path_override() -> Optional[str]:
    return os.getenv("AVGCALC_CONFIG") or None


def get_log_level_override() -> Optional[str]:
    return os.getenv("AVGCALC_LOG_LEVEL") or None
