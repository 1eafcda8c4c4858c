from __future__ import annotations

"""Logging setup and small helpers.

Avoid importing Qt here so tests can import utilities without GUI deps.
"""

import logging
import sys
from typing import Union


def resolve_level(level: Union[int, str]) -> int:
    """Map a level name such as "debug" to its number; unknown names give INFO."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    logging.basicConfig(
        level=resolve_level(level),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stdout,
    )
