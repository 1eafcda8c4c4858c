from __future__ import annotations

"""Input boundary: field text to a finite sample."""

import math
from typing import Any


INVALID_INPUT_MESSAGE = "Please enter a valid number"


class InvalidInput(ValueError):
    def __init__(self, text: Any, message: str = INVALID_INPUT_MESSAGE):
        super().__init__(message)
        self.text = text
        self.message = message


def parse_sample(text: Any) -> float:
    """Parse user-entered text as a finite real number.

    Accepts anything ``float()`` accepts after stripping whitespace, with no
    integer/float distinction. Empty text, non-numeric text, ``nan`` and
    ``inf`` raise InvalidInput.
    """
    if text is None:
        raise InvalidInput(text)
    s = str(text).strip()
    if not s:
        raise InvalidInput(text)
    try:
        value = float(s)
    except ValueError as e:
        raise InvalidInput(text) from e
    if not math.isfinite(value):
        raise InvalidInput(text)
    return value
