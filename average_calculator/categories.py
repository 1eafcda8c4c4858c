from __future__ import annotations

"""Number-type options shown above the input.

The selection is display state only and has no effect on the window or the
average. Filtering or generating numbers per type is not implemented.
"""

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class NumberTypeOption:
    id: str
    label: str
    description: str
    glyph: str


NUMBER_TYPES: Tuple[NumberTypeOption, ...] = (
    NumberTypeOption("p", "Prime", "Calculate average of prime numbers", "#"),
    NumberTypeOption("f", "Fibonacci", "Calculate average of Fibonacci numbers", "∞"),
    NumberTypeOption("e", "Even", "Calculate average of even numbers", "±"),
    NumberTypeOption("r", "Random", "Calculate average of random numbers", "⚀"),
)

DEFAULT_TYPE = "p"

_BY_ID: Dict[str, NumberTypeOption] = {o.id: o for o in NUMBER_TYPES}


def get_option(type_id: str) -> NumberTypeOption:
    try:
        return _BY_ID[type_id]
    except KeyError:
        raise KeyError(f"unknown number type: {type_id!r}") from None


def is_valid_type(type_id: str) -> bool:
    return type_id in _BY_ID
