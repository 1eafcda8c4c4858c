from __future__ import annotations

"""Qt-free presenter behind the main window.

Holds the input text, the inline error, the selected number type and the
last Snapshot. The widgets only read these back after each call.
"""

import logging
from typing import Dict, Optional

from .categories import DEFAULT_TYPE, NumberTypeOption, get_option
from .formatting import render_snapshot
from .parsing import InvalidInput, parse_sample
from .window import WINDOW_SIZE, Snapshot, WindowAverager


log = logging.getLogger(__name__)


class AverageCalculator:
    def __init__(self, capacity: int = WINDOW_SIZE, category: str = DEFAULT_TYPE, decimals: int = 2):
        self.averager = WindowAverager(capacity)
        self.decimals = int(decimals)
        self.selected: str = get_option(category).id
        self.input_text: str = ""
        self.error: str = ""
        self.snapshot: Optional[Snapshot] = None

    @property
    def capacity(self) -> int:
        return self.averager.capacity

    @property
    def selected_option(self) -> NumberTypeOption:
        return get_option(self.selected)

    @property
    def has_results(self) -> bool:
        return len(self.averager) > 0

    def select(self, type_id: str) -> NumberTypeOption:
        opt = get_option(type_id)
        if opt.id != self.selected:
            log.info("Number type changed: %s -> %s", self.selected, opt.id)
        self.selected = opt.id
        return opt

    def submit(self, text: Optional[str] = None) -> Optional[Snapshot]:
        raw = self.input_text if text is None else text
        try:
            value = parse_sample(raw)
        except InvalidInput as e:
            log.warning("Rejected input %r", raw)
            self.error = e.message
            return None
        self.error = ""
        self.snapshot = self.averager.insert(value)
        self.input_text = ""
        return self.snapshot

    def rendered(self) -> Optional[Dict[str, str]]:
        if self.snapshot is None:
            return None
        return render_snapshot(self.snapshot, self.decimals)
