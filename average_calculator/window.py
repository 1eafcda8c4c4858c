from __future__ import annotations

"""Bounded FIFO window of samples and its running mean."""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, Tuple

import numpy as np


log = logging.getLogger(__name__)


WINDOW_SIZE = 10


def mean_of(values: Iterable[float]) -> float:
    vals = list(values)
    if not vals:
        return 0.0
    arr = np.asarray(vals, dtype=float)
    with np.errstate(over="ignore"):
        m = float(np.mean(arr))
    if np.isfinite(m):
        return m
    # the sum overflowed; average the values scaled into [-1, 1]
    scale = float(np.max(np.abs(arr)))
    return float(np.mean(arr / scale)) * scale


@dataclass(frozen=True)
class Snapshot:
    previous_window: Tuple[float, ...]
    current_window: Tuple[float, ...]
    added_samples: Tuple[float, ...]
    average: float


class WindowAverager:
    def __init__(self, capacity: int = WINDOW_SIZE):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = int(capacity)
        # no maxlen: eviction is done explicitly in insert()
        self.data: Deque[float] = deque()

    def __len__(self) -> int:
        return len(self.data)

    @property
    def window(self) -> Tuple[float, ...]:
        return tuple(self.data)

    @property
    def is_full(self) -> bool:
        return len(self.data) >= self.capacity

    def average(self) -> float:
        return mean_of(self.data)

    def insert(self, sample: float) -> Snapshot:
        """Append ``sample``, evicting the oldest value once at capacity.

        Returns a Snapshot holding copies of the window before and after.
        """
        x = float(sample)
        previous = tuple(self.data)
        if len(self.data) >= self.capacity:
            evicted = self.data.popleft()
            log.debug("evicted %r", evicted)
        self.data.append(x)
        current = tuple(self.data)
        snap = Snapshot(
            previous_window=previous,
            current_window=current,
            added_samples=(x,),
            average=mean_of(current),
        )
        log.debug("inserted %r size=%d avg=%.4f", x, len(current), snap.average)
        return snap
