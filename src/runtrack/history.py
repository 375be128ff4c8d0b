#!/usr/bin/env python3
"""
Bounded window of the most recent raw fixes.
"""

from typing import Iterator, List, Optional
from collections import deque

from .config import HISTORY_SIZE
from .fix import Fix


class PositionHistory:
    """Insertion-ordered buffer of the last ``maxlen`` raw fixes.

    Every incoming fix is recorded here before it is scored, whether it is
    later accepted or not. When the buffer is full the oldest fix is evicted.
    """

    def __init__(self, maxlen: int = HISTORY_SIZE):
        if maxlen < 1:
            raise ValueError("History size must be at least 1")
        self._fixes: deque = deque(maxlen=maxlen)

    @property
    def maxlen(self) -> int:
        return self._fixes.maxlen

    def push(self, fix: Fix) -> None:
        self._fixes.append(fix)

    def last(self) -> Optional[Fix]:
        return self._fixes[-1] if self._fixes else None

    def second_to_last(self) -> Optional[Fix]:
        return self._fixes[-2] if len(self._fixes) >= 2 else None

    def clear(self) -> None:
        self._fixes.clear()

    def to_list(self) -> List[Fix]:
        return list(self._fixes)

    def __len__(self) -> int:
        return len(self._fixes)

    def __iter__(self) -> Iterator[Fix]:
        return iter(self._fixes)
