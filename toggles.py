#!/usr/bin/env python3
"""Bold toggle offsets: recording while stripping, consuming while styling."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple


class ToggleRecorder:
    """Collects bold toggle offsets in ascending order.

    Two toggles at the same offset open and close an empty span, so the
    second one cancels the first instead of being appended.
    """

    def __init__(self) -> None:
        self._offsets: List[int] = []

    def record(self, offset: int) -> None:
        if self._offsets and offset < self._offsets[-1]:
            raise ValueError(
                f"Toggle offset {offset} precedes previous offset {self._offsets[-1]}"
            )
        if self._offsets and self._offsets[-1] == offset:
            self._offsets.pop()
            return
        self._offsets.append(offset)

    @property
    def offsets(self) -> List[int]:
        return list(self._offsets)


class ToggleCursor:
    """Read cursor over a sorted sequence of toggle offsets."""

    def __init__(self, offsets: Iterable[int]) -> None:
        self._offsets: Tuple[int, ...] = tuple(offsets)
        self._index = 0

    def peek(self) -> Optional[int]:
        if self._index >= len(self._offsets):
            return None
        return self._offsets[self._index]

    def at(self, position: int) -> bool:
        return self.peek() == position

    def advance(self) -> int:
        offset = self.peek()
        if offset is None:
            raise IndexError("No pending toggle offsets")
        self._index += 1
        return offset


__all__ = ["ToggleRecorder", "ToggleCursor"]
