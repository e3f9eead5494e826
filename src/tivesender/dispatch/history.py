# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Most-recent-first record of dispatch outcomes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from ..models.dispatch import DispatchResult


class History:
    """
    Append-only from the caller's point of view; entries are never modified.

    With ``limit`` set, the oldest entry is dropped once the limit is reached.
    """

    def __init__(self, limit: int | None = None):
        if limit is not None and limit <= 0:
            raise ValueError("History limit must be positive")
        self.limit = limit
        self._entries: deque[DispatchResult] = deque(maxlen=limit)

    def append(self, result: DispatchResult) -> None:
        self._entries.appendleft(result)

    @property
    def latest(self) -> DispatchResult | None:
        return self._entries[0] if self._entries else None

    def clear(self) -> None:
        self._entries.clear()

    def __iter__(self) -> Iterator[DispatchResult]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> DispatchResult:
        return self._entries[index]


__all__ = ["History"]
