# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Cancellable delayed execution keyed by the inputs that triggered it."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Hashable
from typing import Any

ProbeFactory = Callable[[], Awaitable[Any]]


class Debouncer:
    """
    Runs at most one job at a time, restarting the quiet period on every schedule.

    Scheduling a new job cancels both a pending timer and a job that is already
    running, so a superseded probe can never overwrite a newer result.
    """

    def __init__(self, delay: float):
        self.delay = delay
        self.key: Hashable | None = None
        self._task: asyncio.Task | None = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def schedule(self, key: Hashable, factory: ProbeFactory) -> asyncio.Task:
        """
        Run ``factory`` once ``delay`` seconds pass without another schedule.

        Scheduling the key of the job that is already pending or running keeps
        that job; the inputs it was started for have not changed.
        """
        if self.pending and key == self.key:
            return self._task
        return self._start(key, factory, self.delay)

    def trigger(self, key: Hashable, factory: ProbeFactory) -> asyncio.Task:
        """Run ``factory`` now, skipping the quiet period."""
        return self._start(key, factory, 0.0)

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()

    async def wait(self) -> Any:
        """Wait for the current job; returns None if it was cancelled."""
        task = self._task
        if task is None:
            return None
        await asyncio.wait({task})
        if task.cancelled():
            return None
        return task.result()

    def _start(self, key: Hashable, factory: ProbeFactory, delay: float) -> asyncio.Task:
        self.cancel()
        self.key = key
        self._task = asyncio.get_running_loop().create_task(self._run(factory, delay))
        return self._task

    @staticmethod
    async def _run(factory: ProbeFactory, delay: float) -> Any:
        if delay > 0:
            await asyncio.sleep(delay)
        return await factory()


__all__ = ["Debouncer", "ProbeFactory"]
