"""Shared cancellation state for one paginated search."""

from __future__ import annotations

import asyncio
import threading


class CancellationScope:
    """Dying flag, first-error slot and completion barrier shared by page workers.

    Cancellation is cooperative: setting the flag only stops workers that have
    not started their fetch yet. Running workers are never interrupted.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._dying = False
        self._error: BaseException | None = None
        self._live = 0
        self._idle = asyncio.Event()
        self._idle.set()

    @property
    def dying(self) -> bool:
        with self._lock:
            return self._dying

    @property
    def error(self) -> BaseException | None:
        with self._lock:
            return self._error

    def fail(self, error: BaseException) -> bool:
        """Record ``error`` and set the dying flag.

        Only the first recorded error is kept. Returns True when this call
        won the slot.
        """
        with self._lock:
            self._dying = True
            if self._error is not None:
                return False
            self._error = error
            return True

    def add(self) -> None:
        """Register one more live worker on the completion barrier."""
        with self._lock:
            self._live += 1
            self._idle.clear()

    def done(self) -> None:
        """Mark one worker as retired."""
        with self._lock:
            if self._live <= 0:
                raise RuntimeError("done() called more often than add()")
            self._live -= 1
            if self._live == 0:
                self._idle.set()

    @property
    def live(self) -> int:
        with self._lock:
            return self._live

    async def wait(self) -> None:
        """Block until every registered worker has retired."""
        await self._idle.wait()
