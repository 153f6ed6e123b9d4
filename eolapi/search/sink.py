"""Bounded channel merging page results into one stream."""

from __future__ import annotations

import asyncio
from collections import deque
from typing import AsyncIterator, Generic, TypeVar

T = TypeVar("T")

DEFAULT_SINK_CAPACITY = 5


class SinkClosedError(RuntimeError):
    """Raised when writing to, or closing, an already closed sink."""


class ResultSink(Generic[T]):
    """FIFO buffer with a fixed capacity, many writers and one reader.

    Writers block while the buffer is full. Closing never blocks and never
    drops buffered items: the reader keeps receiving them until the buffer
    is empty, then iteration stops.
    """

    def __init__(self, capacity: int = DEFAULT_SINK_CAPACITY):
        if capacity < 1:
            raise ValueError("sink capacity must be >= 1")
        self.capacity = capacity
        self._items: deque[T] = deque()
        self._cond = asyncio.Condition()
        self._closed = False
        self.close_count = 0

    @property
    def closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        return len(self._items)

    async def put(self, item: T) -> None:
        async with self._cond:
            while len(self._items) >= self.capacity and not self._closed:
                await self._cond.wait()
            if self._closed:
                raise SinkClosedError("write to closed sink")
            self._items.append(item)
            self._cond.notify_all()

    async def get(self) -> T:
        """Next item in arrival order; raises StopAsyncIteration once closed and empty."""
        async with self._cond:
            while not self._items and not self._closed:
                await self._cond.wait()
            if not self._items:
                raise StopAsyncIteration
            item = self._items.popleft()
            self._cond.notify_all()
            return item

    async def close(self) -> None:
        async with self._cond:
            if self._closed:
                raise SinkClosedError("sink already closed")
            self._closed = True
            self.close_count += 1
            self._cond.notify_all()

    def __aiter__(self) -> AsyncIterator[T]:
        return self

    async def __anext__(self) -> T:
        return await self.get()
