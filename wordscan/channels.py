"""Thread-safe channels used to pass jobs and results between threads."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

from wordscan.cancellation import CancellationToken
from wordscan.exceptions import CancellationError, ChannelClosedError

T = TypeVar("T")


class Channel(Generic[T]):
    """Bounded, closable FIFO shared by any number of producers and consumers.

    Closing marks end-of-stream: buffered items can still be received, after
    which ``get`` raises ChannelClosedError.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._items: deque[T] = deque()
        self._closed = False
        self._cond = threading.Condition()

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def put(self, item: T) -> None:
        """Append ``item``, blocking while the channel is full."""
        with self._cond:
            while not self._closed and len(self._items) >= self.capacity:
                self._cond.wait()
            if self._closed:
                raise ChannelClosedError("put on closed channel")
            self._items.append(item)
            self._cond.notify_all()

    def get(self, cancel_token: CancellationToken | None = None) -> T:
        """Return the next item.

        Raises:
            CancellationError: ``cancel_token`` fired before an item was taken.
                Cancellation is checked first, so a cancelled token never dequeues.
            ChannelClosedError: the channel is closed and drained.
        """
        unregister = cancel_token.register(self._wake) if cancel_token is not None else None
        try:
            with self._cond:
                while True:
                    if cancel_token is not None and cancel_token.cancelled:
                        raise CancellationError(cancel_token.reason)
                    if self._items:
                        item = self._items.popleft()
                        self._cond.notify_all()
                        return item
                    if self._closed:
                        raise ChannelClosedError("channel closed")
                    self._cond.wait()
        finally:
            if unregister is not None:
                unregister()

    def close(self) -> None:
        """Signal that no more items will be sent. Idempotent."""
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def __iter__(self) -> Iterator[T]:
        """Yield items until the channel is closed and drained."""
        while True:
            try:
                yield self.get()
            except ChannelClosedError:
                return

    def _wake(self) -> None:
        with self._cond:
            self._cond.notify_all()


class WaitGroup:
    """Counter of outstanding tasks; ``wait`` blocks until it reaches zero."""

    def __init__(self) -> None:
        self._count = 0
        self._cond = threading.Condition()

    def add(self, delta: int = 1) -> None:
        with self._cond:
            if self._count + delta < 0:
                raise ValueError("negative WaitGroup counter")
            self._count += delta
            if self._count == 0:
                self._cond.notify_all()

    def done(self) -> None:
        self.add(-1)

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the counter is zero; return False if ``timeout`` expired first."""
        with self._cond:
            return self._cond.wait_for(lambda: self._count == 0, timeout)
