"""Staggered, cancellable reveal of freshly shuffled tiles.

Each non-blank tile gets its own task on a worker pool. A task waits a
random delay and then posts a ``RevealEvent`` onto a completion queue.
One consumer thread drains that queue, so events finish in random order
but are handed to the consumer strictly one at a time.
"""

from __future__ import annotations

import logging
import queue
import random
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Iterable

logger = logging.getLogger(__name__)

_STOP = object()


@dataclass(frozen=True)
class RevealEvent:
    """One finished reveal task, tagged with the shuffle it belongs to."""

    epoch: int
    position: int


class RevealScheduler:
    """Runs reveal tasks on a bounded pool and serializes their completions.

    Usage::

        scheduler = RevealScheduler(handle_event, workers=9)
        scheduler.schedule(epoch=1, positions=[0, 1, 2, 3])
        ...
        scheduler.close()
    """

    def __init__(
        self,
        consumer: Callable[[RevealEvent], None],
        workers: int,
        delay_range: tuple[float, float] = (0.3, 3.3),
        rng: random.Random | None = None,
    ) -> None:
        self._consumer = consumer
        self._delay_min, self._delay_max = delay_range
        self._rng = rng or random.Random()

        self._pool = ThreadPoolExecutor(
            max_workers=max(1, workers), thread_name_prefix="reveal"
        )
        self._completions: queue.Queue = queue.Queue()
        self._cancel = threading.Event()
        self._futures: list[Future] = []
        self._closed = False

        self._thread = threading.Thread(
            target=self._drain, name="reveal-consumer", daemon=True
        )
        self._thread.start()

    # -- public API -----------------------------------------------------------

    def schedule(self, epoch: int, positions: Iterable[int]) -> None:
        """Queue one delayed reveal per position, dropping any earlier batch."""
        if self._closed:
            raise RuntimeError("RevealScheduler is closed.")
        self.cancel()

        cancel = threading.Event()
        self._cancel = cancel
        for position in positions:
            delay = self._rng.uniform(self._delay_min, self._delay_max)
            self._futures.append(
                self._pool.submit(self._reveal_after, epoch, position, delay, cancel)
            )
        logger.debug("Scheduled %d reveals for epoch %d", len(self._futures), epoch)

    def cancel(self) -> None:
        """Stop pending reveal tasks of the current batch.

        Tasks that already posted their event are not recalled; the
        consumer is expected to drop events from an old epoch.
        """
        self._cancel.set()
        for future in self._futures:
            future.cancel()
        self._futures = []

    def close(self) -> None:
        """Cancel outstanding work and stop the pool and consumer thread."""
        if self._closed:
            return
        self._closed = True
        self.cancel()
        self._pool.shutdown(wait=True, cancel_futures=True)
        self._completions.put(_STOP)
        if threading.current_thread() is not self._thread:
            self._thread.join()

    # -- internal -------------------------------------------------------------

    def _reveal_after(
        self, epoch: int, position: int, delay: float, cancel: threading.Event
    ) -> None:
        """Worker task: wait out *delay* unless the batch is cancelled first."""
        if cancel.wait(delay):
            return
        self._completions.put(RevealEvent(epoch=epoch, position=position))

    def _drain(self) -> None:
        """Consumer thread: hand events over one at a time until stopped."""
        while True:
            event = self._completions.get()
            if event is _STOP:
                return
            try:
                self._consumer(event)
            except Exception:
                logger.exception("Reveal consumer failed on %s", event)
