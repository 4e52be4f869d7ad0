"""Concurrent fan-out of backend searches and deadline-bounded fan-in."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Sequence
from dataclasses import dataclass, field

import structlog

from metasearch.core.logging import log_external_call
from metasearch.engines.protocol import SearchBackend
from metasearch.engines.types import EntityList

logger = structlog.get_logger()


@dataclass
class Delivery:
    """Message a search task sends on the collection channel."""

    engine: str
    result: EntityList
    duration_ms: float = 0.0
    success: bool = True


@dataclass
class Arrival:
    """A delivery as received by the collector, numbered in arrival order."""

    sequence: int
    engine: str
    result: EntityList
    duration_ms: float = 0.0


@dataclass
class DispatchHandle:
    """In-flight searches for one request."""

    channel: asyncio.Queue[Delivery]
    tasks: dict[str, asyncio.Task[None]] = field(default_factory=dict)

    @property
    def expected(self) -> int:
        """Number of deliveries the collector should wait for."""
        return len(self.tasks)


@dataclass
class CollectionResult:
    """Outcome of one fan-in."""

    arrivals: list[Arrival]
    expected: int
    timed_out: bool = False
    cancelled: list[str] = field(default_factory=list)

    @property
    def lists(self) -> list[EntityList]:
        """Collected lists in arrival order."""
        return [arrival.result for arrival in self.arrivals]

    @property
    def complete(self) -> bool:
        """Whether every dispatched backend reported before the deadline."""
        return len(self.arrivals) == self.expected


class Dispatcher:
    """Starts one search task per backend.

    Each task sends exactly one Delivery on the request's channel. A backend
    that raises still delivers, with an empty list, so it never holds the
    collector until the deadline.
    """

    def __init__(self) -> None:
        """Initialize the dispatcher."""
        # Cancelled tasks stay referenced until they finish unwinding
        self._background: set[asyncio.Task[None]] = set()

    def dispatch(self, backends: Sequence[SearchBackend]) -> DispatchHandle:
        """Start searching every backend concurrently.

        Args:
            backends: Backends to search, one task each.

        Returns:
            Handle carrying the channel (capacity = number of backends) and tasks.
        """
        handle = DispatchHandle(channel=asyncio.Queue(maxsize=max(1, len(backends))))
        for i, backend in enumerate(backends):
            key = f"{backend.name}#{i}"
            handle.tasks[key] = asyncio.create_task(
                self._run(backend, handle.channel),
                name=f"search:{key}",
            )
        logger.debug("searches_dispatched", engines=[b.name for b in backends])
        return handle

    async def _run(self, backend: SearchBackend, channel: asyncio.Queue[Delivery]) -> None:
        """Search one backend and send its list on the channel."""
        start = time.perf_counter()
        try:
            result = await backend.search()
            success = True
        except Exception as e:
            logger.warning(
                "engine_search_failed",
                engine=backend.name,
                error_type=type(e).__name__,
                error=str(e),
            )
            result = EntityList()
            success = False

        duration_ms = (time.perf_counter() - start) * 1000
        log_external_call(
            logger,
            service=backend.name,
            operation="search",
            duration_ms=duration_ms,
            success=success,
            results=result.size,
        )
        channel.put_nowait(
            Delivery(engine=backend.name, result=result, duration_ms=duration_ms, success=success)
        )

    def cancel_pending(self, handle: DispatchHandle) -> list[str]:
        """Cancel every task of a request that has not finished yet.

        Args:
            handle: The request's dispatch handle.

        Returns:
            Engine names whose searches were cancelled.
        """
        cancelled = []
        for key, task in handle.tasks.items():
            if task.done():
                continue
            task.cancel()
            self._background.add(task)
            task.add_done_callback(self._background.discard)
            cancelled.append(key.rsplit("#", 1)[0])

        if cancelled:
            logger.info("searches_cancelled", engines=cancelled)
        return cancelled

    @property
    def pending_background(self) -> int:
        """Cancelled tasks that are still unwinding."""
        return len(self._background)


class Collector:
    """Fan-in loop gathering deliveries until all arrive or the deadline fires."""

    def __init__(self, debug: bool = False) -> None:
        """Initialize the collector.

        Args:
            debug: Log every arrival.
        """
        self._debug = debug

    async def collect(self, handle: DispatchHandle, timeout: float) -> CollectionResult:
        """Wait for deliveries on the handle's channel.

        Args:
            handle: Dispatch handle of the request.
            timeout: Deadline in seconds, measured from now.

        Returns:
            CollectionResult with the lists that arrived in time, in arrival order.
        """
        arrivals: list[Arrival] = []
        remaining = handle.expected
        timed_out = False

        if remaining:
            deadline = asyncio.get_running_loop().time() + max(0.0, timeout)
            try:
                async with asyncio.timeout_at(deadline):
                    while remaining:
                        delivery = await handle.channel.get()
                        arrivals.append(
                            Arrival(
                                sequence=len(arrivals),
                                engine=delivery.engine,
                                result=delivery.result,
                                duration_ms=delivery.duration_ms,
                            )
                        )
                        remaining -= 1
                        if self._debug and delivery.result.entities:
                            logger.info(
                                "engine_results_received",
                                engine=delivery.result.engine,
                                size=delivery.result.size,
                            )
            except TimeoutError:
                timed_out = True
                logger.info(
                    "collection_timed_out",
                    timeout=timeout,
                    received=len(arrivals),
                    expected=handle.expected,
                )

        return CollectionResult(
            arrivals=arrivals,
            expected=handle.expected,
            timed_out=timed_out,
        )
