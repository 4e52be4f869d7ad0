"""Builds the response envelope from collected results."""

import time
from collections.abc import Sequence

from metasearch.engines.types import Entity, EntityList
from metasearch.search.types import AggregateResult, StatusCode


class ResponseAssembler:
    """Aggregates counts and timing for one request.

    Create one per request, as early as possible; ``cost`` is measured
    from construction to assembly.
    """

    def __init__(self, started_at: float | None = None) -> None:
        """Initialize the assembler.

        Args:
            started_at: ``time.perf_counter()`` reading at request start (default: now).
        """
        self._started_at = time.perf_counter() if started_at is None else started_at

    def elapsed_ms(self) -> int:
        """Whole milliseconds since request start."""
        return int((time.perf_counter() - self._started_at) * 1000)

    def assemble(self, results: Sequence[EntityList], ranked: list[Entity]) -> AggregateResult:
        """Build a success envelope.

        Args:
            results: Every list collected before the deadline.
            ranked: The ranked merge of those lists.

        Returns:
            Envelope with ``code = 0`` and ``size`` = sum of collected sizes.
        """
        return AggregateResult(
            code=int(StatusCode.OK),
            cost=self.elapsed_ms(),
            data=EntityList(
                index=0,
                size=sum(result.size for result in results),
                entities=ranked,
            ),
        )

    def failure(self, message: str) -> AggregateResult:
        """Build a failure envelope with empty data."""
        return AggregateResult(
            code=int(StatusCode.FAILED),
            msg=message,
            cost=self.elapsed_ms(),
            data=EntityList(),
        )
