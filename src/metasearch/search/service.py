"""Search orchestration: resolve, fan out, collect, score, rank, assemble."""

from collections.abc import Sequence

import structlog

from metasearch.config.settings import Settings
from metasearch.core.exceptions import UnsupportedEngineError
from metasearch.engines.registry import EngineRegistry, normalize_engine_names
from metasearch.search.assembler import ResponseAssembler
from metasearch.search.dispatcher import Collector, Dispatcher
from metasearch.search.ranker import rank
from metasearch.search.scorer import Scorer
from metasearch.search.types import AggregateResult

logger = structlog.get_logger()


class MetaSearchService:
    """Answers one query from several engines within a time budget.

    Engine validation happens before any task starts. Backends still
    running when the deadline fires are cancelled and contribute nothing.
    """

    def __init__(
        self,
        registry: EngineRegistry,
        settings: Settings,
        *,
        dispatcher: Dispatcher | None = None,
        collector: Collector | None = None,
        scorer: Scorer | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            registry: Engine registry to resolve names against.
            settings: Application settings (defaults, weights, debug flag).
            dispatcher: Task launcher (default: new Dispatcher).
            collector: Fan-in loop (default: new Collector).
            scorer: Result scorer (default: one over ``settings.scoring``).
        """
        self._registry = registry
        self._settings = settings
        self._dispatcher = dispatcher or Dispatcher()
        self._collector = collector or Collector(debug=settings.debug_enabled)
        self._scorer = scorer or Scorer(settings.scoring)

    @property
    def registry(self) -> EngineRegistry:
        """Engine registry used by this service."""
        return self._registry

    @property
    def dispatcher(self) -> Dispatcher:
        """Dispatcher used by this service."""
        return self._dispatcher

    async def search(
        self,
        query: str,
        engines: Sequence[str] | None = None,
        timeout: float | None = None,
        *,
        assembler: ResponseAssembler | None = None,
    ) -> AggregateResult:
        """Run one search.

        Args:
            query: Query text, passed to every backend unmodified.
            engines: Engine names (default: configured default engines).
            timeout: Collection deadline in seconds (default: configured).
            assembler: Assembler started at request entry (default: now).

        Returns:
            Success envelope, possibly with partial results.

        Raises:
            UnsupportedEngineError: If any engine name is unknown.
        """
        assembler = assembler or ResponseAssembler()
        names = normalize_engine_names(engines or []) or list(self._settings.default_engines)
        effective_timeout = self._settings.default_timeout if timeout is None else timeout

        if self._settings.debug_enabled:
            logger.info(
                "search_requested",
                query=query,
                engines=names,
                timeout=effective_timeout,
            )

        backends, unsupported = self._registry.resolve(names, query)
        if unsupported:
            raise UnsupportedEngineError(unsupported)

        handle = self._dispatcher.dispatch(backends)
        try:
            collection = await self._collector.collect(handle, effective_timeout)
        finally:
            cancelled = self._dispatcher.cancel_pending(handle)
        collection.cancelled = cancelled

        scored = self._scorer.score_all(collection.lists)
        result = assembler.assemble(scored, rank(scored))

        logger.info(
            "search_completed",
            engines=names,
            received=len(collection.arrivals),
            expected=collection.expected,
            timed_out=collection.timed_out,
            cancelled=collection.cancelled,
            size=result.data.size,
            cost_ms=result.cost,
        )
        return result
