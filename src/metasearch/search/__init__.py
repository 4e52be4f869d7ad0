"""Search pipeline: dispatch, collection, scoring, ranking and assembly."""

from metasearch.search.assembler import ResponseAssembler
from metasearch.search.dispatcher import (
    Arrival,
    CollectionResult,
    Collector,
    Delivery,
    DispatchHandle,
    Dispatcher,
)
from metasearch.search.ranker import merge, rank
from metasearch.search.scorer import Scorer
from metasearch.search.service import MetaSearchService
from metasearch.search.types import AggregateResult, StatusCode

__all__ = [
    "AggregateResult",
    "Arrival",
    "CollectionResult",
    "Collector",
    "Delivery",
    "DispatchHandle",
    "Dispatcher",
    "MetaSearchService",
    "ResponseAssembler",
    "Scorer",
    "StatusCode",
    "merge",
    "rank",
]
