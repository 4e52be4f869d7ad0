"""Deterministic merge and ranking of scored results."""

from collections.abc import Iterable

from metasearch.engines.types import Entity, EntityList


def merge(results: Iterable[EntityList]) -> list[Entity]:
    """Concatenate lists in the given (arrival) order."""
    return [entity for result in results for entity in result.entities]


def rank(results: Iterable[EntityList]) -> list[Entity]:
    """Merge scored lists and sort by total score, highest first.

    Equal scores keep merge order: lists in arrival order, then each
    list's own order. The merge index is an explicit secondary key.

    Args:
        results: Scored lists in arrival order.

    Returns:
        Ranked entities.
    """
    merged = merge(results)
    order = sorted(range(len(merged)), key=lambda i: (-merged[i].score, i))
    return [merged[i] for i in order]
