"""Composite relevance scoring of collected search results."""

from collections.abc import Iterable

from metasearch.config.settings import ScoringWeights
from metasearch.engines.types import Entity, EntityList


class Scorer:
    """Fills the score fields of every entity in a backend list.

    For the entity at 0-based position ``i`` of a list of length ``L``:

    - ``position_score = (L - i) * position_weight(engine)``
    - ``search_score = search_score_weight(engine)``
    - ``domain_score = domain_score_weight(host)``
    - ``score`` is their sum

    ``L`` is the list's own length, so each engine keeps its own position
    scale. Scoring only reads the weights and overwrites the four fields;
    running it twice gives the same numbers.
    """

    def __init__(self, weights: ScoringWeights) -> None:
        """Initialize the scorer.

        Args:
            weights: Weight tables to score with.
        """
        self._weights = weights

    def score_entity(self, entity: Entity, position: int, length: int) -> Entity:
        """Score one entity in place and return it."""
        entity.position_score = (length - position) * self._weights.position_weight(entity.engine)
        entity.search_score = self._weights.search_score_weight(entity.engine)
        entity.domain_score = self._weights.domain_score_weight(entity.host)
        entity.score = entity.position_score + entity.search_score + entity.domain_score
        return entity

    def score_list(self, result: EntityList) -> EntityList:
        """Score every entity of one backend list in place."""
        length = len(result.entities)
        for position, entity in enumerate(result.entities):
            self.score_entity(entity, position, length)
        return result

    def score_all(self, results: Iterable[EntityList]) -> list[EntityList]:
        """Score several backend lists, preserving their order."""
        return [self.score_list(result) for result in results]
