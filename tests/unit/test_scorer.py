"""Unit tests for result scoring."""

from metasearch.config.settings import ScoringWeights
from metasearch.engines.types import Entity, EntityList
from metasearch.search.scorer import Scorer


def _list(engine: str, *urls: str) -> EntityList:
    return EntityList.of([Entity(title=url, url=url, engine=engine) for url in urls])


class TestScorer:
    """Tests for Scorer."""

    def test_position_scores_reverse_rank(self):
        """Test the first item of a list gets the largest position score."""
        scorer = Scorer(ScoringWeights())
        result = scorer.score_list(
            _list("Bing", "https://a.example/1", "https://a.example/2", "https://a.example/3")
        )

        # Bing: position weight 2, search score 2
        assert [e.position_score for e in result.entities] == [6, 4, 2]
        assert [e.search_score for e in result.entities] == [2, 2, 2]
        assert [e.score for e in result.entities] == [8, 6, 4]

    def test_score_is_sum_of_components(self):
        """Test the total always equals the three components."""
        scorer = Scorer(ScoringWeights())
        result = scorer.score_list(
            _list("Google", "https://en.wikipedia.org/wiki/Go", "https://example.com/")
        )

        for entity in result.entities:
            assert entity.score == entity.position_score + entity.search_score + entity.domain_score
        assert result.entities[0].domain_score == 5
        assert result.entities[1].domain_score == 0

    def test_unknown_engine_and_host_score_neutral(self):
        """Test unknown engines and hosts fall back to default weights."""
        scorer = Scorer(ScoringWeights())
        entity = scorer.score_list(_list("Yahoo", "https://unknown.example/")).entities[0]

        assert entity.position_score == 1
        assert entity.search_score == 0
        assert entity.domain_score == 0

    def test_each_list_uses_its_own_length(self):
        """Test position scale is per list, not per merged result."""
        scorer = Scorer(ScoringWeights())
        short, long = scorer.score_all(
            [
                _list("Baidu", "https://a.example/1"),
                _list("Baidu", *(f"https://b.example/{i}" for i in range(4))),
            ]
        )

        assert short.entities[0].position_score == 1
        assert [e.position_score for e in long.entities] == [4, 3, 2, 1]

    def test_scoring_is_idempotent(self):
        """Test scoring twice gives the same numbers."""
        scorer = Scorer(ScoringWeights())
        result = _list("Bing", "https://github.com/a", "https://b.example/")

        first = [e.score for e in scorer.score_list(result).entities]
        second = [e.score for e in scorer.score_list(result).entities]

        assert first == second

    def test_backend_scores_are_overwritten(self):
        """Test values set by a backend do not leak into the total."""
        entity = Entity(title="t", url="https://b.example/", engine="Wx", score=999, domain_score=50)
        Scorer(ScoringWeights()).score_list(EntityList.of([entity]))

        assert entity.domain_score == 0
        assert entity.score == 1

    def test_score_all_preserves_order(self):
        """Test lists come back in the order given."""
        lists = [_list("Bing", "https://a.example/"), _list("Baidu", "https://b.example/")]
        assert [r.engine for r in Scorer(ScoringWeights()).score_all(lists)] == ["Bing", "Baidu"]
