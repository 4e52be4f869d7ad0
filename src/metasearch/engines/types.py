"""Result types shared by search backends and the ranking pipeline.

- Entity: one search result, with its score breakdown
- EntityList: everything one backend returned for one query
"""

from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Entity(BaseModel):
    """One search result.

    ``score`` always equals ``position_score + search_score + domain_score``;
    the scorer fills all four, values supplied by a backend are overwritten.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    url: str = ""
    host: str = ""
    engine: str = Field(default="", alias="from")
    snippet: str = ""

    # Scores
    position_score: int = 0
    search_score: int = 0
    domain_score: int = 0
    score: int = 0

    @model_validator(mode="after")
    def _derive_host(self) -> "Entity":
        """Fill ``host`` from ``url`` when the backend left it empty."""
        if not self.host and self.url:
            self.host = urlparse(self.url).hostname or ""
        return self


class EntityList(BaseModel):
    """Result of a single backend invocation.

    ``entities`` keep the backend's own relevance order. ``size`` is the
    size the backend reported, which normally equals ``len(entities)``.
    """

    model_config = ConfigDict(populate_by_name=True)

    index: int = 0
    size: int = 0
    entities: list[Entity] = Field(default_factory=list, alias="list")

    @classmethod
    def of(cls, entities: list[Entity], index: int = 0) -> "EntityList":
        """Create a list whose size matches its entity count."""
        return cls(index=index, size=len(entities), entities=entities)

    @property
    def engine(self) -> str | None:
        """Engine of the first entity, if any."""
        return self.entities[0].engine if self.entities else None
