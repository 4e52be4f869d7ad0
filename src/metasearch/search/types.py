"""Response envelope returned by the search pipeline."""

from enum import IntEnum

from pydantic import BaseModel, Field

from metasearch.engines.types import EntityList


class StatusCode(IntEnum):
    """Envelope status codes."""

    OK = 0
    FAILED = -1


class AggregateResult(BaseModel):
    """Final response envelope.

    ``data.size`` is the sum of the sizes of every backend list collected
    before the deadline; ``cost`` is the elapsed time in whole milliseconds.
    """

    code: int = int(StatusCode.OK)
    msg: str | None = None
    cost: int = 0
    data: EntityList = Field(default_factory=EntityList)

    @property
    def is_success(self) -> bool:
        """Check if the envelope reports success."""
        return self.code == StatusCode.OK

    def to_json(self) -> str:
        """Encode with wire field names, omitting an absent ``msg``."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
