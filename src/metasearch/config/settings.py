"""Application settings loaded from environment variables."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENGINES = ["Baidu", "Bing", "Google", "Wx"]

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36"
)


class ScoringWeights(BaseModel):
    """Weight tables used to score search results.

    All lookups are pure; the same inputs always give the same weight.
    """

    model_config = ConfigDict(frozen=True)

    position_weights: dict[str, int] = Field(
        default_factory=lambda: {"Baidu": 1, "Bing": 2, "Google": 2, "Wx": 1}
    )
    """Multiplier applied to an item's reversed rank, per engine."""

    default_position_weight: int = 1

    search_score_weights: dict[str, int] = Field(
        default_factory=lambda: {"Baidu": 1, "Bing": 2, "Google": 3, "Wx": 0}
    )
    """Flat credibility bonus per engine."""

    default_search_score_weight: int = 0

    domain_score_weights: dict[str, int] = Field(
        default_factory=lambda: {
            "wikipedia.org": 5,
            "github.com": 5,
            "stackoverflow.com": 5,
            "zhihu.com": 3,
        }
    )
    """Flat credibility bonus (or penalty) per host or parent domain."""

    default_domain_score_weight: int = 0

    def position_weight(self, engine: str) -> int:
        """Get the position multiplier for an engine."""
        return self.position_weights.get(engine, self.default_position_weight)

    def search_score_weight(self, engine: str) -> int:
        """Get the flat search score for an engine."""
        return self.search_score_weights.get(engine, self.default_search_score_weight)

    def domain_score_weight(self, host: str) -> int:
        """Get the domain score for a host.

        Tries the exact host, then each parent domain, so an entry for
        ``zhihu.com`` also covers ``www.zhihu.com``.
        """
        labels = host.lower().rstrip(".").split(".") if host else []
        for i in range(len(labels)):
            candidate = ".".join(labels[i:])
            if candidate in self.domain_score_weights:
                return self.domain_score_weights[candidate]
        return self.default_domain_score_weight


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Instances are frozen; build one at startup and pass it where needed.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Application Configuration
    ENVIRONMENT: Literal["development", "test", "production"] = "development"
    DEBUG: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 8080
    static_dir: Path | None = Path("html")

    # Search behaviour
    max_timeout: float = 5.0
    """Collection deadline in seconds when the caller gives none."""

    backend_timeout: float = 4.0
    """Internal bound on a single backend call, in seconds."""

    default_engines: list[str] = Field(default_factory=lambda: list(DEFAULT_ENGINES))
    user_agent: str = DEFAULT_USER_AGENT

    # Scoring
    scoring: ScoringWeights = ScoringWeights()

    @property
    def default_timeout(self) -> float:
        """Default collection deadline in seconds."""
        return self.max_timeout

    @property
    def debug_enabled(self) -> bool:
        """Whether verbose per-request logging is on."""
        return self.DEBUG


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
