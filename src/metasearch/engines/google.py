"""Google web search backend."""

from urllib.parse import parse_qs, urlparse

from .protocol import BaseSearchBackend
from .types import Entity


def _unwrap_redirect(href: str) -> str:
    """Return the target of a ``/url?q=...`` redirect link, else the link itself."""
    if href.startswith("/url?"):
        target = parse_qs(urlparse(href).query).get("q")
        if target:
            return target[0]
    return href


class GoogleBackend(BaseSearchBackend):
    """Scrapes the Google result page (``div.g`` blocks)."""

    engine_name = "Google"
    search_url = "https://www.google.com/search"

    def build_params(self) -> dict[str, str]:
        return {"q": self.query}

    def parse(self, html: str) -> list[Entity]:
        entities: list[Entity] = []
        for block in self.soup(html).select("div.g"):
            heading = block.select_one("h3")
            link = heading.find_parent("a") if heading is not None else None
            if link is None:
                continue
            snippet = block.select_one("div.VwiC3b, span.st")
            entity = self.make_entity(
                heading.get_text(),
                _unwrap_redirect(link.get("href", "")),
                snippet.get_text() if snippet else "",
            )
            if entity is not None:
                entities.append(entity)
        return entities
