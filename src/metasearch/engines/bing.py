"""Bing web search backend."""

from .protocol import BaseSearchBackend
from .types import Entity


class BingBackend(BaseSearchBackend):
    """Scrapes the Bing result page (``li.b_algo`` blocks)."""

    engine_name = "Bing"
    search_url = "https://cn.bing.com/search"

    def build_params(self) -> dict[str, str]:
        return {"q": self.query}

    def parse(self, html: str) -> list[Entity]:
        entities: list[Entity] = []
        for block in self.soup(html).select("li.b_algo"):
            link = block.select_one("h2 a")
            if link is None:
                continue
            caption = block.select_one("div.b_caption p, p")
            entity = self.make_entity(
                link.get_text(),
                link.get("href", ""),
                caption.get_text() if caption else "",
            )
            if entity is not None:
                entities.append(entity)
        return entities
