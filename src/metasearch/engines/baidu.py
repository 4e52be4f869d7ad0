"""Baidu web search backend."""

from .protocol import BaseSearchBackend
from .types import Entity


class BaiduBackend(BaseSearchBackend):
    """Scrapes the Baidu result page.

    Baidu links point at its own redirector; when a result carries the
    real target in its ``mu`` attribute, that URL is used instead.
    """

    engine_name = "Baidu"
    search_url = "https://www.baidu.com/s"

    def build_params(self) -> dict[str, str]:
        return {"wd": self.query}

    def parse(self, html: str) -> list[Entity]:
        entities: list[Entity] = []
        for block in self.soup(html).select("div.result, div.result-op"):
            link = block.select_one("h3 a")
            if link is None:
                continue
            href = block.get("mu") or link.get("href", "")
            abstract = block.select_one(".c-abstract, .content-right_8Zs40")
            entity = self.make_entity(
                link.get_text(),
                href,
                abstract.get_text() if abstract else "",
            )
            if entity is not None:
                entities.append(entity)
        return entities
