"""WeChat article search backend, via Sogou's weixin search."""

from .protocol import BaseSearchBackend
from .types import Entity


class WxBackend(BaseSearchBackend):
    """Scrapes Sogou's WeChat article search (``ul.news-list`` items).

    Result links are relative to the search host and get resolved here.
    """

    engine_name = "Wx"
    search_url = "https://weixin.sogou.com/weixin"

    def build_params(self) -> dict[str, str]:
        # type=2 selects articles rather than official accounts
        return {"type": "2", "query": self.query}

    def parse(self, html: str) -> list[Entity]:
        entities: list[Entity] = []
        for item in self.soup(html).select("ul.news-list li"):
            link = item.select_one("h3 a")
            if link is None:
                continue
            summary = item.select_one("p.txt-info")
            entity = self.make_entity(
                link.get_text(),
                link.get("href", ""),
                summary.get_text() if summary else "",
            )
            if entity is not None:
                entities.append(entity)
        return entities
