"""
Use case: Latest market headlines.

Input: None
Output: list[NewsArticle]
Side effects: None.
Failure cases: None.
"""

from app.domain.market.entities import NewsArticle
from app.domain.market.ports import NewsPort


class GetLatestNewsUseCase:
    def __init__(self, news: NewsPort) -> None:
        self._news = news

    def execute(self) -> list[NewsArticle]:
        return self._news.latest()
