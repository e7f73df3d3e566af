"""
Adapter: Curated market headlines.

Implements the NewsPort with a fixed list; swapping in a real news
API only needs another NewsPort implementation.
"""

from app.domain.market.entities import NewsArticle
from app.domain.market.ports import NewsPort

HEADLINES = (
    NewsArticle(
        title="Market Rally Continues as Tech Stocks Lead Gains",
        summary=(
            "Major indices reached new highs today as technology sector stocks "
            "continued their upward momentum, driven by positive earnings reports "
            "and AI developments."
        ),
        url="https://example.com/market-rally",
        source="Market Daily",
        date="2 hours ago",
    ),
    NewsArticle(
        title="Fed Signals Potential Rate Cuts in Coming Months",
        summary=(
            "Federal Reserve officials indicated they may begin reducing interest "
            "rates in the near future as inflation shows signs of cooling."
        ),
        url="https://example.com/fed-rates",
        source="Financial Times",
        date="4 hours ago",
    ),
    NewsArticle(
        title="AI Investments Reshape Trading Landscape",
        summary=(
            "Investment firms are increasingly adopting artificial intelligence "
            "tools for market analysis and trading strategies, marking a "
            "significant shift in the industry."
        ),
        url="https://example.com/ai-trading",
        source="Tech Insider",
        date="6 hours ago",
    ),
)


class StaticNewsAdapter(NewsPort):
    def latest(self) -> list[NewsArticle]:
        return list(HEADLINES)
