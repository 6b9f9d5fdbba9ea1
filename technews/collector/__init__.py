from .exceptions import CollectionError, NewsAPIError, NewsCollectorError
from .mock import get_mock_news
from .news_api import NewsCollector

__all__ = [
    "NewsCollector",
    "get_mock_news",
    "NewsCollectorError",
    "NewsAPIError",
    "CollectionError"
]
