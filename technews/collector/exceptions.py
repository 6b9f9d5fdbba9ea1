class NewsCollectorError(Exception):
    """Base exception for news collection errors."""
    pass


class NewsAPIError(NewsCollectorError):
    """Raised when a single NewsAPI query fails."""
    pass


class CollectionError(NewsCollectorError):
    """Raised when no articles could be collected for any category."""
    pass
