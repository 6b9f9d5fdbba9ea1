"""HTTP client for NewsAPI."""

from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional

import requests
from pydantic import ValidationError
from requests.exceptions import RequestException

from ..common.logger import get_component_logger
from ..models import Article, UNSET_PUBLISHED_AT
from .exceptions import CollectionError, NewsAPIError
from .types import NewsAPIResponse

logger = get_component_logger("collector")

# Constants
NEWS_API_URL = "https://newsapi.org/v2/everything"
DEFAULT_TIMEOUT = 30  # seconds
LOOKBACK_DAYS = 7
# The per-run article budget is always split into this many slots,
# independent of how many categories are configured
CATEGORY_SLOTS = 3


def parse_published_at(value: Optional[str]) -> datetime:
    """
    Parse an RFC 3339 timestamp as returned by NewsAPI.

    Args:
        value: Timestamp string, e.g. "2024-05-01T12:30:00Z"

    Returns:
        Parsed datetime, or UNSET_PUBLISHED_AT if the value is missing or malformed
    """
    if not value:
        return UNSET_PUBLISHED_AT
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return UNSET_PUBLISHED_AT
    if parsed.tzinfo is None:
        return UNSET_PUBLISHED_AT
    return parsed


class NewsCollector:
    """Fetches the last week of news for a set of categories from NewsAPI."""

    def __init__(
        self,
        api_key: str,
        max_results: int,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None
    ):
        """
        Args:
            api_key: NewsAPI key sent in the X-Api-Key header
            max_results: Article budget for one run
            timeout: Request timeout in seconds
            session: HTTP session to use, a new one is created if omitted
        """
        self.api_key = api_key
        self.max_results = max_results
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def page_size(self) -> int:
        return max(1, self.max_results // CATEGORY_SLOTS)

    def close(self) -> None:
        self.session.close()

    def fetch_weekly_news(self, categories: Iterable[str], today: Optional[date] = None) -> List[Article]:
        """
        Retrieve articles from the past week for every category.

        A failing category is logged and skipped; the remaining categories are still queried.

        Args:
            categories: Search terms, one query per term
            today: Last day of the search window, defaults to the current date

        Returns:
            Articles of all categories that succeeded

        Raises:
            CollectionError: If no articles were obtained across all categories
        """
        if today is None:
            today = date.today()

        all_articles: List[Article] = []
        for category in categories:
            try:
                articles = self.fetch_by_category(category, today)
            except NewsAPIError as e:
                logger.warning(f"Error fetching {category} news: {e}")
                continue
            logger.info(f"Fetched {len(articles)} articles for category '{category}'")
            all_articles.extend(articles)

        if not all_articles:
            raise CollectionError("no articles found")

        return all_articles

    def fetch_by_category(self, category: str, today: date) -> List[Article]:
        """
        Query NewsAPI for one category over the trailing week.

        Args:
            category: Search term
            today: Last day of the search window

        Returns:
            Articles of the category

        Raises:
            NewsAPIError: On connection errors, non-2xx responses or a malformed body
        """
        params = {
            "q": category,
            "from": (today - timedelta(days=LOOKBACK_DAYS)).isoformat(),
            "to": today.isoformat(),
            "sortBy": "popularity",
            "language": "en",
            "pageSize": str(self.page_size),
        }

        logger.debug(f"Requesting {NEWS_API_URL} for category '{category}'")
        try:
            response = self.session.get(
                NEWS_API_URL,
                params=params,
                headers={"X-Api-Key": self.api_key},
                timeout=self.timeout
            )
        except RequestException as e:
            raise NewsAPIError(f"making request: {e}") from e

        if not 200 <= response.status_code < 300:
            raise NewsAPIError(f"API returned status {response.status_code}: {response.text}")

        try:
            api_response = NewsAPIResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise NewsAPIError(f"decoding response: {e}") from e

        if api_response.status != "ok":
            raise NewsAPIError(f"API returned status '{api_response.status}'")

        return [
            Article(
                title=item.title or "",
                description=item.description or None,
                url=item.url or "",
                source=(item.source.name if item.source else None) or "",
                published_at=parse_published_at(item.published_at),
                category=category,
            )
            for item in api_response.articles
        ]
