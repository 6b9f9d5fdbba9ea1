"""Static article set used when live collection fails."""

from datetime import datetime, timedelta, timezone
from typing import List, Optional

from ..models import Article


def get_mock_news(now: Optional[datetime] = None) -> List[Article]:
    """Return three hard-coded articles published over the previous three days.

    Args:
        now: Reference time, defaults to the current time

    Returns:
        List of mock articles
    """
    if now is None:
        now = datetime.now(timezone.utc)

    return [
        Article(
            title="AI Breakthrough: New Language Model Surpasses Human Performance",
            description="Researchers announce a groundbreaking AI model that demonstrates "
                        "superior performance across multiple benchmarks.",
            url="https://example.com/ai-breakthrough",
            source="TechCrunch",
            published_at=now - timedelta(days=1),
            category="technology",
        ),
        Article(
            title="Quantum Computing Reaches New Milestone",
            description="Scientists achieve quantum supremacy with a 1000-qubit processor.",
            url="https://example.com/quantum",
            source="MIT Technology Review",
            published_at=now - timedelta(days=2),
            category="science",
        ),
        Article(
            title="Major Tech Companies Announce Climate Initiatives",
            description="Leading technology firms commit to carbon neutrality by 2030.",
            url="https://example.com/climate",
            source="Bloomberg",
            published_at=now - timedelta(days=3),
            category="business",
        ),
    ]
