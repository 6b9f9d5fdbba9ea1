from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

# Publication time used when the source timestamp cannot be parsed
UNSET_PUBLISHED_AT = datetime(1, 1, 1, tzinfo=timezone.utc)


class Article(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: Optional[str] = None
    url: str
    source: str
    published_at: datetime = UNSET_PUBLISHED_AT
    category: str


class NewsSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    week_range: str
    total_articles: int
    summary: str
    key_topics: List[str]
    trending_stories: List[str]
    generated_at: datetime
