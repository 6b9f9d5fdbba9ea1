"""Data types for NewsAPI responses."""

from typing import List, Optional

from pydantic import BaseModel, Field


class NewsAPISource(BaseModel):
    name: Optional[str] = None


class NewsAPIArticle(BaseModel):
    source: Optional[NewsAPISource] = None
    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    published_at: Optional[str] = Field(default=None, alias="publishedAt")


class NewsAPIResponse(BaseModel):
    """Body of a successful `GET /v2/everything` call.

    Fields:
        status: "ok" on success, "error" otherwise
        total_results: Number of results available on the server side
        articles: Returned page of articles
    """
    status: str
    total_results: int = Field(default=0, alias="totalResults")
    articles: List[NewsAPIArticle] = Field(default_factory=list)
