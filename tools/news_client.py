"""
Spaceflight News API client.

Spaceflight News API: https://api.spaceflightnewsapi.net/v4
- Free, no authentication
- Endpoints: /articles, /blogs, /reports, /launches
- Responses are paginated; only the first page is read

Attribution: "News by Spaceflight News API".
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

import httpx
from pydantic import BaseModel, ValidationError

from policies import APP_RULES
from tools.errors import DecodeError
from tools.http import decode_json, send_get

logger = logging.getLogger(__name__)

_NEWS_RULES = APP_RULES.get("news", {})

DEFAULT_LIMIT = _NEWS_RULES.get("default_limit", 20)
MIN_LIMIT = _NEWS_RULES.get("min_limit", 1)
MAX_LIMIT = _NEWS_RULES.get("max_limit", 100)


def check_limit(limit: int) -> int:
    """
    Validate a page size against the policy bounds.

    Raises:
        ValueError: If ``limit`` is outside [MIN_LIMIT, MAX_LIMIT]
    """
    if not MIN_LIMIT <= limit <= MAX_LIMIT:
        raise ValueError(f"News limit must be between {MIN_LIMIT} and {MAX_LIMIT}, got {limit}")
    return limit


class NewsType(str, Enum):
    """News category filter."""
    ALL = "All"
    ARTICLES = "Articles"
    BLOGS = "Blogs"
    REPORTS = "Reports"
    LAUNCHES = "Launches"

    @property
    def endpoint(self) -> str:
        """Path segment under the API base URL."""
        if self is NewsType.ALL:
            return "articles"
        return self.value.lower()


@dataclass(frozen=True)
class NewsArticle:
    """A single news item."""

    id: int
    title: str
    url: str
    image_url: str
    source_name: str
    summary: str
    published_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "id": self.id,
            "title": self.title,
            "url": self.url,
            "image_url": self.image_url,
            "source_name": self.source_name,
            "summary": self.summary,
            "published_at": self.published_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


class ArticlePayload(BaseModel):
    """Wire shape of one result entry."""

    id: int
    title: str
    url: str
    image_url: str
    news_site: str
    summary: str
    published_at: datetime
    updated_at: datetime

    def to_record(self) -> NewsArticle:
        return NewsArticle(
            id=self.id,
            title=self.title,
            url=self.url,
            image_url=self.image_url,
            source_name=self.news_site,
            summary=self.summary,
            published_at=self.published_at,
            updated_at=self.updated_at,
        )


class NewsPagePayload(BaseModel):
    """Paginated envelope returned by every list endpoint."""

    count: int
    next: Optional[str] = None
    previous: Optional[str] = None
    results: list[ArticlePayload]


class SpaceNewsClient:
    """
    Async client for the Spaceflight News API.

    One GET per call; the ``next`` link of the page is never followed.
    """

    BASE_URL = APP_RULES.get("endpoints", {}).get(
        "spaceflight_news", "https://api.spaceflightnewsapi.net/v4"
    )

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def fetch_news(
        self,
        news_type: NewsType = NewsType.ALL,
        limit: int = DEFAULT_LIMIT,
    ) -> list[NewsArticle]:
        """
        Fetch one page of news for a category.

        Args:
            news_type: Category selector
            limit: Maximum number of results requested

        Returns:
            Articles in API response order

        Raises:
            TransportError: Network failure
            InvalidResponseError: Non-2xx status
            DecodeError: Body does not match the paginated schema
            ValueError: If ``limit`` is outside the policy bounds
        """
        check_limit(limit)
        url = f"{self.base_url}/{news_type.endpoint}"
        operation = f"SPACE_NEWS_{news_type.name}"

        response = await send_get(
            url,
            {"limit": limit},
            operation,
            timeout=self.timeout,
            transport=self.transport,
        )
        data = decode_json(response, operation)

        try:
            page = NewsPagePayload.model_validate(data)
        except ValidationError as e:
            logger.error(f"Failed to decode news page: {e.error_count()} schema errors")
            raise DecodeError(f"News response does not match schema: {e}") from e

        logger.info(f"{operation}: {len(page.results)} of {page.count} results")
        return [article.to_record() for article in page.results]
