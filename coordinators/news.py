"""
Space news coordinator.

Holds one page of articles for the selected category. Selecting the
already-selected category again resets the filter to "All".
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from coordinators.base import Coordinator, ViewState
from tools.news_client import DEFAULT_LIMIT, NewsArticle, NewsType, SpaceNewsClient, check_limit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NewsState(ViewState[list[NewsArticle]]):
    """News state plus the active category filter."""

    selected_type: NewsType = NewsType.ALL


class NewsCoordinator(Coordinator[list[NewsArticle]]):
    """Holds the latest page of space news."""

    name = "NEWS"
    state_class = NewsState

    def __init__(
        self,
        news_client: Optional[SpaceNewsClient] = None,
        limit: int = DEFAULT_LIMIT,
        selected_type: NewsType = NewsType.ALL,
    ):
        super().__init__(initial_data=[], selected_type=selected_type)
        self.news = news_client or SpaceNewsClient()
        self.limit = check_limit(limit)
        self._tasks: set[asyncio.Task] = set()

    async def _fetch(self) -> list[NewsArticle]:
        return await self.news.fetch_news(self._state.selected_type, limit=self.limit)

    def change_category(self, news_type: NewsType) -> asyncio.Task:
        """
        Select a category and start loading it.

        The load runs in the background; the returned task can be awaited
        by callers that need the result.

        Args:
            news_type: Category chosen by the user. Choosing the current
                category again resets the filter to ``NewsType.ALL``.

        Returns:
            The scheduled load task
        """
        if news_type == self._state.selected_type:
            selected = NewsType.ALL
        else:
            selected = news_type

        logger.info(f"{self.name}: Category {self._state.selected_type.value} -> {selected.value}")
        self._publish(selected_type=selected)

        task = asyncio.create_task(self.load())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task
