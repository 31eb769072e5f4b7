"""
Tests for the view-state coordinators.

These tests verify:
- Loading flag and error transitions
- Stale data kept on error
- Overlapping loads (newest trigger wins)
- News category toggling
- Publish/subscribe
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from coordinators import (
    APODCoordinator,
    NewsCoordinator,
    SolarSystemCoordinator,
)
from tools.errors import (
    InvalidResponseError,
    MissingCredentialError,
    NotFoundError,
    TransportError,
)
from tools.nasa_client import AstronomyPicture, NASAClient
from tools.news_client import NewsType

from tests.helpers import APOD_PAYLOAD, json_transport


PICTURE = AstronomyPicture(
    date="2024-12-24",
    title="Orion Nebula",
    explanation="...",
    image_url="https://apod.nasa.gov/image.jpg",
    media_type="image",
)


def mock_nasa(**kwargs):
    nasa = MagicMock()
    nasa.fetch_apod = AsyncMock(**kwargs)
    nasa.remaining_quota = AsyncMock(return_value=None)
    return nasa


def mock_news(**kwargs):
    news = MagicMock()
    news.fetch_news = AsyncMock(**kwargs)
    return news


class TestAPODCoordinator:
    """Tests for APODCoordinator."""

    @pytest.mark.asyncio
    async def test_initial_state(self):
        coordinator = APODCoordinator(mock_nasa())

        assert coordinator.state.data is None
        assert coordinator.state.is_loading is False
        assert coordinator.state.error is None

    @pytest.mark.asyncio
    async def test_load_success(self):
        coordinator = APODCoordinator(mock_nasa(return_value=PICTURE))

        state = await coordinator.load()

        assert state.data == PICTURE
        assert state.error is None
        assert state.is_loading is False

    @pytest.mark.asyncio
    async def test_loading_flag_during_fetch(self):
        """Should publish is_loading=True before awaiting the provider."""
        seen = []
        coordinator = APODCoordinator(mock_nasa(return_value=PICTURE))
        coordinator.subscribe(lambda state: seen.append(state.is_loading))

        await coordinator.load()

        assert seen == [True, False]

    @pytest.mark.asyncio
    async def test_error_keeps_previous_data(self):
        """Should leave the last good picture in place on failure."""
        nasa = mock_nasa(return_value=PICTURE)
        coordinator = APODCoordinator(nasa)
        await coordinator.load()

        nasa.fetch_apod.side_effect = TransportError("offline")
        state = await coordinator.load()

        assert state.data == PICTURE
        assert isinstance(state.error, TransportError)
        assert state.has_error is True
        assert state.is_loading is False

    @pytest.mark.asyncio
    async def test_success_clears_error(self):
        nasa = mock_nasa(side_effect=InvalidResponseError(500))
        coordinator = APODCoordinator(nasa)
        await coordinator.load()

        nasa.fetch_apod.side_effect = None
        nasa.fetch_apod.return_value = PICTURE
        state = await coordinator.load()

        assert state.error is None
        assert state.data == PICTURE

    @pytest.mark.asyncio
    async def test_missing_key_requires_api_key(self):
        """Should flag the missing key without touching the network."""
        transport = json_transport(APOD_PAYLOAD)
        nasa = NASAClient(api_key_provider=lambda: None, transport=transport)
        coordinator = APODCoordinator(nasa)

        state = await coordinator.load()

        assert state.requires_api_key is True
        assert isinstance(state.error, MissingCredentialError)
        assert transport.call_count == 0

    @pytest.mark.asyncio
    async def test_unexpected_error_propagates(self):
        """Should re-raise non-provider errors and reset the loading flag."""
        coordinator = APODCoordinator(mock_nasa(side_effect=RuntimeError("bug")))

        with pytest.raises(RuntimeError):
            await coordinator.load()

        assert coordinator.state.is_loading is False

    @pytest.mark.asyncio
    async def test_cancelled_load_clears_loading(self):
        """Cancelling a pending load should reset the loading flag."""
        started = asyncio.Event()

        async def fetch():
            started.set()
            await asyncio.sleep(60)

        nasa = MagicMock()
        nasa.fetch_apod = fetch
        coordinator = APODCoordinator(nasa)

        task = asyncio.create_task(coordinator.load())
        await started.wait()
        assert coordinator.state.is_loading is True

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert coordinator.state.is_loading is False
        assert coordinator.state.error is None

    @pytest.mark.asyncio
    async def test_refresh_quota(self):
        nasa = mock_nasa()
        nasa.remaining_quota.return_value = 42
        coordinator = APODCoordinator(nasa)

        assert await coordinator.refresh_quota() == 42
        assert coordinator.state.remaining_quota == 42


class TestOverlappingLoads:
    """Tests for generation-ordered loads."""

    @pytest.mark.asyncio
    async def test_newest_trigger_wins(self):
        """An older load finishing last should not overwrite newer data."""
        first_release = asyncio.Event()
        older = AstronomyPicture("2024-12-23", "Older", "...", "a", "image")
        newer = AstronomyPicture("2024-12-24", "Newer", "...", "b", "image")

        calls = 0

        async def fetch():
            nonlocal calls
            calls += 1
            if calls == 1:
                await first_release.wait()
                return older
            return newer

        nasa = MagicMock()
        nasa.fetch_apod = fetch
        coordinator = APODCoordinator(nasa)

        first = asyncio.create_task(coordinator.load())
        await asyncio.sleep(0)
        await coordinator.load()

        assert coordinator.state.data == newer
        assert coordinator.state.is_loading is False

        first_release.set()
        await first

        assert coordinator.state.data == newer
        assert coordinator.state.is_loading is False

    @pytest.mark.asyncio
    async def test_loading_until_newest_completes(self):
        """Loading flag should stay set while the newest load is pending."""
        releases = [asyncio.Event(), asyncio.Event()]
        calls = 0

        async def fetch():
            nonlocal calls
            calls += 1
            await releases[calls - 1].wait()
            return PICTURE

        nasa = MagicMock()
        nasa.fetch_apod = fetch
        coordinator = APODCoordinator(nasa)

        first = asyncio.create_task(coordinator.load())
        second = asyncio.create_task(coordinator.load())
        await asyncio.sleep(0)

        releases[0].set()
        await first

        assert coordinator.state.is_loading is True
        assert coordinator.state.data is None

        releases[1].set()
        await second

        assert coordinator.state.is_loading is False
        assert coordinator.state.data == PICTURE

    @pytest.mark.asyncio
    async def test_stale_failure_discarded(self):
        """An older failure should not replace a newer success."""
        release = asyncio.Event()
        calls = 0

        async def fetch():
            nonlocal calls
            calls += 1
            if calls == 1:
                await release.wait()
                raise TransportError("late failure")
            return PICTURE

        nasa = MagicMock()
        nasa.fetch_apod = fetch
        coordinator = APODCoordinator(nasa)

        first = asyncio.create_task(coordinator.load())
        await asyncio.sleep(0)
        await coordinator.load()
        release.set()
        await first

        assert coordinator.state.error is None
        assert coordinator.state.data == PICTURE


class TestNewsCoordinator:
    """Tests for NewsCoordinator."""

    @pytest.mark.asyncio
    async def test_initial_state(self):
        coordinator = NewsCoordinator(mock_news(return_value=[]))

        assert coordinator.state.data == []
        assert coordinator.state.selected_type == NewsType.ALL

    def test_rejects_out_of_bounds_limit(self):
        with pytest.raises(ValueError):
            NewsCoordinator(mock_news(return_value=[]), limit=500)

    @pytest.mark.asyncio
    async def test_load_uses_selected_type_and_limit(self):
        news = mock_news(return_value=[])
        coordinator = NewsCoordinator(news, limit=5, selected_type=NewsType.BLOGS)

        await coordinator.load()

        news.fetch_news.assert_awaited_once_with(NewsType.BLOGS, limit=5)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("news_type", list(NewsType))
    async def test_same_category_twice_resets_to_all(self, news_type):
        """Selecting the same category twice should end on All."""
        coordinator = NewsCoordinator(mock_news(return_value=[]))

        await coordinator.change_category(news_type)
        await coordinator.change_category(news_type)

        assert coordinator.state.selected_type == NewsType.ALL

    @pytest.mark.asyncio
    async def test_change_category_selects_and_loads(self):
        news = mock_news(return_value=[])
        coordinator = NewsCoordinator(news)

        task = coordinator.change_category(NewsType.REPORTS)

        assert coordinator.state.selected_type == NewsType.REPORTS
        await task
        news.fetch_news.assert_awaited_once_with(NewsType.REPORTS, limit=20)

    @pytest.mark.asyncio
    async def test_switching_categories(self):
        coordinator = NewsCoordinator(mock_news(return_value=[]))

        await coordinator.change_category(NewsType.BLOGS)
        await coordinator.change_category(NewsType.LAUNCHES)

        assert coordinator.state.selected_type == NewsType.LAUNCHES

    @pytest.mark.asyncio
    async def test_error_keeps_articles(self):
        articles = [MagicMock(id=1), MagicMock(id=2)]
        news = mock_news(return_value=articles)
        coordinator = NewsCoordinator(news)
        await coordinator.load()

        news.fetch_news.side_effect = InvalidResponseError(502)
        state = await coordinator.load()

        assert state.data == articles
        assert isinstance(state.error, InvalidResponseError)


class TestSolarSystemCoordinator:
    """Tests for SolarSystemCoordinator."""

    @pytest.mark.asyncio
    async def test_load_lists_planets(self):
        coordinator = SolarSystemCoordinator()

        state = await coordinator.load()

        assert len(state.data) == 8
        assert state.is_loading is False

    @pytest.mark.asyncio
    async def test_select(self):
        coordinator = SolarSystemCoordinator()

        state = await coordinator.select("399")

        assert state.selected.english_name == "Earth"
        assert state.error is None

    @pytest.mark.asyncio
    async def test_select_unknown(self):
        coordinator = SolarSystemCoordinator()
        await coordinator.select("499")

        state = await coordinator.select("000")

        assert isinstance(state.error, NotFoundError)
        assert state.selected.english_name == "Mars"


class TestSubscriptions:
    """Tests for publish/subscribe."""

    @pytest.mark.asyncio
    async def test_unsubscribe(self):
        seen = []
        coordinator = SolarSystemCoordinator()
        unsubscribe = coordinator.subscribe(seen.append)

        await coordinator.load()
        unsubscribe()
        await coordinator.load()

        assert len(seen) == 2

    @pytest.mark.asyncio
    async def test_unsubscribe_twice(self):
        coordinator = SolarSystemCoordinator()
        unsubscribe = coordinator.subscribe(lambda state: None)

        unsubscribe()
        unsubscribe()
