"""
View-state coordinator base.

A coordinator holds the latest fetched value, a loading flag and the last
error for one feature. A trigger (screen appearance, user action, API
request) calls ``load()``, which awaits the provider and publishes the new
state to every subscriber.

State transitions:
    load() start   -> is_loading=True
    success        -> data replaced, error cleared, is_loading=False
    ProviderError  -> error stored, data left as it was, is_loading=False
    cancelled      -> data and error unchanged, is_loading=False, re-raised

Overlapping loads of the same coordinator are ordered by a generation
token: only the most recently started load may publish its outcome. An
older load that finishes later is discarded, and ``is_loading`` stays True
until the newest load completes.
"""

import asyncio
import logging
from dataclasses import dataclass, replace
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar

from tools.errors import ProviderError

logger = logging.getLogger(__name__)

T = TypeVar('T')

Subscriber = Callable[["ViewState"], None]


@dataclass(frozen=True)
class ViewState(Generic[T]):
    """Snapshot of a coordinator's published state."""

    data: Optional[T] = None
    is_loading: bool = False
    error: Optional[ProviderError] = None

    @property
    def has_error(self) -> bool:
        return self.error is not None


class Coordinator(Generic[T]):
    """
    Base class for feature coordinators.

    Subclasses implement ``_fetch()`` and may extend ``ViewState`` with extra
    fields through ``state_class``.

    Usage:
        coordinator = SolarSystemCoordinator()
        unsubscribe = coordinator.subscribe(render)
        await coordinator.load()
        coordinator.state.data  # latest value
    """

    name = "coordinator"
    state_class: type = ViewState

    def __init__(self, initial_data: Optional[T] = None, **initial_state: Any):
        self._state = self.state_class(data=initial_data, **initial_state)
        self._subscribers: list[Subscriber] = []
        self._generations: dict[str, int] = {}

    @property
    def state(self) -> ViewState:
        """Current state snapshot."""
        return self._state

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback invoked with every new state.

        Returns:
            A function that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _publish(self, **changes: Any) -> None:
        self._state = replace(self._state, **changes)
        for callback in list(self._subscribers):
            callback(self._state)

    def _next_generation(self, slot: str) -> int:
        generation = self._generations.get(slot, 0) + 1
        self._generations[slot] = generation
        return generation

    def _is_current(self, slot: str, generation: int) -> bool:
        return self._generations.get(slot) == generation

    async def _run(
        self,
        fetch: Callable[[], Awaitable[Any]],
        target: str = "data",
    ) -> ViewState:
        """
        Run one provider call and publish its outcome into ``target``.

        Args:
            fetch: Coroutine factory performing the provider call
            target: State field receiving the result on success

        Returns:
            The state after the call completed
        """
        generation = self._next_generation(target)
        self._publish(is_loading=True)

        try:
            result = await fetch()
        except ProviderError as e:
            if not self._is_current(target, generation):
                logger.debug(f"{self.name}: Discarding stale failure ({e.code})")
                return self._state
            logger.warning(f"{self.name}: {e.code} - {str(e)}")
            self._publish(error=e, is_loading=False)
            return self._state
        except (Exception, asyncio.CancelledError):
            # CancelledError is not an Exception subclass
            if self._is_current(target, generation):
                self._publish(is_loading=False)
            raise

        if not self._is_current(target, generation):
            logger.debug(f"{self.name}: Discarding stale result")
            return self._state

        self._publish(**{target: result}, error=None, is_loading=False)
        return self._state

    async def _fetch(self) -> T:
        raise NotImplementedError

    async def load(self) -> ViewState:
        """Fetch fresh data from the provider and publish it."""
        logger.info(f"{self.name}: Loading")
        return await self._run(self._fetch)
