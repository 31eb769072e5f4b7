"""
Astronomy Picture of the Day coordinator.

A missing API key is stored like any other provider error; callers check
``state.requires_api_key`` to show a "configure your key" prompt instead of
a failure message.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from coordinators.base import Coordinator, ViewState
from tools.errors import MissingCredentialError
from tools.nasa_client import AstronomyPicture, NASAClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class APODState(ViewState[AstronomyPicture]):
    """APOD state plus the last known request quota."""

    remaining_quota: Optional[int] = None

    @property
    def requires_api_key(self) -> bool:
        return isinstance(self.error, MissingCredentialError)


class APODCoordinator(Coordinator[AstronomyPicture]):
    """Holds the latest Astronomy Picture of the Day."""

    name = "APOD"
    state_class = APODState

    def __init__(self, nasa_client: Optional[NASAClient] = None):
        super().__init__()
        self.nasa = nasa_client or NASAClient()

    async def _fetch(self) -> AstronomyPicture:
        return await self.nasa.fetch_apod()

    async def refresh_quota(self) -> Optional[int]:
        """Look up the remaining NASA request quota and publish it."""
        remaining = await self.nasa.remaining_quota()
        self._publish(remaining_quota=remaining)
        logger.info(f"{self.name}: Remaining quota {remaining}")
        return remaining
