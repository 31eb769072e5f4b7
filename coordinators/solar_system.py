"""Solar-system coordinator over the static catalog."""

import logging
from dataclasses import dataclass
from typing import Optional

from coordinators.base import Coordinator, ViewState
from tools.solar_system import CelestialBody, SolarSystemCatalog, catalog as default_catalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolarSystemState(ViewState[list[CelestialBody]]):
    """Catalog listing plus the body currently shown in detail."""

    selected: Optional[CelestialBody] = None


class SolarSystemCoordinator(Coordinator[list[CelestialBody]]):
    """Lists bodies and tracks the selected one."""

    name = "SOLAR_SYSTEM"
    state_class = SolarSystemState

    def __init__(self, catalog: Optional[SolarSystemCatalog] = None):
        super().__init__(initial_data=[])
        self.catalog = catalog or default_catalog

    async def _fetch(self) -> list[CelestialBody]:
        return self.catalog.list_all()

    async def select(self, body_id: str) -> ViewState:
        """Load one body into ``state.selected``; unknown ids store NotFoundError."""
        logger.info(f"{self.name}: Selecting {body_id}")

        async def fetch_body() -> CelestialBody:
            return self.catalog.get_by_id(body_id)

        return await self._run(fetch_body, target="selected")
