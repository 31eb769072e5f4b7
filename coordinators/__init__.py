# Coordinators package
"""
View-state coordinators, one per feature.

Components:
- base.py: ViewState snapshot, generation-ordered load, publish/subscribe
- apod.py: NASA Astronomy Picture of the Day
- news.py: Spaceflight news with category toggling
- solar_system.py: Static planet catalog listing and detail
- observations.py: Observation log filtering, creation and deletion
"""

from .base import Coordinator, ViewState
from .apod import APODCoordinator, APODState
from .news import NewsCoordinator, NewsState
from .solar_system import SolarSystemCoordinator, SolarSystemState
from .observations import ObservationsCoordinator, ObservationFilter

__all__ = [
    "Coordinator",
    "ViewState",
    "APODCoordinator",
    "APODState",
    "NewsCoordinator",
    "NewsState",
    "SolarSystemCoordinator",
    "SolarSystemState",
    "ObservationsCoordinator",
    "ObservationFilter",
]
