# Tools package
"""
Content providers and static reference data.

All network clients implement:
- Async HTTP calls with httpx
- A single attempt per call (no retries, no caching)
- Typed errors from tools.errors
- Schema validation of response bodies
"""

from .errors import (
    ProviderError,
    MissingCredentialError,
    TransportError,
    InvalidResponseError,
    DecodeError,
    NotFoundError,
)
from .nasa_client import NASAClient, AstronomyPicture
from .news_client import SpaceNewsClient, NewsArticle, NewsType
from .solar_system import SolarSystemCatalog, CelestialBody, catalog

__all__ = [
    "ProviderError",
    "MissingCredentialError",
    "TransportError",
    "InvalidResponseError",
    "DecodeError",
    "NotFoundError",
    "NASAClient",
    "AstronomyPicture",
    "SpaceNewsClient",
    "NewsArticle",
    "NewsType",
    "SolarSystemCatalog",
    "CelestialBody",
    "catalog",
]
