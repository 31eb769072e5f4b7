# API Models package
"""
Pydantic models for request/response validation.
These models also auto-generate OpenAPI documentation.
"""

from .models import (
    APODStateResponse,
    NewsStateResponse,
    CelestialBodyModel,
    ObservationCreate,
    ObservationResponse,
    HealthResponse,
    ErrorResponse,
)

__all__ = [
    "APODStateResponse",
    "NewsStateResponse",
    "CelestialBodyModel",
    "ObservationCreate",
    "ObservationResponse",
    "HealthResponse",
    "ErrorResponse",
]
