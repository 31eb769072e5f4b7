"""
Pydantic models for API request/response validation.

These models define the contract for the MyCosmo API
and are used to auto-generate OpenAPI documentation.
"""

import base64
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Base64Bytes, Field

from store.models import ImportanceLevel, Observation, ObservationCategory, Planet
from tools.news_client import NewsType


class ErrorDetail(BaseModel):
    """Provider error reported inside a coordinator state."""

    error: str = Field(
        ...,
        description="Error code (MISSING_API_KEY, TRANSPORT_ERROR, INVALID_RESPONSE, DECODE_ERROR, NOT_FOUND)",
        examples=["INVALID_RESPONSE"]
    )
    message: str = Field(
        ...,
        description="Human-readable error message"
    )
    status_code: Optional[int] = Field(
        default=None,
        description="Upstream HTTP status (INVALID_RESPONSE only)"
    )


class AstronomyPictureModel(BaseModel):
    """NASA Astronomy Picture of the Day."""

    date: str = Field(
        ...,
        description="Date of the APOD (YYYY-MM-DD format)",
        examples=["2024-12-20"]
    )
    title: str = Field(
        ...,
        description="Title of the Astronomy Picture of the Day",
        examples=["The Orion Nebula in Infrared"]
    )
    explanation: str = Field(
        ...,
        description="Original NASA explanation of the image"
    )
    image_url: str = Field(
        ...,
        description="URL to the image or video",
        examples=["https://apod.nasa.gov/apod/image/2412/orion_nebula.jpg"]
    )
    high_def_url: Optional[str] = Field(
        default=None,
        description="URL to high-resolution image (if available)"
    )
    media_type: str = Field(
        default="image",
        description="Type of media (image or video)"
    )


class APODStateResponse(BaseModel):
    """Response model for /apod endpoint."""

    data: Optional[AstronomyPictureModel] = None
    is_loading: bool = False
    error: Optional[ErrorDetail] = None
    requires_api_key: bool = Field(
        default=False,
        description="True when no NASA API key is configured"
    )
    remaining_quota: Optional[int] = None
    attribution: str = Field(
        default="Image from NASA Astronomy Picture of the Day",
        description="NASA attribution"
    )


class QuotaResponse(BaseModel):
    """Response model for /apod/quota endpoint."""

    remaining: Optional[int] = Field(
        default=None,
        description="Requests left for the configured NASA key, if known"
    )


class NewsArticleModel(BaseModel):
    """A single space news item."""

    id: int
    title: str
    url: str
    image_url: str
    source_name: str
    summary: str
    published_at: datetime
    updated_at: datetime


class NewsStateResponse(BaseModel):
    """Response model for /news endpoints."""

    data: list[NewsArticleModel] = Field(default_factory=list)
    selected_type: NewsType = NewsType.ALL
    is_loading: bool = False
    error: Optional[ErrorDetail] = None
    attribution: str = Field(
        default="News by Spaceflight News API",
        description="Spaceflight News API attribution"
    )


class CategoryRequest(BaseModel):
    """Request model for /news/category endpoint."""

    category: NewsType = Field(
        ...,
        description="Category to select; selecting the current one resets to All",
        examples=["Articles"]
    )


class MeasureModel(BaseModel):
    """Value × 10^exponent."""

    value: float
    exponent: int


class FormattedValues(BaseModel):
    """Display strings for a celestial body."""

    radius: str
    temperature: str
    gravity: str
    mass: str


class CelestialBodyModel(BaseModel):
    """A body of the solar system."""

    id: str = Field(..., examples=["399"])
    name: str
    english_name: str
    is_planet: bool
    moons: Optional[list[str]] = None
    moon_count: int = 0
    gravity: float
    mean_radius: float
    mass: MeasureModel
    volume: MeasureModel
    density: float
    discovered_by: Optional[str] = None
    discovery_date: Optional[str] = None
    alternative_name: Optional[str] = None
    axial_tilt: float
    avg_temp: float = Field(..., description="Average temperature in Kelvin")
    mean_anomaly: float
    arg_periapsis: float
    long_asc_node: float
    body_type: str
    fun_facts: list[str] = Field(default_factory=list)
    formatted: FormattedValues


class ObservationCreate(BaseModel):
    """Request model for creating an observation."""

    title: str = Field(..., description="Checked against the policy length limit")
    description: str
    selected_planet: Planet = Field(..., examples=["Jupiter"])
    custom_planet_name: Optional[str] = Field(
        default=None,
        description="Required when selected_planet is Other"
    )
    category: ObservationCategory
    importance: ImportanceLevel
    primary_image: Optional[Base64Bytes] = Field(
        default=None,
        description="Base64-encoded image"
    )
    additional_images: Optional[list[Base64Bytes]] = Field(
        default=None,
        description="Base64-encoded images"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Great Red Spot",
                    "description": "Clearly visible through an 8-inch telescope.",
                    "selected_planet": "Jupiter",
                    "category": "Atmospheric",
                    "importance": "High"
                }
            ]
        }
    }


class ObservationResponse(BaseModel):
    """A stored observation."""

    id: int
    title: str
    description: str
    selected_planet: Planet
    custom_planet_name: Optional[str] = None
    display_planet: str
    category: ObservationCategory
    importance: ImportanceLevel
    created_at: datetime
    primary_image: Optional[str] = Field(
        default=None,
        description="Base64-encoded image"
    )
    additional_images: Optional[list[str]] = None

    @classmethod
    def from_observation(cls, observation: Observation) -> "ObservationResponse":
        def encode(image: bytes) -> str:
            return base64.b64encode(image).decode("ascii")

        additional = observation.additional_images
        return cls(
            id=observation.id,
            title=observation.title,
            description=observation.description,
            selected_planet=observation.selected_planet,
            custom_planet_name=observation.custom_planet_name,
            display_planet=observation.display_planet,
            category=observation.category,
            importance=observation.importance,
            created_at=observation.created_at,
            primary_image=encode(observation.primary_image) if observation.primary_image else None,
            additional_images=[encode(image) for image in additional] if additional else None,
        )


class ObservationBatchDelete(BaseModel):
    """
    Request model for deleting observations by position.

    Indices refer to the list returned by GET /observations with the same
    filters.
    """

    indices: list[int] = Field(..., min_length=1)
    category: Optional[ObservationCategory] = None
    importance: Optional[ImportanceLevel] = None
    planet: Optional[Planet] = None


class DeleteResponse(BaseModel):
    """Result of a delete operation."""

    deleted: int


class ApiKeyRequest(BaseModel):
    """Request model for /settings/api-key."""

    api_key: str = Field(
        ...,
        min_length=1,
        description="Personal NASA API key from https://api.nasa.gov"
    )


class HealthResponse(BaseModel):
    """Response model for /health endpoint."""

    status: str = Field(
        default="healthy",
        description="Service health status"
    )
    version: str = Field(
        default="1.0.0",
        description="API version"
    )
    timestamp: datetime = Field(
        default_factory=datetime.utcnow,
        description="Health check timestamp"
    )


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str = Field(
        ...,
        description="Error type/code"
    )
    message: str = Field(
        ...,
        description="Human-readable error message"
    )
    details: Optional[dict] = Field(
        default=None,
        description="Additional error details"
    )
    timestamp: datetime = Field(
        default_factory=datetime.utcnow,
        description="Error timestamp"
    )
