"""
FastAPI routes for the MyCosmo API.

This module is intentionally thin - it handles HTTP concerns only
and delegates to the feature coordinators:

- coordinators/apod.py: NASA Astronomy Picture of the Day
- coordinators/news.py: Spaceflight news
- coordinators/solar_system.py: Static planet catalog
- coordinators/observations.py: Observation log
- store/preferences.py: NASA API key setting

Each request is a UI trigger: it runs the coordinator operation and returns
the coordinator's state.
"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, HTTPException

from api.models import (
    APODStateResponse,
    ApiKeyRequest,
    AstronomyPictureModel,
    CategoryRequest,
    CelestialBodyModel,
    DeleteResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
    NewsArticleModel,
    NewsStateResponse,
    ObservationBatchDelete,
    ObservationCreate,
    ObservationResponse,
    QuotaResponse,
)
from coordinators import (
    APODCoordinator,
    NewsCoordinator,
    ObservationsCoordinator,
    SolarSystemCoordinator,
    ViewState,
)
from policies import APP_RULES
from policies.validation import ObservationValidationError
from store.database import init_database
from store.models import ImportanceLevel, ObservationCategory, Planet
from store.preferences import PreferenceStore
from store.repository import ObservationRepository
from tools.errors import NotFoundError
from tools.nasa_client import NASAClient

logger = logging.getLogger(__name__)

# =============================================================================
# Service Instances (Dependency Injection ready)
# =============================================================================

router = APIRouter()

_preferences: Optional[PreferenceStore] = None
_apod: Optional[APODCoordinator] = None
_news: Optional[NewsCoordinator] = None
_solar_system: Optional[SolarSystemCoordinator] = None
_observations: Optional[ObservationsCoordinator] = None


def get_preferences() -> PreferenceStore:
    global _preferences
    if _preferences is None:
        _preferences = PreferenceStore()
    return _preferences


def get_apod_coordinator() -> APODCoordinator:
    global _apod
    if _apod is None:
        # Read the key on every call so settings changes apply immediately
        nasa = NASAClient(api_key_provider=lambda: get_preferences().get_nasa_api_key())
        _apod = APODCoordinator(nasa)
    return _apod


def get_news_coordinator() -> NewsCoordinator:
    global _news
    if _news is None:
        _news = NewsCoordinator()
    return _news


def get_solar_system_coordinator() -> SolarSystemCoordinator:
    global _solar_system
    if _solar_system is None:
        _solar_system = SolarSystemCoordinator()
    return _solar_system


def get_observations_coordinator() -> ObservationsCoordinator:
    global _observations
    if _observations is None:
        _observations = ObservationsCoordinator(ObservationRepository(init_database()))
    return _observations


def set_preferences(preferences: Optional[PreferenceStore]) -> None:
    """For testing."""
    global _preferences
    _preferences = preferences


def set_apod_coordinator(coordinator: Optional[APODCoordinator]) -> None:
    """For testing."""
    global _apod
    _apod = coordinator


def set_news_coordinator(coordinator: Optional[NewsCoordinator]) -> None:
    """For testing."""
    global _news
    _news = coordinator


def set_solar_system_coordinator(coordinator: Optional[SolarSystemCoordinator]) -> None:
    """For testing."""
    global _solar_system
    _solar_system = coordinator


def set_observations_coordinator(coordinator: Optional[ObservationsCoordinator]) -> None:
    """For testing."""
    global _observations
    _observations = coordinator


def _error_detail(state: ViewState) -> Optional[ErrorDetail]:
    if not state.has_error:
        return None
    return ErrorDetail(**state.error.to_dict())


def _apod_response(coordinator: APODCoordinator) -> APODStateResponse:
    state = coordinator.state
    return APODStateResponse(
        data=AstronomyPictureModel(**state.data.to_dict()) if state.data else None,
        is_loading=state.is_loading,
        error=_error_detail(state),
        requires_api_key=state.requires_api_key,
        remaining_quota=state.remaining_quota,
        attribution=APP_RULES["attribution"]["nasa_apod"],
    )


def _news_response(coordinator: NewsCoordinator) -> NewsStateResponse:
    state = coordinator.state
    return NewsStateResponse(
        data=[NewsArticleModel(**article.to_dict()) for article in state.data or []],
        selected_type=state.selected_type,
        is_loading=state.is_loading,
        error=_error_detail(state),
        attribution=APP_RULES["attribution"]["spaceflight_news"],
    )


# =============================================================================
# Health & Status Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check() -> HealthResponse:
    """Service health check."""
    return HealthResponse(
        status="healthy",
        version="1.0.0",
        timestamp=datetime.utcnow(),
    )


# =============================================================================
# NASA APOD Endpoints
# =============================================================================

@router.get(
    "/apod",
    response_model=APODStateResponse,
    tags=["NASA APOD"],
    summary="Get NASA Astronomy Picture of the Day",
)
async def get_apod() -> APODStateResponse:
    """
    Load today's Astronomy Picture of the Day.

    When no NASA API key is configured, ``requires_api_key`` is true and no
    request is sent to NASA. Other failures are reported in ``error`` while
    the previously loaded picture, if any, stays in ``data``.
    """
    logger.info("APOD request")
    coordinator = get_apod_coordinator()
    await coordinator.load()
    return _apod_response(coordinator)


@router.get("/apod/quota", response_model=QuotaResponse, tags=["NASA APOD"])
async def get_apod_quota() -> QuotaResponse:
    """Remaining NASA API requests for the configured key."""
    remaining = await get_apod_coordinator().refresh_quota()
    return QuotaResponse(remaining=remaining)


# =============================================================================
# Space News Endpoints
# =============================================================================

@router.get("/news", response_model=NewsStateResponse, tags=["News"])
async def get_news() -> NewsStateResponse:
    """Load one page of news for the selected category."""
    logger.info("News request")
    coordinator = get_news_coordinator()
    await coordinator.load()
    return _news_response(coordinator)


@router.post("/news/category", response_model=NewsStateResponse, tags=["News"])
async def change_news_category(request: CategoryRequest) -> NewsStateResponse:
    """
    Select a news category and load it.

    Selecting the category that is already selected resets the filter to All.
    """
    coordinator = get_news_coordinator()
    task = coordinator.change_category(request.category)
    await task
    return _news_response(coordinator)


# =============================================================================
# Solar System Endpoints
# =============================================================================

@router.get("/solar-system", response_model=list[CelestialBodyModel], tags=["Solar System"])
async def list_bodies() -> list[CelestialBodyModel]:
    """All bodies of the static catalog."""
    coordinator = get_solar_system_coordinator()
    state = await coordinator.load()
    return [CelestialBodyModel(**body.to_dict()) for body in state.data or []]


@router.get(
    "/solar-system/{body_id}",
    response_model=CelestialBodyModel,
    responses={404: {"model": ErrorResponse}},
    tags=["Solar System"],
)
async def get_body(body_id: str) -> CelestialBodyModel:
    """Details for one body, e.g. 399 for Earth."""
    coordinator = get_solar_system_coordinator()
    state = await coordinator.select(body_id)

    if isinstance(state.error, NotFoundError):
        raise HTTPException(status_code=404, detail={"error": "NOT_FOUND", "message": str(state.error)})

    return CelestialBodyModel(**state.selected.to_dict())


# =============================================================================
# Observation Endpoints
# =============================================================================

@router.get("/observations", response_model=list[ObservationResponse], tags=["Observations"])
async def list_observations(
    category: Optional[ObservationCategory] = None,
    importance: Optional[ImportanceLevel] = None,
    planet: Optional[Planet] = None,
) -> list[ObservationResponse]:
    """Stored observations, optionally filtered."""
    coordinator = get_observations_coordinator()
    coordinator.set_filter(category=category, importance=importance, planet=planet)
    return [ObservationResponse.from_observation(o) for o in coordinator.observations()]


@router.post(
    "/observations",
    response_model=ObservationResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}},
    tags=["Observations"],
)
async def create_observation(request: ObservationCreate) -> ObservationResponse:
    """Record a new observation."""
    try:
        observation = get_observations_coordinator().add(
            title=request.title,
            description=request.description,
            selected_planet=request.selected_planet,
            category=request.category,
            importance=request.importance,
            custom_planet_name=request.custom_planet_name,
            primary_image=request.primary_image,
            additional_images=request.additional_images,
        )
    except ObservationValidationError as e:
        raise HTTPException(
            status_code=400,
            detail={
                "error": "VALIDATION_ERROR",
                "message": str(e),
                "details": e.result.to_dict(),
            },
        )

    return ObservationResponse.from_observation(observation)


@router.get(
    "/observations/{observation_id}",
    response_model=ObservationResponse,
    responses={404: {"model": ErrorResponse}},
    tags=["Observations"],
)
async def get_observation(observation_id: int) -> ObservationResponse:
    try:
        observation = get_observations_coordinator().get(observation_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail={"error": "NOT_FOUND", "message": str(e)})
    return ObservationResponse.from_observation(observation)


@router.delete(
    "/observations/{observation_id}",
    response_model=DeleteResponse,
    responses={404: {"model": ErrorResponse}},
    tags=["Observations"],
)
async def delete_observation(observation_id: int) -> DeleteResponse:
    coordinator = get_observations_coordinator()
    try:
        observation = coordinator.get(observation_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail={"error": "NOT_FOUND", "message": str(e)})

    deleted = coordinator.delete(observation)
    return DeleteResponse(deleted=1 if deleted else 0)


@router.post(
    "/observations/delete",
    response_model=DeleteResponse,
    responses={400: {"model": ErrorResponse}},
    tags=["Observations"],
)
async def delete_observations(request: ObservationBatchDelete) -> DeleteResponse:
    """Delete the observations at the given positions of the filtered list."""
    coordinator = get_observations_coordinator()
    coordinator.set_filter(
        category=request.category,
        importance=request.importance,
        planet=request.planet,
    )

    try:
        deleted = coordinator.delete_at(request.indices)
    except IndexError as e:
        raise HTTPException(status_code=400, detail={"error": "VALIDATION_ERROR", "message": str(e)})

    return DeleteResponse(deleted=deleted)


# =============================================================================
# Settings Endpoints
# =============================================================================

@router.put("/settings/api-key", status_code=204, tags=["Settings"])
async def set_api_key(request: ApiKeyRequest) -> None:
    """Store the NASA API key."""
    get_preferences().set_nasa_api_key(request.api_key)


@router.delete("/settings/api-key", status_code=204, tags=["Settings"])
async def clear_api_key() -> None:
    """Remove the stored NASA API key."""
    get_preferences().clear_nasa_api_key()
