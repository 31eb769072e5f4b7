"""
Observation log coordinator.

Wraps the observation repository with the list screen's behaviour:
- In-memory filtering by category, importance and planet
- Form validation before anything reaches the store
- Single and batch (index set) deletion
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional, Sequence

from policies.validation import ObservationValidationError, ObservationValidator, validator as default_validator
from store.models import ImportanceLevel, Observation, ObservationCategory, Planet
from store.repository import ObservationRepository
from tools.errors import NotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ObservationFilter:
    """Optional criteria; None matches everything."""

    category: Optional[ObservationCategory] = None
    importance: Optional[ImportanceLevel] = None
    planet: Optional[Planet] = None

    @property
    def is_active(self) -> bool:
        return any(v is not None for v in (self.category, self.importance, self.planet))

    def matches(self, observation: Observation) -> bool:
        category_match = self.category is None or observation.category == self.category
        importance_match = self.importance is None or observation.importance == self.importance
        planet_match = self.planet is None or observation.selected_planet == self.planet
        return category_match and importance_match and planet_match


class ObservationsCoordinator:
    """
    Create, list and delete observations.

    Usage:
        coordinator = ObservationsCoordinator(repository)
        coordinator.add(title="Storm", description="...", selected_planet=Planet.JUPITER,
                        category=ObservationCategory.ATMOSPHERIC,
                        importance=ImportanceLevel.HIGH)
        coordinator.set_filter(planet=Planet.JUPITER)
        visible = coordinator.observations()
    """

    def __init__(
        self,
        repository: ObservationRepository,
        validator: Optional[ObservationValidator] = None,
    ):
        self.repository = repository
        self.validator = validator or default_validator
        self.filter = ObservationFilter()

    def set_filter(
        self,
        category: Optional[ObservationCategory] = None,
        importance: Optional[ImportanceLevel] = None,
        planet: Optional[Planet] = None,
    ) -> ObservationFilter:
        """Replace the active filter."""
        self.filter = ObservationFilter(category=category, importance=importance, planet=planet)
        return self.filter

    def clear_filters(self) -> None:
        self.filter = ObservationFilter()

    def observations(self) -> list[Observation]:
        """Stored observations matching the active filter."""
        return self.repository.query(self.filter.matches)

    def get(self, observation_id: int) -> Observation:
        """
        Fetch one observation.

        Raises:
            NotFoundError: If no observation has this id
        """
        observation = self.repository.get(observation_id)
        if observation is None:
            raise NotFoundError(f"No observation with id {observation_id}")
        return observation

    def add(
        self,
        title: str,
        description: str,
        selected_planet: Planet,
        category: ObservationCategory,
        importance: ImportanceLevel,
        custom_planet_name: Optional[str] = None,
        primary_image: Optional[bytes] = None,
        additional_images: Optional[list[bytes]] = None,
        created_at: Optional[datetime] = None,
    ) -> Observation:
        """
        Validate a new observation and insert it.

        Raises:
            ObservationValidationError: If the form is invalid; nothing is stored
        """
        result = self.validator.validate_observation(
            title=title,
            description=description,
            selected_planet=selected_planet,
            custom_planet_name=custom_planet_name,
            additional_images=additional_images,
        )
        if not result.is_valid:
            raise ObservationValidationError(result)

        observation = Observation(
            title=title.strip(),
            description=description.strip(),
            selected_planet=selected_planet,
            custom_planet_name=custom_planet_name.strip() if selected_planet == Planet.OTHER else None,
            category=category,
            importance=importance,
            primary_image=primary_image,
            additional_images=additional_images or None,
        )
        if created_at is not None:
            observation.created_at = created_at

        return self.repository.insert(observation)

    def delete(self, observation: Observation) -> bool:
        """Delete one observation. Returns False if it was already gone."""
        return self.repository.delete(observation)

    def delete_at(
        self,
        indices: Iterable[int],
        observations: Optional[Sequence[Observation]] = None,
    ) -> int:
        """
        Delete observations by position.

        Args:
            indices: Positions to delete
            observations: Sequence the positions refer to; defaults to the
                currently filtered list

        Returns:
            Number of observations removed
        """
        if observations is None:
            observations = self.observations()
        removed = self.repository.delete_at(indices, observations)
        logger.info(f"Batch delete removed {removed} observations")
        return removed
