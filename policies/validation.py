"""
Observation form validation with policy-driven rules.

Validation rules are loaded from policies/app_rules.json for:
- Auditability: Changes to validation rules are tracked
- Flexibility: Length limits can be adjusted without code changes
- Consistency: The API and the coordinators share the same checks

A record only reaches the observation store after it passes these checks.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from policies import APP_RULES
from store.models import Planet

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of a validation check."""

    is_valid: bool
    errors: list[str]
    warnings: list[str]

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "errors": self.errors,
            "warnings": self.warnings,
        }


class ObservationValidationError(ValueError):
    """Raised when an observation form fails validation."""

    def __init__(self, result: ValidationResult):
        self.result = result
        super().__init__("; ".join(result.errors))


class ObservationValidator:
    """
    Policy-driven validator for the add-observation form.

    Validates:
    - Title and description are present and within length limits
    - A custom planet name is given when the planet is "Other"
    - The number of additional images
    """

    def __init__(self):
        """Load validation rules from policy configuration."""
        self.rules = APP_RULES.get("validation", {}).get("observation", {})
        self.title_max = self.rules.get("title_max_length", 120)
        self.description_max = self.rules.get("description_max_length", 5000)
        self.custom_planet_max = self.rules.get("custom_planet_max_length", 60)
        self.max_images = self.rules.get("max_additional_images", 10)

    def validate_text(
        self,
        value: Optional[str],
        field_name: str,
        max_length: int
    ) -> Tuple[bool, Optional[str]]:
        """
        Validate a required free-text field.

        Args:
            value: Text to validate
            field_name: Name used in the error message
            max_length: Maximum allowed length

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not value or not value.strip():
            return False, f"{field_name} is required"

        if len(value) > max_length:
            return False, f"{field_name} must be at most {max_length} characters, got {len(value)}"

        return True, None

    def validate_planet(
        self,
        selected_planet: Planet,
        custom_planet_name: Optional[str]
    ) -> Tuple[bool, Optional[str]]:
        """
        Validate the planet selection.

        A custom planet name must be non-empty exactly when the planet is
        ``Planet.OTHER``.

        Args:
            selected_planet: Planet chosen in the form
            custom_planet_name: Free-text planet name

        Returns:
            Tuple of (is_valid, error_message)
        """
        if selected_planet != Planet.OTHER:
            return True, None

        if not custom_planet_name or not custom_planet_name.strip():
            return False, "Custom planet name is required when planet is Other"

        if len(custom_planet_name) > self.custom_planet_max:
            return False, (
                f"Custom planet name must be at most {self.custom_planet_max} characters"
            )

        return True, None

    def validate_observation(
        self,
        title: Optional[str],
        description: Optional[str],
        selected_planet: Planet,
        custom_planet_name: Optional[str] = None,
        additional_images: Optional[list[bytes]] = None,
    ) -> ValidationResult:
        """
        Validate all fields of an add-observation form.

        Args:
            title: Observation title
            description: Observation description
            selected_planet: Planet the observation refers to
            custom_planet_name: Name used when planet is Other
            additional_images: Extra image payloads

        Returns:
            ValidationResult with any errors or warnings
        """
        errors = []
        warnings = []

        title_valid, title_error = self.validate_text(title, "Title", self.title_max)
        if not title_valid:
            errors.append(title_error)

        desc_valid, desc_error = self.validate_text(
            description, "Description", self.description_max
        )
        if not desc_valid:
            errors.append(desc_error)

        planet_valid, planet_error = self.validate_planet(selected_planet, custom_planet_name)
        if not planet_valid:
            errors.append(planet_error)

        if additional_images and len(additional_images) > self.max_images:
            errors.append(
                f"At most {self.max_images} additional images are allowed, "
                f"got {len(additional_images)}"
            )

        if selected_planet != Planet.OTHER and custom_planet_name:
            warnings.append("Custom planet name is ignored unless planet is Other")

        is_valid = len(errors) == 0

        if not is_valid:
            logger.warning(f"Observation validation failed: {errors}")
        elif warnings:
            logger.info(f"Observation validation passed with warnings: {warnings}")

        return ValidationResult(
            is_valid=is_valid,
            errors=errors,
            warnings=warnings,
        )


# Create singleton instance for convenience
validator = ObservationValidator()
