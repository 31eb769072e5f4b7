"""
Observation Model
Stores astronomical observations recorded by the user.
"""

import base64
from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import JSON, Column, DateTime, Enum as SQLEnum, Integer, LargeBinary, String, Text

from store.database import Base


class Planet(str, Enum):
    """Planet an observation refers to."""
    MERCURY = "Mercury"
    VENUS = "Venus"
    EARTH = "Earth"
    MARS = "Mars"
    JUPITER = "Jupiter"
    SATURN = "Saturn"
    URANUS = "Uranus"
    NEPTUNE = "Neptune"
    OTHER = "Other"


class ObservationCategory(str, Enum):
    """Kind of phenomenon observed."""
    ATMOSPHERIC = "Atmospheric"
    GEOLOGICAL = "Geological"
    ASTRONOMICAL = "Astronomical"
    OTHER = "Other"


class ImportanceLevel(str, Enum):
    """User-assigned importance."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class Observation(Base):
    """
    A user-created observation.

    Records are created by the add-observation flow and removed by explicit
    deletion; there is no edit path.
    """
    __tablename__ = "observations"

    id = Column(Integer, primary_key=True, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)

    selected_planet = Column(SQLEnum(Planet, name="planet"), nullable=False)
    custom_planet_name = Column(String(100), nullable=True)  # Only set when planet is Other

    category = Column(SQLEnum(ObservationCategory, name="observation_category"), nullable=False)
    importance = Column(SQLEnum(ImportanceLevel, name="importance_level"), nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Images
    primary_image = Column(LargeBinary, nullable=True)
    additional_images_data = Column("additional_images", JSON, nullable=True)  # base64 strings

    @property
    def additional_images(self) -> Optional[list[bytes]]:
        if self.additional_images_data is None:
            return None
        return [base64.b64decode(item) for item in self.additional_images_data]

    @additional_images.setter
    def additional_images(self, images: Optional[list[bytes]]) -> None:
        if images is None:
            self.additional_images_data = None
        else:
            self.additional_images_data = [
                base64.b64encode(image).decode("ascii") for image in images
            ]

    @property
    def display_planet(self) -> str:
        """Planet name shown to the user."""
        if self.selected_planet == Planet.OTHER:
            return self.custom_planet_name or "Unknown"
        return self.selected_planet.value

    def __repr__(self):
        return f"<Observation(id={self.id}, title='{self.title}')>"
