# Store package
"""
Local persistence for MyCosmo.

Components:
- database.py: SQLAlchemy engine, session factory and table creation
- models.py: Observation model and its enums
- repository.py: Insert/delete/query operations on observations
- preferences.py: JSON key-value store for user preferences (NASA API key)
"""

from .database import Base, StoreInitializationError, init_database
from .models import Observation, Planet, ObservationCategory, ImportanceLevel
from .repository import ObservationRepository
from .preferences import PreferenceStore

__all__ = [
    "Base",
    "StoreInitializationError",
    "init_database",
    "Observation",
    "Planet",
    "ObservationCategory",
    "ImportanceLevel",
    "ObservationRepository",
    "PreferenceStore",
]
