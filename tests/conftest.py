"""Shared fixtures."""

import pytest

from store.database import init_database
from store.preferences import PreferenceStore
from store.repository import ObservationRepository


@pytest.fixture
def repository():
    """Observation repository on a fresh in-memory database."""
    return ObservationRepository(init_database("sqlite:///:memory:"))


@pytest.fixture
def preferences(tmp_path):
    """Preference store in a temporary directory."""
    return PreferenceStore(tmp_path / "preferences.json")
