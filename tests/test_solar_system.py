"""
Tests for the static solar-system catalog.
"""

import pytest

from tools.errors import NotFoundError
from tools.solar_system import PLANETS, SolarSystemCatalog, catalog


class TestSolarSystemCatalog:
    """Tests for list_all and get_by_id."""

    def test_list_all_order(self):
        """Should list the planets from the Sun outwards."""
        names = [body.english_name for body in catalog.list_all()]

        assert names == [
            "Mercury", "Venus", "Earth", "Mars",
            "Jupiter", "Saturn", "Uranus", "Neptune",
        ]

    def test_list_all_returns_copy(self):
        """Should not expose the internal table for mutation."""
        bodies = catalog.list_all()
        bodies.clear()

        assert len(catalog.list_all()) == 8

    def test_get_earth(self):
        """Should return Earth for id 399."""
        earth = catalog.get_by_id("399")

        assert earth.english_name == "Earth"
        assert earth.moon_count == 1

    def test_unknown_id(self):
        """Should raise NotFoundError for an unknown id."""
        with pytest.raises(NotFoundError):
            catalog.get_by_id("000")

    def test_custom_table(self):
        """Should serve only the bodies it was given."""
        small = SolarSystemCatalog(PLANETS[:1])

        assert small.get_by_id("199").name == "Mercury"
        with pytest.raises(NotFoundError):
            small.get_by_id("399")


class TestCelestialBody:
    """Tests for derived display values."""

    def test_formatted_values(self):
        earth = catalog.get_by_id("399")

        assert earth.formatted_radius == "6371 km"
        assert earth.formatted_temperature == "288°K (14°C)"
        assert earth.formatted_gravity == "9.80 m/s²"
        assert earth.formatted_mass == "5.97×10^24 kg"

    def test_moon_counts(self):
        assert catalog.get_by_id("199").moon_count == 0
        assert catalog.get_by_id("499").moon_count == 2
        assert catalog.get_by_id("599").moon_count == 79

    def test_random_fun_fact(self):
        mars = catalog.get_by_id("499")

        assert mars.random_fun_fact() in mars.fun_facts

    def test_discovery_data(self):
        uranus = catalog.get_by_id("799")

        assert uranus.discovered_by == "William Herschel"
        assert uranus.discovery_date == "1781-03-13"

    def test_to_dict(self):
        result = catalog.get_by_id("499").to_dict()

        assert result["moons"] == ["Phobos", "Deimos"]
        assert result["mass"] == {"value": 6.39, "exponent": 23}
        assert result["formatted"]["radius"] == "3389 km"
