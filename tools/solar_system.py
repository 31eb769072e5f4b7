"""
Static solar-system catalog.

The eight planets with their physical and orbital parameters, kept as a
read-only, process-wide table keyed by the JPL body id (e.g. "399" = Earth).
There is no network source and no mutation path.
"""

import random
from dataclasses import dataclass
from typing import Optional

from tools.errors import NotFoundError


@dataclass(frozen=True)
class Moon:
    """Reference to a natural satellite."""
    rel: str


@dataclass(frozen=True)
class Mass:
    """Mass as value × 10^exponent kg."""
    value: float
    exponent: int


@dataclass(frozen=True)
class Volume:
    """Volume as value × 10^exponent km³."""
    value: float
    exponent: int


@dataclass(frozen=True)
class CelestialBody:
    """A body of the solar system."""

    id: str
    name: str
    english_name: str
    is_planet: bool
    moons: Optional[tuple[Moon, ...]]
    gravity: float  # m/s²
    mean_radius: float  # km
    mass: Mass
    volume: Volume
    density: float  # kg/m³
    discovered_by: Optional[str]
    discovery_date: Optional[str]
    alternative_name: Optional[str]
    axial_tilt: float  # degrees
    avg_temp: float  # Kelvin
    mean_anomaly: float
    arg_periapsis: float
    long_asc_node: float
    body_type: str
    fun_facts: tuple[str, ...] = ()

    @property
    def moon_count(self) -> int:
        return len(self.moons) if self.moons else 0

    @property
    def formatted_radius(self) -> str:
        return f"{int(self.mean_radius)} km"

    @property
    def formatted_temperature(self) -> str:
        return f"{int(self.avg_temp)}°K ({int(self.avg_temp - 273.15)}°C)"

    @property
    def formatted_gravity(self) -> str:
        return f"{self.gravity:.2f} m/s²"

    @property
    def formatted_mass(self) -> str:
        return f"{self.mass.value:.2f}×10^{self.mass.exponent} kg"

    def random_fun_fact(self) -> str:
        if not self.fun_facts:
            return "No fun facts available"
        return random.choice(self.fun_facts)

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "id": self.id,
            "name": self.name,
            "english_name": self.english_name,
            "is_planet": self.is_planet,
            "moons": [moon.rel for moon in self.moons] if self.moons else None,
            "moon_count": self.moon_count,
            "gravity": self.gravity,
            "mean_radius": self.mean_radius,
            "mass": {"value": self.mass.value, "exponent": self.mass.exponent},
            "volume": {"value": self.volume.value, "exponent": self.volume.exponent},
            "density": self.density,
            "discovered_by": self.discovered_by,
            "discovery_date": self.discovery_date,
            "alternative_name": self.alternative_name,
            "axial_tilt": self.axial_tilt,
            "avg_temp": self.avg_temp,
            "mean_anomaly": self.mean_anomaly,
            "arg_periapsis": self.arg_periapsis,
            "long_asc_node": self.long_asc_node,
            "body_type": self.body_type,
            "fun_facts": list(self.fun_facts),
            "formatted": {
                "radius": self.formatted_radius,
                "temperature": self.formatted_temperature,
                "gravity": self.formatted_gravity,
                "mass": self.formatted_mass,
            },
        }


def _unnamed_moons(count: int) -> tuple[Moon, ...]:
    return tuple(Moon(rel="") for _ in range(count))


PLANETS: tuple[CelestialBody, ...] = (
    CelestialBody(
        id="199",
        name="Mercury",
        english_name="Mercury",
        is_planet=True,
        moons=None,
        gravity=3.7,
        mean_radius=2439.7,
        mass=Mass(3.285, 23),
        volume=Volume(6.083, 10),
        density=5429,
        discovered_by=None,
        discovery_date=None,
        alternative_name=None,
        axial_tilt=0.034,
        avg_temp=440,
        mean_anomaly=174.796,
        arg_periapsis=29.124,
        long_asc_node=48.331,
        body_type="Planet",
        fun_facts=(
            "Mercury's day (176 Earth days) is longer than its year (88 Earth days)!",
            "Despite being the closest to the Sun, Mercury is not the hottest planet - Venus is!",
            "Mercury's surface resembles our Moon with many impact craters.",
            "The planet has no atmosphere and experiences extreme temperature variations.",
            "Mercury can be seen from Earth without a telescope, known since ancient times.",
        ),
    ),
    CelestialBody(
        id="299",
        name="Venus",
        english_name="Venus",
        is_planet=True,
        moons=None,
        gravity=8.87,
        mean_radius=6051.8,
        mass=Mass(4.867, 24),
        volume=Volume(9.28, 11),
        density=5243,
        discovered_by=None,
        discovery_date=None,
        alternative_name="Evening Star",
        axial_tilt=177.36,
        avg_temp=737,
        mean_anomaly=50.115,
        arg_periapsis=54.884,
        long_asc_node=76.680,
        body_type="Planet",
        fun_facts=(
            "Venus rotates backwards compared to most other planets!",
            "It's the hottest planet in our solar system due to greenhouse effect.",
            "A day on Venus is longer than its year.",
            "Venus is often called Earth's twin due to similar size and mass.",
            "The pressure on Venus's surface could crush a submarine.",
        ),
    ),
    CelestialBody(
        id="399",
        name="Earth",
        english_name="Earth",
        is_planet=True,
        moons=(Moon(rel="Moon"),),
        gravity=9.8,
        mean_radius=6371.0,
        mass=Mass(5.972, 24),
        volume=Volume(1.083, 12),
        density=5514,
        discovered_by=None,
        discovery_date=None,
        alternative_name=None,
        axial_tilt=23.44,
        avg_temp=288,
        mean_anomaly=358.617,
        arg_periapsis=114.207,
        long_asc_node=348.739,
        body_type="Planet",
        fun_facts=(
            "Earth is the only known planet with liquid water on its surface.",
            "Our planet's atmosphere is 78% nitrogen and 21% oxygen.",
            "Earth's magnetic field protects us from harmful solar radiation.",
            "The highest point on Earth is Mount Everest at 8,848 meters.",
            "Earth is the only planet not named after a god or goddess.",
        ),
    ),
    CelestialBody(
        id="499",
        name="Mars",
        english_name="Mars",
        is_planet=True,
        moons=(Moon(rel="Phobos"), Moon(rel="Deimos")),
        gravity=3.71,
        mean_radius=3389.5,
        mass=Mass(6.39, 23),
        volume=Volume(1.631, 11),
        density=3933,
        discovered_by=None,
        discovery_date=None,
        alternative_name="Red Planet",
        axial_tilt=25.19,
        avg_temp=210,
        mean_anomaly=19.412,
        arg_periapsis=286.502,
        long_asc_node=49.558,
        body_type="Planet",
        fun_facts=(
            "Mars has the largest volcano in the solar system - Olympus Mons.",
            "The red color comes from iron oxide (rust) on its surface.",
            "Mars has seasons like Earth due to similar axial tilt.",
            "Evidence suggests Mars once had flowing water on its surface.",
            "Dust storms on Mars can cover the entire planet.",
        ),
    ),
    CelestialBody(
        id="599",
        name="Jupiter",
        english_name="Jupiter",
        is_planet=True,
        moons=_unnamed_moons(79),
        gravity=24.79,
        mean_radius=69911,
        mass=Mass(1.898, 27),
        volume=Volume(1.431, 15),
        density=1326,
        discovered_by=None,
        discovery_date=None,
        alternative_name="Giant Planet",
        axial_tilt=3.13,
        avg_temp=165,
        mean_anomaly=20.020,
        arg_periapsis=273.867,
        long_asc_node=100.464,
        body_type="Planet",
        fun_facts=(
            "Jupiter's Great Red Spot is a storm that's been raging for over 400 years.",
            "You could fit more than 1,300 Earths inside Jupiter.",
            "Jupiter's magnetic field is the strongest of all planets.",
            "The planet has a faint ring system, discovered in 1979.",
            "Jupiter's day is the shortest of all planets - just 10 hours!",
        ),
    ),
    CelestialBody(
        id="699",
        name="Saturn",
        english_name="Saturn",
        is_planet=True,
        moons=_unnamed_moons(82),
        gravity=10.44,
        mean_radius=58232,
        mass=Mass(5.683, 26),
        volume=Volume(8.272, 14),
        density=687,
        discovered_by=None,
        discovery_date=None,
        alternative_name="Ringed Planet",
        axial_tilt=26.73,
        avg_temp=134,
        mean_anomaly=317.020,
        arg_periapsis=339.392,
        long_asc_node=113.665,
        body_type="Planet",
        fun_facts=(
            "Saturn's rings are mostly made of ice and rock.",
            "It's the only planet that could float in water (if you had a big enough pool).",
            "Saturn's moon Titan has liquid lakes, but they're made of methane.",
            "The planet's distinctive rings are only about 10 meters thick.",
            "Wind speeds on Saturn can reach 1,800 km per hour.",
        ),
    ),
    CelestialBody(
        id="799",
        name="Uranus",
        english_name="Uranus",
        is_planet=True,
        moons=_unnamed_moons(27),
        gravity=8.69,
        mean_radius=25362,
        mass=Mass(8.681, 25),
        volume=Volume(6.833, 13),
        density=1271,
        discovered_by="William Herschel",
        discovery_date="1781-03-13",
        alternative_name="Ice Giant",
        axial_tilt=97.77,
        avg_temp=76,
        mean_anomaly=142.238,
        arg_periapsis=96.998,
        long_asc_node=74.006,
        body_type="Planet",
        fun_facts=(
            "Uranus rotates on its side, like a rolling ball.",
            "It's the coldest planet despite not being the farthest from the Sun.",
            "The planet was originally named 'George's Star'.",
            "Its blue color comes from methane in the atmosphere.",
            "Uranus has rings, but they're almost impossible to see from Earth.",
        ),
    ),
    CelestialBody(
        id="899",
        name="Neptune",
        english_name="Neptune",
        is_planet=True,
        moons=_unnamed_moons(14),
        gravity=11.15,
        mean_radius=24622,
        mass=Mass(1.024, 26),
        volume=Volume(6.254, 13),
        density=1638,
        discovered_by="Urbain Le Verrier",
        discovery_date="1846-09-23",
        alternative_name="Blue Planet",
        axial_tilt=28.32,
        avg_temp=72,
        mean_anomaly=256.228,
        arg_periapsis=276.336,
        long_asc_node=131.784,
        body_type="Planet",
        fun_facts=(
            "Neptune was discovered through mathematical predictions.",
            "It has the strongest winds in the solar system, up to 2,100 km/h.",
            "One Neptune year equals 165 Earth years.",
            "Its moon Triton orbits backwards compared to other large moons.",
            "Neptune's blue color is deeper than Uranus due to unknown factors.",
        ),
    ),
)


class SolarSystemCatalog:
    """Read-only lookup over a table of celestial bodies."""

    def __init__(self, bodies: tuple[CelestialBody, ...] = PLANETS):
        self._bodies = bodies
        self._by_id = {body.id: body for body in bodies}

    def list_all(self) -> list[CelestialBody]:
        """All bodies in catalog order."""
        return list(self._bodies)

    def get_by_id(self, body_id: str) -> CelestialBody:
        """
        Look up a body by id.

        Raises:
            NotFoundError: If no body has this id
        """
        body = self._by_id.get(body_id)
        if body is None:
            raise NotFoundError(f"No celestial body with id '{body_id}'")
        return body


catalog = SolarSystemCatalog()
