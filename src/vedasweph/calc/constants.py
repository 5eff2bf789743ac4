#!/usr/bin/env python3
"""
Centralized constants for the vedasweph calculation layer
Engine-agnostic body ids, flags and name tables (values match Swiss Ephemeris)
"""

from dataclasses import dataclass
from enum import IntEnum

# ============================================================================
# BODY IDS - SWISS EPHEMERIS NUMBERING (DO NOT CHANGE)
# ============================================================================


class PlanetId(IntEnum):
    """Engine body identifiers"""

    SUN = 0
    MOON = 1
    MERCURY = 2
    VENUS = 3
    MARS = 4
    JUPITER = 5
    SATURN = 6
    URANUS = 7
    NEPTUNE = 8
    PLUTO = 9
    MEAN_NODE = 10
    TRUE_NODE = 11


# Sentinel id for bodies that are never sent to the engine
SHADOW_BODY_ID = -1


@dataclass(frozen=True)
class BodyDef:
    """One entry of an ordered body list"""

    id: int
    name: str
    sanskrit: str
    shadow_of: int | None = None  # engine id of the antipode source

    @property
    def slug(self) -> str:
        return self.name.lower()

    @property
    def is_shadow(self) -> bool:
        return self.shadow_of is not None


SUN = BodyDef(PlanetId.SUN, "Sun", "Surya")
MOON = BodyDef(PlanetId.MOON, "Moon", "Chandra")
MARS = BodyDef(PlanetId.MARS, "Mars", "Mangal")
MERCURY = BodyDef(PlanetId.MERCURY, "Mercury", "Budha")
JUPITER = BodyDef(PlanetId.JUPITER, "Jupiter", "Guru")
VENUS = BodyDef(PlanetId.VENUS, "Venus", "Shukra")
SATURN = BodyDef(PlanetId.SATURN, "Saturn", "Shani")
RAHU = BodyDef(PlanetId.TRUE_NODE, "Rahu", "Rahu")  # Always True Node
KETU = BodyDef(SHADOW_BODY_ID, "Ketu", "Ketu", shadow_of=PlanetId.TRUE_NODE)

URANUS = BodyDef(PlanetId.URANUS, "Uranus", "Arun")
NEPTUNE = BodyDef(PlanetId.NEPTUNE, "Neptune", "Varun")
PLUTO = BodyDef(PlanetId.PLUTO, "Pluto", "Yama")

# Traditional Vedic order (9 grahas)
VEDIC_PLANET_ORDER: tuple[BodyDef, ...] = (
    SUN,
    MOON,
    MARS,
    MERCURY,
    JUPITER,
    VENUS,
    SATURN,
    RAHU,
    KETU,
)

OUTER_PLANETS: tuple[BodyDef, ...] = (URANUS, NEPTUNE, PLUTO)

BODIES_BY_ID: dict[int, BodyDef] = {
    b.id: b for b in VEDIC_PLANET_ORDER + OUTER_PLANETS
}

# ============================================================================
# AYANAMSA & HOUSE SYSTEMS
# ============================================================================


class AyanamsaType(IntEnum):
    """Sidereal mode codes accepted by set_sidereal_mode"""

    FAGAN_BRADLEY = 0
    LAHIRI = 1
    DELUCE = 2
    RAMAN = 3
    USHASHASHI = 4
    KRISHNAMURTI = 5
    DJWHAL_KHUL = 6
    YUKTESHWAR = 7
    JN_BHASIN = 8
    BABYL_KUGLER1 = 9
    BABYL_KUGLER2 = 10
    BABYL_KUGLER3 = 11
    BABYL_HUBER = 12
    BABYL_ETPSC = 13
    ALDEBARAN_15TAU = 14
    HIPPARCHOS = 15
    SASSANIAN = 16
    GALCENT_0SAG = 17
    J2000 = 18
    J1900 = 19
    B1950 = 20


DEFAULT_AYANAMSA = AyanamsaType.LAHIRI

HOUSE_SYSTEMS = {
    "PLACIDUS": "P",
    "KOCH": "K",
    "PORPHYRIUS": "O",
    "REGIOMONTANUS": "R",
    "CAMPANUS": "C",
    "EQUAL": "E",
    "WHOLE_SIGN": "W",
    "MERIDIAN": "X",
    "ALCABITIUS": "B",
    "MORINUS": "M",
    "KRUSINSKI": "U",
    "SRIPATI": "S",
}

# ============================================================================
# ENGINE FLAGS
# ============================================================================
FLG_SWIEPH = 0x0002
FLG_SPEED = 0x0100
FLG_EQUATORIAL = 0x0800
FLG_SIDEREAL = 0x10000

# Planet list: Swiss files, sidereal frame, with speed
PLANET_FLAGS = FLG_SWIEPH | FLG_SIDEREAL
# Moon/Sun composite: tropical frame
TROPICAL_FLAGS = FLG_SWIEPH | FLG_SPEED
EQUATORIAL_FLAGS = FLG_SWIEPH | FLG_EQUATORIAL

GREGORIAN_CALENDAR = 1

# rise_transit event codes
CALC_RISE = 1
CALC_SET = 2
CALC_MTRANSIT = 4
BIT_CIVIL_TWILIGHT = 1024
BIT_NAUTIC_TWILIGHT = 2048

# az_alt input frames
ECL2HOR = 0
EQU2HOR = 1

# Result code for bodies that never rise or set on the requested day
CIRCUMPOLAR = -2

# ============================================================================
# TIME & DISTANCE
# ============================================================================
JULIAN_UNIX_EPOCH = 2440587.5  # JD of 1970-01-01T00:00:00Z
LUNAR_MONTH_DAYS = 29.530588853
SYNODIC_MONTH_APPROX = 29.53  # Used for moon age
AU_IN_KM = 149597870.7

# ============================================================================
# DIVISIONS
# ============================================================================
SIGN_SPAN = 30.0
NAKSHATRA_SPAN = 360.0 / 27.0  # 13°20'
PADA_SPAN = NAKSHATRA_SPAN / 4.0  # 3°20'

MOON_PHASES = (
    "New Moon",
    "Waxing Crescent",
    "First Quarter",
    "Waxing Gibbous",
    "Full Moon",
    "Waning Gibbous",
    "Last Quarter",
    "Waning Crescent",
)

# ============================================================================
# ZODIAC SIGNS (1-indexed)
# ============================================================================
SIGN_NAMES = {
    1: "Aries",
    2: "Taurus",
    3: "Gemini",
    4: "Cancer",
    5: "Leo",
    6: "Virgo",
    7: "Libra",
    8: "Scorpio",
    9: "Sagittarius",
    10: "Capricorn",
    11: "Aquarius",
    12: "Pisces",
}

SIGN_SANSKRIT = {
    1: "Mesha",
    2: "Vrishabha",
    3: "Mithuna",
    4: "Karka",
    5: "Simha",
    6: "Kanya",
    7: "Tula",
    8: "Vrishchika",
    9: "Dhanu",
    10: "Makara",
    11: "Kumbha",
    12: "Meena",
}

# ============================================================================
# NAKSHATRA NAMES & LORDS (1-indexed)
# ============================================================================
NAKSHATRA_NAMES = {
    1: "Ashwini",
    2: "Bharani",
    3: "Krittika",
    4: "Rohini",
    5: "Mrigashira",
    6: "Ardra",
    7: "Punarvasu",
    8: "Pushya",
    9: "Ashlesha",
    10: "Magha",
    11: "Purva Phalguni",
    12: "Uttara Phalguni",
    13: "Hasta",
    14: "Chitra",
    15: "Swati",
    16: "Vishakha",
    17: "Anuradha",
    18: "Jyeshtha",
    19: "Mula",
    20: "Purva Ashadha",
    21: "Uttara Ashadha",
    22: "Shravana",
    23: "Dhanishta",
    24: "Shatabhisha",
    25: "Purva Bhadrapada",
    26: "Uttara Bhadrapada",
    27: "Revati",
}

# Vimshottari lord cycle: Ketu, Venus, Sun, Moon, Mars, Rahu, Jupiter, Saturn, Mercury
_LORD_CYCLE = (KETU, VENUS, SUN, MOON, MARS, RAHU, JUPITER, SATURN, MERCURY)

NAKSHATRA_LORDS: dict[int, str] = {
    n: _LORD_CYCLE[(n - 1) % 9].name for n in range(1, 28)
}
