"""Static spot registry and the mock condition table served for each spot."""

from dataclasses import dataclass
from typing import Dict

UNKNOWN_LOCATION = "Unknown Location"
UNKNOWN_VALUE = "Unknown"

MALIBU = "5842041f4e65fad6a7708814"
HUNTINGTON_BEACH = "5842041f4e65fad6a770883d"
TAMARINDO = "5842041f4e65fad6a7709115"
JACO = "5842041f4e65fad6a7709117"
DOMINICAL = "5842041f4e65fad6a7709116"

# Surfline spot ids -> human-readable location
SPOT_LOCATIONS: Dict[str, str] = {
    MALIBU: "Malibu, CA",
    HUNTINGTON_BEACH: "Huntington Beach, CA",
    TAMARINDO: "Tamarindo, CR",
    JACO: "Jaco, CR",
    DOMINICAL: "Dominical, CR",
}


@dataclass(frozen=True)
class SpotConditions:
    """Display strings for the surf conditions at one spot."""
    wave_height: str
    wind_speed: str
    wind_direction: str
    tide: str


UNKNOWN_CONDITIONS = SpotConditions(
    wave_height=UNKNOWN_VALUE,
    wind_speed=UNKNOWN_VALUE,
    wind_direction=UNKNOWN_VALUE,
    tide=UNKNOWN_VALUE,
)

SPOT_CONDITIONS: Dict[str, SpotConditions] = {
    MALIBU: SpotConditions("3.8 ft at 12 seconds 215 degrees", "5 mph", "Offshore", "Rising, 2.5ft at 10:30am"),
    HUNTINGTON_BEACH: SpotConditions("2.5 ft at 10 seconds 220 degrees", "8 mph", "Cross-shore", "Falling, 3.2ft at 9:15am"),
    TAMARINDO: SpotConditions("4.5 ft at 14 seconds 210 degrees", "3 mph", "Offshore", "High, 4.1ft at 11:45am"),
    JACO: SpotConditions("3.7 ft at 12 seconds 205 degrees", "6 mph", "Offshore", "Low, 1.2ft at 8:30am"),
    DOMINICAL: SpotConditions("5.2 ft at 16 seconds 207 degrees", "4 mph", "Offshore", "Mid, 2.8ft at 9:45am"),
}


def lookup_location(spot_id: str) -> str:
    """Return the location name for a spot, or the unknown-location sentinel."""
    return SPOT_LOCATIONS.get(spot_id, UNKNOWN_LOCATION)


def lookup_conditions(spot_id: str) -> SpotConditions:
    """Return the mock conditions for a spot, or all-unknown placeholders."""
    return SPOT_CONDITIONS.get(spot_id, UNKNOWN_CONDITIONS)


def is_known_spot(spot_id: str) -> bool:
    return spot_id in SPOT_LOCATIONS
