"""Great-circle helpers for positions in signed decimal degrees.

All functions treat the Earth as a sphere, so results may be off by up to
about 0.5%.
"""

import math

# Radius of the sphere used for distances, in meters.
EARTH_RADIUS_METERS = 6372795

_COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE",
    "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW",
    "W", "WNW", "NW", "NNW",
)


def distance_between(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance in meters between two positions.

    Example:
        >>> distance_between(51.508131, -0.128002, 48.856614, 2.352222)
        343...  # London to Paris, ~343 km
    """
    delta = math.radians(lng1 - lng2)
    sin_delta_lng = math.sin(delta)
    cos_delta_lng = math.cos(delta)
    lat1 = math.radians(lat1)
    lat2 = math.radians(lat2)
    sin_lat1 = math.sin(lat1)
    cos_lat1 = math.cos(lat1)
    sin_lat2 = math.sin(lat2)
    cos_lat2 = math.cos(lat2)

    numerator = math.hypot(
        cos_lat1 * sin_lat2 - sin_lat1 * cos_lat2 * cos_delta_lng,
        cos_lat2 * sin_delta_lng,
    )
    denominator = sin_lat1 * sin_lat2 + cos_lat1 * cos_lat2 * cos_delta_lng
    return math.atan2(numerator, denominator) * EARTH_RADIUS_METERS


def course_to(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Initial bearing in degrees from position 1 to position 2.

    North is 0, east 90, south 180 and west 270; the result is in
    ``[0, 360)``.
    """
    delta_lng = math.radians(lng2 - lng1)
    lat1 = math.radians(lat1)
    lat2 = math.radians(lat2)
    y = math.sin(delta_lng) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(
        delta_lng
    )
    bearing = math.atan2(y, x)
    if bearing < 0.0:
        bearing += 2 * math.pi
    return math.degrees(bearing)


def cardinal(course: float) -> str:
    """Nearest of the 16 compass points for a course in degrees.

    Example:
        >>> cardinal(84.4)
        'E'
    """
    direction = int((course + 11.25) / 22.5)
    return _COMPASS_POINTS[direction % 16]
