# utmgrs/utils/geo.py
"""
Geographic utility functions, mostly for checking the spherical model against
pyproj's ellipsoidal UTM.
"""
import math
from functools import lru_cache

import pyproj

from ..core.errors import UnsupportedZoneError
from ..core.projection import forward
from ..core.zones import DEFAULT_GLOBE, UTMGlobe, UTMZone

SOUTH_FALSE_NORTHING = 10000000.0


def utm_epsg(zone: UTMZone) -> str:
    """WGS84 / UTM EPSG code for a numbered zone, by the hemisphere the zone lies in."""
    if zone.is_polar:
        raise UnsupportedZoneError(f"Polar zone {zone.name} has no UTM EPSG code.")
    return f"EPSG:{326 if zone.bottom >= 0 else 327}{zone.number:02d}"


@lru_cache(maxsize=None)
def _transformer(epsg):
    return pyproj.Transformer.from_crs("EPSG:4326", epsg, always_xy=True)


def ellipsoidal_utm(lat: float, lon: float, globe: UTMGlobe = DEFAULT_GLOBE) -> tuple[float, float]:
    """
    WGS84 easting/northing of the point in the zone the spherical model picks.
    The southern false northing is removed so results line up with ours.
    """
    zone = globe.zone_for_point(lat, lon)
    epsg = utm_epsg(zone)
    easting, northing = _transformer(epsg).transform(lon, lat)
    if epsg.startswith("EPSG:327"):
        northing -= SOUTH_FALSE_NORTHING
    return easting, northing


def projection_error(lat: float, lon: float, globe: UTMGlobe = DEFAULT_GLOBE) -> float:
    """Distance in meters between the spherical and the ellipsoidal projection of a point."""
    zone = globe.zone_for_point(lat, lon)
    easting, northing = forward(lat, lon, zone.meridian, globe)
    reference_easting, reference_northing = ellipsoidal_utm(lat, lon, globe)
    return math.hypot(easting - reference_easting, northing - reference_northing)
