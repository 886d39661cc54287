"""
utmgrs: convert positions between latitude/longitude, UTM grid coordinates
and MGRS references on a spherical earth.
"""
from .core.errors import (
    CoordinateParseError,
    ParseFailure,
    UnsupportedZoneError,
    UTMError,
    ZoneConsistencyError,
    ZoneNotFoundError,
)
from .core.geometries import mgrs_cell_polygon, zone_feature, zones_to_geodataframe
from .core.mgrs import MGRSCoordinate, infer_precision
from .core.projection import UTMCoordinate, project_points
from .core.zones import DEFAULT_GLOBE, GlobeBuilder, UTMGlobe, UTMZone, lat_char
from .utils.logging_setup import get_logger

__version__ = "0.1.0"

__all__ = [
    "CoordinateParseError",
    "DEFAULT_GLOBE",
    "GlobeBuilder",
    "MGRSCoordinate",
    "ParseFailure",
    "UTMCoordinate",
    "UTMError",
    "UTMGlobe",
    "UTMZone",
    "UnsupportedZoneError",
    "ZoneConsistencyError",
    "ZoneNotFoundError",
    "get_logger",
    "infer_precision",
    "lat_char",
    "mgrs_cell_polygon",
    "project_points",
    "zone_feature",
    "zones_to_geodataframe",
]
