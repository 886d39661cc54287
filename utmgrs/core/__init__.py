from .errors import (
    CoordinateParseError,
    GridSquareError,
    ParseFailure,
    UnsupportedZoneError,
    UTMError,
    ZoneConsistencyError,
    ZoneNotFoundError,
)
from .mgrs import MGRSCoordinate, grid_square_for, grid_square_origin, infer_precision
from .projection import UTMCoordinate, forward, inverse, project_points
from .zones import DEFAULT_GLOBE, GlobeBuilder, UTMGlobe, UTMZone, lat_char

__all__ = [
    "CoordinateParseError",
    "DEFAULT_GLOBE",
    "GlobeBuilder",
    "GridSquareError",
    "MGRSCoordinate",
    "ParseFailure",
    "UTMCoordinate",
    "UTMError",
    "UTMGlobe",
    "UTMZone",
    "UnsupportedZoneError",
    "ZoneConsistencyError",
    "ZoneNotFoundError",
    "forward",
    "grid_square_for",
    "grid_square_origin",
    "infer_precision",
    "inverse",
    "lat_char",
    "project_points",
]
