# utmgrs/core/projection.py
"""
Spherical transverse Mercator between latitude/longitude and UTM grid
coordinates.

The earth is treated as a sphere of ``globe.earth_radius``. This keeps the
forward and inverse transforms exact inverses of each other, at the cost of
ellipsoidal accuracy: expect tens to hundreds of meters of disagreement with
WGS84 UTM away from the equator and the central meridian. No false northing is
applied, so southern hemisphere northings are negative.
"""
import re
from collections import defaultdict

import numpy as np

from ..utils import constants, trig
from ..utils.logging_setup import get_logger
from .errors import ParseFailure
from .zones import DEFAULT_GLOBE, UTMGlobe, UTMZone, _normalize_name, normalize_lat_lon

log = get_logger()

UTM_PATTERN = re.compile(
    r"(?P<zone>\d{1,2}[A-HJ-NP-Z]|[ABYZ]) ?"
    r"(?P<easting>[-+]?\d+(?:\.\d+)?)(?:mE)? "
    r"(?P<northing>[-+]?\d+(?:\.\d+)?)(?:mN)?",
    re.IGNORECASE,
)


def forward(lat, lon, meridian, globe: UTMGlobe = DEFAULT_GLOBE):
    """
    Projects degrees onto the grid of a zone centred on ``meridian``.

    Accepts scalars or numpy arrays and returns unrounded (easting, northing).
    """
    lat_rad = trig.deg_to_rad(lat)
    delta_lon = trig.deg_to_rad(np.asarray(lon, dtype=float) - meridian)

    sin_lat = np.sin(lat_rad)
    cos_lon = np.cos(delta_lon)
    sin_lon = np.sin(delta_lon)

    # conformal latitude; on a sphere this reduces to tan(lat)
    t = np.sinh(trig.atanh(sin_lat))
    xi_prime = np.arctan(t / cos_lon)
    eta_prime = trig.atanh(sin_lon / np.sqrt(1 + t * t))

    k_r = globe.scale_factor * globe.earth_radius
    easting = constants.FALSE_EASTING + k_r * eta_prime
    northing = k_r * xi_prime
    return _unwrap(easting), _unwrap(northing)


def inverse(easting, northing, meridian, globe: UTMGlobe = DEFAULT_GLOBE):
    """Inverse of ``forward``: grid meters back to (lat, lon) degrees."""
    k_r = globe.scale_factor * globe.earth_radius
    xi = np.asarray(northing, dtype=float) / k_r
    eta = (np.asarray(easting, dtype=float) - constants.FALSE_EASTING) / k_r

    chi = np.arcsin(np.sin(xi) / np.cosh(eta))
    lat = trig.rad_to_deg(chi)
    lon = meridian + trig.rad_to_deg(np.arctan(np.sinh(eta) / np.cos(xi)))
    return _unwrap(lat), _unwrap(lon)


def _unwrap(value):
    if np.ndim(value) == 0:
        return float(value)
    return value


def _format_meters(value):
    if float(value).is_integer():
        return str(int(value))
    return np.format_float_positional(float(value), unique=True, trim="-")


class UTMCoordinate:
    """
    A zone designator plus easting/northing in meters.

    Equality is structural and exact: same zone name, bit-identical floats.
    """

    __slots__ = ("_zone", "_easting", "_northing")

    def __init__(self, zone: str, easting: float, northing: float):
        self._zone = zone.upper()
        self._easting = float(easting)
        self._northing = float(northing)

    zone = property(lambda self: self._zone)
    easting = property(lambda self: self._easting)
    northing = property(lambda self: self._northing)

    @classmethod
    def from_lat_lon(cls, lat: float, lon: float, globe: UTMGlobe = DEFAULT_GLOBE) -> "UTMCoordinate":
        zone = globe.zone_for_point(lat, lon)
        lat, lon = normalize_lat_lon(lat, lon)
        easting, northing = forward(lat, lon, zone.meridian, globe)
        return cls(zone.name, round(easting), round(northing))

    @classmethod
    def parse(cls, text: str):
        """
        Parses ``"31N 166021mE 0mN"`` (units optional).

        Returns a UTMCoordinate, or a falsy ``ParseFailure`` describing why the
        text was rejected.
        """
        match = UTM_PATTERN.fullmatch(text.strip()) if isinstance(text, str) else None
        if match is None:
            log.debug("Rejected UTM string %r", text)
            return ParseFailure(text, "does not match '<zone> <easting>mE <northing>mN'")

        zone = _normalize_name(match.group("zone"))
        return cls(zone, float(match.group("easting")), float(match.group("northing")))

    @classmethod
    def from_string(cls, text: str) -> "UTMCoordinate":
        """Like ``parse`` but raises ``CoordinateParseError`` on malformed text."""
        result = cls.parse(text)
        if not result:
            result.raise_error()
        return result

    def zone_info(self, globe: UTMGlobe = DEFAULT_GLOBE) -> UTMZone:
        return globe.zone(self._zone)

    def to_lat_lon(self, globe: UTMGlobe = DEFAULT_GLOBE) -> tuple[float, float]:
        zone = self.zone_info(globe)
        return inverse(self._easting, self._northing, zone.meridian, globe)

    def __eq__(self, other):
        if not isinstance(other, UTMCoordinate):
            return NotImplemented
        return (self._zone, self._easting, self._northing) == (other._zone, other._easting, other._northing)

    def __hash__(self):
        return hash((self._zone, self._easting, self._northing))

    def __str__(self):
        return f"{self._zone} {_format_meters(self._easting)}mE {_format_meters(self._northing)}mN"

    def __repr__(self):
        return f"UTMCoordinate({self._zone!r}, {self._easting!r}, {self._northing!r})"


def project_points(lats, lons, globe: UTMGlobe = DEFAULT_GLOBE) -> list[UTMCoordinate]:
    """
    Batch ``UTMCoordinate.from_lat_lon``: zones are resolved per point and the
    projection runs once per zone on numpy arrays.
    """
    lats = np.asarray(lats, dtype=float).ravel()
    lons = np.asarray(lons, dtype=float).ravel()
    if lats.shape != lons.shape:
        raise ValueError(f"Got {lats.size} latitudes but {lons.size} longitudes.")
    lats = np.clip(lats, -90.0, 90.0)
    lons = (lons + 180.0) % 360.0 - 180.0

    groups = defaultdict(list)
    for i, (lat, lon) in enumerate(zip(lats, lons)):
        groups[globe.zone_for_point(float(lat), float(lon))].append(i)

    results = [None] * lats.size
    for zone, indices in groups.items():
        eastings, northings = forward(lats[indices], lons[indices], zone.meridian, globe)
        eastings = np.atleast_1d(eastings)
        northings = np.atleast_1d(northings)
        for i, easting, northing in zip(indices, eastings, northings):
            results[i] = UTMCoordinate(zone.name, round(float(easting)), round(float(northing)))
    log.debug("Projected %d points across %d zones", lats.size, len(groups))
    return results
