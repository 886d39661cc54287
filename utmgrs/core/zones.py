# utmgrs/core/zones.py
"""
The UTM zone grid: one ``UTMZone`` per cell and the ``UTMGlobe`` registry that
resolves a latitude/longitude pair to the cell containing it.
"""
import math
import numbers
from types import MappingProxyType

from ..utils import constants
from ..utils.logging_setup import get_logger
from .errors import ZoneConsistencyError, ZoneNotFoundError

log = get_logger()


class UTMZone:
    """
    An immutable UTM cell.

    Bounds are half-open: a point belongs to the zone when
    ``bottom <= lat < top`` and ``left <= lon < right``. The north polar caps
    also own the pole itself (lat == 90).

    ``meridian`` is the central longitude used by the projection. It is stored,
    not derived, because 31V, 32V and the wide band X zones do not project
    about the midpoint of their bounds.
    """

    __slots__ = ("_name", "_left", "_right", "_bottom", "_top", "_meridian")

    def __init__(self, name: str, bottom: float, left: float, width: float = 6.0, height: float = 8.0, meridian: float | None = None):
        self._name = name
        self._bottom = float(bottom)
        self._top = float(bottom + height)
        self._left = float(left)
        self._right = float(left + width)
        self._meridian = float(meridian) if meridian is not None else (self._left + self._right) / 2

    @classmethod
    def regular(cls, name, bottom, left):
        return cls(name, bottom, left)

    @classmethod
    def irregular(cls, name, bottom, left, width, height, meridian):
        return cls(name, bottom, left, width, height, meridian)

    name = property(lambda self: self._name)
    left = property(lambda self: self._left)
    right = property(lambda self: self._right)
    bottom = property(lambda self: self._bottom)
    top = property(lambda self: self._top)
    meridian = property(lambda self: self._meridian)

    @property
    def width(self):
        return self._right - self._left

    @property
    def height(self):
        return self._top - self._bottom

    @property
    def is_regular(self):
        return self.width == 6.0 and self.height == 8.0

    @property
    def is_polar(self):
        return self.number is None

    @property
    def number(self) -> int | None:
        """Longitude zone number (1-60), or None for the polar caps."""
        digits = self._name[:-1]
        return int(digits) if digits else None

    @property
    def band(self) -> str:
        return self._name[-1]

    @property
    def bounds(self):
        """(left, bottom, right, top), the order shapely uses."""
        return (self._left, self._bottom, self._right, self._top)

    def contains(self, lat: float, lon: float) -> bool:
        in_lat = self._bottom <= lat < self._top or (lat == self._top == 90.0)
        in_lon = self._left <= lon < self._right
        return in_lat and in_lon

    def __eq__(self, other):
        if not isinstance(other, UTMZone):
            return NotImplemented
        return (self._name, self.bounds, self._meridian) == (other._name, other.bounds, other._meridian)

    def __hash__(self):
        return hash((self._name, self.bounds, self._meridian))

    def __repr__(self):
        return (
            f"UTMZone({self._name!r}, lat {self._bottom:g} to {self._top:g}, "
            f"lon {self._left:g} to {self._right:g}, meridian {self._meridian:g})"
        )


def lat_char(lat: float) -> str:
    """
    Latitude band letter for ``lat``, skipping I and O.

    South of 80S this is always 'A' and from 84N always 'Z'; the polar caps are
    split further by longitude in ``UTMGlobe.designator_for_point``.
    """
    lat = math.floor(lat)
    if lat < constants.SOUTH_BAND_LIMIT:
        return "A"
    if lat >= constants.NORTH_BAND_LIMIT:
        return "Z"
    if lat >= constants.HIGH_BAND_START:
        return "X"
    offset = (lat - constants.SOUTH_BAND_LIMIT) // constants.BAND_HEIGHT
    return constants.BAND_LETTERS[offset]


def normalize_lat_lon(lat: float, lon: float) -> tuple[float, float]:
    """Wraps longitude into [-180, 180) and clamps latitude to [-90, 90]."""
    if not (math.isfinite(lat) and math.isfinite(lon)):
        msg = f"Latitude and longitude must be finite, got ({lat}, {lon})."
        raise ValueError(msg)
    lon = (lon + 180.0) % 360.0 - 180.0
    lat = min(max(lat, -90.0), 90.0)
    return lat, lon


def _generate_zones():
    zones = [
        UTMZone.irregular("A", -90, -180, 180, 10, 0),
        UTMZone.irregular("B", -90, 0, 180, 10, 0),
    ]

    for bottom in range(constants.SOUTH_BAND_LIMIT, constants.HIGH_BAND_START, constants.BAND_HEIGHT):
        letter = lat_char(bottom)
        for index in range(constants.ZONE_COUNT):
            left = (index - 30) * constants.ZONE_WIDTH
            name = f"{index + 1:02d}{letter}"
            if name == "31V":
                zones.append(UTMZone.irregular(name, bottom, left, 3, 8, 3))
            elif name == "32V":
                zones.append(UTMZone.irregular(name, bottom, left - 3, 9, 8, 9))
            else:
                zones.append(UTMZone.regular(name, bottom, left))

    high = constants.HIGH_BAND_START
    svalbard = {
        "31X": (0, 9, 3),
        "33X": (9, 12, 15),
        "35X": (21, 12, 27),
        "37X": (33, 9, 39),
    }
    for index in range(constants.ZONE_COUNT):
        left = (index - 30) * constants.ZONE_WIDTH
        name = f"{index + 1:02d}X"
        if name in ("32X", "34X", "36X"):
            continue
        if name in svalbard:
            start, width, meridian = svalbard[name]
            zones.append(UTMZone.irregular(name, high, start, width, 12, meridian))
        else:
            zones.append(UTMZone.irregular(name, high, left, 6, 12, left + 3))

    zones.append(UTMZone.irregular("Y", 84, -180, 180, 6, 0))
    zones.append(UTMZone.irregular("Z", 84, 0, 180, 6, 0))
    return zones


def _normalize_name(name: str) -> str:
    name = name.strip().upper()
    if len(name) == 2 and name[0].isdigit():
        name = "0" + name
    return name


class UTMGlobe:
    """
    Read-only registry of every UTM zone plus the physical constants used to
    project into them.

    Build alternates with ``UTMGlobe(scale_factor=..., earth_radius=...)`` or
    ``GlobeBuilder``; ``DEFAULT_GLOBE`` is the shared standard instance.
    """

    def __init__(self, scale_factor: float = constants.SCALE_FACTOR, earth_radius: float = constants.EARTH_RADIUS):
        self._scale_factor = float(scale_factor)
        self._earth_radius = float(earth_radius)
        self._zones = MappingProxyType({zone.name: zone for zone in _generate_zones()})
        log.debug(
            "Built UTM globe with %d zones (scale factor %s, earth radius %s m)",
            len(self._zones), self._scale_factor, self._earth_radius,
        )

    @property
    def zones(self):
        return self._zones

    @property
    def scale_factor(self):
        return self._scale_factor

    @property
    def earth_radius(self):
        return self._earth_radius

    def __len__(self):
        return len(self._zones)

    def __iter__(self):
        return iter(self._zones.values())

    def __contains__(self, name):
        return isinstance(name, str) and _normalize_name(name) in self._zones

    def __getitem__(self, name):
        return self.zone(name)

    def zone(self, name: str) -> UTMZone:
        """
        Looks up a zone by designator. Lowercase and single digit zone numbers
        are accepted ("4q" finds "04Q").
        """
        try:
            return self._zones[_normalize_name(name)]
        except KeyError:
            raise ZoneNotFoundError(name) from None

    def designator_for_point(self, lat: float, lon: float) -> str:
        lat, lon = normalize_lat_lon(lat, lon)
        band = lat_char(lat)
        index = math.floor(lon / constants.ZONE_WIDTH) + 31

        # Norway and Svalbard use merged, irregular cells
        if band == "V":
            if 0 <= lon < 3:
                index = 31
            elif 3 <= lon < 12:
                index = 32
        elif band == "X":
            if 0 <= lon < 9:
                index = 31
            elif 9 <= lon < 21:
                index = 33
            elif 21 <= lon < 33:
                index = 35
            elif 33 <= lon < 42:
                index = 37

        if band == "A":
            return "A" if lon < 0 else "B"
        if band == "Z":
            return "Y" if lon < 0 else "Z"
        return f"{index:02d}{band}"

    def zone_for_point(self, lat: float, lon: float) -> UTMZone:
        designator = self.designator_for_point(lat, lon)
        zone = self.zone(designator)

        lat, lon = normalize_lat_lon(lat, lon)
        if not zone.contains(lat, lon):
            msg = (
                f"Zone {zone.name} does not contain the point it was resolved from. "
                f"Expected lat {zone.bottom} to {zone.top}, got {lat}; "
                f"expected lon {zone.left} to {zone.right}, got {lon}."
            )
            log.error(msg)
            raise ZoneConsistencyError(msg)
        return zone

    def __repr__(self):
        return f"UTMGlobe(zones={len(self._zones)}, scale_factor={self._scale_factor}, earth_radius={self._earth_radius})"


class GlobeBuilder:
    def __init__(self):
        self.scale_factor = constants.SCALE_FACTOR
        self.earth_radius = constants.EARTH_RADIUS

    def set_scale_factor(self, scale_factor):
        self.scale_factor = scale_factor
        return self

    def set_earth_radius(self, earth_radius):
        self.earth_radius = earth_radius
        return self

    def build(self):
        for label, value in (("Scale factor", self.scale_factor), ("Earth radius", self.earth_radius)):
            if not isinstance(value, numbers.Real) or not math.isfinite(value) or value <= 0:
                msg = f"{label} must be a positive finite number, got {value!r}."
                raise ValueError(msg)
        return UTMGlobe(scale_factor=self.scale_factor, earth_radius=self.earth_radius)


DEFAULT_GLOBE = UTMGlobe()
