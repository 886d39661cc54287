# utmgrs/core/mgrs.py
"""
Military Grid Reference System coordinates.

An MGRS reference is a UTM zone, a two letter 100 km grid square and an
easting/northing pair inside that square, written with 1 to 5 digits per axis
(10 km down to 1 m). "12P AF 12 34" and "12PAF1234" name the same 1 km cell;
the digits are always read as the south-west corner of the cell they describe.
"""
import math
import re

from ..utils import constants
from ..utils.logging_setup import get_logger
from .errors import GridSquareError, ParseFailure, UnsupportedZoneError
from .projection import UTMCoordinate, forward
from .zones import DEFAULT_GLOBE, UTMGlobe, UTMZone, _normalize_name

log = get_logger()

# zone and grid square are optional-space separated; the digits are either one
# block split down the middle or two blocks separated by a space
MGRS_PATTERN = re.compile(
    r"(?:(?P<zone>\d{1,2}[C-HJ-NP-X]) ?)?"
    r"(?P<grid>[A-Z]{2}) ?"
    r"(?P<first>\d+)(?: (?P<second>\d+))?",
    re.IGNORECASE | re.ASCII,
)


def infer_precision(easting: int, northing: int) -> int:
    """
    Finest digit place (5 = meters, 1 = 10 km) at which either value has a
    non-zero digit, so that trailing zeros shared by both axes are dropped:
    12340/12300 gives 4, 0/0 gives 1.
    """
    for place in range(constants.MAX_PRECISION, constants.MIN_PRECISION, -1):
        step = 10 ** (constants.MAX_PRECISION + 1 - place)
        if easting % step or northing % step:
            return place
    return constants.MIN_PRECISION


def _clamp_precision(value):
    return max(constants.MIN_PRECISION, min(constants.MAX_PRECISION, int(value)))


def _pad_digits(digits: str) -> int:
    return int(digits.ljust(constants.MAX_PRECISION, "0"))


def _column_letters(zone_number: int) -> str:
    set_index = (zone_number - 1) % 3
    start = set_index * constants.COLUMNS_PER_SET
    return constants.COLUMN_LETTERS[start:start + constants.COLUMNS_PER_SET]


def grid_square_for(zone_number: int, easting: float, northing: float) -> str:
    """
    Two letter 100 km square containing a grid position.

    Column letters cycle through A-H, J-R and S-Z for zones 1, 2 and 3 (mod 3);
    row letters run A-V every 2,000 km, starting at F in even zones.
    """
    column = int(easting // constants.GRID_SQUARE_SIZE)
    row = int(northing // constants.GRID_SQUARE_SIZE)
    if zone_number % 2 == 0:
        row += constants.EVEN_ZONE_ROW_OFFSET

    column_letter = _column_letters(zone_number)[(column - 1) % constants.COLUMNS_PER_SET]
    row_letter = constants.ROW_LETTERS[row % len(constants.ROW_LETTERS)]
    return column_letter + row_letter


def grid_square_origin(zone_number: int, grid_square: str) -> tuple[int, int]:
    """
    Inverse of ``grid_square_for``: the easting of the square's west edge and
    the northing of its south edge modulo the 2,000 km row cycle.
    """
    grid_square = grid_square.upper()
    if len(grid_square) != 2:
        raise GridSquareError(f"Grid square must be two letters, got {grid_square!r}.")
    column_letter, row_letter = grid_square

    letters = _column_letters(zone_number)
    if column_letter not in letters:
        raise GridSquareError(f"Column letter {column_letter!r} is not used in zone {zone_number} ({letters}).")
    if row_letter not in constants.ROW_LETTERS:
        raise GridSquareError(f"Row letter {row_letter!r} is not a valid MGRS row letter.")

    column = letters.index(column_letter) + 1
    row = constants.ROW_LETTERS.index(row_letter)
    if zone_number % 2 == 0:
        row = (row - constants.EVEN_ZONE_ROW_OFFSET) % len(constants.ROW_LETTERS)
    return column * constants.GRID_SQUARE_SIZE, row * constants.GRID_SQUARE_SIZE


def _band_min_northing(zone: UTMZone, globe: UTMGlobe) -> float:
    # South of the equator the zone edges reach further south than the meridian
    return min(
        forward(zone.bottom, lon, zone.meridian, globe)[1]
        for lon in (zone.left, zone.meridian, zone.right)
    )


def _numbered_zone(name: str, globe: UTMGlobe) -> UTMZone:
    if not name:
        raise UnsupportedZoneError("MGRS coordinate has no UTM zone; it cannot be placed on the globe.")
    zone = globe.zone(name)
    if zone.is_polar:
        raise UnsupportedZoneError(f"Polar zone {zone.name} uses UPS lettering, which is not supported.")
    return zone


class MGRSCoordinate:
    """
    An MGRS reference.

    ``easting`` and ``northing`` always hold meters inside the grid square
    (0-99999) regardless of ``precision``, which only controls how many digits
    are written out. Precision is clamped to 1-5 and is not part of equality.

    Args:
        grid_square (str): The 100 km square, e.g. "AF".
        easting (int): Meters east of the square's west edge.
        northing (int): Meters north of the square's south edge.
        utm_zone (str): Optional zone designator, e.g. "12P". Empty when unknown.
        precision (int, optional): Digits per axis. Inferred from trailing zeros when omitted.
    """

    __slots__ = ("_utm_zone", "_grid_square", "_easting", "_northing", "_precision")

    def __init__(self, grid_square: str, easting: int, northing: int, utm_zone: str = "", precision: int | None = None):
        if len(grid_square) != 2 or not grid_square.isalpha():
            msg = f"Grid square must be two letters, got {grid_square!r}."
            raise ValueError(msg)
        for label, value in (("Easting", easting), ("Northing", northing)):
            if not 0 <= value < constants.GRID_SQUARE_SIZE:
                msg = f"{label} must be between 0 and 99999 meters, got {value}."
                raise ValueError(msg)

        self._utm_zone = _normalize_name(utm_zone) if utm_zone else ""
        self._grid_square = grid_square.upper()
        self._easting = int(easting)
        self._northing = int(northing)
        self._precision = constants.MIN_PRECISION
        self.precision = infer_precision(self._easting, self._northing) if precision is None else precision

    @classmethod
    def from_digits(cls, grid_square, east_digits, north_digits, utm_zone=""):
        """
        Builds a coordinate from the digits as they are written in an MGRS
        string, so ``from_digits("AF", "12", "12")`` is ``AF 12000 12000`` at
        precision 2.
        """
        east_digits = str(east_digits)
        north_digits = str(north_digits)
        if len(east_digits) != len(north_digits):
            msg = f"Easting and northing need the same number of digits, got {east_digits!r} and {north_digits!r}."
            raise ValueError(msg)
        return cls(grid_square, _pad_digits(east_digits), _pad_digits(north_digits), utm_zone, precision=len(east_digits))

    utm_zone = property(lambda self: self._utm_zone)
    grid_square = property(lambda self: self._grid_square)
    easting = property(lambda self: self._easting)
    northing = property(lambda self: self._northing)

    @property
    def precision(self) -> int:
        """Digits per axis, 1 (10 km) to 5 (1 m)."""
        return self._precision

    @precision.setter
    def precision(self, value):
        self._precision = _clamp_precision(value)

    @property
    def cell_size(self) -> int:
        """Side length in meters of the square the displayed digits describe."""
        return 10 ** (constants.MAX_PRECISION - self._precision)

    # Parsing

    @classmethod
    def parse(cls, text: str):
        """
        Parses free-form MGRS text such as "48T CQ 18749 17382", "aa 1212" or
        "30UYB0505453454".

        Returns an MGRSCoordinate, or a falsy ``ParseFailure`` when the text is
        not a well formed MGRS reference. Never raises for malformed input.
        """
        if not isinstance(text, str):
            return ParseFailure(text, "not a string")

        match = MGRS_PATTERN.fullmatch(text.strip())
        if match is None:
            return cls._reject(text, "does not match '[zone] <grid square> <digits>'")

        first, second = match.group("first"), match.group("second")
        if second is None:
            if len(first) < 2 or len(first) % 2 != 0:
                return cls._reject(text, f"a single digit block needs an even number of digits, got {len(first)}")
            half = len(first) // 2
            east_digits, north_digits = first[:half], first[half:]
        else:
            if len(first) != len(second):
                return cls._reject(text, f"easting has {len(first)} digits but northing has {len(second)}")
            east_digits, north_digits = first, second

        # Anything finer than a meter is not representable
        east_digits = east_digits[:constants.MAX_PRECISION]
        north_digits = north_digits[:constants.MAX_PRECISION]

        try:
            easting = _pad_digits(east_digits)
            northing = _pad_digits(north_digits)
        except ValueError:
            return cls._reject(text, "coordinates are not numeric")

        return cls(match.group("grid"), easting, northing, match.group("zone") or "", precision=len(east_digits))

    @staticmethod
    def _reject(text, reason):
        log.debug("Rejected MGRS string %r: %s", text, reason)
        return ParseFailure(text, reason)

    @classmethod
    def from_string(cls, text: str) -> "MGRSCoordinate":
        """Like ``parse`` but raises ``CoordinateParseError`` on malformed text."""
        result = cls.parse(text)
        if not result:
            result.raise_error()
        return result

    # Formatting

    def format(self, precision: int | None = None) -> str:
        """
        Text form at ``precision`` digits (default: the coordinate's own).
        Digits are truncated, never rounded, so the result still names the cell
        containing the point.
        """
        precision = self._precision if precision is None else _clamp_precision(precision)
        east = f"{self._easting:05d}"[:precision]
        north = f"{self._northing:05d}"[:precision]
        prefix = f"{self._utm_zone} " if self._utm_zone else ""
        return f"{prefix}{self._grid_square} {east} {north}"

    def __str__(self):
        return self.format()

    def __repr__(self):
        return (
            f"MGRSCoordinate({self._grid_square!r}, {self._easting}, {self._northing}, "
            f"utm_zone={self._utm_zone!r}, precision={self._precision})"
        )

    def __eq__(self, other):
        if not isinstance(other, MGRSCoordinate):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def _key(self):
        return (self._utm_zone, self._grid_square, self._easting, self._northing)

    # Conversions

    @classmethod
    def from_utm(cls, utm: UTMCoordinate, globe: UTMGlobe = DEFAULT_GLOBE) -> "MGRSCoordinate":
        zone = _numbered_zone(utm.zone, globe)
        easting = int(round(utm.easting))
        northing = int(round(utm.northing))
        grid_square = grid_square_for(zone.number, easting, northing)
        return cls(
            grid_square,
            easting % constants.GRID_SQUARE_SIZE,
            northing % constants.GRID_SQUARE_SIZE,
            zone.name,
            precision=constants.MAX_PRECISION,
        )

    @classmethod
    def from_lat_lon(cls, lat: float, lon: float, globe: UTMGlobe = DEFAULT_GLOBE) -> "MGRSCoordinate":
        return cls.from_utm(UTMCoordinate.from_lat_lon(lat, lon, globe), globe)

    def to_utm(self, globe: UTMGlobe = DEFAULT_GLOBE) -> UTMCoordinate:
        """
        Expands the grid square back to full UTM meters. The 2,000 km row cycle
        is resolved with the zone's latitude band: the square chosen is the
        lowest one whose northern edge lies above the band's southern limit.
        """
        zone = _numbered_zone(self._utm_zone, globe)
        square_easting, row_northing = grid_square_origin(zone.number, self._grid_square)

        lowest = _band_min_northing(zone, globe) - constants.GRID_SQUARE_SIZE
        cycles = math.floor((lowest - row_northing) / constants.ROW_CYCLE) + 1
        square_northing = row_northing + cycles * constants.ROW_CYCLE

        return UTMCoordinate(zone.name, square_easting + self._easting, square_northing + self._northing)

    def to_lat_lon(self, globe: UTMGlobe = DEFAULT_GLOBE) -> tuple[float, float]:
        return self.to_utm(globe).to_lat_lon(globe)
