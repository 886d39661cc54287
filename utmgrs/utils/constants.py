# utmgrs/utils/constants.py
"""
Physical constants and alphabets shared by the zone model, the projection and
the MGRS codec.
"""

# Mercator correction applied to every projected distance
SCALE_FACTOR = 0.9996
# Equatorial radius in meters, used as the radius of a spherical earth
EARTH_RADIUS = 6378137.0

FALSE_EASTING = 500000.0

# Latitude bands
BAND_HEIGHT = 8
SOUTH_BAND_LIMIT = -80
HIGH_BAND_START = 72
NORTH_BAND_LIMIT = 84
BAND_LETTERS = "CDEFGHJKLMNPQRSTUVWX"
SOUTH_POLAR_LETTERS = "AB"
NORTH_POLAR_LETTERS = "YZ"

# Longitude zones
ZONE_WIDTH = 6
ZONE_COUNT = 60

# MGRS 100 km squares
GRID_SQUARE_SIZE = 100000
ROW_CYCLE = 2000000  # Northing distance after which row letters repeat
COLUMN_LETTERS = "ABCDEFGHJKLMNPQRSTUVWXYZ"
ROW_LETTERS = "ABCDEFGHJKLMNPQRSTUV"
COLUMNS_PER_SET = 8
EVEN_ZONE_ROW_OFFSET = 5

MIN_PRECISION = 1
MAX_PRECISION = 5
