# examples/basic_usage_example.py
import logging

from utmgrs import (
    MGRSCoordinate,
    UTMCoordinate,
    get_logger,
    mgrs_cell_polygon,
    zones_to_geodataframe,
)
from utmgrs.utils.geo import projection_error

log = get_logger()


def run_conversion_example():
    """
    Converts a handful of landmarks to UTM and MGRS, reads an MGRS string back,
    and reports how far the spherical model is from WGS84 UTM.
    """
    log.setLevel(logging.INFO)
    log.info("--- Starting conversion example ---")

    landmarks = {
        "Greenwich": (51.4779, -0.0015),
        "Bergen": (60.3913, 5.3221),
        "Longyearbyen": (78.2232, 15.6267),
        "Sydney": (-33.8688, 151.2093),
    }

    # 1. Project each landmark and encode it
    for name, (lat, lon) in landmarks.items():
        utm = UTMCoordinate.from_lat_lon(lat, lon)
        mgrs = MGRSCoordinate.from_utm(utm)
        error = projection_error(lat, lon)
        log.info(f"{name}: {utm} | {mgrs} | {error:.0f} m from WGS84")

    # 2. Parse a coarse reference and look at the cell it names
    result = MGRSCoordinate.parse("31U DQ 48 11")
    if not result:
        log.error(f"Could not parse {result.text!r}: {result.reason}")
        return

    log.info(f"{result} is {result.to_utm()} at {result.cell_size} m precision")
    log.info(f"Cell outline: {mgrs_cell_polygon(result).wkt}")

    # 3. The zone grid as a table
    zones = zones_to_geodataframe()
    irregular = zones[~zones["regular"]]
    log.info(f"{len(zones)} zones, {len(irregular)} of them irregular")
    print(irregular.head())


if __name__ == "__main__":
    run_conversion_example()
