# utmgrs/core/geometries.py
"""
Shapely, geojson and geopandas views of the zone grid and of MGRS cells.
All geometries are (lon, lat) in WGS84.
"""
import geojson
import geopandas as gpd
import numpy as np
import shapely

from ..utils.logging_setup import get_logger
from .mgrs import MGRSCoordinate
from .projection import inverse
from .zones import DEFAULT_GLOBE, UTMGlobe, UTMZone

log = get_logger()

CRS = "WGS84"


def zone_polygon(zone: UTMZone) -> shapely.Polygon:
    return shapely.box(*zone.bounds)


def zone_feature(zone: UTMZone, properties=None) -> geojson.Feature:
    properties = dict(properties or {})

    properties["name"] = zone.name
    properties["meridian"] = zone.meridian
    properties["regular"] = zone.is_regular
    properties["crs"] = CRS
    return geojson.Feature(id=zone.name, geometry=zone_polygon(zone), properties=properties)


def zones_to_feature_collection(globe: UTMGlobe = DEFAULT_GLOBE) -> geojson.FeatureCollection:
    return geojson.FeatureCollection([zone_feature(zone) for zone in globe])


def zones_to_geodataframe(globe: UTMGlobe = DEFAULT_GLOBE) -> gpd.GeoDataFrame:
    """One row per zone with its bounds, meridian and regularity."""
    records = [
        {
            "name": zone.name,
            "left": zone.left,
            "right": zone.right,
            "bottom": zone.bottom,
            "top": zone.top,
            "meridian": zone.meridian,
            "regular": zone.is_regular,
        }
        for zone in globe
    ]
    geometry = [zone_polygon(zone) for zone in globe]
    gdf = gpd.GeoDataFrame(records, geometry=geometry, crs="EPSG:4326")
    log.debug("Built zone table with %d rows", len(gdf))
    return gdf


def mgrs_cell_polygon(coord: MGRSCoordinate, globe: UTMGlobe = DEFAULT_GLOBE) -> shapely.Polygon:
    """
    The area an MGRS reference names at its precision: a square of
    ``coord.cell_size`` meters whose south-west corner is the truncated
    position, returned with its corners converted back to (lon, lat).
    """
    utm = coord.to_utm(globe)
    zone = globe.zone(utm.zone)
    size = coord.cell_size

    west = utm.easting - coord.easting % size
    south = utm.northing - coord.northing % size
    eastings = np.array([west, west + size, west + size, west])
    northings = np.array([south, south, south + size, south + size])

    lats, lons = inverse(eastings, northings, zone.meridian, globe)
    return shapely.Polygon(list(zip(lons, lats)))
