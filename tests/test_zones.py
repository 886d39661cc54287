"""
Unit tests for the UTM zone grid: band letters, the Norway and Svalbard
exceptions, the polar caps, and point-to-zone resolution.
"""
import numpy as np
import pytest

from utmgrs import DEFAULT_GLOBE, GlobeBuilder, UTMGlobe, lat_char
from utmgrs.core.errors import ZoneConsistencyError, ZoneNotFoundError
from utmgrs.core.zones import UTMZone, normalize_lat_lon


class TestLatChars:
    def test_standard_bands(self):
        for i, expected in enumerate("CDEFGHJKLMNPQRSTUVWX"):
            assert lat_char(i * 8 - 80) == expected, f"band starting at {i * 8 - 80}"

    def test_polar_bands(self):
        assert lat_char(-81) == "A"
        assert lat_char(-90) == "A"
        assert lat_char(85) == "Z"
        assert lat_char(84) == "Z"

    def test_high_latitude_band_is_twelve_degrees(self):
        assert lat_char(72) == "X"
        assert lat_char(83.99) == "X"

    def test_fractional_latitudes_use_the_band_below(self):
        assert lat_char(-0.5) == "M"
        assert lat_char(7.99) == "N"
        assert lat_char(-79.5) == "C"


class TestRegistry:
    def test_zone_count(self, globe):
        assert len(globe) == 1201

    def test_regular_zone_order(self, globe):
        zones = list(globe)
        assert [zone.name for zone in zones[:2]] == ["A", "B"]
        index = 2
        for y in range(19):
            band = lat_char(y * 8 - 80)
            for x in range(60):
                assert zones[index].name == f"{x + 1:02d}{band}"
                index += 1
        assert [zone.name for zone in zones[-2:]] == ["Y", "Z"]

    def test_norway_zones(self, globe):
        assert globe["31V"].width == 3.0
        assert globe["31V"].meridian == 3.0
        assert globe["32V"].left == 3.0
        assert globe["32V"].width == 9.0
        assert globe["32V"].meridian == 9.0

    def test_svalbard_zones(self, globe):
        assert globe["31X"].width == 9.0
        assert globe["33X"].width == 12.0
        assert globe["35X"].width == 12.0
        assert globe["37X"].width == 9.0
        assert globe["38X"].left == 42.0
        assert [globe[name].meridian for name in ("31X", "33X", "35X", "37X")] == [3.0, 15.0, 27.0, 39.0]

    @pytest.mark.parametrize("name", ["32X", "34X", "36X"])
    def test_svalbard_gaps_do_not_exist(self, globe, name):
        assert name not in globe
        with pytest.raises(ZoneNotFoundError):
            globe.zone(name)
        with pytest.raises(KeyError):
            globe[name]

    def test_unknown_designator(self, globe):
        with pytest.raises(ZoneNotFoundError, match="61N"):
            globe.zone("61N")

    def test_lookup_accepts_lowercase_and_single_digit_numbers(self, globe):
        assert globe.zone("4q") is globe.zone("04Q")
        assert "31n" in globe

    def test_regularity(self, globe):
        assert globe["01N"].is_regular
        assert not globe["31V"].is_regular
        assert not globe["05X"].is_regular  # 12 degrees tall
        assert not globe["A"].is_regular

    def test_zone_attributes(self, globe):
        zone = globe["33T"]
        assert zone.number == 33
        assert zone.band == "T"
        assert zone.bounds == (12.0, 40.0, 18.0, 48.0)
        assert globe["Z"].number is None
        assert globe["Z"].is_polar

    def test_zones_are_read_only(self, globe):
        with pytest.raises(TypeError):
            globe.zones["99Q"] = UTMZone.regular("99Q", 0, 0)
        with pytest.raises(AttributeError):
            globe["31N"].left = 5.0

    def test_zone_equality(self):
        assert UTMZone.regular("31N", 0, 0) == UTMZone.regular("31N", 0, 0)
        assert UTMZone.regular("31N", 0, 0) != UTMZone.irregular("31N", 0, 0, 6, 8, 2)
        assert len({UTMZone.regular("31N", 0, 0), UTMZone.regular("31N", 0, 0)}) == 1


class TestDesignatorForPoint:
    def test_sample_points(self, globe, sample_points):
        for lat, lon, expected in sample_points:
            assert globe.designator_for_point(lat, lon) == expected

    def test_edges_of_the_world(self, globe):
        assert globe.designator_for_point(-90, 0) == "B"
        assert globe.designator_for_point(-90, -1) == "A"
        assert globe.designator_for_point(90, 0) == "Z"
        assert globe.designator_for_point(90, -1) == "Y"
        assert globe.designator_for_point(0, -180) == "01N"
        assert globe.designator_for_point(0, 180) == "01N"

    def test_longitude_wraps(self, globe):
        assert globe.designator_for_point(0, 183) == "01N"
        assert globe.designator_for_point(0, -181) == "60N"
        assert globe.designator_for_point(0, 363) == "31N"

    def test_latitude_clamps(self, globe):
        assert globe.designator_for_point(95, 10) == "Z"
        assert globe.designator_for_point(-95, -10) == "A"

    def test_norway_split_at_three_degrees_east(self, globe):
        assert globe.designator_for_point(60, 2.99) == "31V"
        assert globe.designator_for_point(60, 3.0) == "32V"
        assert globe.designator_for_point(60, 11.99) == "32V"
        assert globe.designator_for_point(60, 12.0) == "33V"
        # The exception only applies to band V
        assert globe.designator_for_point(55, 4) == "31U"
        assert globe.designator_for_point(65, 4) == "31W"

    def test_svalbard_merged_zones(self, globe):
        assert globe.designator_for_point(75, 8.99) == "31X"
        assert globe.designator_for_point(75, 9.0) == "33X"
        assert globe.designator_for_point(75, 20.99) == "33X"
        assert globe.designator_for_point(75, 21.0) == "35X"
        assert globe.designator_for_point(75, 33.0) == "37X"
        assert globe.designator_for_point(75, 42.0) == "38X"
        assert globe.designator_for_point(75, -0.5) == "30X"

    def test_non_finite_input(self, globe):
        with pytest.raises(ValueError):
            globe.designator_for_point(float("nan"), 0)


class TestZoneForPoint:
    def test_resolved_zone_contains_the_point(self, globe, sample_points):
        for lat, lon, expected in sample_points:
            zone = globe.zone_for_point(lat, lon)
            assert zone.name == expected
            assert zone.contains(lat, lon)

    def test_poles_belong_to_the_polar_caps(self, globe):
        assert globe.zone_for_point(90, 0).name == "Z"
        assert globe.zone_for_point(90, -180).name == "Y"
        assert globe.zone_for_point(-90, 179.9).name == "B"

    def test_wrapped_longitude_is_verified_after_normalisation(self, globe):
        assert globe.zone_for_point(10, 180).name == "01P"

    def test_inconsistent_designator_is_an_internal_error(self, monkeypatch):
        globe = UTMGlobe()
        monkeypatch.setattr(globe, "designator_for_point", lambda lat, lon: "01N")
        with pytest.raises(ZoneConsistencyError, match="does not contain"):
            globe.zone_for_point(45, 10)

    def test_consistency_error_is_distinguishable_from_bad_input(self, monkeypatch):
        globe = UTMGlobe()
        monkeypatch.setattr(globe, "designator_for_point", lambda lat, lon: "01N")
        with pytest.raises(AssertionError):
            globe.zone_for_point(45, 10)


class TestNormalisation:
    def test_wraps_into_half_open_range(self):
        assert normalize_lat_lon(0, 180) == (0, -180)
        assert normalize_lat_lon(0, -180) == (0, -180)
        assert normalize_lat_lon(0, 540) == (0, -180)
        assert normalize_lat_lon(100, 10) == (90, 10)


@pytest.mark.slow
class TestCoverage:
    def test_every_sample_inside_a_zone_resolves_to_it(self, globe):
        for zone in globe:
            for lat in np.arange(zone.bottom, zone.top, 1.0):
                for lon in np.arange(zone.left, zone.right, 1.0):
                    assert globe.designator_for_point(lat, lon) == zone.name, f"({lat}, {lon})"

    def test_dense_grid_has_no_gaps_or_overlaps(self, globe):
        zones = list(globe)
        lefts = np.array([zone.left for zone in zones])
        rights = np.array([zone.right for zone in zones])
        bottoms = np.array([zone.bottom for zone in zones])
        tops = np.array([zone.top for zone in zones])

        for lat in np.arange(-89.75, 90.0, 1.0):
            for lon in np.arange(-179.75, 180.0, 1.0):
                inside = (bottoms <= lat) & (lat < tops) & (lefts <= lon) & (lon < rights)
                assert inside.sum() == 1, f"({lat}, {lon}) is inside {inside.sum()} zones"
                zone = zones[int(np.argmax(inside))]
                assert globe.zone_for_point(lat, lon) is zone


class TestGlobeBuilder:
    def test_defaults_match_the_shared_globe(self):
        globe = GlobeBuilder().build()
        assert globe.scale_factor == DEFAULT_GLOBE.scale_factor == 0.9996
        assert globe.earth_radius == DEFAULT_GLOBE.earth_radius == 6378137.0

    def test_alternate_constants(self):
        globe = GlobeBuilder().set_scale_factor(1.0).set_earth_radius(6371000.0).build()
        assert globe.scale_factor == 1.0
        assert globe.earth_radius == 6371000.0
        assert len(globe) == 1201

    @pytest.mark.parametrize("radius", [0, -1, float("nan"), float("inf"), "6371000"])
    def test_rejects_bad_radius(self, radius):
        with pytest.raises(ValueError):
            GlobeBuilder().set_earth_radius(radius).build()
