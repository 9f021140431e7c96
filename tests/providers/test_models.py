"""
Tests for the shared configuration models.
"""

import pytest
from pydantic import ValidationError

from polymap.providers.models import GeoPoint, MapConfig, MarkerConfig, PolylineConfig


class TestGeoPointModel:
    """Test suite for GeoPoint."""

    def test_latitude_validation_bounds(self):
        """It should validate latitude within bounds [-90, 90]."""
        GeoPoint(latitude=90, longitude=0)
        GeoPoint(latitude=-90, longitude=0)

        with pytest.raises(ValidationError):
            GeoPoint(latitude=91, longitude=0)

        with pytest.raises(ValidationError):
            GeoPoint(latitude=-91, longitude=0)

    def test_longitude_validation_bounds(self):
        """It should validate longitude within bounds [-180, 180]."""
        GeoPoint(latitude=0, longitude=180)
        GeoPoint(latitude=0, longitude=-180)

        with pytest.raises(ValidationError):
            GeoPoint(latitude=0, longitude=181)

        with pytest.raises(ValidationError):
            GeoPoint(latitude=0, longitude=-181)

    def test_geopoint_immutable(self, sample_points):
        """It should be immutable (frozen)."""
        with pytest.raises(ValidationError):
            sample_points['center'].latitude = 0.0

    def test_geopoint_equality_is_by_value(self):
        """It should compare equal regardless of keyword order."""
        assert GeoPoint(latitude=1.5, longitude=2.5) == GeoPoint(longitude=2.5, latitude=1.5)

    def test_coordinate_pairs(self, sample_points):
        """It should expose both lat-first and lng-first pairs."""
        center = sample_points['center']

        assert center.as_lat_lng() == [14.6091, 121.0223]
        assert center.as_lng_lat() == [121.0223, 14.6091]


class TestMapConfigModel:
    """Test suite for MapConfig."""

    def test_minimal_config(self, map_config):
        """It should default style_reference to None."""
        assert map_config.container_handle == "map"
        assert map_config.zoom == 12
        assert map_config.style_reference is None

    def test_container_handle_required(self, sample_points):
        """It should reject a missing container handle."""
        with pytest.raises(ValidationError):
            MapConfig(center=sample_points['center'], zoom=12)

        with pytest.raises(ValidationError):
            MapConfig(container_handle=None, center=sample_points['center'], zoom=12)

    def test_container_handle_is_opaque(self, sample_points):
        """It should keep arbitrary container objects as-is."""
        surface = object()
        config = MapConfig(container_handle=surface, center=sample_points['center'], zoom=3)

        assert config.container_handle is surface

    def test_center_accepts_mapping(self):
        """It should build the center from a latitude/longitude mapping."""
        config = MapConfig(
            container_handle="map",
            center={"latitude": 14.6091, "longitude": 121.0223},
            zoom=12,
        )

        assert config.center == GeoPoint(latitude=14.6091, longitude=121.0223)

    def test_out_of_range_center_rejected(self):
        """It should fail fast on an invalid center."""
        with pytest.raises(ValidationError):
            MapConfig(container_handle="map", center={"latitude": 120, "longitude": 0}, zoom=1)

    def test_config_immutable(self, map_config):
        """It should not be mutated after construction."""
        with pytest.raises(ValidationError):
            map_config.zoom = 5


class TestMarkerConfigModel:
    """Test suite for MarkerConfig."""

    def test_marker_config_position(self, sample_points):
        """It should hold a single position."""
        config = MarkerConfig(position={"latitude": 14.6091, "longitude": 121.0223})

        assert config.position == sample_points['center']


class TestPolylineConfigModel:
    """Test suite for PolylineConfig."""

    def test_path_order_preserved(self, polyline_config, sample_points):
        """It should keep path points in the given order."""
        assert polyline_config.path == [sample_points['line_start'], sample_points['line_end']]

    def test_path_requires_two_points(self, sample_points):
        """It should reject empty and single-point paths."""
        with pytest.raises(ValidationError):
            PolylineConfig(path=[], stroke_color="#ff0000", stroke_weight=3)

        with pytest.raises(ValidationError):
            PolylineConfig(path=[sample_points['center']], stroke_color="#ff0000", stroke_weight=3)

    def test_stroke_weight_positive(self, sample_points):
        """It should reject non-positive stroke weights."""
        path = [sample_points['line_start'], sample_points['line_end']]

        with pytest.raises(ValidationError):
            PolylineConfig(path=path, stroke_color="#ff0000", stroke_weight=0)

    def test_stroke_color_format(self, sample_points):
        """It should accept #rgb and #rrggbb colors only."""
        path = [sample_points['line_start'], sample_points['line_end']]

        PolylineConfig(path=path, stroke_color="#f00", stroke_weight=1)
        PolylineConfig(path=path, stroke_color="#00FF7f", stroke_weight=1)

        with pytest.raises(ValidationError):
            PolylineConfig(path=path, stroke_color="red", stroke_weight=1)
