"""
Tests for the AirspaceShape model and its dimension variants.
"""

import pytest
from airspace_explorer.models.shape import (
    AirspaceShape, ShapeKind, ShapeStyle, GeoCenter,
    CircleDimensions, OvalDimensions, RectangleDimensions, TrackDimensions,
    dimensions_from_dict, dimensions_to_dict,
)


class TestDimensions:
    """Tagged dimension variants."""

    def test_each_variant_carries_its_kind(self):
        assert CircleDimensions(radius=1.0).kind is ShapeKind.CIRCLE
        assert OvalDimensions(semiMajorAxis=2.0, semiMinorAxis=1.0).kind is ShapeKind.OVAL
        assert RectangleDimensions(width=1.0, height=1.0).kind is ShapeKind.RECTANGLE
        assert TrackDimensions(length=1.0, width=1.0).kind is ShapeKind.TRACK

    def test_to_dict_only_has_variant_fields(self):
        assert dimensions_to_dict(CircleDimensions(radius=5000.0)) == {'radius': 5000.0}
        assert dimensions_to_dict(TrackDimensions(length=3.0, width=2.0, rotation=1.0)) == {
            'length': 3.0, 'width': 2.0, 'rotation': 1.0
        }

    def test_from_dict(self):
        dims = dimensions_from_dict('oval', {'semiMajorAxis': 10, 'semiMinorAxis': 5, 'rotation': 30})
        assert dims == OvalDimensions(semiMajorAxis=10.0, semiMinorAxis=5.0, rotation=30.0)

    def test_from_dict_rejects_foreign_fields(self):
        with pytest.raises(ValueError, match='cannot carry'):
            dimensions_from_dict('circle', {'radius': 10, 'width': 5})

    def test_from_dict_rejects_missing_fields(self):
        with pytest.raises(ValueError):
            dimensions_from_dict('rectangle', {'width': 10})

    def test_from_dict_rejects_unknown_kind(self):
        with pytest.raises(ValueError):
            dimensions_from_dict('hexagon', {'radius': 10})

    @pytest.mark.parametrize('dims, expected', [
        (CircleDimensions(radius=12499.0), 'Circular airspace with 12km radius'),
        (CircleDimensions(radius=12500.0), 'Circular airspace with 13km radius'),
        (OvalDimensions(semiMajorAxis=40000.0, semiMinorAxis=20400.0), 'Oval airspace 40x20km'),
        (RectangleDimensions(width=50000.0, height=30000.0), 'Rectangular airspace 50x30km'),
        (TrackDimensions(length=80000.0, width=9600.0), 'Track airspace 80x10km'),
    ])
    def test_summary(self, dims, expected):
        assert dims.summary() == expected


class TestAirspaceShape:
    """Record construction and serialization."""

    def test_mismatched_dimensions_rejected(self):
        with pytest.raises(ValueError, match='does not match'):
            AirspaceShape(
                id='airspace_1',
                category='CTR',
                shape_kind=ShapeKind.CIRCLE,
                center=GeoCenter(0.0, 0.0, 1000.0),
                dimensions=TrackDimensions(length=1.0, width=1.0),
            )

    def test_string_kind_is_normalized(self):
        shape = AirspaceShape(
            id='airspace_1',
            category='CTR',
            shape_kind='circle',
            center=GeoCenter(0.0, 0.0, 1000.0),
            dimensions=CircleDimensions(radius=1.0),
        )
        assert shape.shape_kind is ShapeKind.CIRCLE

    def test_empty_id_rejected(self):
        with pytest.raises(ValueError):
            AirspaceShape(
                id='',
                category='CTR',
                shape_kind=ShapeKind.CIRCLE,
                center=GeoCenter(0.0, 0.0, 1000.0),
                dimensions=CircleDimensions(radius=1.0),
            )

    def test_center_validation(self):
        with pytest.raises(ValueError):
            GeoCenter(latitude=91.0, longitude=0.0)
        with pytest.raises(ValueError):
            GeoCenter(latitude=0.0, longitude=-181.0)
        with pytest.raises(ValueError):
            GeoCenter(latitude=0.0, longitude=0.0, altitude=-1.0)

    def test_style_validation(self):
        with pytest.raises(ValueError):
            ShapeStyle(opacity=1.5)
        with pytest.raises(ValueError):
            ShapeStyle(color='red')
        with pytest.raises(ValueError):
            ShapeStyle(outline_color='#FFF')

    def test_to_dict_wire_format(self, shape_factory):
        shape = shape_factory('airspace_7', 40.0, -75.0, ShapeKind.RECTANGLE, 'TMA', altitude=2500.0)
        data = shape.to_dict()

        assert data['id'] == 'airspace_7'
        assert data['type'] == 'rectangle'
        assert data['category'] == 'TMA'
        assert data['name'] == 'TMA_airspace_7'
        assert data['center'] == {'latitude': 40.0, 'longitude': -75.0, 'altitude': 2500.0}
        assert data['dimensions'] == {'width': 30000.0, 'height': 60000.0, 'rotation': 45.0}
        assert data['color'] == '#44FF44'
        assert data['opacity'] == 0.5
        assert data['outline'] is True
        assert data['outlineColor'] == '#FFFFFF'
        assert data['description'].startswith('TMA airspace_7 - Rectangular airspace')

    def test_from_dict_restores_record(self, shape_factory):
        shape = shape_factory('airspace_8', -12.25, 130.5, ShapeKind.TRACK, 'FIR')
        assert AirspaceShape.from_dict(shape.to_dict()) == shape

    def test_from_dict_derives_category_from_name(self):
        data = {
            'id': 'airspace_3',
            'name': 'UIR_3',
            'type': 'circle',
            'center': {'latitude': 1.0, 'longitude': 2.0, 'altitude': 600.0},
            'dimensions': {'radius': 7000.0},
            'color': '#FF4444',
            'opacity': 0.3,
            'outline': True,
            'outlineColor': '#FFFFFF',
            'description': 'UIR 3 - Circular airspace with 7km radius',
        }
        shape = AirspaceShape.from_dict(data)
        assert shape.category == 'UIR'
        assert shape.dimensions == CircleDimensions(radius=7000.0)

    def test_from_dict_rejects_mixed_dimensions(self, shape_factory):
        data = shape_factory('airspace_9', 0.0, 0.0, ShapeKind.CIRCLE).to_dict()
        data['dimensions']['semiMajorAxis'] = 1000.0
        with pytest.raises(ValueError):
            AirspaceShape.from_dict(data)

    def test_from_dict_rejects_non_boolean_outline(self, shape_factory):
        data = shape_factory('airspace_11', 0.0, 0.0).to_dict()
        data['outline'] = 'false'
        with pytest.raises(ValueError, match='outline'):
            AirspaceShape.from_dict(data)

    def test_from_dict_rejects_non_string_name(self, shape_factory):
        data = shape_factory('airspace_12', 0.0, 0.0).to_dict()
        del data['category']
        data['name'] = 7
        with pytest.raises(ValueError, match='name'):
            AirspaceShape.from_dict(data)

    def test_is_immutable(self, shape_factory):
        shape = shape_factory('airspace_10', 0.0, 0.0)
        with pytest.raises(AttributeError):
            shape.id = 'other'
