import pytest
from pathlib import Path

from airspace_explorer.models.shape import (
    AirspaceShape, ShapeKind, ShapeStyle, GeoCenter,
    CircleDimensions, OvalDimensions, RectangleDimensions, TrackDimensions,
)
from airspace_explorer.models.airspace_dataset import AirspaceDataset
from airspace_explorer.sources.synthetic import SyntheticAirspaceSource


def make_shape(ident, lat, lon, kind=ShapeKind.CIRCLE, category='CTR', altitude=1000.0):
    """Build a shape with plausible dimensions for the requested kind."""
    dimensions = {
        ShapeKind.CIRCLE: CircleDimensions(radius=12000.0),
        ShapeKind.OVAL: OvalDimensions(semiMajorAxis=20000.0, semiMinorAxis=40000.0, rotation=90.0),
        ShapeKind.RECTANGLE: RectangleDimensions(width=30000.0, height=60000.0, rotation=45.0),
        ShapeKind.TRACK: TrackDimensions(length=80000.0, width=10000.0, rotation=180.0),
    }[kind]
    return AirspaceShape(
        id=ident,
        category=category,
        shape_kind=kind,
        center=GeoCenter(latitude=lat, longitude=lon, altitude=altitude),
        dimensions=dimensions,
        style=ShapeStyle(color='#44FF44', opacity=0.5),
        name=f"{category}_{ident}",
        description=f"{category} {ident} - {dimensions.summary()}",
    )


@pytest.fixture
def shape_factory():
    """Return the make_shape helper to tests."""
    return make_shape


@pytest.fixture
def sample_shapes() -> list:
    """A handful of shapes spread over the globe, including near the antimeridian."""
    return [
        make_shape('airspace_1', 40.0, -75.0, ShapeKind.CIRCLE, 'CTR'),
        make_shape('airspace_2', 51.5, -0.1, ShapeKind.OVAL, 'TMA'),
        make_shape('airspace_3', 0.0, 179.0, ShapeKind.RECTANGLE, 'FIR'),
        make_shape('airspace_4', 0.0, -179.0, ShapeKind.TRACK, 'UIR'),
        make_shape('airspace_5', 0.0, 0.0, ShapeKind.CIRCLE, 'CTA'),
        make_shape('airspace_6', -33.9, 151.2, ShapeKind.OVAL, 'CTR'),
    ]


@pytest.fixture
def sample_dataset(sample_shapes) -> AirspaceDataset:
    return AirspaceDataset(sample_shapes)


@pytest.fixture
def generated_dataset() -> AirspaceDataset:
    """A reproducible generated dataset, large enough to cover every kind."""
    return SyntheticAirspaceSource(count=500, seed=42).generate()


@pytest.fixture
def dataset_file(tmp_path, sample_dataset) -> Path:
    from airspace_explorer.storage.json_storage import JsonDatasetStorage

    path = tmp_path / 'airspaceData.json'
    JsonDatasetStorage(path).save(sample_dataset)
    return path
