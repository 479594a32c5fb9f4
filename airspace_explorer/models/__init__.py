"""
Data models for the airspace_explorer library.

This package contains the airspace shape record and its dimension variants,
viewport bounds, the immutable dataset snapshot served by the query API,
and the queryable collections used to filter it.
"""

from .shape import (
    AirspaceShape,
    ShapeKind,
    ShapeStyle,
    GeoCenter,
    CircleDimensions,
    OvalDimensions,
    RectangleDimensions,
    TrackDimensions,
    AIRSPACE_CATEGORIES,
)
from .bounds import MapBounds
from .queryable_collection import QueryableCollection
from .airspace_collection import AirspaceCollection
from .airspace_dataset import AirspaceDataset
from .validation import (
    AirspaceError,
    AirspaceNotFoundError,
    DatasetLoadError,
    DatasetValidationError,
    ValidationResult,
    ValidationError,
)

__all__ = [
    # Core models
    'AirspaceShape',
    'ShapeKind',
    'ShapeStyle',
    'GeoCenter',
    'CircleDimensions',
    'OvalDimensions',
    'RectangleDimensions',
    'TrackDimensions',
    'AIRSPACE_CATEGORIES',
    'MapBounds',
    'AirspaceDataset',
    # Queryable collections
    'QueryableCollection',
    'AirspaceCollection',
    # Errors
    'AirspaceError',
    'AirspaceNotFoundError',
    'DatasetLoadError',
    'DatasetValidationError',
    'ValidationResult',
    'ValidationError',
]
