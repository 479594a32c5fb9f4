"""
Synthetic airspace data generator and mock query API.

This package generates a static dataset of airspace shapes, serves it over
HTTP with viewport filtering, and provides the client-side helpers that turn
query results into globe primitives.

The main public API includes:
- AirspaceShape: Airspace record with kind-specific dimensions
- MapBounds: Viewport rectangle, antimeridian aware
- AirspaceDataset: Immutable snapshot answering bounds and id queries
- SyntheticAirspaceSource: Random dataset generator
- JsonDatasetStorage: Atomic JSON persistence of a dataset
"""

from .models import AirspaceShape, MapBounds, AirspaceDataset, ShapeKind
from .sources import SyntheticAirspaceSource
from .storage import JsonDatasetStorage

__version__ = '0.1.0'
__all__ = [
    'AirspaceShape',
    'MapBounds',
    'AirspaceDataset',
    'ShapeKind',
    'SyntheticAirspaceSource',
    'JsonDatasetStorage',
]
