from typing import Dict, List, Optional, Any, Iterable, Iterator, Tuple, Mapping
from datetime import datetime, timezone
import logging

from .shape import AirspaceShape, ShapeKind
from .bounds import MapBounds
from .airspace_collection import AirspaceCollection
from .validation import (
    AirspaceNotFoundError, DatasetLoadError, DatasetValidationError, validate_shapes
)

logger = logging.getLogger(__name__)


class AirspaceDataset:
    """
    Immutable snapshot of all airspace shapes served by the query API.

    The dataset is built once (from the generator or from a file) and never
    modified afterwards. It is shared by reference between request handlers;
    since there is no write path, concurrent reads need no locking. A new
    snapshot is only obtained by building a new dataset, e.g. on restart.
    """

    def __init__(self, shapes: Iterable[AirspaceShape], created_at: Optional[datetime] = None):
        """
        Build and validate a dataset snapshot.

        Args:
            shapes: Airspace records, in serving order
            created_at: When the snapshot was produced (defaults to now, UTC)

        Raises:
            DatasetValidationError: If ids are duplicated or centers out of range
        """
        self._shapes: Tuple[AirspaceShape, ...] = tuple(shapes)

        result = validate_shapes(self._shapes)
        if not result.is_valid:
            raise DatasetValidationError("Invalid airspace dataset", result)

        self._by_id: Dict[str, AirspaceShape] = {s.id: s for s in self._shapes}
        self.created_at = created_at or datetime.now(timezone.utc)

    @property
    def shapes(self) -> AirspaceCollection:
        """
        Queryable collection of every shape in the dataset.

        Examples:
            dataset.shapes.within_bounds(bounds).by_shape_kind('circle').count()
        """
        return AirspaceCollection(self._shapes)

    @property
    def total(self) -> int:
        return len(self._shapes)

    def list_shapes(self, bounds: Optional[MapBounds] = None) -> Tuple[List[AirspaceShape], int]:
        """
        List shapes, optionally restricted to a viewport.

        Args:
            bounds: Viewport to filter on; None returns the full dataset

        Returns:
            Tuple of (matching shapes, total number of shapes in the dataset)
        """
        if bounds is None:
            return list(self._shapes), self.total
        return self.shapes.within_bounds(bounds).all(), self.total

    def get_shape(self, airspace_id: str) -> AirspaceShape:
        """
        Look up a shape by id.

        Raises:
            AirspaceNotFoundError: If no shape has this id
        """
        try:
            return self._by_id[airspace_id]
        except KeyError:
            raise AirspaceNotFoundError(airspace_id) from None

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get statistics about the dataset.

        Returns:
            Dictionary with totals by shape kind and by category
        """
        shapes_by_kind = {kind.value: 0 for kind in ShapeKind}
        for kind, items in self.shapes.group_by(lambda s: s.shape_kind.value).items():
            shapes_by_kind[kind] = len(items)

        shapes_by_category = {
            category: len(items)
            for category, items in sorted(self.shapes.group_by(lambda s: s.category).items())
        }

        return {
            'total_airspaces': self.total,
            'shapes_by_kind': shapes_by_kind,
            'shapes_by_category': shapes_by_category,
            'created_at': self.created_at.isoformat(),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert the dataset to the serialized collection layout."""
        return {'airspaces': [s.to_dict() for s in self._shapes]}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'AirspaceDataset':
        """
        Rebuild a dataset from its serialized collection.

        Raises:
            DatasetLoadError: If the layout or any record is malformed
        """
        if not isinstance(data, Mapping) or not isinstance(data.get('airspaces'), list):
            raise DatasetLoadError("Dataset must be an object with an 'airspaces' list")

        shapes = []
        for index, item in enumerate(data['airspaces']):
            try:
                shapes.append(AirspaceShape.from_dict(item))
            except (KeyError, TypeError, ValueError) as e:
                raise DatasetLoadError(f"Invalid airspace record at index {index}: {e}") from e
        return cls(shapes)

    def __len__(self):
        return len(self._shapes)

    def __iter__(self) -> Iterator[AirspaceShape]:
        return iter(self._shapes)

    def __contains__(self, airspace_id: object) -> bool:
        return airspace_id in self._by_id

    def __repr__(self):
        return f"AirspaceDataset(airspaces={len(self._shapes)})"
