"""
Specialized queryable collection for AirspaceShape objects.

Adds the viewport and classification filters used by the query service on
top of the generic QueryableCollection.
"""

from typing import Union, TYPE_CHECKING
from .queryable_collection import QueryableCollection
from .shape import ShapeKind

if TYPE_CHECKING:
    from .bounds import MapBounds
    from .shape import AirspaceShape


class AirspaceCollection(QueryableCollection['AirspaceShape']):
    """
    Collection of airspace shapes with domain-specific filters.

    Examples:
        # Shapes whose center is in the current viewport
        collection.within_bounds(bounds).all()

        # Chaining
        collection.by_shape_kind('oval').by_category('CTR').count()
    """

    def within_bounds(self, bounds: 'MapBounds') -> 'AirspaceCollection':
        """
        Filter shapes whose center point lies inside the bounds.

        The shape footprint is not considered: a large circle whose center is
        just outside the viewport is excluded even if part of it is visible.

        Args:
            bounds: Viewport, possibly crossing the antimeridian

        Returns:
            New AirspaceCollection with matching shapes
        """
        return AirspaceCollection(
            s for s in self._items
            if bounds.contains(s.center.latitude, s.center.longitude)
        )

    def by_shape_kind(self, kind: Union[str, ShapeKind]) -> 'AirspaceCollection':
        shape_kind = ShapeKind(kind)
        return AirspaceCollection(s for s in self._items if s.shape_kind is shape_kind)

    def by_category(self, category: str) -> 'AirspaceCollection':
        return AirspaceCollection(s for s in self._items if s.category == category)
