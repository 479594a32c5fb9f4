import logging
from typing import Any, Callable, Dict, List, Optional

from ..models.bounds import MapBounds
from ..models.shape import AirspaceShape
from .primitives import to_render_primitive
from .service import AirspaceService

logger = logging.getLogger(__name__)

# Viewports closer than this (degrees, per edge) count as unchanged
DEFAULT_TOLERANCE_DEG = 1e-6


class ViewportPoller:
    """
    Refreshes the rendered airspaces when the viewport changes.

    The UI layer calls ``on_viewport_changed`` after its own debounce; the
    poller skips the request when the bounds did not move and hands the
    fresh primitives to ``render`` otherwise, replacing the previous set.
    """

    def __init__(self, service: AirspaceService,
                 render: Callable[[List[Dict[str, Any]]], None],
                 tolerance: float = DEFAULT_TOLERANCE_DEG):
        self.service = service
        self.render = render
        self.tolerance = tolerance
        self.last_bounds: Optional[MapBounds] = None
        self.total_available: int = 0

    def _unchanged(self, bounds: MapBounds) -> bool:
        if self.last_bounds is None:
            return False
        return all(
            abs(getattr(bounds, name) - getattr(self.last_bounds, name)) <= self.tolerance
            for name in MapBounds.FIELDS
        )

    def on_viewport_changed(self, bounds: MapBounds) -> bool:
        """
        Query and render the airspaces for a new viewport.

        Returns:
            True if the renderer was refreshed, False if the viewport was unchanged
        """
        if self._unchanged(bounds):
            logger.debug(f"Viewport unchanged ({bounds}), skipping refresh")
            return False

        result = self.service.get_airspace_response(bounds)
        self.total_available = result.get('totalAvailable', 0)

        primitives = [to_render_primitive(AirspaceShape.from_dict(item)) for item in result.get('data', [])]
        self.render(primitives)
        self.last_bounds = bounds

        logger.info(f"Rendered {len(primitives)} of {self.total_available} airspaces for {bounds}")
        return True
