"""
Mapping of airspace records onto globe primitives.

The output is a plain entity description in the shape a 3D globe library
expects (a cylinder for circles, an extruded ellipse for everything else);
drawing it is left to the renderer.
"""

import math
from typing import Any, Dict, Tuple

from ..models.shape import (
    AirspaceShape, CircleDimensions, OvalDimensions, RectangleDimensions, TrackDimensions
)

# Vertical extent in meters given to every extruded primitive
DEFAULT_EXTRUSION_M = 1000.0


def hex_to_rgba(color: str, alpha: float = 1.0) -> Tuple[float, float, float, float]:
    """Convert ``#RRGGBB`` to normalized (r, g, b, a)."""
    value = color.lstrip('#')
    r, g, b = (int(value[i:i + 2], 16) / 255.0 for i in (0, 2, 4))
    return (r, g, b, alpha)


def _ellipse_axes(a: float, b: float) -> Tuple[float, float]:
    # Renderers reject a semi-minor axis longer than the semi-major one
    return max(a, b), min(a, b)


def to_render_primitive(shape: AirspaceShape) -> Dict[str, Any]:
    """
    Build the entity description for one airspace.

    Args:
        shape: Airspace record

    Returns:
        Dictionary with ``name``, ``position``, ``description`` and either a
        ``cylinder`` or an ``ellipse`` primitive
    """
    material = hex_to_rgba(shape.style.color, shape.style.opacity)
    outline_color = hex_to_rgba(shape.style.outline_color)

    entity: Dict[str, Any] = {
        'name': shape.id,
        'position': (shape.center.longitude, shape.center.latitude, shape.center.altitude),
        'description': shape.description,
    }

    dims = shape.dimensions
    if isinstance(dims, CircleDimensions):
        entity['cylinder'] = {
            'length': DEFAULT_EXTRUSION_M,
            'topRadius': dims.radius,
            'bottomRadius': dims.radius,
            'material': material,
            'outline': shape.style.outline,
            'outlineColor': outline_color,
        }
        return entity

    if isinstance(dims, OvalDimensions):
        major, minor = _ellipse_axes(dims.semiMajorAxis, dims.semiMinorAxis)
    elif isinstance(dims, RectangleDimensions):
        major, minor = _ellipse_axes(dims.width / 2, dims.height / 2)
    elif isinstance(dims, TrackDimensions):
        major, minor = _ellipse_axes(dims.length / 2, dims.width / 2)
    else:
        raise TypeError(f"Unsupported dimensions type: {type(dims).__name__}")

    entity['ellipse'] = {
        'semiMajorAxis': major,
        'semiMinorAxis': minor,
        'rotation': math.radians(dims.rotation),
        'extrudedHeight': DEFAULT_EXTRUSION_M,
        'material': material,
        'outline': shape.style.outline,
        'outlineColor': outline_color,
    }
    return entity
