import re
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, Optional, Union


class ShapeKind(str, Enum):
    """Geometric kind of an airspace; selects the dimensions variant."""

    CIRCLE = 'circle'
    OVAL = 'oval'
    RECTANGLE = 'rectangle'
    TRACK = 'track'


AIRSPACE_CATEGORIES = ['CTR', 'TMA', 'CTA', 'FIR', 'UIR']

_HEX_COLOR = re.compile(r'^#[0-9A-Fa-f]{6}$')


@dataclass(frozen=True)
class CircleDimensions:
    radius: float

    kind = ShapeKind.CIRCLE

    def summary(self) -> str:
        return f"Circular airspace with {_km(self.radius)}km radius"


@dataclass(frozen=True)
class OvalDimensions:
    semiMajorAxis: float
    semiMinorAxis: float
    rotation: float = 0.0

    kind = ShapeKind.OVAL

    def summary(self) -> str:
        return f"Oval airspace {_km(self.semiMajorAxis)}x{_km(self.semiMinorAxis)}km"


@dataclass(frozen=True)
class RectangleDimensions:
    width: float
    height: float
    rotation: float = 0.0

    kind = ShapeKind.RECTANGLE

    def summary(self) -> str:
        return f"Rectangular airspace {_km(self.width)}x{_km(self.height)}km"


@dataclass(frozen=True)
class TrackDimensions:
    length: float
    width: float
    rotation: float = 0.0

    kind = ShapeKind.TRACK

    def summary(self) -> str:
        return f"Track airspace {_km(self.length)}x{_km(self.width)}km"


Dimensions = Union[CircleDimensions, OvalDimensions, RectangleDimensions, TrackDimensions]

DIMENSIONS_BY_KIND = {
    ShapeKind.CIRCLE: CircleDimensions,
    ShapeKind.OVAL: OvalDimensions,
    ShapeKind.RECTANGLE: RectangleDimensions,
    ShapeKind.TRACK: TrackDimensions,
}


def _km(meters: float) -> int:
    # Half-up like the front-end's Math.round, not banker's rounding
    return int(meters / 1000 + 0.5)


def dimensions_to_dict(dimensions: Dimensions) -> Dict[str, float]:
    """Flatten a dimensions variant into its wire representation."""
    return {f.name: getattr(dimensions, f.name) for f in fields(dimensions)}


def dimensions_from_dict(kind: Union[str, ShapeKind], data: Dict[str, Any]) -> Dimensions:
    """
    Build the dimensions variant for ``kind`` from a wire dictionary.

    Args:
        kind: Shape kind the dimensions belong to
        data: Mapping of dimension field names to numbers

    Returns:
        The matching dimensions dataclass

    Raises:
        ValueError: If the kind is unknown, a required field is missing, or the
            mapping carries fields belonging to another shape kind
    """
    shape_kind = ShapeKind(kind)
    cls = DIMENSIONS_BY_KIND[shape_kind]
    allowed = {f.name for f in fields(cls)}

    foreign = set(data) - allowed
    if foreign:
        raise ValueError(f"Dimensions for {shape_kind.value} cannot carry {sorted(foreign)}")

    try:
        values = {name: float(value) for name, value in data.items()}
        return cls(**values)
    except TypeError as e:
        raise ValueError(f"Invalid dimensions for {shape_kind.value}: {e}") from e


@dataclass(frozen=True)
class GeoCenter:
    """Reference point of a shape: decimal degrees plus altitude in meters."""

    latitude: float
    longitude: float
    altitude: float = 0.0

    def __post_init__(self):
        if not -90 <= self.latitude <= 90:
            raise ValueError(f"Latitude must be between -90 and 90 degrees, got {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise ValueError(f"Longitude must be between -180 and 180 degrees, got {self.longitude}")
        if self.altitude < 0:
            raise ValueError(f"Altitude must be non-negative, got {self.altitude}")

    def to_dict(self) -> Dict[str, float]:
        return {
            'latitude': self.latitude,
            'longitude': self.longitude,
            'altitude': self.altitude,
        }


@dataclass(frozen=True)
class ShapeStyle:
    """Presentation attributes; no meaning for querying."""

    color: str = '#FF4444'
    opacity: float = 0.5
    outline: bool = True
    outline_color: str = '#FFFFFF'

    def __post_init__(self):
        if not 0 <= self.opacity <= 1:
            raise ValueError(f"Opacity must be between 0 and 1, got {self.opacity}")
        for name in ('color', 'outline_color'):
            value = getattr(self, name)
            if not isinstance(value, str) or not _HEX_COLOR.match(value):
                raise ValueError(f"{name} must be a #RRGGBB colour, got {value!r}")


@dataclass(frozen=True)
class AirspaceShape:
    """
    A single airspace region as served by the query API.

    The ``dimensions`` variant always matches ``shape_kind``; construction
    fails otherwise, so a record can never mix fields from two shapes.
    """

    id: str
    category: str
    shape_kind: ShapeKind
    center: GeoCenter
    dimensions: Dimensions
    style: ShapeStyle = field(default_factory=ShapeStyle)
    name: Optional[str] = None
    description: str = ''

    def __post_init__(self):
        if not self.id:
            raise ValueError("Airspace id must not be empty")
        kind = ShapeKind(self.shape_kind)
        if kind is not self.shape_kind:
            object.__setattr__(self, 'shape_kind', kind)
        if not isinstance(self.dimensions, DIMENSIONS_BY_KIND[kind]):
            raise ValueError(
                f"Airspace {self.id}: {type(self.dimensions).__name__} does not match shape kind {kind.value}"
            )

    @property
    def latitude(self) -> float:
        return self.center.latitude

    @property
    def longitude(self) -> float:
        return self.center.longitude

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase dictionary served to the front-end."""
        return {
            'id': self.id,
            'name': self.name,
            'category': self.category,
            'type': self.shape_kind.value,
            'center': self.center.to_dict(),
            'dimensions': dimensions_to_dict(self.dimensions),
            'color': self.style.color,
            'opacity': self.style.opacity,
            'outline': self.style.outline,
            'outlineColor': self.style.outline_color,
            'description': self.description,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AirspaceShape':
        """Create instance from the wire dictionary."""
        kind = ShapeKind(data['type'])
        center = data['center']
        name = data.get('name')
        category = data.get('category')
        if name is not None and not isinstance(name, str):
            raise ValueError(f"Airspace name must be a string, got {name!r}")
        if category is not None and not isinstance(category, str):
            raise ValueError(f"Airspace category must be a string, got {category!r}")
        outline = data.get('outline', True)
        if not isinstance(outline, bool):
            raise ValueError(f"Airspace outline must be a boolean, got {outline!r}")
        if category is None and name:
            category = name.split('_', 1)[0]

        return cls(
            id=str(data['id']),
            category=category or '',
            shape_kind=kind,
            center=GeoCenter(
                latitude=float(center['latitude']),
                longitude=float(center['longitude']),
                altitude=float(center.get('altitude', 0.0)),
            ),
            dimensions=dimensions_from_dict(kind, data.get('dimensions') or {}),
            style=ShapeStyle(
                color=data.get('color', '#FF4444'),
                opacity=float(data.get('opacity', 0.5)),
                outline=outline,
                outline_color=data.get('outlineColor', '#FFFFFF'),
            ),
            name=name,
            description=data.get('description', ''),
        )

    def __repr__(self):
        return f"AirspaceShape(id='{self.id}', type='{self.shape_kind.value}', category='{self.category}')"
