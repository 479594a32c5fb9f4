import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class MapBounds:
    """
    A viewport rectangle in decimal degrees.

    When ``west`` is greater than ``east`` the box wraps through the
    +/-180 degree meridian, e.g. west=170, east=-170 covers 20 degrees of
    longitude around the antimeridian.

    Only a point's position is tested by ``contains``; callers filtering
    shapes test the shape center, not its footprint.
    """

    north: float
    south: float
    east: float
    west: float

    FIELDS = ('north', 'south', 'east', 'west')

    @property
    def crosses_antimeridian(self) -> bool:
        return self.west > self.east

    def contains(self, latitude: float, longitude: float) -> bool:
        """
        Check whether a point falls inside the bounds (edges inclusive).

        Args:
            latitude: Decimal degrees
            longitude: Decimal degrees

        Returns:
            True if the point is inside the rectangle
        """
        min_lat = min(self.south, self.north)
        max_lat = max(self.south, self.north)
        if not min_lat <= latitude <= max_lat:
            return False

        if self.west <= self.east:
            return self.west <= longitude <= self.east
        return longitude >= self.west or longitude <= self.east

    def to_dict(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in self.FIELDS}

    @classmethod
    def from_query(cls, params: Mapping[str, Any]) -> Optional['MapBounds']:
        """
        Parse bounds from loosely-typed request parameters.

        Parsing is permissive: if any of the four fields is missing, empty,
        non-numeric or not finite, no bounds are returned and the caller
        serves the full dataset.

        Args:
            params: Mapping holding north/south/east/west values

        Returns:
            MapBounds or None
        """
        values = {}
        for name in cls.FIELDS:
            raw = params.get(name)
            if raw is None or (isinstance(raw, str) and not raw.strip()):
                return None
            try:
                value = float(raw)
            except (TypeError, ValueError):
                return None
            if not math.isfinite(value):
                return None
            values[name] = value
        return cls(**values)

    def __str__(self) -> str:
        return f"N{self.north} S{self.south} E{self.east} W{self.west}"
