import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from .base import SourceInterface
from ..models.airspace_dataset import AirspaceDataset
from ..models.shape import (
    AirspaceShape, ShapeKind, ShapeStyle, GeoCenter, Dimensions,
    CircleDimensions, OvalDimensions, RectangleDimensions, TrackDimensions,
    AIRSPACE_CATEGORIES,
)

logger = logging.getLogger(__name__)

DEFAULT_COUNT = 10000

SHAPE_COLORS = ['#FF4444', '#44FF44', '#4444FF', '#FFFF44', '#FF44FF', '#44FFFF', '#FF8844', '#8844FF']
OUTLINE_COLOR = '#FFFFFF'

# Fraction of shapes placed near a reference location
CLUSTER_PROBABILITY = 0.3
# Half-width in degrees of the box around a reference location
CLUSTER_SPREAD_DEG = 5.0

MAX_LATITUDE = 85.0
MAX_LONGITUDE = 180.0

ALTITUDE_RANGE_M = (500.0, 8500.0)
OPACITY_RANGE = (0.2, 0.8)
ROTATION_RANGE_DEG = (0.0, 360.0)

CIRCLE_RADIUS_RANGE = (5000.0, 55000.0)
OVAL_SEMI_MAJOR_RANGE = (10000.0, 70000.0)
OVAL_SEMI_MINOR_RANGE = (5000.0, 45000.0)
RECTANGLE_WIDTH_RANGE = (10000.0, 90000.0)
RECTANGLE_HEIGHT_RANGE = (10000.0, 70000.0)
TRACK_LENGTH_RANGE = (20000.0, 120000.0)
TRACK_WIDTH_RANGE = (5000.0, 25000.0)


@dataclass(frozen=True)
class ReferenceLocation:
    name: str
    latitude: float
    longitude: float


REFERENCE_LOCATIONS = [
    ReferenceLocation('London', 51.5074, -0.1278),
    ReferenceLocation('NewYork', 40.7128, -74.0060),
    ReferenceLocation('Tokyo', 35.6762, 139.6503),
    ReferenceLocation('Paris', 48.8566, 2.3522),
    ReferenceLocation('Sydney', -33.8688, 151.2093),
    ReferenceLocation('Moscow', 55.7558, 37.6176),
    ReferenceLocation('Beijing', 39.9042, 116.4074),
    ReferenceLocation('Dubai', 25.2048, 55.2708),
    ReferenceLocation('Singapore', 1.3521, 103.8198),
    ReferenceLocation('LosAngeles', 34.0522, -118.2437),
    ReferenceLocation('Chicago', 41.8781, -87.6298),
    ReferenceLocation('Toronto', 43.6532, -79.3832),
    ReferenceLocation('MexicoCity', 19.4326, -99.1332),
    ReferenceLocation('SaoPaulo', -23.5505, -46.6333),
    ReferenceLocation('BuenosAires', -34.6118, -58.3960),
    ReferenceLocation('CapeTown', -33.9249, 18.4241),
    ReferenceLocation('Cairo', 30.0444, 31.2357),
    ReferenceLocation('Mumbai', 19.0760, 72.8777),
    ReferenceLocation('Delhi', 28.7041, 77.1025),
    ReferenceLocation('Bangkok', 13.7563, 100.5018),
]


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class SyntheticAirspaceSource(SourceInterface):
    """
    Source generating a random airspace dataset.

    Every record is parameterized independently: placement is either
    clustered around one of the reference locations or uniform over the
    globe, the shape kind is uniform over the four kinds, and dimensions
    are drawn uniformly from per-kind ranges.

    Passing a seed makes the output reproducible.
    """

    def __init__(self, count: int = DEFAULT_COUNT, seed: Optional[int] = None,
                 locations: Optional[List[ReferenceLocation]] = None):
        """
        Initialize the source.

        Args:
            count: Number of records to generate
            seed: Optional random seed
            locations: Reference locations used for clustered placement

        Raises:
            ValueError: If count is not a positive integer
        """
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise ValueError(f"Count must be a positive integer, got {count!r}")
        self.count = count
        self.seed = seed
        self.locations = locations or REFERENCE_LOCATIONS
        self._rng = random.Random(seed)

    def build_dataset(self) -> AirspaceDataset:
        return self.generate()

    def generate(self) -> AirspaceDataset:
        """
        Generate ``count`` airspace records.

        Returns:
            AirspaceDataset with ids ``airspace_1`` .. ``airspace_<count>``
        """
        shapes = [self.generate_shape(i) for i in range(1, self.count + 1)]
        logger.info(f"Generated {len(shapes)} airspaces (seed={self.seed})")
        return AirspaceDataset(shapes)

    def generate_shape(self, index: int) -> AirspaceShape:
        rng = self._rng
        category = rng.choice(AIRSPACE_CATEGORIES)
        kind = rng.choice(list(ShapeKind))
        color = rng.choice(SHAPE_COLORS)

        center = self.generate_center()
        dimensions = self.generate_dimensions(kind)
        opacity = rng.uniform(*OPACITY_RANGE)

        return AirspaceShape(
            id=f"airspace_{index}",
            category=category,
            shape_kind=kind,
            center=center,
            dimensions=dimensions,
            style=ShapeStyle(color=color, opacity=opacity, outline=True, outline_color=OUTLINE_COLOR),
            name=f"{category}_{index}",
            description=f"{category} {index} - {dimensions.summary()}",
        )

    def generate_center(self) -> GeoCenter:
        rng = self._rng
        if rng.random() < CLUSTER_PROBABILITY:
            location = rng.choice(self.locations)
            lat = location.latitude + rng.uniform(-CLUSTER_SPREAD_DEG, CLUSTER_SPREAD_DEG)
            lon = location.longitude + rng.uniform(-CLUSTER_SPREAD_DEG, CLUSTER_SPREAD_DEG)
        else:
            lat = rng.uniform(-90.0, 90.0)
            lon = rng.uniform(-180.0, 180.0)

        return GeoCenter(
            latitude=clamp(lat, -MAX_LATITUDE, MAX_LATITUDE),
            longitude=clamp(lon, -MAX_LONGITUDE, MAX_LONGITUDE),
            altitude=rng.uniform(*ALTITUDE_RANGE_M),
        )

    def generate_dimensions(self, kind: ShapeKind) -> Dimensions:
        uniform = self._rng.uniform
        if kind is ShapeKind.CIRCLE:
            return CircleDimensions(radius=uniform(*CIRCLE_RADIUS_RANGE))
        if kind is ShapeKind.OVAL:
            return OvalDimensions(
                semiMajorAxis=uniform(*OVAL_SEMI_MAJOR_RANGE),
                semiMinorAxis=uniform(*OVAL_SEMI_MINOR_RANGE),
                rotation=uniform(*ROTATION_RANGE_DEG),
            )
        if kind is ShapeKind.RECTANGLE:
            return RectangleDimensions(
                width=uniform(*RECTANGLE_WIDTH_RANGE),
                height=uniform(*RECTANGLE_HEIGHT_RANGE),
                rotation=uniform(*ROTATION_RANGE_DEG),
            )
        return TrackDimensions(
            length=uniform(*TRACK_LENGTH_RANGE),
            width=uniform(*TRACK_WIDTH_RANGE),
            rotation=uniform(*ROTATION_RANGE_DEG),
        )
