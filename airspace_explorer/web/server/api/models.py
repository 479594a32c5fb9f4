#!/usr/bin/env python3

"""
Pydantic models for API responses built from the airspace domain models.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict
from datetime import datetime, timezone

from airspace_explorer.models.shape import AirspaceShape
from airspace_explorer.models.bounds import MapBounds


def utc_timestamp() -> str:
    """Current time as an ISO 8601 UTC string, e.g. 2024-05-01T12:00:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class CenterModel(BaseModel):
    latitude: float
    longitude: float
    altitude: float


class AirspaceShapeModel(BaseModel):
    """Pydantic model for a single airspace record."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: Optional[str]
    category: str
    type: str
    center: CenterModel
    dimensions: Dict[str, float]
    color: str
    opacity: float
    outline: bool
    outline_color: str = Field(alias="outlineColor")
    description: str

    @classmethod
    def from_shape(cls, shape: AirspaceShape):
        """Create AirspaceShapeModel from the AirspaceShape domain model."""
        return cls.model_validate(shape.to_dict())


class BoundsModel(BaseModel):
    north: float
    south: float
    east: float
    west: float

    @classmethod
    def from_bounds(cls, bounds: Optional[MapBounds]):
        if bounds is None:
            return None
        return cls(**bounds.to_dict())


class AirspaceListResponse(BaseModel):
    """Envelope for the bounds-filtered listing."""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    data: List[AirspaceShapeModel]
    count: int
    total_available: int = Field(alias="totalAvailable")
    bounds: Optional[BoundsModel] = None
    timestamp: str = Field(default_factory=utc_timestamp)


class AirspaceDetailResponse(BaseModel):
    success: bool = True
    data: AirspaceShapeModel
    timestamp: str = Field(default_factory=utc_timestamp)


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    timestamp: str = Field(default_factory=utc_timestamp)


class HealthResponse(BaseModel):
    status: str = "healthy"
    timestamp: str = Field(default_factory=utc_timestamp)
    uptime: float
