#!/usr/bin/env python3

from fastapi import APIRouter, Depends, Query, Path
from typing import Optional
import logging

from airspace_explorer.models.airspace_dataset import AirspaceDataset
from airspace_explorer.models.bounds import MapBounds
from ..config import Settings
from ..dependencies import get_dataset, get_settings, simulate_latency
from .models import (
    AirspaceShapeModel, AirspaceListResponse, AirspaceDetailResponse, BoundsModel, ErrorResponse
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=AirspaceListResponse)
async def get_airspaces(
    north: Optional[str] = Query(None, description="Northern latitude of the viewport"),
    south: Optional[str] = Query(None, description="Southern latitude of the viewport"),
    east: Optional[str] = Query(None, description="Eastern longitude of the viewport"),
    west: Optional[str] = Query(None, description="Western longitude; greater than east when crossing the antimeridian"),
    dataset: AirspaceDataset = Depends(get_dataset),
    settings: Settings = Depends(get_settings),
):
    """
    Get the airspaces whose center lies inside the viewport.

    All four bounds must be present and numeric; otherwise the bounds are
    ignored and every airspace is returned.
    """
    bounds = MapBounds.from_query({"north": north, "south": south, "east": east, "west": west})
    if bounds is None and any(v is not None for v in (north, south, east, west)):
        logger.debug(f"Ignoring incomplete or malformed bounds: N={north} S={south} E={east} W={west}")

    shapes, total = dataset.list_shapes(bounds)

    await simulate_latency(settings, settings.list_latency_range)

    return AirspaceListResponse(
        data=[AirspaceShapeModel.from_shape(s) for s in shapes],
        count=len(shapes),
        totalAvailable=total,
        bounds=BoundsModel.from_bounds(bounds),
    )


@router.get(
    "/{airspace_id}",
    response_model=AirspaceDetailResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_airspace(
    airspace_id: str = Path(..., description="Airspace id, e.g. airspace_42"),
    dataset: AirspaceDataset = Depends(get_dataset),
    settings: Settings = Depends(get_settings),
):
    """Get a single airspace by id."""
    # AirspaceNotFoundError is turned into the 404 envelope by the app
    shape = dataset.get_shape(airspace_id)

    await simulate_latency(settings, settings.detail_latency_range)

    return AirspaceDetailResponse(data=AirspaceShapeModel.from_shape(shape))
