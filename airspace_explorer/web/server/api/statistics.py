#!/usr/bin/env python3

from fastapi import APIRouter, Depends, HTTPException
from typing import Dict, Any
import logging

from airspace_explorer.models.airspace_dataset import AirspaceDataset
from airspace_explorer.models.shape import ShapeKind
from ..dependencies import get_dataset

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/overview")
async def get_overview_statistics(dataset: AirspaceDataset = Depends(get_dataset)) -> Dict[str, Any]:
    """Get overview statistics for the entire dataset."""
    return dataset.get_statistics()


@router.get("/by-kind/{shape_kind}")
async def get_statistics_by_kind(shape_kind: str, dataset: AirspaceDataset = Depends(get_dataset)) -> Dict[str, Any]:
    """Get category counts for one shape kind."""
    try:
        kind = ShapeKind(shape_kind)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Unknown shape kind: {shape_kind}")

    shapes = dataset.shapes.by_shape_kind(kind)
    return {
        "shape_kind": kind.value,
        "total": shapes.count(),
        "by_category": {
            category: len(items)
            for category, items in sorted(shapes.group_by(lambda s: s.category).items())
        },
    }
