#!/usr/bin/env python3

import asyncio
import random
from typing import Tuple

from fastapi import HTTPException, Request

from airspace_explorer.models.airspace_dataset import AirspaceDataset
from .config import Settings


def get_dataset(request: Request) -> AirspaceDataset:
    """Dataset loaded at startup and attached to the application state."""
    dataset = getattr(request.app.state, "dataset", None)
    if dataset is None:
        raise HTTPException(status_code=503, detail="Dataset not loaded")
    return dataset


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


async def simulate_latency(settings: Settings, latency_range: Tuple[float, float]) -> None:
    """Sleep for a random delay when latency emulation is enabled."""
    if settings.simulate_latency:
        await asyncio.sleep(random.uniform(*latency_range))
