"""Shared fixtures for the algorithm tests."""

from __future__ import annotations

import pytest


@pytest.fixture()
def austin_spots():
    """Three Austin spots plus one in Dallas sharing a name with an Austin spot."""
    return [
        {
            "id": "cf",
            "name": "Capital Factory",
            "coordinates": [-97.7404, 30.2703],
            "city_id": "austin",
        },
        {
            "id": "hound",
            "name": "Houndstooth Coffee",
            "coordinates": [-97.7426, 30.2687],
            "city_id": "austin",
        },
        {
            "id": "epoch",
            "name": "Epoch Coffee",
            "coordinates": [-97.7188, 30.3182],
            "city_id": "austin",
        },
        {
            "id": "cf-dallas",
            "name": "Capital Factory",
            "coordinates": [-96.7970, 32.7767],
            "city_id": "dallas",
        },
    ]
