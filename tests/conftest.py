"""Shared test fixtures for floor plan normalization and rendering tests."""
import copy

import pytest

from floorcanvas.io.parser import normalize
from floorcanvas.visualization.generator import ViewParams


OFFICE_PLAN = {
    "floorPlan": {
        "dimensions": {"width": 10, "height": 10},
        "rooms": [
            {
                "id": "r1",
                "name": "Office",
                "bounds": {"x": 1, "y": 1, "width": 4, "height": 3},
                "type": "office",
            }
        ],
        "walls": [],
        "doors": [],
        "windows": [],
    },
    "description": "test",
}

# Every layer overlaps the row y = 5 (100 px)
LAYERED_PLAN = {
    "floorPlan": {
        "dimensions": {"width": 12, "height": 12},
        "hallways": [
            {
                "id": "h1",
                "name": "Hall",
                "bounds": {"x": 0, "y": 0, "width": 10, "height": 10},
                "type": "circulation",
            }
        ],
        "rooms": [
            {
                "id": "r1",
                "name": "Bed",
                "bounds": {"x": 1, "y": 1, "width": 8, "height": 8},
                "type": "bedroom",
            }
        ],
        "walls": [
            {"id": "w1", "start": {"x": 2, "y": 5}, "end": {"x": 8, "y": 5}, "thickness": 0.5}
        ],
        "doors": [
            {
                "id": "d1",
                "position": {"x": 3, "y": 5},
                "wallId": "w1",
                "width": 1,
                "swing": "inward",
            }
        ],
        "windows": [
            {"id": "win1", "position": {"x": 6, "y": 5}, "wallId": "w1", "width": 1}
        ],
    },
    "description": "Layer ordering check",
}

# The layout a generator falls back to when the model output cannot be parsed
FALLBACK_PLAN = {
    "floorPlan": {
        "dimensions": {"width": 20, "height": 15},
        "rooms": [
            {
                "id": "room1",
                "name": "Generated Room",
                "bounds": {"x": 2, "y": 2, "width": 16, "height": 11},
                "type": "living",
            }
        ],
        "walls": [],
        "doors": [],
        "windows": [],
    },
    "description": "Basic floor plan generated (parsing fallback)",
}

EMPTY_PLAN = {
    "floorPlan": {
        "dimensions": {"width": 10, "height": 10},
        "rooms": [],
        "walls": [],
        "doors": [],
        "windows": [],
        "hallways": [],
    },
    "description": "",
}


@pytest.fixture
def office_raw():
    return copy.deepcopy(OFFICE_PLAN)


@pytest.fixture
def layered_raw():
    return copy.deepcopy(LAYERED_PLAN)


@pytest.fixture
def fallback_raw():
    return copy.deepcopy(FALLBACK_PLAN)


@pytest.fixture
def empty_raw():
    return copy.deepcopy(EMPTY_PLAN)


@pytest.fixture
def office_doc(office_raw):
    return normalize(office_raw)


@pytest.fixture
def layered_doc(layered_raw):
    return normalize(layered_raw)


@pytest.fixture
def empty_doc(empty_raw):
    return normalize(empty_raw)


@pytest.fixture
def view():
    """Default 800x600 view with the grid on."""
    return ViewParams()
