import math

import numpy as np
import pytest

from sketchauth.core.session import SessionController
from sketchauth.core.template_store import TemplateStore
from sketchauth.utils.blob_store import MemoryBlobStore


def circle_stroke(count=50, radius=80.0, center=(300.0, 200.0), sweep=0.9):
    """An open arc sampled at `count` points, in capture (pixel) coordinates."""
    return [
        (center[0] + radius * math.cos(2 * math.pi * sweep * i / (count - 1)),
         center[1] + radius * math.sin(2 * math.pi * sweep * i / (count - 1)))
        for i in range(count)
    ]


def spiral_stroke(count=37):
    """An irregularly sampled spiral, so no vertex lands on a sample by accident."""
    points = []
    for i in range(count):
        t = (i + 0.37 * (i % 3)) / 6.0
        points.append((120.0 + 8.0 * t * math.cos(t), 90.0 + 8.0 * t * math.sin(t)))
    return points


def scribble_stroke(count=40, seed=7):
    rng = np.random.default_rng(seed)
    walk = np.cumsum(rng.normal(scale=15.0, size=(count, 2)), axis=0) + 250.0
    return [tuple(p) for p in walk]


def draw(controller, stroke):
    """Feeds a stroke through the capture operations like the canvas does."""
    controller.begin_capture(stroke[0])
    for point in stroke[1:]:
        controller.extend_capture(point)
    controller.end_capture()


@pytest.fixture
def blob_store():
    return MemoryBlobStore()


@pytest.fixture
def template_store(blob_store):
    return TemplateStore(blob_store)


@pytest.fixture
def controller(template_store):
    return SessionController(template_store)
