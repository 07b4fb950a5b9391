"""
Pytest fixtures for Tweenstag tests
"""

import pytest

from tweenstag.models import (
    Keyframe,
    Layer,
    RectObject,
)


class FakeClock:
    """Manually advanced clock for playback tests."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def square() -> RectObject:
    """Unrotated 100x100 square at the origin."""
    return RectObject(id='square', x=0, y=0, width=100, height=100)


@pytest.fixture
def moving_rect_layer() -> Layer:
    """
    Layer moving a rect from (200, 200) at frame 1 to (800, 400) at frame 15.
    """
    return Layer(
        name='Motion',
        keyframes=[
            Keyframe(
                frame=1,
                tween='linear',
                objects=[RectObject(id='r', x=200, y=200, width=50, height=50, fill='#000000')],
            ),
            Keyframe(
                frame=15,
                objects=[RectObject(id='r', x=800, y=400, width=50, height=50, fill='#ffffff')],
            ),
        ],
    )
