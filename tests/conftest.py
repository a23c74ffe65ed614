import pytest
from gestures.landmarks import Frame


def open_hand_points(wrist_y=0.8):
    """
    Relaxed open hand that matches no gesture.

    Tips above their bases (no fist), index extended but close to the
    middle finger (no pointing), thumb far from index (no pinch).
    """
    points = [(0.5, 0.5, 0.0)] * 21
    points[Frame.WRIST] = (0.5, wrist_y, 0.0)
    for base in (Frame.THUMB_MCP, Frame.INDEX_MCP, Frame.MIDDLE_MCP, Frame.RING_MCP, Frame.PINKY_MCP):
        points[base] = (0.5, 0.6, 0.0)
    points[Frame.THUMB_TIP] = (0.3, 0.5, 0.0)
    points[Frame.INDEX_DIP] = (0.5, 0.35, 0.0)
    points[Frame.INDEX_TIP] = (0.5, 0.3, 0.0)
    points[Frame.MIDDLE_TIP] = (0.55, 0.3, 0.0)
    points[Frame.RING_TIP] = (0.6, 0.3, 0.0)
    points[Frame.PINKY_TIP] = (0.65, 0.3, 0.0)
    return points


@pytest.fixture
def make_frame():
    """Factory: open hand with selected landmarks replaced by (x, y)."""
    def _make(overrides=None, wrist_y=0.8):
        points = open_hand_points(wrist_y)
        for index, (x, y) in (overrides or {}).items():
            points[index] = (x, y, 0.0)
        return Frame.from_points(points)
    return _make


@pytest.fixture
def pointing_overrides():
    return {
        Frame.MIDDLE_TIP: (0.65, 0.3),
        Frame.THUMB_TIP: (0.3, 0.5),
    }


@pytest.fixture
def pinch_overrides():
    return {Frame.THUMB_TIP: (0.53, 0.33)}


@pytest.fixture
def fist_overrides():
    return {
        Frame.THUMB_TIP: (0.3, 0.7),
        Frame.INDEX_TIP: (0.5, 0.7),
        Frame.MIDDLE_TIP: (0.55, 0.7),
        Frame.RING_TIP: (0.6, 0.7),
        Frame.PINKY_TIP: (0.65, 0.7),
    }
