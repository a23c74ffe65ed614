"""
Gesture detectors for the virtual mouse.

Each gesture is a predicate over the current frame and, for motion gestures,
the previous one. The tuple returned by build_gestures() is a priority list:
the resolver takes the first gesture that matches.
"""
from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Callable, Optional, Sequence, Tuple
import math

from .config import GestureConfig
from .landmarks import Frame


class Action(Enum):
    """Pointer actions a gesture can produce."""
    MOVE = "MOVE"
    CLICK = "CLICK"
    RIGHT_CLICK = "RIGHT_CLICK"
    SCROLL_UP = "SCROLL_UP"
    SCROLL_DOWN = "SCROLL_DOWN"


DetectFn = Callable[[Frame, Optional[Frame]], bool]


@dataclass(frozen=True)
class GestureDefinition:
    """A named gesture bound to the action it triggers."""
    name: str
    action: Action
    description: str
    detect: DetectFn
    
    def matches(self, current: Frame, previous: Optional[Frame] = None) -> bool:
        return self.detect(current, previous)


# (tip, base) pairs checked by the fist detector
FINGER_TIP_BASE_PAIRS: Tuple[Tuple[int, int], ...] = (
    (Frame.THUMB_TIP, Frame.THUMB_MCP),
    (Frame.INDEX_TIP, Frame.INDEX_MCP),
    (Frame.MIDDLE_TIP, Frame.MIDDLE_MCP),
    (Frame.RING_TIP, Frame.RING_MCP),
    (Frame.PINKY_TIP, Frame.PINKY_MCP),
)


def is_pointing(
    current: Frame,
    previous: Optional[Frame] = None,
    index_middle_gap: float = 0.1,
    thumb_index_gap: float = 0.15,
) -> bool:
    """Index finger extended, spread away from the middle finger and thumb."""
    index_tip = current.index_tip
    return (
        index_tip.y < current.index_dip.y
        and abs(index_tip.x - current.middle_tip.x) > index_middle_gap
        and abs(current.thumb_tip.x - index_tip.x) > thumb_index_gap
    )


def pinch_distance(frame: Frame) -> float:
    """2D distance between thumb tip and index tip."""
    thumb_tip = frame.thumb_tip
    index_tip = frame.index_tip
    return math.hypot(thumb_tip.x - index_tip.x, thumb_tip.y - index_tip.y)


def is_pinching(current: Frame, previous: Optional[Frame] = None, threshold: float = 0.05) -> bool:
    return pinch_distance(current) < threshold


def is_fist(current: Frame, previous: Optional[Frame] = None) -> bool:
    """All five finger tips folded at or below their base joint."""
    return all(current[tip].y >= current[base].y for tip, base in FINGER_TIP_BASE_PAIRS)


def wrist_dy(current: Frame, previous: Optional[Frame]) -> Optional[float]:
    """Vertical wrist displacement since the previous frame, None without one."""
    if previous is None:
        return None
    return current.wrist.y - previous.wrist.y


def is_swipe_up(current: Frame, previous: Optional[Frame] = None, threshold: float = 0.1) -> bool:
    # Image y grows downwards, so up is a negative delta
    dy = wrist_dy(current, previous)
    return dy is not None and dy < -threshold


def is_swipe_down(current: Frame, previous: Optional[Frame] = None, threshold: float = 0.1) -> bool:
    dy = wrist_dy(current, previous)
    return dy is not None and dy > threshold


def build_gestures(config: Optional[GestureConfig] = None) -> Tuple[GestureDefinition, ...]:
    """
    Build the ordered gesture list with thresholds bound from config.
    
    Movement and click gestures come before scroll gestures, so a pinch made
    during a swipe still counts as a click.
    """
    config = config or GestureConfig()
    return (
        GestureDefinition(
            name="POINTING",
            action=Action.MOVE,
            description="Index finger extended for cursor control",
            detect=partial(
                is_pointing,
                index_middle_gap=config.pointing_index_middle_gap,
                thumb_index_gap=config.pointing_thumb_index_gap,
            ),
        ),
        GestureDefinition(
            name="PINCH",
            action=Action.CLICK,
            description="Pinch between thumb and index finger",
            detect=partial(is_pinching, threshold=config.pinch_threshold),
        ),
        GestureDefinition(
            name="FIST",
            action=Action.RIGHT_CLICK,
            description="Closed fist for right click",
            detect=is_fist,
        ),
        GestureDefinition(
            name="SWIPE_UP",
            action=Action.SCROLL_UP,
            description="Upward swipe motion",
            detect=partial(is_swipe_up, threshold=config.swipe_threshold),
        ),
        GestureDefinition(
            name="SWIPE_DOWN",
            action=Action.SCROLL_DOWN,
            description="Downward swipe motion",
            detect=partial(is_swipe_down, threshold=config.swipe_threshold),
        ),
    )


DEFAULT_GESTURES = build_gestures()


def gesture_by_name(name: str, gestures: Sequence[GestureDefinition] = DEFAULT_GESTURES) -> GestureDefinition:
    """Look up a gesture definition by name."""
    for gesture in gestures:
        if gesture.name == name:
            return gesture
    raise KeyError(name)
